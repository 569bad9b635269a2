from contentql.source.config import ConfigError, ContentfulConfig, load_config
from contentql.source.contentful import ContentfulSource, ContentSourceError, get_client
from contentql.source.memory import InMemoryContentSource

__all__ = [
    "ConfigError",
    "ContentSourceError",
    "ContentfulConfig",
    "ContentfulSource",
    "InMemoryContentSource",
    "get_client",
    "load_config",
]
