import os
from dataclasses import dataclass

_HOSTS = {
    "live": "cdn.contentful.com",
    "preview": "preview.contentful.com",
}


class ConfigError(ValueError):
    """Raised when the Contentful connection settings are missing or invalid."""


@dataclass(frozen=True)
class ContentfulConfig:
    space_id: str
    access_token: str
    mode: str = "live"
    environment: str = "master"
    timeout: float = 30.0

    def __post_init__(self) -> None:
        if self.mode not in _HOSTS:
            raise ConfigError(f"Unknown mode {self.mode!r}; expected one of {', '.join(sorted(_HOSTS))}")

    @property
    def base_url(self) -> str:
        return f"https://{_HOSTS[self.mode]}"

    @property
    def entries_url(self) -> str:
        return f"{self.base_url}/spaces/{self.space_id}/environments/{self.environment}/entries"


def load_config() -> ContentfulConfig:
    """Build a ``ContentfulConfig`` from ``CONTENTFUL_*`` environment variables."""
    space_id = os.getenv("CONTENTFUL_SPACE_ID")
    access_token = os.getenv("CONTENTFUL_ACCESS_TOKEN")
    if not space_id or not access_token:
        raise ConfigError("CONTENTFUL_SPACE_ID and CONTENTFUL_ACCESS_TOKEN must be set")
    timeout_raw = os.getenv("CONTENTFUL_TIMEOUT", "30")
    try:
        timeout = float(timeout_raw)
    except ValueError as exc:
        raise ConfigError(f"CONTENTFUL_TIMEOUT must be a number, got {timeout_raw!r}") from exc
    return ContentfulConfig(
        space_id=space_id,
        access_token=access_token,
        mode=os.getenv("CONTENTFUL_MODE", "live"),
        environment=os.getenv("CONTENTFUL_ENVIRONMENT", "master"),
        timeout=timeout,
    )
