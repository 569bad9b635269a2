from __future__ import annotations

from fastapi import FastAPI

from contentql.api.lifespan import lifespan
from contentql.api.routes.health import router as health_router
from contentql.api.routes.query import router as query_router


def create_app() -> FastAPI:
    app = FastAPI(
        title="contentql API",
        description="Resolve nested, paginated queries against Contentful.",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.include_router(health_router, include_in_schema=False)
    app.include_router(query_router)
    return app
