"""
FastAPI application entry point.
Challenge: Mount routes, middleware (Prometheus), logging, shutdown cleanup.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import make_asgi_app

from bloglist.config import get_settings
from bloglist.api.v1.router import api_router
from bloglist.search.elasticsearch_client import close_elasticsearch


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Shutdown: close the shared Elasticsearch client."""
    yield
    await close_elasticsearch()


def create_app() -> FastAPI:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title=settings.app_name,
        description="Paginated blog post listings by search term, tag or category.",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Prometheus metrics at /metrics
    metrics_app = make_asgi_app()
    app.mount("/metrics", metrics_app)

    app.include_router(api_router, prefix="/api")

    return app


app = create_app()
