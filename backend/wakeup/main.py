"""wakeup FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from wakeup import __version__
from wakeup.config import settings
from wakeup.logging_config import setup_logging
from wakeup.services import init_services, shutdown_services

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _lifespan(app: FastAPI):
    """Startup / shutdown lifecycle."""
    setup_logging(settings.log_level)
    init_services()
    logger.info("wakeup v%s started, listening on %s:%s", __version__, settings.host, settings.port)
    try:
        yield
    finally:
        shutdown_services()
        logger.info("wakeup shutting down")


def create_app() -> FastAPI:
    from wakeup.api.routes import api_router

    app = FastAPI(
        title=settings.app_name,
        version=__version__,
        debug=settings.debug,
        lifespan=_lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router, prefix=settings.api_prefix)
    return app


app = create_app()


def run(**kwargs: Any) -> None:
    import uvicorn

    # uvicorn ignores workers when reloading
    if not settings.debug:
        kwargs.setdefault("workers", settings.uvicorn_workers)

    uvicorn.run(
        "wakeup.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
        **kwargs,
    )


if __name__ == "__main__":
    run()
