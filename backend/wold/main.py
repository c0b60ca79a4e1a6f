"""wold FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI

from wold import __version__
from wold.config import Settings, get_settings
from wold.services.relay import WakeRelay

logger = logging.getLogger(__name__)


def _setup_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("asyncio").setLevel(logging.WARNING)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Application factory. ``settings`` is fixed for the app's lifetime."""
    from wold.api.routes import api_router
    from wold.api.routes import wake

    settings = settings or get_settings()

    @asynccontextmanager
    async def _lifespan(app: FastAPI):
        _setup_logging(settings)
        logger.debug("listening on %s", settings.listen)
        logger.debug("wol dst addr: %s", settings.destination)
        logger.info("wold v%s started", __version__)
        try:
            yield
        finally:
            logger.info("wold shutting down")

    app = FastAPI(
        title=settings.app_name,
        version=__version__,
        debug=settings.debug,
        lifespan=_lifespan,
    )
    app.state.settings = settings
    app.state.relay = WakeRelay(settings.destination)

    app.include_router(wake.router, tags=["wake"])
    app.include_router(api_router, prefix=settings.api_prefix)

    return app


def run(settings: Settings | None = None, **kwargs: Any) -> None:
    import uvicorn

    settings = settings or get_settings()
    listen = settings.listen
    uvicorn.run(
        create_app(settings),
        host=listen.host,
        port=listen.port,
        log_level=settings.log_level.lower(),
        **kwargs,
    )


if __name__ == "__main__":
    run()
