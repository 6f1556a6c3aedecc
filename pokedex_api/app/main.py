"""
Main entrypoint for the PokéDex API.

This module assembles the FastAPI application: logging, CORS, request
logging, the error envelope handlers, the shared services and the
versioned router.  ``create_app`` builds and configures the app, which
is then instantiated at module import time as ``app`` so it can be run
with uvicorn::

    uvicorn pokedex_api.app.main:app --reload

``create_app`` accepts explicit settings and an ``httpx`` transport so
that tests can point the upstream client at a fake PokéAPI and the
favorites store at a temporary database.
"""

import logging
import time
from typing import Optional

import httpx
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from .api.v1.router import router as v1_router
from .core.cache import TTLCache
from .core.config import Settings, settings
from .core.db import get_database_path, init_db
from .core.errors import register_exception_handlers
from .core.logging_config import REQUEST_LOGGER, setup_logging
from .services.catalog_service import CatalogService
from .services.detail_service import DetailService
from .services.favorite_service import FavoriteService
from .services.source_adapter import PokeAPISource

request_logger = logging.getLogger(REQUEST_LOGGER)


def create_app(
    app_settings: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use; defaults to the module‑level ``settings``.
    transport : Optional[httpx.AsyncBaseTransport]
        Transport for the upstream PokéAPI client.  ``None`` uses the
        network.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    cfg = app_settings or settings
    # Initialise logging before anything else so that the setup below
    # can log.
    setup_logging(cfg.log_level, cfg.log_file)

    app = FastAPI(title=cfg.project_name, version=cfg.api_version)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        request_logger.info(
            "%s %s %s %.1fms", request.method, request.url.path, response.status_code, elapsed_ms
        )
        return response

    register_exception_handlers(app)

    # One cache, one upstream client and one database path per app.
    database_path = get_database_path(cfg.database_url)
    source = PokeAPISource(cfg.pokeapi_base_url, timeout=cfg.upstream_timeout, transport=transport)
    cache = TTLCache(max_entries=cfg.cache_max_entries, default_ttl=cfg.window_cache_ttl)
    detail_service = DetailService(source, cache, ttl=cfg.detail_cache_ttl)
    app.state.settings = cfg
    app.state.source = source
    app.state.cache = cache
    app.state.catalog_service = CatalogService(source, cache, ttl=cfg.window_cache_ttl)
    app.state.detail_service = detail_service
    app.state.favorite_service = FavoriteService(database_path, detail_service)

    app.include_router(v1_router, prefix=cfg.api_prefix)

    @app.on_event("startup")
    async def startup_event() -> None:
        # Creates the database file if it does not exist and applies
        # pending migrations.
        init_db(database_path)

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        await source.aclose()

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
