"""
Top‑level router for version 1 of the API.

Aggregates the domain routers under their prefixes.  The router itself
is mounted by ``create_app`` under ``settings.api_prefix``.
"""

from fastapi import APIRouter

from .endpoints import catalog, favorites

router = APIRouter()

router.include_router(catalog.router, prefix="/catalog", tags=["catalog"])
router.include_router(favorites.router, prefix="/favorites", tags=["favorites"])
