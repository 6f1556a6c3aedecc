"""
Catalog endpoints for API v1.

``GET /catalog`` returns a bounded window of the 150‑entry roster;
``GET /catalog/{id}`` returns a detail record including the resolved
evolution options.  Both are served from the in‑memory cache when
possible.
"""

from typing import List

from fastapi import APIRouter, Depends, Path, Query

from pokedex_api.app.api.deps import get_catalog_service, get_detail_service
from pokedex_api.app.schemas.common import ApiResponse, ok
from pokedex_api.app.schemas.pokemon import CatalogEntry, DetailRecord
from pokedex_api.app.services.catalog_service import DEFAULT_PAGE_SIZE, CatalogService
from pokedex_api.app.services.detail_service import DetailService

router = APIRouter()


@router.get("", response_model=ApiResponse[List[CatalogEntry]])
async def list_catalog(
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1, description="Number of entries to return (capped at 30)"),
    offset: int = Query(0, ge=0, description="Pagination offset"),
    catalog: CatalogService = Depends(get_catalog_service),
) -> ApiResponse[List[CatalogEntry]]:
    """Return a window of the roster.

    ``limit`` is capped at 30 and the window never extends past the
    150th entry; an ``offset`` at or beyond 150 yields an empty list.
    """
    entries = await catalog.get_window(limit=limit, offset=offset)
    return ok(entries)


@router.get("/{pokemon_id}", response_model=ApiResponse[DetailRecord])
async def get_pokemon(
    pokemon_id: int = Path(..., ge=1, description="Pokémon id"),
    evolutions: bool = Query(True, description="Resolve evolution options"),
    details: DetailService = Depends(get_detail_service),
) -> ApiResponse[DetailRecord]:
    """Return the detail record for a single Pokémon."""
    record = await details.get_detail(pokemon_id, include_evolutions=evolutions)
    return ok(record)
