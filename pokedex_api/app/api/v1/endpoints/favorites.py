"""
Favorites endpoints for API v1.

Favorites are unique per Pokémon id.  Adding an existing favorite
answers 409, removing an absent one answers 404; both through the
standard error envelope.
"""

from typing import List

from fastapi import APIRouter, Depends, Path, status

from pokedex_api.app.api.deps import get_favorite_service
from pokedex_api.app.schemas.common import ApiResponse, ok
from pokedex_api.app.schemas.favorite import FavoriteCreate, FavoriteRead
from pokedex_api.app.services.favorite_service import FavoriteService

router = APIRouter()


@router.get("", response_model=ApiResponse[List[FavoriteRead]])
async def list_favorites(
    favorites: FavoriteService = Depends(get_favorite_service),
) -> ApiResponse[List[FavoriteRead]]:
    """Return all favorites, newest first."""
    return ok(await favorites.list_favorites())


@router.post("", response_model=ApiResponse[FavoriteRead], status_code=status.HTTP_201_CREATED)
async def add_favorite(
    payload: FavoriteCreate,
    favorites: FavoriteService = Depends(get_favorite_service),
) -> ApiResponse[FavoriteRead]:
    favorite = await favorites.add_favorite(payload.entity_id)
    return ok(favorite, message="Pokemon added to favorites")


@router.delete("/{pokemon_id}", response_model=ApiResponse[FavoriteRead])
async def remove_favorite(
    pokemon_id: int = Path(..., ge=1, description="Pokémon id"),
    favorites: FavoriteService = Depends(get_favorite_service),
) -> ApiResponse[FavoriteRead]:
    favorite = await favorites.remove_favorite(pokemon_id)
    return ok(favorite, message="Pokemon removed from favorites")
