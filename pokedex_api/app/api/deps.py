"""
FastAPI dependencies that hand out the services built by ``create_app``.

Services live on ``app.state`` so that each application instance (and
each test) owns its own cache, upstream client and database path.
"""

from fastapi import Request

from pokedex_api.app.services.catalog_service import CatalogService
from pokedex_api.app.services.detail_service import DetailService
from pokedex_api.app.services.favorite_service import FavoriteService


def get_catalog_service(request: Request) -> CatalogService:
    return request.app.state.catalog_service


def get_detail_service(request: Request) -> DetailService:
    return request.app.state.detail_service


def get_favorite_service(request: Request) -> FavoriteService:
    return request.app.state.favorite_service
