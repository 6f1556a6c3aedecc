"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service runs out of the box against the public PokéAPI.  Tests and
embedding code may construct their own ``Settings`` with explicit
values and pass it to ``create_app``.
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "PokéDex API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Prefix under which the versioned router is mounted.  Empty by
    # default so that the catalog is served at ``/catalog``.  Set to
    # e.g. ``/api/v1`` to namespace the routes.
    api_prefix: str = os.getenv("API_PREFIX", "")

    # Comma‑separated list of allowed CORS origins.
    cors_origins: List[str] = field(
        default_factory=lambda: _split_csv(os.getenv("CORS_ORIGINS", "*"))
    )

    # Path to the SQLite database holding favorites.  Relative paths are
    # resolved against the project root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "pokedex.db")

    # Upstream reference data service.
    pokeapi_base_url: str = os.getenv("POKEAPI_BASE_URL", "https://pokeapi.co/api/v2")
    upstream_timeout: float = float(os.getenv("UPSTREAM_TIMEOUT", "15"))

    # In‑memory cache bounds.  Catalog windows live for a day, detail
    # records for 15 minutes.
    cache_max_entries: int = int(os.getenv("CACHE_MAX_ENTRIES", "50"))
    window_cache_ttl: float = float(os.getenv("WINDOW_CACHE_TTL", str(24 * 60 * 60)))
    detail_cache_ttl: float = float(os.getenv("DETAIL_CACHE_TTL", str(15 * 60)))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before importing this module.
settings = Settings()
