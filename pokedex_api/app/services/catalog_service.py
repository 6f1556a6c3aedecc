"""
Service layer for the catalog roster.

The catalog is a fixed universe of the first ``MAX_TOTAL`` Pokémon.
``CatalogService.get_window`` returns a bounded slice of it, clamping
the requested ``limit``/``offset`` so that no request can page past the
universe bound or ask for more than ``PAGE_CAP`` entries at once.
Windows are cached by their clamped parameters; an upstream failure is
propagated and nothing is cached for it.
"""

import logging
from typing import List

from pokedex_api.app.core.cache import TTLCache, cache_key
from pokedex_api.app.schemas.pokemon import CatalogEntry
from pokedex_api.app.services.source_adapter import PokeAPISource, extract_id

logger = logging.getLogger(__name__)

MAX_TOTAL = 150
PAGE_CAP = 30
DEFAULT_PAGE_SIZE = 30


def clamp(value: int, lower: int, upper: int) -> int:
    return max(lower, min(value, upper))


class CatalogService:
    """Cache‑or‑fetch access to windows of the catalog."""

    def __init__(self, source: PokeAPISource, cache: TTLCache, ttl: float = 24 * 60 * 60) -> None:
        self.source = source
        self.cache = cache
        self.ttl = ttl

    async def get_window(self, limit: int = DEFAULT_PAGE_SIZE, offset: int = 0) -> List[CatalogEntry]:
        """Return at most ``min(limit, PAGE_CAP)`` entries starting at ``offset``.

        Offsets at or beyond ``MAX_TOTAL`` return an empty list without
        contacting the upstream service.
        """
        safe_offset = clamp(offset, 0, MAX_TOTAL)
        remaining = MAX_TOTAL - safe_offset
        if remaining == 0:
            return []
        safe_limit = clamp(limit, 1, min(PAGE_CAP, remaining))

        key = cache_key("window", safe_limit, safe_offset)
        cached = self.cache.get(key)
        if cached is not None:
            logger.debug("Catalog window %s served from cache", key)
            return list(cached)

        page = await self.source.fetch_page(safe_limit, safe_offset)
        entries = [
            CatalogEntry(id=extract_id(result.url or ""), name=result.name, url=result.url or "")
            for result in page.results[:safe_limit]
        ]
        self.cache.set(key, entries, self.ttl)
        logger.info("Fetched catalog window limit=%s offset=%s (%s entries)", safe_limit, safe_offset, len(entries))
        return list(entries)
