"""
Service layer for Pokémon detail records.

``DetailService.get_detail`` combines the upstream Pokémon document
with its resolved evolution options into a single cached
:class:`DetailRecord`.  The species and evolution chain lookups run
sequentially because the chain URL is only known once the species has
been fetched.  Evolution resolution is best effort: any upstream
failure there degrades to an empty ``evolutions`` list, while a failure
to fetch the Pokémon itself propagates.
"""

import logging
from typing import List

from pokedex_api.app.core.cache import TTLCache, cache_key
from pokedex_api.app.core.errors import UpstreamFetchError
from pokedex_api.app.schemas.pokemon import DetailRecord, EvolutionOption
from pokedex_api.app.services.evolution import resolve_evolutions
from pokedex_api.app.services.source_adapter import PokeAPISource

logger = logging.getLogger(__name__)

DETAIL_CACHE_TTL = 15 * 60


class DetailService:
    """Cache‑or‑fetch access to detail records."""

    def __init__(self, source: PokeAPISource, cache: TTLCache, ttl: float = DETAIL_CACHE_TTL) -> None:
        self.source = source
        self.cache = cache
        self.ttl = ttl

    async def get_detail(self, pokemon_id: int, include_evolutions: bool = True) -> DetailRecord:
        key = cache_key("detail", pokemon_id, variant=include_evolutions)
        cached = self.cache.get(key)
        if cached is not None:
            logger.debug("Detail %s served from cache", key)
            return cached

        payload = await self.source.fetch_pokemon(pokemon_id)
        evolutions: List[EvolutionOption] = []
        if include_evolutions and payload.species and payload.species.url:
            evolutions = await self._fetch_evolutions(payload.species.url, payload.name)

        record = DetailRecord(
            id=payload.id,
            name=payload.name,
            types=[slot.type.name for slot in payload.types],
            abilities=[slot.ability.name for slot in payload.abilities],
            image=payload.sprites.front_default or "",
            evolutions=evolutions,
        )
        self.cache.set(key, record, self.ttl)
        return record

    async def _fetch_evolutions(self, species_url: str, pokemon_name: str) -> List[EvolutionOption]:
        try:
            species = await self.source.fetch_species(species_url)
            if species.evolution_chain is None:
                return []
            chain = await self.source.fetch_evolution_chain(species.evolution_chain.url)
        except UpstreamFetchError as exc:
            logger.warning("Could not resolve evolutions for %s: %s", pokemon_name, exc.message)
            return []
        return resolve_evolutions(chain, pokemon_name)
