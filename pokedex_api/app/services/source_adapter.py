"""
Adapter for the upstream PokéAPI reference service.

``PokeAPISource`` issues HTTP requests and validates the responses into
the explicit shapes from :mod:`pokedex_api.app.schemas.upstream`.  It
performs no caching and holds no business rules; every failure mode
(transport error, non‑2xx status, invalid JSON, unexpected shape) is
reported as :class:`UpstreamFetchError`.

All loosely typed extraction (numeric ids out of reference URLs, the
recursive evolution chain) happens here so the services above only see
typed records.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from pokedex_api.app.core.errors import UpstreamFetchError
from pokedex_api.app.schemas.upstream import (
    ChainLinkPayload,
    EvolutionChainPayload,
    PokemonPayload,
    ResourcePage,
    SpeciesPayload,
)
from pokedex_api.app.services.evolution import EvolutionDetail, EvolutionNode

logger = logging.getLogger(__name__)

PayloadT = TypeVar("PayloadT", bound=BaseModel)

_TRAILING_ID = re.compile(r"/(\d+)/?$")


def extract_id(url: str) -> int:
    """Return the trailing numeric path segment of ``url``, or ``0`` if there is none.

    >>> extract_id("https://pokeapi.co/api/v2/pokemon/25/")
    25
    """
    match = _TRAILING_ID.search(url or "")
    return int(match.group(1)) if match else 0


def to_evolution_node(link: ChainLinkPayload) -> EvolutionNode:
    """Convert a validated chain link (and its subtree) into an :class:`EvolutionNode`."""
    return EvolutionNode(
        species=link.species.name,
        details=[
            EvolutionDetail(
                trigger=detail.trigger.name if detail.trigger else None,
                min_level=detail.min_level,
                item=detail.item.name if detail.item else None,
            )
            for detail in link.evolution_details
        ],
        children=[to_evolution_node(child) for child in link.evolves_to],
    )


class PokeAPISource:
    """Thin async client for the PokéAPI endpoints used by the service."""

    def __init__(
        self,
        base_url: str = "https://pokeapi.co/api/v2",
        *,
        timeout: float = 15.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            headers={"Accept": "application/json"},
            transport=transport,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    # ------------------------------------------------------------------
    # Resources
    # ------------------------------------------------------------------
    async def fetch_page(self, limit: int, offset: int) -> ResourcePage:
        """Fetch one page of the ``/pokemon`` listing."""
        return await self._get(
            "/pokemon/", ResourcePage, params={"limit": limit, "offset": offset}
        )

    async def fetch_pokemon(self, pokemon_id: int) -> PokemonPayload:
        return await self._get(f"/pokemon/{pokemon_id}/", PokemonPayload)

    async def fetch_species(self, url: str) -> SpeciesPayload:
        """Fetch a species document by its absolute URL (as linked from the Pokémon)."""
        return await self._get(url, SpeciesPayload)

    async def fetch_evolution_chain(self, url: str) -> Optional[EvolutionNode]:
        """Fetch an evolution chain and return its root node, or ``None`` if it has no chain."""
        payload = await self._get(url, EvolutionChainPayload)
        if payload.chain is None:
            return None
        return to_evolution_node(payload.chain)

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    async def _get(
        self,
        path: str,
        model: Type[PayloadT],
        *,
        params: Optional[Dict[str, Any]] = None,
    ) -> PayloadT:
        """GET ``path`` and validate the JSON body into ``model``.

        ``path`` may be relative to :attr:`base_url` or an absolute URL.
        """
        logger.debug("Fetching %s params=%s", path, params)
        try:
            response = await self._client.get(path, params=params)
            response.raise_for_status()
            body = response.json()
        except httpx.HTTPStatusError as exc:
            message = self._error_message(exc.response) or str(exc)
            logger.warning("Upstream returned %s for %s: %s", exc.response.status_code, path, message)
            raise UpstreamFetchError(message) from exc
        except httpx.HTTPError as exc:
            logger.warning("Upstream request to %s failed: %s", path, exc)
            raise UpstreamFetchError(str(exc) or "Failed to fetch data") from exc
        except ValueError as exc:
            logger.warning("Upstream returned invalid JSON for %s", path)
            raise UpstreamFetchError("Upstream returned an invalid response") from exc

        try:
            return model.model_validate(body)
        except PydanticValidationError as exc:
            logger.warning("Unexpected upstream payload shape for %s: %s", path, exc)
            raise UpstreamFetchError("Upstream returned an unexpected payload") from exc

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        """Best‑effort extraction of an error message from an upstream error body."""
        try:
            data = response.json()
        except ValueError:
            return response.text.strip()
        if isinstance(data, dict):
            return str(data.get("message") or data.get("detail") or "")
        return ""
