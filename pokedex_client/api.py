"""
PokéDex API client.

This module wraps the HTTP API in a small async client built on
``httpx``.  Every response uses the envelope
``{success, message, data, error?}``; the client unwraps ``data`` on
success and raises :class:`ClientNetworkError` otherwise, so callers
deal with a single exception type whether the failure was a refused
connection, an HTTP error status or a ``success: false`` body.

The client exposes one method per endpoint:

* :meth:`PokedexAPI.get_catalog` – a window of the roster.
* :meth:`PokedexAPI.get_detail` – a Pokémon with its evolutions.
* :meth:`PokedexAPI.get_favorites` – the favorites list, newest first.
* :meth:`PokedexAPI.add_favorite` / :meth:`PokedexAPI.remove_favorite`.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, List, Optional

import httpx

from .errors import ClientNetworkError
from .models import CatalogEntry, DetailRecord, FavoriteRecord

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = os.getenv("POKEDEX_API_BASE_URL", "http://localhost:8000")


class PokedexAPI:
    """Async client for the PokéDex API."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        timeout: float = 15.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8000``
                (include any ``API_PREFIX`` the server is mounted under).
            timeout: Per‑request timeout in seconds.
            transport: Optional ``httpx`` transport, mainly for tests.
        """
        self.base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            headers={"Content-Type": "application/json"},
            transport=transport,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "PokedexAPI":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    # ------------------------------------------------------------------
    # Catalog
    # ------------------------------------------------------------------
    async def get_catalog(self, limit: int = 30, offset: int = 0) -> List[CatalogEntry]:
        data = await self._request("GET", "/catalog", params={"limit": limit, "offset": offset})
        return [CatalogEntry.from_dict(item) for item in data or []]

    async def get_detail(self, pokemon_id: int) -> DetailRecord:
        data = await self._request("GET", f"/catalog/{pokemon_id}")
        return DetailRecord.from_dict(data)

    # ------------------------------------------------------------------
    # Favorites
    # ------------------------------------------------------------------
    async def get_favorites(self) -> List[FavoriteRecord]:
        data = await self._request("GET", "/favorites")
        return [FavoriteRecord.from_dict(item) for item in data or []]

    async def add_favorite(self, pokemon_id: int) -> FavoriteRecord:
        data = await self._request("POST", "/favorites", json_body={"entityId": pokemon_id})
        return FavoriteRecord.from_dict(data)

    async def remove_favorite(self, pokemon_id: int) -> FavoriteRecord:
        data = await self._request("DELETE", f"/favorites/{pokemon_id}")
        return FavoriteRecord.from_dict(data)

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json_body: Any | None = None,
    ) -> Any:
        """Perform a request and return the envelope's ``data``.

        Raises:
            ClientNetworkError: on transport failure, invalid JSON, an
                error status or ``success: false``.
        """
        logger.debug("Sending %s request to %s", method, path)
        try:
            response = await self._client.request(method, path, params=params, json=json_body)
        except httpx.HTTPError as exc:
            logger.error("API request %s %s failed: %s", method, path, exc)
            raise ClientNetworkError(str(exc) or "Network error") from exc

        try:
            result = response.json()
        except ValueError as exc:
            logger.error("API returned invalid JSON for %s %s (%s)", method, path, response.status_code)
            raise ClientNetworkError(
                "Network error or invalid JSON response", status_code=response.status_code
            ) from exc

        if not isinstance(result, dict):
            raise ClientNetworkError("Unexpected response shape", status_code=response.status_code)

        if response.is_error or not result.get("success"):
            message = result.get("message") or "An unknown error occurred"
            if isinstance(message, list):
                message = ", ".join(str(item) for item in message)
            logger.error("API request %s %s failed (%s): %s", method, path, response.status_code, message)
            raise ClientNetworkError(
                str(message),
                error_type=result.get("error"),
                status_code=response.status_code,
            )
        return result.get("data")
