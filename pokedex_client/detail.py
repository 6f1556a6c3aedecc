"""
Detail panel loading with stale‑result suppression.

Selecting a Pokémon starts a detail fetch tagged with a fresh
:class:`CancellationToken`; selecting another one (or closing the
panel) cancels the previous token.  When a fetch completes, its result
or error is applied only if its token is still live, so a slow response
for an old selection can never overwrite the current one.
"""

from __future__ import annotations

import logging
from typing import Optional

from .api import PokedexAPI
from .cancellation import CancellationToken
from .models import DetailRecord

logger = logging.getLogger(__name__)

LOAD_FAILED_MESSAGE = "Failed to load Pokémon details. Please try again."


class DetailPanel:
    def __init__(self, api: PokedexAPI) -> None:
        self.api = api
        self.selected_id: Optional[int] = None
        self.detail: Optional[DetailRecord] = None
        self.loading = False
        self.error: Optional[str] = None
        self._token: Optional[CancellationToken] = None

    async def select(self, entity_id: Optional[int]) -> Optional[DetailRecord]:
        """Show ``entity_id`` (or clear the panel for ``None``).

        Returns the loaded record, or ``None`` if the panel was cleared,
        the load failed, or the selection changed while loading.
        """
        self._cancel_pending()
        self.selected_id = entity_id
        self.error = None
        if entity_id is None:
            self.detail = None
            self.loading = False
            return None

        token = CancellationToken()
        self._token = token
        self.loading = True
        try:
            detail = await self.api.get_detail(entity_id)
        except Exception as exc:
            if token.cancelled:
                logger.debug("Discarding stale error for %s: %s", entity_id, exc)
                return None
            logger.error("Failed to load details for %s: %s", entity_id, exc)
            self.error = LOAD_FAILED_MESSAGE
            self.loading = False
            return None

        if token.cancelled:
            logger.debug("Discarding stale detail for %s", entity_id)
            return None
        self.detail = detail
        self.loading = False
        return detail

    def close(self) -> None:
        """Tear the panel down; any in‑flight result will be ignored."""
        self._cancel_pending()
        self.selected_id = None
        self.detail = None
        self.loading = False
        self.error = None

    def _cancel_pending(self) -> None:
        if self._token is not None:
            self._token.cancel()
            self._token = None
