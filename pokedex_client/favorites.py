"""
Optimistic favorite toggling.

:class:`FavoriteSyncController` owns the client's copy of the favorites
list and the set of Pokémon ids with a mutation in flight.  A toggle
updates the local list immediately, then confirms with the server:

* adding inserts a placeholder record which is replaced by the server's
  record on success;
* removing drops the record, keeping a snapshot to restore on failure.

On failure the local list is rolled back and a notification is emitted
instead of raising.  An id stays in the in‑flight set for exactly the
duration of its request, and a toggle for an id that is already in
flight is ignored, so each id has at most one outstanding request.

The check‑and‑mark of the in‑flight set happens before the first
``await``, which makes it atomic on a single event loop.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, FrozenSet, List, Optional, Set

from .api import PokedexAPI
from .models import FavoriteRecord

logger = logging.getLogger(__name__)

Notifier = Callable[[str], None]

TOGGLE_FAILED_MESSAGE = "Failed to update favorites. Please try again."
LOAD_FAILED_MESSAGE = "Could not load favorites. Please try refreshing."


def log_notification(message: str) -> None:
    logger.warning("%s", message)


class FavoriteSyncController:
    """Keeps the displayed favorites consistent with the server."""

    def __init__(self, api: PokedexAPI, notify: Optional[Notifier] = None) -> None:
        self.api = api
        self.notify = notify or log_notification
        self._favorites: List[FavoriteRecord] = []
        self._in_flight: Set[int] = set()

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------
    @property
    def favorites(self) -> List[FavoriteRecord]:
        """Current favorites, newest first (a copy)."""
        return list(self._favorites)

    @property
    def favorite_ids(self) -> FrozenSet[int]:
        return frozenset(record.entity_id for record in self._favorites)

    @property
    def in_flight(self) -> FrozenSet[int]:
        return frozenset(self._in_flight)

    def is_favorite(self, entity_id: int) -> bool:
        return self._index_of(entity_id) is not None

    def is_pending(self, entity_id: int) -> bool:
        return entity_id in self._in_flight

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    async def load(self) -> bool:
        """Replace the local list with the server's.  Returns ``False`` on failure.

        Toggles still in flight are re-applied on top of the fetched
        list: a pending add keeps its placeholder and a pending remove
        stays removed, whichever side of the request the server was on.
        """
        try:
            fetched = await self.api.get_favorites()
        except Exception as exc:
            logger.error("Failed to load favorites: %s", exc)
            self.notify(LOAD_FAILED_MESSAGE)
            return False
        pending_adds = [
            record
            for record in self._favorites
            if record.is_placeholder and record.entity_id in self._in_flight
        ]
        settled = [record for record in fetched if record.entity_id not in self._in_flight]
        self._favorites = pending_adds + settled
        return True

    async def toggle(self, entity_id: int, name: str = "") -> bool:
        """Add or remove ``entity_id`` depending on its current membership.

        ``name`` is shown on the optimistic placeholder until the server
        answers.  Returns ``True`` when the change was confirmed,
        ``False`` when it was skipped (already in flight) or rolled back.
        """
        if entity_id in self._in_flight:
            logger.debug("Toggle for %s ignored; request already in flight", entity_id)
            return False

        self._in_flight.add(entity_id)
        try:
            index = self._index_of(entity_id)
            if index is not None:
                return await self._remove(entity_id, index)
            return await self._add(entity_id, name)
        finally:
            self._in_flight.discard(entity_id)

    async def _add(self, entity_id: int, name: str) -> bool:
        placeholder = FavoriteRecord.placeholder(entity_id, name)
        self._favorites.insert(0, placeholder)
        try:
            record = await self.api.add_favorite(entity_id)
        except asyncio.CancelledError:
            self._discard(placeholder)
            raise
        except Exception as exc:
            logger.error("Failed to add favorite %s: %s", entity_id, exc)
            self._discard(placeholder)
            self.notify(TOGGLE_FAILED_MESSAGE)
            return False

        for position, current in enumerate(self._favorites):
            if current.entity_id == entity_id and current.is_placeholder:
                self._favorites[position] = record
                break
        else:
            # The placeholder was dropped while the request was in flight.
            if self._index_of(entity_id) is None:
                self._favorites.insert(0, record)
        return True

    async def _remove(self, entity_id: int, index: int) -> bool:
        snapshot = self._favorites.pop(index)
        try:
            await self.api.remove_favorite(entity_id)
        except asyncio.CancelledError:
            self._restore(snapshot, index)
            raise
        except Exception as exc:
            logger.error("Failed to remove favorite %s: %s", entity_id, exc)
            self._restore(snapshot, index)
            self.notify(TOGGLE_FAILED_MESSAGE)
            return False
        return True

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _index_of(self, entity_id: int) -> Optional[int]:
        for position, record in enumerate(self._favorites):
            if record.entity_id == entity_id:
                return position
        return None

    def _discard(self, placeholder: FavoriteRecord) -> None:
        self._favorites = [record for record in self._favorites if record is not placeholder]

    def _restore(self, snapshot: FavoriteRecord, index: int) -> None:
        if self._index_of(snapshot.entity_id) is None:
            self._favorites.insert(min(index, len(self._favorites)), snapshot)
