"""
Infinite‑scroll roster loading.

:class:`RosterController` pulls the catalog one page at a time and
merges each page into a single ordered list.  Entries already present
(same id) are skipped, so overlapping windows from retries never
produce duplicates.  The cursor only moves forward and never past the
universe bound; a short page marks the end of the data even before the
bound is reached.  At most one page load runs at a time; :meth:`reset`
abandons a running load so its late result cannot be merged.
"""

from __future__ import annotations

import logging
from typing import Callable, Collection, List, Optional

from .api import PokedexAPI
from .cancellation import CancellationToken
from .models import CatalogEntry

logger = logging.getLogger(__name__)

MAX_TOTAL = 150
PAGE_SIZE = 30

LOAD_FAILED_MESSAGE = "Could not load more Pokémon. Please try again."


def log_notification(message: str) -> None:
    logger.warning("%s", message)


class RosterController:
    """State machine over ``offset``, ``has_more`` and ``loading``."""

    def __init__(
        self,
        api: PokedexAPI,
        *,
        page_size: int = PAGE_SIZE,
        max_total: int = MAX_TOTAL,
        notify: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.api = api
        self.page_size = page_size
        self.max_total = max_total
        self.notify = notify or log_notification
        self._entries: List[CatalogEntry] = []
        self.offset = 0
        self.has_more = True
        self.loading = False
        self._token: Optional[CancellationToken] = None

    @property
    def entries(self) -> List[CatalogEntry]:
        return list(self._entries)

    def reset(self) -> None:
        """Drop all entries and start again from the first page.

        A page load that is still running is abandoned; its result is
        discarded when it arrives.
        """
        if self._token is not None:
            self._token.cancel()
            self._token = None
        self._entries = []
        self.offset = 0
        self.has_more = True
        self.loading = False

    async def load_more(self) -> int:
        """Fetch and merge the next page.

        Returns the number of new entries appended; ``0`` when nothing
        was requested (no more data, or a load already running), the
        request failed, or the roster was reset while it ran.
        """
        if not self.has_more or self.loading:
            return 0

        token = CancellationToken()
        self._token = token
        self.loading = True
        offset = self.offset
        try:
            page = await self.api.get_catalog(limit=self.page_size, offset=offset)
        except Exception as exc:
            if token.cancelled:
                logger.debug("Discarding stale roster failure at offset %s: %s", offset, exc)
                return 0
            logger.error("Failed to load roster page at offset %s: %s", offset, exc)
            self.notify(LOAD_FAILED_MESSAGE)
            return 0
        finally:
            # A reset hands ``loading`` over to whichever load starts next.
            if self._token is token:
                self._token = None
                self.loading = False

        if token.cancelled:
            logger.debug("Discarding stale roster page at offset %s", offset)
            return 0

        appended = self._merge(page)
        self.offset = min(self.offset + len(page), self.max_total)
        self.has_more = self.offset < self.max_total and len(page) == self.page_size
        logger.debug(
            "Roster page merged: %s new, offset=%s, has_more=%s", appended, self.offset, self.has_more
        )
        return appended

    def _merge(self, page: List[CatalogEntry]) -> int:
        seen = {entry.id for entry in self._entries}
        appended = 0
        for entry in page:
            if len(self._entries) >= self.max_total:
                break
            if entry.id in seen:
                continue
            seen.add(entry.id)
            self._entries.append(entry)
            appended += 1
        return appended

    def visible(
        self,
        search_term: str = "",
        favorites_only: bool = False,
        favorite_ids: Collection[int] = (),
    ) -> List[CatalogEntry]:
        """Entries matching a case‑insensitive name search and, optionally, the favorites."""
        filtered = self._entries
        if favorites_only:
            wanted = set(favorite_ids)
            filtered = [entry for entry in filtered if entry.id in wanted]
        if search_term:
            term = search_term.lower()
            filtered = [entry for entry in filtered if term in entry.name.lower()]
        return list(filtered)
