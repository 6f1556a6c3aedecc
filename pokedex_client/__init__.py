"""
Async client for the PokéDex API.

:class:`~pokedex_client.api.PokedexAPI` talks to the HTTP service; the
controllers keep client‑side state consistent with it:

* :class:`~pokedex_client.favorites.FavoriteSyncController` – optimistic
  favorite toggling with rollback.
* :class:`~pokedex_client.roster.RosterController` – infinite‑scroll
  loading of the roster.
* :class:`~pokedex_client.detail.DetailPanel` – detail loading that
  discards stale results.

All controllers run on a single asyncio event loop and are not thread
safe.
"""

from .api import PokedexAPI
from .cancellation import CancellationToken
from .detail import DetailPanel
from .errors import ClientNetworkError
from .favorites import FavoriteSyncController
from .roster import RosterController

__all__ = [
    "CancellationToken",
    "ClientNetworkError",
    "DetailPanel",
    "FavoriteSyncController",
    "PokedexAPI",
    "RosterController",
]
