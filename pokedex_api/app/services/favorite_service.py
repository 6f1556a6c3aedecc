"""
Service layer for favorite Pokémon.

Favorites are stored in the ``favorite_pokemon`` table with a unique
``entity_id``.  When a favorite is added, the detail service (without
evolutions) supplies a snapshot of the Pokémon's name, sprite, types
and abilities which is stored alongside it.  Listing is newest first.

All queries use parameterized statements.
"""

from __future__ import annotations

import json
import logging
import sqlite3
from datetime import datetime, timezone
from typing import List

from pokedex_api.app.core.db import get_connection
from pokedex_api.app.core.errors import ConflictError, NotFoundError
from pokedex_api.app.schemas.favorite import FavoriteRead
from pokedex_api.app.services.detail_service import DetailService

logger = logging.getLogger(__name__)


def _utcnow() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="microseconds")


class FavoriteService:
    """CRUD over favorite records."""

    def __init__(self, database_path: str, details: DetailService) -> None:
        self.database_path = database_path
        self.details = details

    async def list_favorites(self) -> List[FavoriteRead]:
        """Return all favorites, most recently added first."""
        conn = get_connection(self.database_path)
        try:
            rows = conn.execute(
                "SELECT * FROM favorite_pokemon ORDER BY created_at DESC, id DESC"
            ).fetchall()
            return [self._row_to_favorite(row) for row in rows]
        finally:
            conn.close()

    async def add_favorite(self, entity_id: int) -> FavoriteRead:
        """Add ``entity_id`` to favorites.

        Raises ``ConflictError`` if it is already a favorite.  Upstream
        errors from the detail lookup propagate unchanged.
        """
        pokemon = await self.details.get_detail(entity_id, include_evolutions=False)
        now = _utcnow()
        conn = get_connection(self.database_path)
        try:
            cursor = conn.cursor()
            try:
                cursor.execute(
                    """
                    INSERT INTO favorite_pokemon (entity_id, name, image, types, abilities, created_at, updated_at)
                    VALUES (?, ?, ?, ?, ?, ?, ?)
                    """,
                    (
                        pokemon.id,
                        pokemon.name,
                        pokemon.image,
                        json.dumps(pokemon.types),
                        json.dumps(pokemon.abilities),
                        now,
                        now,
                    ),
                )
            except sqlite3.IntegrityError as exc:
                raise ConflictError("Pokemon is already in favorites") from exc
            favorite_id = cursor.lastrowid
            conn.commit()
            logger.info("Added Pokemon %s to favorites", pokemon.id)
            row = cursor.execute(
                "SELECT * FROM favorite_pokemon WHERE id = ?", (favorite_id,)
            ).fetchone()
            return self._row_to_favorite(row)
        finally:
            conn.close()

    async def remove_favorite(self, entity_id: int) -> FavoriteRead:
        """Remove ``entity_id`` from favorites and return the deleted record.

        Raises ``NotFoundError`` if it is not a favorite.
        """
        conn = get_connection(self.database_path)
        try:
            cursor = conn.cursor()
            row = cursor.execute(
                "SELECT * FROM favorite_pokemon WHERE entity_id = ?", (entity_id,)
            ).fetchone()
            if not row:
                raise NotFoundError("Pokemon is not in favorites")
            cursor.execute("DELETE FROM favorite_pokemon WHERE id = ?", (row["id"],))
            conn.commit()
            logger.info("Removed Pokemon %s from favorites", entity_id)
            return self._row_to_favorite(row)
        finally:
            conn.close()

    @staticmethod
    def _row_to_favorite(row: sqlite3.Row) -> FavoriteRead:
        """Convert a database row to a FavoriteRead schema instance."""
        return FavoriteRead(
            id=row["id"],
            entity_id=row["entity_id"],
            name=row["name"],
            image=row["image"] or "",
            types=_load_list(row["types"]),
            abilities=_load_list(row["abilities"]),
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )


def _load_list(raw: str | None) -> List[str]:
    if not raw:
        return []
    try:
        value = json.loads(raw)
    except (TypeError, json.JSONDecodeError):
        return []
    return [str(item) for item in value] if isinstance(value, list) else []
