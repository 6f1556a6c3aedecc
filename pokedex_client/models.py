"""
Client‑side records.

These mirror the JSON returned by the API (camelCase keys) as plain
dataclasses.  ``from_dict`` tolerates missing optional keys so that a
slightly older or newer server does not break the client.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

PLACEHOLDER_PREFIX = "optimistic-"


@dataclass(frozen=True)
class CatalogEntry:
    id: int
    name: str
    url: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CatalogEntry":
        return cls(id=int(data["id"]), name=data["name"], url=data.get("url") or "")


@dataclass(frozen=True)
class EvolutionOption:
    species: str
    trigger: Optional[str] = None
    min_level: Optional[int] = None
    item: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EvolutionOption":
        return cls(
            species=data["species"],
            trigger=data.get("trigger"),
            min_level=data.get("minLevel"),
            item=data.get("item"),
        )


@dataclass(frozen=True)
class DetailRecord:
    id: int
    name: str
    types: List[str] = field(default_factory=list)
    abilities: List[str] = field(default_factory=list)
    image: str = ""
    evolutions: List[EvolutionOption] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DetailRecord":
        return cls(
            id=int(data["id"]),
            name=data["name"],
            types=list(data.get("types") or []),
            abilities=list(data.get("abilities") or []),
            image=data.get("image") or "",
            evolutions=[EvolutionOption.from_dict(item) for item in data.get("evolutions") or []],
        )


@dataclass
class FavoriteRecord:
    """A favorite as known to the client.

    Optimistic placeholders carry a string id (``optimistic-<entityId>``)
    until the server's record replaces them.
    """

    id: Union[int, str]
    entity_id: int
    name: str
    image: str = ""
    types: List[str] = field(default_factory=list)
    abilities: List[str] = field(default_factory=list)
    created_at: str = ""
    updated_at: str = ""

    @property
    def is_placeholder(self) -> bool:
        return isinstance(self.id, str) and self.id.startswith(PLACEHOLDER_PREFIX)

    @classmethod
    def placeholder(cls, entity_id: int, name: str = "") -> "FavoriteRecord":
        return cls(id=f"{PLACEHOLDER_PREFIX}{entity_id}", entity_id=entity_id, name=name)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FavoriteRecord":
        return cls(
            id=data["id"],
            entity_id=int(data["entityId"]),
            name=data.get("name") or "",
            image=data.get("image") or "",
            types=list(data.get("types") or []),
            abilities=list(data.get("abilities") or []),
            created_at=data.get("createdAt") or "",
            updated_at=data.get("updatedAt") or "",
        )

