"""
Pydantic schemas for favorite Pokémon.

A favorite stores a snapshot of the Pokémon's display data taken when
it was added, so listing favorites never touches the upstream service.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class FavoriteCreate(BaseModel):
    """Request body for adding a favorite."""

    model_config = ConfigDict(populate_by_name=True)

    entity_id: int = Field(..., alias="entityId", ge=1, examples=[25], description="Pokémon id")


class FavoriteRead(BaseModel):
    """A stored favorite record."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: int
    entity_id: int = Field(..., alias="entityId", examples=[25])
    name: str = Field(..., examples=["pikachu"])
    image: str = ""
    types: List[str] = Field(default_factory=list)
    abilities: List[str] = Field(default_factory=list)
    created_at: str = Field(..., alias="createdAt", examples=["2025-01-01T00:00:00.000000+00:00"])
    updated_at: str = Field(..., alias="updatedAt", examples=["2025-01-01T00:00:00.000000+00:00"])
