"""
Pydantic models for catalog and detail records.

Field names are snake_case in Python and camelCase on the wire
(``min_level`` is serialised as ``minLevel``).  Both spellings are
accepted when constructing a model.  Records are frozen: once built and
cached they are shared between requests and must not be mutated.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

_RECORD_CONFIG = ConfigDict(populate_by_name=True, frozen=True)


class CatalogEntry(BaseModel):
    """One roster item with its numeric id parsed from the reference URL."""

    model_config = _RECORD_CONFIG

    id: int = Field(..., examples=[25])
    name: str = Field(..., examples=["pikachu"])
    url: str = Field(..., examples=["https://pokeapi.co/api/v2/pokemon/25/"])


class EvolutionOption(BaseModel):
    """A species the Pokémon can evolve into, and how."""

    model_config = _RECORD_CONFIG

    species: str = Field(..., examples=["raichu"])
    trigger: Optional[str] = Field(None, examples=["use-item"])
    min_level: Optional[int] = Field(None, alias="minLevel", examples=[16])
    item: Optional[str] = Field(None, examples=["thunder-stone"])


class DetailRecord(BaseModel):
    """Detail view of a Pokémon combined with its resolved evolutions."""

    model_config = _RECORD_CONFIG

    id: int = Field(..., examples=[25])
    name: str = Field(..., examples=["pikachu"])
    types: List[str] = Field(default_factory=list, examples=[["electric"]])
    abilities: List[str] = Field(default_factory=list, examples=[["static", "lightning-rod"]])
    image: str = Field("", examples=["https://raw.githubusercontent.com/PokeAPI/sprites/master/sprites/pokemon/25.png"])
    evolutions: List[EvolutionOption] = Field(default_factory=list)
