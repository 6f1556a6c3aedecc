"""
Pydantic models for the PokéAPI payloads consumed by the source adapter.

Only the fields this service reads are declared; everything else in
the upstream documents is ignored.  Fields the upstream may omit or
send as ``null`` are explicitly optional so that a missing sprite or
species link does not fail validation.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class NamedResource(BaseModel):
    """A ``{name, url}`` reference, the building block of most PokéAPI documents."""

    name: str
    url: Optional[str] = None


class ResourcePage(BaseModel):
    """Paged list returned by ``GET /pokemon?limit&offset``."""

    count: Optional[int] = None
    next: Optional[str] = None
    previous: Optional[str] = None
    results: List[NamedResource] = Field(default_factory=list)


class TypeSlot(BaseModel):
    slot: Optional[int] = None
    type: NamedResource


class AbilitySlot(BaseModel):
    slot: Optional[int] = None
    is_hidden: bool = False
    ability: NamedResource


class Sprites(BaseModel):
    front_default: Optional[str] = None


class PokemonPayload(BaseModel):
    """Detail document returned by ``GET /pokemon/{id}``."""

    id: int
    name: str
    types: List[TypeSlot] = Field(default_factory=list)
    abilities: List[AbilitySlot] = Field(default_factory=list)
    sprites: Sprites = Field(default_factory=Sprites)
    species: Optional[NamedResource] = None


class ChainReference(BaseModel):
    url: str


class SpeciesPayload(BaseModel):
    """Species document; only the evolution chain link is needed."""

    name: Optional[str] = None
    evolution_chain: Optional[ChainReference] = None


class EvolutionDetailPayload(BaseModel):
    trigger: Optional[NamedResource] = None
    min_level: Optional[int] = None
    item: Optional[NamedResource] = None


class ChainLinkPayload(BaseModel):
    """One node of the recursive ``chain`` tree."""

    species: NamedResource
    evolution_details: List[EvolutionDetailPayload] = Field(default_factory=list)
    evolves_to: List["ChainLinkPayload"] = Field(default_factory=list)


class EvolutionChainPayload(BaseModel):
    id: Optional[int] = None
    chain: Optional[ChainLinkPayload] = None


ChainLinkPayload.model_rebuild()
