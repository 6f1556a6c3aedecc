"""
Evolution chain resolution.

PokéAPI describes a species family as a tree: every node names a
species, lists the ways it can be reached from its parent
(``details``) and lists the species it evolves into (``children``).
Given the family tree and a species name, :func:`resolve_evolutions`
returns every species reachable *from* that species as a flat list of
:class:`EvolutionOption`.

A child reached by several methods (e.g. level‑up and trade) produces
one option per method; the list is intentionally not de‑duplicated by
species.  Trees come from JSON and are acyclic, so plain recursion
without a visited set is enough.
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from pokedex_api.app.schemas.pokemon import EvolutionOption


@dataclass(frozen=True)
class EvolutionDetail:
    trigger: Optional[str] = None
    min_level: Optional[int] = None
    item: Optional[str] = None


@dataclass
class EvolutionNode:
    species: str
    details: List[EvolutionDetail] = field(default_factory=list)
    children: List["EvolutionNode"] = field(default_factory=list)


def find_species_node(node: EvolutionNode, species_name: str) -> Optional[EvolutionNode]:
    """Pre‑order search for the node named ``species_name`` (case‑insensitive).

    Parents are visited before their children and siblings left to
    right; the first match wins.
    """
    target = species_name.lower()
    if node.species.lower() == target:
        return node
    for child in node.children:
        found = find_species_node(child, target)
        if found is not None:
            return found
    return None


def collect_evolution_options(nodes: Iterable[EvolutionNode]) -> List[EvolutionOption]:
    """Flatten ``nodes`` and all their descendants into evolution options.

    Each node contributes its own options first, followed by those of
    its subtree, before moving on to the next sibling.
    """
    options: List[EvolutionOption] = []
    for node in nodes:
        if not node.details:
            options.append(EvolutionOption(species=node.species))
        else:
            for detail in node.details:
                options.append(
                    EvolutionOption(
                        species=node.species,
                        trigger=detail.trigger,
                        min_level=detail.min_level,
                        item=detail.item,
                    )
                )
        options.extend(collect_evolution_options(node.children))
    return options


def resolve_evolutions(chain: Optional[EvolutionNode], species_name: str) -> List[EvolutionOption]:
    """Return the evolution options available to ``species_name`` within ``chain``.

    An absent chain or a species that does not appear in it yields an
    empty list.
    """
    if chain is None or not species_name:
        return []
    target = find_species_node(chain, species_name)
    if target is None:
        return []
    return collect_evolution_options(target.children)
