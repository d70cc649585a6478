"""Stage grouping for narrow viewports.

Phones get a simple card list instead of a laid-out graph: one row for a
linear chain, or one row per evolution stage with an arrow in between when
the chain branches.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Literal

from pydantic import ValidationError

from evograph.core.models import EvolutionChain, Species
from evograph.logging import get_logger

logger = get_logger(__name__)


@dataclass
class MobileLayout:
    """Rows of species cards, rendered top to bottom."""

    type: Literal["linear", "branching"]
    groups: list[list[Species]]


def organize(chain: EvolutionChain | Mapping[str, Any] | None) -> MobileLayout | None:
    """Group a chain's species into display rows.

    Species are grouped by the species they evolve from. If no parent has
    more than one child the chain is linear and all species share one row
    in their original order. Otherwise the roots come first, followed by
    one row per parent in the order that parent's first child appears.

    Returns:
        The grouping, or None when there is nothing to render
    """
    if chain is not None and not isinstance(chain, EvolutionChain):
        try:
            chain = EvolutionChain.model_validate(chain)
        except ValidationError as e:
            logger.warning("Invalid evolution chain data", error=str(e))
            return None

    if chain is None or not chain.pokemon_species:
        return None

    groups: dict[int | None, list[Species]] = {}
    for species in chain.pokemon_species:
        groups.setdefault(species.evolves_from_species_id, []).append(species)

    if all(len(group) <= 1 for group in groups.values()):
        return MobileLayout(type="linear", groups=[list(chain.pokemon_species)])

    stages: list[list[Species]] = []
    if groups.get(None):
        stages.append(groups[None])
    stages.extend(group for parent_id, group in groups.items() if parent_id is not None)

    return MobileLayout(type="branching", groups=stages)
