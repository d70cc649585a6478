"""Evolution condition formatting.

Turns the requirement records attached to an evolution edge into the single
label shown next to the edge, e.g. ``"Level 20 and With 160+ Happiness"``.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import ValidationError

from evograph.core.constants import (
    CLAUSE_SEPARATOR,
    NO_SPECIAL_CONDITIONS,
    PHYSICAL_STAT_CLAUSES,
    SPECIAL_EVOLUTION_CASES,
    TRIGGER_CLAUSES,
    UNKNOWN_CONDITION,
    UNKNOWN_SPECIES,
)
from evograph.core.models import EvolutionCondition, NamedResource
from evograph.logging import get_logger
from evograph.utils.formatting import capitalize_words, humanize_name

logger = get_logger(__name__)


def _coerce_condition(condition: Any) -> EvolutionCondition | None:
    if condition is None or isinstance(condition, EvolutionCondition):
        return condition
    try:
        return EvolutionCondition.model_validate(condition)
    except ValidationError as e:
        logger.debug("Unparseable evolution condition", error=str(e))
        return None


def _species_clause(species_id: int, species_names: Mapping[int, str]) -> str:
    name = species_names.get(species_id)
    return capitalize_words(name) if name else UNKNOWN_SPECIES


def _trigger_clauses(condition: EvolutionCondition, species_names: Mapping[int, str]) -> list[str]:
    trigger = condition.evolution_trigger.name
    clauses: list[str] = []

    if trigger == "trade":
        clause = "Trade"
        if condition.trade_species_id:
            clause += f" With {_species_clause(condition.trade_species_id, species_names)}"
        clauses.append(clause)
    elif trigger == "use-item" and condition.evolution_item:
        clauses.append(f"Use {humanize_name(condition.evolution_item.name)}")
    elif trigger == "level-up":
        if not condition.min_level:
            clauses.append("Level up")
        # Time of day wins over location
        if condition.time_of_day:
            clauses.append(f"During {condition.time_of_day}")
        elif condition.location:
            clauses.append(f"at {humanize_name(condition.location.name)}")
    elif trigger in TRIGGER_CLAUSES:
        clauses.append(TRIGGER_CLAUSES[trigger])

    return clauses


def format_condition(
    condition: EvolutionCondition | Mapping[str, Any] | None,
    species_names: Mapping[int, str],
    from_name: str,
    to_name: str,
) -> str:
    """Format one evolution requirement record as display text.

    Args:
        condition: Requirement record for the edge, a raw mapping of one,
            or None when nothing is known
        species_names: Species id -> name lookup for trade and party
            partners
        from_name: Name of the evolving species
        to_name: Name of the species it evolves into

    Returns:
        Clauses joined with " and ", a curated override for evolutions the
        generic fields cannot express, or a fixed fallback string
    """
    special = SPECIAL_EVOLUTION_CASES.get(f"{from_name}-{to_name}")
    if special:
        return special

    condition = _coerce_condition(condition)
    if condition is None:
        return UNKNOWN_CONDITION

    clauses: list[str] = []

    if condition.min_level:
        clauses.append(f"Level {condition.min_level}")

    if condition.evolution_trigger:
        clauses.extend(_trigger_clauses(condition, species_names))

    if condition.held_item:
        clauses.append(f"Holding {humanize_name(condition.held_item.name)}")
    if condition.known_move:
        clauses.append(f"Knowing {humanize_name(condition.known_move.name)}")
    if condition.known_move_type:
        clauses.append(f"Knowing a {humanize_name(condition.known_move_type.name)} type move")
    if condition.min_happiness:
        clauses.append(f"With {condition.min_happiness}+ Happiness")
    if condition.min_beauty:
        clauses.append(f"With {condition.min_beauty}+ Beauty")
    if condition.min_affection:
        clauses.append(f"With {condition.min_affection}+ Affection")
    if condition.needs_overworld_rain:
        clauses.append("During Rain")
    if condition.party_species_id:
        clauses.append(f"With {_species_clause(condition.party_species_id, species_names)} in party")
    if condition.party_type_id and condition.party_type:
        clauses.append(f"With {capitalize_words(condition.party_type.display_name)} Type in party")
    if condition.relative_physical_stats in PHYSICAL_STAT_CLAUSES:
        clauses.append(PHYSICAL_STAT_CLAUSES[condition.relative_physical_stats])
    if condition.turn_upside_down:
        clauses.append("While holding console upside down")

    if not clauses:
        return NO_SPECIAL_CONDITIONS
    return CLAUSE_SEPARATOR.join(clauses)


def merge_location_conditions(
    conditions: Sequence[EvolutionCondition],
) -> EvolutionCondition | None:
    """Fold version-specific location records into one condition.

    The first record is kept as the base; its location is replaced by the
    comma-joined display names of every record that has one.
    """
    if not conditions:
        return None
    if len(conditions) == 1:
        return conditions[0]

    base = conditions[0]
    location_names = [
        humanize_name(condition.location.name)
        for condition in conditions
        if condition.location and condition.location.name
    ]
    if not location_names:
        return base

    return base.model_copy(update={"location": NamedResource(name=", ".join(location_names))})


def edge_condition(
    conditions: Sequence[EvolutionCondition],
    merge_locations: bool = False,
) -> EvolutionCondition | None:
    """Pick the record an edge label is built from."""
    if merge_locations:
        return merge_location_conditions(conditions)
    return conditions[0] if conditions else None
