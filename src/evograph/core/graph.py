"""Evolution chain graph building.

Selects the species reachable from the chain's root, turns them into sized
nodes and labelled edges, and hands them to a layout collaborator for
positioning. Malformed chains degrade to partial or empty graphs; nothing
here raises on bad data.
"""

from collections import deque
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError

from evograph.config import Settings, settings as default_settings
from evograph.core.conditions import edge_condition, format_condition
from evograph.core.constants import MANY_DIRECT_EVOLUTIONS, MIN_FILL_RANK_SPACING
from evograph.core.layout import GraphLayout, LayeredLayout, LayoutOptions
from evograph.core.models import EvolutionChain, Pokemon, Species
from evograph.core.spacing import (
    RankDirection,
    node_size_from_breakpoint,
    rank_spacing,
    sibling_spacing,
)
from evograph.logging import get_logger

logger = get_logger(__name__)


# ──────────────────────────────────────────────
# Output types
# ──────────────────────────────────────────────

@dataclass
class Position:
    x: float = 0
    y: float = 0


@dataclass
class NodeData:
    """What the renderer needs to draw one species card."""
    label: str
    species_id: int
    sprite: str | None
    types: list[str]
    pokemon: Pokemon
    is_start_node: bool = False
    is_end_node: bool = False
    is_variant: bool = False


@dataclass
class LayoutNode:
    id: str
    width: float
    height: float
    data: NodeData
    position: Position = field(default_factory=Position)


@dataclass
class LayoutEdge:
    id: str
    source: str
    target: str
    label: str
    animated: bool = True


@dataclass
class EvolutionGraph:
    """Positioned nodes and edges plus the graph's bounding box."""
    nodes: list[LayoutNode] = field(default_factory=list)
    edges: list[LayoutEdge] = field(default_factory=list)
    graph_width: float = 0
    graph_height: float = 0

    @classmethod
    def empty(cls) -> "EvolutionGraph":
        return cls()


# ──────────────────────────────────────────────
# Chain inspection helpers
# ──────────────────────────────────────────────

def _coerce_chain(chain: EvolutionChain | Mapping[str, Any] | None) -> EvolutionChain | None:
    if chain is None or isinstance(chain, EvolutionChain):
        return chain
    try:
        return EvolutionChain.model_validate(chain)
    except ValidationError as e:
        logger.warning("Invalid evolution chain data", error=str(e))
        return None


def traverse_chain(chain: EvolutionChain, root: Species) -> dict[int, int]:
    """Breadth-first walk from the root.

    Returns:
        Depth of every reachable species keyed by species id, in discovery
        order. Targets missing from the chain are not followed and each
        species is visited once, so cyclic data terminates.
    """
    species_map = chain.species_by_id()
    depths: dict[int, int] = {}
    queue: deque[tuple[int, int]] = deque([(root.id, 0)])

    while queue:
        species_id, depth = queue.popleft()
        if species_id in depths:
            continue
        depths[species_id] = depth

        for target in species_map[species_id].evolves_to_species:
            if target.id in species_map:
                queue.append((target.id, depth + 1))
            else:
                logger.debug("Skipping unknown evolution target", species_id=species_id, target_id=target.id)

    return depths


def is_variant_evolution(species: Species, species_map: Mapping[int, Species]) -> bool:
    """Whether a species' single evolution branches into regional forms.

    True when the species has exactly one target, that edge carries more
    than one condition record and the target species has several varieties
    (e.g. one record per form).
    """
    if len(species.evolves_to_species) != 1:
        return False
    target = species.evolves_to_species[0]
    if len(target.pokemon_evolutions) <= 1:
        return False
    target_species = species_map.get(target.id)
    return bool(target_species and len(target_species.varieties) > 1)


def _requirement_species_ids(chain: EvolutionChain) -> set[int]:
    """Species that only appear as trade or party partners."""
    ids: set[int] = set()
    for species in chain.pokemon_species:
        for target in species.evolves_to_species:
            for condition in target.pokemon_evolutions:
                ids.update(i for i in (condition.party_species_id, condition.trade_species_id) if i)
    return ids


def _make_node(species: Species, pokemon: Pokemon, width: float, height: float, **flags: bool) -> LayoutNode:
    return LayoutNode(
        id=str(species.id),
        width=width,
        height=height,
        data=NodeData(
            label=species.display_name,
            species_id=species.id,
            sprite=pokemon.sprite,
            types=pokemon.type_names,
            pokemon=pokemon,
            **flags,
        ),
    )


def _apply_layout(
    nodes: list[LayoutNode],
    edges: list[LayoutEdge],
    layout: GraphLayout,
    options: LayoutOptions,
) -> EvolutionGraph:
    result = layout(nodes, edges, options)
    for node in nodes:
        x, y = result.positions.get(node.id, (0, 0))
        node.position = Position(x=x, y=y)

    logger.debug(
        "Built evolution graph",
        nodes=len(nodes),
        edges=len(edges),
        direction=RankDirection(options.direction).value,
        width=result.width,
        height=result.height,
    )
    return EvolutionGraph(nodes=nodes, edges=edges, graph_width=result.width, graph_height=result.height)


# ──────────────────────────────────────────────
# Builders
# ──────────────────────────────────────────────

def build_graph(
    chain: EvolutionChain | Mapping[str, Any] | None,
    layout: GraphLayout | None = None,
    settings: Settings | None = None,
) -> EvolutionGraph:
    """Build the static left-to-right desktop graph for a chain.

    Args:
        chain: Parsed chain or raw chain JSON
        layout: Layout collaborator, defaults to :class:`LayeredLayout`
        settings: Node size, gaps and label options

    Returns:
        Positioned graph; empty when the chain has no root
    """
    settings = settings or default_settings
    layout = layout or LayeredLayout()

    chain = _coerce_chain(chain)
    root = chain.root() if chain is not None else None
    if root is None:
        logger.debug("Evolution chain has no root species")
        return EvolutionGraph.empty()

    species_map = chain.species_by_id()
    names = chain.names_by_id()

    nodes: list[LayoutNode] = []
    for species_id in traverse_chain(chain, root):
        species = species_map[species_id]
        pokemon = species.default_pokemon
        if pokemon is None:
            logger.debug("Skipping species without default variety", species_id=species_id)
            continue
        nodes.append(
            _make_node(
                species,
                pokemon,
                settings.node_width,
                settings.node_height,
                is_start_node=species.id == root.id,
                is_end_node=not species.evolves_to_species,
            )
        )

    emitted = {node.data.species_id for node in nodes}
    edges: list[LayoutEdge] = []
    for node in nodes:
        species = species_map[node.data.species_id]
        for target in species.evolves_to_species:
            if target.id not in emitted:
                continue
            condition = edge_condition(target.pokemon_evolutions, settings.merge_location_conditions)
            edges.append(
                LayoutEdge(
                    id=f"e{species.id}-{target.id}",
                    source=str(species.id),
                    target=str(target.id),
                    label=format_condition(condition, names, species.name, names[target.id]),
                )
            )

    options = LayoutOptions(
        direction=RankDirection.LR,
        node_separation=settings.node_separation,
        rank_separation=settings.rank_separation,
    )
    return _apply_layout(nodes, edges, layout, options)


def build_responsive_graph(
    chain: EvolutionChain | Mapping[str, Any] | None,
    view_width: float,
    view_height: float,
    breakpoint_width: float,
    layout: GraphLayout | None = None,
    settings: Settings | None = None,
) -> EvolutionGraph:
    """Build a desktop graph sized to the viewport.

    Node size and gaps come from the spacing calculator. Chains with a
    species that has many direct evolutions are laid out top to bottom,
    everything else left to right. Regional-form evolutions get one node
    per form, and species that only appear as trade or party partners are
    left out.

    Args:
        chain: Parsed chain or raw chain JSON
        view_width: Measured container width
        view_height: Measured container height
        breakpoint_width: Container width snapped to a breakpoint
        layout: Layout collaborator, defaults to :class:`LayeredLayout`
        settings: Label options

    Returns:
        Positioned graph; empty when the chain has no root
    """
    settings = settings or default_settings
    layout = layout or LayeredLayout()

    chain = _coerce_chain(chain)
    root = chain.root() if chain is not None else None
    if root is None:
        logger.debug("Evolution chain has no root species")
        return EvolutionGraph.empty()

    species_map = chain.species_by_id()
    names = chain.names_by_id()
    depths = traverse_chain(chain, root)

    rank_count = max(depths.values(), default=0) + 1
    max_siblings = max((len(s.evolves_to_species) for s in chain.pokemon_species), default=1) or 1
    node_size = node_size_from_breakpoint(breakpoint_width, rank_count, max_siblings)
    vertical = any(len(s.evolves_to_species) > MANY_DIRECT_EVOLUTIONS for s in chain.pokemon_species)
    direction = RankDirection.TB if vertical else RankDirection.LR

    if not vertical and rank_count > 1:
        # Stretch the ranks across the full container width
        free = view_width - rank_count * node_size
        rank_gap = max(MIN_FILL_RANK_SPACING, free / (rank_count - 1))
    else:
        rank_gap = rank_spacing(
            direction, view_width, view_height, node_size, node_size, rank_count, max_siblings
        )
    node_gap = sibling_spacing(direction, breakpoint_width, view_height, node_size, node_size, max_siblings)

    excluded = _requirement_species_ids(chain)
    variant_sources = {
        species_id for species_id in depths if is_variant_evolution(species_map[species_id], species_map)
    }
    excluded.update(species_map[species_id].evolves_to_species[0].id for species_id in variant_sources)

    nodes: list[LayoutNode] = []
    edges: list[LayoutEdge] = []

    for species_id in depths:
        if species_id in excluded:
            continue
        species = species_map[species_id]
        pokemon = species.default_pokemon
        if pokemon is None:
            logger.debug("Skipping species without default variety", species_id=species_id)
            continue

        nodes.append(
            _make_node(
                species,
                pokemon,
                node_size,
                node_size,
                is_start_node=species.id == root.id,
                is_end_node=not species.evolves_to_species,
            )
        )

        if species.id in variant_sources:
            _add_variant_nodes(species, species_map, names, node_size, nodes, edges)
            continue

        for target in species.evolves_to_species:
            condition = edge_condition(target.pokemon_evolutions, settings.merge_location_conditions)
            edges.append(
                LayoutEdge(
                    id=f"e{species.id}-{target.id}",
                    source=str(species.id),
                    target=str(target.id),
                    label=format_condition(condition, names, species.name, names.get(target.id, "")),
                )
            )

    # Edges into excluded or skipped species have nothing to attach to
    node_ids = {node.id for node in nodes}
    edges = [edge for edge in edges if edge.target in node_ids]

    options = LayoutOptions(direction=direction, node_separation=node_gap, rank_separation=rank_gap)
    return _apply_layout(nodes, edges, layout, options)


def _variant_label(pokemon: Pokemon) -> str:
    """'raichu-alola' -> 'Raichu alola'."""
    text = (pokemon.name or "").replace("-", " ").strip()
    return text[:1].upper() + text[1:] if text else "Form"


def _add_variant_nodes(
    species: Species,
    species_map: Mapping[int, Species],
    names: Mapping[int, str],
    node_size: float,
    nodes: list[LayoutNode],
    edges: list[LayoutEdge],
) -> None:
    """Expand a regional-form evolution into one node and edge per form."""
    target = species.evolves_to_species[0]
    target_species = species_map[target.id]
    default_variety = next((v for v in target_species.varieties if v.is_default), None)
    seen: set[str] = set()

    for index, condition in enumerate(target.pokemon_evolutions):
        variety = target_species.varieties[index] if index < len(target_species.varieties) else default_variety
        if variety is None or variety.pokemon is None:
            continue
        pokemon = variety.pokemon

        node_id = f"{target_species.id}-{pokemon.id}"
        if node_id in seen:
            logger.debug("Duplicate variant form skipped", species_id=target_species.id, node_id=node_id)
            continue
        seen.add(node_id)
        label = _variant_label(pokemon)

        nodes.append(
            LayoutNode(
                id=node_id,
                width=node_size,
                height=node_size,
                data=NodeData(
                    label=label,
                    species_id=target_species.id,
                    sprite=pokemon.sprite,
                    types=pokemon.type_names,
                    pokemon=pokemon,
                    is_end_node=True,
                    is_variant=True,
                ),
            )
        )
        edges.append(
            LayoutEdge(
                id=f"e{species.id}-{node_id}",
                source=str(species.id),
                target=node_id,
                label=format_condition(condition, names, species.name, target_species.name),
            )
        )
