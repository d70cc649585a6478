"""Evolution chain layout and condition formatting."""

from evograph.core.conditions import format_condition, merge_location_conditions
from evograph.core.graph import (
    EvolutionGraph,
    LayoutEdge,
    LayoutNode,
    build_graph,
    build_responsive_graph,
)
from evograph.core.mobile import MobileLayout, organize
from evograph.core.spacing import (
    RankDirection,
    node_size_from_breakpoint,
    rank_spacing,
    sibling_spacing,
    snap_to_breakpoint,
)

__all__ = [
    "EvolutionGraph",
    "LayoutEdge",
    "LayoutNode",
    "MobileLayout",
    "RankDirection",
    "build_graph",
    "build_responsive_graph",
    "format_condition",
    "merge_location_conditions",
    "node_size_from_breakpoint",
    "organize",
    "rank_spacing",
    "sibling_spacing",
    "snap_to_breakpoint",
]
