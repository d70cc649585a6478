"""Viewport-adaptive spacing for evolution graphs.

Pure numeric helpers: given the container geometry and the shape of a
chain (ranks = evolution stages, siblings = species sharing a parent) they
return pixel gaps and node sizes. Inputs are not validated; negative
dimensions simply flow through the arithmetic.
"""

import math
from enum import Enum

from evograph.core.constants import (
    BREAKPOINTS,
    DEFAULT_BREAKPOINT,
    DEFAULT_RANK_SPACING_CEILING,
    DENSE_RANK_THRESHOLD,
    EDGE_LABEL_RESERVE,
    MAX_NODE_SIZE,
    MAX_SPACED_SIBLINGS,
    MIN_RANK_GAP,
    MIN_SIBLING_GAP,
    MIN_SIBLING_SPACING_LR,
    MIN_SIBLING_SPACING_TB,
    MIN_VERTICAL_RANK_SPACING,
    RANK_BUFFER_DENSE,
    RANK_BUFFER_SPARSE,
    RANK_SPACING_CEILINGS,
    SIBLING_FILL_RATIO,
    SINGLE_RANK_SPACING,
    SINGLE_SIBLING_SPACING,
    VERTICAL_RANK_FILL_RATIO,
    VIRTUAL_HEIGHT,
    WIDE_SIBLING_THRESHOLD,
)


class RankDirection(str, Enum):
    """Direction in which evolution stages follow each other."""

    TB = "TB"  # top to bottom
    LR = "LR"  # left to right


def snap_to_breakpoint(width: float) -> int:
    """Snap a container width to the widest breakpoint it reaches.

    Widths below the smallest breakpoint (640) fall back to 480.
    """
    for breakpoint in BREAKPOINTS:
        if width >= breakpoint:
            return breakpoint
    return DEFAULT_BREAKPOINT


def responsive_ceiling(container_width: float) -> int:
    """Largest horizontal rank gap allowed for a container width."""
    for min_width, ceiling in RANK_SPACING_CEILINGS:
        if container_width >= min_width:
            return ceiling
    return DEFAULT_RANK_SPACING_CEILING


def sibling_spacing(
    direction: RankDirection | str,
    container_width: float,
    container_height: float,
    node_width: float,
    node_height: float,
    sibling_count: int,
) -> float:
    """Gap between nodes that share a rank.

    Siblings are laid out across the rank axis: side by side for a
    top-to-bottom graph, stacked for a left-to-right one. Most of the space
    the nodes leave free is spread evenly between them.

    Args:
        direction: Rank direction of the graph
        container_width: Container width in pixels
        container_height: Container height in pixels
        node_width: Node width in pixels
        node_height: Node height in pixels
        sibling_count: Largest number of siblings in one rank

    Returns:
        Gap in pixels, never below the direction's floor
    """
    siblings = min(max(sibling_count, 1), MAX_SPACED_SIBLINGS)
    if siblings <= 1:
        return SINGLE_SIBLING_SPACING

    if RankDirection(direction) is RankDirection.TB:
        available = container_width - siblings * node_width
        floor = MIN_SIBLING_SPACING_TB
    else:
        available = container_height - siblings * node_height
        floor = MIN_SIBLING_SPACING_LR

    spacing = (available * SIBLING_FILL_RATIO) / (siblings - 1) if available > 0 else 0
    return max(floor, spacing)


def rank_spacing(
    direction: RankDirection | str,
    container_width: float,
    container_height: float,
    node_width: float,
    node_height: float,
    rank_count: int,
    max_siblings: int = 1,
) -> float:
    """Gap between consecutive evolution stages.

    Left-to-right graphs keep room for the edge label between stages and
    cap the gap by container breakpoint so wide screens do not scatter a
    short chain. Top-to-bottom graphs use most of the free height, or the
    free width when a rank is wide enough to need it.

    Args:
        direction: Rank direction of the graph
        container_width: Container width in pixels
        container_height: Container height in pixels
        node_width: Node width in pixels
        node_height: Node height in pixels
        rank_count: Number of evolution stages
        max_siblings: Largest number of siblings in one rank

    Returns:
        Gap in pixels
    """
    if rank_count <= 1:
        return SINGLE_RANK_SPACING

    gaps = rank_count - 1

    if RankDirection(direction) is RankDirection.LR:
        buffer = RANK_BUFFER_DENSE if rank_count > DENSE_RANK_THRESHOLD else RANK_BUFFER_SPARSE
        floor = EDGE_LABEL_RESERVE + buffer
        available = container_width - rank_count * node_width
        spacing = available / gaps if available > 0 else 0
        # The label floor wins over the ceiling on narrow containers
        return max(floor, min(spacing, responsive_ceiling(container_width)))

    extent = container_width if max_siblings >= WIDE_SIBLING_THRESHOLD else container_height
    available = extent - rank_count * node_height
    spacing = (available * VERTICAL_RANK_FILL_RATIO) / gaps if available > 0 else 0
    return max(MIN_VERTICAL_RANK_SPACING, spacing)


def node_size_from_breakpoint(container_width: float, rank_count: int, max_siblings: int) -> int:
    """Largest square node that fits the chain's ranks and siblings.

    Width is bounded by ``rank_count`` nodes across the container, height
    by ``max_siblings`` nodes within a fixed virtual height, both with a
    minimum gap, and the result is capped. A count of zero or less leaves
    that axis unconstrained.
    """
    bounds = [MAX_NODE_SIZE]
    if rank_count > 0:
        bounds.append((container_width - (rank_count - 1) * MIN_RANK_GAP) / rank_count)
    if max_siblings > 0:
        bounds.append((VIRTUAL_HEIGHT - (max_siblings - 1) * MIN_SIBLING_GAP) / max_siblings)
    return math.floor(min(bounds))
