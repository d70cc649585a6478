"""Layered graph layout.

The graph builders only depend on the narrow :class:`GraphLayout` contract:
sized nodes and directed edges in, node centres and a bounding box out.
:class:`LayeredLayout` is the default implementation, a small layered
(Sugiyama-style) layout on top of networkx.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Protocol

import networkx as nx

from evograph.core.spacing import RankDirection
from evograph.logging import get_logger

logger = get_logger(__name__)


class SizedNode(Protocol):
    id: str
    width: float
    height: float


class DirectedEdge(Protocol):
    source: str
    target: str


@dataclass(frozen=True)
class LayoutOptions:
    """Rank direction and gaps for one layout run."""

    direction: RankDirection = RankDirection.LR
    node_separation: float = 150
    rank_separation: float = 100


@dataclass
class LayoutResult:
    """Node centres keyed by node id, plus the overall graph size."""

    positions: dict[str, tuple[float, float]] = field(default_factory=dict)
    width: float = 0
    height: float = 0


class GraphLayout(Protocol):
    def __call__(
        self,
        nodes: Sequence[SizedNode],
        edges: Sequence[DirectedEdge],
        options: LayoutOptions,
    ) -> LayoutResult: ...


class LayeredLayout:
    """Longest-path ranking with barycentric ordering inside each rank.

    Ranks are stacked along the rank axis (x for LR, y for TB). Nodes of a
    rank are stacked along the cross axis and the rank is centred on the
    widest one. Output is fully determined by the input order.

    Written against networkx primitives because no layered (dagre-style)
    layout ships with the packages this project depends on.
    """

    def __call__(
        self,
        nodes: Sequence[SizedNode],
        edges: Sequence[DirectedEdge],
        options: LayoutOptions,
    ) -> LayoutResult:
        if not nodes:
            return LayoutResult()

        graph = self._build_graph(nodes, edges)
        layers = self._order_layers(graph, self._rank(graph))
        return self._place(graph, layers, options)

    @staticmethod
    def _build_graph(nodes: Sequence[SizedNode], edges: Sequence[DirectedEdge]) -> nx.DiGraph:
        graph = nx.DiGraph()
        for index, node in enumerate(nodes):
            graph.add_node(node.id, width=node.width, height=node.height, index=index)

        for edge in edges:
            if edge.source in graph and edge.target in graph:
                graph.add_edge(edge.source, edge.target)
            else:
                logger.debug("Ignoring edge with unknown endpoint", source=edge.source, target=edge.target)

        # Ranking needs a DAG; drop the edge that closes each cycle
        while not nx.is_directed_acyclic_graph(graph):
            source, target = nx.find_cycle(graph)[-1][:2]
            logger.warning("Dropping cycle edge from layout", source=source, target=target)
            graph.remove_edge(source, target)

        return graph

    @staticmethod
    def _rank(graph: nx.DiGraph) -> dict[str, int]:
        ranks: dict[str, int] = {}
        for node in nx.topological_sort(graph):
            ranks[node] = max((ranks[pred] + 1 for pred in graph.predecessors(node)), default=0)
        return ranks

    @staticmethod
    def _order_layers(graph: nx.DiGraph, ranks: dict[str, int]) -> list[list[str]]:
        layers: list[list[str]] = [[] for _ in range(max(ranks.values()) + 1)]
        for node in sorted(graph.nodes, key=lambda n: graph.nodes[n]["index"]):
            layers[ranks[node]].append(node)

        order: dict[str, int] = {node: i for i, node in enumerate(layers[0])}
        for layer in layers[1:]:

            def barycenter(node: str) -> float:
                preds = [order[pred] for pred in graph.predecessors(node)]
                return sum(preds) / len(preds) if preds else float(graph.nodes[node]["index"])

            # sorted() is stable, so ties keep input order
            layer.sort(key=barycenter)
            order.update({node: i for i, node in enumerate(layer)})

        return layers

    @staticmethod
    def _place(graph: nx.DiGraph, layers: list[list[str]], options: LayoutOptions) -> LayoutResult:
        horizontal = RankDirection(options.direction) is RankDirection.LR
        rank_key, cross_key = ("width", "height") if horizontal else ("height", "width")

        def extent(layer: list[str]) -> float:
            sizes = [graph.nodes[node][cross_key] for node in layer]
            return sum(sizes) + options.node_separation * (len(layer) - 1)

        cross_total = max(extent(layer) for layer in layers)
        positions: dict[str, tuple[float, float]] = {}
        rank_offset = 0.0

        for layer in layers:
            thickness = max(graph.nodes[node][rank_key] for node in layer)
            rank_center = rank_offset + thickness / 2
            cross_offset = (cross_total - extent(layer)) / 2

            for node in layer:
                size = graph.nodes[node][cross_key]
                cross_center = cross_offset + size / 2
                positions[node] = (rank_center, cross_center) if horizontal else (cross_center, rank_center)
                cross_offset += size + options.node_separation

            rank_offset += thickness + options.rank_separation

        rank_total = rank_offset - options.rank_separation
        if horizontal:
            return LayoutResult(positions=positions, width=rank_total, height=cross_total)
        return LayoutResult(positions=positions, width=cross_total, height=rank_total)


__all__ = [
    "GraphLayout",
    "LayeredLayout",
    "LayoutOptions",
    "LayoutResult",
]
