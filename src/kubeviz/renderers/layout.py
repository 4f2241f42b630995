"""Hierarchical breadth-first layout computed with NetworkX.

Roots (nodes with no incoming edge) sit on the first row; every other
node sits one row below the shallowest node that reaches it. Nodes that
are only reachable through a cycle start a new tree below the rest.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeAlias

import networkx as nx

if TYPE_CHECKING:
    from kubeviz.domain.graph import ResourceGraph

Position: TypeAlias = tuple[float, float]

# Base distance between neighbouring nodes before the spacing factor.
BASE_SPACING = 100.0


def to_networkx(graph: ResourceGraph) -> nx.MultiDiGraph:
    """Convert to a MultiDiGraph; parallel edges are kept as separate keys."""
    g = nx.MultiDiGraph()
    for node in graph.nodes:
        g.add_node(node.id, **node.to_dict())
    for index, edge in enumerate(graph.edges):
        g.add_edge(edge.source, edge.target, key=index, label=edge.label)
    return g


def breadthfirst_layers(g: nx.MultiDiGraph) -> list[list[str]]:
    """Group nodes into BFS layers, preserving node insertion order."""
    order = list(g.nodes)
    rank = {node_id: index for index, node_id in enumerate(order)}
    placed: set[str] = set()
    layers: list[list[str]] = []

    sources = [n for n in order if g.in_degree(n) == 0] or order[:1]
    base = 0
    while sources:
        for depth, layer in enumerate(nx.bfs_layers(g, sources)):
            fresh = [n for n in layer if n not in placed]
            if not fresh:
                continue
            placed.update(fresh)
            while len(layers) <= base + depth:
                layers.append([])
            layers[base + depth].extend(sorted(fresh, key=rank.__getitem__))
        base = len(layers)
        sources = [n for n in order if n not in placed][:1]
    return [layer for layer in layers if layer]


def breadthfirst_layout(
    g: nx.MultiDiGraph,
    *,
    spacing_factor: float = 1.5,
    padding: float = 30.0,
) -> dict[str, Position]:
    """Assign ``(x, y)`` canvas positions, each row centred on the widest row."""
    layers = breadthfirst_layers(g)
    if not layers:
        return {}
    step = BASE_SPACING * spacing_factor
    widest = max(len(layer) for layer in layers)
    positions: dict[str, Position] = {}
    for depth, layer in enumerate(layers):
        shift = (widest - len(layer)) * step / 2
        for index, node_id in enumerate(layer):
            positions[node_id] = (padding + shift + index * step, padding + depth * step)
    return positions
