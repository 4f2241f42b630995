"""Abstract resource graph — the value passed from the builder to renderers.

Nodes are keyed by id and kept in first-insertion order; edges are an
ordered sequence that may contain duplicates.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any


def pod_id(namespace: str, owner: str, index: int) -> str:
    return f"Pod/{namespace}/{owner}-pod-{index}"


def container_id(namespace: str, owner: str, index: int, container: str) -> str:
    return f"Container/{namespace}/{owner}-pod-{index}-{container}"


def overflow_id(owner_id: str) -> str:
    return f"{owner_id}-more"


@dataclass(frozen=True)
class GraphNode:
    """A node in the resource graph.

    ``synthetic`` marks nodes with no standalone input document: replica
    pods, containers, overflow markers, and referenced-but-undeclared
    resources.
    """

    id: str
    label: str
    kind: str
    color: str
    size: int
    synthetic: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "label": self.label,
            "kind": self.kind,
            "color": self.color,
            "size": self.size,
            "synthetic": self.synthetic,
        }


@dataclass(frozen=True)
class GraphEdge:
    """A labeled directed edge. An empty label means unlabeled."""

    source: str
    target: str
    label: str = ""

    def to_dict(self) -> dict[str, str]:
        return {"source": self.source, "target": self.target, "label": self.label}


@dataclass(frozen=True)
class ResourceGraph:
    """Immutable node set plus edge sequence produced by one build."""

    nodes: tuple[GraphNode, ...] = ()
    edges: tuple[GraphEdge, ...] = ()
    _index: dict[str, GraphNode] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        self._index.update((node.id, node) for node in self.nodes)

    def __iter__(self) -> Iterator[GraphNode]:
        return iter(self.nodes)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._index

    def node(self, node_id: str) -> GraphNode | None:
        return self._index.get(node_id)

    def kinds(self) -> list[str]:
        """Distinct node kinds in first-seen order."""
        return list(dict.fromkeys(node.kind for node in self.nodes))

    @property
    def node_count(self) -> int:
        return len(self.nodes)

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    def to_dict(self) -> dict[str, Any]:
        return {
            "nodes": [node.to_dict() for node in self.nodes],
            "edges": [edge.to_dict() for edge in self.edges],
        }
