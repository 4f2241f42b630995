"""Graph builder — turns accepted manifests into a ResourceGraph.

Single pass over the objects. For each object, in order:

1. its own node;
2. for workloads, one Pod per replica (capped) with its containers,
   service account, and mounted ConfigMaps/Secrets, plus an overflow
   marker when the cap is exceeded;
3. for Services, a ``routes to`` edge to every workload whose labels
   contain the selector.

Pure and deterministic: identical input yields identical nodes and edges
in identical order.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from kubeviz.domain.fields import dig, dig_list, dig_mapping, dig_str, label_map, replica_count
from kubeviz.domain.graph import (
    GraphEdge,
    GraphNode,
    ResourceGraph,
    container_id,
    overflow_id,
    pod_id,
)
from kubeviz.domain.resources import ConfigObject, resource_id
from kubeviz.domain.types import (
    DEFAULT_NAME,
    MAX_EXPANDED_REPLICAS,
    EdgeLabel,
    ResourceKind,
)
from kubeviz.domain.visual import OVERFLOW_VISUAL, resolve_visual

logger = logging.getLogger(__name__)


def node_label(kind: str, name: str) -> str:
    return f"{kind}\n{name}"


def selector_matches(selector: Mapping[str, Any], labels: Mapping[str, Any]) -> bool:
    """Subset-equality test: every selector pair must appear in *labels*.

    An empty selector matches nothing.
    """
    if not selector:
        return False
    return all(key in labels and labels[key] == value for key, value in selector.items())


class GraphBuilder:
    """Accumulates nodes and edges for one build.

    Not reusable across builds; ``build_graph`` creates a fresh instance
    per call.
    """

    def __init__(self, *, max_expanded_replicas: int = MAX_EXPANDED_REPLICAS) -> None:
        self._max_replicas = max(0, max_expanded_replicas)
        self._nodes: dict[str, GraphNode] = {}
        self._edges: list[GraphEdge] = []

    def build(self, objects: Sequence[ConfigObject]) -> ResourceGraph:
        for obj in objects:
            self._add_resource(obj)
            if obj.is_workload:
                self._expand_workload(obj)
            if obj.kind == ResourceKind.SERVICE:
                self._infer_routes(obj, objects)
        logger.debug(
            "Built graph: %d objects, %d nodes, %d edges",
            len(objects),
            len(self._nodes),
            len(self._edges),
        )
        return ResourceGraph(nodes=tuple(self._nodes.values()), edges=tuple(self._edges))

    # ── Nodes and edges ───────────────────────────────────────────────

    def _add_node(self, node: GraphNode) -> None:
        """Insert *node* unless its id is already present.

        A declared resource replaces a placeholder that an earlier
        reference created, keeping the placeholder's position.
        """
        existing = self._nodes.get(node.id)
        if existing is None or (existing.synthetic and not node.synthetic):
            self._nodes[node.id] = node

    def _add_edge(self, source: str, target: str, label: str) -> None:
        self._edges.append(GraphEdge(source=source, target=target, label=str(label)))

    def _add_reference(self, kind: str, namespace: str, name: str) -> str:
        """Add a node for a resource referenced by a pod template."""
        node_id = resource_id(kind, namespace, name)
        visual = resolve_visual(kind)
        self._add_node(
            GraphNode(
                id=node_id,
                label=node_label(kind, name),
                kind=kind,
                color=visual.color,
                size=visual.size,
                synthetic=True,
            )
        )
        return node_id

    # ── Rules ─────────────────────────────────────────────────────────

    def _add_resource(self, obj: ConfigObject) -> None:
        visual = resolve_visual(obj.kind)
        self._add_node(
            GraphNode(
                id=obj.node_id,
                label=node_label(obj.kind, obj.name),
                kind=obj.kind,
                color=visual.color,
                size=visual.size,
            )
        )

    def _expand_workload(self, obj: ConfigObject) -> None:
        replicas = replica_count(dig(obj.spec, "replicas"))
        pod_spec = dig_mapping(obj.spec, "template", "spec")
        containers = dig_list(pod_spec, "containers")
        service_account = dig_str(pod_spec, "serviceAccountName")
        volumes = dig_list(pod_spec, "volumes")
        pod_visual = resolve_visual(ResourceKind.POD)
        container_visual = resolve_visual(ResourceKind.CONTAINER)

        for index in range(min(replicas, self._max_replicas)):
            pid = pod_id(obj.namespace, obj.name, index)
            self._add_node(
                GraphNode(
                    id=pid,
                    label=node_label(ResourceKind.POD, f"{obj.name}-{index}"),
                    kind=ResourceKind.POD,
                    color=pod_visual.color,
                    size=pod_visual.size,
                    synthetic=True,
                )
            )
            self._add_edge(obj.node_id, pid, EdgeLabel.MANAGES)

            for container in containers:
                if not isinstance(container, Mapping):
                    continue
                cname = dig_str(container, "name", default=DEFAULT_NAME)
                cid = container_id(obj.namespace, obj.name, index, cname)
                self._add_node(
                    GraphNode(
                        id=cid,
                        label=node_label(ResourceKind.CONTAINER, cname),
                        kind=ResourceKind.CONTAINER,
                        color=container_visual.color,
                        size=container_visual.size,
                        synthetic=True,
                    )
                )
                self._add_edge(pid, cid, EdgeLabel.CONTAINS)

            if service_account:
                sa_id = self._add_reference(
                    ResourceKind.SERVICE_ACCOUNT, obj.namespace, service_account
                )
                self._add_edge(pid, sa_id, EdgeLabel.USES)

            for volume in volumes:
                config_map = dig_str(volume, "configMap", "name")
                if config_map:
                    cm_id = self._add_reference(ResourceKind.CONFIG_MAP, obj.namespace, config_map)
                    self._add_edge(pid, cm_id, EdgeLabel.MOUNTS)
                secret = dig_str(volume, "secret", "secretName")
                if secret:
                    secret_id = self._add_reference(ResourceKind.SECRET, obj.namespace, secret)
                    self._add_edge(pid, secret_id, EdgeLabel.MOUNTS)

        if replicas > self._max_replicas:
            more_id = overflow_id(obj.node_id)
            self._add_node(
                GraphNode(
                    id=more_id,
                    label=f"... +{replicas - self._max_replicas} more pods",
                    kind=ResourceKind.POD,
                    color=OVERFLOW_VISUAL.color,
                    size=OVERFLOW_VISUAL.size,
                    synthetic=True,
                )
            )
            self._add_edge(obj.node_id, more_id, EdgeLabel.OVERFLOW)

    def _infer_routes(self, service: ConfigObject, objects: Sequence[ConfigObject]) -> None:
        selector = label_map(dig(service.spec, "selector"))
        if not selector:
            return
        for other in objects:
            if other is service or not other.is_workload:
                continue
            if selector_matches(selector, other.labels):
                self._add_edge(service.node_id, other.node_id, EdgeLabel.ROUTES_TO)


def build_graph(
    objects: Sequence[ConfigObject],
    *,
    max_expanded_replicas: int = MAX_EXPANDED_REPLICAS,
) -> ResourceGraph:
    """Build the resource graph for *objects* (already filtered)."""
    return GraphBuilder(max_expanded_replicas=max_expanded_replicas).build(objects)
