"""Resource kinds and relationship labels.

Only the kinds that drive relationship rules or synthesized nodes are
enumerated. Any other kind string is still accepted as a plain node.
"""

from __future__ import annotations

from enum import StrEnum


class ResourceKind(StrEnum):
    """Kinds with special handling in the graph builder."""

    DEPLOYMENT = "Deployment"
    STATEFUL_SET = "StatefulSet"
    DAEMON_SET = "DaemonSet"
    SERVICE = "Service"
    POD = "Pod"
    CONTAINER = "Container"
    SERVICE_ACCOUNT = "ServiceAccount"
    CONFIG_MAP = "ConfigMap"
    SECRET = "Secret"


class EdgeLabel(StrEnum):
    """Labels carried by synthesized edges."""

    MANAGES = "manages"
    CONTAINS = "contains"
    USES = "uses"
    MOUNTS = "mounts"
    ROUTES_TO = "routes to"
    OVERFLOW = ""


WORKLOAD_KINDS: frozenset[str] = frozenset(
    {ResourceKind.DEPLOYMENT, ResourceKind.STATEFUL_SET, ResourceKind.DAEMON_SET}
)

DEFAULT_NAME = "unnamed"
DEFAULT_NAMESPACE = "default"

# Replicas expanded into Pod nodes before collapsing into an overflow marker.
MAX_EXPANDED_REPLICAS = 5
