"""ConfigObject — an accepted Kubernetes manifest document.

Built only by the document filter, so ``kind`` and ``metadata`` are
guaranteed present. All other fields are optional and defaulted here.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from kubeviz.domain.fields import dig_mapping, dig_str, label_map
from kubeviz.domain.types import DEFAULT_NAME, DEFAULT_NAMESPACE, WORKLOAD_KINDS


def resource_id(kind: str, namespace: str, name: str) -> str:
    """Return the node id for a declared or referenced resource."""
    return f"{kind}/{namespace}/{name}"


@dataclass(frozen=True)
class ConfigObject:
    """Read-only view over one parsed manifest document."""

    kind: str
    name: str = DEFAULT_NAME
    namespace: str = DEFAULT_NAMESPACE
    labels: Mapping[str, Any] = field(default_factory=dict)
    spec: Mapping[str, Any] = field(default_factory=dict)
    raw: Mapping[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_document(cls, document: Mapping[str, Any]) -> ConfigObject:
        """Wrap a document that already passed the shape check."""
        metadata = dig_mapping(document, "metadata")
        return cls(
            kind=str(document["kind"]),
            name=dig_str(metadata, "name", default=DEFAULT_NAME),
            namespace=dig_str(metadata, "namespace", default=DEFAULT_NAMESPACE),
            labels=label_map(metadata.get("labels")),
            spec=dig_mapping(document, "spec"),
            raw=document,
        )

    @property
    def node_id(self) -> str:
        return resource_id(self.kind, self.namespace, self.name)

    @property
    def is_workload(self) -> bool:
        return self.kind in WORKLOAD_KINDS
