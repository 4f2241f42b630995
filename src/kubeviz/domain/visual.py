"""Visual attribute resolver — kind to display color and node size.

Static lookup with a gray/50 fallback for kinds outside the table.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class VisualAttributes:
    """Display color (hex) and node diameter for one kind."""

    color: str
    size: int


DEFAULT_COLOR = "#94A3B8"
DEFAULT_SIZE = 50

KIND_COLORS: dict[str, str] = {
    "Deployment": "#326CE5",
    "Pod": "#00B4D8",
    "Container": "#90E0EF",
    "Service": "#48CAE4",
    "ServiceAccount": "#FFC300",
    "ConfigMap": "#FF5733",
    "Secret": "#C70039",
    "StatefulSet": "#9D4EDD",
    "DaemonSet": "#10B981",
    "Ingress": "#3B82F6",
    "PersistentVolumeClaim": "#F59E0B",
    "Namespace": "#8B5CF6",
}

KIND_SIZES: dict[str, int] = {
    "Deployment": 60,
    "StatefulSet": 60,
    "DaemonSet": 60,
    "Service": 55,
    "Pod": 40,
    "Container": 30,
    "ServiceAccount": 50,
    "ConfigMap": 45,
    "Secret": 45,
}

# Muted styling for the "... +N more pods" marker.
OVERFLOW_VISUAL = VisualAttributes(color="#cbd5e1", size=35)


def resolve_visual(kind: str) -> VisualAttributes:
    """Return the color and size for *kind*, falling back to the defaults."""
    return VisualAttributes(
        color=KIND_COLORS.get(kind, DEFAULT_COLOR),
        size=KIND_SIZES.get(kind, DEFAULT_SIZE),
    )


def legend() -> list[dict[str, str | int]]:
    """List every kind with explicit styling, sorted by kind name."""
    kinds = sorted(set(KIND_COLORS) | set(KIND_SIZES))
    return [
        {"kind": kind, "color": attrs.color, "size": attrs.size}
        for kind, attrs in ((k, resolve_visual(k)) for k in kinds)
    ]
