"""Renderer capability shared by every output backend.

A renderer is a pure consumer of a :class:`ResourceGraph`: it never
changes the graph and never touches builder internals.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from kubeviz.domain.graph import ResourceGraph


@dataclass(frozen=True)
class RenderOptions:
    """Backend-neutral rendering knobs (filled from ``[render]`` and ``[layout]``)."""

    direction: str = "TD"
    fenced: bool = False
    spacing_factor: float = 1.5
    padding: int = 30
    title: str = "Kubernetes Resource Graph"
    counts: tuple[tuple[str, int], ...] = ()
    project_root: Path | None = None


@runtime_checkable
class Renderer(Protocol):
    """Turns a resource graph into backend-specific text."""

    name: str
    media_type: str

    def render(self, graph: ResourceGraph, *, options: RenderOptions) -> str: ...
