"""Mermaid flowchart renderer (textual diagram backend).

Output layout, in order: header, one declaration per node, one line per
edge, one ``classDef`` per distinct kind (names made unique), one ``class`` line per node.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from kubeviz.domain.visual import resolve_visual
from kubeviz.renderers.base import RenderOptions

if TYPE_CHECKING:
    from kubeviz.domain.graph import ResourceGraph

DEFAULT_CLASS_NAME = "resource"
# Mermaid applies ``default`` to every node.
RESERVED_CLASS_NAMES = frozenset({"default"})
VALID_DIRECTIONS = ("TD", "TB", "BT", "LR", "RL")

# Order matters: '&' first so later entities are not escaped twice.
_LABEL_ESCAPES: tuple[tuple[str, str], ...] = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
)
_EDGE_LABEL_ESCAPES = (*_LABEL_ESCAPES, ("|", "&#124;"))

_NON_ALNUM = re.compile(r"[^a-z0-9]")


def escape_label(text: str, *, edge: bool = False) -> str:
    """Escape text for use inside a Mermaid label."""
    for char, entity in _EDGE_LABEL_ESCAPES if edge else _LABEL_ESCAPES:
        text = text.replace(char, entity)
    return text


def class_name_for_kind(kind: str) -> str:
    """Lowercase *kind* and strip non-alphanumerics; fall back to ``resource``."""
    name = _NON_ALNUM.sub("", kind.lower())
    return name or DEFAULT_CLASS_NAME


def assign_class_names(kinds: list[str]) -> dict[str, str]:
    """Map each kind to a distinct class name.

    Kinds that strip to a name already taken (``Config-Map`` after
    ``ConfigMap``) or to a reserved name get a numeric suffix.
    """
    names: dict[str, str] = {}
    taken = set(RESERVED_CLASS_NAMES)
    for kind in kinds:
        base = class_name_for_kind(kind)
        name, suffix = base, 2
        while name in taken:
            name, suffix = f"{base}{suffix}", suffix + 1
        taken.add(name)
        names[kind] = name
    return names


def fence(diagram: str) -> str:
    return f"```mermaid\n{diagram}\n```"


class MermaidRenderer:
    """Renders the graph as a Mermaid ``flowchart``.

    Node ids are replaced by short sequential identifiers (``n0``, ``n1``,
    ...) in node order, since resource ids contain ``/`` which Mermaid
    does not accept in identifiers.
    """

    name = "mermaid"
    media_type = "text/vnd.mermaid"

    def render(self, graph: ResourceGraph, *, options: RenderOptions) -> str:
        direction = options.direction.upper()
        if direction not in VALID_DIRECTIONS:
            direction = "TD"
        ids = {node.id: f"n{index}" for index, node in enumerate(graph.nodes)}
        lines = [f"flowchart {direction}"]

        for node in graph.nodes:
            label = escape_label(node.label).replace("\n", "<br/>")
            lines.append(f'    {ids[node.id]}["{label}"]')

        for edge in graph.edges:
            source = ids.get(edge.source) or self._dangling(edge.source, ids)
            target = ids.get(edge.target) or self._dangling(edge.target, ids)
            if edge.label:
                lines.append(f"    {source} -->|{escape_label(edge.label, edge=True)}| {target}")
            else:
                lines.append(f"    {source} --> {target}")

        classes = assign_class_names(graph.kinds())
        for kind, class_name in classes.items():
            color = resolve_visual(kind).color
            lines.append(f"    classDef {class_name} fill:{color},color:#fff")

        for node in graph.nodes:
            lines.append(f"    class {ids[node.id]} {classes[node.kind]}")

        diagram = "\n".join(lines)
        return fence(diagram) if options.fenced else diagram

    @staticmethod
    def _dangling(node_id: str, ids: dict[str, str]) -> str:
        """Assign an identifier to an edge endpoint with no node."""
        ids[node_id] = f"n{len(ids)}"
        return ids[node_id]
