"""Graphviz DOT renderer, for piping into ``dot -Tpng``."""

from __future__ import annotations

from typing import TYPE_CHECKING

from kubeviz.renderers.base import RenderOptions

if TYPE_CHECKING:
    from kubeviz.domain.graph import ResourceGraph

_RANKDIR = {"TD": "TB", "TB": "TB", "BT": "BT", "LR": "LR", "RL": "RL"}


def _quote(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
    return f'"{escaped}"'


class DotRenderer:
    name = "dot"
    media_type = "text/vnd.graphviz"

    def render(self, graph: ResourceGraph, *, options: RenderOptions) -> str:
        rankdir = _RANKDIR.get(options.direction.upper(), "TB")
        lines = [
            "digraph resources {",
            f"  rankdir={rankdir};",
            '  node [shape=box, style="rounded,filled", fontcolor="#ffffff"];',
        ]
        for node in graph.nodes:
            lines.append(
                f"  {_quote(node.id)} [label={_quote(node.label)}, "
                f"fillcolor={_quote(node.color)}, kind={_quote(node.kind)}];"
            )
        for edge in graph.edges:
            attrs = f" [label={_quote(edge.label)}]" if edge.label else ""
            lines.append(f"  {_quote(edge.source)} -> {_quote(edge.target)}{attrs};")
        lines.append("}")
        return "\n".join(lines) + "\n"
