"""Interactive graph backend: Cytoscape.js elements and a standalone HTML page.

The canvas mirrors how the browser view behaves: every load clears all
existing elements, adds the new graph, and re-runs the layout.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from kubeviz.renderers.base import RenderOptions
from kubeviz.renderers.layout import breadthfirst_layout, to_networkx

if TYPE_CHECKING:
    from kubeviz.domain.graph import ResourceGraph

logger = logging.getLogger(__name__)


class CytoscapeCanvas:
    """In-memory stand-in for a Cytoscape instance.

    Holds typed elements (``group`` is ``"nodes"`` or ``"edges"``) with
    preset positions.
    """

    def __init__(self, *, spacing_factor: float = 1.5, padding: float = 30.0) -> None:
        self.spacing_factor = spacing_factor
        self.padding = padding
        self.elements: list[dict[str, Any]] = []
        self.layout_runs = 0

    def clear(self) -> None:
        self.elements = []

    def load(self, graph: ResourceGraph) -> list[dict[str, Any]]:
        """Replace all elements with *graph* and lay it out."""
        self.clear()
        for node in graph.nodes:
            self.elements.append({"group": "nodes", "data": node.to_dict()})
        for index, edge in enumerate(graph.edges):
            self.elements.append(
                {"group": "edges", "data": {"id": f"e{index}", **edge.to_dict()}}
            )
        self.run_layout(graph)
        return self.elements

    def run_layout(self, graph: ResourceGraph) -> None:
        positions = breadthfirst_layout(
            to_networkx(graph),
            spacing_factor=self.spacing_factor,
            padding=self.padding,
        )
        for element in self.elements:
            if element["group"] != "nodes":
                continue
            x, y = positions.get(element["data"]["id"], (self.padding, self.padding))
            element["position"] = {"x": round(x, 2), "y": round(y, 2)}
        self.layout_runs += 1
        logger.debug("Laid out %d positions (run %d)", len(positions), self.layout_runs)


class CytoscapeRenderer:
    """Cytoscape.js ``elements`` JSON with breadth-first preset positions."""

    name = "cytoscape"
    media_type = "application/json"

    def elements(self, graph: ResourceGraph, *, options: RenderOptions) -> list[dict[str, Any]]:
        canvas = CytoscapeCanvas(spacing_factor=options.spacing_factor, padding=options.padding)
        return canvas.load(graph)

    def render(self, graph: ResourceGraph, *, options: RenderOptions) -> str:
        return json.dumps({"elements": self.elements(graph, options=options)}, indent=2) + "\n"


class HtmlRenderer:
    """Standalone HTML page embedding the Cytoscape elements."""

    name = "html"
    media_type = "text/html"
    template_name = "graph.html.j2"

    def __init__(self) -> None:
        self._cytoscape = CytoscapeRenderer()

    def render(self, graph: ResourceGraph, *, options: RenderOptions) -> str:
        from kubeviz.infrastructure.templates import build_template_environment

        env = build_template_environment("html", project_root=options.project_root)
        template = env.get_template(self.template_name)
        return template.render(
            title=options.title,
            elements=self._cytoscape.elements(graph, options=options),
            counts=list(options.counts),
            node_count=graph.node_count,
            edge_count=graph.edge_count,
        )
