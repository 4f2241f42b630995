"""Render adapters — independent consumers of a ResourceGraph.

Built-in backends are registered through the plugin manager; see
:mod:`kubeviz.plugins.builtins.renderers`.
"""

from kubeviz.renderers.base import Renderer, RenderOptions
from kubeviz.renderers.cytoscape import CytoscapeCanvas, CytoscapeRenderer, HtmlRenderer
from kubeviz.renderers.dot import DotRenderer
from kubeviz.renderers.mermaid import MermaidRenderer

__all__ = [
    "CytoscapeCanvas",
    "CytoscapeRenderer",
    "DotRenderer",
    "HtmlRenderer",
    "MermaidRenderer",
    "RenderOptions",
    "Renderer",
]
