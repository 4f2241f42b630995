"""Built-in renderer plugin: mermaid, cytoscape, html, dot."""

from __future__ import annotations

from kubeviz.plugins.hookspecs import hookimpl
from kubeviz.renderers import (
    CytoscapeRenderer,
    DotRenderer,
    HtmlRenderer,
    MermaidRenderer,
    Renderer,
)


class BuiltinRenderersPlugin:
    @hookimpl
    def kubeviz_renderers(self) -> list[Renderer]:
        return [MermaidRenderer(), CytoscapeRenderer(), HtmlRenderer(), DotRenderer()]
