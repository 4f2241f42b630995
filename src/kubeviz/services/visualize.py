"""VisualizeService — manifest text to rendered diagram.

Pipeline: parse -> filter -> build -> render. Each call starts from
scratch; nothing is cached between calls. :class:`VisualizationSession`
keeps the last successful result for callers that visualize repeatedly.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from kubeviz.domain.builder import build_graph
from kubeviz.domain.errors import (
    EmptyInputError,
    KubevizError,
    ManifestParseError,
    ManifestReadError,
    NoResourcesError,
    RenderError,
    UnknownFormatError,
)
from kubeviz.domain.filter import filter_documents
from kubeviz.domain.summary import count_kinds
from kubeviz.domain.visual import legend
from kubeviz.infrastructure.sources import parse_documents
from kubeviz.renderers.base import RenderOptions
from kubeviz.services.base import BaseService
from kubeviz.services.result import ErrorCode, ServiceResult
from kubeviz.services.telemetry import trace_span, traced

if TYPE_CHECKING:
    from kubeviz.config.settings import KubevizSettings
    from kubeviz.domain.graph import ResourceGraph
    from kubeviz.domain.resources import ConfigObject
    from kubeviz.plugins.manager import PluginManager
    from kubeviz.renderers.base import Renderer

logger = logging.getLogger(__name__)

MSG_EMPTY_INPUT = "Please enter some YAML content"
MSG_NO_RESOURCES = "No valid Kubernetes resources found"
MSG_RENDER_ERROR = "Error rendering diagram"


def skipped_warnings(skipped: int) -> tuple[str, ...]:
    if not skipped:
        return ()
    return (f"Skipped {skipped} document(s) without kind and metadata",)


@dataclass(frozen=True)
class Visualization:
    """Immutable outcome of one successful visualize call."""

    objects: tuple[ConfigObject, ...]
    graph: ResourceGraph
    counts: dict[str, int]
    format: str
    content: str
    warnings: tuple[str, ...] = field(default=())

    @property
    def message(self) -> str:
        return f"Successfully visualized {len(self.objects)} resource(s)"


class VisualizeService(BaseService):
    """Parse, build, and render manifests."""

    def __init__(
        self,
        settings: KubevizSettings | None = None,
        *,
        plugins: PluginManager | None = None,
    ) -> None:
        super().__init__(settings)
        if plugins is None:
            from kubeviz.plugins.manager import PluginManager

            plugins = PluginManager()
        self._plugins = plugins
        self._renderers: dict[str, Renderer] | None = None

    # ── Renderer registry ─────────────────────────────────────────────

    @property
    def renderers(self) -> dict[str, Renderer]:
        if self._renderers is None:
            self._renderers = self._plugins.renderers()
        return self._renderers

    def available_formats(self) -> list[str]:
        return sorted(self.renderers)

    def get_renderer(self, fmt: str) -> Renderer:
        renderer = self.renderers.get(fmt.lower())
        if renderer is None:
            raise UnknownFormatError(fmt, self.available_formats())
        return renderer

    # ── Pipeline ──────────────────────────────────────────────────────

    def load(self, text: str) -> tuple[list[ConfigObject], ResourceGraph, int]:
        """Parse and build; raises on empty, malformed, or resource-free input.

        Returns the accepted objects, their graph, and how many non-empty
        documents the filter dropped.
        """
        if not text.strip():
            raise EmptyInputError(MSG_EMPTY_INPUT)
        with trace_span("parse") as span:
            documents = parse_documents(text)
            if span:
                span.annotate("documents", len(documents))
        objects = filter_documents(documents)
        skipped = sum(1 for doc in documents if doc is not None) - len(objects)
        if not objects:
            raise NoResourcesError(MSG_NO_RESOURCES)
        with trace_span("build") as span:
            graph = build_graph(
                objects,
                max_expanded_replicas=self._settings.graph.max_expanded_replicas,
            )
            if span:
                span.annotate("nodes", graph.node_count)
                span.annotate("edges", graph.edge_count)
        return objects, graph, skipped

    def render_options(
        self,
        counts: dict[str, int] | None = None,
        *,
        direction: str | None = None,
        fenced: bool | None = None,
    ) -> RenderOptions:
        render = self._settings.render
        layout = self._settings.layout
        return RenderOptions(
            direction=direction or render.direction,
            fenced=render.fenced if fenced is None else fenced,
            spacing_factor=layout.spacing_factor,
            padding=layout.padding,
            title=render.title,
            counts=tuple((counts or {}).items()),
            project_root=self._settings.project_root,
        )

    def run(
        self,
        text: str,
        *,
        fmt: str | None = None,
        direction: str | None = None,
        fenced: bool | None = None,
    ) -> Visualization:
        """Full pipeline returning a :class:`Visualization`; raises KubevizError."""
        fmt = (fmt or self._settings.render.default_format).lower()
        renderer = self.get_renderer(fmt)
        objects, graph, skipped = self.load(text)
        counts = count_kinds(objects)
        options = self.render_options(counts, direction=direction, fenced=fenced)
        with trace_span(f"render.{fmt}"):
            try:
                content = renderer.render(graph, options=options)
            except Exception as exc:
                logger.exception("Renderer %s failed", fmt)
                raise RenderError(MSG_RENDER_ERROR) from exc
        return Visualization(
            objects=tuple(objects),
            graph=graph,
            counts=counts,
            format=fmt,
            content=content,
            warnings=skipped_warnings(skipped),
        )

    @traced
    def visualize(
        self,
        text: str,
        *,
        fmt: str | None = None,
        direction: str | None = None,
        fenced: bool | None = None,
    ) -> ServiceResult:
        """Render *text* in *fmt* (default from ``[render] default_format``)."""
        try:
            visualization = self.run(text, fmt=fmt, direction=direction, fenced=fenced)
        except KubevizError as exc:
            return self.error_result(exc)
        return self.success_result(visualization)

    @traced
    def summarize(self, text: str) -> ServiceResult:
        """Count accepted objects per kind without rendering."""
        try:
            objects, graph, skipped = self.load(text)
        except KubevizError as exc:
            return self.error_result(exc, op="summary")
        return ServiceResult(
            ok=True,
            op="summary",
            data={
                "counts": count_kinds(objects),
                "resource_count": len(objects),
                "node_count": graph.node_count,
                "edge_count": graph.edge_count,
            },
            warnings=list(skipped_warnings(skipped)),
        )

    def legend(self) -> ServiceResult:
        """Color and size assigned to each known kind."""
        return ServiceResult(ok=True, op="legend", data={"items": legend()})

    # ── Result mapping ────────────────────────────────────────────────

    @staticmethod
    def success_result(visualization: Visualization) -> ServiceResult:
        graph = visualization.graph
        return ServiceResult(
            ok=True,
            op="visualize",
            data={
                "format": visualization.format,
                "content": visualization.content,
                "counts": visualization.counts,
                "resource_count": len(visualization.objects),
                "node_count": graph.node_count,
                "edge_count": graph.edge_count,
                "message": visualization.message,
            },
            warnings=list(visualization.warnings),
        )

    @staticmethod
    def error_result(exc: KubevizError, *, op: str = "visualize") -> ServiceResult:
        """Map a pipeline exception onto the user-facing error taxonomy."""
        detail: dict[str, Any] = {}
        if isinstance(exc, EmptyInputError):
            code, message = ErrorCode.EMPTY_INPUT, MSG_EMPTY_INPUT
        elif isinstance(exc, ManifestReadError):
            code, message = ErrorCode.READ_ERROR, str(exc)
        elif isinstance(exc, ManifestParseError):
            code, message = ErrorCode.PARSE_ERROR, f"Error parsing YAML: {exc}"
        elif isinstance(exc, NoResourcesError):
            code, message = ErrorCode.NO_RESOURCES, MSG_NO_RESOURCES
        elif isinstance(exc, UnknownFormatError):
            code, message = ErrorCode.INVALID_FORMAT, str(exc)
            detail = {"format": exc.fmt, "valid": exc.valid}
        else:
            code, message = ErrorCode.RENDER_ERROR, MSG_RENDER_ERROR
            if exc.__cause__ is not None:
                detail = {"reason": str(exc.__cause__)}
        return ServiceResult.failure(op, code, message, **detail)


class VisualizationSession:
    """Holds the last successful visualization across repeated calls.

    A failed call leaves the previous visualization in place; a
    successful one replaces it entirely.
    """

    def __init__(self, service: VisualizeService) -> None:
        self._service = service
        self._last: Visualization | None = None

    @property
    def last(self) -> Visualization | None:
        return self._last

    def visualize(self, text: str, **kwargs: Any) -> ServiceResult:
        try:
            visualization = self._service.run(text, **kwargs)
        except KubevizError as exc:
            logger.debug("Visualization failed; keeping previous result", exc_info=True)
            return self._service.error_result(exc)
        self._last = visualization
        return self._service.success_result(visualization)

    def clear(self) -> None:
        self._last = None
