"""Tests for the Mermaid renderer."""

from __future__ import annotations

from kubeviz.domain.builder import build_graph
from kubeviz.domain.graph import GraphEdge, GraphNode, ResourceGraph
from kubeviz.renderers import MermaidRenderer, RenderOptions
from kubeviz.renderers.mermaid import assign_class_names, class_name_for_kind, escape_label, fence
from tests.conftest import SAMPLE_MANIFESTS, load_objects


def _two_node_graph() -> ResourceGraph:
    return ResourceGraph(
        nodes=(
            GraphNode(id="Pod/x/a", label="Pod\na", kind="Pod", color="#00B4D8", size=40),
            GraphNode(id="Thing/x/b", label="B", kind="Custom Kind", color="#94A3B8", size=50),
        ),
        edges=(
            GraphEdge(source="Pod/x/a", target="Thing/x/b", label="routes|to"),
            GraphEdge(source="Pod/x/a", target="Thing/x/b", label=""),
        ),
    )


class TestEscapeLabel:
    def test_escapes_html_specials(self) -> None:
        assert escape_label('a & <b> "c"') == "a &amp; &lt;b&gt; &quot;c&quot;"

    def test_ampersand_first(self) -> None:
        assert escape_label("&lt;") == "&amp;lt;"

    def test_pipe_only_in_edge_labels(self) -> None:
        assert escape_label("a|b") == "a|b"
        assert escape_label("a|b", edge=True) == "a&#124;b"


class TestClassName:
    def test_lowercases_kind(self) -> None:
        assert class_name_for_kind("ConfigMap") == "configmap"

    def test_strips_non_alphanumerics(self) -> None:
        assert class_name_for_kind("Foo-Bar.v2") == "foobarv2"

    def test_empty_result_falls_back(self) -> None:
        assert class_name_for_kind("---") == "resource"

    def test_colliding_kinds_get_suffixes(self) -> None:
        assert assign_class_names(["ConfigMap", "Config-Map", "config.map"]) == {
            "ConfigMap": "configmap",
            "Config-Map": "configmap2",
            "config.map": "configmap3",
        }

    def test_reserved_default_class_avoided(self) -> None:
        assert assign_class_names(["Default", "Pod"]) == {"Default": "default2", "Pod": "pod"}


class TestMermaidRenderer:
    def test_full_output(self) -> None:
        output = MermaidRenderer().render(_two_node_graph(), options=RenderOptions(direction="LR"))
        assert output == "\n".join(
            [
                "flowchart LR",
                '    n0["Pod<br/>a"]',
                '    n1["B"]',
                "    n0 -->|routes&#124;to| n1",
                "    n0 --> n1",
                "    classDef pod fill:#00B4D8,color:#fff",
                "    classDef customkind fill:#94A3B8,color:#fff",
                "    class n0 pod",
                "    class n1 customkind",
            ]
        )

    def test_invalid_direction_defaults_to_td(self) -> None:
        output = MermaidRenderer().render(_two_node_graph(), options=RenderOptions(direction="up"))
        assert output.startswith("flowchart TD\n")

    def test_fenced(self) -> None:
        output = MermaidRenderer().render(_two_node_graph(), options=RenderOptions(fenced=True))
        assert output.startswith("```mermaid\nflowchart TD\n")
        assert output.endswith("\n```")

    def test_one_classdef_per_kind(self) -> None:
        graph = build_graph(load_objects(SAMPLE_MANIFESTS))
        output = MermaidRenderer().render(graph, options=RenderOptions())
        lines = output.splitlines()
        classdefs = [line for line in lines if line.strip().startswith("classDef ")]
        assert len(classdefs) == len(graph.kinds())
        class_lines = [line for line in lines if line.strip().startswith("class ")]
        assert len(class_lines) == graph.node_count
        assert sum(1 for line in lines if "-->" in line) == graph.edge_count

    def test_colliding_kinds_keep_their_colors(self) -> None:
        graph = ResourceGraph(
            nodes=(
                GraphNode(id="ConfigMap/x/a", label="a", kind="ConfigMap", color="", size=45),
                GraphNode(id="Config-Map/x/b", label="b", kind="Config-Map", color="", size=50),
            )
        )
        lines = MermaidRenderer().render(graph, options=RenderOptions()).splitlines()
        assert "    classDef configmap fill:#FF5733,color:#fff" in lines
        assert "    classDef configmap2 fill:#94A3B8,color:#fff" in lines
        assert lines[-2:] == ["    class n0 configmap", "    class n1 configmap2"]

    def test_empty_graph(self) -> None:
        assert MermaidRenderer().render(ResourceGraph(), options=RenderOptions()) == "flowchart TD"

    def test_fence_helper(self) -> None:
        assert fence("flowchart TD") == "```mermaid\nflowchart TD\n```"
