"""Tests for manifest reading and YAML parsing."""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from kubeviz.domain.errors import ManifestParseError, ManifestReadError
from kubeviz.infrastructure.sources import join_sources, parse_documents, read_sources


class TestParseDocuments:
    def test_multi_document(self) -> None:
        docs = parse_documents("a: 1\n---\nb: 2\n")
        assert docs == [{"a": 1}, {"b": 2}]

    def test_empty_documents_are_kept_as_none(self) -> None:
        docs = parse_documents("a: 1\n---\n---\nb: 2\n")
        assert None in docs
        assert [d for d in docs if d] == [{"a": 1}, {"b": 2}]

    def test_scalar_document(self) -> None:
        assert parse_documents("just text\n") == ["just text"]

    def test_malformed_yaml(self) -> None:
        with pytest.raises(ManifestParseError):
            parse_documents("key: [unclosed\n")

    @pytest.mark.parametrize(
        "text",
        ["a: 2001-13-45\n", "metadata:\n  annotations:\n    built: 2024-02-30\n"],
    )
    def test_impossible_timestamp(self, text: str) -> None:
        with pytest.raises(ManifestParseError):
            parse_documents(text)

    def test_deep_nesting(self) -> None:
        with pytest.raises(ManifestParseError):
            parse_documents("[" * 5000 + "]" * 5000)

    def test_duplicate_parse_is_independent(self) -> None:
        assert parse_documents("a: 1\n") == parse_documents("a: 1\n")


class TestJoinSources:
    def test_separator_between_pieces(self) -> None:
        assert join_sources(["a: 1", "b: 2"]) == "a: 1\n---\nb: 2"

    def test_single_source_unchanged(self) -> None:
        assert join_sources(["a: 1\n"]) == "a: 1\n"

    def test_no_sources(self) -> None:
        assert join_sources([]) == ""


class TestReadSources:
    def test_reads_files_in_argument_order(self, tmp_path: Path) -> None:
        (tmp_path / "one.yaml").write_text("a: 1\n", encoding="utf-8")
        (tmp_path / "two.yaml").write_text("b: 2\n", encoding="utf-8")
        text = read_sources([tmp_path / "two.yaml", tmp_path / "one.yaml"])
        assert text == "b: 2\n\n---\na: 1\n"
        assert parse_documents(text) == [{"b": 2}, {"a": 1}]

    def test_stdin_marker(self, tmp_path: Path) -> None:
        (tmp_path / "one.yaml").write_text("a: 1\n", encoding="utf-8")
        text = read_sources(["-", str(tmp_path / "one.yaml")], stdin=io.StringIO("z: 0\n"))
        assert parse_documents(text) == [{"z": 0}, {"a": 1}]

    def test_stdin_marker_without_stream(self) -> None:
        with pytest.raises(ManifestReadError):
            read_sources(["-"])

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ManifestReadError, match="Error reading file: missing.yaml"):
            read_sources([tmp_path / "missing.yaml"])

    def test_binary_file(self, tmp_path: Path) -> None:
        path = tmp_path / "blob.yaml"
        path.write_bytes(b"\xff\xfe\x00bad")
        with pytest.raises(ManifestReadError, match="blob.yaml"):
            read_sources([path])
