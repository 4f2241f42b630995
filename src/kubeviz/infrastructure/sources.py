"""Manifest input: reading sources and parsing multi-document YAML.

Multiple sources are joined with a document separator between each
piece, so the result parses the same regardless of the order the
sources were read in.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Any, TextIO

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from kubeviz.domain.errors import ManifestParseError, ManifestReadError

logger = logging.getLogger(__name__)

DOCUMENT_SEPARATOR = "\n---\n"
STDIN_MARKER = "-"


def _new_yaml() -> YAML:
    """Fresh safe loader per parse; ruamel's YAML object carries state."""
    return YAML(typ="safe", pure=True)


def parse_documents(text: str) -> list[Any]:
    """Parse every YAML document in *text*.

    Empty documents between separators come back as ``None``. Malformed
    input raises :class:`ManifestParseError` with the parser's message.
    The safe constructor raises ValueError for impossible timestamps
    (``2024-02-30``) and deep nesting exhausts the recursion limit; both
    count as malformed input.
    """
    try:
        return list(_new_yaml().load_all(text))
    except (YAMLError, ValueError, RecursionError) as exc:
        raise ManifestParseError(str(exc)) from exc


def join_sources(contents: Iterable[str]) -> str:
    """Concatenate source texts with a separator between each piece."""
    combined = ""
    for content in contents:
        combined += (DOCUMENT_SEPARATOR if combined else "") + content
    return combined


def read_sources(paths: Sequence[str | Path], *, stdin: TextIO | None = None) -> str:
    """Read each path (``-`` for *stdin*) and join the contents."""
    contents: list[str] = []
    for raw in paths:
        if str(raw) == STDIN_MARKER:
            if stdin is None:
                raise ManifestReadError("No standard input available")
            contents.append(stdin.read())
            continue
        path = Path(raw)
        try:
            contents.append(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError) as exc:
            raise ManifestReadError(f"Error reading file: {path.name}") from exc
        logger.debug("Read manifest source %s", path)
    return join_sources(contents)
