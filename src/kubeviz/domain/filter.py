"""Document filter — the single shape gate between the parser and the builder."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from kubeviz.domain.resources import ConfigObject

logger = logging.getLogger(__name__)


def is_resource_document(document: Any) -> bool:
    """Return True for a mapping with a non-empty ``kind`` and a ``metadata`` mapping."""
    if not isinstance(document, Mapping):
        return False
    kind = document.get("kind")
    if not kind or isinstance(kind, (Mapping, list)):
        return False
    return isinstance(document.get("metadata"), Mapping)


def filter_documents(documents: Iterable[Any]) -> list[ConfigObject]:
    """Keep recognizable Kubernetes objects, in input order.

    Rejected documents (empty documents between separators, scalars,
    mappings without ``kind`` or ``metadata``) are dropped silently.
    """
    accepted: list[ConfigObject] = []
    for index, document in enumerate(documents):
        if not is_resource_document(document):
            logger.debug("Skipping document %d: not a Kubernetes object", index)
            continue
        accepted.append(ConfigObject.from_document(document))
    return accepted
