"""Resource count summary over accepted objects."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from kubeviz.domain.resources import ConfigObject


def count_kinds(objects: Iterable[ConfigObject]) -> dict[str, int]:
    """Count accepted objects per kind, sorted by kind name.

    Synthesized nodes never reach this function, so the counts reflect
    only what the user declared.
    """
    counts = Counter(obj.kind for obj in objects)
    return dict(sorted(counts.items()))
