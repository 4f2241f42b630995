"""Rich Console factory and theme for kubeviz output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract. In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

from kubeviz.domain.visual import DEFAULT_COLOR, KIND_COLORS

KUBEVIZ_THEME = Theme(
    {
        "kv.ok": "bold green",
        "kv.error": "bold red",
        "kv.warning": "bold yellow",
        "kv.op": "bold cyan",
        "kv.key": "dim",
        "kv.kind": "bold",
        "kv.count": "magenta",
        "kv.url": "underline blue",
        "kv.path": "dim",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=KUBEVIZ_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_kind(kind: str) -> str:
    """Return a Rich style drawing *kind* in its diagram color."""
    return f"bold {KIND_COLORS.get(kind, DEFAULT_COLOR)}"
