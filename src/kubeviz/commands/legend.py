"""Command: show the color and size used for each kind."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from kubeviz.commands._base import KubevizCommand

if TYPE_CHECKING:
    from kubeviz.commands._context import AppContext


@click.command(
    cls=KubevizCommand,
    examples="""\
  kubeviz legend
  kubeviz --json legend""",
)
@click.pass_obj
def legend(app: AppContext) -> None:
    """List node colors and sizes by resource kind."""
    app.emit(app.visualizer.legend())
