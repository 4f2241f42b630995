"""Command: per-kind resource counts."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from kubeviz.commands._base import KubevizCommand

if TYPE_CHECKING:
    from kubeviz.commands._context import AppContext


@click.command(
    cls=KubevizCommand,
    examples="""\
  kubeviz summary manifests.yaml
  kubectl get deploy,svc -o yaml | kubeviz summary
  kubeviz --json summary a.yaml b.yaml""",
)
@click.argument("files", nargs=-1, type=click.Path(dir_okay=False, allow_dash=True))
@click.pass_obj
def summary(app: AppContext, files: tuple[str, ...]) -> None:
    """Count the Kubernetes objects in FILES (or stdin) by kind."""
    text = app.read_manifests(files, op="summary")
    app.emit(app.visualizer.summarize(text))
