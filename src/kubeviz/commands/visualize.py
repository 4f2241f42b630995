"""Command: visualize manifests as a diagram."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, ParamSpec, TypeVar

import click

from kubeviz.commands._base import KubevizCommand

if TYPE_CHECKING:
    from kubeviz.commands._context import AppContext
    from kubeviz.services.result import ServiceResult

P = ParamSpec("P")
R = TypeVar("R")

DIRECTIONS = ("TD", "TB", "BT", "LR", "RL")


def deliver_visualization(
    app: AppContext,
    result: ServiceResult,
    *,
    output_file: str | None,
    copy: bool,
) -> None:
    """Write, print, and optionally copy a visualize result.

    With *output_file* the diagram goes to disk and a summary is emitted.
    Without it the raw diagram goes to stdout so it can be piped.
    """
    if not result.ok:
        app.emit(result)
        return

    content = result.data["content"]
    warnings = list(result.warnings)
    data = dict(result.data)
    if copy:
        tool = app.copy_to_clipboard(content)
        if tool:
            data["copied_with"] = tool
        else:
            warnings.append("Clipboard unavailable; copy the diagram from the output")

    if output_file:
        app.write_output(output_file, content, op=result.op)
        del data["content"]
        data["output"] = output_file
        app.emit(result.model_copy(update={"data": data, "warnings": warnings}))
    elif app.settings.json_output:
        app.emit(result.model_copy(update={"data": data, "warnings": warnings}))
    else:
        # Pipe-friendly: raw content to stdout
        click.echo(content, nl=False)
        for warning in warnings:
            click.echo(f"WARNING: {warning}", err=True)


def visualization_options(func: Callable[P, R]) -> Callable[P, R]:
    """Apply the shared rendering flags to a command."""
    func = click.option(
        "--copy",
        is_flag=True,
        help="Also copy the diagram to the clipboard.",
    )(func)
    func = click.option(
        "--output",
        "output_file",
        type=click.Path(dir_okay=False),
        default=None,
        help="Output file (omit to print to stdout).",
    )(func)
    func = click.option(
        "--fenced/--no-fenced",
        default=None,
        help="Wrap Mermaid output in a ```mermaid fence.",
    )(func)
    func = click.option(
        "--direction",
        type=click.Choice(DIRECTIONS, case_sensitive=False),
        default=None,
        help="Diagram direction (default from [render] direction).",
    )(func)
    func = click.option(
        "--format",
        "fmt",
        default=None,
        help="Output format: mermaid, cytoscape, html, dot, or a plugin format.",
    )(func)
    return func


@click.command(
    cls=KubevizCommand,
    examples="""\
  kubeviz visualize deployment.yaml service.yaml
  cat manifests.yaml | kubeviz visualize --format mermaid --fenced
  kubeviz visualize app.yaml --format html --output graph.html
  kubeviz visualize app.yaml --format dot | dot -Tpng -o graph.png
  kubeviz visualize app.yaml --direction LR --copy""",
)
@click.argument("files", nargs=-1, type=click.Path(dir_okay=False, allow_dash=True))
@visualization_options
@click.pass_obj
def visualize(
    app: AppContext,
    files: tuple[str, ...],
    fmt: str | None,
    direction: str | None,
    fenced: bool | None,
    output_file: str | None,
    copy: bool,
) -> None:
    """Render Kubernetes manifests from FILES (or stdin) as a diagram."""
    text = app.read_manifests(files, op="visualize")
    result = app.session.visualize(
        text,
        fmt=fmt,
        direction=direction.upper() if direction else None,
        fenced=fenced,
    )
    deliver_visualization(app, result, output_file=output_file, copy=copy)
