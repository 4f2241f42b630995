"""Command group: shareable links (encode, decode, open)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from kubeviz.commands._base import KubevizGroup
from kubeviz.commands.visualize import deliver_visualization, visualization_options

if TYPE_CHECKING:
    from kubeviz.commands._context import AppContext

_SHARE_EXAMPLES = """\
  kubeviz share encode app.yaml
  kubeviz share encode app.yaml --copy
  kubeviz share decode 'https://kubeviz.dev/?yaml=YXBp...'
  kubeviz share open 'https://kubeviz.dev/?yaml=YXBp...' --format mermaid"""


@click.group(cls=KubevizGroup, examples=_SHARE_EXAMPLES)
@click.pass_obj
def share(app: AppContext) -> None:
    """Pack manifests into a link, or read them back out."""


@share.command(
    examples="""\
  kubeviz share encode app.yaml
  cat app.yaml | kubeviz share encode --copy
  kubeviz -q share encode a.yaml b.yaml"""
)
@click.argument("files", nargs=-1, type=click.Path(dir_okay=False, allow_dash=True))
@click.option("--copy", is_flag=True, help="Also copy the URL to the clipboard.")
@click.pass_obj
def encode(app: AppContext, files: tuple[str, ...], copy: bool) -> None:
    """Print a shareable URL carrying the manifests in FILES (or stdin)."""
    text = app.read_manifests(files, op="share_encode")
    result = app.sharer.encode(text)
    if result.ok and copy:
        url = result.data["url"]
        tool = app.copy_to_clipboard(url)
        if tool:
            result = result.model_copy(update={"data": {**result.data, "copied_with": tool}})
        else:
            result = result.model_copy(
                update={"warnings": [*result.warnings, f"Copy this URL to share: {url}"]}
            )
    app.emit(result)


@share.command(
    examples="""\
  kubeviz share decode 'https://kubeviz.dev/?yaml=YXBp...'
  kubeviz share decode YXBpVmVyc2lvbiUzQSUyMHYx > app.yaml
  kubeviz share decode 'https://kubeviz.dev/?yaml=YXBp...' --output app.yaml"""
)
@click.argument("url")
@click.option(
    "--output",
    "output_file",
    type=click.Path(dir_okay=False),
    default=None,
    help="Output file (omit to print to stdout).",
)
@click.pass_obj
def decode(app: AppContext, url: str, output_file: str | None) -> None:
    """Print the manifests carried by a share URL or bare token."""
    result = app.sharer.decode(url)
    if not result.ok:
        app.emit(result)
        return

    content = result.data["content"]
    if output_file:
        app.write_output(output_file, content, op=result.op)
        app.emit(result.model_copy(update={"data": {**result.data, "output": output_file}}))
    elif app.settings.json_output:
        app.emit(result)
    else:
        click.echo(content, nl=not content.endswith("\n"))


@share.command(
    "open",
    examples="""\
  kubeviz share open 'https://kubeviz.dev/?yaml=YXBp...'
  kubeviz share open 'https://kubeviz.dev/?yaml=YXBp...' --format html --output graph.html"""
)
@click.argument("url")
@visualization_options
@click.pass_obj
def open_link(
    app: AppContext,
    url: str,
    fmt: str | None,
    direction: str | None,
    fenced: bool | None,
    output_file: str | None,
    copy: bool,
) -> None:
    """Decode a share URL and visualize its manifests."""
    decoded = app.sharer.decode(url)
    if not decoded.ok:
        app.emit(decoded)
        return
    result = app.session.visualize(
        decoded.data["content"],
        fmt=fmt,
        direction=direction.upper() if direction else None,
        fenced=fenced,
    )
    deliver_visualization(app, result, output_file=output_file, copy=copy)
