"""Root CLI group: global output flags, settings assembly, subcommands."""

from __future__ import annotations

import click
from pydantic import ValidationError

from kubeviz import __version__
from kubeviz.commands import register_commands
from kubeviz.commands._context import AppContext
from kubeviz.config.settings import KubevizSettings


def _config_problem(exc: ValidationError) -> str:
    """Collapse pydantic errors into ``section.key: message`` lines."""
    lines = []
    for error in exc.errors():
        where = ".".join(str(part) for part in error["loc"])
        lines.append(f"  {where}: {error['msg']}")
    return "Invalid configuration:\n" + "\n".join(lines)


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="kubeviz")
@click.option("--json", "json_output", is_flag=True, help="Emit results as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the essential value.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging and timing spans.")
@click.option("--log-json", is_flag=True, help="Write logs to stderr as JSON lines.")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Use this kubeviz.toml instead of searching upward from the CWD.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """kubeviz — Kubernetes manifest visualizer.

    Reads manifests from files or stdin and draws the resources they
    declare as a graph.
    """
    try:
        settings = KubevizSettings.from_cli(
            config_path=config_path,
            json_output=json_output,
            quiet=quiet,
            verbose=verbose,
            log_json=log_json,
        )
    except ValidationError as exc:
        raise click.ClickException(_config_problem(exc)) from exc

    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
