"""Subcommand modules for kubeviz.

Provides register_commands() which uses deferred imports to keep
``kubeviz --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the share group and the standalone commands on the root CLI group."""
    # --- Groups ---
    from kubeviz.commands.share import share

    cli.add_command(share)

    # --- Standalone commands ---
    from kubeviz.commands.legend import legend
    from kubeviz.commands.summary import summary
    from kubeviz.commands.visualize import visualize

    cli.add_command(visualize)
    cli.add_command(summary)
    cli.add_command(legend)
