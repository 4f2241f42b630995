"""Click command classes that carry usage examples.

Every kubeviz command and group takes an ``examples`` keyword. When set,
an eager ``--examples`` flag prints them and exits before arguments are
validated or any manifest input is read.
"""

from __future__ import annotations

from typing import Any

import click


class ExamplesOption(click.Option):
    """Eager flag that prints the owning command's examples."""

    def __init__(self, examples: str) -> None:
        super().__init__(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            help="Show usage examples.",
            callback=self._show,
        )
        self.examples = examples

    def _show(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if value:
            click.echo(f"Examples for '{ctx.command_path}':\n")
            click.echo(self.examples)
            ctx.exit(0)


class _ExamplesMixin:
    params: list[click.Parameter]
    examples: str | None

    def _attach_examples(self, examples: str | None) -> None:
        self.examples = examples
        if examples:
            self.params.append(ExamplesOption(examples))


class KubevizCommand(_ExamplesMixin, click.Command):
    """Command accepting ``examples=``."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._attach_examples(examples)


class KubevizGroup(_ExamplesMixin, click.Group):
    """Group accepting ``examples=``; its subcommands default to KubevizCommand."""

    command_class = KubevizCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._attach_examples(examples)
