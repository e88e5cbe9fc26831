"""Command class shared by tmplhier commands.

Commands declared with ``examples=`` gain an eager ``--examples`` flag that
prints those examples and exits, so ``--help`` stays short.
"""

from __future__ import annotations

from typing import Any

import click


class TmplCommand(click.Command):
    """A click command with optional ``--examples`` text."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    is_eager=True,
                    expose_value=False,
                    callback=self._print_examples,
                    help="Show usage examples.",
                )
            )

    def _print_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if value:
            click.echo(f"Examples for '{ctx.command_path}':\n\n{self.examples}")
            ctx.exit(0)
