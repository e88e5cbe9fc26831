"""Subcommand modules for tmplhier.

Provides register_commands() which uses deferred imports to keep
``tmplhier --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from tmplhier.commands.resolve import resolve
    from tmplhier.commands.types_cmd import types_cmd

    cli.add_command(resolve)
    cli.add_command(types_cmd)
