"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy plugin discovery and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tmplhier.output.formatters import format_result

if TYPE_CHECKING:
    from tmplhier.config.settings import TmplSettings
    from tmplhier.plugins.manager import PluginManager
    from tmplhier.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Plugins are discovered on first use so ``--help`` and ``--version``
    never import third-party plugin code.
    """

    def __init__(self, settings: TmplSettings) -> None:
        self.settings = settings
        self._plugins: PluginManager | None = None

        from tmplhier.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def plugins(self) -> PluginManager | None:
        """The loaded plugin manager, or None when plugins are disabled."""
        if not self.settings.plugins.enabled:
            return None
        if self._plugins is None:
            from tmplhier.plugins.manager import PluginManager

            self._plugins = PluginManager()
            self._plugins.discover_and_load(
                local_dir=self.settings.project_root / self.settings.plugins.local_dir
            )
        return self._plugins

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        json_output = self.settings.json_output
        output = format_result(result, json_output=json_output)
        if result.ok:
            click.echo(output)
            if not json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
