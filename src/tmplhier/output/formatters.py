"""Rich/JSON output helpers.

The CLI renders ServiceResult for humans (Rich output) or machines
(--json).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.markup import escape

from tmplhier.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from tmplhier.services.result import ServiceResult


def _render_value(console: Console, key: str, value: Any) -> None:
    if isinstance(value, list):
        console.print(f"  [tmpl.key]{key}:[/]")
        for i, item in enumerate(value, start=1):
            console.print(f"    [tmpl.index]{i:>2}.[/] [tmpl.name]{escape(str(item))}[/]")
    elif key == "template":
        shown = escape(str(value)) if value else "<none>"
        console.print(f"  [tmpl.key]{key}:[/] [tmpl.path]{shown}[/]")
    else:
        console.print(f"  [tmpl.key]{key}:[/] {escape(str(value))}")


def format_result(
    result: ServiceResult, *, json_output: bool = False, no_color: bool = False
) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        json_output: If True, return JSON; otherwise return human-readable text.
        no_color: Disable ANSI colors in human output.
    """
    if json_output:
        return result.model_dump_json(indent=2)

    console = create_console(no_color=no_color)
    if result.ok:
        console.print(f"[tmpl.ok]OK:[/] [tmpl.op]{result.op}[/]")
        for key, value in result.data.items():
            _render_value(console, key, value)
    else:
        error_msg = result.error.message if result.error else "Unknown error"
        console.print(f"[tmpl.error]ERROR:[/] [tmpl.op]{result.op}[/] - {escape(error_msg)}")
    return get_output(console).rstrip("\n")
