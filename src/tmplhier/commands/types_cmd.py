"""Command: list view types in sweep order."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tmplhier.commands._base import TmplCommand

if TYPE_CHECKING:
    from tmplhier.commands._context import AppContext


@click.command("types", cls=TmplCommand)
@click.pass_obj
def types_cmd(app: AppContext) -> None:
    """List the view types, in the order they are probed."""
    from tmplhier.domain.types import SWEEP_ORDER
    from tmplhier.services.result import ServiceResult

    app.emit(
        ServiceResult(
            ok=True,
            op="types",
            data={"count": len(SWEEP_ORDER), "types": [str(t) for t in SWEEP_ORDER]},
        )
    )
