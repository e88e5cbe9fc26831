"""Command: resolve the template for a described page view."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from tmplhier.commands._base import TmplCommand
from tmplhier.domain.types import ViewType

if TYPE_CHECKING:
    from tmplhier.commands._context import AppContext


@click.command(
    cls=TmplCommand,
    examples="""\
  tmplhier resolve single singular --id 7 --content-type book --available single.php
  tmplhier resolve single --id 7 --content-type book --custom-template templates/custom.php
  tmplhier resolve frontpage page --id 2 --front page --theme-dir ./theme
  tmplhier --json resolve search""",
)
@click.argument(
    "view_types",
    nargs=-1,
    required=True,
    type=click.Choice([t.value for t in ViewType]),
)
@click.option("--id", "object_id", type=int, default=None, help="Queried object id.")
@click.option("--content-type", default="post", show_default=True, help="Queried content type.")
@click.option("--slug", default="", help="Queried object slug.")
@click.option("--custom-template", default=None, help="Template assigned to the object.")
@click.option(
    "--front",
    type=click.Choice(["posts", "page"]),
    default=None,
    help="What the front page shows (overrides config).",
)
@click.option(
    "--theme-dir",
    "theme_dirs",
    multiple=True,
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory to search for templates (repeatable).",
)
@click.option(
    "--available",
    multiple=True,
    help="Pretend this template exists instead of searching directories (repeatable).",
)
@click.pass_obj
def resolve(
    app: AppContext,
    view_types: tuple[str, ...],
    object_id: int | None,
    content_type: str,
    slug: str,
    custom_template: str | None,
    front: str | None,
    theme_dirs: tuple[Path, ...],
    available: tuple[str, ...],
) -> None:
    """Show which template renders a page view, and the full hierarchy."""
    from tmplhier.domain.content import QueriedObject
    from tmplhier.services.resolve import ResolveService

    queried = None
    if object_id is not None:
        queried = QueriedObject(id=object_id, content_type=content_type, slug=slug)

    svc = ResolveService(app.settings, plugins=app.plugins)
    app.emit(
        svc.resolve(
            [ViewType(t) for t in view_types],
            queried=queried,
            custom_template=custom_template,
            show_on_front=front,
            available=available or None,
            theme_dirs=list(theme_dirs) or None,
        )
    )
