"""Template-facing helpers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tmplhier.hierarchy.contracts import Hierarchy

if TYPE_CHECKING:
    from tmplhier.app import Application

HIERARCHY_FILTER = "template_hierarchy"


def hierarchy(app: Application) -> list[str]:
    """The request's hierarchy, after the ``template_hierarchy`` filters."""
    resolver: Hierarchy = app.resolve(Hierarchy)
    return app.filters.apply_filters(HIERARCHY_FILTER, resolver.get_hierarchy())
