"""TemplateLoader — the host's per-request template sweep.

For each view type the request matches, in sweep order:

1. build the default candidates and pass them through ``{type}_candidates``,
2. ask the locator for the first existing candidate,
3. pass that through ``{type}_selected_file``.

The first non-empty result ends the sweep. If nothing was found, ``index``
is probed. The outcome goes through ``template_to_include`` last.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from tmplhier.domain.content import QueriedObject
from tmplhier.domain.types import ViewType, sweep_sorted
from tmplhier.host.defaults import default_candidates

if TYPE_CHECKING:
    from tmplhier.hooks.filters import FilterRegistry
    from tmplhier.infrastructure.locator import TemplateLocator

logger = logging.getLogger(__name__)


class PageRequest(BaseModel):
    """One page view: the types it matches and the object it is about."""

    model_config = {"frozen": True}

    view_types: list[ViewType] = Field(default_factory=list)
    queried_object: QueriedObject | None = None


class TemplateLoader:
    """Runs the sweep for one request against a filter registry."""

    def __init__(self, filters: FilterRegistry, locator: TemplateLocator) -> None:
        self._filters = filters
        self._locator = locator

    def probe(self, view_type: ViewType, obj: QueriedObject | None) -> str:
        """Resolve one view type to a file path, or ``""``."""
        candidates = self._filters.apply_filters(
            f"{view_type}_candidates", default_candidates(view_type, obj)
        )
        found = self._locator.locate(candidates)
        logger.debug("Probed %s: %d candidates, found %r", view_type, len(candidates), found)
        return self._filters.apply_filters(f"{view_type}_selected_file", found)

    def load(self, request: PageRequest) -> str:
        """Return the template to include for *request* (``""`` if none)."""
        template = ""
        probed: set[ViewType] = set()
        for view_type in sweep_sorted(request.view_types):
            probed.add(view_type)
            template = self.probe(view_type, request.queried_object)
            if template:
                break

        if not template and ViewType.INDEX not in probed:
            template = self.probe(ViewType.INDEX, request.queried_object)

        return self._filters.apply_filters("template_to_include", template)
