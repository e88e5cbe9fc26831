"""HierarchyResolver — overrides the host's template hierarchy.

The host probes each matching view type in turn: it builds a candidate list
(``{type}_candidates``), looks for the first existing file, and reports it
(``{type}_selected_file``). Normally the first hit ends the sweep. The
resolver answers every selected-file report with ``""`` so the host keeps
probing, which lets it record the complete hierarchy. The file it located
first is handed back on ``template_to_include``.

One resolver serves exactly one page-view request.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from tmplhier.domain.templates import filter_templates, strip_extension
from tmplhier.domain.types import Phase, ViewType
from tmplhier.hooks.filters import PRIORITY_LAST

if TYPE_CHECKING:
    from tmplhier.hierarchy.contracts import SiteContext
    from tmplhier.hooks.filters import FilterRegistry

# Runs before any default-priority filter so later filters see our list.
OVERRIDE_PRIORITY = 5

FRONT_PAGE_TEMPLATE = "front-page.php"
SINGLE_TEMPLATE = "single.php"

logger = logging.getLogger(__name__)


class HierarchyResolver:
    """Builds, records, and finally resolves the template hierarchy.

    Parameters:
        filters: The request's filter registry; ``boot()`` attaches to it.
        site: Answers questions about the queried object and front page.
        template_filter: Applied to every captured candidate list before it
            goes back to the host. Defaults to re-rooting under
            ``resources/views``.
    """

    def __init__(
        self,
        filters: FilterRegistry,
        site: SiteContext,
        *,
        template_filter: Callable[[list[str]], list[str]] = filter_templates,
    ) -> None:
        self._filters = filters
        self._site = site
        self._template_filter = template_filter
        self._hierarchy: dict[str, None] = {}
        self._located = ""
        self._phase = Phase.UNRESOLVED

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def located(self) -> str:
        """The first file reported during the sweep, or ``""``."""
        return self._located

    def boot(self) -> None:
        """Attach the overrides and capture filters for every view type."""
        self._filters.add_filter(
            f"{ViewType.FRONTPAGE}_candidates", self.front_page, OVERRIDE_PRIORITY
        )
        self._filters.add_filter(f"{ViewType.SINGLE}_candidates", self.single, OVERRIDE_PRIORITY)

        for view_type in ViewType:
            self._filters.add_filter(f"{view_type}_candidates", self.capture, PRIORITY_LAST)
            self._filters.add_filter(
                f"{view_type}_selected_file", self.record_selected, PRIORITY_LAST
            )

        self._filters.add_filter("template_to_include", self.finalize, PRIORITY_LAST)

    def get_hierarchy(self) -> list[str]:
        """Every candidate seen this request, extension-stripped, first-seen order."""
        return list(self._hierarchy)

    # ------------------------------------------------------------------
    # Candidate overrides
    # ------------------------------------------------------------------

    def front_page(self, candidates: list[str]) -> list[str]:
        """Replace the front-page candidates.

        ``front-page.php`` only ever applies when a static page is on the
        front, and a custom template assigned to that page wins over it.
        When the front shows the latest posts the list is empty.
        """
        if self._site.is_showing_latest_posts_on_front():
            return []

        templates: list[str] = []
        obj = self._site.queried_object()
        if obj is not None:
            custom = self._site.custom_template_for(obj.id)
            if custom:
                templates.append(custom)
        templates.append(FRONT_PAGE_TEMPLATE)
        return templates

    def single(self, candidates: list[str]) -> list[str]:
        """Replace the single-view candidates for any content type."""
        obj = self._site.queried_object()
        if obj is None:
            return [SINGLE_TEMPLATE]

        templates: list[str] = []
        custom = self._site.custom_template_for(obj.id)
        if custom:
            templates.append(custom)
        templates.append(f"single-{obj.content_type}.php")
        templates.append(f"{obj.content_type}.php")
        templates.append(SINGLE_TEMPLATE)
        return templates

    # ------------------------------------------------------------------
    # Capture pipeline
    # ------------------------------------------------------------------

    def capture(self, candidates: list[str]) -> list[str]:
        """Record *candidates* in the hierarchy and return them filtered."""
        if self._phase is Phase.DONE:
            logger.warning("Candidates captured after finalize; hierarchy left unchanged")
        else:
            for name in candidates:
                self._hierarchy.setdefault(strip_extension(name), None)
        return self._template_filter(candidates)

    def record_selected(self, file: str) -> str:
        """Remember the first non-empty *file*; always answer ``""``."""
        if self._phase is Phase.DONE:
            logger.warning("Selected file %r reported after finalize; ignored", file)
        elif self._phase is Phase.UNRESOLVED and file:
            self._located = file
            self._phase = Phase.LOCATED
            logger.debug("Located template %s", file)
        return ""

    def finalize(self, file: str) -> str:
        """Return *file* if something else chose one, else the located file."""
        self._phase = Phase.DONE
        chosen = file or self._located
        logger.debug("Template to include: %s", chosen or "<none>")
        return chosen
