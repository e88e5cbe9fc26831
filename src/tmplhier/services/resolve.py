"""ResolveService — run one page-view request through the full pipeline.

Builds a fresh :class:`~tmplhier.app.Application` per call, so resolver
state never leaks between requests.
"""

from __future__ import annotations

import logging
from functools import partial
from typing import TYPE_CHECKING

from tmplhier.app import Application
from tmplhier.domain.content import QueriedObject
from tmplhier.domain.templates import filter_templates
from tmplhier.domain.types import ViewType, sweep_sorted
from tmplhier.hierarchy.contracts import Hierarchy
from tmplhier.hierarchy.helpers import hierarchy
from tmplhier.hierarchy.provider import SITE_KEY, TEMPLATE_FILTER_KEY, HierarchyProvider
from tmplhier.host.loader import PageRequest, TemplateLoader
from tmplhier.host.site import StaticSite
from tmplhier.infrastructure.locator import DirectoryLocator, MemoryLocator, TemplateLocator
from tmplhier.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from tmplhier.config.settings import TmplSettings
    from tmplhier.plugins.manager import PluginManager

logger = logging.getLogger(__name__)


class ResolveService:
    """Resolves the template for described page views."""

    def __init__(self, settings: TmplSettings, *, plugins: PluginManager | None = None) -> None:
        self._settings = settings
        self._plugins = plugins

    def build_application(self, site: StaticSite) -> Application:
        """A booted application for one request against *site*."""
        views_path = self._settings.views.path
        app = Application(plugins=self._plugins)
        app.singleton(SITE_KEY, lambda _app: site)
        app.singleton(
            TEMPLATE_FILTER_KEY, lambda _app: partial(filter_templates, views_path=views_path)
        )
        app.register(HierarchyProvider)
        app.boot()
        return app

    def locator(
        self,
        available: Iterable[str] | None = None,
        theme_dirs: Iterable[Path] | None = None,
    ) -> TemplateLocator:
        """In-memory locator over *available* names, else a directory locator.

        Directories come from *theme_dirs* when given, otherwise from the
        configured theme roots.
        """
        if available is not None:
            return MemoryLocator(filter_templates(list(available), self._settings.views.path))
        if theme_dirs:
            return DirectoryLocator(theme_dirs)
        return DirectoryLocator(self._settings.theme_roots())

    def resolve(
        self,
        view_types: list[ViewType],
        *,
        queried: QueriedObject | None = None,
        custom_template: str | None = None,
        show_on_front: str | None = None,
        available: Iterable[str] | None = None,
        theme_dirs: Iterable[Path] | None = None,
    ) -> ServiceResult:
        """Resolve the template for a request matching *view_types*.

        Args:
            view_types: Types the page view matches; probed in sweep order.
            queried: The content item being viewed, if any.
            custom_template: Author-assigned template for *queried*.
            show_on_front: Overrides the configured ``site.show_on_front``.
            available: Template names (relative to the views directory)
                that exist. When omitted the theme roots are searched.
            theme_dirs: Directories searched instead of the configured roots.
        """
        if custom_template and queried is None:
            return ServiceResult(
                ok=False,
                op="resolve",
                error=ServiceError(
                    code="NO_QUERIED_OBJECT",
                    message="A custom template needs a queried object id",
                ),
            )

        custom_templates = {queried.id: custom_template} if queried and custom_template else {}
        site = StaticSite(
            queried=queried,
            show_on_front=show_on_front or self._settings.site.show_on_front,
            custom_templates=custom_templates,
        )
        app = self.build_application(site)
        request = PageRequest(view_types=view_types, queried_object=queried)
        loader = TemplateLoader(app.filters, self.locator(available, theme_dirs))
        template = loader.load(request)
        resolver = app.resolve(Hierarchy)

        warnings: list[str] = []
        if not template:
            warnings.append("No template matched any candidate")

        logger.debug("Resolved %s to %r", [str(t) for t in view_types], template)
        return ServiceResult(
            ok=True,
            op="resolve",
            data={
                "template": template,
                "phase": str(resolver.phase),
                "view_types": [str(t) for t in sweep_sorted(view_types)],
                "hierarchy": hierarchy(app),
            },
            warnings=warnings,
        )
