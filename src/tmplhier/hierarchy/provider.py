"""Container wiring for the hierarchy resolver."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tmplhier.app import ServiceProvider
from tmplhier.hierarchy.contracts import Hierarchy
from tmplhier.hierarchy.resolver import HierarchyResolver

if TYPE_CHECKING:
    from tmplhier.app import Application
    from tmplhier.hierarchy.contracts import SiteContext

HIERARCHY_ALIAS = "template/hierarchy"
SITE_KEY = "site"
TEMPLATE_FILTER_KEY = "template/filter"


class HierarchyProvider(ServiceProvider):
    """Binds one resolver per application and boots it.

    Expects the application to have ``site`` bound. A ``template/filter``
    binding, when present, replaces the default candidate re-rooting.
    """

    def register(self) -> None:
        self.app.singleton(Hierarchy, _make_resolver)
        self.app.alias(Hierarchy, HIERARCHY_ALIAS)

    def boot(self) -> None:
        self.app.resolve(HIERARCHY_ALIAS).boot()


def _make_resolver(app: Application) -> HierarchyResolver:
    site: SiteContext = app.resolve(SITE_KEY)
    if app.bound(TEMPLATE_FILTER_KEY):
        return HierarchyResolver(
            app.filters, site, template_filter=app.resolve(TEMPLATE_FILTER_KEY)
        )
    return HierarchyResolver(app.filters, site)
