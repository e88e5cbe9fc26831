"""Pluggy hook specifications for tmplhier plugins."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from tmplhier.hooks.filters import FilterRegistry

hookspec = pluggy.HookspecMarker("tmplhier")
hookimpl = pluggy.HookimplMarker("tmplhier")


class TmplHookSpec:
    """Hook specifications for the tmplhier plugin system."""

    @hookspec
    def register_filters(self, filters: FilterRegistry) -> None:
        """Attach filter callbacks for the current request.

        Called once per request after the resolver has booted, so plugins
        may add candidates (``{type}_candidates``), post-process the
        hierarchy (``template_hierarchy``), or pick the final template
        (``template_to_include``).
        """
