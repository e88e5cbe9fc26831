"""Reference host: the template loader the resolver plugs into.

It reproduces the host's per-request sweep (build candidates, locate, report
the selected file, then pick the template to include) so the resolver can be
driven end to end.
"""

from tmplhier.host.loader import PageRequest, TemplateLoader
from tmplhier.host.site import StaticSite

__all__ = ["PageRequest", "StaticSite", "TemplateLoader"]
