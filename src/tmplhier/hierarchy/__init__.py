"""Template hierarchy resolution — the core of tmplhier.

The resolver attaches itself to the host's filter chains, rewrites the
front-page and single candidate lists, records every candidate the host
considers, and hands back the first template found during the sweep.
"""

from tmplhier.hierarchy.contracts import Hierarchy, SiteContext
from tmplhier.hierarchy.resolver import HierarchyResolver

__all__ = ["Hierarchy", "HierarchyResolver", "SiteContext"]
