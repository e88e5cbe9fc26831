"""Extension layer — plugin system via pluggy.

Discovery: entry_points (pip-installed) via pluggy setuptools entrypoints,
plus single-file plugins from ``.tmplhier/plugins/``.
INVARIANT: Plugin failures are warnings, never errors.
"""

from tmplhier.plugins.manager import PluginManager

__all__ = ["PluginManager"]
