"""Finding plugins and letting them attach filters.

Plugins come from two places: installed distributions advertising the
``tmplhier.plugins`` entry-point group, and ``*.py`` files dropped into a
theme's local plugin directory. A plugin is any object with a
``register_filters`` hook implementation.
"""

from __future__ import annotations

import importlib.util
import inspect
import logging
import sys
from pathlib import Path
from types import ModuleType
from typing import TYPE_CHECKING

import pluggy

from tmplhier.plugins.hookspecs import TmplHookSpec

if TYPE_CHECKING:
    from collections.abc import Iterator

    from tmplhier.hooks.filters import FilterRegistry

PROJECT_NAME = "tmplhier"
ENTRY_POINT_GROUP = "tmplhier.plugins"
LOCAL_MODULE_PREFIX = "tmplhier_local_plugin_"

logger = logging.getLogger(__name__)


def _implements_hooks(candidate: object) -> bool:
    # HookimplMarker("tmplhier") tags decorated functions with ``tmplhier_impl``.
    marker = f"{PROJECT_NAME}_impl"
    return any(
        getattr(getattr(candidate, attr, None), marker, None)
        for attr in dir(candidate)
        if not attr.startswith("_")
    )


def _import_file(path: Path) -> ModuleType | None:
    module_name = LOCAL_MODULE_PREFIX + path.stem
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        logger.warning("Cannot import local plugin %s", path)
        return None
    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except Exception:
        sys.modules.pop(module_name, None)
        logger.warning("Local plugin %s failed to import", path, exc_info=True)
        return None
    return module


def _plugin_classes(module: ModuleType) -> Iterator[type]:
    """Classes defined in *module* itself that implement a hook."""
    for _, cls in inspect.getmembers(module, inspect.isclass):
        if cls.__module__ == module.__name__ and _implements_hooks(cls):
            yield cls


class PluginManager:
    """A pluggy manager restricted to the filter-registration hook."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(TmplHookSpec)

    def discover_and_load(self, *, local_dir: Path | None = None) -> list[str]:
        """Load entry-point plugins, then any in *local_dir*; return all names."""
        self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        self._instantiate_entry_point_classes()
        if local_dir is not None and local_dir.is_dir():
            for path in sorted(local_dir.glob("*.py")):
                if not path.name.startswith("_"):
                    self._load_local(path)
        return self.plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        name = name or type(plugin).__name__
        self._pm.register(plugin, name=name)
        logger.debug("Registered plugin %s", name)

    def plugin_names(self) -> list[str]:
        return [self._pm.get_name(p) or type(p).__name__ for p in self._pm.get_plugins()]

    def register_filters(self, filters: FilterRegistry) -> None:
        """Call every ``register_filters`` implementation against *filters*.

        Implementations run one at a time; a failing plugin is logged and
        skipped so the rest still register.
        """
        for impl in self._pm.hook.register_filters.get_hookimpls():
            try:
                impl.function(filters=filters)
            except Exception:
                logger.warning(
                    "Plugin %s failed to register filters", impl.plugin_name, exc_info=True
                )

    def _load_local(self, path: Path) -> None:
        module = _import_file(path)
        if module is None:
            return
        for cls in _plugin_classes(module):
            try:
                instance = cls()
            except Exception:
                logger.warning("Cannot instantiate %s from %s", cls.__name__, path, exc_info=True)
                continue
            self.register_plugin(instance, name=f"{module.__name__}.{cls.__name__}")

    def _instantiate_entry_point_classes(self) -> None:
        # An entry point may name a class; hooks on an unbound class cannot
        # be dispatched, so swap each one for an instance.
        for plugin in list(self._pm.get_plugins()):
            if not (inspect.isclass(plugin) and _implements_hooks(plugin)):
                continue
            name = self._pm.get_name(plugin) or plugin.__name__
            self._pm.unregister(plugin)
            try:
                self._pm.register(plugin(), name=name)
            except Exception:
                logger.warning("Cannot instantiate entry-point plugin %s", name, exc_info=True)
