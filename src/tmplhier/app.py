"""Application — the per-request service container.

Every page-view request gets its own Application, and with it its own
filter registry and resolver. Services are registered as lazy singletons
keyed by a contract type or a string; providers register services and then
boot them once everything is registered.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from tmplhier.hooks.filters import FilterRegistry

if TYPE_CHECKING:
    from tmplhier.plugins.manager import PluginManager

Factory = Callable[["Application"], Any]

logger = logging.getLogger(__name__)


class ContainerError(KeyError):
    """Raised when resolving a key nothing was registered under."""


class ServiceProvider:
    """Registers services on an :class:`Application` and boots them."""

    def __init__(self, app: Application) -> None:
        self.app = app

    def register(self) -> None:
        """Bind services into the container."""

    def boot(self) -> None:
        """Run after every provider has registered."""


class Application:
    """A minimal singleton container bound to one request."""

    def __init__(self, *, plugins: PluginManager | None = None) -> None:
        self.filters = FilterRegistry()
        self._plugins = plugins
        self._factories: dict[Any, Factory] = {}
        self._instances: dict[Any, Any] = {}
        self._aliases: dict[str, Any] = {}
        self._providers: list[ServiceProvider] = []
        self._booted = False

    def singleton(self, key: Any, factory: Factory) -> None:
        """Bind *key* to *factory*; it is called at most once."""
        self._factories[key] = factory
        self._instances.pop(key, None)

    def alias(self, key: Any, name: str) -> None:
        """Make *name* resolve to the same instance as *key*."""
        self._aliases[name] = key

    def bound(self, key: Any) -> bool:
        return self._aliases.get(key, key) in self._factories

    def resolve(self, key: Any) -> Any:
        """Return the single instance bound to *key* (or an alias of it)."""
        key = self._aliases.get(key, key)
        if key in self._instances:
            return self._instances[key]
        try:
            factory = self._factories[key]
        except KeyError:
            raise ContainerError(key) from None
        instance = factory(self)
        self._instances[key] = instance
        return instance

    def register(self, provider_cls: type[ServiceProvider]) -> ServiceProvider:
        """Instantiate and register a provider."""
        provider = provider_cls(self)
        provider.register()
        self._providers.append(provider)
        if self._booted:
            provider.boot()
        return provider

    def boot(self) -> None:
        """Boot every provider, then let plugins attach their filters."""
        if self._booted:
            return
        for provider in self._providers:
            provider.boot()
        if self._plugins is not None:
            self._plugins.register_filters(self.filters)
        self._booted = True
        logger.debug("Application booted with %d providers", len(self._providers))
