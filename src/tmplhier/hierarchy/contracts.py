"""Protocols at the resolver's boundary."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from tmplhier.domain.content import QueriedObject


@runtime_checkable
class Hierarchy(Protocol):
    """A bootable component that exposes the template hierarchy.

    ``get_hierarchy()`` returns template names without file extensions.
    """

    def boot(self) -> None: ...

    def get_hierarchy(self) -> list[str]: ...


class SiteContext(Protocol):
    """What the resolver may ask the host about the current page view."""

    def queried_object(self) -> QueriedObject | None: ...

    def is_showing_latest_posts_on_front(self) -> bool: ...

    def custom_template_for(self, object_id: int) -> str | None: ...
