"""View type and resolver phase enums."""

from __future__ import annotations

from enum import StrEnum


class ViewType(StrEnum):
    """Kinds of page view the host can render.

    Declaration order is the host's sweep order: when a request matches
    several types, they are probed in this order.
    """

    EMBED = "embed"
    NOT_FOUND = "404"
    SEARCH = "search"
    FRONTPAGE = "frontpage"
    HOME = "home"
    PRIVACY_POLICY = "privacypolicy"
    TAXONOMY = "taxonomy"
    ATTACHMENT = "attachment"
    SINGLE = "single"
    PAGE = "page"
    SINGULAR = "singular"
    CATEGORY = "category"
    TAG = "tag"
    AUTHOR = "author"
    DATE = "date"
    ARCHIVE = "archive"
    PAGED = "paged"
    INDEX = "index"


class Phase(StrEnum):
    """Lifecycle of a resolver within one page-view request."""

    UNRESOLVED = "unresolved"
    LOCATED = "located"
    DONE = "done"


SWEEP_ORDER: tuple[ViewType, ...] = tuple(ViewType)


def sweep_sorted(types: list[ViewType] | tuple[ViewType, ...]) -> list[ViewType]:
    """Return *types* deduplicated and ordered by :data:`SWEEP_ORDER`."""
    return sorted(set(types), key=SWEEP_ORDER.index)
