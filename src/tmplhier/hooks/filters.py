"""Priority-ordered filter chains keyed by event name.

A filter is a callable that receives a value (plus any extra arguments the
caller supplies) and returns the value to hand to the next filter. Filters
run in ascending priority; filters sharing a priority run in the order they
were added.

Providers and plugins may detach a callback another party attached, such as
the resolver's front-page override, with ``remove_filter``.

INVARIANT: Filter failures propagate. The chain has no error policy of its own.
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from dataclasses import dataclass, field
from itertools import count
from typing import Any

DEFAULT_PRIORITY = 10
PRIORITY_LAST = sys.maxsize

FilterCallback = Callable[..., Any]


@dataclass(frozen=True, order=True)
class _Registration:
    """One callback attached to an event."""

    priority: int
    sequence: int
    callback: FilterCallback = field(compare=False)


class FilterRegistry:
    """Holds the filter chains for one page-view request."""

    def __init__(self) -> None:
        self._filters: dict[str, list[_Registration]] = {}
        self._sequence = count()

    def add_filter(
        self,
        event: str,
        callback: FilterCallback,
        priority: int = DEFAULT_PRIORITY,
    ) -> None:
        """Attach *callback* to *event* at *priority* (lower runs earlier)."""
        chain = self._filters.setdefault(event, [])
        chain.append(_Registration(priority, next(self._sequence), callback))
        chain.sort()

    def remove_filter(
        self,
        event: str,
        callback: FilterCallback,
        priority: int | None = None,
    ) -> bool:
        """Detach *callback* from *event*.

        When *priority* is given only the registration at that priority is
        removed. Returns whether anything was removed.
        """
        chain = self._filters.get(event, [])
        kept = [
            reg
            for reg in chain
            if not (reg.callback == callback and (priority is None or reg.priority == priority))
        ]
        removed = len(kept) != len(chain)
        if kept:
            self._filters[event] = kept
        else:
            self._filters.pop(event, None)
        return removed

    def has_filter(self, event: str) -> bool:
        """Whether any callback is attached to *event*."""
        return bool(self._filters.get(event))

    def apply_filters(self, event: str, value: Any, *args: Any) -> Any:
        """Thread *value* through every callback attached to *event*."""
        for reg in list(self._filters.get(event, ())):
            value = reg.callback(value, *args)
        return value

