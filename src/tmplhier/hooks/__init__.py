"""Named filter chains ordered by priority."""

from tmplhier.hooks.filters import DEFAULT_PRIORITY, PRIORITY_LAST, FilterRegistry

__all__ = ["DEFAULT_PRIORITY", "PRIORITY_LAST", "FilterRegistry"]
