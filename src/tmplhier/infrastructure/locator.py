"""Template locators — find the first candidate that exists.

INVARIANT: Locators never reorder candidates. The first match in candidate
order wins.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Protocol


class TemplateLocator(Protocol):
    """Resolves a candidate list to a file, or ``""`` when none exists."""

    def locate(self, candidates: list[str]) -> str: ...


class MemoryLocator:
    """Looks candidates up in a fixed set of known template names."""

    def __init__(self, names: Iterable[str]) -> None:
        self._names = frozenset(names)

    def locate(self, candidates: list[str]) -> str:
        for name in candidates:
            if name in self._names:
                return name
        return ""


class DirectoryLocator:
    """Looks candidates up as files under one or more theme roots.

    Each candidate is checked in every root before moving to the next
    candidate, so a specific template in a parent root beats a generic one
    in a child root.
    """

    def __init__(self, roots: Iterable[Path]) -> None:
        self._roots = list(roots)

    def locate(self, candidates: list[str]) -> str:
        for name in candidates:
            if not name:
                continue
            for root in self._roots:
                path = root / name.lstrip("/")
                if path.is_file():
                    return str(path)
        return ""
