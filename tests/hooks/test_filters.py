"""Tests for FilterRegistry — priority ordering and chain semantics."""

from __future__ import annotations

import pytest

from tmplhier.hooks.filters import PRIORITY_LAST, FilterRegistry


def _append(tag: str):
    def callback(value: list[str]) -> list[str]:
        return [*value, tag]

    return callback


class TestFilterRegistry:
    def test_no_filters_returns_value(self, filters: FilterRegistry) -> None:
        assert filters.apply_filters("missing", ["x"]) == ["x"]

    def test_lower_priority_runs_first(self, filters: FilterRegistry) -> None:
        filters.add_filter("evt", _append("late"), 20)
        filters.add_filter("evt", _append("early"), 5)
        filters.add_filter("evt", _append("last"), PRIORITY_LAST)
        assert filters.apply_filters("evt", []) == ["early", "late", "last"]

    def test_ties_run_in_registration_order(self, filters: FilterRegistry) -> None:
        for tag in ("a", "b", "c"):
            filters.add_filter("evt", _append(tag))
        assert filters.apply_filters("evt", []) == ["a", "b", "c"]

    def test_extra_args_are_forwarded(self, filters: FilterRegistry) -> None:
        filters.add_filter("evt", lambda value, suffix: value + suffix)
        assert filters.apply_filters("evt", "a", "!") == "a!"

    def test_events_are_independent(self, filters: FilterRegistry) -> None:
        filters.add_filter("one", _append("1"))
        assert filters.apply_filters("two", []) == []

    def test_has_filter(self, filters: FilterRegistry) -> None:
        assert not filters.has_filter("evt")
        filters.add_filter("evt", _append("x"))
        assert filters.has_filter("evt")

    def test_remove_filter(self, filters: FilterRegistry) -> None:
        cb = _append("x")
        filters.add_filter("evt", cb)
        assert filters.remove_filter("evt", cb) is True
        assert not filters.has_filter("evt")
        assert filters.remove_filter("evt", cb) is False

    def test_remove_filter_respects_priority(self, filters: FilterRegistry) -> None:
        cb = _append("x")
        filters.add_filter("evt", cb, 1)
        filters.add_filter("evt", cb, 2)
        assert filters.remove_filter("evt", cb, priority=1) is True
        assert filters.apply_filters("evt", []) == ["x"]

    def test_remove_unknown_event(self, filters: FilterRegistry) -> None:
        assert filters.remove_filter("evt", _append("x")) is False

    def test_remove_bound_method(self, filters: FilterRegistry) -> None:
        class Owner:
            def cb(self, value: int) -> int:
                return value + 1

        owner = Owner()
        filters.add_filter("evt", owner.cb)
        assert filters.remove_filter("evt", owner.cb) is True

    def test_callback_errors_propagate(self, filters: FilterRegistry) -> None:
        def boom(value: object) -> object:
            raise RuntimeError("boom")

        filters.add_filter("evt", boom)
        with pytest.raises(RuntimeError):
            filters.apply_filters("evt", None)
