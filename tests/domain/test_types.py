"""Tests for view type and phase enums."""

from tmplhier.domain.types import SWEEP_ORDER, Phase, ViewType, sweep_sorted


def test_view_types_are_the_closed_host_set() -> None:
    assert {t.value for t in ViewType} == {
        "404",
        "archive",
        "attachment",
        "author",
        "category",
        "date",
        "embed",
        "frontpage",
        "home",
        "index",
        "page",
        "paged",
        "privacypolicy",
        "search",
        "single",
        "singular",
        "tag",
        "taxonomy",
    }


def test_view_types_are_strings() -> None:
    for member in ViewType:
        assert member == member.value
        assert f"{member}_candidates" == f"{member.value}_candidates"


def test_phases() -> None:
    assert [p.value for p in Phase] == ["unresolved", "located", "done"]


class TestSweepOrder:
    def test_index_is_last(self) -> None:
        assert SWEEP_ORDER[-1] is ViewType.INDEX

    def test_sorts_into_sweep_order(self) -> None:
        assert sweep_sorted([ViewType.SINGULAR, ViewType.SINGLE, ViewType.EMBED]) == [
            ViewType.EMBED,
            ViewType.SINGLE,
            ViewType.SINGULAR,
        ]

    def test_drops_duplicates(self) -> None:
        assert sweep_sorted([ViewType.PAGE, ViewType.PAGE]) == [ViewType.PAGE]

    def test_front_page_before_page(self) -> None:
        assert sweep_sorted([ViewType.PAGE, ViewType.FRONTPAGE]) == [
            ViewType.FRONTPAGE,
            ViewType.PAGE,
        ]
