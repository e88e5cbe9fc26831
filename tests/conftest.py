"""Shared pytest fixtures for tmplhier tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from tmplhier.config.settings import TmplSettings
from tmplhier.domain.content import QueriedObject
from tmplhier.hooks.filters import FilterRegistry
from tmplhier.host.site import StaticSite


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def filters() -> FilterRegistry:
    return FilterRegistry()


@pytest.fixture
def book() -> QueriedObject:
    """A singular item of a custom content type."""
    return QueriedObject(id=7, content_type="book", slug="dune")


@pytest.fixture
def static_front_site() -> StaticSite:
    """A site with a static page (id 2) on the front and no custom template."""
    return StaticSite(
        queried=QueriedObject(id=2, content_type="page", slug="home"),
        show_on_front="page",
    )


@pytest.fixture
def project_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolated project directory with no config file and a clean env."""
    monkeypatch.delenv("TMPLHIER_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def settings(project_root: Path) -> TmplSettings:
    return TmplSettings.from_cli(project_root=project_root)


def write_templates(root: Path, *names: str) -> None:
    """Create empty template files under *root*."""
    for name in names:
        path = root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("", encoding="utf-8")
