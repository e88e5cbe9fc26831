"""Tests for TmplSettings — unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from tmplhier.config.settings import TmplSettings


class TestDefaults:
    def test_all_defaults(self, project_root: Path) -> None:
        settings = TmplSettings.from_cli(project_root=project_root)
        assert settings.project_root == project_root
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.views.path == "resources/views"
        assert settings.site.show_on_front == "posts"
        assert settings.theme.roots == ["."]
        assert settings.plugins.local_dir == ".tmplhier/plugins"

    def test_frozen(self, settings: TmplSettings) -> None:
        with pytest.raises(Exception):
            settings.verbose = True  # type: ignore[misc]

    def test_theme_roots_resolve_against_project(self, settings: TmplSettings) -> None:
        assert settings.theme_roots() == [settings.project_root / "."]


class TestTomlSource:
    def test_loads_from_toml(self, project_root: Path) -> None:
        (project_root / "tmplhier.toml").write_text(
            '[views]\npath = "views"\n[theme]\nroots = ["child", "parent"]\n'
        )
        settings = TmplSettings.from_cli(project_root=project_root)
        assert settings.views.path == "views"
        assert settings.theme_roots() == [project_root / "child", project_root / "parent"]
        assert settings.site.show_on_front == "posts"

    def test_project_root_from_config_location(
        self, project_root: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (project_root / "tmplhier.toml").write_text("")
        nested = project_root / "sub"
        nested.mkdir()
        monkeypatch.chdir(nested)
        settings = TmplSettings.from_cli()
        assert settings.project_root.resolve() == project_root.resolve()

    def test_explicit_config_path(self, project_root: Path) -> None:
        custom = project_root / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text('[site]\nshow_on_front = "page"\n')
        settings = TmplSettings.from_cli(config_path=str(custom), project_root=project_root)
        assert settings.site.show_on_front == "page"
        assert settings.config_path == custom

    def test_invalid_toml(self, project_root: Path) -> None:
        (project_root / "tmplhier.toml").write_text("[views\n")
        with pytest.raises(click.ClickException):
            TmplSettings.from_cli(project_root=project_root)

    def test_invalid_value_rejected(self, project_root: Path) -> None:
        (project_root / "tmplhier.toml").write_text('[site]\nshow_on_front = "both"\n')
        with pytest.raises(Exception):
            TmplSettings.from_cli(project_root=project_root)


class TestPriority:
    def test_env_overrides_toml(self, project_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (project_root / "tmplhier.toml").write_text('[views]\npath = "from-toml"\n')
        monkeypatch.setenv("TMPLHIER_VIEWS__PATH", "from-env")
        settings = TmplSettings.from_cli(project_root=project_root)
        assert settings.views.path == "from-env"

    def test_cli_flags_override_env(
        self, project_root: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("TMPLHIER_VERBOSE", "false")
        settings = TmplSettings.from_cli(project_root=project_root, verbose=True)
        assert settings.verbose is True
