"""Tests for tmplhier.toml discovery and reading."""

from __future__ import annotations

from pathlib import Path

import click
import pytest

from tmplhier.config.discovery import CONFIG_ENV_VAR, find_config, read_config


@pytest.fixture(autouse=True)
def _no_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


class TestFindConfig:
    def test_finds_in_start_dir(self, tmp_path: Path) -> None:
        cfg = tmp_path / "tmplhier.toml"
        cfg.write_text("")
        assert find_config(tmp_path) == cfg.resolve()

    def test_walks_up(self, tmp_path: Path) -> None:
        cfg = tmp_path / "tmplhier.toml"
        cfg.write_text("")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_config(nested) == cfg.resolve()

    def test_env_var_wins(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        cfg = tmp_path / "elsewhere.toml"
        cfg.write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(cfg))
        assert find_config(tmp_path) == cfg

    def test_env_var_missing_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "missing.toml"))
        assert find_config(tmp_path) is None


class TestReadConfig:
    def test_no_file_is_empty(self, tmp_path: Path) -> None:
        assert read_config(None) == {}
        assert read_config(tmp_path / "missing.toml") == {}

    def test_returns_tables(self, tmp_path: Path) -> None:
        cfg = tmp_path / "tmplhier.toml"
        cfg.write_text('[site]\nshow_on_front = "page"\n')
        assert read_config(cfg) == {"site": {"show_on_front": "page"}}

    def test_malformed_toml_is_usage_error(self, tmp_path: Path) -> None:
        cfg = tmp_path / "tmplhier.toml"
        cfg.write_text("[site\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            read_config(cfg)
