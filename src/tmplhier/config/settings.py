"""One settings object for the CLI.

Sources, strongest first: keyword arguments (click flags), ``TMPLHIER_*``
environment variables, the ``tmplhier.toml`` table, then model defaults.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from tmplhier.config.discovery import find_config, read_config
from tmplhier.config.models import PluginsConfig, SiteConfig, ThemeConfig, ViewsConfig

# The TOML file chosen by from_cli(), visible to settings_customise_sources()
# only while the model is being built.
_pending = threading.local()


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Top-level tables of a ``tmplhier.toml`` as a settings source."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._table = read_config(toml_path)

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._table.get(field_name), field_name, field_name in self._table

    def __call__(self) -> dict[str, Any]:
        return dict(self._table)


class TmplSettings(BaseSettings):
    """Resolved settings for a tmplhier invocation.

    Attributes:
        project_root: Directory theme roots are relative to. The config
            file's directory, else the working directory.
        config_path: The TOML file that was read, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "TMPLHIER_",
        "env_nested_delimiter": "__",
    }

    project_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    json_output: bool = False
    verbose: bool = False
    log_json: bool = False

    views: ViewsConfig = Field(default_factory=ViewsConfig)
    site: SiteConfig = Field(default_factory=SiteConfig)
    theme: ThemeConfig = Field(default_factory=ThemeConfig)
    plugins: PluginsConfig = Field(default_factory=PluginsConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        toml = TomlSettingsSource(settings_cls, getattr(_pending, "path", None))
        return init_settings, env_settings, toml

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        project_root: Path | None = None,
        **cli_flags: Any,
    ) -> TmplSettings:
        """Build settings for one CLI run.

        An explicit *config_path* that does not exist means "no file"; it
        never falls back to discovery.
        """
        if config_path:
            explicit = Path(config_path)
            toml_path = explicit if explicit.is_file() else None
        else:
            toml_path = find_config(project_root)

        if project_root is None:
            project_root = toml_path.parent if toml_path else Path.cwd()

        _pending.path = toml_path
        try:
            return cls(project_root=project_root, config_path=toml_path, **cli_flags)
        finally:
            _pending.path = None

    def theme_roots(self) -> list[Path]:
        """Theme roots resolved against :attr:`project_root`."""
        return [self.project_root / root for root in self.theme.roots]
