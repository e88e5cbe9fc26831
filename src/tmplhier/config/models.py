"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, tmplhier.toml only contains overrides.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from tmplhier.domain.templates import DEFAULT_VIEWS_PATH


class ViewsConfig(BaseModel):
    """[views] section."""

    model_config = {"frozen": True}

    path: str = DEFAULT_VIEWS_PATH


class SiteConfig(BaseModel):
    """[site] section."""

    model_config = {"frozen": True}

    show_on_front: Literal["posts", "page"] = "posts"


class ThemeConfig(BaseModel):
    """[theme] section — directories searched for templates, in order."""

    model_config = {"frozen": True}

    roots: list[str] = Field(default_factory=lambda: ["."])


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    enabled: bool = True
    local_dir: str = ".tmplhier/plugins"

