"""Locating and reading ``tmplhier.toml``.

The nearest ``tmplhier.toml`` at or above the working directory configures a
theme project. ``TMPLHIER_CONFIG`` points at a file explicitly.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

import click

CONFIG_FILENAME = "tmplhier.toml"
CONFIG_ENV_VAR = "TMPLHIER_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Path of the config file governing *start* (default: cwd), or None.

    An explicit ``TMPLHIER_CONFIG`` is honoured only if the file exists;
    it disables the directory walk either way.
    """
    explicit = os.environ.get(CONFIG_ENV_VAR)
    if explicit:
        path = Path(explicit)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def read_config(path: Path | None) -> dict[str, Any]:
    """Raw table of *path*; empty when there is no file.

    Malformed TOML is a usage error, reported through click.
    """
    if path is None or not path.is_file():
        return {}
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise click.ClickException(f"Invalid TOML in {path}: {exc}") from exc
