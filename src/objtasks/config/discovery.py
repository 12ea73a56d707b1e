"""Locate and load ``objtasks.toml``.

Lookup order: the ``OBJTASKS_CONFIG`` env var (exclusive when set), then
the nearest ``objtasks.toml`` in the start directory or any parent.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path

from objtasks.config.models import ObjConfig

CONFIG_FILENAME = "objtasks.toml"
CONFIG_ENV_VAR = "OBJTASKS_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file that applies to *start* (default: cwd), if any."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    origin = (start or Path.cwd()).resolve()
    for directory in (origin, *origin.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def load_config(path: Path | None = None, cwd: Path | None = None) -> ObjConfig:
    """Parse and validate *path*, or the discovered file when *path* is None.

    Falls back to code defaults when no file exists.
    """
    path = path or find_config(cwd)
    if path is None:
        return ObjConfig()
    with path.open("rb") as fh:
        return ObjConfig.model_validate(tomllib.load(fh))
