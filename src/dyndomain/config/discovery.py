"""Locating and reading dyndomain.toml.

The file is found by walking up from the working directory, the way git
finds ``.git/``. ``DYNDOMAIN_CONFIG`` or ``--config`` name it directly.

Only the ``[notation]`` and ``[enumerate]`` tables are read. Any other
top-level key is left out and recorded on the :class:`ConfigOrigin`, so
services can warn about it instead of failing validation.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from dyndomain.config.models import DomainConfig

CONFIG_FILENAME = "dyndomain.toml"
CONFIG_ENV_VAR = "DYNDOMAIN_CONFIG"

SECTIONS: tuple[str, ...] = tuple(DomainConfig.model_fields)


class ConfigOrigin(BaseModel):
    """Which file supplied which config sections.

    Attributes:
        path: The TOML file read, or None when running on defaults.
        sections: Known tables the file overrides, in file order.
        ignored: Top-level keys in the file that are not known tables.
    """

    model_config = {"frozen": True}

    path: Path | None = None
    sections: tuple[str, ...] = ()
    ignored: tuple[str, ...] = ()

    def describe(self) -> dict[str, Any]:
        """Summary for a result's ``meta``; empty when no file was read."""
        if self.path is None:
            return {}
        return {"path": str(self.path), "sections": list(self.sections)}

    def warnings(self) -> list[str]:
        return [f"Ignoring unknown key '{key}' in {self.path}" for key in self.ignored]


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file in effect for *start* (default: cwd).

    ``DYNDOMAIN_CONFIG`` takes precedence over the walk-up; if it names a
    missing file, no config is used.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        path = Path(env_path)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def read_config(path: Path | None) -> tuple[dict[str, Any], ConfigOrigin]:
    """Parse *path* into its known section tables and their origin.

    A missing *path* reads as an empty file.

    Raises:
        tomllib.TOMLDecodeError: If the file is not valid TOML.
    """
    if path is None or not path.is_file():
        return {}, ConfigOrigin()

    raw: dict[str, Any] = tomllib.loads(path.read_text(encoding="utf-8"))
    known = {key: value for key, value in raw.items() if key in SECTIONS}
    origin = ConfigOrigin(
        path=path,
        sections=tuple(known),
        ignored=tuple(key for key in raw if key not in SECTIONS),
    )
    return known, origin


def load_config(path: Path | None = None, cwd: Path | None = None) -> DomainConfig:
    """Validate the config at *path*, or the one discovered from *cwd*.

    Returns the defaults when there is no file.
    """
    if path is None:
        path = find_config(cwd)
    data, _origin = read_config(path)
    return DomainConfig.model_validate(data)
