"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``DYNDOMAIN_*`` prefix, ``__`` between section and key
  3. TOML file    — the ``[notation]`` / ``[enumerate]`` tables of
     ``dyndomain.toml``
  4. Code defaults — baked into the section models

Sources merge per key, so ``--separator`` on the command line overrides
only ``notation.separator`` and leaves the rest of the file in effect.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from dyndomain.config.discovery import ConfigOrigin, find_config, read_config
from dyndomain.config.models import EnumerateConfig, NotationConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Serve section tables already read from ``dyndomain.toml``."""

    def __init__(self, settings_cls: type[BaseSettings], sections: dict[str, Any]) -> None:
        super().__init__(settings_cls)
        self._sections = sections

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        return self._sections.get(field_name), field_name, field_name in self._sections

    def __call__(self) -> dict[str, Any]:
        return self._sections


# Section tables for the settings object under construction.
_tls = threading.local()


class DomainSettings(BaseSettings):
    """Unified settings for the dyndomain CLI.

    Attributes:
        config_origin: The file read and the sections it supplied.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "DYNDOMAIN_",
        "env_nested_delimiter": "__",
    }

    config_origin: ConfigOrigin = Field(default_factory=ConfigOrigin)

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    notation: NotationConfig = Field(default_factory=NotationConfig)
    enumerate: EnumerateConfig = Field(default_factory=EnumerateConfig)

    @property
    def config_path(self) -> Path | None:
        """The TOML file actually loaded, or None."""
        return self.config_origin.path

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, getattr(_tls, "sections", {})),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        cwd: Path | None = None,
        separator: str | None = None,
        **cli_flags: Any,
    ) -> DomainSettings:
        """Construct settings from CLI invocation.

        Discovers ``dyndomain.toml`` via walk-up from *cwd* (or uses an
        explicit *config_path*). *separator* overrides ``[notation]``.

        Raises:
            click.ClickException: If the config file is not valid TOML or
                its values fail validation.
        """
        if config_path:
            toml_path: Path | None = Path(config_path)
        else:
            toml_path = find_config(cwd)

        try:
            sections, origin = read_config(toml_path)
        except tomllib.TOMLDecodeError as exc:
            msg = f"Invalid TOML in {toml_path}: {exc}"
            raise click.ClickException(msg) from exc

        if separator is not None:
            cli_flags["notation"] = {"separator": separator}

        _tls.sections = sections
        try:
            return cls(config_origin=origin, **cli_flags)
        except ValidationError as exc:
            where = origin.path or "settings"
            problems = "; ".join(
                f"{'.'.join(map(str, err['loc']))}: {err['msg']}" for err in exc.errors()
            )
            raise click.ClickException(f"Invalid configuration in {where}: {problems}") from exc
        finally:
            _tls.sections = {}
