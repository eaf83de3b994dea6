"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``PDFSTASH_*`` prefix, ``__`` for nested sections
  3. TOML file    — ``pdfstash.toml`` discovered via walk-up
  4. Code defaults — baked into the section models
"""

from __future__ import annotations

import os
import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from pdfstash.config.models import StoreConfig

CONFIG_FILENAME = "pdfstash.toml"
CONFIG_ENV_VAR = "PDFSTASH_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Locate ``pdfstash.toml`` in *start* (default: cwd) or any parent.

    ``PDFSTASH_CONFIG`` wins when set; a dangling value means no config.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    here = (start or Path.cwd()).resolve()
    for folder in (here, *here.parents):
        candidate = folder / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a discovered ``pdfstash.toml``."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# TOML path handed to settings_customise_sources during construction.
_tls = threading.local()


class StashSettings(BaseSettings):
    """Settings for one pdfstash invocation.

    Attributes:
        config_root: Directory that relative store paths resolve against
            (parent of ``pdfstash.toml``, or CWD if none was found).
        config_path: The config file in effect, if any.
        directory: ``--dir`` override for the managed directory.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "PDFSTASH_",
        "env_nested_delimiter": "__",
    }

    config_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None
    directory: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    store: StoreConfig = Field(default_factory=StoreConfig)

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
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @property
    def store_directory(self) -> Path:
        """The managed directory, with ``~`` expanded and relatives anchored."""
        raw = self.directory if self.directory is not None else Path(self.store.directory)
        path = Path(raw).expanduser()
        if not path.is_absolute():
            path = self.config_root / path
        return path

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> StashSettings:
        """Construct settings from a CLI invocation.

        Uses *config_path* when it names a file, otherwise walks up from
        *start*. CLI flags override everything else. A relative ``directory``
        flag is taken from the invocation directory, not the config file's.
        """
        cwd = start or Path.cwd()
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(start)

        root = toml_path.parent if toml_path else cwd
        flags = {key: value for key, value in cli_flags.items() if value is not None}
        if "directory" in flags:
            flags["directory"] = cwd / Path(flags["directory"]).expanduser()

        _tls.toml_path = toml_path
        try:
            return cls(config_root=root, config_path=toml_path, **flags)
        finally:
            _tls.toml_path = None
