"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``BUILDLAYOUT_*`` prefix, ``__`` for nesting
  3. TOML file    — ``buildlayout.toml`` discovered via walk-up
  4. Code defaults — baked into :mod:`buildlayout.config.models`
"""

from __future__ import annotations

import os
import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from buildlayout.config.discovery import find_config
from buildlayout.config.models import (
    LayoutConfig,
    ProjectsConfig,
    RepositoryConfig,
    default_repositories,
)


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``buildlayout.toml`` file."""

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


class BuildSettings(BaseSettings):
    """Settings for the buildlayout CLI, frozen after construction.

    Attributes:
        workspace_root: Directory holding ``buildlayout.toml`` (or CWD).
            Relative ``layout.build_dir`` values resolve against it.
        config_path: The TOML file actually loaded, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "BUILDLAYOUT_",
        "env_nested_delimiter": "__",
    }

    workspace_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    repositories: list[RepositoryConfig] = Field(default_factory=default_repositories)
    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    projects: ProjectsConfig = Field(default_factory=ProjectsConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert the TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @property
    def root_output_path(self) -> Path:
        """Absolute build output root, normalized but not symlink-resolved."""
        build_dir = Path(self.layout.build_dir).expanduser()
        if not build_dir.is_absolute():
            build_dir = self.workspace_root.absolute() / build_dir
        return Path(os.path.normpath(build_dir))

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        workspace_root: Path | None = None,
        **cli_flags: Any,
    ) -> BuildSettings:
        """Construct settings for a CLI invocation.

        Discovers ``buildlayout.toml`` via walk-up unless *config_path* is
        given, and derives *workspace_root* from the file's parent.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(workspace_root)

        resolved_root = workspace_root
        if resolved_root is None:
            resolved_root = toml_path.parent if toml_path else Path.cwd()

        _tls.toml_path = toml_path
        try:
            return cls(
                workspace_root=resolved_root,
                config_path=toml_path,
                **cli_flags,
            )
        except ValidationError as exc:
            source = toml_path or "environment"
            problems = "; ".join(
                f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
                for err in exc.errors()
            )
            msg = f"Invalid configuration in {source}: {problems}"
            raise click.ClickException(msg) from exc
        finally:
            _tls.toml_path = None
