# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration model and loader for the Biome adapter."""

from __future__ import annotations

import os
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .discovery import DEPENDENCY_DIR, PRIMARY_CONFIG, SECONDARY_CONFIG
from .errors import ConfigError
from .versioning import SemanticVersion

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "biomecheck"
EXECUTABLE_ENV_VAR: Final[str] = "BIOMECHECK_EXECUTABLE"
DEFAULT_MIN_VERSION: Final[str] = "1.6.0"


class BiomeCheckConfig(BaseModel):
    """Settings controlling how Biome is located, gated and invoked."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    executable: str = "biome"
    version_flag: str = "--version"
    min_version: str = DEFAULT_MIN_VERSION
    subcommand: str = "lint"
    reporter_flag: str = "--json"
    primary_config: str = PRIMARY_CONFIG
    secondary_config: str = SECONDARY_CONFIG
    dependency_dir: str = DEPENDENCY_DIR
    timeout: float | None = Field(default=None, gt=0)
    checker_name: str = "biome"

    @field_validator("min_version")
    @classmethod
    def _validate_min_version(cls, value: str) -> str:
        """Ensure the minimum version is a ``major.minor.patch`` triple."""

        return str(SemanticVersion.parse(value))

    @field_validator("executable", "subcommand", "checker_name")
    @classmethod
    def _require_text(cls, value: str) -> str:
        """Reject blank command fragments."""

        if not value.strip():
            raise ValueError("value must not be blank")
        return value


def _read_pyproject(path: Path) -> Mapping[str, Any]:
    if not path.is_file():
        return {}
    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc
    tool_section = data.get(PYPROJECT_TOOL_KEY)
    if not isinstance(tool_section, Mapping):
        return {}
    section = tool_section.get(PYPROJECT_SECTION_KEY)
    if section is None:
        return {}
    if not isinstance(section, Mapping):
        raise ConfigError(f"[{PYPROJECT_TOOL_KEY}.{PYPROJECT_SECTION_KEY}] in {path} must be a table")
    return {str(key).replace("-", "_"): value for key, value in section.items()}


def load_config(root: Path | None = None, *, env: Mapping[str, str] | None = None) -> BiomeCheckConfig:
    """Load configuration from ``pyproject.toml`` under ``root`` and the environment.

    Precedence is defaults, then ``[tool.biomecheck]``, then the
    ``BIOMECHECK_EXECUTABLE`` environment variable.

    Args:
        root: Directory holding ``pyproject.toml``; defaults to the current directory.
        env: Environment mapping; defaults to :data:`os.environ`.

    Returns:
        BiomeCheckConfig: Validated configuration.

    Raises:
        ConfigError: If the configuration cannot be parsed or validated.
    """

    base = root if root is not None else Path.cwd()
    environment = env if env is not None else os.environ
    payload: dict[str, Any] = dict(_read_pyproject(base / PYPROJECT_FILENAME))
    if executable := environment.get(EXECUTABLE_ENV_VAR):
        payload["executable"] = executable
    try:
        return BiomeCheckConfig.model_validate(payload)
    except ValidationError as exc:
        raise ConfigError(f"Invalid biomecheck configuration: {exc}") from exc


__all__ = [
    "BiomeCheckConfig",
    "DEFAULT_MIN_VERSION",
    "EXECUTABLE_ENV_VAR",
    "PYPROJECT_FILENAME",
    "load_config",
]
