# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Bridge between the Biome linter and host editor diagnostics."""

from __future__ import annotations

from importlib import metadata

from .checker import BiomeChecker, DiagnosticSink, VerificationFinding, VerificationReport
from .config import BiomeCheckConfig, load_config
from .errors import BiomeCheckError, ConfigError, MalformedOutputError, ToolTimeoutError, ToolUnavailableError
from .models import NormalizedError
from .parser import translate
from .registry import CheckerRegistry, register_checker
from .sanitize import sanitize_output
from .severity import Severity
from .versioning import extract_version, is_supported

__all__ = [
    "BiomeCheckConfig",
    "BiomeCheckError",
    "BiomeChecker",
    "CheckerRegistry",
    "ConfigError",
    "DiagnosticSink",
    "MalformedOutputError",
    "NormalizedError",
    "Severity",
    "ToolTimeoutError",
    "ToolUnavailableError",
    "VerificationFinding",
    "VerificationReport",
    "__version__",
    "extract_version",
    "is_supported",
    "load_config",
    "register_checker",
    "sanitize_output",
    "translate",
]

try:
    __version__ = metadata.version("biomecheck")
except metadata.PackageNotFoundError:  # pragma: no cover - local development fallback
    __version__ = "0.0.0"
