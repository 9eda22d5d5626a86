# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy raised by the Biome diagnostic adapter."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final

_EXCERPT_LIMIT: Final[int] = 200


class BiomeCheckError(Exception):
    """Base class for failures surfaced by biomecheck."""


class ConfigError(BiomeCheckError):
    """Raised when the ``[tool.biomecheck]`` configuration is invalid."""


class ToolUnavailableError(BiomeCheckError):
    """Raised when the Biome executable cannot be spawned for a lint run."""

    def __init__(self, executable: str, reason: str) -> None:
        super().__init__(f"Biome executable '{executable}' is unavailable: {reason}")
        self.executable = executable
        self.reason = reason


class ToolTimeoutError(BiomeCheckError):
    """Raised when a lint run exceeds the configured timeout."""

    def __init__(self, executable: str, timeout: float | None) -> None:
        limit = f"{timeout:.1f}s" if timeout is not None else "the host limit"
        super().__init__(f"Biome executable '{executable}' timed out after {limit}")
        self.executable = executable
        self.timeout = timeout


class MalformedOutputError(BiomeCheckError):
    """Raised when Biome output cannot be interpreted as a diagnostics report.

    The error is distinct from an empty report so callers can tell a clean
    result apart from a misbehaving tool.
    """

    def __init__(self, reason: str, output: str) -> None:
        excerpt = output.strip()
        if len(excerpt) > _EXCERPT_LIMIT:
            excerpt = f"{excerpt[:_EXCERPT_LIMIT]}…"
        super().__init__(f"Could not interpret Biome output: {reason} (output: {excerpt or '<empty>'})")
        self.reason = reason
        self.output = output


class SubprocessExecutionError(BiomeCheckError, RuntimeError):
    """Raised when a subprocess exits with a non-zero status while ``check`` is true."""

    def __init__(
        self,
        command: Sequence[str],
        returncode: int,
        stdout: str | None,
        stderr: str | None,
    ) -> None:
        super().__init__(
            f"Command '{command[0]}' exited with status {returncode}. stderr: {stderr or '<none>'}",
        )
        self.command = tuple(command)
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr


__all__ = [
    "BiomeCheckError",
    "ConfigError",
    "MalformedOutputError",
    "SubprocessExecutionError",
    "ToolTimeoutError",
    "ToolUnavailableError",
]
