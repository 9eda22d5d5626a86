# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Helpers for capturing and comparing Biome versions."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from packaging.version import Version

from .errors import SubprocessExecutionError
from .process import CommandRunner, run_command

LOGGER = logging.getLogger(__name__)

VERSION_LABEL: Final[str] = "Version:"
VERSION_PATTERN: Final[re.Pattern[str]] = re.compile(rf"{re.escape(VERSION_LABEL)}\s*(\d+\.\d+\.\d+)")
_COMPONENT_COUNT: Final[int] = 3


@dataclass(frozen=True, slots=True, order=True)
class SemanticVersion:
    """Ordered ``major.minor.patch`` triple."""

    major: int
    minor: int
    patch: int

    @classmethod
    def parse(cls, text: str) -> SemanticVersion:
        """Return the triple encoded by ``text``.

        Args:
            text: Version in ``major.minor.patch`` form.

        Returns:
            SemanticVersion: Parsed version triple.

        Raises:
            ValueError: If ``text`` does not hold three integer components.
        """

        parts = text.strip().split(".")
        if len(parts) != _COMPONENT_COUNT:
            raise ValueError(f"expected major.minor.patch, got '{text}'")
        major, minor, patch = (int(part) for part in parts)
        return cls(major, minor, patch)

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


def extract_version(text: str | None) -> str | None:
    """Return the first version following the ``Version:`` label in ``text``.

    Args:
        text: Free-form output captured from ``biome --version``.

    Returns:
        str | None: ``major.minor.patch`` text, or ``None`` when no labelled
        version is present.
    """

    if not text:
        return None
    match = VERSION_PATTERN.search(text)
    return match.group(1) if match else None


def probe_version(
    executable: str,
    *,
    flag: str = "--version",
    cwd: Path | None = None,
    timeout: float | None = None,
    runner: CommandRunner = run_command,
) -> str | None:
    """Run ``executable`` with ``flag`` and return the version it reports.

    A missing executable or failing process is an ordinary outcome and yields
    ``None``.

    Args:
        executable: Command name or absolute path of the Biome binary.
        flag: Version query flag.
        cwd: Optional working directory for the probe.
        timeout: Optional timeout in seconds.
        runner: Process contract used to execute the probe.

    Returns:
        str | None: Reported version text, or ``None`` when undetermined.
    """

    try:
        completed = runner(
            [executable, flag],
            cwd=cwd,
            check=False,
            timeout=timeout,
            discard_stdin=True,
        )
    except (OSError, ValueError, SubprocessExecutionError) as exc:
        LOGGER.debug("Version probe for %s failed: %s", executable, exc)
        return None
    if completed.returncode != 0:
        LOGGER.debug("Version probe for %s exited with %s", executable, completed.returncode)
        return None
    return extract_version(completed.stdout)


def is_supported(installed: str, minimum: str) -> bool:
    """Return whether ``installed`` meets or exceeds ``minimum``.

    Both values must be well-formed ``major.minor.patch`` strings.

    Args:
        installed: Version reported by the tool.
        minimum: Minimum supported version.

    Returns:
        bool: ``True`` when ``installed >= minimum``.
    """

    installed_version = SemanticVersion.parse(installed)
    minimum_version = SemanticVersion.parse(minimum)
    return Version(str(installed_version)) >= Version(str(minimum_version))


__all__ = [
    "SemanticVersion",
    "VERSION_LABEL",
    "VERSION_PATTERN",
    "extract_version",
    "is_supported",
    "probe_version",
]
