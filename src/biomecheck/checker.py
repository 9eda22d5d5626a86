# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Readiness, verification and lint execution for the Biome checker."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import Final, Protocol

from .config import BiomeCheckConfig
from .discovery import ProjectContext, find_project, locate_working_directory
from .errors import MalformedOutputError, ToolTimeoutError, ToolUnavailableError
from .models import NormalizedError
from .parser import translate
from .process import TIMEOUT_RETURNCODE, CommandRunner, resolve_executable, run_command
from .versioning import is_supported, probe_version

LOGGER = logging.getLogger(__name__)

_Pathish = str | PathLike[str] | Path

VERSION_NOT_DETERMINED: Final[str] = "not determined"


def _absolute(path: _Pathish) -> Path:
    return Path(path).expanduser().absolute()


class DiagnosticSink(Protocol):
    """Host component receiving normalised errors for a file."""

    def publish(self, filename: str, errors: Sequence[NormalizedError]) -> None:
        """Associate ``errors`` with ``filename`` for display."""


@dataclass(frozen=True, slots=True)
class VerificationFinding:
    """One labelled line of the verification report."""

    label: str
    message: str
    ok: bool


@dataclass(frozen=True, slots=True)
class VerificationReport:
    """Executable, configuration and version findings for one file."""

    checker: str
    findings: tuple[VerificationFinding, ...]

    @property
    def ok(self) -> bool:
        """Return ``True`` when every finding succeeded."""

        return all(finding.ok for finding in self.findings)


@dataclass(slots=True)
class BiomeChecker:
    """Bridge between the Biome CLI and a host diagnostics layer.

    Nothing is cached: every readiness check and run probes the filesystem
    and the executable afresh.
    """

    config: BiomeCheckConfig = field(default_factory=BiomeCheckConfig)
    runner: CommandRunner = run_command

    @property
    def name(self) -> str:
        """Return the checker identity attached to produced errors."""

        return self.config.checker_name

    def executable_path(self) -> str | None:
        """Return the resolved executable path, or ``None`` when it is missing."""

        return resolve_executable(self.config.executable)

    def installed_version(self) -> str | None:
        """Return the installed Biome version, or ``None`` when undetermined."""

        return probe_version(
            self.config.executable,
            flag=self.config.version_flag,
            timeout=self.config.timeout,
            runner=self.runner,
        )

    def find_project(self, path: _Pathish) -> ProjectContext | None:
        """Return the config marker governing ``path``."""

        return find_project(
            path,
            primary=self.config.primary_config,
            secondary=self.config.secondary_config,
        )

    def working_directory(self, path: _Pathish) -> Path | None:
        """Return the directory Biome should run from, or ``None`` for the host default."""

        context = locate_working_directory(
            path,
            primary=self.config.primary_config,
            secondary=self.config.secondary_config,
            dependency_dir=self.config.dependency_dir,
        )
        return context.directory if context is not None else None

    def is_ready(self, path: _Pathish) -> bool:
        """Return whether Biome can lint ``path``.

        Requires a resolvable executable, a detectable version that meets the
        configured minimum, and a Biome config above ``path``.
        """

        if self.executable_path() is None:
            LOGGER.debug("%s disabled: executable '%s' not found", self.name, self.config.executable)
            return False
        version = self.installed_version()
        if version is None:
            LOGGER.debug("%s disabled: version could not be determined", self.name)
            return False
        if not is_supported(version, self.config.min_version):
            LOGGER.debug("%s disabled: version %s < %s", self.name, version, self.config.min_version)
            return False
        if self.find_project(path) is None:
            LOGGER.debug("%s disabled: no Biome config above %s", self.name, path)
            return False
        return True

    def verify(self, path: _Pathish) -> VerificationReport:
        """Return executable, config and version findings for ``path``."""

        executable = self.executable_path()
        if executable is not None:
            executable_finding = VerificationFinding("executable", f"Found at {executable}", ok=True)
        else:
            executable_finding = VerificationFinding(
                "executable",
                f"'{self.config.executable}' not found",
                ok=False,
            )

        project = self.find_project(path)
        if project is not None:
            config_finding = VerificationFinding("configuration", f"Found at {project.path}", ok=True)
        else:
            config_finding = VerificationFinding("configuration", "No Biome config found", ok=False)

        version = self.installed_version() if executable is not None else None
        if version is None:
            version_finding = VerificationFinding("version", VERSION_NOT_DETERMINED, ok=False)
        elif is_supported(version, self.config.min_version):
            version_finding = VerificationFinding("version", version, ok=True)
        else:
            version_finding = VerificationFinding(
                "version",
                f"{version} (requires >= {self.config.min_version})",
                ok=False,
            )

        return VerificationReport(
            checker=self.name,
            findings=(executable_finding, config_finding, version_finding),
        )

    def build_command(self, path: _Pathish) -> list[str]:
        """Return the Biome lint command for ``path``."""

        return [
            self.config.executable,
            self.config.subcommand,
            self.config.reporter_flag,
            str(path),
        ]

    def run(self, path: _Pathish, *, buffer: str | None = None) -> list[NormalizedError]:
        """Lint ``path`` and return its normalised errors.

        Relative paths are anchored to the current directory before Biome is
        started from the project directory. Biome exits non-zero when it
        reports errors, so the exit status is not treated as a failure; only
        the captured stdout decides the outcome.

        Raises:
            ToolUnavailableError: If the executable cannot be spawned.
            ToolTimeoutError: If the run exceeds the configured timeout.
            MalformedOutputError: If stdout cannot be interpreted.
        """

        target = _absolute(path)
        command = self.build_command(target)
        cwd = self.working_directory(target)
        try:
            completed = self.runner(
                command,
                cwd=cwd,
                check=False,
                timeout=self.config.timeout,
                discard_stdin=True,
            )
        except UnicodeDecodeError as exc:
            raise MalformedOutputError(f"output is not valid text ({exc.reason})", "") from exc
        except OSError as exc:
            raise ToolUnavailableError(self.config.executable, str(exc)) from exc
        if completed.returncode == TIMEOUT_RETURNCODE:
            raise ToolTimeoutError(self.config.executable, self.config.timeout)
        LOGGER.debug("%s exited with %s for %s", self.name, completed.returncode, target)
        return translate(completed.stdout, checker=self.name, buffer=buffer, filename=str(target))

    def check(self, path: _Pathish, sink: DiagnosticSink, *, buffer: str | None = None) -> bool:
        """Run the checker for ``path`` when ready and publish results to ``sink``.

        Returns:
            bool: ``False`` when the checker is disabled for ``path``.

        Raises:
            ToolUnavailableError: If the executable disappears between the
                readiness check and the run.
            ToolTimeoutError: If the run exceeds the configured timeout.
            MalformedOutputError: If Biome output cannot be interpreted.
        """

        target = _absolute(path)
        if not self.is_ready(target):
            return False
        sink.publish(str(target), self.run(target, buffer=buffer))
        return True


__all__ = [
    "BiomeChecker",
    "DiagnosticSink",
    "VERSION_NOT_DETERMINED",
    "VerificationFinding",
    "VerificationReport",
]
