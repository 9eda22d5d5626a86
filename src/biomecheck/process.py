# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Safe wrappers around ``subprocess`` execution."""

from __future__ import annotations

import logging
import shutil

# Bandit: subprocess usage is intentional; the wrapper passes argument lists
# directly and never enables ``shell=True``.
import subprocess  # nosec B404
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Final, Protocol

from .errors import SubprocessExecutionError

LOGGER = logging.getLogger(__name__)

TIMEOUT_RETURNCODE: Final[int] = 124


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Captured outcome of a single synchronous command invocation."""

    args: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str


class CommandRunner(Protocol):
    """Callable contract used to execute commands on behalf of the adapter."""

    def __call__(
        self,
        args: Sequence[str],
        *,
        cwd: Path | None = None,
        check: bool = True,
        timeout: float | None = None,
        discard_stdin: bool = False,
    ) -> CommandResult: ...


def resolve_executable(executable: str) -> str | None:
    """Return the absolute path of ``executable`` or ``None`` when unresolvable."""

    candidate = Path(executable)
    if candidate.is_absolute():
        return str(candidate) if candidate.is_file() else None
    return shutil.which(executable)


def _normalize_args(args: Sequence[str]) -> list[str]:
    if not args:
        msg = "subprocess command requires at least one argument"
        raise ValueError(msg)

    head, *rest = args
    resolved = resolve_executable(head)
    if resolved is None:
        msg = f"Executable '{head}' was not found on PATH"
        raise FileNotFoundError(msg)
    return [resolved, *rest]


def _ensure_text(value: str | bytes | None) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return value.decode(errors="replace")


def run_command(
    args: Sequence[str],
    *,
    cwd: Path | None = None,
    check: bool = True,
    timeout: float | None = None,
    discard_stdin: bool = False,
) -> CommandResult:
    """Execute ``args`` synchronously and capture its textual output.

    Args:
        args: Command and arguments; the first entry is resolved via ``PATH``.
        cwd: Working directory for the command, or ``None`` for the current one.
        check: Raise :class:`SubprocessExecutionError` on a non-zero exit.
        timeout: Optional timeout in seconds. An expired timeout is reported
            with exit status ``124`` rather than raised.
        discard_stdin: Attach ``/dev/null`` to the command's stdin.

    Returns:
        CommandResult: Exit status and captured stdout/stderr text.

    Raises:
        FileNotFoundError: If the executable cannot be resolved.
        SubprocessExecutionError: If ``check`` is true and the command fails.
    """

    normalized = _normalize_args(args)
    LOGGER.debug("Running %s (cwd=%s)", normalized, cwd)
    try:
        # Bandit: commands come from validated configuration; no shell expansion.
        completed = subprocess.run(  # nosec B603
            normalized,
            cwd=str(cwd) if cwd is not None else None,
            check=False,
            capture_output=True,
            text=True,
            errors="replace",
            timeout=timeout,
            stdin=subprocess.DEVNULL if discard_stdin else None,
        )
        result = CommandResult(
            args=tuple(normalized),
            returncode=completed.returncode,
            stdout=_ensure_text(completed.stdout),
            stderr=_ensure_text(completed.stderr),
        )
    except subprocess.TimeoutExpired as exc:
        stderr = _ensure_text(exc.stderr)
        timeout_msg = f"Command timed out after {timeout:.1f}s" if timeout is not None else "Command timed out"
        result = CommandResult(
            args=tuple(normalized),
            returncode=TIMEOUT_RETURNCODE,
            stdout=_ensure_text(exc.stdout),
            stderr=f"{stderr}\n{timeout_msg}" if stderr else timeout_msg,
        )

    if check and result.returncode != 0:
        raise SubprocessExecutionError(normalized, result.returncode, result.stdout, result.stderr)
    return result


__all__ = ["CommandResult", "CommandRunner", "TIMEOUT_RETURNCODE", "resolve_executable", "run_command"]
