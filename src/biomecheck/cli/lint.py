# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Lint CLI command."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Annotated, Final

import typer

from ..checker import BiomeChecker
from ..errors import BiomeCheckError, ConfigError
from ..logging import configure_logging, emoji, fail, ok, warn
from ..models import NormalizedError
from ..parser import line_columns
from ..severity import Severity
from .shared import load_checker

EXIT_ERRORS: Final[int] = 1
EXIT_FAILURE: Final[int] = 2


class ConsoleSink:
    """Diagnostic sink printing ``file:line:col`` entries through ``typer.echo``."""

    def __init__(self, *, use_emoji: bool) -> None:
        self.use_emoji = use_emoji
        self.published: list[NormalizedError] = []

    def publish(self, filename: str, errors: Sequence[NormalizedError]) -> None:
        try:
            source = Path(filename).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError):
            source = ""
        for error, (line, column) in zip(errors, line_columns(source, errors), strict=True):
            marker = emoji("❌ " if error.severity is Severity.ERROR else "⚠️ ", self.use_emoji)
            typer.echo(f"{marker}{filename}:{line}:{column}: {error.severity.value} {error.message}")
        self.published.extend(errors)


def lint_command(
    file: Annotated[Path, typer.Argument(exists=True, dir_okay=False, resolve_path=True, help="File to lint.")],
    root: Annotated[
        Path | None,
        typer.Option("--root", help="Directory holding pyproject.toml with [tool.biomecheck]."),
    ] = None,
    use_emoji: Annotated[bool, typer.Option("--emoji/--no-emoji", help="Decorate output with emoji.")] = True,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
) -> None:
    """Lint FILE with Biome and print normalised diagnostics."""

    configure_logging(verbose=verbose)
    try:
        checker: BiomeChecker = load_checker(root)
    except ConfigError as exc:
        fail(str(exc), use_emoji=use_emoji)
        raise typer.Exit(code=EXIT_FAILURE) from exc

    sink = ConsoleSink(use_emoji=use_emoji)
    try:
        ran = checker.check(file, sink)
    except BiomeCheckError as exc:
        fail(str(exc), use_emoji=use_emoji)
        raise typer.Exit(code=EXIT_FAILURE) from exc

    if not ran:
        warn(
            f"{checker.name} is not available for {file}; run 'biomecheck verify' for details.",
            use_emoji=use_emoji,
        )
        raise typer.Exit(code=0)
    if not sink.published:
        ok(f"No diagnostics reported for {file}", use_emoji=use_emoji)
        raise typer.Exit(code=0)
    has_errors = any(error.severity is Severity.ERROR for error in sink.published)
    raise typer.Exit(code=EXIT_ERRORS if has_errors else 0)


__all__ = ["ConsoleSink", "lint_command"]
