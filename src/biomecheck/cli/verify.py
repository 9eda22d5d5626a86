# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Verification CLI command rendering the checker's readiness findings."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ..checker import VerificationReport
from ..errors import ConfigError
from ..logging import configure_logging, detect_tty, fail, get_console
from .shared import load_checker


def render_report(report: VerificationReport, path: Path, *, console: Console) -> None:
    """Print ``report`` as a table followed by an overall status panel."""

    table = Table(title=f"{report.checker} verification for {path}", box=box.SIMPLE, expand=True)
    table.add_column("Check", style="bold")
    table.add_column("Status", style="bold")
    table.add_column("Details", overflow="fold")
    for finding in report.findings:
        style = "green" if finding.ok else "red"
        status = "ok" if finding.ok else "missing"
        table.add_row(finding.label, f"[{style}]{status}[/]", finding.message)
    console.print(table)

    overall_style = "green" if report.ok else "red"
    summary = "Checker is ready" if report.ok else "Checker is disabled"
    console.print(Panel(f"[{overall_style}]{summary}[/]", border_style=overall_style))


def verify_command(
    file: Annotated[Path, typer.Argument(resolve_path=True, help="File whose checker setup is verified.")],
    root: Annotated[
        Path | None,
        typer.Option("--root", help="Directory holding pyproject.toml with [tool.biomecheck]."),
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
) -> None:
    """Report executable, configuration and version status for FILE."""

    configure_logging(verbose=verbose)
    try:
        checker = load_checker(root)
    except ConfigError as exc:
        fail(str(exc), use_emoji=False)
        raise typer.Exit(code=2) from exc

    report = checker.verify(file)
    render_report(report, file, console=get_console(color=detect_tty(), emoji=False))
    raise typer.Exit(code=0 if report.ok else 1)


__all__ = ["render_report", "verify_command"]
