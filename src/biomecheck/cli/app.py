# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands."""

from __future__ import annotations

import typer

from .lint import lint_command
from .verify import verify_command

app = typer.Typer(help="Run Biome and report normalised diagnostics.", no_args_is_help=True)
app.command("lint")(lint_command)
app.command("verify")(verify_command)

__all__ = ["app"]
