# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from biomecheck.process import CommandResult

REPORT_WITH_ERROR = (
    '{"summary": {"errors": 1}, "diagnostics": [{"category": "lint/suspicious/noDebugger", '
    '"severity": "error", "description": "This is an unexpected use of the debugger statement.", '
    '"location": {"path": {"file": "app.js"}, "span": [4, 13]}}]}'
)


@dataclass
class FakeRunner:
    """Record invocations and answer them from canned results."""

    responses: dict[str, CommandResult | Exception] = field(default_factory=dict)
    calls: list[tuple[tuple[str, ...], Path | None]] = field(default_factory=list)

    def __call__(
        self,
        args: Sequence[str],
        *,
        cwd: Path | None = None,
        check: bool = True,
        timeout: float | None = None,
        discard_stdin: bool = False,
    ) -> CommandResult:
        self.calls.append((tuple(args), cwd))
        response = self.responses.get(args[1], CommandResult(tuple(args), 0, "", ""))
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def fake_runner() -> Callable[..., FakeRunner]:
    """Return a factory producing :class:`FakeRunner` instances."""

    def _factory(
        *,
        version: str | Exception | None = "Version: 1.8.3",
        lint: str | Exception = '{"diagnostics": []}',
        lint_returncode: int = 0,
    ) -> FakeRunner:
        responses: dict[str, CommandResult | Exception] = {}
        if isinstance(version, Exception):
            responses["--version"] = version
        elif version is not None:
            responses["--version"] = CommandResult(("biome", "--version"), 0, version, "")
        else:
            responses["--version"] = CommandResult(("biome", "--version"), 1, "", "boom")
        if isinstance(lint, Exception):
            responses["lint"] = lint
        else:
            responses["lint"] = CommandResult(("biome", "lint"), lint_returncode, lint, "")
        return FakeRunner(responses=responses)

    return _factory


@pytest.fixture
def biome_project(tmp_path: Path) -> Path:
    """Create a project with ``biome.json`` and return a source file inside it."""

    (tmp_path / "biome.json").write_text("{}", encoding="utf-8")
    source = tmp_path / "src" / "app.js"
    source.parent.mkdir()
    source.write_text("let a;\ndebugger;\n", encoding="utf-8")
    return source


@pytest.fixture
def report_with_error() -> str:
    """Return a Biome JSON report holding a single error diagnostic."""

    return REPORT_WITH_ERROR
