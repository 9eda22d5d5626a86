# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for readiness, verification and lint execution."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pytest

from biomecheck.checker import VERSION_NOT_DETERMINED, BiomeChecker
from biomecheck.config import BiomeCheckConfig
from biomecheck.errors import MalformedOutputError, ToolTimeoutError, ToolUnavailableError
from biomecheck.models import NormalizedError
from biomecheck.sanitize import ADVISORY_BANNER
from biomecheck.severity import Severity


class RecordingSink:
    def __init__(self) -> None:
        self.published: list[tuple[str, list[NormalizedError]]] = []

    def publish(self, filename: str, errors: Sequence[NormalizedError]) -> None:
        self.published.append((filename, list(errors)))


@pytest.fixture
def installed(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("biomecheck.checker.resolve_executable", lambda name: f"/opt/bin/{name}")


@pytest.fixture
def missing(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("biomecheck.checker.resolve_executable", lambda name: None)


@pytest.mark.usefixtures("installed")
def test_is_ready_when_all_conditions_hold(biome_project: Path, fake_runner) -> None:
    checker = BiomeChecker(runner=fake_runner())

    assert checker.is_ready(biome_project)


@pytest.mark.usefixtures("missing")
def test_not_ready_without_executable(biome_project: Path, fake_runner) -> None:
    runner = fake_runner()
    checker = BiomeChecker(runner=runner)

    assert not checker.is_ready(biome_project)
    assert runner.calls == []


@pytest.mark.usefixtures("installed")
@pytest.mark.parametrize("version", [None, "no label here", FileNotFoundError("gone")])
def test_not_ready_without_version(biome_project: Path, fake_runner, version) -> None:
    checker = BiomeChecker(runner=fake_runner(version=version))

    assert not checker.is_ready(biome_project)


@pytest.mark.usefixtures("installed")
def test_not_ready_when_outdated(biome_project: Path, fake_runner) -> None:
    checker = BiomeChecker(config=BiomeCheckConfig(min_version="2.0.0"), runner=fake_runner())

    assert not checker.is_ready(biome_project)


@pytest.mark.usefixtures("installed")
def test_ready_at_exact_minimum(biome_project: Path, fake_runner) -> None:
    checker = BiomeChecker(config=BiomeCheckConfig(min_version="1.8.3"), runner=fake_runner())

    assert checker.is_ready(biome_project)


@pytest.mark.usefixtures("installed")
def test_not_ready_without_config(tmp_path: Path, fake_runner) -> None:
    checker = BiomeChecker(runner=fake_runner())

    assert not checker.is_ready(tmp_path / "app.js")


@pytest.mark.usefixtures("installed")
def test_readiness_is_not_cached(biome_project: Path, fake_runner) -> None:
    runner = fake_runner()
    checker = BiomeChecker(runner=runner)

    assert checker.is_ready(biome_project)
    (biome_project.parent.parent / "biome.json").unlink()
    assert not checker.is_ready(biome_project)
    assert [args for args, _cwd in runner.calls] == [("biome", "--version"), ("biome", "--version")]


@pytest.mark.usefixtures("installed")
def test_verify_reports_success(biome_project: Path, fake_runner) -> None:
    report = BiomeChecker(runner=fake_runner()).verify(biome_project)

    assert report.ok
    assert [finding.label for finding in report.findings] == ["executable", "configuration", "version"]
    assert report.findings[0].message == "Found at /opt/bin/biome"
    assert str(biome_project.parent.parent / "biome.json") in report.findings[1].message
    assert report.findings[2].message == "1.8.3"


@pytest.mark.usefixtures("missing")
def test_verify_reports_every_failure(tmp_path: Path, fake_runner) -> None:
    report = BiomeChecker(runner=fake_runner()).verify(tmp_path / "app.js")

    assert not report.ok
    assert len(report.findings) == 3
    assert not any(finding.ok for finding in report.findings)
    assert report.findings[2].message == VERSION_NOT_DETERMINED


@pytest.mark.usefixtures("installed")
def test_verify_flags_outdated_version(biome_project: Path, fake_runner) -> None:
    checker = BiomeChecker(config=BiomeCheckConfig(min_version="1.9.0"), runner=fake_runner())

    version = checker.verify(biome_project).findings[2]

    assert not version.ok
    assert version.message == "1.8.3 (requires >= 1.9.0)"


def test_build_command(tmp_path: Path) -> None:
    checker = BiomeChecker()

    assert checker.build_command(tmp_path / "app.js") == ["biome", "lint", "--json", str(tmp_path / "app.js")]


def test_run_translates_output_and_uses_project_directory(
    biome_project: Path, fake_runner, report_with_error: str
) -> None:
    runner = fake_runner(lint=f"{ADVISORY_BANNER}\n{report_with_error}", lint_returncode=1)
    checker = BiomeChecker(runner=runner)

    errors = checker.run(biome_project, buffer="app.js")

    assert len(errors) == 1
    error = errors[0]
    assert (error.position, error.end_position) == (5, 14)
    assert error.severity is Severity.ERROR
    assert error.message == "This is an unexpected use of the debugger statement.(lint/suspicious/noDebugger)"
    assert error.checker == "biome"
    assert error.buffer == "app.js"
    assert error.filename == str(biome_project)
    assert runner.calls[-1][1] == biome_project.parent.parent


def test_run_without_markers_uses_host_directory(tmp_path: Path, fake_runner) -> None:
    runner = fake_runner()

    assert BiomeChecker(runner=runner).run(tmp_path / "app.js") == []
    assert runner.calls[-1][1] is None


def test_run_surfaces_malformed_output(biome_project: Path, fake_runner) -> None:
    checker = BiomeChecker(runner=fake_runner(lint="Error: the configuration is invalid"))

    with pytest.raises(MalformedOutputError):
        checker.run(biome_project)


def test_run_anchors_relative_path_to_current_directory(
    biome_project: Path, fake_runner, monkeypatch: pytest.MonkeyPatch, report_with_error: str
) -> None:
    monkeypatch.chdir(biome_project.parent)
    runner = fake_runner(lint=report_with_error, lint_returncode=1)

    errors = BiomeChecker(runner=runner).run("app.js")

    args, cwd = runner.calls[-1]
    assert args[-1] == str(biome_project)
    assert cwd == biome_project.parent.parent
    assert errors[0].filename == str(biome_project)


def test_run_reports_timeout_separately(biome_project: Path, fake_runner) -> None:
    config = BiomeCheckConfig(timeout=5.0)
    checker = BiomeChecker(config=config, runner=fake_runner(lint="", lint_returncode=124))

    with pytest.raises(ToolTimeoutError) as excinfo:
        checker.run(biome_project)
    assert excinfo.value.timeout == 5.0
    assert "timed out after 5.0s" in str(excinfo.value)


def test_run_maps_undecodable_output_to_malformed(biome_project: Path, fake_runner) -> None:
    undecodable = UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")
    checker = BiomeChecker(runner=fake_runner(lint=undecodable))

    with pytest.raises(MalformedOutputError) as excinfo:
        checker.run(biome_project)
    assert "not valid text" in str(excinfo.value)


def test_run_surfaces_missing_executable(biome_project: Path, fake_runner) -> None:
    checker = BiomeChecker(runner=fake_runner(lint=FileNotFoundError("biome")))

    with pytest.raises(ToolUnavailableError):
        checker.run(biome_project)


@pytest.mark.usefixtures("installed")
def test_check_publishes_to_sink(biome_project: Path, fake_runner, report_with_error: str) -> None:
    sink = RecordingSink()
    checker = BiomeChecker(runner=fake_runner(lint=report_with_error, lint_returncode=1))

    assert checker.check(biome_project, sink)
    assert sink.published[0][0] == str(biome_project)
    assert len(sink.published[0][1]) == 1


@pytest.mark.usefixtures("missing")
def test_check_is_silent_when_not_ready(biome_project: Path, fake_runner) -> None:
    sink = RecordingSink()

    assert not BiomeChecker(runner=fake_runner()).check(biome_project, sink)
    assert sink.published == []


@pytest.mark.usefixtures("installed")
def test_check_resolves_relative_path_once(
    biome_project: Path, fake_runner, monkeypatch: pytest.MonkeyPatch, report_with_error: str
) -> None:
    monkeypatch.chdir(biome_project.parent)
    sink = RecordingSink()
    runner = fake_runner(lint=report_with_error, lint_returncode=1)

    assert BiomeChecker(runner=runner).check("app.js", sink)
    assert sink.published[0][0] == str(biome_project)
    assert runner.calls[-1] == (("biome", "lint", "--json", str(biome_project)), biome_project.parent.parent)
