# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Translate Biome JSON reports into normalised host errors."""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from typing import Final, TypeAlias, cast

from pydantic import ValidationError

from .errors import MalformedOutputError
from .models import BiomeDiagnostic, BiomeReport, NormalizedError
from .sanitize import sanitize_output
from .severity import map_severity

LOGGER = logging.getLogger(__name__)

JsonScalar: TypeAlias = str | int | float | bool | None
JsonValue: TypeAlias = "JsonScalar | list[JsonValue] | dict[str, JsonValue]"

_DECODER: Final[json.JSONDecoder] = json.JSONDecoder()


def _first_document(text: str) -> JsonValue:
    """Decode the first JSON document in ``text`` and ignore anything after it."""

    stripped = text.lstrip()
    if not stripped:
        raise MalformedOutputError("no JSON document found", text)
    try:
        document, _end = _DECODER.raw_decode(stripped)
    except json.JSONDecodeError as exc:
        raise MalformedOutputError(f"invalid JSON ({exc.msg} at position {exc.pos})", text) from exc
    return cast(JsonValue, document)


def parse_report(text: str) -> BiomeReport:
    """Decode ``text`` into a :class:`BiomeReport`.

    When the first document is an array, its first element is taken as the
    report.

    Args:
        text: Sanitised Biome stdout.

    Returns:
        BiomeReport: Validated report.

    Raises:
        MalformedOutputError: If the text is not JSON or does not match the
            report schema.
    """

    document = _first_document(text)
    if isinstance(document, list):
        if not document:
            raise MalformedOutputError("top-level array is empty", text)
        document = document[0]
    try:
        return BiomeReport.model_validate(document)
    except ValidationError as exc:
        LOGGER.debug("Biome report failed schema validation: %s", exc)
        raise MalformedOutputError(f"unexpected report schema ({exc.error_count()} error(s))", text) from exc


def normalize_diagnostic(
    diagnostic: BiomeDiagnostic,
    *,
    checker: str,
    buffer: str | None = None,
    filename: str | None = None,
) -> NormalizedError:
    """Return the host error equivalent of a single Biome ``diagnostic``."""

    start, end = diagnostic.location.span
    return NormalizedError(
        position=start + 1,
        end_position=end + 1,
        severity=map_severity(diagnostic.severity),
        message=f"{diagnostic.description}({diagnostic.category})",
        category=diagnostic.category,
        checker=checker,
        filename=filename,
        buffer=buffer,
    )


def translate(
    text: str,
    *,
    checker: str,
    buffer: str | None = None,
    filename: str | None = None,
) -> list[NormalizedError]:
    """Sanitise and parse raw Biome stdout into normalised errors.

    Diagnostics keep the order Biome reported them in.

    Args:
        text: Raw stdout captured from ``biome lint``.
        checker: Identity of the checker owning the errors.
        buffer: Identity of the target buffer, when the host has one.
        filename: Path of the checked file.

    Returns:
        list[NormalizedError]: One error per Biome diagnostic; empty when the
        report is clean.

    Raises:
        MalformedOutputError: If the output cannot be interpreted.
    """

    report = parse_report(sanitize_output(text))
    return [
        normalize_diagnostic(diagnostic, checker=checker, buffer=buffer, filename=filename)
        for diagnostic in report.diagnostics
    ]


def offset_to_line_column(source: str, offset: int) -> tuple[int, int]:
    """Convert a one-based UTF-8 byte ``offset`` into a one-based ``(line, column)``.

    Biome reports spans as byte offsets into the UTF-8 encoded file, while the
    returned column counts characters. Offsets past the end of ``source`` clamp
    to the position after the last character; an offset inside a multi-byte
    character resolves to that character.
    """

    data = source.encode("utf-8")
    index = min(max(offset - 1, 0), len(data))
    preceding = data[:index]
    line = preceding.count(b"\n") + 1
    current = preceding[preceding.rfind(b"\n") + 1 :]
    column = len(current.decode("utf-8", errors="ignore")) + 1
    return line, column


def line_columns(source: str, errors: Sequence[NormalizedError]) -> list[tuple[int, int]]:
    """Return the start ``(line, column)`` of each error in ``errors``."""

    return [offset_to_line_column(source, error.position) for error in errors]


__all__ = [
    "line_columns",
    "normalize_diagnostic",
    "offset_to_line_column",
    "parse_report",
    "translate",
]
