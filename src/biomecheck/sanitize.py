# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Isolate the JSON payload from Biome's mixed stdout."""

from __future__ import annotations

import re
from typing import Final

ADVISORY_BANNER: Final[str] = (
    "The --json option is unstable/experimental and its output might change between patches/minor releases."
)
LINT_SECTION_MARKER: Final[str] = "lint ━"

_BANNER_PATTERN: Final[re.Pattern[str]] = re.compile(
    rf"{re.escape(ADVISORY_BANNER)}(?P<payload>.*?)(?:{re.escape(LINT_SECTION_MARKER)}|\Z)",
    re.DOTALL,
)


def sanitize_output(text: str) -> str:
    """Return the JSON payload embedded in ``text``.

    When the advisory banner is present the text between it and the next
    lint section marker (or the end of the output) is returned, stripped of
    surrounding whitespace. Output without the banner is returned unchanged.

    Args:
        text: Raw stdout captured from a Biome invocation.

    Returns:
        str: Text expected to hold the JSON document.
    """

    match = _BANNER_PATTERN.search(text)
    if match is None:
        return text
    return match.group("payload").strip()


__all__ = ["ADVISORY_BANNER", "LINT_SECTION_MARKER", "sanitize_output"]
