# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Severity related types and helpers."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Final


class Severity(str, Enum):
    """Severity levels understood by the host diagnostics layer."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


BIOME_SEVERITY_MAP: Final[Mapping[str, Severity]] = {
    "error": Severity.ERROR,
    "fatal": Severity.ERROR,
    "warning": Severity.WARNING,
    "information": Severity.INFO,
    "hint": Severity.INFO,
}


def map_severity(
    label: str | None,
    mapping: Mapping[str, Severity] = BIOME_SEVERITY_MAP,
    default: Severity = Severity.WARNING,
) -> Severity:
    """Return the :class:`Severity` matching a Biome severity ``label``.

    Unrecognised labels degrade to ``default`` instead of failing.

    Args:
        label: Severity label emitted by Biome.
        mapping: Lower-cased label to severity lookup table.
        default: Severity used for unknown or missing labels.

    Returns:
        Severity: Normalised severity.
    """

    if isinstance(label, str):
        return mapping.get(label.strip().lower(), default)
    return default


__all__ = ["BIOME_SEVERITY_MAP", "Severity", "map_severity"]
