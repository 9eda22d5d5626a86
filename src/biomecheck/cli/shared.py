# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Helpers shared by CLI commands."""

from __future__ import annotations

from pathlib import Path

from ..checker import BiomeChecker
from ..config import load_config


def load_checker(root: Path | None) -> BiomeChecker:
    """Return a checker configured from ``root`` (or the current directory)."""

    return BiomeChecker(config=load_config(root))


__all__ = ["load_checker"]
