# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Explicit checker registration for host integrations."""

from __future__ import annotations

from collections.abc import Iterator

from .checker import BiomeChecker


class CheckerRegistry:
    """Hold checkers registered by host glue at startup."""

    def __init__(self) -> None:
        self._checkers: dict[str, BiomeChecker] = {}

    def register(self, checker: BiomeChecker) -> None:
        """Register ``checker`` under its name, rejecting duplicates."""

        if checker.name in self._checkers:
            raise ValueError(f"Checker '{checker.name}' is already registered")
        self._checkers[checker.name] = checker

    def get(self, name: str) -> BiomeChecker:
        """Return the checker registered as ``name``.

        Raises:
            KeyError: If no checker has that name.
        """

        try:
            return self._checkers[name]
        except KeyError as exc:
            raise KeyError(f"Unknown checker '{name}'") from exc

    def checkers(self) -> Iterator[BiomeChecker]:
        """Yield registered checkers in registration order."""

        yield from self._checkers.values()

    def __contains__(self, name: object) -> bool:
        return name in self._checkers

    def __len__(self) -> int:
        return len(self._checkers)


def register_checker(registry: CheckerRegistry, checker: BiomeChecker | None = None) -> BiomeChecker:
    """Register ``checker`` (a default :class:`BiomeChecker` when omitted) and return it."""

    target = checker if checker is not None else BiomeChecker()
    registry.register(target)
    return target


__all__ = ["CheckerRegistry", "register_checker"]
