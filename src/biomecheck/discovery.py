# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Project marker discovery used to scope Biome invocations."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from enum import Enum
from os import PathLike
from pathlib import Path
from typing import Final

LOGGER = logging.getLogger(__name__)

_Pathish = str | PathLike[str] | Path

PRIMARY_CONFIG: Final[str] = "biome.json"
SECONDARY_CONFIG: Final[str] = "biome.jsonc"
DEPENDENCY_DIR: Final[str] = "node_modules"


class MarkerKind(str, Enum):
    """Kinds of filesystem entries that identify a Biome project root."""

    PRIMARY_CONFIG = "primary-config"
    SECONDARY_CONFIG = "secondary-config"
    DEPENDENCY_DIR = "dependency-dir"


@dataclass(frozen=True, slots=True)
class ProjectContext:
    """Directory discovered for one check together with the marker that justified it."""

    directory: Path
    marker: MarkerKind
    path: Path


def iter_ancestors(path: _Pathish) -> Iterator[Path]:
    """Yield the directory holding ``path`` followed by each parent up to the root.

    Args:
        path: File (or directory) path believed to live inside a project.

    Yields:
        Path: Directories ordered from nearest to the filesystem root.
    """

    candidate = Path(path).expanduser().absolute()
    start = candidate if candidate.is_dir() else candidate.parent
    yield start
    yield from start.parents


def _search(path: _Pathish, markers: Sequence[tuple[str, MarkerKind]]) -> ProjectContext | None:
    for directory in iter_ancestors(path):
        for name, kind in markers:
            marker_path = directory / name
            if marker_path.exists():
                return ProjectContext(directory=directory, marker=kind, path=marker_path)
    return None


def find_project(
    path: _Pathish,
    *,
    primary: str = PRIMARY_CONFIG,
    secondary: str = SECONDARY_CONFIG,
) -> ProjectContext | None:
    """Return the nearest config marker above ``path``.

    The nearest directory wins; inside one directory the secondary config
    name is checked before the primary one.
    """

    return _search(
        path,
        ((secondary, MarkerKind.SECONDARY_CONFIG), (primary, MarkerKind.PRIMARY_CONFIG)),
    )


def locate_config(
    path: _Pathish,
    *,
    primary: str = PRIMARY_CONFIG,
    secondary: str = SECONDARY_CONFIG,
) -> Path | None:
    """Return the full path of the nearest Biome config file, or ``None``."""

    context = find_project(path, primary=primary, secondary=secondary)
    return context.path if context is not None else None


def locate_working_directory(
    path: _Pathish,
    *,
    primary: str = PRIMARY_CONFIG,
    secondary: str = SECONDARY_CONFIG,
    dependency_dir: str = DEPENDENCY_DIR,
) -> ProjectContext | None:
    """Return the directory Biome should be invoked from for ``path``.

    Config files take precedence over the dependency directory: the nearest
    directory holding ``primary`` or ``secondary`` (primary first) is used, and
    only when neither exists anywhere above ``path`` does the nearest
    ``dependency_dir`` apply.

    Args:
        path: File being checked.
        primary: Primary config file name.
        secondary: Secondary config file name.
        dependency_dir: Dependency directory name used as a fallback marker.

    Returns:
        ProjectContext | None: Discovered directory, or ``None`` to let the
        host choose the working directory.
    """

    context = _search(
        path,
        ((primary, MarkerKind.PRIMARY_CONFIG), (secondary, MarkerKind.SECONDARY_CONFIG)),
    )
    if context is None:
        context = _search(path, ((dependency_dir, MarkerKind.DEPENDENCY_DIR),))
    if context is None:
        LOGGER.debug("No project marker found above %s", path)
    return context


__all__ = [
    "DEPENDENCY_DIR",
    "MarkerKind",
    "PRIMARY_CONFIG",
    "ProjectContext",
    "SECONDARY_CONFIG",
    "find_project",
    "iter_ancestors",
    "locate_config",
    "locate_working_directory",
]
