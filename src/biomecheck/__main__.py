# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Allow ``python -m biomecheck``."""

from __future__ import annotations

from .cli import app

if __name__ == "__main__":
    app()
