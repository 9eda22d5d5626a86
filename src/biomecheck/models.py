# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Typed schema for Biome's JSON report and the normalised host error model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, model_validator

from .severity import Severity


class BiomeLocation(BaseModel):
    """Location block attached to a Biome diagnostic."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    span: tuple[NonNegativeInt, NonNegativeInt]

    @model_validator(mode="after")
    def _check_span(self) -> BiomeLocation:
        """Reject spans whose end precedes their start."""

        start, end = self.span
        if end < start:
            raise ValueError(f"span end {end} precedes start {start}")
        return self


class BiomeDiagnostic(BaseModel):
    """Capture a single tool-native diagnostic prior to normalisation."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    category: str
    severity: str
    description: str
    location: BiomeLocation


class BiomeReport(BaseModel):
    """Top-level Biome JSON report; only the diagnostics are consumed."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    diagnostics: list[BiomeDiagnostic]


class NormalizedError(BaseModel):
    """Host-facing diagnostic with one-based offsets."""

    model_config = ConfigDict(frozen=True)

    position: int = Field(ge=1)
    end_position: int = Field(ge=1)
    severity: Severity
    message: str
    category: str
    checker: str
    filename: str | None = None
    buffer: str | None = None


__all__ = ["BiomeDiagnostic", "BiomeLocation", "BiomeReport", "NormalizedError"]
