"""Scoring criteria model."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ScoringItem(BaseModel):
    """One scoring criterion parsed from a ``<points>: <description>`` line."""

    points: int = Field(..., ge=0)
    description: str
