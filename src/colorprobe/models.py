# src/colorprobe/models.py
"""Result models shared by the probes and the decision engine."""

from __future__ import annotations

from enum import Enum
from typing import Iterable, List

from pydantic import BaseModel, Field


class ProbeResult(str, Enum):
    """Tri-state opinion of a single probe about color support."""

    AFFIRMATIVE = "affirmative"
    NEGATIVE = "negative"
    UNKNOWN = "unknown"

    @classmethod
    def from_bool(cls, value: bool) -> ProbeResult:
        return cls.AFFIRMATIVE if value else cls.NEGATIVE

    @property
    def is_known(self) -> bool:
        return self is not ProbeResult.UNKNOWN

    def as_bool(self, default: bool = False) -> bool:
        """Collapse to a boolean, mapping UNKNOWN to ``default``."""
        if self is ProbeResult.UNKNOWN:
            return default
        return self is ProbeResult.AFFIRMATIVE


def resolve(results: Iterable[ProbeResult]) -> bool:
    """Return the first definite answer, or False when none is found.

    Iteration stops at the first known result, so lazily produced
    results after it are never computed.
    """
    for result in results:
        if result.is_known:
            return result.as_bool()
    return False


class ProbeOutcome(BaseModel):
    """Result of one named probe."""

    name: str = Field(..., description="Probe method name")
    result: ProbeResult = Field(..., description="Tri-state probe result")


class ProbeReport(BaseModel):
    """Full diagnostic report of a color support decision."""

    tty: bool = Field(..., description="Output stream is an interactive terminal")
    disabled: bool = Field(..., description="NO_COLOR opt-out is set")
    outcomes: List[ProbeOutcome] = Field(default_factory=list, description="Probe results in chain order")
    supported: bool = Field(..., description="Final decision")
