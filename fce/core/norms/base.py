"""
Norm Inference - Base Types

NormInfo is what the report tables print beside a measured result.
NormCategory is a coarse display grouping; it is deliberately a separate
type from CanonicalSection and the two are never converted into each other.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class NormCategory(str, Enum):
    STRENGTH = "strength"
    ROM      = "rom"
    CARDIO   = "cardio"
    OTHER    = "other"


def _format_value(value: Optional[float]) -> str:
    if value is None:
        return "—"
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.1f}"


@dataclass(frozen=True)
class NormInfo:
    """
    Reference values for one test.

    unit     - "lb", "deg", "bpm", or "" when not applicable
    left     - expected left-side value, None when unknown
    right    - expected right-side value, None when unknown
    category - NormCategory
    """
    unit: str = ""
    left: Optional[float] = None
    right: Optional[float] = None
    category: NormCategory = NormCategory.OTHER

    @property
    def has_values(self) -> bool:
        return self.left is not None or self.right is not None

    def comparison_text(self) -> str:
        """'110.5 (L) | 120.8 (R) lb' style text; empty when no values."""
        if not self.has_values:
            return ""
        text = f"{_format_value(self.left)} (L) | {_format_value(self.right)} (R)"
        return f"{text} {self.unit}" if self.unit else text

    def to_dict(self) -> dict:
        return {
            "unit": self.unit,
            "left": self.left,
            "right": self.right,
            "category": self.category.value,
        }


EMPTY_NORM = NormInfo()
