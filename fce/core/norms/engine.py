"""
Norm Inference Engine

Assigns comparison values to a test by name. Shared by the review API and
the report generator so preview tables and the final PDF print the same
norms.

Rule ordering (first match wins):
    1. Empty name        → no norms
    2. Cardio protocol   → bpm, values taken from the protocol itself
    3. Grip              → 110.5 (L) | 120.8 (R) lb
    4. Pinch             → 85.0 (L) | 90.0 (R) lb
    5. ROM wording       → degrees from ROM_NORM_TABLE, same both sides
    6. Generic strength  → 85.0 (L) | 90.0 (R) lb
    7. Default           → no norms

Grip and pinch come before ROM because pinch names carry "palmar", which is
also wrist ROM wording ("Pinch Strength Palmar").
"""
from __future__ import annotations

from typing import Any, Callable, Optional, Tuple

from fce.core.classification.vocabulary import (
    NORM_CARDIO_PATTERN,
    NORM_ROM_PATTERN,
    NORM_STRENGTH_PATTERN,
)
from fce.utils import get_logger
from .base import EMPTY_NORM, NormCategory, NormInfo
from .rom_table import rom_norm_degrees

logger = get_logger(__name__)

# ── Fixed strength norms (lb) ────────────────────────────────────────────────
GRIP_NORM_LEFT   = 110.5
GRIP_NORM_RIGHT  = 120.8
PINCH_NORM_LEFT  = 85.0
PINCH_NORM_RIGHT = 90.0
STRENGTH_NORM_LEFT  = 85.0
STRENGTH_NORM_RIGHT = 90.0

NormRule = Callable[[str], Optional[NormInfo]]


def rule_empty(name: str) -> Optional[NormInfo]:
    return EMPTY_NORM if not name.strip() else None


def rule_cardio(name: str) -> Optional[NormInfo]:
    if NORM_CARDIO_PATTERN.search(name):
        return NormInfo(unit="bpm", category=NormCategory.CARDIO)
    return None


def rule_grip(name: str) -> Optional[NormInfo]:
    if "grip" in name:
        return NormInfo("lb", GRIP_NORM_LEFT, GRIP_NORM_RIGHT, NormCategory.STRENGTH)
    return None


def rule_pinch(name: str) -> Optional[NormInfo]:
    if "pinch" in name:
        return NormInfo("lb", PINCH_NORM_LEFT, PINCH_NORM_RIGHT, NormCategory.STRENGTH)
    return None


def rule_rom(name: str) -> Optional[NormInfo]:
    if not NORM_ROM_PATTERN.search(name):
        return None
    degrees = rom_norm_degrees(name)
    return NormInfo("deg", degrees, degrees, NormCategory.ROM)


def rule_strength(name: str) -> Optional[NormInfo]:
    if NORM_STRENGTH_PATTERN.search(name):
        return NormInfo("lb", STRENGTH_NORM_LEFT, STRENGTH_NORM_RIGHT, NormCategory.STRENGTH)
    return None


NORM_RULES: Tuple[Tuple[str, NormRule], ...] = (
    ("empty",    rule_empty),
    ("cardio",   rule_cardio),
    ("grip",     rule_grip),
    ("pinch",    rule_pinch),
    ("rom",      rule_rom),
    ("strength", rule_strength),
)


class NormInferencer:
    """
    Maps a test name to its NormInfo.

    Stateless; safe to call from multiple threads / concurrent requests.
    """

    def explain(self, test_name: Any) -> Tuple[NormInfo, str]:
        """Return (norms, rule id). Non-string input is treated as empty."""
        name = test_name.lower() if isinstance(test_name, str) else ""
        for rule_id, rule in NORM_RULES:
            norms = rule(name)
            if norms is not None:
                logger.debug(f"NormInferencer: '{test_name}' -> {norms.category.value} (rule={rule_id})")
                return norms, rule_id
        return EMPTY_NORM, "default"

    def infer(self, test_name: Any) -> NormInfo:
        return self.explain(test_name)[0]

    @staticmethod
    def registered_rules() -> list:
        return [rule_id for rule_id, _ in NORM_RULES]


_default_inferencer = NormInferencer()


def infer_norms(test_name: Any) -> NormInfo:
    """Module-level shortcut for NormInferencer().infer."""
    return _default_inferencer.infer(test_name)
