"""
Test Classification Rules

Each rule reads a ClassificationContext and either claims the test for a
section or returns None. The engine walks CLASSIFICATION_RULES in order and
the first claim wins.

Rule ordering (first match wins):
    1. Explicit category      - category names a section exactly
    2. Cardio                 - protocol names (Bruce, MCAFT, Kasch, YMCA, …)
    3. Occupational tasks     - MTM movement simulations, unless ROM wording
    4. ROM Hand/Foot          - distal body part + movement, in the name
    5. ROM Total Spine/Ext.   - spine or proximal joint + movement, or a ROM id
    6. Strength               - grip/pinch/lift/… or a manual-muscle-test id
    7. Default                - Strength

Cardio sits above occupational and ROM because protocol names collide with
both vocabularies ("step", "treadmill walk"). Reordering this table changes
classification system-wide.
"""
from __future__ import annotations

from typing import Callable, Optional, Tuple

from .base import CanonicalSection, ClassificationContext
from .vocabulary import (
    CARDIO_PATTERN,
    DIRECT_ROM_PATTERN,
    DISTAL_BODY_PART_PATTERN,
    DISTAL_MOVEMENT_PATTERN,
    MUSCLE_TEST_ID_MARKER,
    OCCUPATIONAL_PATTERN,
    PROXIMAL_JOINT_PATTERN,
    ROM_WORDING_PATTERN,
    SPINE_EXTREMITY_MOVEMENT_PATTERN,
    SPINE_REGION_PATTERN,
    STRENGTH_PATTERN,
)

Rule = Callable[[ClassificationContext], Optional[CanonicalSection]]


def _is_muscle_test(ctx: ClassificationContext) -> bool:
    return MUSCLE_TEST_ID_MARKER in ctx.test_id


# ── Rule 1: Explicit category ────────────────────────────────────────────────

def rule_explicit_category(ctx: ClassificationContext) -> Optional[CanonicalSection]:
    """Upstream data that already names a section short-circuits the heuristics."""
    return CanonicalSection.from_label(ctx.category)


# ── Rule 2: Cardio ───────────────────────────────────────────────────────────

def rule_cardio(ctx: ClassificationContext) -> Optional[CanonicalSection]:
    if CARDIO_PATTERN.search(ctx.search_target):
        return CanonicalSection.CARDIO
    return None


# ── Rule 3: Occupational tasks ───────────────────────────────────────────────

def rule_occupational(ctx: ClassificationContext) -> Optional[CanonicalSection]:
    """
    MTM-style movement simulations (fingering, reach, stoop, ladder, …).

    Skipped when the same text also carries ROM wording: "Reach Flexion" is a
    range-of-motion test, not a task simulation.
    """
    text = ctx.id_and_name
    if not OCCUPATIONAL_PATTERN.search(text):
        return None
    if ROM_WORDING_PATTERN.search(text):
        return None
    return CanonicalSection.OCCUPATIONAL_TASKS


# ── Rule 4: ROM Hand/Foot ────────────────────────────────────────────────────

def rule_rom_hand_foot(ctx: ClassificationContext) -> Optional[CanonicalSection]:
    """
    Distal-extremity ROM. Both tokens must appear in the test name itself;
    ids alone are too easy to match by accident.
    """
    if _is_muscle_test(ctx):
        return None
    if DISTAL_BODY_PART_PATTERN.search(ctx.name) and DISTAL_MOVEMENT_PATTERN.search(ctx.name):
        return CanonicalSection.ROM_HAND_FOOT
    return None


# ── Rule 5: ROM Total Spine/Extremity ────────────────────────────────────────

def rule_rom_spine_extremity(ctx: ClassificationContext) -> Optional[CanonicalSection]:
    """
    Spine or proximal-joint ROM.

    Manual muscle tests name a joint and a movement too ("Shoulder Flexion"
    with id shoulder-muscle-flexion) but are strength tests, so their ids
    only qualify through an explicit rom/goniometer marker.
    """
    text = ctx.id_and_name
    if not _is_muscle_test(ctx) and SPINE_EXTREMITY_MOVEMENT_PATTERN.search(text):
        if SPINE_REGION_PATTERN.search(text) or PROXIMAL_JOINT_PATTERN.search(text):
            return CanonicalSection.ROM_SPINE_EXTREMITY

    if DIRECT_ROM_PATTERN.search(ctx.test_id) or DIRECT_ROM_PATTERN.search(ctx.category_text):
        return CanonicalSection.ROM_SPINE_EXTREMITY
    return None


# ── Rule 6: Strength ─────────────────────────────────────────────────────────

def rule_strength(ctx: ClassificationContext) -> Optional[CanonicalSection]:
    if _is_muscle_test(ctx) or STRENGTH_PATTERN.search(ctx.id_and_name):
        return CanonicalSection.STRENGTH
    return None


# ── Public interface ─────────────────────────────────────────────────────────

DEFAULT_SECTION = CanonicalSection.STRENGTH
DEFAULT_RULE_ID = "default"

CLASSIFICATION_RULES: Tuple[Tuple[str, Rule], ...] = (
    ("explicit-category",   rule_explicit_category),    # Priority 1
    ("cardio",              rule_cardio),               # Priority 2
    ("occupational",        rule_occupational),         # Priority 3
    ("rom-hand-foot",       rule_rom_hand_foot),        # Priority 4
    ("rom-spine-extremity", rule_rom_spine_extremity),  # Priority 5
    ("strength",            rule_strength),             # Priority 6
)


def evaluate_rules(ctx: ClassificationContext) -> Tuple[CanonicalSection, str]:
    """
    Walk the cascade and return (section, rule id). Falls through to
    Strength / "default" when nothing claims the test.
    """
    for rule_id, rule in CLASSIFICATION_RULES:
        section = rule(ctx)
        if section is not None:
            return section, rule_id
    return DEFAULT_SECTION, DEFAULT_RULE_ID
