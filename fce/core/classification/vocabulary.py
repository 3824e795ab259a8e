"""
Keyword Vocabulary

Every keyword the classifier and the norm engine match against. All
classification behaviour is a function of these tuples plus rule order, so
they live here as immutable module-level constants for review.

Patterns are case-insensitive. `word_pattern` matches whole words (hyphens
count as word breaks, so "reach" matches "reach-overhead"); `substring_pattern`
matches anywhere.
"""
from __future__ import annotations

import re
from typing import Iterable, Pattern, Tuple


def _validated(keywords: Iterable[str]) -> Tuple[str, ...]:
    terms = tuple(keywords)
    if not terms:
        raise ValueError("keyword family must not be empty")
    for term in terms:
        if not term or not term.strip():
            raise ValueError("vocabulary entries must be non-empty")
    return terms


def word_pattern(keywords: Iterable[str], *, prefixes: Iterable[str] = ()) -> Pattern[str]:
    """
    Compile a whole-word alternation.

    `keywords` are used verbatim (they may contain regex, e.g. `straight[- ]leg`).
    `prefixes` match at a word start and may run on, so "dorsi" covers
    "dorsiflexion".
    """
    terms = list(_validated(keywords))
    prefix_terms = tuple(prefixes)
    if prefix_terms:
        terms.extend(rf"{p}\w*" for p in _validated(prefix_terms))
    return re.compile(r"\b(?:" + "|".join(terms) + r")\b", re.IGNORECASE)


def substring_pattern(keywords: Iterable[str]) -> Pattern[str]:
    """Compile a plain containment alternation (keywords are escaped)."""
    terms = _validated(keywords)
    return re.compile("|".join(re.escape(t) for t in terms), re.IGNORECASE)


# ── Classifier families ──────────────────────────────────────────────────────

CARDIO_KEYWORDS = (
    "bruce", "treadmill", "cardio", "mcaft", "kasch", "step-test", "aerobic",
    "heart", "pulse", "ymca", "vo2", "cardiovascular",
)

OCCUPATIONAL_KEYWORDS = (
    "fingering", "handling", "reach", "balance", "stoop", "walk", "crouch",
    "crawl", "climb", "kneel", "ladder", "push", "pull", "cart", "carry",
    "occupational", "mtm",
)

# ROM wording that overrides an occupational match on the same text
ROM_WORDING_KEYWORDS = (
    "flexion", "extension", "abduction", "adduction", "rom", "range", "motion",
)

DISTAL_BODY_PART_KEYWORDS = (
    "hand", "foot", "finger", "thumb", "wrist", "ankle", "digit", "toe",
    "dip", "pip", "mp",
)

DISTAL_MOVEMENT_KEYWORDS = (
    "flexion", "extension", "abduction", "adduction", "rotation", "range",
    "rom", "deviation", "eversion", "inversion",
)
DISTAL_MOVEMENT_PREFIXES = ("dorsi", "plantar")

SPINE_REGION_KEYWORDS = ("cervical", "lumbar", "thoracic", "spine", "back")

PROXIMAL_JOINT_KEYWORDS = ("shoulder", "hip", "knee", "elbow")

SPINE_EXTREMITY_MOVEMENT_KEYWORDS = (
    "flexion", "extension", "hyperextension", "abduction", "adduction",
    "rotation", "lateral", "range", "rom", "motion", "pronation",
    "supination", "deviation", r"straight[- ]leg[- ]raise",
)

DIRECT_ROM_KEYWORDS = ("rom", "goniometer", "goniometric")

STRENGTH_KEYWORDS = (
    "grip", "pinch", "lift", "strength", "force", "mvic", "mve", "static",
    "dynamic",
)

MUSCLE_TEST_ID_MARKER = "muscle-"


CARDIO_PATTERN = word_pattern(CARDIO_KEYWORDS)
OCCUPATIONAL_PATTERN = word_pattern(OCCUPATIONAL_KEYWORDS)
ROM_WORDING_PATTERN = word_pattern(ROM_WORDING_KEYWORDS)
DISTAL_BODY_PART_PATTERN = word_pattern(DISTAL_BODY_PART_KEYWORDS)
DISTAL_MOVEMENT_PATTERN = word_pattern(DISTAL_MOVEMENT_KEYWORDS, prefixes=DISTAL_MOVEMENT_PREFIXES)
SPINE_REGION_PATTERN = word_pattern(SPINE_REGION_KEYWORDS)
PROXIMAL_JOINT_PATTERN = word_pattern(PROXIMAL_JOINT_KEYWORDS)
SPINE_EXTREMITY_MOVEMENT_PATTERN = word_pattern(SPINE_EXTREMITY_MOVEMENT_KEYWORDS)
DIRECT_ROM_PATTERN = word_pattern(DIRECT_ROM_KEYWORDS)
STRENGTH_PATTERN = word_pattern(STRENGTH_KEYWORDS)


# ── Norm families ────────────────────────────────────────────────────────────

# Norm cardio check also accepts a bare "step" ("3-Minute Step Test")
NORM_CARDIO_PATTERN = word_pattern(CARDIO_KEYWORDS + ("step",))

NORM_ROM_KEYWORDS = (
    "range", "motion", "flexion", "extension", "abduction", "adduction",
    "rotation", "dorsi", "dorsiflexion", "palmar", "radial", "ulnar",
    "deviation",
)
NORM_ROM_PATTERN = substring_pattern(NORM_ROM_KEYWORDS)

NORM_STRENGTH_KEYWORDS = ("lift", "carry", "push", "pull", "strength", "force")
NORM_STRENGTH_PATTERN = substring_pattern(NORM_STRENGTH_KEYWORDS)
