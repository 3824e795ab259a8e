"""
ROM Degree Norms

Expected active range of motion per body region and movement, in degrees.
One value applies to both sides.

Values are AMA Guides / AAOS normal active ranges.

Lookup walks ROM_NORM_TABLE in order: the first region whose keyword occurs
in the name is tried, its movements in row order, and the first movement
whose terms are all present wins. A region with no matching movement falls
through to the next region.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class MovementNorm:
    all_of: Tuple[str, ...]
    degrees: float

    def matches(self, name: str) -> bool:
        return all(t in name for t in self.all_of)


@dataclass(frozen=True)
class RegionNorms:
    region: str
    keywords: Tuple[str, ...]
    movements: Tuple[MovementNorm, ...]

    def applies_to(self, name: str) -> bool:
        return any(k in name for k in self.keywords)


ROM_NORM_TABLE: Tuple[RegionNorms, ...] = (
    RegionNorms("cervical", ("cervical",), (
        MovementNorm(("lateral",), 45),
        MovementNorm(("rotation",), 80),
        MovementNorm(("flexion",), 60),
        MovementNorm(("extension",), 75),
    )),
    RegionNorms("lumbar", ("lumbar", "thoraco"), (
        MovementNorm(("lateral",), 25),
        MovementNorm(("rotation",), 30),
        MovementNorm(("flexion",), 48),
        MovementNorm(("extension",), 25),
    )),
    RegionNorms("shoulder", ("shoulder",), (
        MovementNorm(("internal", "rotation"), 90),
        MovementNorm(("external", "rotation"), 90),
        MovementNorm(("flexion",), 180),
        MovementNorm(("extension",), 50),
        MovementNorm(("abduction",), 180),
        MovementNorm(("adduction",), 50),
    )),
    RegionNorms("elbow", ("elbow",), (
        MovementNorm(("flexion",), 140),
        MovementNorm(("extension",), 0),
        MovementNorm(("supination",), 80),
        MovementNorm(("pronation",), 80),
    )),
    RegionNorms("forearm", ("forearm",), (
        MovementNorm(("supination",), 80),
        MovementNorm(("pronation",), 80),
    )),
    RegionNorms("wrist", ("wrist",), (
        MovementNorm(("radial",), 20),
        MovementNorm(("ulnar",), 20),
        MovementNorm(("dorsiflexion",), 60),
        MovementNorm(("palmar",), 60),
        MovementNorm(("flexion",), 60),
        MovementNorm(("extension",), 60),
    )),
    RegionNorms("hip", ("hip",), (
        MovementNorm(("internal", "rotation"), 40),
        MovementNorm(("external", "rotation"), 50),
        MovementNorm(("flexion",), 100),
        MovementNorm(("extension",), 30),
        MovementNorm(("abduction",), 40),
        MovementNorm(("adduction",), 20),
    )),
    RegionNorms("knee", ("knee",), (
        MovementNorm(("flexion",), 150),
        MovementNorm(("extension",), 0),
    )),
    RegionNorms("ankle", ("ankle",), (
        MovementNorm(("plantar",), 40),
        MovementNorm(("dorsi",), 30),
    )),
)


def rom_norm_degrees(name: Optional[str]) -> Optional[float]:
    """Expected degrees for a ROM test name, or None for an unknown combination."""
    if not name:
        return None
    n = name.lower()
    for region in ROM_NORM_TABLE:
        if not region.applies_to(n):
            continue
        for movement in region.movements:
            if movement.matches(n):
                return float(movement.degrees)
    return None
