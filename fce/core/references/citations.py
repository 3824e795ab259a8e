"""
Reference Citations

Published sources printed under each test in the report. Keyed by citation
group; test ids map onto a group through TEST_REFERENCE_GROUPS. Test ids
share their namespace with the classifier and the norm engine.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from fce.core.rom import get_base_rom_test_id


@dataclass(frozen=True)
class Reference:
    author: str
    title: str
    year: int
    journal: Optional[str] = None
    volume: Optional[str] = None
    pages: Optional[str] = None
    publisher: Optional[str] = None
    full_text: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "author": self.author,
            "title": self.title,
            "year": self.year,
            "journal": self.journal,
            "volume": self.volume,
            "pages": self.pages,
            "publisher": self.publisher,
        }


_MATHIOWETZ = Reference(
    author="V. Mathiowetz et al.",
    title="Grip and Pinch Strength: Normative Data for Adults",
    journal="Arch Pys Med Rehab", year=1985, volume="Vol. 66", pages="pp. 69 (Feb 1985)",
)
_STOKES = Reference(
    author="H. Stokes",
    title="The Seriously Uninjured Hand-Weakness of Grip",
    journal="Journal of Occupational Medicine", year=1983, pages="pp. 683-684 (Sep 1983)",
)
_MATHESON = Reference(
    author="L. Matheson, et al.",
    title="Grip Strength in a Disabled Sample: Reliability and Normative Standards",
    journal="Industrial Rehabilitation Quarterly", year=1988,
    volume="Vol. 1, no. 3", pages="Fall 1988",
)
_HILDRETH = Reference(
    author="Hildreth et al.",
    title="Detection of Submaximal effort by use of the rapid exchange grip",
    journal="Journal of Hand Surgery", year=1989, pages="pp. 742 (Jul 1989)",
)


REFERENCE_LIBRARY: Dict[str, Tuple[Reference, ...]] = {
    "static-lift": (
        Reference(
            author="William M. Keyserling",
            title="Isometric Strength Testing in Selecting Workers for Strenuous Jobs",
            journal="University of Michigan", year=1979,
        ),
        Reference(
            author="Don B. Chaffin, PhD.",
            title="Pre-employment Strength Testing: An Updated Position",
            journal="Journal of Occupational Medicine", year=1978,
            volume="Vol. 20 No. 6", pages="June 1978",
        ),
        Reference(
            author="Donald Badges PhD.",
            title="Work Practices Guide to Manual Lifting",
            publisher="NIOSH", year=1981,
        ),
        Reference(
            author="Don Chaffin, PhD.",
            title="Ergonomics Guide for the Assessment of Human Static Strength",
            journal="American Industrial Hygiene Association Journal", year=1975,
            pages="July 1975",
        ),
        Reference(
            author="Harber & SooHoo",
            title="Static Ergonomic Strength Testing in Evaluating Occupational Back Pain",
            journal="Journal of Occupational Medicine", year=1984,
            volume="Vol. 26 No. 12", pages="Dec 1984",
        ),
    ),
    "dynamic-lift": (
        Reference(
            author="Mayer et al.",
            title="Progressive Iso-inertial Lifting Evaluation: A Standardized Protocol and Normative Database",
            journal="Spine", year=1988, volume="Volume 13 Num. 9", pages="pp. 993",
        ),
    ),
    "hand-strength": (_MATHIOWETZ, _STOKES, _MATHESON, _HILDRETH),
    "pinch-strength": (_MATHIOWETZ, _STOKES, _MATHESON, _HILDRETH),
    "range-of-motion": (
        Reference(
            author="American Medical Association",
            title="Guides to the Evaluation of Permanent Impairment",
            year=1993, publisher="4th ed.", pages="pp. 112-135",
        ),
        Reference(
            author="American Medical Association",
            title="Guides to the Evaluation of Permanent Impairment",
            year=1990, publisher="3rd ed.", pages="pp. 81-102",
        ),
    ),
    "goniometers": (
        Reference(
            author="American Medical Association",
            title="Guides to the Evaluation of Permanent Impairment",
            year=1993, publisher="4th ed.", pages="pp. 90-92",
        ),
        Reference(
            author="American Medical Association",
            title="Guides to the Evaluation of Permanent Impairment",
            year=1990, publisher="3rd ed.", pages="pp. 20-38, 101",
        ),
    ),
    "muscle-test": (
        Reference(
            author="A.W. Andrews",
            title="Hand-held Dynamometry for Measuring Muscle Strength",
            journal="Journal of Human Muscle Performance", year=1991, pages="pp. 35 (Jun 1991)",
        ),
    ),
    "mtm": (
        Reference(
            author="Anderson, D.S. and Edstrom D.P.",
            title="MTM Personnel Selection Tests; Validation at a Northwestern National Life Insurance Company",
            journal="Journal of Methods-Time Measurement", year=1975, volume="15, (3)",
        ),
        Reference(
            author="Birdsong, J.H. and Chyatte, S.B.",
            title="Further medical applications of methods-time measurement",
            journal="Journal of Methods-Time Measurement", year=1970, volume="15", pages="19-27",
        ),
        Reference(
            author="Chyatte, S.B. and Birdsong, J.H.",
            title="Methods time measurement in assessment of motor performance",
            journal="Archives of Physical Medicine and Rehabilitation", year=1972,
            volume="53", pages="38-44",
        ),
        Reference(
            author="Foulke, J.A.",
            title="Estimating Individual Operator Performance",
            journal="Journal of Methods-Time Measurement", year=1975, volume="15, (1)", pages="18-23",
        ),
    ),
    "bruce-treadmill": (
        Reference(
            author="Bruce, R. A., et al.",
            title=(
                "Maximal oxygen intake and nomographic assessment of functional "
                "aerobic impairment in cardiovascular disease"
            ),
            journal="Am Heart J", year=1973,
            full_text=(
                'Bruce, R. A., et al. "Maximal oxygen intake and nomographic assessment of '
                'functional aerobic impairment in cardiovascular disease." Am Heart J (1973).'
            ),
        ),
        Reference(
            author="Acampa, W., Assante, R., Zampella, E.",
            title="The role of treadmill exercise testing",
            journal="J Nucl Cardiol", year=2016, volume="23(5)", pages="991-996",
            full_text=(
                "Acampa W, Assante R, Zampella E. The role of treadmill exercise testing. "
                "J Nucl Cardiol. 2016 Oct;23(5):991-996. [PubMed]"
            ),
        ),
    ),
    "mcaft": (
        Reference(
            author=(
                "Emily Wolfe Phillips, Deepa P. Rao, Leonard A. Kaminsky, Grant R. Tomkinson, "
                "Robert Ross, and Justin J. Lang"
            ),
            title=(
                "Criterion-referenced mCAFT cut-points to identify metabolically healthy "
                "cardiorespiratory fitness among adults aged 18–69 years: an analysis of the "
                "Canadian Health Measures Survey"
            ),
            journal="Applied Physiology, Nutrition, and Metabolism", year=2020,
        ),
        Reference(
            author="Statistics Canada",
            title="Normative-referenced percentile values for physical fitness",
            journal="Health Reports", year=2019,
            volume="Vol. 30, no. 10", pages="pp. 14-22",
        ),
    ),
    "kasch": (
        Reference(
            author="Kasch, F. W., Phillips, W. H., Ross, W. D., Carter, J. E., & Boyer, J. L.",
            title="A comparison of maximal oxygen uptake by treadmill and step-test procedures",
            journal="Journal of Applied Physiology", year=1966, volume="21(4)", pages="1387–1389",
        ),
        Reference(
            author="Kasch, F. W., & Boyer, J. L.",
            title="Adult fitness: Principles and practices",
            publisher="KASCH", year=1968,
        ),
    ),
}


def _ids(*test_ids: str, group: str) -> Dict[str, str]:
    return {test_id: group for test_id in test_ids}


_FINGERS = ("index", "middle", "ring", "little")
_TOES = ("2nd", "3rd", "4th", "5th")

TEST_REFERENCE_GROUPS: Dict[str, str] = {
    **_ids("static-lift-low", "static-lift-mid", "static-lift-high", group="static-lift"),
    **_ids(
        "dynamic-lift-low", "dynamic-lift-mid", "dynamic-lift-high", "dynamic-lift-overhead",
        "dynamic-lift-frequent", "dynamic-infrequent-lift-low", "dynamic-infrequent-lift-mid",
        "dynamic-infrequent-lift-high", "dynamic-infrequent-lift-overhead",
        group="dynamic-lift",
    ),
    **_ids(
        "hand-strength-standard", "hand-strength-rapid-exchange", "hand-strength-mve",
        "hand-strength-mmve", "grip-strength",
        group="hand-strength",
    ),
    **_ids(
        "pinch-strength-key", "pinch-strength-tip", "pinch-strength-palmar",
        "pinch-strength-grasp", "key-pinch", "tip-pinch", "palmar-pinch",
        group="pinch-strength",
    ),
    **_ids(
        "cervical-flexion-extension", "cervical-lateral-flexion", "cervical-30-rotation",
        "cervical-60-rotation", "cervical-spine-flexion-extension",
        "cervical-spine-lateral-flexion", "cervical-spine-rotation",
        "lumbar-spine-flexion-extension", "lumbar-spine-lateral-flexion",
        "lumbar-spine-straight-leg-raise", "thoracic-spine-flexion", "thoracic-spine-rotation",
        "shoulder-rom-flexion-extension", "shoulder-rom-internal-external-rotation",
        "shoulder-rom-abduction-adduction", "hip-rom-flexion-extension",
        "hip-rom-internal-external-rotation", "hip-rom-abduction-adduction",
        "knee-rom-flexion-extension", "ankle-rom-dorsi-plantar-flexion",
        "ankle-rom-inversion-eversion", "elbow-rom-flexion-extension",
        "elbow-rom-supination-pronation", "wrist-rom-flexion-extension",
        "wrist-rom-radial-ulnar-deviation",
        group="range-of-motion",
    ),
    **_ids(
        "thumb-ip-flexion-extension", "thumb-mp-flexion-extension", "thumb-abduction",
        *(f"{finger}-{joint}-flexion-extension" for finger in _FINGERS for joint in ("dip", "pip", "mp")),
        "great-toe-ip-flexion", "great-toe-mp-dorsi-plantar-flexion",
        *(f"{toe}-toe-mp-dorsi-plantar-flexion" for toe in _TOES),
        group="goniometers",
    ),
    **_ids(
        *(f"hip-muscle-{m}" for m in (
            "flexion", "extension", "abduction", "adduction", "external-rotation", "internal-rotation",
        )),
        *(f"shoulder-muscle-{m}" for m in (
            "flexion", "extension", "abduction", "adduction", "internal-rotation", "external-rotation",
        )),
        *(f"wrist-muscle-{m}" for m in ("flexion", "extension", "radial-deviation", "ulnar-deviation")),
        *(f"ankle-muscle-{m}" for m in ("dorsiflexion", "plantar-flexion", "eversion", "inversion")),
        "knee-muscle-flexion", "knee-muscle-extension",
        "elbow-muscle-flexion", "elbow-muscle-extension",
        group="muscle-test",
    ),
    **_ids(
        "fingering", "bi-manual-fingering", "handling", "bi-manual-handling",
        "reach-immediate", "reach-overhead", "reach-with-weight",
        group="mtm",
    ),
    **_ids("bruce-treadmill", "treadmill-test", "bruce-test", group="bruce-treadmill"),
    **_ids("mcaft", "mcaft-test", "step-test", group="mcaft"),
    **_ids("kasch", "kasch-test", "kasch-step", group="kasch"),
}


def get_references_for_test(test_id: Optional[str]) -> List[Reference]:
    """
    Citations for a test id. Case-insensitive; a trailing -left / -right
    side suffix is ignored. Unknown or empty ids give an empty list.
    """
    if not test_id:
        return []
    key = test_id.strip().lower()
    group = TEST_REFERENCE_GROUPS.get(key) or TEST_REFERENCE_GROUPS.get(get_base_rom_test_id(key))
    if group is None:
        return []
    return list(REFERENCE_LIBRARY.get(group, ()))


def format_reference(reference: Reference) -> str:
    """Single-line citation as printed in the report's reference list."""
    if reference.full_text:
        return reference.full_text

    formatted = f"{reference.title}, {reference.author}"
    if reference.journal:
        formatted += f", {reference.journal}"
    if reference.volume:
        formatted += f", {reference.volume}"
    if reference.pages:
        formatted += f", {reference.pages}"
    elif reference.year:
        formatted += f" ({reference.year})"
    if reference.publisher and not reference.journal:
        formatted += f", {reference.publisher}"
    return formatted if formatted.endswith(".") else formatted + "."
