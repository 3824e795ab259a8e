"""
ROM side helpers

Paired ROM tests are recorded once per side with ids such as
"shoulder-rom-flexion-extension-left". The report prints each side as its
own row and cites the base test; these helpers split ids and label names
accordingly.
"""
from __future__ import annotations

import re
from typing import Optional

_SIDE_SUFFIX = re.compile(r"-(left|right)$", re.IGNORECASE)
_ROM_MARKER = re.compile(r"\b(rom|range)\b")


def is_paired_rom_test(test_id: Optional[str]) -> bool:
    """True for ROM ids that carry a -left / -right suffix."""
    if not test_id:
        return False
    tid = test_id.lower()
    return bool(_ROM_MARKER.search(tid)) and tid.endswith(("left", "right"))


def get_base_rom_test_id(test_id: Optional[str]) -> str:
    if not test_id:
        return ""
    return _SIDE_SUFFIX.sub("", test_id)


def extract_side_from_test_id(test_id: Optional[str]) -> Optional[str]:
    if not test_id:
        return None
    match = _SIDE_SUFFIX.search(test_id)
    return match.group(1).lower() if match else None


def format_rom_test_with_side(base_test_name: str, side: str) -> str:
    """'Shoulder Flexion/Extension' + 'left' -> 'Left Side - Shoulder Flexion/Extension'."""
    return f"{side.capitalize()} Side - {base_test_name}"
