"""
Test Classification - Base Types

Defines the record a performed test arrives as, the five canonical report
sections it can be placed in, and the normalised view the rule table reads.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Mapping, Optional


class CanonicalSection(str, Enum):
    """
    Report section a functional test is printed under.

    Member order is the fixed display order of the report and must not be
    changed.
    """
    STRENGTH            = "Strength"
    ROM_SPINE_EXTREMITY = "ROM Total Spine/Extremity"
    ROM_HAND_FOOT       = "ROM Hand/Foot"
    OCCUPATIONAL_TASKS  = "Occupational Tasks"
    CARDIO              = "Cardio"

    @classmethod
    def ordered(cls) -> List["CanonicalSection"]:
        return list(cls)

    @classmethod
    def from_label(cls, label: Optional[str]) -> Optional["CanonicalSection"]:
        """Exact, case-sensitive label lookup. Anything else gives None."""
        if not isinstance(label, str):
            return None
        for section in cls:
            if section.value == label:
                return section
        return None


def _text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


@dataclass(frozen=True)
class TestRecord:
    """
    A performed test as supplied by the review / report pipeline.

    Every field may be empty. `category` is authoritative when it names a
    canonical section exactly; `test_type` is its legacy alias.
    """
    __test__ = False  # not a pytest test class

    test_name: str = ""
    test_id: str = ""
    category: str = ""
    test_type: str = ""

    def __post_init__(self):
        # Fields may arrive as None or non-strings; store them as text
        for name in ("test_name", "test_id", "category", "test_type"):
            object.__setattr__(self, name, _text(getattr(self, name)))

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "TestRecord":
        """Build from an upstream payload using camelCase or snake_case keys."""
        if not data:
            return cls()
        return cls._from_lookup(data.get)

    @classmethod
    def coerce(cls, test: Any) -> "TestRecord":
        """Accept a TestRecord, a mapping, an object with matching attributes, or None."""
        if isinstance(test, TestRecord):
            return test
        if test is None:
            return cls()
        if isinstance(test, Mapping):
            return cls.from_mapping(test)
        return cls._from_lookup(lambda key: getattr(test, key, None))

    @classmethod
    def _from_lookup(cls, get: Callable[[str], Any]) -> "TestRecord":
        def pick(*keys: str) -> str:
            for key in keys:
                if get(key) is not None:
                    return _text(get(key))
            return ""

        return cls(
            test_name=pick("testName", "test_name"),
            test_id=pick("testId", "test_id"),
            category=pick("category"),
            test_type=pick("testType", "test_type"),
        )


@dataclass(frozen=True)
class ClassificationContext:
    """Lower-cased text fields shared by every rule in the cascade."""
    name: str
    test_id: str
    category_text: str
    category: str

    @classmethod
    def from_record(cls, record: TestRecord) -> "ClassificationContext":
        return cls(
            name=record.test_name.lower(),
            test_id=record.test_id.lower(),
            category_text=(record.category or record.test_type).lower(),
            category=record.category,
        )

    @property
    def search_target(self) -> str:
        return f"{self.name} {self.test_id} {self.category_text}"

    @property
    def id_and_name(self) -> str:
        return f"{self.test_id} {self.name}"


@dataclass(frozen=True)
class ClassificationTrace:
    """The section chosen for a test and the rule that decided it."""
    section: CanonicalSection
    rule: str

    def to_dict(self) -> dict:
        return {"section": self.section.value, "rule": self.rule}
