"""
Test Classification Engine

Single entry point used by both the review API and the batch report
generator, so a test lands in the same section in preview and in the final
PDF.

Usage:
    from fce.core.classification import TestClassifier

    classifier = TestClassifier()
    section = classifier.classify({"testName": "Grip Strength", "testId": "grip-strength"})
    grouped = classifier.group(tests)
"""
from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Dict, List

from fce.utils import get_logger
from .base import CanonicalSection, ClassificationContext, ClassificationTrace, TestRecord
from .rules import CLASSIFICATION_RULES, evaluate_rules

logger = get_logger(__name__)


class TestClassifier:
    """
    Maps performed tests onto the five canonical report sections.

    Stateless; safe to call from multiple threads / concurrent requests.
    """
    __test__ = False  # not a pytest test class

    def explain(self, test: Any) -> ClassificationTrace:
        """
        Classify a test and report which rule decided it.

        Accepts a TestRecord, a camelCase/snake_case mapping, or None.
        Never raises.
        """
        record = TestRecord.coerce(test)
        ctx = ClassificationContext.from_record(record)
        section, rule_id = evaluate_rules(ctx)
        logger.debug(
            f"TestClassifier: '{record.test_name}' [{record.test_id}] "
            f"-> {section.value} (rule={rule_id})"
        )
        return ClassificationTrace(section=section, rule=rule_id)

    def classify(self, test: Any) -> CanonicalSection:
        return self.explain(test).section

    def group(self, tests: Any) -> Dict[CanonicalSection, List[Any]]:
        """
        Partition tests by section.

        All five sections are present, in display order, even when empty.
        Within a section the input order is kept. Items are returned as
        given. A non-iterable input yields the empty grouping.
        """
        grouped: Dict[CanonicalSection, List[Any]] = {
            section: [] for section in CanonicalSection.ordered()
        }
        if tests is None or isinstance(tests, (str, bytes, dict)) or not isinstance(tests, Iterable):
            return grouped

        for test in tests:
            grouped[self.classify(test)].append(test)

        logger.debug(
            "TestClassifier: grouped "
            + ", ".join(f"{s.value}={len(items)}" for s, items in grouped.items())
        )
        return grouped

    @staticmethod
    def registered_rules() -> List[str]:
        """Rule ids in cascade order (the default is implicit and last)."""
        return [rule_id for rule_id, _ in CLASSIFICATION_RULES]

    @staticmethod
    def summarise(grouped: Dict[CanonicalSection, List[Any]]) -> Dict:
        """
        Compact counts for API responses and logs.

        Example output:
        {
            "total_tests": 3,
            "sections": {"Strength": 2, "ROM Total Spine/Extremity": 0, ...}
        }
        """
        counts = {
            section.value: len(grouped.get(section, []))
            for section in CanonicalSection.ordered()
        }
        return {
            "total_tests": sum(counts.values()),
            "sections": counts,
        }


_default_classifier = TestClassifier()


def classify_test(test: Any) -> CanonicalSection:
    """Module-level shortcut for TestClassifier().classify."""
    return _default_classifier.classify(test)


def group_tests_by_section(tests: Any) -> Dict[CanonicalSection, List[Any]]:
    """Module-level shortcut for TestClassifier().group."""
    return _default_classifier.group(tests)


def sections_in_order() -> List[CanonicalSection]:
    return CanonicalSection.ordered()
