"""
Test Classification Layer

Places each performed functional test in one of the five report sections.

Usage:
    from fce.core.classification import TestClassifier, CanonicalSection

    classifier = TestClassifier()
    section = classifier.classify(test)      # TestRecord, dict, or None
    grouped = classifier.group(tests)        # Dict[CanonicalSection, List]
"""
from .base import CanonicalSection, ClassificationTrace, TestRecord
from .engine import (
    TestClassifier,
    classify_test,
    group_tests_by_section,
    sections_in_order,
)

__all__ = [
    "CanonicalSection",
    "ClassificationTrace",
    "TestRecord",
    "TestClassifier",
    "classify_test",
    "group_tests_by_section",
    "sections_in_order",
]
