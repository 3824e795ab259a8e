"""
Reference Resolver

Citation lookup keyed by test id, consumed by report rendering.
"""
from .citations import Reference, format_reference, get_references_for_test

__all__ = [
    "Reference",
    "format_reference",
    "get_references_for_test",
]
