"""
API schema package.
"""
from .schemas import (
    TestRecordIn,
    NormOut,
    ClassificationResponse,
    BatchClassificationRequest,
    BatchClassificationResponse,
    ReferenceOut,
    ReferencesResponse,
    ReportRequest,
    HealthResponse,
)

__all__ = [
    "TestRecordIn",
    "NormOut",
    "ClassificationResponse",
    "BatchClassificationRequest",
    "BatchClassificationResponse",
    "ReferenceOut",
    "ReferencesResponse",
    "ReportRequest",
    "HealthResponse",
]
