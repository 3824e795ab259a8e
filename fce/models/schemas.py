"""
API request / response models.

Test payloads arrive from the review client in camelCase (testName, testId,
testType); snake_case is accepted too.
"""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from fce.core.classification import TestRecord


class TestRecordIn(BaseModel):
    """A performed test. Every field is optional."""
    __test__ = False  # not a pytest test class

    model_config = ConfigDict(populate_by_name=True)

    test_name: Optional[str] = Field(default=None, alias="testName")
    test_id: Optional[str] = Field(default=None, alias="testId")
    category: Optional[str] = None
    test_type: Optional[str] = Field(default=None, alias="testType")

    def to_record(self) -> TestRecord:
        return TestRecord(
            test_name=self.test_name or "",
            test_id=self.test_id or "",
            category=self.category or "",
            test_type=self.test_type or "",
        )


class NormOut(BaseModel):
    unit: str
    left: Optional[float] = None
    right: Optional[float] = None
    category: str
    norm_text: str = ""


class ClassificationResponse(BaseModel):
    section: str
    rule: str
    norms: NormOut


class BatchClassificationRequest(BaseModel):
    tests: List[TestRecordIn] = Field(default_factory=list)


class BatchClassificationResponse(BaseModel):
    total_tests: int
    counts: Dict[str, int]
    sections: Dict[str, List[Dict[str, Any]]]


class ReferenceOut(BaseModel):
    author: str
    title: str
    year: int
    journal: Optional[str] = None
    volume: Optional[str] = None
    pages: Optional[str] = None
    publisher: Optional[str] = None
    formatted: str


class ReferencesResponse(BaseModel):
    test_id: str
    references: List[ReferenceOut]


class ReportRequest(BaseModel):
    claimant_name: str = Field(default="ANONYMOUS")
    tests: List[TestRecordIn] = Field(default_factory=list)
    render_pdf: bool = Field(default=True, description="Write a PDF alongside the report data")


class HealthResponse(BaseModel):
    status: str
    version: str
    timestamp: str
    uptime_seconds: float
