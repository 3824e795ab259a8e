"""
Custom Exception Hierarchy

The classification, norm and reference engines are total and never raise.
These exceptions cover the layers around them: report rendering and the
report registry behind the API.
"""
from typing import Optional, Dict, Any


class FceError(Exception):
    """Base exception for all functional-capacity report errors."""

    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details
        }


class ReportGenerationError(FceError):
    """Errors while rendering a section report to PDF."""

    def __init__(
        self,
        message: str,
        report_type: str = "unknown",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            code="REPORT_ERROR",
            details={"report_type": report_type, **(details or {})}
        )
        self.report_type = report_type


class ReportNotFoundError(FceError):
    """A report id was requested that has no rendered PDF."""

    def __init__(
        self,
        report_id: str,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=f"Report {report_id} not found",
            code="REPORT_NOT_FOUND",
            details={"report_id": report_id, **(details or {})}
        )
        self.report_id = report_id
