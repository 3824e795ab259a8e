"""
Utilities Package - Logging and Exception Handling
"""
from .logging import get_logger, setup_logging
from .exceptions import (
    FceError,
    ReportGenerationError,
    ReportNotFoundError,
)

__all__ = [
    "get_logger",
    "setup_logging",
    "FceError",
    "ReportGenerationError",
    "ReportNotFoundError",
]
