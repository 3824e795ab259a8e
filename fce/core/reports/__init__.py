"""
Report Generation Module

Generates the sectioned FCE report (Strength, ROM Total Spine/Extremity,
ROM Hand/Foot, Occupational Tasks, Cardio) with norms and citations, as
data and as a downloadable PDF.
"""
from .section_report import SectionReportGenerator, SectionReport, SectionRow

__all__ = [
    "SectionReportGenerator",
    "SectionReport",
    "SectionRow",
]
