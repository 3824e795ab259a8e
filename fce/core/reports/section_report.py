"""
Sectioned FCE Report Generator

Batch side of the review/report pair. Groups a claimant's performed tests
into the five canonical sections, attaches norms and citations to each row,
and renders the result to PDF.

Uses the same classifier and norm engine as the review API, so the PDF and
the on-screen preview always agree.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional
from xml.sax.saxutils import escape
import os
import uuid

from reportlab.lib.colors import HexColor, white
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.pagesizes import letter
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import inch
from reportlab.platypus import (
    SimpleDocTemplate, Paragraph, Spacer, Table, TableStyle, KeepTogether
)

from fce.core.classification import CanonicalSection, TestClassifier, TestRecord
from fce.core.norms import NormInferencer, NormInfo
from fce.core.references import format_reference, get_references_for_test
from fce.core.rom import extract_side_from_test_id, format_rom_test_with_side, is_paired_rom_test
from fce.utils import get_logger, ReportGenerationError

logger = get_logger(__name__)

SECTION_COLORS = {
    CanonicalSection.STRENGTH: "#1E40AF",
    CanonicalSection.ROM_SPINE_EXTREMITY: "#047857",
    CanonicalSection.ROM_HAND_FOOT: "#0F766E",
    CanonicalSection.OCCUPATIONAL_TASKS: "#B45309",
    CanonicalSection.CARDIO: "#B91C1C",
}


@dataclass
class SectionRow:
    """One performed test as printed in its section table."""
    test_id: str
    test_name: str
    display_name: str
    section: CanonicalSection
    norms: NormInfo
    references: List[str] = field(default_factory=list)

    @property
    def norm_text(self) -> str:
        return self.norms.comparison_text()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "test_id": self.test_id,
            "test_name": self.test_name,
            "display_name": self.display_name,
            "section": self.section.value,
            "norms": self.norms.to_dict(),
            "norm_text": self.norm_text,
            "references": self.references,
        }


@dataclass
class SectionReport:
    """Data container for a sectioned report."""
    report_id: str
    generated_at: datetime
    claimant_name: str = "ANONYMOUS"

    # Every canonical section, in display order, even when empty
    sections: Dict[CanonicalSection, List[SectionRow]] = field(
        default_factory=lambda: {s: [] for s in CanonicalSection.ordered()}
    )

    pdf_path: Optional[str] = None

    @property
    def total_tests(self) -> int:
        return sum(len(rows) for rows in self.sections.values())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "report_id": self.report_id,
            "generated_at": self.generated_at.isoformat(),
            "claimant_name": self.claimant_name,
            "total_tests": self.total_tests,
            "sections": [
                {
                    "section": section.value,
                    "count": len(self.sections.get(section, [])),
                    "rows": [row.to_dict() for row in self.sections.get(section, [])],
                }
                for section in CanonicalSection.ordered()
            ],
            "pdf_path": self.pdf_path,
        }


class SectionReportGenerator:
    """
    Builds SectionReports and their PDFs.

    The classifier, norm engine and citation lookup never fail; only PDF
    rendering can, and it raises ReportGenerationError.
    """

    def __init__(
        self,
        output_dir: str = "reports",
        classifier: Optional[TestClassifier] = None,
        norms: Optional[NormInferencer] = None,
    ):
        self.output_dir = output_dir
        os.makedirs(output_dir, exist_ok=True)
        self.classifier = classifier or TestClassifier()
        self.norms = norms or NormInferencer()

        self._styles = getSampleStyleSheet()
        self._create_custom_styles()

        logger.info(f"SectionReportGenerator initialized, output: {output_dir}")

    def _create_custom_styles(self):
        if 'ReportTitle' not in self._styles:
            self._styles.add(ParagraphStyle(
                name='ReportTitle',
                parent=self._styles['Title'],
                fontSize=22,
                spaceAfter=18,
                textColor=HexColor("#1E40AF"),
                alignment=TA_CENTER,
                fontName='Helvetica-Bold'
            ))

        if 'SectionHeader' not in self._styles:
            self._styles.add(ParagraphStyle(
                name='SectionHeader',
                parent=self._styles['Heading2'],
                fontSize=15,
                spaceBefore=18,
                spaceAfter=8,
                textColor=HexColor("#1F2937"),
                fontName='Helvetica-Bold'
            ))

        if 'Citation' not in self._styles:
            self._styles.add(ParagraphStyle(
                name='Citation',
                parent=self._styles['Normal'],
                fontSize=8,
                leading=10,
                textColor=HexColor("#6B7280"),
                leftIndent=12
            ))

        if 'Cell' not in self._styles:
            self._styles.add(ParagraphStyle(
                name='Cell',
                parent=self._styles['Normal'],
                fontSize=9,
                leading=11,
            ))

    # ── Row building ─────────────────────────────────────────────────────────

    def build_row(self, test: Any) -> SectionRow:
        record = TestRecord.coerce(test)
        section = self.classifier.classify(record)
        norms = self.norms.infer(record.test_name)

        display_name = record.test_name or record.test_id or "Unnamed test"
        if is_paired_rom_test(record.test_id):
            side = extract_side_from_test_id(record.test_id)
            if side:
                display_name = format_rom_test_with_side(display_name, side)

        return SectionRow(
            test_id=record.test_id,
            test_name=record.test_name,
            display_name=display_name,
            section=section,
            norms=norms,
            references=[format_reference(r) for r in get_references_for_test(record.test_id)],
        )

    def generate(
        self,
        tests: Any,
        claimant_name: str = "ANONYMOUS",
        render_pdf: bool = True,
    ) -> SectionReport:
        """
        Generate a sectioned report.

        Args:
            tests: Performed tests (TestRecords or camelCase/snake_case dicts)
            claimant_name: Name printed in the header
            render_pdf: Write the PDF to output_dir

        Returns:
            SectionReport, with pdf_path set when a PDF was written
        """
        report = SectionReport(
            report_id=f"FCE-{datetime.now().strftime('%Y%m%d-%H%M%S')}-{uuid.uuid4().hex[:6]}",
            generated_at=datetime.now(),
            claimant_name=claimant_name or "ANONYMOUS",
        )

        for section, items in self.classifier.group(tests).items():
            report.sections[section] = [self.build_row(item) for item in items]

        logger.info(
            f"SectionReportGenerator: {report.report_id} with {report.total_tests} test(s): "
            + ", ".join(f"{s.value}={len(rows)}" for s, rows in report.sections.items())
        )

        if render_pdf:
            report.pdf_path = self._generate_pdf(report)

        return report

    # ── PDF ──────────────────────────────────────────────────────────────────

    def _section_table(self, section: CanonicalSection, rows: List[SectionRow]) -> Table:
        cell = self._styles['Cell']
        table_data = [["Test", "Norm", "Unit"]]
        for row in rows:
            table_data.append([
                Paragraph(escape(row.display_name), cell),
                row.norm_text or "—",
                row.norms.unit or "—",
            ])

        table = Table(table_data, colWidths=[3.4*inch, 2.2*inch, 0.9*inch])
        table.setStyle(TableStyle([
            ('BACKGROUND', (0, 0), (-1, 0), HexColor(SECTION_COLORS[section])),
            ('TEXTCOLOR', (0, 0), (-1, 0), white),
            ('ALIGN', (0, 0), (-1, -1), 'LEFT'),
            ('VALIGN', (0, 0), (-1, -1), 'MIDDLE'),
            ('FONTNAME', (0, 0), (-1, 0), 'Helvetica-Bold'),
            ('FONTSIZE', (0, 0), (-1, 0), 10),
            ('FONTSIZE', (0, 1), (-1, -1), 9),
            ('GRID', (0, 0), (-1, -1), 0.5, HexColor("#D1D5DB")),
            ('ROWBACKGROUNDS', (0, 1), (-1, -1), [white, HexColor("#F9FAFB")]),
            ('TOPPADDING', (0, 0), (-1, -1), 6),
            ('BOTTOMPADDING', (0, 0), (-1, -1), 6),
        ]))
        return table

    def _generate_pdf(self, report: SectionReport) -> str:
        filepath = os.path.join(self.output_dir, f"{report.report_id}.pdf")

        try:
            doc = SimpleDocTemplate(
                filepath,
                pagesize=letter,
                rightMargin=0.75*inch,
                leftMargin=0.75*inch,
                topMargin=0.75*inch,
                bottomMargin=0.75*inch,
                title="Functional Capacity Evaluation",
            )

            story = []
            story.append(Paragraph("Functional Capacity Evaluation", self._styles['ReportTitle']))
            story.append(Paragraph(
                f"Claimant: <b>{escape(report.claimant_name)}</b> | Report ID: <b>{report.report_id}</b> | "
                f"Generated: {report.generated_at.strftime('%B %d, %Y at %I:%M %p')}",
                self._styles['Normal']
            ))
            story.append(Spacer(1, 16))

            for section in CanonicalSection.ordered():
                rows = report.sections.get(section, [])
                if not rows:
                    continue

                elements = [
                    Paragraph(f"{section.value} ({len(rows)})", self._styles['SectionHeader']),
                    self._section_table(section, rows),
                ]
                story.append(KeepTogether(elements))

                # Each citation once per section, in first-seen order
                citations = list(dict.fromkeys(c for row in rows for c in row.references))
                if citations:
                    story.append(Spacer(1, 6))
                    story.append(Paragraph("<b>References</b>", self._styles['Normal']))
                    for citation in citations:
                        story.append(Paragraph(f"• {escape(citation)}", self._styles['Citation']))
                story.append(Spacer(1, 12))

            if report.total_tests == 0:
                story.append(Paragraph("No tests were performed.", self._styles['Normal']))

            doc.build(story)
        except Exception as exc:
            logger.error(f"SectionReportGenerator: PDF build failed for {report.report_id}: {exc}", exc_info=True)
            raise ReportGenerationError(
                f"Failed to render report {report.report_id}",
                report_type="section_pdf",
                details={"path": filepath, "reason": str(exc)},
            ) from exc

        logger.info(f"Section report generated: {filepath}")
        return filepath
