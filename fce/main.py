"""
FCE Test Classification - FastAPI Application

Review-side entry point with API endpoints for:
- Classifying performed tests into report sections
- Norm values for a test name
- Citation lookup by test id
- Sectioned report generation (data + PDF)
"""
from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.responses import FileResponse, JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from typing import Dict
from datetime import datetime
import os

from fce import config
from fce.core.classification import CanonicalSection, TestClassifier
from fce.core.norms import NormInferencer, NormInfo
from fce.core.references import format_reference, get_references_for_test
from fce.core.reports import SectionReportGenerator
from fce.utils import get_logger, setup_logging, FceError, ReportNotFoundError
from fce.models import (
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

setup_logging(config.LOG_LEVEL, config.LOG_FILE or None)
logger = get_logger(__name__)


# ---- FastAPI Application ----

app = FastAPI(
    title=config.API_TITLE,
    description="Section classification and norm inference for functional capacity evaluation tests",
    version=config.API_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---- In-memory storage (replace with database in production) ----
_reports: Dict[str, str] = {}
START_TIME = datetime.now()

# ---- Engines ----
_classifier = TestClassifier()
_norms = NormInferencer()
_report_gen = SectionReportGenerator(
    output_dir=config.REPORT_DIR, classifier=_classifier, norms=_norms
)


@app.exception_handler(FceError)
async def fce_error_handler(request: Request, exc: FceError):
    status_code = 404 if isinstance(exc, ReportNotFoundError) else 500
    return JSONResponse(status_code=status_code, content=exc.to_dict())


def _norm_out(norms: NormInfo) -> NormOut:
    return NormOut(**norms.to_dict(), norm_text=norms.comparison_text())


def _health() -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=config.API_VERSION,
        timestamp=datetime.now().isoformat(),
        uptime_seconds=(datetime.now() - START_TIME).total_seconds(),
    )


# ---- API Endpoints ----

@app.get("/", response_model=HealthResponse, tags=["Health"])
async def root():
    """API root - health check."""
    return _health()


@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check():
    """Health check endpoint."""
    return _health()


@app.get("/api/v1/sections", tags=["Reference"])
async def list_sections():
    """
    Canonical report sections in display order, and the classification
    rules in the order they are tried.
    """
    return {
        "sections": [s.value for s in CanonicalSection.ordered()],
        "rules": _classifier.registered_rules(),
    }


@app.post("/api/v1/classify", response_model=ClassificationResponse, tags=["Classification"])
async def classify(test: TestRecordIn):
    """
    Classify a single performed test and attach its norms.
    """
    record = test.to_record()
    trace = _classifier.explain(record)
    return ClassificationResponse(
        section=trace.section.value,
        rule=trace.rule,
        norms=_norm_out(_norms.infer(record.test_name)),
    )


@app.post("/api/v1/classify/batch", response_model=BatchClassificationResponse, tags=["Classification"])
async def classify_batch(request: BatchClassificationRequest):
    """
    Group performed tests by section. Every section is present; input order
    is kept within each section.
    """
    grouped = _classifier.group([t.to_record() for t in request.tests])
    summary = _classifier.summarise(grouped)

    sections = {}
    for section, records in grouped.items():
        sections[section.value] = [
            {
                "testName": r.test_name,
                "testId": r.test_id,
                "norms": _norm_out(_norms.infer(r.test_name)).model_dump(),
            }
            for r in records
        ]

    return BatchClassificationResponse(
        total_tests=summary["total_tests"],
        counts=summary["sections"],
        sections=sections,
    )


@app.get("/api/v1/norms", response_model=NormOut, tags=["Norms"])
async def get_norms(test_name: str = Query(default="", description="Test name as shown in the protocol")):
    """
    Norm values for a test name.
    """
    return _norm_out(_norms.infer(test_name))


@app.get("/api/v1/references/{test_id}", response_model=ReferencesResponse, tags=["Reference"])
async def get_references(test_id: str):
    """
    Citations for a test id. Unknown ids return an empty list.
    """
    references = [
        ReferenceOut(**ref.to_dict(), formatted=format_reference(ref))
        for ref in get_references_for_test(test_id)
    ]
    return ReferencesResponse(test_id=test_id, references=references)


@app.post("/api/v1/reports/generate", tags=["Reports"])
async def generate_report(request: ReportRequest):
    """
    Build the sectioned report for a claimant's tests.
    """
    report = _report_gen.generate(
        [t.to_record() for t in request.tests],
        claimant_name=request.claimant_name,
        render_pdf=request.render_pdf,
    )
    if report.pdf_path:
        _reports[report.report_id] = report.pdf_path

    logger.info(f"Report {report.report_id} generated ({report.total_tests} tests)")
    return report.to_dict()


@app.get("/api/v1/reports/{report_id}/download", tags=["Reports"])
async def download_report(report_id: str):
    """
    Download a generated PDF report.
    """
    pdf_path = _reports.get(report_id)
    if pdf_path is None:
        raise ReportNotFoundError(report_id)
    if not os.path.exists(pdf_path):
        raise HTTPException(status_code=404, detail="Report file missing")

    return FileResponse(
        pdf_path,
        media_type="application/pdf",
        filename=f"{report_id}.pdf",
    )


# ---- Run with uvicorn ----
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
