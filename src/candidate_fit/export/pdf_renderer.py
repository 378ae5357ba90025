"""Render laid-out fit reports to PDF bytes with fpdf2."""

from __future__ import annotations

import logging
from datetime import date
from io import BytesIO

from fpdf import FPDF

from candidate_fit.export.report_layout import (
    LINE_HEIGHT,
    TEXT_ENCODING,
    CircleOp,
    RectOp,
    ReportDocument,
    ReportPaginator,
    TextMeasurer,
    TextOp,
)
from candidate_fit.models.analysis import AnalysisResult
from candidate_fit.models.genome import CandidateRecord
from candidate_fit.models.job import JobRecord

logger = logging.getLogger(__name__)

FONT_FAMILY = "helvetica"


def render_report_pdf(document: ReportDocument) -> bytes:
    """Draw every page of a laid-out report and return the PDF bytes."""
    pdf = FPDF(orientation="P", unit="mm", format="A4")
    pdf.core_fonts_encoding = TEXT_ENCODING
    pdf.set_auto_page_break(auto=False)
    pdf.set_title(document.title)

    for page in document.pages:
        pdf.add_page()
        for op in page.ops:
            if isinstance(op, RectOp):
                _draw_rect(pdf, op)
            elif isinstance(op, CircleOp):
                pdf.set_fill_color(*op.color)
                pdf.circle(op.x, op.y, op.radius, style="F")
            elif isinstance(op, TextOp):
                _draw_text(pdf, op)

    buf = BytesIO()
    pdf.output(buf)
    logger.info("Rendered %s (%d pages)", document.filename, document.page_count)
    return buf.getvalue()


def build_report_pdf(
    analysis: AnalysisResult,
    job: JobRecord,
    candidate: CandidateRecord,
    generated_on: date | None = None,
    measurer: TextMeasurer | None = None,
) -> tuple[bytes, str]:
    """Lay out and render a fit report. Returns ``(pdf_bytes, filename)``."""
    document = ReportPaginator(measurer).build(analysis, job, candidate, generated_on)
    return render_report_pdf(document), document.filename


def _draw_rect(pdf: FPDF, op: RectOp) -> None:
    pdf.set_fill_color(*op.color)
    if op.corner_radius:
        pdf.rect(
            op.x, op.y, op.width, op.height,
            style="F", round_corners=True, corner_radius=op.corner_radius,
        )
    else:
        pdf.rect(op.x, op.y, op.width, op.height, style="F")


def _draw_text(pdf: FPDF, op: TextOp) -> None:
    style = op.style
    pdf.set_font(FONT_FAMILY, "B" if style.bold else "", style.size)
    pdf.set_text_color(*style.color)
    for i, line in enumerate(op.lines):
        if not line:
            continue
        x = op.x - pdf.get_string_width(line) / 2 if op.align == "C" else op.x
        pdf.text(x, op.y + i * LINE_HEIGHT, line)
