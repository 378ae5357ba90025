"""PDF export module for candidate-fit."""
from candidate_fit.export.pdf_renderer import build_report_pdf, render_report_pdf
from candidate_fit.export.report_layout import (
    ReportDocument,
    ReportPaginator,
    build_report,
    report_filename,
)

__all__ = [
    "ReportDocument",
    "ReportPaginator",
    "build_report",
    "build_report_pdf",
    "render_report_pdf",
    "report_filename",
]
