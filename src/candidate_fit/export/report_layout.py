"""Paginated layout of a fit analysis as backend-neutral draw instructions.

The layout is a vertical flow on A4 pages measured in millimetres. Every block
measures its wrapped height first and moves to a fresh page when it would
cross the bottom margin; blocks are never split. Page footers are stamped in a
second pass once the page count is known.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date
from typing import Protocol

from fpdf import FPDF

from candidate_fit.formatting.labels import format_date
from candidate_fit.models.analysis import AnalysisResult
from candidate_fit.models.genome import CandidateRecord
from candidate_fit.models.job import JobRecord

Color = tuple[int, int, int]

PAGE_WIDTH = 210.0
PAGE_HEIGHT = 297.0
MARGIN = 20.0
CONTENT_WIDTH = PAGE_WIDTH - 2 * MARGIN
LINE_HEIGHT = 5.0

HEADER_HEIGHT = 45.0
CONTENT_START_Y = 55.0
BULLET_RADIUS = 1.5
BULLET_TEXT_INDENT = 8.0
BULLET_WRAP_WIDTH = CONTENT_WIDTH - 10
LABEL_WIDTH = 50.0
VALUE_OFFSET = 55.0
VALUE_WIDTH = CONTENT_WIDTH - VALUE_OFFSET
FOOTER_OFFSET = 10.0

REPORT_TITLE = "Candidate Fit Analysis"
FILENAME_PREFIX = "Candidate_Fit"
FILENAME_TITLE_LIMIT = 30
TEXT_ENCODING = "windows-1252"

SKILLS_COLOR: Color = (76, 175, 80)
GAPS_COLOR: Color = (255, 193, 7)
RECOMMENDATIONS_COLOR: Color = (66, 165, 245)
GROWTH_COLOR: Color = (156, 39, 176)
GROWTH_HEADING_COLOR: Color = (120, 80, 180)
CONCERNS_COLOR: Color = (255, 152, 0)
CREDIBILITY_COLOR: Color = (0, 150, 136)


@dataclass(frozen=True)
class TextStyle:
    size: float
    bold: bool = False
    color: Color = (60, 60, 60)


TITLE_STYLE = TextStyle(20, bold=True, color=(30, 30, 35))
SUBTITLE_STYLE = TextStyle(10, color=(100, 100, 100))
NAME_STYLE = TextStyle(12, bold=True, color=(30, 30, 35))
HEADLINE_STYLE = TextStyle(9, color=(100, 100, 100))
FIELD_LABEL_STYLE = TextStyle(10, bold=True, color=(80, 80, 80))
FIELD_VALUE_STYLE = TextStyle(10, color=(30, 30, 35))
SCORE_STYLE = TextStyle(12, bold=True, color=(30, 120, 30))
SECTION_STYLE = TextStyle(14, bold=True, color=(80, 80, 80))
BODY_STYLE = TextStyle(10)
KEY_STYLE = TextStyle(10, bold=True, color=(100, 100, 100))
FOOTER_STYLE = TextStyle(8, color=(150, 150, 150))


@dataclass(frozen=True)
class TextOp:
    """Lines drawn from baseline ``y``, one LINE_HEIGHT apart."""

    x: float
    y: float
    lines: tuple[str, ...]
    style: TextStyle
    align: str = "L"  # "L" or "C" (x is the centre)


@dataclass(frozen=True)
class CircleOp:
    x: float
    y: float
    radius: float
    color: Color


@dataclass(frozen=True)
class RectOp:
    x: float
    y: float
    width: float
    height: float
    color: Color
    corner_radius: float = 0.0


DrawOp = TextOp | CircleOp | RectOp


@dataclass
class Page:
    number: int
    ops: list[DrawOp] = field(default_factory=list)

    def text_lines(self) -> list[str]:
        return [line for op in self.ops if isinstance(op, TextOp) for line in op.lines]


@dataclass
class ReportDocument:
    title: str
    filename: str
    pages: list[Page]

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def text_lines(self) -> list[str]:
        return [line for page in self.pages for line in page.text_lines()]


@dataclass
class Cursor:
    """Vertical position on the current (last) page."""

    y: float


class TextMeasurer(Protocol):
    def width(self, text: str, style: TextStyle) -> float: ...


class FpdfTextMeasurer:
    """Measures strings with fpdf2's Helvetica core-font metrics."""

    def __init__(self, family: str = "helvetica"):
        self.family = family
        self._pdf = FPDF(unit="mm", format="A4")
        self._pdf.core_fonts_encoding = TEXT_ENCODING

    def width(self, text: str, style: TextStyle) -> float:
        self._pdf.set_font(self.family, "B" if style.bold else "", style.size)
        return self._pdf.get_string_width(text)


def safe_text(text: str) -> str:
    """Replace characters the core fonts cannot encode."""
    return text.encode(TEXT_ENCODING, errors="replace").decode(TEXT_ENCODING)


def report_filename(candidate_name: str | None, job_title: str | None) -> str:
    """'Jane Doe', 'Senior Designer' -> 'Candidate_Fit_Jane_Doe_Senior_Designer.pdf'."""
    name = re.sub(r"\s+", "_", candidate_name) if candidate_name else ""
    title = re.sub(r"\s+", "_", job_title or "")[:FILENAME_TITLE_LIMIT]
    return f"{FILENAME_PREFIX}_{name or 'Unknown'}_{title}.pdf"


class ReportPaginator:
    """Lays out one fit analysis into fixed-size pages of draw instructions."""

    def __init__(
        self,
        measurer: TextMeasurer | None = None,
        *,
        page_width: float = PAGE_WIDTH,
        page_height: float = PAGE_HEIGHT,
        margin: float = MARGIN,
        line_height: float = LINE_HEIGHT,
        title: str = REPORT_TITLE,
    ):
        self.measurer = measurer or FpdfTextMeasurer()
        self.page_width = page_width
        self.page_height = page_height
        self.margin = margin
        self.line_height = line_height
        self.content_width = page_width - 2 * margin
        self.title = title
        self.pages: list[Page] = []
        self.cursor = Cursor(y=margin)

    # -- flow primitives ----------------------------------------------------

    @property
    def page(self) -> Page:
        return self.pages[-1]

    @property
    def bottom_limit(self) -> float:
        return self.page_height - self.margin

    def new_page(self) -> Page:
        self.pages.append(Page(number=len(self.pages) + 1))
        self.cursor.y = self.margin
        return self.page

    def ensure_space(self, needed: float) -> bool:
        """Start a new page when ``needed`` would cross the bottom margin."""
        if self.cursor.y + needed > self.bottom_limit:
            self.new_page()
            return True
        return False

    def wrap(self, text: str, width: float, style: TextStyle) -> list[str]:
        """Greedy word wrap; words wider than ``width`` are split by characters."""
        lines: list[str] = []
        for paragraph in safe_text(text).split("\n"):
            words = paragraph.split()
            if not words:
                lines.append("")
                continue
            current = ""
            for word in words:
                candidate = f"{current} {word}" if current else word
                if self.measurer.width(candidate, style) <= width:
                    current = candidate
                    continue
                if current:
                    lines.append(current)
                while len(word) > 1 and self.measurer.width(word, style) > width:
                    cut = self._fitting_prefix(word, width, style)
                    lines.append(word[:cut])
                    word = word[cut:]
                current = word
            lines.append(current)
        return lines

    def _fitting_prefix(self, word: str, width: float, style: TextStyle) -> int:
        cut = 1
        while cut < len(word) and self.measurer.width(word[: cut + 1], style) <= width:
            cut += 1
        return cut

    def _text(self, x: float, y: float, lines: list[str], style: TextStyle, align: str = "L"):
        self.page.ops.append(TextOp(x=x, y=y, lines=tuple(lines), style=style, align=align))

    # -- blocks -------------------------------------------------------------

    def add_section_title(self, title: str) -> None:
        self.ensure_space(20)
        self._text(self.margin, self.cursor.y, [safe_text(title)], SECTION_STYLE)
        self.cursor.y += 8

    def add_subheading(self, label: str, color: Color, gap_before: float = 0.0) -> None:
        self.cursor.y += gap_before
        self.ensure_space(10)
        self._text(self.margin, self.cursor.y, [safe_text(label)], TextStyle(11, bold=True, color=color))
        self.cursor.y += 6

    def add_paragraph(self, text: str) -> None:
        lines = self.wrap(text, self.content_width, BODY_STYLE)
        height = len(lines) * self.line_height + 5
        self.ensure_space(height)
        self._text(self.margin, self.cursor.y, lines, BODY_STYLE)
        self.cursor.y += height

    def add_bullet_list(self, items: list[str], color: Color) -> None:
        for item in items:
            lines = self.wrap(item, self.content_width - 10, BODY_STYLE)
            height = len(lines) * self.line_height + 3
            self.ensure_space(height)
            self.page.ops.append(
                CircleOp(x=self.margin + 2, y=self.cursor.y - 1.5, radius=BULLET_RADIUS, color=color)
            )
            self._text(self.margin + BULLET_TEXT_INDENT, self.cursor.y, lines, BODY_STYLE)
            self.cursor.y += height
        self.cursor.y += 3

    def add_key_value(self, label: str, value: str) -> None:
        label_lines = self.wrap(f"{label}:", LABEL_WIDTH, KEY_STYLE)
        value_lines = self.wrap(value, self.content_width - VALUE_OFFSET, BODY_STYLE)
        height = max(len(label_lines), len(value_lines)) * self.line_height + 3
        self.ensure_space(height)
        self._text(self.margin, self.cursor.y, label_lines, KEY_STYLE)
        self._text(self.margin + VALUE_OFFSET, self.cursor.y, value_lines, BODY_STYLE)
        self.cursor.y += height

    # -- document -----------------------------------------------------------

    def build(
        self,
        analysis: AnalysisResult,
        job: JobRecord,
        candidate: CandidateRecord,
        generated_on: date | None = None,
    ) -> ReportDocument:
        """Lay out every present section, then stamp the page footers."""
        self.pages = []
        self.new_page()

        self._add_header(generated_on or date.today())
        self._add_identity(job, candidate)
        self._add_core_sections(analysis)
        self._add_career_trajectory(analysis)
        self._add_location_and_work_style(analysis)
        self._add_professional_credibility(analysis)
        self._stamp_footers()

        return ReportDocument(
            title=self.title,
            filename=report_filename(candidate.person.name, job.objective),
            pages=self.pages,
        )

    def _add_header(self, generated_on: date) -> None:
        self.page.ops.append(RectOp(0, 0, self.page_width, HEADER_HEIGHT, (245, 245, 250)))
        self._text(self.margin, 20, [self.title], TITLE_STYLE)
        self._text(self.margin, 30, [f"Generated on {format_date(generated_on)}"], SUBTITLE_STYLE)
        self.cursor.y = CONTENT_START_Y

    def _add_identity(self, job: JobRecord, candidate: CandidateRecord) -> None:
        y = self.cursor.y
        person = candidate.person
        self.page.ops.append(
            RectOp(self.margin, y - 5, self.content_width, 25, (250, 250, 255), corner_radius=3)
        )
        self._text(self.margin + 5, y + 5, [safe_text(person.name or "Unknown Candidate")], NAME_STYLE)
        self._text(self.margin + 5, y + 12, [safe_text(person.professional_headline or "")], HEADLINE_STYLE)
        y += 30

        self._text(self.margin, y, ["Position:"], FIELD_LABEL_STYLE)
        self._text(self.margin + 25, y, [safe_text(job.objective)], FIELD_VALUE_STYLE)
        y += 6
        self._text(self.margin, y, ["Company:"], FIELD_LABEL_STYLE)
        self._text(self.margin + 25, y, [safe_text(job.company_name or "Unknown")], FIELD_VALUE_STYLE)
        self.cursor.y = y + 12

    def _add_core_sections(self, analysis: AnalysisResult) -> None:
        if analysis.overall_fit_score:
            y = self.cursor.y
            self.page.ops.append(
                RectOp(self.margin, y - 5, self.content_width, 20, (230, 245, 230), corner_radius=3)
            )
            self._text(
                self.margin + 5,
                y + 5,
                [safe_text(f"Overall Fit Score: {analysis.overall_fit_score}")],
                SCORE_STYLE,
            )
            self.cursor.y += 25

        if analysis.job_summary:
            self.add_section_title("Job Summary")
            self.add_paragraph(analysis.job_summary)
            self.cursor.y += 5

        if analysis.matching_skills_and_strengths:
            self.add_section_title("Matching Skills & Strengths")
            self.add_bullet_list(analysis.matching_skills_and_strengths, SKILLS_COLOR)

        if analysis.areas_for_development:
            self.add_section_title("Areas for Development")
            self.add_bullet_list(analysis.areas_for_development, GAPS_COLOR)

        if analysis.recommendations:
            self.add_section_title("Recommendations")
            self.add_bullet_list(analysis.recommendations, RECOMMENDATIONS_COLOR)

    def _add_career_trajectory(self, analysis: AnalysisResult) -> None:
        section = analysis.career_trajectory
        if section is None:
            return
        self.add_section_title("Career Trajectory & Growth")
        if section.summary:
            self.add_paragraph(section.summary)
        if section.growth_indicators:
            self.add_subheading("Growth Indicators:", GROWTH_HEADING_COLOR)
            self.add_bullet_list(section.growth_indicators, GROWTH_COLOR)
        if section.alignment_with_role:
            self.add_key_value("Role Alignment", section.alignment_with_role)

    def _add_location_and_work_style(self, analysis: AnalysisResult) -> None:
        section = analysis.location_and_work_style
        if section is None:
            return
        self.add_section_title("Location & Work Style")
        if section.location_compatibility:
            self.add_key_value("Location", section.location_compatibility)
        if section.remote_work_alignment:
            self.add_key_value("Remote Work", section.remote_work_alignment)
        if section.commitment_level_match:
            self.add_key_value("Commitment", section.commitment_level_match)
        if section.potential_concerns:
            self.add_subheading("Potential Concerns:", CONCERNS_COLOR, gap_before=3)
            self.add_bullet_list(section.potential_concerns, CONCERNS_COLOR)

    def _add_professional_credibility(self, analysis: AnalysisResult) -> None:
        section = analysis.professional_credibility
        if section is None:
            return
        self.add_section_title("Professional Credibility")
        if section.profile_quality:
            self.add_key_value("Profile Quality", section.profile_quality)
        if section.professional_presence:
            self.add_subheading("Professional Presence:", CREDIBILITY_COLOR, gap_before=3)
            self.add_bullet_list(section.professional_presence, CREDIBILITY_COLOR)
        if section.credibility_indicators:
            self.add_subheading("Credibility Indicators:", CREDIBILITY_COLOR, gap_before=3)
            self.add_bullet_list(section.credibility_indicators, CREDIBILITY_COLOR)

    def _stamp_footers(self) -> None:
        total = len(self.pages)
        for page in self.pages:
            page.ops.append(
                TextOp(
                    x=self.page_width / 2,
                    y=self.page_height - FOOTER_OFFSET,
                    lines=(safe_text(f"Page {page.number} of {total} • {self.title}"),),
                    style=FOOTER_STYLE,
                    align="C",
                )
            )


def build_report(
    analysis: AnalysisResult,
    job: JobRecord,
    candidate: CandidateRecord,
    generated_on: date | None = None,
    measurer: TextMeasurer | None = None,
) -> ReportDocument:
    """Lay out a fit analysis with a fresh paginator."""
    return ReportPaginator(measurer).build(analysis, job, candidate, generated_on)
