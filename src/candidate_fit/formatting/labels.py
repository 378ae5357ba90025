"""Lookup tables turning platform codes into display labels.

Each ``format_*`` function maps a known code to its label and otherwise falls
back to the code with hyphens replaced by spaces and every word capitalised.
"""

from __future__ import annotations

import html
import re
from datetime import date, datetime

from candidate_fit.models.job import Agreement, Commitment, JobCompensation

TYPE_LABELS: dict[str, str] = {
    "full-time-employment": "Full-time",
    "part-time-employment": "Part-time",
    "freelance": "Freelance",
    "internship": "Internship",
    "flexible-jobs": "Flexible",
    "contract": "Contract",
    "employee": "Employee",
    "flexible-job": "Flexible",
}

PROFICIENCY_LABELS: dict[str, str] = {
    "no-experience-interested": "Interested",
    "proficient": "Proficient",
    "expert": "Expert",
    "master": "Master",
    "potential-to-develop": "Learning",
}

FLUENCY_LABELS: dict[str, str] = {
    "fully-fluent": "Fluent",
    "conversational": "Conversational",
    "reading": "Reading",
    "native": "Native",
    "basic": "Basic",
}

COMMITMENT_LABELS: dict[str, str] = {
    "full-time": "Full-time",
    "part-time": "Part-time",
    "flexible": "Flexible",
    "contract": "Contract",
}

AGREEMENT_LABELS: dict[str, str] = {
    "non-employment-contract": "Non-employment Contract",
    "employment-contract": "Employment Contract",
    "freelance": "Freelance",
}

PERIOD_SUFFIXES: dict[str, str] = {
    "monthly": "/month",
    "yearly": "/year",
    "hourly": "/hour",
}

THEME_COLORS: dict[str, str] = {
    "deepPurple300": "#9575cd",
    "deepPurple200": "#b39ddb",
    "deepPurple500": "#673ab7",
    "purple300": "#ba68c8",
    "purple200": "#ce93d8",
    "purple500": "#9c27b0",
    "blue300": "#64b5f6",
    "blue200": "#90caf9",
    "blue500": "#2196f3",
    "cyan300": "#4dd0e1",
    "cyan500": "#00bcd4",
    "teal300": "#4db6ac",
    "teal500": "#009688",
    "green300": "#81c784",
    "green500": "#4caf50",
    "lightGreen300": "#aed581",
    "lightGreen500": "#8bc34a",
    "lime300": "#dce775",
    "lime500": "#cddc39",
    "yellow300": "#fff176",
    "yellow500": "#ffeb3b",
    "amber300": "#ffd54f",
    "amber500": "#ffc107",
    "orange300": "#ffb74d",
    "orange400": "#ffa726",
    "orange500": "#ff9800",
    "red300": "#e57373",
    "red500": "#f44336",
    "pink300": "#f06292",
    "pink500": "#e91e63",
}
DEFAULT_THEME_COLOR = "#cdff50"


def title_fallback(code: str | None) -> str:
    """'potential-to-develop' -> 'Potential To Develop'."""
    if not code:
        return ""
    return re.sub(r"\b\w", lambda m: m.group(0).upper(), code.replace("-", " "))


def _lookup(table: dict[str, str], code: str | None) -> str:
    if code in table:
        return table[code]
    return title_fallback(code)


def format_type(code: str | None) -> str:
    return _lookup(TYPE_LABELS, code)


def format_proficiency(code: str | None) -> str:
    return _lookup(PROFICIENCY_LABELS, code)


def format_fluency(code: str | None) -> str:
    return _lookup(FLUENCY_LABELS, code)


def format_commitment(commitment: Commitment | str | None) -> str:
    code = commitment.code if isinstance(commitment, Commitment) else commitment
    return _lookup(COMMITMENT_LABELS, code)


def format_agreement(agreement: Agreement | str | None) -> str:
    code = agreement.type if isinstance(agreement, Agreement) else agreement
    return _lookup(AGREEMENT_LABELS, code)


def format_compensation(compensation: JobCompensation | None) -> str | None:
    """Return e.g. 'USD 1,000 - 2,000/month', or None when not disclosed."""
    if compensation is None or not compensation.visible:
        return None
    if (
        not compensation.currency
        or compensation.min_amount is None
        or compensation.max_amount is None
    ):
        return None
    periodicity = compensation.periodicity or ""
    period = PERIOD_SUFFIXES.get(periodicity, f"/{periodicity}" if periodicity else "")
    return (
        f"{compensation.currency} {_format_number(compensation.min_amount)}"
        f" - {_format_number(compensation.max_amount)}{period}"
    )


def _format_number(value: float) -> str:
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,.2f}".rstrip("0").rstrip(".")


def format_date(value: str | date | datetime) -> str:
    """ISO timestamp or date -> 'January 5, 2025'."""
    if isinstance(value, str):
        value = datetime.fromisoformat(value.replace("Z", "+00:00"))
    return f"{value:%B} {value.day}, {value.year}"


def theme_color(theme: str | None) -> str:
    return THEME_COLORS.get(theme or "", DEFAULT_THEME_COLOR)


def fit_score_color(score: str | None) -> str:
    """Map a fit score to a badge color name."""
    lowered = (score or "").lower()
    if "strong" in lowered:
        return "green"
    if "good" in lowered:
        return "emerald"
    if "partial" in lowered:
        return "yellow"
    if "needs" in lowered or "weak" in lowered:
        return "orange"
    return "blue"


def strip_html(text: str | None) -> str:
    """Replace tags with spaces and decode entities."""
    if not text:
        return ""
    return html.unescape(re.sub(r"<[^>]*>", " ", text))
