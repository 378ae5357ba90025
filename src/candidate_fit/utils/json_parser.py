"""Utility to extract the fit-analysis JSON object from LLM replies."""

from __future__ import annotations

import json
from collections.abc import Callable

from candidate_fit.errors import UnparseableAIResponse
from candidate_fit.models.analysis import AnalysisResult


def extract_json(text: str) -> dict:
    """Extract a JSON object from an LLM reply.

    Tries in order, stopping at the first strategy that yields an object:
    1. Direct json.loads on the full text
    2. First '{' to last '}' (widest span) and parse

    The widest span can swallow prose after the object when that prose
    contains a '}'. Such replies fail rather than being trimmed.
    """
    for strategy in _STRATEGIES:
        result = strategy(text)
        if result is not None:
            return result
    raise UnparseableAIResponse(text)


def extract_analysis(text: str) -> AnalysisResult:
    """Extract and wrap the reply as an AnalysisResult (fields read loosely)."""
    return AnalysisResult.from_dict(extract_json(text))


def _parse_direct(text: str) -> dict | None:
    """Parse the whole reply as JSON."""
    try:
        value = json.loads(text)
    except (json.JSONDecodeError, TypeError):
        return None
    return value if isinstance(value, dict) else None


def _parse_brace_span(text: str) -> dict | None:
    """Try to extract JSON object from first '{' to last '}'."""
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end <= start:
        return None
    try:
        value = json.loads(text[start : end + 1])
    except json.JSONDecodeError:
        return None
    return value if isinstance(value, dict) else None


_STRATEGIES: tuple[Callable[[str], dict | None], ...] = (
    _parse_direct,
    _parse_brace_span,
)
