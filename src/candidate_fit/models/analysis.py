"""Pydantic models for the candidate fit analysis returned by the LLM."""

from __future__ import annotations

import json
from typing import Any

from pydantic import field_validator

from candidate_fit.models.base import PlatformModel

FIT_SCORES = ("Strong Match", "Good Match", "Partial Match", "Needs Development")


def _as_text(value: Any) -> str | None:
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


def _as_text_list(value: Any) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, (list, tuple)):
        value = [value]
    items = (_as_text(v) for v in value)
    return [item for item in items if item]


class _LooseSection(PlatformModel):
    """Section whose scalar fields are text and whose list fields are text lists."""

    @field_validator("*", mode="before")
    @classmethod
    def _coerce(cls, value: Any, info) -> Any:
        field = cls.model_fields[info.field_name]
        if field.annotation == list[str]:
            return _as_text_list(value)
        if field.annotation == str | None:
            return _as_text(value)
        return value


class CareerTrajectory(_LooseSection):
    summary: str | None = None
    growth_indicators: list[str] = []
    alignment_with_role: str | None = None


class LocationAndWorkStyle(_LooseSection):
    location_compatibility: str | None = None
    remote_work_alignment: str | None = None
    commitment_level_match: str | None = None
    potential_concerns: list[str] = []


class ProfessionalCredibility(_LooseSection):
    profile_quality: str | None = None
    professional_presence: list[str] = []
    credibility_indicators: list[str] = []


class AnalysisResult(_LooseSection):
    """One-shot fit analysis. Every field may be absent; renderers check presence."""

    job_summary: str | None = None
    overall_fit_score: str | None = None  # one of FIT_SCORES or free text
    matching_skills_and_strengths: list[str] = []
    areas_for_development: list[str] = []
    recommendations: list[str] = []
    career_trajectory: CareerTrajectory | None = None
    location_and_work_style: LocationAndWorkStyle | None = None
    professional_credibility: ProfessionalCredibility | None = None

    @field_validator(
        "career_trajectory",
        "location_and_work_style",
        "professional_credibility",
        mode="before",
    )
    @classmethod
    def _section_must_be_object(cls, value: Any) -> Any:
        return value if isinstance(value, dict) else None

    @classmethod
    def from_dict(cls, data: dict) -> AnalysisResult:
        return cls.model_validate(data)

    def to_dict(self) -> dict:
        """Dump back to the camelCase wire shape, omitting absent fields."""
        return self.model_dump(by_alias=True, exclude_none=True)
