"""Models for opportunity search filters and results."""

from __future__ import annotations

from dataclasses import dataclass, field

from candidate_fit.models.base import PlatformModel
from candidate_fit.models.job import Organization, Place


@dataclass(frozen=True)
class LanguageFilter:
    term: str
    fluency: str = "conversational"


@dataclass(frozen=True)
class SkillFilter:
    text: str
    proficiency: str = "proficient"


@dataclass(frozen=True)
class SearchFilters:
    keyword: str | None = None
    language: LanguageFilter | None = None
    skills: list[SkillFilter] = field(default_factory=list)
    status: str | None = None


@dataclass(frozen=True)
class SearchOptions:
    size: int = 10
    currency: str = "USD"
    periodicity: str = "hourly"
    lang: str = "en"


class CompensationRange(PlatformModel):
    code: str | None = None
    currency: str | None = None
    min_amount: float | None = None
    max_amount: float | None = None
    periodicity: str = ""
    negotiable: bool = False


class SearchCompensation(PlatformModel):
    data: CompensationRange | None = None
    visible: bool = False


class ResultSkill(PlatformModel):
    name: str = ""
    experience: str | None = None
    proficiency: str | None = None


class JobResult(PlatformModel):
    id: str = ""
    objective: str = ""
    slug: str | None = None
    tagline: str = ""
    theme: str | None = None
    type: str = ""
    opportunity: str = ""
    organizations: list[Organization] = []
    locations: list[str] = []
    remote: bool = False
    status: str = ""
    commitment: str = ""
    compensation: SearchCompensation | None = None
    skills: list[ResultSkill] = []
    place: Place | None = None
    quick_apply: bool = False


class Pagination(PlatformModel):
    previous: str | None = None
    next: str | None = None


class SearchResponse(PlatformModel):
    total: int = 0
    size: int = 0
    results: list[JobResult] = []
    offset: int | None = None
    pagination: Pagination | None = None
