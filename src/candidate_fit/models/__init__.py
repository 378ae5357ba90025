"""Data models for job records, candidate genomes and fit analyses."""

from candidate_fit.models.analysis import (
    FIT_SCORES,
    AnalysisResult,
    CareerTrajectory,
    LocationAndWorkStyle,
    ProfessionalCredibility,
)
from candidate_fit.models.genome import CandidateRecord
from candidate_fit.models.job import JobRecord
from candidate_fit.models.search import (
    JobResult,
    LanguageFilter,
    SearchFilters,
    SearchOptions,
    SearchResponse,
    SkillFilter,
)

__all__ = [
    "FIT_SCORES",
    "AnalysisResult",
    "CandidateRecord",
    "CareerTrajectory",
    "JobRecord",
    "JobResult",
    "LanguageFilter",
    "LocationAndWorkStyle",
    "ProfessionalCredibility",
    "SearchFilters",
    "SearchOptions",
    "SearchResponse",
    "SkillFilter",
]
