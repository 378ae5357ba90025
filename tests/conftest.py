"""Shared test fixtures."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from candidate_fit.clients.llm_client import LLMClient, LLMResponse
from candidate_fit.models.analysis import AnalysisResult
from candidate_fit.models.genome import CandidateRecord
from candidate_fit.models.job import JobRecord


@pytest.fixture
def sample_job_dict() -> dict:
    return {
        "id": "KWNqmBmd",
        "objective": "Senior Designer",
        "tagline": "Shape the product experience for millions of users",
        "theme": "blue500",
        "status": "open",
        "opportunity": "employee",
        "created": "2025-01-05T10:00:00.000Z",
        "organizations": [{"id": 1, "name": "Acme", "picture": None}],
        "strengths": [
            {"name": "Figma", "proficiency": "proficient"},
            {"name": "Design systems", "proficiency": "expert"},
        ],
        "languages": [{"language": {"code": "en", "name": "English"}, "fluency": "fully-fluent"}],
        "place": {
            "remote": True,
            "anywhere": False,
            "location": [{"id": "Colombia"}, {"id": "Mexico"}],
        },
        "details": [
            {"code": "responsibilities", "content": "<p>Own the <b>design system</b> &amp; UI</p>"},
        ],
        "commitment": {"code": "full-time", "hours": 40},
        "agreement": {"type": "full-time-employment"},
        "compensation": {
            "currency": "USD",
            "minAmount": 1000,
            "maxAmount": 2000,
            "periodicity": "monthly",
            "visible": True,
        },
    }


@pytest.fixture
def sample_job(sample_job_dict) -> JobRecord:
    return JobRecord.model_validate(sample_job_dict)


@pytest.fixture
def sample_genome_dict() -> dict:
    return {
        "person": {
            "name": "Jane Doe",
            "professionalHeadline": "Product designer",
            "summaryOfBio": "Designer focused on accessible interfaces.",
            "completion": 0.87,
            "verified": True,
            "location": {"name": "Bogota, Colombia", "timezone": "America/Bogota"},
            "links": [{"name": "linkedin", "address": "https://linkedin.com/in/janedoe"}],
        },
        "stats": {"strengths": 2, "jobs": 3, "projects": 1, "publications": 0, "awards": 1},
        "strengths": [
            {"name": "Figma", "proficiency": "expert", "recommendations": 4},
            {"name": "User research", "proficiency": None, "recommendations": 0},
        ],
        "jobs": [
            {
                "name": "Product Designer",
                "organizations": [{"name": "Globex"}],
                "fromMonth": "March",
                "fromYear": "2021",
                "remote": True,
            },
            {
                "name": "UI Designer",
                "organizations": [{"name": "Initech"}],
                "fromMonth": "January",
                "fromYear": "2018",
                "toMonth": "February",
                "toYear": "2021",
                "remote": True,
            },
            {"name": "Intern", "fromYear": "2017", "toYear": "2017"},
        ],
        "education": [{"name": "BA Design", "organizations": [{"name": "Universidad Nacional"}]}],
        "projects": [{"name": "Open icons", "additionalInfo": "An open icon set"}],
        "awards": [{"name": "Best UI", "organizations": [{"name": "Design Week"}]}],
        "languages": [{"language": "English", "fluency": "fully-fluent"}],
    }


@pytest.fixture
def sample_candidate(sample_genome_dict) -> CandidateRecord:
    return CandidateRecord.model_validate(sample_genome_dict)


@pytest.fixture
def sample_analysis_dict() -> dict:
    return {
        "jobSummary": "Acme is hiring a senior designer to lead its design system.",
        "overallFitScore": "Good Match",
        "matchingSkillsAndStrengths": ["Expert Figma user", "Five years of remote work"],
        "areasForDevelopment": ["Limited design-system leadership"],
        "recommendations": ["Highlight the open icon set", "Mention accessibility work"],
        "careerTrajectory": {
            "summary": "Steady progression from intern to product designer.",
            "growthIndicators": ["Promoted twice"],
            "alignmentWithRole": "The senior role is the natural next step.",
        },
        "locationAndWorkStyle": {
            "locationCompatibility": "Colombia is an accepted location.",
            "remoteWorkAlignment": "All recent roles were remote.",
            "commitmentLevelMatch": "Full-time matches.",
            "potentialConcerns": ["None significant"],
        },
        "professionalCredibility": {
            "profileQuality": "Verified and 87% complete.",
            "professionalPresence": ["Active LinkedIn profile"],
            "credibilityIndicators": ["Four recommendations for Figma"],
        },
    }


@pytest.fixture
def sample_analysis(sample_analysis_dict) -> AnalysisResult:
    return AnalysisResult.from_dict(sample_analysis_dict)


@pytest.fixture
def mock_llm_client() -> LLMClient:
    """Create a mock LLM client."""
    client = AsyncMock(spec=LLMClient)
    client.generate = AsyncMock(
        return_value=LLMResponse(text="{}", input_tokens=100, output_tokens=50)
    )
    client.generate_json = AsyncMock(return_value={})
    client.get_token_summary.return_value = {
        "input": 100,
        "output": 50,
        "calls": [("claude-haiku-4-5-20251001", 100, 50)],
    }
    return client
