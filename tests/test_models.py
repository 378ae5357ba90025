"""Tests for Pydantic data models."""

import pytest
from pydantic import ValidationError

from candidate_fit.models.analysis import FIT_SCORES, AnalysisResult
from candidate_fit.models.genome import CandidateRecord
from candidate_fit.models.job import JobRecord
from candidate_fit.models.search import SearchResponse


class TestAnalysisResult:
    def test_from_dict_full(self, sample_analysis):
        assert sample_analysis.overall_fit_score in FIT_SCORES
        assert sample_analysis.matching_skills_and_strengths == [
            "Expert Figma user",
            "Five years of remote work",
        ]
        assert sample_analysis.location_and_work_style.potential_concerns == ["None significant"]
        assert sample_analysis.professional_credibility.profile_quality == "Verified and 87% complete."

    def test_empty_dict(self):
        result = AnalysisResult.from_dict({})
        assert result.job_summary is None
        assert result.matching_skills_and_strengths == []
        assert result.professional_credibility is None

    def test_nulls_collapse_to_defaults(self):
        result = AnalysisResult.from_dict(
            {"jobSummary": None, "recommendations": None, "careerTrajectory": None}
        )
        assert result.job_summary is None
        assert result.recommendations == []
        assert result.career_trajectory is None

    def test_bare_string_becomes_one_item_list(self):
        result = AnalysisResult.from_dict({"recommendations": "Practice system design"})
        assert result.recommendations == ["Practice system design"]

    def test_scalars_coerced_to_text(self):
        result = AnalysisResult.from_dict({"overallFitScore": 7, "areasForDevelopment": [1, "two"]})
        assert result.overall_fit_score == "7"
        assert result.areas_for_development == ["1", "two"]

    def test_non_object_section_becomes_none(self):
        result = AnalysisResult.from_dict({"careerTrajectory": "steady", "locationAndWorkStyle": []})
        assert result.career_trajectory is None
        assert result.location_and_work_style is None

    def test_free_text_score_accepted(self):
        result = AnalysisResult.from_dict({"overallFitScore": "Excellent Fit"})
        assert result.overall_fit_score == "Excellent Fit"

    def test_snake_case_names_accepted(self):
        result = AnalysisResult(job_summary="Summary", overall_fit_score="Good Match")
        assert result.job_summary == "Summary"

    def test_to_dict_uses_wire_names(self, sample_analysis, sample_analysis_dict):
        assert sample_analysis.to_dict() == sample_analysis_dict

    def test_frozen(self, sample_analysis):
        with pytest.raises(ValidationError):
            sample_analysis.job_summary = "changed"


class TestJobRecord:
    def test_parses_camel_case(self, sample_job):
        assert sample_job.objective == "Senior Designer"
        assert sample_job.compensation.min_amount == 1000
        assert sample_job.languages[0].language.name == "English"
        assert sample_job.place.location[1].id == "Mexico"

    def test_company_name(self, sample_job):
        assert sample_job.company_name == "Acme"
        assert JobRecord().company_name is None

    def test_detail_lookup(self, sample_job):
        assert "design system" in sample_job.detail("responsibilities")
        assert sample_job.detail("benefits") is None

    def test_unknown_fields_ignored(self):
        job = JobRecord.model_validate({"objective": "Engineer", "somethingNew": {"a": 1}})
        assert job.objective == "Engineer"

    def test_null_fields_use_defaults(self):
        job = JobRecord.model_validate({"objective": None, "strengths": None, "place": None})
        assert job.objective == ""
        assert job.strengths == []
        assert job.place is None


class TestCandidateRecord:
    def test_parses_person(self, sample_candidate):
        person = sample_candidate.person
        assert person.name == "Jane Doe"
        assert person.professional_headline == "Product designer"
        assert person.location.timezone == "America/Bogota"

    def test_experience_organization_name(self, sample_candidate):
        assert sample_candidate.jobs[0].organization_name == "Globex"
        assert sample_candidate.jobs[2].organization_name is None

    def test_numeric_years_coerced_to_text(self):
        candidate = CandidateRecord.model_validate({"jobs": [{"name": "Dev", "fromYear": 2020}]})
        assert candidate.jobs[0].from_year == "2020"

    def test_remote_job_ratio(self, sample_candidate):
        assert sample_candidate.remote_job_ratio() == (2, 3, 67)

    def test_remote_job_ratio_rounds_half_up(self):
        jobs = [{"name": "a", "remote": True}] + [{"name": str(i)} for i in range(7)]
        candidate = CandidateRecord.model_validate({"jobs": jobs})
        # 1/8 = 12.5%
        assert candidate.remote_job_ratio() == (1, 8, 13)

    def test_remote_job_ratio_no_jobs(self):
        assert CandidateRecord().remote_job_ratio() == (0, 0, 0)

    def test_empty_genome(self):
        candidate = CandidateRecord.model_validate({})
        assert candidate.person.name is None
        assert candidate.stats.jobs == 0


class TestSearchResponse:
    def test_parses_results(self):
        data = {
            "total": 120,
            "size": 2,
            "results": [
                {
                    "id": "abc",
                    "objective": "Designer",
                    "organizations": [{"name": "Acme"}],
                    "remote": True,
                    "compensation": {
                        "data": {"currency": "USD", "minAmount": 10, "maxAmount": 20},
                        "visible": True,
                    },
                },
                {"id": "def", "objective": "Engineer"},
            ],
        }
        response = SearchResponse.model_validate(data)
        assert response.total == 120
        assert [r.id for r in response.results] == ["abc", "def"]
        assert response.results[0].organizations[0].name == "Acme"
        assert response.results[0].compensation.visible is True

    def test_empty_response(self):
        response = SearchResponse.model_validate({})
        assert response.results == []
        assert response.total == 0
