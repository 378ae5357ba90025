"""Tests for candidate fit prompt construction."""

from candidate_fit.models.genome import CandidateRecord
from candidate_fit.models.job import JobRecord
from candidate_fit.pipeline.prompts import (
    CANDIDATE_FIT_SYSTEM_PROMPT,
    MAX_DESCRIPTION_CHARS,
    build_candidate_fit_prompt,
)


class TestBuildCandidateFitPrompt:
    def test_job_block(self, sample_job, sample_candidate):
        prompt = build_candidate_fit_prompt(sample_job, sample_candidate)
        assert "**Position:** Senior Designer" in prompt
        assert "**Company:** Acme" in prompt
        assert "- Figma (Proficient)" in prompt
        assert "- English (Fluent)" in prompt
        assert "**Location:** Remote" in prompt
        assert "**Specific Locations:** Colombia, Mexico" in prompt
        assert "**Compensation:** USD 1,000 - 2,000/month" in prompt
        assert "**Commitment:** Full-time" in prompt

    def test_description_is_stripped_of_html(self, sample_job, sample_candidate):
        prompt = build_candidate_fit_prompt(sample_job, sample_candidate)
        assert "<b>" not in prompt
        assert "design system" in prompt
        assert "&amp;" not in prompt

    def test_candidate_block(self, sample_job, sample_candidate):
        prompt = build_candidate_fit_prompt(sample_job, sample_candidate)
        assert "**Name:** Jane Doe" in prompt
        assert "**Profile Verification:** Verified" in prompt
        assert "**Profile Completeness:** 87%" in prompt
        assert "- Figma (expert) - 4 recommendations" in prompt
        assert "Product Designer at Globex (March/2021 - Present) [Remote]" in prompt
        assert "UI Designer at Initech (January/2018 - February/2021) [Remote]" in prompt
        assert "**Remote Work Experience:** 2 out of 3 positions (67%)" in prompt
        assert "- linkedin: https://linkedin.com/in/janedoe" in prompt

    def test_response_schema_included(self, sample_job, sample_candidate):
        prompt = build_candidate_fit_prompt(sample_job, sample_candidate)
        assert '"overallFitScore"' in prompt
        assert '"professionalCredibility"' in prompt
        assert "Respond ONLY with the JSON object" in prompt

    def test_missing_values_have_placeholders(self):
        prompt = build_candidate_fit_prompt(JobRecord(), CandidateRecord())
        assert "**Company:** Not specified" in prompt
        assert "**Compensation:** Not disclosed" in prompt
        assert "**Job Description:**\nNot available" in prompt
        assert "**Location:** On-site" in prompt
        assert "**Projects:**\nNone listed" in prompt
        assert "**Online Presence:**\nNo links provided" in prompt
        assert "**Remote Work Experience:** 0 out of 0 positions (0%)" in prompt

    def test_description_truncated(self, sample_candidate):
        job = JobRecord.model_validate(
            {"details": [{"code": "responsibilities", "content": "x" * 5000}]}
        )
        prompt = build_candidate_fit_prompt(job, sample_candidate)
        assert "x" * MAX_DESCRIPTION_CHARS in prompt
        assert "x" * (MAX_DESCRIPTION_CHARS + 1) not in prompt

    def test_system_prompt_requires_json(self):
        assert "JSON" in CANDIDATE_FIT_SYSTEM_PROMPT
