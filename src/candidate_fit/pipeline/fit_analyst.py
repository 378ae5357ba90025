"""Fit Analyst - Compares a candidate genome against a job record."""

from __future__ import annotations

import logging

from candidate_fit.clients.llm_client import LLMClient
from candidate_fit.config import DEFAULT_MODEL
from candidate_fit.models.analysis import AnalysisResult
from candidate_fit.models.genome import CandidateRecord
from candidate_fit.models.job import JobRecord
from candidate_fit.pipeline.prompts import (
    CANDIDATE_FIT_SYSTEM_PROMPT,
    build_candidate_fit_prompt,
)
from candidate_fit.utils.json_parser import extract_analysis

logger = logging.getLogger(__name__)


class FitAnalyst:
    def __init__(
        self,
        llm: LLMClient,
        model: str = DEFAULT_MODEL,
        temperature: float = 0.2,
        max_tokens: int = 4096,
    ):
        self.llm = llm
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens

    async def analyze(self, job: JobRecord, candidate: CandidateRecord) -> AnalysisResult:
        """Run one generation call and parse the reply into an AnalysisResult."""
        logger.info(
            "Analyzing fit: candidate=%s job=%s", candidate.person.name, job.objective
        )
        response = await self.llm.generate(
            prompt=build_candidate_fit_prompt(job, candidate),
            system=CANDIDATE_FIT_SYSTEM_PROMPT,
            model=self.model,
            temperature=self.temperature,
            max_tokens=self.max_tokens,
        )
        if response.finish_reason == "max_tokens":
            logger.warning("Fit analysis reply was truncated at %d tokens", self.max_tokens)
        return extract_analysis(response.text)
