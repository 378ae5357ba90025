"""Fit analysis pipeline - genome fetch, generation call, parse."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass

from candidate_fit.clients.llm_client import LLMClient
from candidate_fit.clients.torre_client import TorreClient
from candidate_fit.config import DEFAULT_MODEL
from candidate_fit.logging.cost_calculator import calculate_cost
from candidate_fit.logging.models import UsageLog
from candidate_fit.models.analysis import AnalysisResult
from candidate_fit.models.genome import CandidateRecord
from candidate_fit.models.job import JobRecord
from candidate_fit.pipeline.fit_analyst import FitAnalyst

logger = logging.getLogger(__name__)


@dataclass
class FitAnalysisOutcome:
    """Result of one analysis cycle, owned by the request that produced it."""

    candidate: CandidateRecord
    analysis: AnalysisResult
    usage: UsageLog

    @property
    def elapsed_seconds(self) -> float:
        return self.usage.elapsed_seconds


class FitAnalysisPipeline:
    """Runs the three analysis steps in strict sequence. Nothing is retried."""

    def __init__(
        self,
        torre: TorreClient,
        llm: LLMClient,
        *,
        model: str = DEFAULT_MODEL,
        temperature: float = 0.2,
        max_tokens: int = 4096,
    ):
        self.torre = torre
        self.llm = llm
        self.model = model
        self.analyst = FitAnalyst(
            llm, model=model, temperature=temperature, max_tokens=max_tokens
        )

    async def run(
        self,
        job: JobRecord,
        username: str,
        *,
        on_phase: Callable[[str, str], None] | None = None,
    ) -> FitAnalysisOutcome:
        """Fetch the candidate genome, generate the analysis and parse it.

        Args:
            job: The job record the candidate is compared against.
            username: Candidate username on the job platform.
            on_phase: Optional callback(phase_name, detail) for progress.
        """
        username = username.strip()
        if not username:
            raise ValueError("username is required")

        def _notify(phase: str, detail: str = ""):
            if on_phase:
                on_phase(phase, detail)

        start = time.monotonic()
        usage = UsageLog(
            username=username, job_id=job.id, job_title=job.objective, model=self.model
        )
        try:
            _notify("genome", f"Fetching profile for {username}")
            candidate = await self.torre.get_genome(username)

            _notify("analysis", "Generating fit analysis")
            analysis = await self.analyst.analyze(job, candidate)
        except Exception as exc:
            usage.success = False
            usage.error_message = str(exc)
            raise
        finally:
            tokens = self.llm.get_token_summary()
            usage.elapsed_seconds = time.monotonic() - start
            usage.total_input_tokens = tokens["input"]
            usage.total_output_tokens = tokens["output"]
            usage.estimated_cost_usd = calculate_cost(tokens["calls"])
            logger.info("Fit analysis usage: %s", usage.model_dump_json())

        usage.fit_score = analysis.overall_fit_score
        _notify("done", f"Done in {usage.elapsed_seconds:.1f}s")
        return FitAnalysisOutcome(candidate=candidate, analysis=analysis, usage=usage)
