"""Async client for the job platform's search, job-detail and genome endpoints."""

from __future__ import annotations

import logging
from urllib.parse import quote

import httpx

from candidate_fit.config import TorreConfig
from candidate_fit.errors import UpstreamError
from candidate_fit.models.genome import CandidateRecord
from candidate_fit.models.job import JobRecord
from candidate_fit.models.search import SearchFilters, SearchOptions, SearchResponse

logger = logging.getLogger(__name__)


def build_search_body(filters: SearchFilters, lang: str = "en") -> dict:
    """Build the ``{"and": [...]}`` search body from filters."""
    and_filters: list[dict] = []
    if filters.keyword:
        and_filters.append({"keywords": {"term": filters.keyword, "locale": lang}})
    if filters.language:
        and_filters.append(
            {
                "language": {
                    "term": filters.language.term,
                    "fluency": filters.language.fluency or "conversational",
                }
            }
        )
    for skill in filters.skills:
        and_filters.append(
            {
                "skill/role": {
                    "text": skill.text,
                    "proficiency": skill.proficiency or "proficient",
                }
            }
        )
    if filters.status:
        and_filters.append({"status": {"code": filters.status}})
    return {"and": and_filters}


class TorreClient:
    """Thin proxy over the three public REST endpoints.

    The ``search``/``fetch_*`` methods forward raw payloads and return
    ``(status_code, json)``; the ``*_opportunities``/``get_*`` methods parse
    into models and raise UpstreamError on non-2xx answers.
    """

    def __init__(
        self,
        config: TorreConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.config = config or TorreConfig()
        self.client = httpx.AsyncClient(
            timeout=self.config.timeout,
            transport=transport,
            headers={"Content-Type": "application/json"},
        )

    async def __aenter__(self) -> TorreClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.client.aclose()

    async def search(
        self,
        body: dict,
        size: int | None = None,
        currency: str | None = None,
        periodicity: str | None = None,
        lang: str | None = None,
    ) -> tuple[int, dict]:
        """POST a search body as-is and return the upstream status and JSON."""
        params = {
            "currency": currency or self.config.currency,
            "periodicity": periodicity or self.config.periodicity,
            "lang": lang or self.config.lang,
            "size": str(size or self.config.default_size),
            "contextFeature": "job_feed",
        }
        logger.info("Searching opportunities: size=%s", params["size"])
        response = await self.client.post(self.config.search_url, params=params, json=body)
        return response.status_code, _json_or_error(response)

    async def fetch_job(self, job_id: str) -> tuple[int, dict]:
        url = f"{self.config.job_url}/{quote(job_id, safe='')}"
        logger.info("Fetching job %s", job_id)
        response = await self.client.get(url)
        return response.status_code, _json_or_error(response)

    async def fetch_genome(self, username: str) -> tuple[int, dict]:
        url = f"{self.config.genome_url}/{quote(username, safe='')}"
        logger.info("Fetching genome %s", username)
        response = await self.client.get(url)
        return response.status_code, _json_or_error(response)

    async def search_opportunities(
        self,
        filters: SearchFilters,
        options: SearchOptions | None = None,
    ) -> SearchResponse:
        """Search opportunities with structured filters."""
        options = options or SearchOptions(size=self.config.default_size)
        status, data = await self.search(
            build_search_body(filters, lang=options.lang),
            size=options.size,
            currency=options.currency,
            periodicity=options.periodicity,
            lang=options.lang,
        )
        _raise_for_status(status, "Search failed", data)
        return SearchResponse.model_validate(data)

    async def get_job(self, job_id: str) -> JobRecord:
        status, data = await self.fetch_job(job_id)
        _raise_for_status(status, "Failed to fetch job details", data)
        return JobRecord.model_validate(data)

    async def get_genome(self, username: str) -> CandidateRecord:
        status, data = await self.fetch_genome(username)
        _raise_for_status(status, "Failed to fetch genome", data)
        return CandidateRecord.model_validate(data)


def _json_or_error(response: httpx.Response) -> dict:
    """Decode the body; non-JSON bodies become an error envelope."""
    try:
        data = response.json()
    except ValueError:
        return {"error": response.reason_phrase or response.text[:200]}
    if isinstance(data, dict):
        return data
    return {"data": data}


def _raise_for_status(status: int, prefix: str, data: dict | None = None) -> None:
    if 200 <= status < 300:
        return
    reason = httpx.codes.get_reason_phrase(status) or f"HTTP {status}"
    logger.warning("%s: upstream status %d %s", prefix, status, data or "")
    raise UpstreamError(status, f"{prefix}: {reason}")
