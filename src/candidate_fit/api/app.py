"""HTTP proxy in front of the job platform and the generation service."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Callable
from functools import lru_cache
from urllib.parse import quote

import httpx
from dotenv import load_dotenv
from fastapi import APIRouter, Body, Depends, FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel, Field

from candidate_fit.clients.llm_client import LLMClient
from candidate_fit.clients.torre_client import TorreClient
from candidate_fit.config import AppConfig, load_config
from candidate_fit.errors import MissingCredentialError
from candidate_fit.export.pdf_renderer import build_report_pdf
from candidate_fit.models.analysis import AnalysisResult
from candidate_fit.models.genome import CandidateRecord
from candidate_fit.models.job import JobRecord

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


class ReportRequest(BaseModel):
    analysis: AnalysisResult
    job: JobRecord = Field(default_factory=JobRecord)
    genome: CandidateRecord = Field(default_factory=CandidateRecord)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    return load_config()


async def get_torre_client(config: AppConfig = Depends(get_config)) -> AsyncIterator[TorreClient]:
    async with TorreClient(config.torre) as client:
        yield client


def get_llm_factory(config: AppConfig = Depends(get_config)) -> Callable[[], LLMClient]:
    """The client is built per request so a missing key surfaces as a 500."""
    return lambda: LLMClient(timeout=config.llm.timeout)


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


@router.get("/health", summary="Health Check")
async def health_check():
    return {"status": "healthy"}


@router.post("/search")
async def search(
    body: dict = Body(...),
    size: int = Query(default=10, ge=1, le=100),
    torre: TorreClient = Depends(get_torre_client),
):
    try:
        status, data = await torre.search(body, size=size)
    except httpx.HTTPError as exc:
        logger.exception("Search proxy failed")
        return _error(str(exc) or "Unknown error", 500)
    return JSONResponse(data, status_code=status)


@router.get("/jobs/{job_id}")
async def job_detail(job_id: str, torre: TorreClient = Depends(get_torre_client)):
    try:
        status, data = await torre.fetch_job(job_id)
    except httpx.HTTPError as exc:
        logger.exception("Job proxy failed for %s", job_id)
        return _error(str(exc) or "Unknown error", 500)
    return JSONResponse(data, status_code=status)


@router.get("/genome/{username}")
async def genome(username: str, torre: TorreClient = Depends(get_torre_client)):
    try:
        status, data = await torre.fetch_genome(username)
    except httpx.HTTPError as exc:
        logger.exception("Genome proxy failed for %s", username)
        return _error(str(exc) or "Unknown error", 500)
    return JSONResponse(data, status_code=status)


@router.post("/ai")
async def generate(
    request: Request,
    llm_factory: Callable[[], LLMClient] = Depends(get_llm_factory),
    config: AppConfig = Depends(get_config),
):
    try:
        payload = await request.json()
    except ValueError:
        payload = {}
    if not isinstance(payload, dict):
        payload = {}
    prompt = payload.get("prompt")
    if not isinstance(prompt, str) or not prompt:
        return _error("Prompt is required", 400)
    system_prompt = payload.get("systemPrompt")
    model = payload.get("model")
    try:
        llm = llm_factory()
        response = await llm.generate(
            prompt,
            system=system_prompt if isinstance(system_prompt, str) else "",
            model=model if isinstance(model, str) and model else config.llm.model,
            temperature=config.llm.temperature,
            max_tokens=config.llm.max_tokens,
        )
    except MissingCredentialError as exc:
        logger.error("AI generation error: %s", exc)
        return _error(str(exc), 500)
    except Exception as exc:
        logger.exception("AI generation error")
        return _error(str(exc) or "An unexpected error occurred", 500)
    return {
        "text": response.text,
        "usage": {
            "inputTokens": response.input_tokens,
            "outputTokens": response.output_tokens,
        },
        "finishReason": response.finish_reason,
    }


@router.post("/report")
async def report(payload: ReportRequest):
    pdf_bytes, filename = build_report_pdf(payload.analysis, payload.job, payload.genome)
    fallback = filename.encode("ascii", errors="replace").decode("ascii").replace('"', "_")
    disposition = f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(filename)}"
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": disposition},
    )


def create_app(config: AppConfig | None = None) -> FastAPI:
    config = config or get_config()
    application = FastAPI(title="Candidate Fit API", version="0.1.0")
    application.add_middleware(
        CORSMiddleware,
        allow_origins=list(config.api.allowed_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.include_router(router)
    return application


load_dotenv()
logging.basicConfig(level=get_config().api.log_level, format="%(levelname)s %(name)s: %(message)s")

app = create_app()


def run() -> None:
    import uvicorn

    config = get_config()
    uvicorn.run("candidate_fit.api.app:app", host=config.api.host, port=config.api.port)
