"""Streamlit dashboard for candidate-fit.

Flow: search opportunities -> pick a job -> enter a candidate username ->
run the fit analysis -> download the PDF report.
"""

from __future__ import annotations

import asyncio
import logging
import os

logger = logging.getLogger(__name__)

import nest_asyncio
import streamlit as st
from dotenv import load_dotenv

load_dotenv()
nest_asyncio.apply()

# Streamlit Cloud: sync st.secrets -> os.environ so backend clients can read them
for key in ("ANTHROPIC_API_KEY", "ANTHROPIC_MODEL"):
    if key not in os.environ:
        try:
            os.environ[key] = st.secrets[key]
        except (KeyError, FileNotFoundError):
            logger.debug("Secret %s not configured", key)

from candidate_fit.clients.llm_client import LLMClient
from candidate_fit.clients.torre_client import TorreClient
from candidate_fit.config import load_config
from candidate_fit.errors import (
    CandidateFitError,
    MissingCredentialError,
    UnparseableAIResponse,
    user_message,
)
from candidate_fit.export.pdf_renderer import build_report_pdf
from candidate_fit.formatting.labels import (
    fit_score_color,
    format_agreement,
    format_commitment,
    format_compensation,
    format_date,
    format_fluency,
    format_proficiency,
    format_type,
    strip_html,
    theme_color,
)
from candidate_fit.models.analysis import AnalysisResult
from candidate_fit.models.job import JobRecord
from candidate_fit.models.search import SearchFilters, SearchOptions
from candidate_fit.pipeline.orchestrator import FitAnalysisPipeline

# Streamlit markdown only knows a fixed palette
_SCORE_PALETTE = {"emerald": "green", "yellow": "orange"}

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------

st.set_page_config(
    page_title="Candidate Fit",
    page_icon=":briefcase:",
    layout="wide",
)


def _get_config():
    return load_config()


def _clear(*keys: str) -> None:
    for key in keys:
        st.session_state.pop(key, None)


# ---------------------------------------------------------------------------
# Async actions
# ---------------------------------------------------------------------------


async def _search(keyword: str, size: int):
    config = _get_config()
    async with TorreClient(config.torre) as torre:
        return await torre.search_opportunities(
            SearchFilters(keyword=keyword or None, status="open"),
            SearchOptions(size=size),
        )


async def _load_job(job_id: str) -> JobRecord:
    async with TorreClient(_get_config().torre) as torre:
        return await torre.get_job(job_id)


async def _analyze(job: JobRecord, username: str, on_phase):
    config = _get_config()
    llm = LLMClient(timeout=config.llm.timeout)
    async with TorreClient(config.torre) as torre:
        pipeline = FitAnalysisPipeline(
            torre,
            llm,
            model=config.llm.model,
            temperature=config.llm.temperature,
            max_tokens=config.llm.max_tokens,
        )
        return await pipeline.run(job, username, on_phase=on_phase)


# ---------------------------------------------------------------------------
# Sidebar: search
# ---------------------------------------------------------------------------

with st.sidebar:
    st.title("Candidate Fit")
    st.caption("Job search and AI candidate fit analysis")

    keyword = st.text_input("Keyword", placeholder="e.g. designer")
    size = st.slider(
        "Results",
        min_value=5,
        max_value=50,
        value=min(max(_get_config().torre.default_size, 5), 50),
    )

    if st.button("Search", type="primary"):
        _clear("search_results", "job", "outcome", "report_pdf", "report_filename")
        with st.spinner("Searching opportunities..."):
            try:
                st.session_state["search_results"] = asyncio.run(_search(keyword.strip(), size))
            except CandidateFitError as exc:
                logger.warning("Opportunity search failed: %s", exc)
                st.error(user_message(exc))
            except Exception:
                logger.exception("Opportunity search failed")
                st.error("Search failed. Please try again.")

    results = st.session_state.get("search_results")
    if results is not None:
        st.caption(f"{results.total:,} opportunities found")
        for result in results.results:
            company = result.organizations[0].name if result.organizations else "Unknown"
            if st.button(f"{result.objective} · {company}", key=f"job-{result.id}"):
                _clear("job", "outcome", "report_pdf", "report_filename")
                with st.spinner("Loading job details..."):
                    try:
                        st.session_state["job"] = asyncio.run(_load_job(result.id))
                    except CandidateFitError as exc:
                        st.error(user_message(exc))
                    except Exception:
                        logger.exception("Job detail fetch failed")
                        st.error("Could not load the job. Please try again.")


# ---------------------------------------------------------------------------
# Job details
# ---------------------------------------------------------------------------


def _render_job(job: JobRecord) -> None:
    color = theme_color(job.theme)
    st.markdown(
        f"<div style='border-left: 6px solid {color}; padding-left: 12px'>"
        f"<h2 style='margin-bottom: 0'>{job.objective}</h2>"
        f"<p>{job.company_name or 'Unknown'}</p></div>",
        unsafe_allow_html=True,
    )
    if job.tagline:
        st.markdown(f"_{job.tagline}_")

    cols = st.columns(4)
    cols[0].metric("Type", format_type(job.opportunity) or "-")
    cols[1].metric("Commitment", format_commitment(job.commitment) or "-")
    cols[2].metric("Agreement", format_agreement(job.agreement) or "-")
    if job.place and job.place.remote:
        cols[3].metric("Location", "Remote")
    elif job.place and job.place.anywhere:
        cols[3].metric("Location", "Anywhere")
    else:
        cols[3].metric("Location", "On-site")

    compensation = format_compensation(job.compensation)
    if compensation:
        st.markdown(f"**Compensation:** {compensation}")
    if job.created:
        st.caption(f"Posted {format_date(job.created)}")

    if job.strengths:
        st.markdown("**Skills**")
        st.markdown(
            "\n".join(f"- {s.name} ({format_proficiency(s.proficiency)})" for s in job.strengths)
        )
    if job.languages:
        st.markdown("**Languages**")
        st.markdown(
            "\n".join(
                f"- {lang.language.name} ({format_fluency(lang.fluency)})" for lang in job.languages
            )
        )
    responsibilities = strip_html(job.detail("responsibilities"))
    if responsibilities:
        with st.expander("Responsibilities"):
            st.write(responsibilities)


def _render_list(title: str, items: list[str]) -> None:
    if items:
        st.subheader(title)
        st.markdown("\n".join(f"- {item}" for item in items))


def _render_analysis(analysis: AnalysisResult) -> None:
    if analysis.overall_fit_score:
        color = fit_score_color(analysis.overall_fit_score)
        color = _SCORE_PALETTE.get(color, color)
        st.markdown(f"### Overall Fit Score: :{color}[{analysis.overall_fit_score}]")
    if analysis.job_summary:
        st.subheader("Job Summary")
        st.write(analysis.job_summary)
    _render_list("Matching Skills & Strengths", analysis.matching_skills_and_strengths)
    _render_list("Areas for Development", analysis.areas_for_development)
    _render_list("Recommendations", analysis.recommendations)

    career = analysis.career_trajectory
    if career:
        st.subheader("Career Trajectory & Growth")
        if career.summary:
            st.write(career.summary)
        _render_list("Growth Indicators", career.growth_indicators)
        if career.alignment_with_role:
            st.markdown(f"**Role Alignment:** {career.alignment_with_role}")

    work = analysis.location_and_work_style
    if work:
        st.subheader("Location & Work Style")
        for label, value in (
            ("Location", work.location_compatibility),
            ("Remote Work", work.remote_work_alignment),
            ("Commitment", work.commitment_level_match),
        ):
            if value:
                st.markdown(f"**{label}:** {value}")
        _render_list("Potential Concerns", work.potential_concerns)

    credibility = analysis.professional_credibility
    if credibility:
        st.subheader("Professional Credibility")
        if credibility.profile_quality:
            st.markdown(f"**Profile Quality:** {credibility.profile_quality}")
        _render_list("Professional Presence", credibility.professional_presence)
        _render_list("Credibility Indicators", credibility.credibility_indicators)


job = st.session_state.get("job")
if job is None:
    st.header("Candidate Fit")
    st.markdown("Search for an opportunity in the sidebar and pick one to analyze a candidate.")
    st.stop()

_render_job(job)
st.divider()

# ---------------------------------------------------------------------------
# Fit analysis
# ---------------------------------------------------------------------------

st.header("Candidate Fit Analysis")
username = st.text_input("Candidate username", placeholder="e.g. janedoe")

if st.button("Analyze fit", type="primary", disabled=not username.strip()):
    _clear("outcome", "report_pdf", "report_filename")
    phases = {
        "genome": 0.2,
        "analysis": 0.5,
        "done": 1.0,
    }
    progress_bar = st.progress(0, text="Starting...")

    def on_phase(phase: str, detail: str):
        progress_bar.progress(phases.get(phase, 0), text=detail)

    try:
        outcome = asyncio.run(_analyze(job, username, on_phase))
    except MissingCredentialError as exc:
        progress_bar.empty()
        st.error(str(exc))
    except UnparseableAIResponse as exc:
        progress_bar.empty()
        logger.warning("Unparseable AI response: %s", exc.raw_text)
        st.error(user_message(exc))
    except CandidateFitError as exc:
        progress_bar.empty()
        logger.warning("Fit analysis failed: %s", exc)
        st.error(user_message(exc))
    except Exception:
        progress_bar.empty()
        logger.exception("Fit analysis failed")
        st.error("Analysis failed. Please try again.")
    else:
        st.session_state["outcome"] = outcome
        try:
            pdf_bytes, filename = build_report_pdf(outcome.analysis, job, outcome.candidate)
            st.session_state["report_pdf"] = pdf_bytes
            st.session_state["report_filename"] = filename
        except Exception:
            logger.exception("PDF generation failed")
            st.warning("The PDF report could not be generated.")

outcome = st.session_state.get("outcome")
if outcome is not None:
    person = outcome.candidate.person
    st.markdown(f"**{person.name or 'Unknown Candidate'}**  \n{person.professional_headline or ''}")
    _render_analysis(outcome.analysis)
    st.caption(
        f"{outcome.usage.total_input_tokens:,} input / {outcome.usage.total_output_tokens:,} output tokens"
        f" · ${outcome.usage.estimated_cost_usd:.4f} · {outcome.elapsed_seconds:.1f}s"
    )
    if "report_pdf" in st.session_state:
        st.download_button(
            "Download PDF report",
            data=st.session_state["report_pdf"],
            file_name=st.session_state["report_filename"],
            mime="application/pdf",
        )
