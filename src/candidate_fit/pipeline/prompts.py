"""Prompt templates for the candidate fit analysis."""

from __future__ import annotations

from candidate_fit.formatting.labels import (
    format_commitment,
    format_compensation,
    format_fluency,
    format_proficiency,
    format_type,
    strip_html,
)
from candidate_fit.models.genome import CandidateRecord, GenomeExperience
from candidate_fit.models.job import JobRecord

CANDIDATE_FIT_SYSTEM_PROMPT = (
    "You are an expert talent acquisition specialist and career advisor. "
    "Always respond with valid JSON only. "
    "Do not include any text outside the JSON object."
)

RESPONSE_SCHEMA = """\
{
  "jobSummary": "A compelling 2-3 paragraph summary of the job opportunity. Highlight key aspects, company culture hints, and what makes this role attractive. Write as if explaining the opportunity to a potential candidate.",
  "overallFitScore": "One of: 'Strong Match', 'Good Match', 'Partial Match', or 'Needs Development'",
  "matchingSkillsAndStrengths": [
    "First matching skill or strength with brief explanation",
    "Second matching skill or strength with brief explanation",
    "Third matching skill or strength with brief explanation"
  ],
  "areasForDevelopment": [
    "First gap or area needing improvement with context",
    "Second gap or area needing improvement with context"
  ],
  "recommendations": [
    "First actionable recommendation for the candidate",
    "Second actionable recommendation for the candidate",
    "Third actionable recommendation for the candidate"
  ],
  "careerTrajectory": {
    "summary": "Brief 1-2 sentence analysis of the candidate's career progression and growth pattern",
    "growthIndicators": [
      "Evidence of career growth or increasing responsibility",
      "Notable projects or initiatives showing drive",
      "Any awards or recognition received"
    ],
    "alignmentWithRole": "How their career trajectory aligns with this position's growth path"
  },
  "locationAndWorkStyle": {
    "locationCompatibility": "Analysis of location match between candidate and job requirements",
    "remoteWorkAlignment": "Assessment of remote work preference and experience match",
    "commitmentLevelMatch": "Full-time/part-time/flexible compatibility assessment",
    "potentialConcerns": [
      "Any timezone, location, or work style concerns to consider"
    ]
  },
  "professionalCredibility": {
    "profileQuality": "Assessment of profile completeness, verification status, and overall presentation",
    "professionalPresence": [
      "Evidence of professional engagement (publications, projects)",
      "Online professional presence and thought leadership"
    ],
    "credibilityIndicators": [
      "Specific trust signals from their profile (endorsements, verified status, etc.)"
    ]
  }
}"""

RESPONSE_RULES = """\
IMPORTANT:
- Each array should contain 2-5 items
- Each item should be a complete, meaningful sentence
- Be specific and reference actual skills/experience from the candidate's profile
- For careerTrajectory, locationAndWorkStyle, and professionalCredibility - provide honest, helpful analysis
- If remote work experience is low but the job is remote, note this as a potential concern
- Respond ONLY with the JSON object, no additional text before or after"""

MAX_DESCRIPTION_CHARS = 2000


def _bullets(lines: list[str], empty: str) -> str:
    return "\n".join(f"- {line}" for line in lines) if lines else empty


def _date_range(exp: GenomeExperience) -> str:
    if not exp.from_year:
        return ""
    start = f"{exp.from_month or ''}/{exp.from_year}"
    end = f"{exp.to_month or ''}/{exp.to_year}" if exp.to_year else "Present"
    return f"{start} - {end}"


def _job_line(exp: GenomeExperience) -> str:
    line = exp.name
    if exp.organization_name:
        line += f" at {exp.organization_name}"
    dates = _date_range(exp)
    if dates:
        line += f" ({dates})"
    if exp.remote:
        line += " [Remote]"
    return line


def _format_job_section(job: JobRecord) -> str:
    skills = [
        f"{s.name} ({format_proficiency(s.proficiency)})" if s.proficiency else s.name
        for s in job.strengths
    ]
    languages = [
        f"{lang.language.name} ({format_fluency(lang.fluency)})" for lang in job.languages
    ]
    place = job.place
    if place and place.remote:
        location = "Remote"
    elif place and place.anywhere:
        location = "Anywhere"
    else:
        location = "On-site"
    specific = ""
    if place and place.location:
        ids = ", ".join(loc.id for loc in place.location[:5])
        specific = f"**Specific Locations:** {ids}"
    commitment = format_commitment(job.commitment) if job.commitment and job.commitment.code else "Not specified"
    description = strip_html(job.detail("responsibilities"))[:MAX_DESCRIPTION_CHARS]

    return f"""## JOB OPPORTUNITY

**Position:** {job.objective}
**Company:** {job.company_name or "Not specified"}
**Type:** {format_type(job.opportunity)}
**Status:** {job.status}
**Commitment:** {commitment}

**Tagline:** {job.tagline}

**Required Skills:**
{_bullets(skills, "Not specified")}

**Required Languages:**
{_bullets(languages, "Not specified")}

**Location:** {location}
{specific}

**Compensation:** {format_compensation(job.compensation) or "Not disclosed"}

**Job Description:**
{description or "Not available"}"""


def _format_candidate_section(candidate: CandidateRecord) -> str:
    person = candidate.person
    location = person.location
    completeness = f"{round(person.completion * 100)}%" if person.completion else "Unknown"
    strengths = [
        (f"{s.name} ({s.proficiency})" if s.proficiency else s.name)
        + f" - {s.recommendations} recommendations"
        for s in candidate.strengths[:15]
    ]
    languages = [f"{lang.language} ({lang.fluency})" for lang in candidate.languages]
    jobs = [_job_line(j) for j in candidate.jobs[:8]]
    remote, total, percent = candidate.remote_job_ratio()
    education = [
        e.name + (f" at {e.organization_name}" if e.organization_name else "")
        for e in candidate.education[:3]
    ]
    projects = [
        p.name + (f": {p.additional_info[:100]}" if p.additional_info else "")
        for p in candidate.projects[:5]
    ]
    awards = [
        a.name + (f" from {a.organization_name}" if a.organization_name else "")
        for a in candidate.awards[:5]
    ]
    publications = [p.name for p in candidate.publications[:3]]
    links = [f"{link.name}: {link.address}" for link in person.links[:5]]
    stats = candidate.stats

    return f"""## CANDIDATE PROFILE

**Name:** {person.name}
**Headline:** {person.professional_headline}
**Location:** {(location.name if location else None) or "Not specified"}
**Timezone:** {(location.timezone if location else None) or "Not specified"}

**Profile Verification:** {"Verified" if person.verified else "Not verified"}
**Profile Completeness:** {completeness}

**Bio Summary:** {person.summary_of_bio or "Not available"}

**Top Skills:**
{_bullets(strengths, "Not specified")}

**Languages:**
{_bullets(languages, "Not specified")}

**Career History (with dates):**
{_bullets(jobs, "Not specified")}

**Remote Work Experience:** {remote} out of {total} positions ({percent}%)

**Education:**
{_bullets(education, "Not specified")}

**Projects:**
{_bullets(projects, "None listed")}

**Awards & Recognition:**
{_bullets(awards, "None listed")}

**Publications:**
{_bullets(publications, "None listed")}

**Profile Stats:**
- {stats.strengths} skills listed
- {stats.jobs} job experiences
- {stats.projects} projects
- {stats.publications} publications
- {stats.awards} awards

**Online Presence:**
{_bullets(links, "No links provided")}"""


def build_candidate_fit_prompt(job: JobRecord, candidate: CandidateRecord) -> str:
    """Build the user prompt comparing one job against one candidate genome."""
    return f"""You are an expert talent acquisition specialist and job seeker advisor. Analyze the following job opportunity and candidate profile to create a comprehensive fit analysis.

{_format_job_section(job)}

---

{_format_candidate_section(candidate)}

---

Analyze the candidate's fit for this role and provide your response in the following JSON structure:

{RESPONSE_SCHEMA}

{RESPONSE_RULES}"""
