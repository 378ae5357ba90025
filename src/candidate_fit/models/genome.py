"""Pydantic models for the candidate genome (profile) record."""

from __future__ import annotations

import math

from candidate_fit.models.base import PlatformModel


class Link(PlatformModel):
    id: str | None = None
    name: str = ""
    address: str = ""


class GenomeLocation(PlatformModel):
    name: str | None = None
    short_name: str | None = None
    country: str | None = None
    country_code: str | None = None
    timezone: str | None = None


class GenomePerson(PlatformModel):
    id: str | None = None
    public_id: str | None = None
    name: str | None = None
    professional_headline: str | None = None
    summary_of_bio: str | None = None
    completion: float | None = None
    verified: bool = False
    picture: str | None = None
    location: GenomeLocation | None = None
    links: list[Link] = []


class GenomeStats(PlatformModel):
    strengths: int = 0
    publications: int = 0
    awards: int = 0
    education: int = 0
    jobs: int = 0
    projects: int = 0


class GenomeStrength(PlatformModel):
    id: str | None = None
    code: int | None = None
    name: str = ""
    proficiency: str | None = None
    weight: float = 0
    recommendations: int = 0


class ExperienceOrganization(PlatformModel):
    id: int | None = None
    name: str | None = None


class GenomeExperience(PlatformModel):
    id: str | None = None
    category: str | None = None
    name: str = ""
    organizations: list[ExperienceOrganization] = []
    from_month: str | None = None
    from_year: str | None = None
    to_month: str | None = None
    to_year: str | None = None
    remote: bool = False
    additional_info: str | None = None
    highlighted: bool = False

    @property
    def organization_name(self) -> str | None:
        if self.organizations:
            return self.organizations[0].name
        return None


class GenomeLanguage(PlatformModel):
    code: str | None = None
    language: str = ""
    fluency: str = ""


class CandidateRecord(PlatformModel):
    """Read-only snapshot of a candidate's genome."""

    person: GenomePerson = GenomePerson()
    stats: GenomeStats = GenomeStats()
    strengths: list[GenomeStrength] = []
    jobs: list[GenomeExperience] = []
    education: list[GenomeExperience] = []
    projects: list[GenomeExperience] = []
    awards: list[GenomeExperience] = []
    publications: list[GenomeExperience] = []
    languages: list[GenomeLanguage] = []

    def remote_job_ratio(self) -> tuple[int, int, int]:
        """Return (remote jobs, total jobs, rounded remote percentage)."""
        total = len(self.jobs)
        remote = sum(1 for job in self.jobs if job.remote)
        percent = math.floor(remote * 100 / total + 0.5) if total else 0
        return remote, total, percent
