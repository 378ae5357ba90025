"""Pydantic models for the job-detail endpoint's record."""

from __future__ import annotations

from candidate_fit.models.base import PlatformModel


class Organization(PlatformModel):
    id: int | None = None
    name: str | None = None
    picture: str | None = None
    public_id: str | None = None
    website_url: str | None = None
    about: str | None = None
    perks: str | None = None
    theme: str | None = None
    size: int | None = None


class Person(PlatformModel):
    id: str | None = None
    name: str | None = None
    username: str | None = None
    professional_headline: str | None = None
    picture: str | None = None
    verified: bool = False


class Member(PlatformModel):
    id: str | None = None
    person: Person | None = None
    manager: bool = False
    poster: bool = False
    leader: bool = False
    visible: bool = True


class JobStrength(PlatformModel):
    id: str | None = None
    code: int | None = None
    name: str = ""
    experience: str | None = None
    proficiency: str | None = None


class LanguageName(PlatformModel):
    code: str | None = None
    name: str = ""


class JobLanguage(PlatformModel):
    language: LanguageName = LanguageName()
    fluency: str = ""


class PlaceLocation(PlatformModel):
    id: str = ""
    country_code: str | None = None
    timezone: float | None = None


class Place(PlatformModel):
    remote: bool = False
    anywhere: bool = False
    location_type: str | None = None
    location: list[PlaceLocation] = []


class Detail(PlatformModel):
    code: str = ""
    content: str = ""


class Commitment(PlatformModel):
    code: str = ""
    hours: float | None = None


class Agreement(PlatformModel):
    type: str = ""
    currency_taxes: str | None = None


class JobCompensation(PlatformModel):
    code: str | None = None
    currency: str | None = None
    min_amount: float | None = None
    max_amount: float | None = None
    periodicity: str = ""
    visible: bool = False
    negotiable: bool = False
    estimate: bool = False


class JobRecord(PlatformModel):
    """Read-only snapshot of a job opportunity."""

    id: str | None = None
    objective: str = ""
    tagline: str = ""
    slug: str | None = None
    theme: str | None = None
    status: str = ""
    opportunity: str = ""
    locale: str | None = None
    created: str | None = None
    deadline: str | None = None
    quick_apply: bool = False
    organizations: list[Organization] = []
    members: list[Member] = []
    strengths: list[JobStrength] = []
    languages: list[JobLanguage] = []
    place: Place | None = None
    details: list[Detail] = []
    commitment: Commitment | None = None
    agreement: Agreement | None = None
    compensation: JobCompensation | None = None

    @property
    def company_name(self) -> str | None:
        if self.organizations:
            return self.organizations[0].name
        return None

    def detail(self, code: str) -> str | None:
        """Return the content of the first detail block with this code."""
        for item in self.details:
            if item.code == code:
                return item.content
        return None
