"""
Profile Pydantic schemas - request bodies for upsert/experience/education and the profile response
"""
from datetime import date, datetime
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _require_text(value, message: str) -> str:
    if value is None or not str(value).strip():
        raise ValueError(message)
    return str(value).strip()


def _blank_to_none(value):
    if isinstance(value, str) and not value.strip():
        return None
    return value


def split_skills(value: Union[List[str], str, None]) -> List[str]:
    """Accept a list or a comma-delimited string; return trimmed, non-empty skills."""
    if value is None:
        return []
    items = value.split(",") if isinstance(value, str) else value
    return [str(s).strip() for s in items if str(s).strip()]


# --- Nested schemas ---
class ExperienceIn(BaseModel):
    title: str = Field(default="", validate_default=True)
    company: str = Field(default="", validate_default=True)
    location: Optional[str] = None
    from_: Optional[date] = Field(default=None, alias="from", validate_default=True)
    to: Optional[date] = None
    current: bool = False
    description: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @field_validator("title")
    @classmethod
    def title_required(cls, v):
        return _require_text(v, "Title is required")

    @field_validator("company")
    @classmethod
    def company_required(cls, v):
        return _require_text(v, "Company is required")

    @field_validator("from_", mode="before")
    @classmethod
    def from_required(cls, v):
        if v is None or (isinstance(v, str) and not v.strip()):
            raise ValueError("From date is required")
        return v

    @field_validator("to", mode="before")
    @classmethod
    def to_optional(cls, v):
        return _blank_to_none(v)


class EducationIn(BaseModel):
    school: str = Field(default="", validate_default=True)
    degree: str = Field(default="", validate_default=True)
    fieldOfStudy: str = Field(default="", validate_default=True)
    from_: Optional[date] = Field(default=None, alias="from", validate_default=True)
    to: Optional[date] = None
    current: bool = False
    description: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @field_validator("school")
    @classmethod
    def school_required(cls, v):
        return _require_text(v, "School is required")

    @field_validator("degree")
    @classmethod
    def degree_required(cls, v):
        return _require_text(v, "Degree is required")

    @field_validator("fieldOfStudy")
    @classmethod
    def field_of_study_required(cls, v):
        return _require_text(v, "Field of study is required")

    @field_validator("from_", mode="before")
    @classmethod
    def from_required(cls, v):
        if v is None or (isinstance(v, str) and not v.strip()):
            raise ValueError("From date is required")
        return v

    @field_validator("to", mode="before")
    @classmethod
    def to_optional(cls, v):
        return _blank_to_none(v)


class Experience(BaseModel):
    id: str
    title: str
    company: str
    location: Optional[str] = None
    from_: date = Field(alias="from")
    to: Optional[date] = None
    current: bool = False
    description: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True)


class Education(BaseModel):
    id: str
    school: str
    degree: str
    fieldOfStudy: str
    from_: date = Field(alias="from")
    to: Optional[date] = None
    current: bool = False
    description: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True)


class Social(BaseModel):
    youtube: Optional[str] = None
    twitter: Optional[str] = None
    facebook: Optional[str] = None
    linkedin: Optional[str] = None
    instagram: Optional[str] = None


class ProfileUpsert(BaseModel):
    """Create-or-update body. Social links arrive flat and are nested into `social`."""
    company: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    status: Optional[str] = Field(default=None, validate_default=True)
    skills: Union[List[str], str, None] = Field(default=None, validate_default=True)
    bio: Optional[str] = None
    githubUsername: Optional[str] = None
    youtube: Optional[str] = None
    twitter: Optional[str] = None
    facebook: Optional[str] = None
    linkedin: Optional[str] = None
    instagram: Optional[str] = None

    model_config = ConfigDict(extra="ignore")

    @field_validator("status")
    @classmethod
    def status_required(cls, v):
        return _require_text(v, "Status is required")

    @field_validator("skills")
    @classmethod
    def skills_required(cls, v):
        skills = split_skills(v)
        if not skills:
            raise ValueError("Skills is required")
        return skills


class ProfileOwner(BaseModel):
    id: str
    name: str = ""
    avatarUrl: str = ""


class ProfileResponse(BaseModel):
    id: str
    userId: str
    user: Optional[ProfileOwner] = None
    company: Optional[str] = None
    website: str = ""
    location: Optional[str] = None
    status: str
    skills: List[str] = Field(default_factory=list)
    bio: Optional[str] = None
    githubUsername: Optional[str] = None
    experience: List[Experience] = Field(default_factory=list)
    education: List[Education] = Field(default_factory=list)
    social: Social = Field(default_factory=Social)
    date: Optional[datetime] = None


def profile_model_to_response(profile) -> ProfileResponse:
    """Convert Profile DB model (with its joined user) to ProfileResponse"""
    owner = None
    if profile.user is not None:
        owner = ProfileOwner(
            id=profile.user.id,
            name=profile.user.name or "",
            avatarUrl=profile.user.avatar_url or "",
        )
    social = profile.social if isinstance(profile.social, dict) else {}
    return ProfileResponse(
        id=profile.id,
        userId=profile.user_id,
        user=owner,
        company=profile.company,
        website=profile.website or "",
        location=profile.location,
        status=profile.status,
        skills=profile.skills or [],
        bio=profile.bio,
        githubUsername=profile.github_username,
        experience=[Experience.model_validate(e) for e in (profile.experience or [])],
        education=[Education.model_validate(e) for e in (profile.education or [])],
        social=Social(**social),
        date=profile.date,
    )
