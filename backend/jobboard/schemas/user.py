from datetime import datetime
from typing import Annotated, Optional

from pydantic import Field, StringConstraints

from jobboard.schemas.base import CamelModel

NonBlank = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class UserRegister(CamelModel):
    """Credentials part of a registration request."""

    username: NonBlank
    password: Annotated[str, StringConstraints(min_length=1)]
    role: NonBlank


class RecruiterProfileIn(CamelModel):
    """Company details sent alongside a recruiter registration."""

    company_name: Optional[str] = None
    company_website: Optional[str] = None
    industry: Optional[str] = None
    company_size: Optional[str] = None
    company_address: Optional[str] = None
    country: Optional[str] = None
    recruiter_full_name: Optional[str] = None
    job_title: Optional[str] = None
    recruiter_email: Optional[str] = None
    recruiter_phone: Optional[str] = None
    linkedin_profile: Optional[str] = Field(None, alias="linkedInProfile")
    roles_recruited_for: list[str] = []
    preferred_locations: list[str] = []
    hiring_volume: Optional[str] = None
    recruitment_model: Optional[str] = None


class LoginRequest(CamelModel):
    username: str
    password: str


class Token(CamelModel):
    """Schema for JWT token response."""

    token: str
    token_type: str = "bearer"


class UserResponse(CamelModel):
    """Schema for user response (without password)."""

    id: str
    username: str
    role: str
    recruiter_profile_id: Optional[str] = None
    created_at: Optional[datetime] = None


class RoleUpdate(CamelModel):
    role: str


class MessageResponse(CamelModel):
    msg: str
