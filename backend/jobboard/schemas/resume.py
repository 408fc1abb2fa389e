from datetime import datetime
from typing import Annotated, Any, Optional

from pydantic import StringConstraints

from jobboard.schemas.base import CamelModel


class ResumeIn(CamelModel):
    """Full resume document. Saving replaces every section."""

    personal_info: dict[str, Any] = {}
    summary: Optional[str] = None
    experience: list[Any] = []
    education: list[Any] = []
    skills: list[Any] = []
    projects: list[Any] = []
    links: list[Any] = []
    awards: list[Any] = []
    template: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)] = "classic"


class ResumeResponse(ResumeIn):
    id: str
    user_id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class TemplateUpdate(CamelModel):
    template: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class ResumeIdResponse(CamelModel):
    resume_id: str


class ResumeSaved(CamelModel):
    message: str
    resume: ResumeResponse
