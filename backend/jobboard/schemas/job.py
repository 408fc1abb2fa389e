from datetime import datetime
from typing import Annotated, Optional

from pydantic import StringConstraints

from jobboard.models.enums import EmploymentType
from jobboard.schemas.base import CamelModel

Required = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class JobIn(CamelModel):
    """Schema for creating a job posting."""

    job_title: Required
    department: Optional[str] = None
    reports_to: Optional[str] = None
    location: Required
    employment_type: EmploymentType
    job_summary: Required
    key_responsibilities: list[str] = []
    required_qualifications: list[str] = []
    preferred_qualifications: list[str] = []
    core_competencies: list[str] = []
    work_environment: Optional[str] = None
    compensation_and_benefits: Optional[str] = None
    application_instructions: Optional[str] = None
    company_name: Required


class JobResponse(CamelModel):
    id: str
    recruiter_id: str
    job_title: str
    department: Optional[str] = None
    reports_to: Optional[str] = None
    location: str
    employment_type: str
    job_summary: str
    key_responsibilities: list[str] = []
    required_qualifications: list[str] = []
    preferred_qualifications: list[str] = []
    core_competencies: list[str] = []
    work_environment: Optional[str] = None
    compensation_and_benefits: Optional[str] = None
    application_instructions: Optional[str] = None
    company_name: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class JobBrief(CamelModel):
    """Job fields shown next to a candidate's application."""

    id: str
    job_title: str
    company_name: str
    location: str
