from datetime import datetime
from typing import Optional

from jobboard.schemas.base import CamelModel
from jobboard.schemas.job import JobBrief
from jobboard.schemas.resume import ResumeResponse


class ApplicationResponse(CamelModel):
    id: str
    job_id: str
    candidate_id: str
    resume_id: str
    status: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class CandidateBrief(CamelModel):
    id: str
    username: str


class CandidateApplicationResponse(ApplicationResponse):
    """An application as its candidate sees it."""

    job: Optional[JobBrief] = None


class JobApplicationResponse(ApplicationResponse):
    """An application as the job's recruiter sees it."""

    candidate: Optional[CandidateBrief] = None
    resume: Optional[ResumeResponse] = None


class StatusUpdate(CamelModel):
    status: str
