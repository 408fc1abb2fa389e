from jobboard.schemas.base import CamelModel, validate_payload
from jobboard.schemas.user import (
    LoginRequest,
    MessageResponse,
    RecruiterProfileIn,
    RoleUpdate,
    Token,
    UserRegister,
    UserResponse,
)
from jobboard.schemas.resume import (
    ResumeIdResponse,
    ResumeIn,
    ResumeResponse,
    ResumeSaved,
    TemplateUpdate,
)
from jobboard.schemas.job import JobBrief, JobIn, JobResponse
from jobboard.schemas.application import (
    ApplicationResponse,
    CandidateApplicationResponse,
    CandidateBrief,
    JobApplicationResponse,
    StatusUpdate,
)

__all__ = [
    "CamelModel",
    "validate_payload",
    "LoginRequest",
    "MessageResponse",
    "RecruiterProfileIn",
    "RoleUpdate",
    "Token",
    "UserRegister",
    "UserResponse",
    "ResumeIdResponse",
    "ResumeIn",
    "ResumeResponse",
    "ResumeSaved",
    "TemplateUpdate",
    "JobBrief",
    "JobIn",
    "JobResponse",
    "ApplicationResponse",
    "CandidateApplicationResponse",
    "CandidateBrief",
    "JobApplicationResponse",
    "StatusUpdate",
]
