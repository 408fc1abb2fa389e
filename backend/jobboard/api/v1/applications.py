"""
Application API endpoints.

Candidates apply and track their applications; recruiters review the
applications to their own jobs and move them through the status pipeline.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, status

from jobboard.api.deps import get_workflow, require_candidate, require_recruiter
from jobboard.core.security import Principal
from jobboard.schemas import (
    ApplicationResponse,
    CandidateApplicationResponse,
    CandidateBrief,
    JobApplicationResponse,
    JobBrief,
    ResumeResponse,
    StatusUpdate,
    validate_payload,
)
from jobboard.services.workflow import WorkflowEngine

router = APIRouter()


@router.get("/api/candidate/applications", response_model=list[CandidateApplicationResponse])
async def list_my_applications(
    principal: Principal = Depends(require_candidate),
    workflow: WorkflowEngine = Depends(get_workflow),
):
    return [
        CandidateApplicationResponse(
            **ApplicationResponse.model_validate(application).model_dump(),
            job=JobBrief.model_validate(job) if job is not None else None,
        )
        for application, job in workflow.list_candidate_applications(principal.user_id)
    ]


@router.get("/api/jobs/{job_id}/applications", response_model=list[JobApplicationResponse])
async def list_job_applications(
    job_id: str,
    principal: Principal = Depends(require_recruiter),
    workflow: WorkflowEngine = Depends(get_workflow),
):
    return [
        JobApplicationResponse(
            **ApplicationResponse.model_validate(application).model_dump(),
            candidate=CandidateBrief.model_validate(candidate) if candidate is not None else None,
            resume=ResumeResponse.model_validate(resume) if resume is not None else None,
        )
        for application, candidate, resume in workflow.list_job_applications(principal.user_id, job_id)
    ]


@router.post("/api/jobs/{job_id}/apply", status_code=status.HTTP_201_CREATED)
async def apply_to_job(
    job_id: str,
    principal: Principal = Depends(require_candidate),
    workflow: WorkflowEngine = Depends(get_workflow),
):
    application = workflow.apply(principal.user_id, job_id)
    return {
        "msg": "Application submitted successfully!",
        "application": ApplicationResponse.model_validate(application).model_dump(by_alias=True, mode="json"),
    }


@router.put("/api/applications/{application_id}/status", response_model=ApplicationResponse)
async def update_application_status(
    application_id: str,
    body: Any = Body(...),
    principal: Principal = Depends(require_recruiter),
    workflow: WorkflowEngine = Depends(get_workflow),
):
    data = validate_payload(StatusUpdate, body)
    return workflow.update_application_status(principal.user_id, application_id, data.status)
