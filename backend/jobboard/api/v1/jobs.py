"""
Job API endpoints.

Recruiters manage their own postings under ``/jobs``; anyone can browse
``/api/public-jobs``.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, status

from jobboard.api.deps import get_workflow, require_recruiter
from jobboard.core.security import Principal
from jobboard.schemas import JobResponse, MessageResponse
from jobboard.services.workflow import WorkflowEngine

router = APIRouter()


@router.get("/jobs", response_model=list[JobResponse])
async def list_my_jobs(
    principal: Principal = Depends(require_recruiter),
    workflow: WorkflowEngine = Depends(get_workflow),
):
    """List the recruiter's jobs, newest first."""
    return workflow.list_recruiter_jobs(principal.user_id)


@router.post("/jobs", response_model=JobResponse, status_code=status.HTTP_201_CREATED)
async def create_job(
    body: Any = Body(...),
    principal: Principal = Depends(require_recruiter),
    workflow: WorkflowEngine = Depends(get_workflow),
):
    return workflow.create_job(principal.user_id, body)


@router.delete("/jobs/{job_id}", response_model=MessageResponse)
async def delete_job(
    job_id: str,
    principal: Principal = Depends(require_recruiter),
    workflow: WorkflowEngine = Depends(get_workflow),
):
    """Delete one of the recruiter's jobs together with its applications."""
    workflow.delete_job(principal.user_id, job_id)
    return MessageResponse(msg="Job removed")


@router.get("/api/public-jobs", response_model=list[JobResponse])
async def list_public_jobs(workflow: WorkflowEngine = Depends(get_workflow)):
    return workflow.list_public_jobs()


@router.get("/api/public-jobs/{job_id}", response_model=JobResponse)
async def get_public_job(job_id: str, workflow: WorkflowEngine = Depends(get_workflow)):
    return workflow.get_job(job_id)
