"""
Resume API endpoints.

A candidate keeps a single resume; saving it replaces the previous version.
"""

from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, status

from jobboard.api.deps import get_current_principal, get_workflow, require_candidate
from jobboard.core.security import Principal
from jobboard.schemas import MessageResponse, ResumeIdResponse, ResumeResponse, ResumeSaved
from jobboard.services.workflow import WorkflowEngine

router = APIRouter()


@router.post("/api/resume", response_model=ResumeSaved, status_code=status.HTTP_201_CREATED)
async def save_resume(
    body: Any = Body(...),
    principal: Principal = Depends(require_candidate),
    workflow: WorkflowEngine = Depends(get_workflow),
):
    resume = workflow.save_resume(principal.user_id, body)
    return ResumeSaved(
        message="Resume saved successfully!",
        resume=ResumeResponse.model_validate(resume),
    )


@router.delete("/api/resume", response_model=MessageResponse)
async def delete_resume(
    principal: Principal = Depends(require_candidate),
    workflow: WorkflowEngine = Depends(get_workflow),
):
    workflow.delete_resume(principal.user_id)
    return MessageResponse(msg="Resume deleted successfully")


@router.get("/api/my-resume-id", response_model=ResumeIdResponse)
async def get_my_resume_id(
    principal: Principal = Depends(require_candidate),
    workflow: WorkflowEngine = Depends(get_workflow),
):
    return ResumeIdResponse(resume_id=workflow.get_resume_id(principal.user_id))


@router.get("/api/my-resume", response_model=Optional[ResumeResponse])
async def get_my_resume(
    principal: Principal = Depends(require_candidate),
    workflow: WorkflowEngine = Depends(get_workflow),
):
    """Return the candidate's resume, or null if none has been saved yet."""
    return workflow.get_resume(principal.user_id)


@router.put("/api/resume/template")
async def update_template(
    body: Any = Body(...),
    principal: Principal = Depends(require_candidate),
    workflow: WorkflowEngine = Depends(get_workflow),
):
    template = body.get("template") if isinstance(body, dict) else None
    resume = workflow.update_resume_template(principal.user_id, template)
    return {
        "msg": "Template updated successfully",
        "resume": ResumeResponse.model_validate(resume).model_dump(by_alias=True, mode="json"),
    }


@router.get("/api/resume/{resume_id}", response_model=ResumeResponse)
async def get_resume(
    resume_id: str,
    principal: Principal = Depends(get_current_principal),
    workflow: WorkflowEngine = Depends(get_workflow),
):
    """Fetch any resume by id. Open to every authenticated role."""
    return workflow.get_resume_by_id(resume_id)
