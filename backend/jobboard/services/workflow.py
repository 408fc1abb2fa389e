"""
Workflow Engine.

Enforces the hiring rules across resumes, jobs and applications:

- a candidate has at most one resume, and saving replaces it
- only the owning recruiter may delete a job or read its applications
- deleting a job deletes its applications
- a candidate applies to a job at most once, and only with a saved resume
- application status moves along ``STATUS_TRANSITIONS``

Role checks happen before these methods are called (see
``jobboard.services.access``); ownership checks happen here because they
need the stored job.
"""

from typing import Any, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobboard.core.errors import (
    Conflict,
    NotFound,
    PreconditionFailed,
    ValidationError,
)
from jobboard.core.logging import get_logger
from jobboard.db.store import Collection, commit
from jobboard.models import Application, Job, Resume, User
from jobboard.models.enums import ApplicationStatus
from jobboard.schemas import JobIn, ResumeIn, TemplateUpdate, validate_payload
from jobboard.services.access import require_owner

logger = get_logger("workflow")

_S = ApplicationStatus

# Allowed next statuses. Nothing returns to Submitted.
STATUS_TRANSITIONS: dict[ApplicationStatus, frozenset[ApplicationStatus]] = {
    _S.SUBMITTED: frozenset({_S.VIEWED, _S.REJECTED, _S.INTERVIEWING}),
    _S.VIEWED: frozenset({_S.REJECTED, _S.INTERVIEWING}),
    _S.REJECTED: frozenset({_S.VIEWED, _S.INTERVIEWING}),
    _S.INTERVIEWING: frozenset({_S.VIEWED, _S.REJECTED}),
}


def can_transition(current: str, target: str) -> bool:
    """True if an application may move from ``current`` to ``target``."""
    if current == target:
        return True
    try:
        return ApplicationStatus(target) in STATUS_TRANSITIONS[ApplicationStatus(current)]
    except ValueError:
        return False


class WorkflowEngine:
    def __init__(self, db: Session):
        self.db = db
        self.users = Collection(db, User)
        self.resumes = Collection(db, Resume)
        self.jobs = Collection(db, Job)
        self.applications = Collection(db, Application)

    # ============== Resumes ==============

    def save_resume(self, candidate_id: str, payload: Any) -> Resume:
        """Create or replace the candidate's resume."""
        data = validate_payload(ResumeIn, payload)
        try:
            resume = self.resumes.upsert({"user_id": candidate_id}, data.model_dump())
            commit(self.db)
        except IntegrityError as exc:
            raise Conflict("Resume is being saved concurrently, try again") from exc

        logger.info(f"Saved resume {resume.id} for candidate {candidate_id}")
        return resume

    def get_resume(self, candidate_id: str) -> Optional[Resume]:
        return self.resumes.find_one(user_id=candidate_id)

    def get_resume_id(self, candidate_id: str) -> str:
        resume = self.get_resume(candidate_id)
        if resume is None:
            raise NotFound("Resume not found for this user.")
        return resume.id

    def get_resume_by_id(self, resume_id: str) -> Resume:
        resume = self.resumes.find_by_id(resume_id)
        if resume is None:
            raise NotFound("Resume not found")
        return resume

    def update_resume_template(self, candidate_id: str, template: Any) -> Resume:
        data = validate_payload(TemplateUpdate, {"template": template})
        resume = self.get_resume(candidate_id)
        if resume is None:
            raise NotFound("Resume not found")

        resume.template = data.template
        commit(self.db)
        return resume

    def delete_resume(self, candidate_id: str) -> None:
        if not self.resumes.delete_one(user_id=candidate_id):
            raise NotFound("Resume not found")
        commit(self.db)
        logger.info(f"Deleted resume of candidate {candidate_id}")

    # ============== Jobs ==============

    def create_job(self, recruiter_id: str, payload: Any) -> Job:
        data = validate_payload(JobIn, payload)
        values = data.model_dump()
        values["employment_type"] = data.employment_type.value

        job = self.jobs.insert(recruiter_id=recruiter_id, **values)
        commit(self.db)

        logger.info(f"Recruiter {recruiter_id} created job {job.id} '{job.job_title}'")
        return job

    def list_recruiter_jobs(self, recruiter_id: str) -> list[Job]:
        return self.jobs.find_many(order_by=Job.created_at.desc(), recruiter_id=recruiter_id)

    def list_public_jobs(self) -> list[Job]:
        return self.jobs.find_many(order_by=Job.created_at.desc())

    def get_job(self, job_id: str) -> Job:
        job = self.jobs.find_by_id(job_id)
        if job is None:
            raise NotFound("Job not found")
        return job

    def _owned_job(self, recruiter_id: str, job_id: str) -> Job:
        job = self.get_job(job_id)
        require_owner(recruiter_id, job.recruiter_id)
        return job

    def delete_job(self, recruiter_id: str, job_id: str) -> None:
        """Delete a job and every application to it in one transaction."""
        job = self._owned_job(recruiter_id, job_id)

        removed = self.applications.delete_many(job_id=job.id)
        self.jobs.delete_one(id=job.id)
        commit(self.db)

        logger.info(f"Recruiter {recruiter_id} deleted job {job_id} and {removed} application(s)")

    # ============== Applications ==============

    def apply(self, candidate_id: str, job_id: str) -> Application:
        """Submit the candidate's current resume to a job."""
        job = self.get_job(job_id)

        resume = self.get_resume(candidate_id)
        if resume is None:
            raise PreconditionFailed("You must have a saved resume to apply.")

        if self.applications.find_one(job_id=job.id, candidate_id=candidate_id):
            raise Conflict("You have already applied for this job.")

        try:
            application = self.applications.insert(
                job_id=job.id,
                candidate_id=candidate_id,
                resume_id=resume.id,
                status=ApplicationStatus.SUBMITTED.value,
            )
            commit(self.db)
        except IntegrityError as exc:
            raise Conflict("You have already applied for this job.") from exc

        logger.info(f"Candidate {candidate_id} applied to job {job.id} ({application.id})")
        return application

    def list_candidate_applications(self, candidate_id: str) -> list[tuple[Application, Optional[Job]]]:
        """The candidate's applications, each with its job (None if since removed)."""
        applications = self.applications.find_many(
            order_by=Application.created_at.desc(), candidate_id=candidate_id
        )
        return [(application, self.jobs.find_by_id(application.job_id)) for application in applications]

    def list_job_applications(
        self, recruiter_id: str, job_id: str
    ) -> list[tuple[Application, Optional[User], Optional[Resume]]]:
        """Applications to a recruiter's own job, with candidate and resume attached."""
        job = self._owned_job(recruiter_id, job_id)
        applications = self.applications.find_many(
            order_by=Application.created_at.desc(), job_id=job.id
        )
        return [
            (
                application,
                self.users.find_by_id(application.candidate_id),
                self.resumes.find_by_id(application.resume_id),
            )
            for application in applications
        ]

    def update_application_status(self, recruiter_id: str, application_id: str, status: Any) -> Application:
        """Move an application to a new status on behalf of the job's recruiter."""
        if not isinstance(status, str) or status not in {s.value for s in ApplicationStatus}:
            raise ValidationError("Invalid status specified.")

        application = self.applications.find_by_id(application_id)
        if application is None:
            raise NotFound("Application not found")
        self._owned_job(recruiter_id, application.job_id)

        if not can_transition(application.status, status):
            raise PreconditionFailed(f"Cannot move application from {application.status} to {status}.")

        if application.status != status:
            previous = application.status
            application.status = status
            commit(self.db)
            logger.info(f"Application {application.id}: {previous} -> {status}")
        return application
