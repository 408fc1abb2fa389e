import pytest

from conftest import JOB_PAYLOAD, RESUME_PAYLOAD
from jobboard.core.errors import (
    Conflict,
    NotFound,
    PreconditionFailed,
    Unauthorized,
    ValidationError,
)
from jobboard.models import Application, Job, Resume
from jobboard.services.workflow import can_transition


@pytest.fixture()
def job(workflow, recruiter):
    return workflow.create_job(recruiter.id, JOB_PAYLOAD)


@pytest.fixture()
def resume(workflow, candidate):
    return workflow.save_resume(candidate.id, RESUME_PAYLOAD)


# ============== Resumes ==============


def test_save_resume_upserts_single_document(workflow, db, candidate):
    first = workflow.save_resume(candidate.id, RESUME_PAYLOAD)
    second = workflow.save_resume(candidate.id, {"summary": "Rewritten", "skills": ["Go"]})

    assert second.id == first.id
    assert db.query(Resume).filter(Resume.user_id == candidate.id).count() == 1
    assert second.summary == "Rewritten"
    assert second.skills == ["Go"]
    # Saving replaces every section
    assert second.experience == []
    assert second.template == "classic"


def test_save_resume_rejects_bad_payload(workflow, candidate):
    with pytest.raises(ValidationError):
        workflow.save_resume(candidate.id, {"skills": "python"})
    with pytest.raises(ValidationError):
        workflow.save_resume(candidate.id, ["not", "an", "object"])


def test_get_resume_id_and_by_id(workflow, candidate, resume):
    assert workflow.get_resume_id(candidate.id) == resume.id
    assert workflow.get_resume_by_id(resume.id).user_id == candidate.id

    with pytest.raises(NotFound):
        workflow.get_resume_by_id("missing")


def test_update_template(workflow, candidate, resume):
    assert workflow.update_resume_template(candidate.id, "modern").template == "modern"
    with pytest.raises(ValidationError):
        workflow.update_resume_template(candidate.id, "")


def test_update_template_without_resume(workflow, candidate):
    with pytest.raises(NotFound):
        workflow.update_resume_template(candidate.id, "modern")


def test_delete_resume(workflow, candidate, resume):
    workflow.delete_resume(candidate.id)
    assert workflow.get_resume(candidate.id) is None

    with pytest.raises(NotFound):
        workflow.delete_resume(candidate.id)


# ============== Jobs ==============


def test_create_job(job, recruiter):
    assert job.recruiter_id == recruiter.id
    assert job.employment_type == "Full-time"
    assert job.key_responsibilities == ["Design APIs", "Review code"]


@pytest.mark.parametrize(
    "missing", ["jobTitle", "location", "employmentType", "jobSummary", "companyName"]
)
def test_create_job_requires_fields(workflow, recruiter, missing):
    payload = {key: value for key, value in JOB_PAYLOAD.items() if key != missing}
    with pytest.raises(ValidationError):
        workflow.create_job(recruiter.id, payload)


def test_create_job_rejects_unknown_employment_type(workflow, db, recruiter):
    with pytest.raises(ValidationError):
        workflow.create_job(recruiter.id, {**JOB_PAYLOAD, "employmentType": "Freelance"})
    assert db.query(Job).count() == 0


def test_list_jobs_newest_first(workflow, recruiter, credentials):
    other = credentials.register("other", "recruiter123", "Recruiter", {})
    older = workflow.create_job(recruiter.id, JOB_PAYLOAD)
    newer = workflow.create_job(recruiter.id, {**JOB_PAYLOAD, "jobTitle": "Data Engineer"})
    foreign = workflow.create_job(other.id, JOB_PAYLOAD)

    assert [j.id for j in workflow.list_recruiter_jobs(recruiter.id)] == [newer.id, older.id]
    assert {j.id for j in workflow.list_public_jobs()} == {older.id, newer.id, foreign.id}


def test_delete_job_requires_owner(workflow, credentials, job):
    other = credentials.register("other", "recruiter123", "Recruiter", {})
    with pytest.raises(Unauthorized):
        workflow.delete_job(other.id, job.id)
    with pytest.raises(NotFound):
        workflow.delete_job(other.id, "missing")


def test_delete_job_cascades_only_to_its_applications(workflow, db, recruiter, candidate, resume, job):
    other_job = workflow.create_job(recruiter.id, {**JOB_PAYLOAD, "jobTitle": "Other"})
    workflow.apply(candidate.id, job.id)
    kept = workflow.apply(candidate.id, other_job.id)

    workflow.delete_job(recruiter.id, job.id)

    assert db.query(Job).filter(Job.id == job.id).count() == 0
    assert db.query(Application).filter(Application.job_id == job.id).count() == 0
    assert [a.id for a in db.query(Application).all()] == [kept.id]


# ============== Applications ==============


def test_apply_once(workflow, db, candidate, resume, job):
    application = workflow.apply(candidate.id, job.id)
    assert application.status == "Submitted"
    assert application.resume_id == resume.id

    with pytest.raises(Conflict):
        workflow.apply(candidate.id, job.id)
    assert db.query(Application).count() == 1


def test_apply_without_resume(workflow, db, candidate, job):
    with pytest.raises(PreconditionFailed):
        workflow.apply(candidate.id, job.id)
    assert db.query(Application).count() == 0


def test_apply_to_missing_job(workflow, candidate, resume):
    with pytest.raises(NotFound):
        workflow.apply(candidate.id, "missing")


def test_list_applications(workflow, credentials, recruiter, candidate, resume, job):
    application = workflow.apply(candidate.id, job.id)

    [(mine, mine_job)] = workflow.list_candidate_applications(candidate.id)
    assert mine.id == application.id
    assert mine_job.job_title == "Backend Engineer"

    [(theirs, applicant, snapshot)] = workflow.list_job_applications(recruiter.id, job.id)
    assert theirs.id == application.id
    assert applicant.username == "casey"
    assert snapshot.id == resume.id

    other = credentials.register("other", "recruiter123", "Recruiter", {})
    with pytest.raises(Unauthorized):
        workflow.list_job_applications(other.id, job.id)


def test_update_application_status(workflow, credentials, recruiter, candidate, resume, job):
    application = workflow.apply(candidate.id, job.id)

    assert workflow.update_application_status(recruiter.id, application.id, "Viewed").status == "Viewed"
    assert workflow.update_application_status(recruiter.id, application.id, "Interviewing").status == "Interviewing"

    with pytest.raises(PreconditionFailed):
        workflow.update_application_status(recruiter.id, application.id, "Submitted")
    with pytest.raises(ValidationError):
        workflow.update_application_status(recruiter.id, application.id, "Hired")
    with pytest.raises(NotFound):
        workflow.update_application_status(recruiter.id, "missing", "Viewed")

    other = credentials.register("other", "recruiter123", "Recruiter", {})
    with pytest.raises(Unauthorized):
        workflow.update_application_status(other.id, application.id, "Rejected")


@pytest.mark.parametrize(
    "current,target,allowed",
    [
        ("Submitted", "Viewed", True),
        ("Submitted", "Rejected", True),
        ("Submitted", "Interviewing", True),
        ("Viewed", "Interviewing", True),
        ("Rejected", "Viewed", True),
        ("Interviewing", "Rejected", True),
        ("Viewed", "Viewed", True),
        ("Rejected", "Submitted", False),
        ("Viewed", "Submitted", False),
        ("Submitted", "Hired", False),
    ],
)
def test_status_transitions(current, target, allowed):
    assert can_transition(current, target) is allowed


@pytest.mark.parametrize("status", [{"x": 1}, ["Viewed"], 1, None])
def test_update_application_status_rejects_non_string(workflow, recruiter, candidate, resume, job, status):
    application = workflow.apply(candidate.id, job.id)
    with pytest.raises(ValidationError):
        workflow.update_application_status(recruiter.id, application.id, status)
