from sqlalchemy import Column, ForeignKey, String, UniqueConstraint

from jobboard.db.base import Base, IdMixin, TimestampMixin
from jobboard.models.enums import ApplicationStatus


class Application(IdMixin, TimestampMixin, Base):
    """A candidate's application to a job, pinned to the resume used."""

    __tablename__ = "applications"
    __table_args__ = (
        UniqueConstraint("job_id", "candidate_id", name="uq_application_job_candidate"),
    )

    job_id = Column(String(32), ForeignKey("jobs.id"), index=True, nullable=False)
    candidate_id = Column(String(32), index=True, nullable=False)
    resume_id = Column(String(32), nullable=False)
    status = Column(String, default=ApplicationStatus.SUBMITTED.value, nullable=False)
