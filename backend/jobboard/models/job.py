from sqlalchemy import Column, JSON, String, Text

from jobboard.db.base import Base, IdMixin, TimestampMixin


class Job(IdMixin, TimestampMixin, Base):
    """A job posting owned by one recruiter."""

    __tablename__ = "jobs"

    recruiter_id = Column(String(32), index=True, nullable=False)

    job_title = Column(String, nullable=False)
    department = Column(String)
    reports_to = Column(String)
    location = Column(String, nullable=False)
    employment_type = Column(String, nullable=False)  # 'Full-time' | 'Part-time' | 'Contract' | 'Internship'
    job_summary = Column(Text, nullable=False)
    key_responsibilities = Column(JSON, default=list)
    required_qualifications = Column(JSON, default=list)
    preferred_qualifications = Column(JSON, default=list)
    core_competencies = Column(JSON, default=list)
    work_environment = Column(Text)
    compensation_and_benefits = Column(Text)
    application_instructions = Column(Text)
    company_name = Column(String, nullable=False)
