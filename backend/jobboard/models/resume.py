from sqlalchemy import Column, JSON, String

from jobboard.db.base import Base, IdMixin, TimestampMixin


class Resume(IdMixin, TimestampMixin, Base):
    """A candidate's single resume document."""

    __tablename__ = "resumes"

    # One resume per candidate. Not a foreign key: user deletion leaves it in place.
    user_id = Column(String(32), unique=True, index=True, nullable=False)

    # Example: {"fullName": "Jane Doe", "email": "jane@example.com"}
    personal_info = Column(JSON, default=dict)
    summary = Column(String)
    experience = Column(JSON, default=list)
    education = Column(JSON, default=list)
    skills = Column(JSON, default=list)
    projects = Column(JSON, default=list)
    links = Column(JSON, default=list)
    awards = Column(JSON, default=list)

    template = Column(String, default="classic", nullable=False)
