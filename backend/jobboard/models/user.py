from sqlalchemy import Column, JSON, String

from jobboard.db.base import Base, IdMixin, TimestampMixin


class User(IdMixin, TimestampMixin, Base):
    """User model for authentication and authorization."""

    __tablename__ = "users"

    username = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    role = Column(String, nullable=False)  # 'Candidate' | 'Recruiter' | 'Admin'

    # Set only for recruiters
    recruiter_profile_id = Column(String(32), nullable=True)


class RecruiterProfile(IdMixin, TimestampMixin, Base):
    """Company and contact details, owned by exactly one recruiter."""

    __tablename__ = "recruiter_profiles"

    user_id = Column(String(32), index=True, nullable=False)

    company_name = Column(String)
    company_website = Column(String)
    industry = Column(String)
    company_size = Column(String)
    company_address = Column(String)
    country = Column(String)
    recruiter_full_name = Column(String)
    job_title = Column(String)
    recruiter_email = Column(String)
    recruiter_phone = Column(String)
    linkedin_profile = Column(String)
    roles_recruited_for = Column(JSON, default=list)
    preferred_locations = Column(JSON, default=list)
    hiring_volume = Column(String)
    recruitment_model = Column(String)
