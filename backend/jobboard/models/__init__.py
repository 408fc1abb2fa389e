from jobboard.models.user import User, RecruiterProfile
from jobboard.models.resume import Resume
from jobboard.models.job import Job
from jobboard.models.application import Application

__all__ = ["User", "RecruiterProfile", "Resume", "Job", "Application"]
