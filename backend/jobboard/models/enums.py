from enum import Enum


class Role(str, Enum):
    CANDIDATE = "Candidate"
    RECRUITER = "Recruiter"
    ADMIN = "Admin"


class EmploymentType(str, Enum):
    FULL_TIME = "Full-time"
    PART_TIME = "Part-time"
    CONTRACT = "Contract"
    INTERNSHIP = "Internship"


class ApplicationStatus(str, Enum):
    SUBMITTED = "Submitted"
    VIEWED = "Viewed"
    REJECTED = "Rejected"
    INTERVIEWING = "Interviewing"


ROLE_VALUES = {role.value for role in Role}
