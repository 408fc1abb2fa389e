"""
Domain error taxonomy.

Every failure the core reports is one of these classes. Each class carries a
default message; raising code may pass a more specific one. The HTTP layer
maps classes to status codes (see ``jobboard.api.errors``).
"""


class JobBoardError(Exception):
    """Base class for all domain errors."""

    default_message = "Request failed"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class Conflict(JobBoardError):
    """A uniqueness rule would be violated."""

    default_message = "Resource already exists"


class InvalidCredentials(JobBoardError):
    """Unknown username or wrong password. The two cases are never told apart."""

    default_message = "Invalid credentials"


class Unauthenticated(JobBoardError):
    """No token, or a token that is malformed, expired or badly signed."""

    default_message = "Token is not valid"


class Forbidden(JobBoardError):
    """Identity established but the role check failed."""

    default_message = "Access denied"


class Unauthorized(JobBoardError):
    """Identity established but the recruiter role or ownership check failed."""

    default_message = "User not authorized"


class NotFound(JobBoardError):
    default_message = "Not found"


class ValidationError(JobBoardError):
    """Malformed or missing required input."""

    default_message = "Invalid input"


class InvalidRole(ValidationError):
    default_message = "Invalid role specified."


class PreconditionFailed(JobBoardError):
    """A business rule is not met, e.g. applying without a saved resume."""

    default_message = "Precondition failed"


class SelfModification(JobBoardError):
    """An admin tried to change or delete their own account."""

    default_message = "You cannot modify your own account."


class StorageError(JobBoardError):
    """Persistence layer failure. Always shown externally as a generic message."""

    default_message = "Server Error"
