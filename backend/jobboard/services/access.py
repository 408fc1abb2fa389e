"""
Access Control Guard.

Pure role checks with no side effects. Recruiter-only and ownership checks
fail with ``Unauthorized``; candidate-only and admin-only checks fail with
``Forbidden``.
"""

from dataclasses import dataclass
from typing import Optional

from jobboard.core.errors import Forbidden, JobBoardError, Unauthorized
from jobboard.models.enums import Role

# Error raised, and message used, when a role check fails
_DENIALS: dict[Role, tuple[type[JobBoardError], str]] = {
    Role.CANDIDATE: (Forbidden, "Only candidates can perform this action."),
    Role.RECRUITER: (Unauthorized, "Only recruiters can access this route"),
    Role.ADMIN: (Forbidden, "Admin access denied"),
}


@dataclass(frozen=True)
class Decision:
    allowed: bool
    reason: Optional[JobBoardError] = None


def authorize(role: str, required_role: Role) -> Decision:
    """Decide whether ``role`` satisfies ``required_role``."""
    if role == required_role.value:
        return Decision(allowed=True)
    error_class, message = _DENIALS[required_role]
    return Decision(allowed=False, reason=error_class(message))


def _enforce(role: str, required_role: Role) -> None:
    decision = authorize(role, required_role)
    if not decision.allowed:
        raise decision.reason


def require_candidate(role: str) -> None:
    _enforce(role, Role.CANDIDATE)


def require_recruiter(role: str) -> None:
    _enforce(role, Role.RECRUITER)


def require_admin(role: str) -> None:
    _enforce(role, Role.ADMIN)


def require_owner(actor_id: str, owner_id: str) -> None:
    """Ownership check used by the workflow engine once it has loaded the resource."""
    if str(actor_id) != str(owner_id):
        raise Unauthorized("User not authorized")
