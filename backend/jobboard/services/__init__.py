from jobboard.services.credentials import CredentialStore
from jobboard.services.workflow import WorkflowEngine, STATUS_TRANSITIONS, can_transition
from jobboard.services import access

__all__ = [
    "CredentialStore",
    "WorkflowEngine",
    "STATUS_TRANSITIONS",
    "can_transition",
    "access",
]
