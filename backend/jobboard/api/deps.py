"""
Shared FastAPI dependencies.

The token travels in the ``x-auth-token`` header; ``Authorization: Bearer``
is accepted as well.
"""

from typing import Optional

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from jobboard.core.security import Principal, TokenService, token_service
from jobboard.db.session import get_db
from jobboard.services import access
from jobboard.services.credentials import CredentialStore
from jobboard.services.workflow import WorkflowEngine


def get_token_service() -> TokenService:
    return token_service


def get_credential_store(db: Session = Depends(get_db)) -> CredentialStore:
    return CredentialStore(db)


def get_workflow(db: Session = Depends(get_db)) -> WorkflowEngine:
    return WorkflowEngine(db)


def _extract_token(x_auth_token: Optional[str], authorization: Optional[str]) -> Optional[str]:
    if x_auth_token:
        return x_auth_token
    if authorization and authorization.lower().startswith("bearer "):
        return authorization[7:].strip()
    return None


async def get_current_principal(
    x_auth_token: Optional[str] = Header(None),
    authorization: Optional[str] = Header(None),
    tokens: TokenService = Depends(get_token_service),
) -> Principal:
    """Verify the request's token. Raises Unauthenticated if missing or invalid."""
    return tokens.verify(_extract_token(x_auth_token, authorization))


async def require_candidate(principal: Principal = Depends(get_current_principal)) -> Principal:
    access.require_candidate(principal.role)
    return principal


async def require_recruiter(principal: Principal = Depends(get_current_principal)) -> Principal:
    access.require_recruiter(principal.role)
    return principal


async def require_admin(principal: Principal = Depends(get_current_principal)) -> Principal:
    access.require_admin(principal.role)
    return principal
