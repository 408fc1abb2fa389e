"""
Authentication API endpoints.

Handles user registration and login with JWT token generation.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, status

from jobboard.api.deps import get_credential_store, get_current_principal, get_token_service
from jobboard.core.security import Principal, TokenService
from jobboard.models.enums import Role
from jobboard.schemas import LoginRequest, Token, UserResponse, validate_payload
from jobboard.services.credentials import CredentialStore

router = APIRouter()

_CREDENTIAL_FIELDS = {"username", "password", "role"}


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(
    body: Any = Body(...),
    credentials: CredentialStore = Depends(get_credential_store),
):
    """
    Register a new user.

    Every field besides username, password and role is treated as
    recruiter profile data and is only used when role is 'Recruiter'.
    """
    if not isinstance(body, dict):
        body = {}
    profile_data = {key: value for key, value in body.items() if key not in _CREDENTIAL_FIELDS}

    credentials.register(
        body.get("username"),
        body.get("password"),
        body.get("role", Role.CANDIDATE.value),
        profile_data,
    )
    return {"message": "User registered successfully"}


@router.post("/login", response_model=Token)
async def login(
    body: Any = Body(...),
    credentials: CredentialStore = Depends(get_credential_store),
    tokens: TokenService = Depends(get_token_service),
):
    """Exchange a username and password for a bearer token valid for 5 hours."""
    data = validate_payload(LoginRequest, body)
    user = credentials.authenticate(data.username, data.password)
    return Token(token=tokens.issue(user.id, user.role))


@router.get("/me", response_model=UserResponse)
async def get_me(
    principal: Principal = Depends(get_current_principal),
    credentials: CredentialStore = Depends(get_credential_store),
):
    """Get the authenticated user's account."""
    return credentials.get_user(principal.user_id)
