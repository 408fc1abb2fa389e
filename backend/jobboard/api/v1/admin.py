"""
Admin API endpoints.

User listing, deletion and role management. Admins cannot change or delete
their own account.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends

from jobboard.api.deps import get_credential_store, require_admin
from jobboard.core.security import Principal
from jobboard.schemas import MessageResponse, RoleUpdate, UserResponse, validate_payload
from jobboard.services.credentials import CredentialStore

router = APIRouter()


@router.get("/api/users", response_model=list[UserResponse])
async def list_users(
    principal: Principal = Depends(require_admin),
    credentials: CredentialStore = Depends(get_credential_store),
):
    return credentials.list_users()


@router.delete("/api/users/{user_id}", response_model=MessageResponse)
async def delete_user(
    user_id: str,
    principal: Principal = Depends(require_admin),
    credentials: CredentialStore = Depends(get_credential_store),
):
    credentials.delete_user(principal.user_id, user_id)
    return MessageResponse(msg="User removed")


@router.put("/api/users/{user_id}/role", response_model=UserResponse)
async def change_role(
    user_id: str,
    body: Any = Body(...),
    principal: Principal = Depends(require_admin),
    credentials: CredentialStore = Depends(get_credential_store),
):
    data = validate_payload(RoleUpdate, body)
    return credentials.change_role(principal.user_id, user_id, data.role)
