"""
Credential Store.

Owns user identity, hashed passwords and role assignment. Registration of a
recruiter writes the recruiter profile and the user in the same transaction.
"""

import uuid
from functools import lru_cache
from typing import Any, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobboard.core.errors import (
    Conflict,
    InvalidCredentials,
    InvalidRole,
    NotFound,
    SelfModification,
)
from jobboard.core.logging import get_logger
from jobboard.core.security import get_password_hash, verify_password
from jobboard.db.base import new_id
from jobboard.db.store import Collection, commit
from jobboard.models import RecruiterProfile, User
from jobboard.models.enums import ROLE_VALUES, Role
from jobboard.schemas import RecruiterProfileIn, UserRegister, validate_payload

logger = get_logger("credentials")


@lru_cache(maxsize=1)
def _dummy_hash() -> str:
    return get_password_hash(uuid.uuid4().hex)


class CredentialStore:
    def __init__(self, db: Session):
        self.db = db
        self.users = Collection(db, User)
        self.profiles = Collection(db, RecruiterProfile)

    def register(
        self,
        username: str,
        password: str,
        role: str,
        profile_data: Optional[dict[str, Any]] = None,
    ) -> User:
        """
        Create a user account.

        Raises:
            ValidationError: blank username/password or bad recruiter profile
            InvalidRole: role outside the role set
            Conflict: username already taken
        """
        data = validate_payload(
            UserRegister, {"username": username, "password": password, "role": role}
        )
        if self.users.find_one(username=data.username):
            raise Conflict("User already exists")

        if data.role not in ROLE_VALUES:
            raise InvalidRole()

        profile: Optional[RecruiterProfileIn] = None
        if data.role == Role.RECRUITER.value:
            profile = validate_payload(RecruiterProfileIn, profile_data or {})

        user_id = new_id()
        recruiter_profile_id = None
        try:
            if profile is not None:
                recruiter_profile = self.profiles.insert(user_id=user_id, **profile.model_dump())
                recruiter_profile_id = recruiter_profile.id
            user = self.users.insert(
                id=user_id,
                username=data.username,
                hashed_password=get_password_hash(data.password),
                role=data.role,
                recruiter_profile_id=recruiter_profile_id,
            )
            commit(self.db)
        except IntegrityError as exc:
            # Lost a race with a concurrent registration of the same username
            raise Conflict("User already exists") from exc

        logger.info(f"Registered {data.role} '{data.username}' ({user_id})")
        return user

    def authenticate(self, username: str, password: str) -> User:
        """
        Check a username/password pair.

        Unknown usernames and wrong passwords raise the same error.
        """
        user = self.users.find_one(username=username) if username else None
        # Unknown usernames still pay for one bcrypt verification
        hashed = user.hashed_password if user is not None else _dummy_hash()
        password_ok = verify_password(password or "", hashed)
        if user is None or not password or not password_ok:
            logger.info(f"Failed login for '{username}'")
            raise InvalidCredentials()

        logger.info(f"Login for '{username}' ({user.id})")
        return user

    def get_user(self, user_id: str) -> User:
        user = self.users.find_by_id(user_id)
        if user is None:
            raise NotFound("User not found")
        return user

    def list_users(self) -> list[User]:
        return self.users.find_many(order_by=User.created_at)

    def change_role(self, actor_id: str, target_id: str, new_role: str) -> User:
        """Set another user's role. Admins cannot change their own role."""
        if not isinstance(new_role, str) or new_role not in ROLE_VALUES:
            raise InvalidRole()

        user = self.get_user(target_id)
        if user.id == actor_id:
            raise SelfModification("You cannot change your own role.")

        previous = user.role
        user.role = new_role
        commit(self.db)

        logger.info(f"Admin {actor_id} changed role of {user.id}: {previous} -> {new_role}")
        return user

    def delete_user(self, actor_id: str, target_id: str) -> None:
        """
        Remove another user's account.

        Jobs, resumes and applications referencing the user are left in place.
        """
        user = self.get_user(target_id)
        if user.id == actor_id:
            raise SelfModification("You cannot delete your own account.")

        self.users.delete_one(id=user.id)
        commit(self.db)

        logger.info(f"Admin {actor_id} deleted user {target_id}")

    def ensure_admin(self, username: str, password: str) -> tuple[User, bool]:
        """Create an admin account unless one already exists."""
        existing = self.users.find_one(role=Role.ADMIN.value)
        if existing is not None:
            return existing, False
        return self.register(username, password, Role.ADMIN.value), True
