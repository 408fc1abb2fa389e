"""
Security utilities for authentication and authorization.

Provides password hashing (bcrypt) and the JWT token service.
"""

import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional, Protocol

import jwt
from jwt.exceptions import InvalidTokenError
from passlib.context import CryptContext

from jobboard.core.config import settings
from jobboard.core.errors import Unauthenticated
from jobboard.models.enums import ROLE_VALUES

# Password hashing context using bcrypt
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password.

    Args:
        plain_password: The plain text password to verify
        hashed_password: The hashed password to compare against

    Returns:
        True if password matches, False otherwise
    """
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """
    Hash a password using bcrypt.

    Args:
        password: The plain text password to hash

    Returns:
        The salted hash string
    """
    return pwd_context.hash(password)


@dataclass(frozen=True)
class Principal:
    """The identity a verified token speaks for."""

    user_id: str
    role: str


class RevocationList(Protocol):
    def is_revoked(self, jti: str) -> bool: ...


class InMemoryRevocationList:
    """Process-local set of revoked token ids."""

    def __init__(self):
        self._revoked: set[str] = set()

    def revoke(self, jti: str) -> None:
        self._revoked.add(jti)

    def is_revoked(self, jti: str) -> bool:
        return jti in self._revoked


class TokenService:
    """
    Issues and verifies signed, time-bounded bearer tokens.

    The payload binds a user id and a role:
    ``{"user": {"id": ..., "role": ...}, "iat", "exp", "jti"}``.
    Verification is stateless unless a revocation list is supplied.
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        expires_delta: timedelta = timedelta(hours=5),
        revocation_list: Optional[RevocationList] = None,
    ):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expires_delta = expires_delta
        self.revocation_list = revocation_list

    def issue(self, user_id: str, role: str, now: Optional[datetime] = None) -> str:
        """
        Create a JWT access token for a user.

        Args:
            user_id: The user's id
            role: The user's role at issuance
            now: Issuance time, defaults to the current UTC time

        Returns:
            The encoded JWT token string
        """
        issued_at = now or datetime.now(timezone.utc)
        payload = {
            "user": {"id": str(user_id), "role": role},
            "iat": issued_at,
            "exp": issued_at + self.expires_delta,
            "jti": uuid.uuid4().hex,
        }
        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def decode(self, token: str) -> Optional[dict]:
        """Decode and validate a token, returning its payload or None if invalid."""
        try:
            return jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                options={"require": ["exp"]},
            )
        except InvalidTokenError:
            return None

    def verify(self, token: Optional[str]) -> Principal:
        """
        Verify a token and return the principal it encodes.

        Raises:
            Unauthenticated: if the token is absent, malformed, expired,
                signed with another key, names an unknown role or is revoked
        """
        if not token:
            raise Unauthenticated("No token, authorization denied")

        payload = self.decode(token)
        if payload is None:
            raise Unauthenticated()

        user = payload.get("user")
        if not isinstance(user, dict) or not user.get("id"):
            raise Unauthenticated()
        if user.get("role") not in ROLE_VALUES:
            raise Unauthenticated()

        if self.revocation_list is not None:
            jti = payload.get("jti")
            if not jti or self.revocation_list.is_revoked(jti):
                raise Unauthenticated()

        return Principal(user_id=str(user["id"]), role=user["role"])


token_service = TokenService(
    secret_key=settings.SECRET_KEY,
    algorithm=settings.ALGORITHM,
    expires_delta=timedelta(hours=settings.ACCESS_TOKEN_EXPIRE_HOURS),
)
