"""Signing and verification of self-issued JWT access tokens."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import jwt
from jwt.exceptions import InvalidTokenError

from ..config import Settings
from ..logging import get_logger

logger = get_logger(__name__)


class AuthenticationError(Exception):
    """Raised when a token cannot be verified."""

    pass


class TokenIssuer:
    """Issues and verifies HMAC-signed tokens carrying a user id."""

    def __init__(self, secret_key: str, algorithm: str = "HS256", expires_in: int = 3600):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expires_in = expires_in

    @classmethod
    def from_settings(cls, settings: Settings) -> TokenIssuer:
        return cls(
            secret_key=settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
            expires_in=settings.token_expires_in,
        )

    def issue_token(self, user_id: int, now: datetime | None = None) -> str:
        """Issue a token for ``user_id`` expiring ``expires_in`` seconds after ``now``."""
        now = now or datetime.now(UTC)
        payload = {
            "sub": str(user_id),
            "userId": user_id,
            "iat": now,
            "exp": now + timedelta(seconds=self.expires_in),
        }
        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def verify_token(self, token: str) -> int:
        """Verify a token and return the user id it carries.

        Raises:
            AuthenticationError: If the token is malformed, tampered with,
                expired, or has no usable subject.
        """
        try:
            payload = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                options={"require": ["exp", "sub"], "verify_exp": True},
            )
        except InvalidTokenError as e:
            raise AuthenticationError(f"Invalid token: {e}") from e

        try:
            return int(payload["sub"])
        except (TypeError, ValueError) as e:
            raise AuthenticationError("Token subject is not a user id") from e
