"""Authentication context for request handling."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AuthContext:
    """Identity resolved for one request; ``user_id`` is None when anonymous."""

    user_id: int | None = None

    @property
    def is_authenticated(self) -> bool:
        """Check if the request is authenticated."""
        return self.user_id is not None


ANONYMOUS = AuthContext()
