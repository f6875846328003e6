"""
User GraphQL type definitions
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

if TYPE_CHECKING:
    from ...database.models import Users


@strawberry.type
class User:
    """Public view of a registered user. Names and password hash are not exposed."""

    id: int
    email: str

    @classmethod
    def from_model(cls, user: Users) -> User:
        return cls(id=user.id, email=user.email)
