from __future__ import annotations

import strawberry
from sqlalchemy import select

from ...database.models import Users
from ..access_control import get_context
from ..types.user import User


async def resolve_user_by_id(info: strawberry.Info, id: int) -> User | None:
    """Resolve a user by id, or None when no such user exists."""
    async with get_context(info).database.session() as session:
        result = await session.execute(select(Users).where(Users.id == id))
        user = result.scalar_one_or_none()

    if user is None:
        return None
    return User.from_model(user)
