from __future__ import annotations

import strawberry
from sqlalchemy import insert, select

from ...auth.passwords import hash_password, verify_password
from ...database.models import Users
from ...errors import CredentialError, NotFoundError, ValidationError
from ...logging import get_logger
from ..access_control import get_context

logger = get_logger(__name__)


async def register(
    info: strawberry.Info,
    first_name: str,
    last_name: str,
    email: str,
    password: str,
) -> str:
    """
    Create a user account and return the new user id as a string.

    Email uniqueness is left to the database constraint; a violation
    propagates unchanged.
    """
    if not (first_name and last_name and email and password):
        raise ValidationError("Please provide all required fields.")

    ctx = get_context(info)
    password_hash = await hash_password(password, rounds=ctx.settings.bcrypt_rounds)

    async with ctx.database.session() as session:
        result = await session.scalars(
            insert(Users).returning(Users.id),
            [
                {
                    "first_name": first_name,
                    "last_name": last_name,
                    "email": email,
                    "password": password_hash,
                }
            ],
        )
        user_id = result.one()

    logger.info("User registered", new_user_id=user_id)
    return str(user_id)


async def login(info: strawberry.Info, email: str, password: str) -> str:
    """Check credentials and return a signed access token."""
    if not email or not password:
        raise ValidationError("Please provide email and password.")

    ctx = get_context(info)

    async with ctx.database.session() as session:
        result = await session.execute(select(Users).where(Users.email == email))
        user = result.scalar_one_or_none()

    if user is None:
        logger.info("Login for unknown email")
        raise NotFoundError("User not found.")

    if not await verify_password(password, user.password):
        logger.info("Login with invalid password", login_user_id=user.id)
        raise CredentialError("Invalid password.")

    logger.info("User logged in", login_user_id=user.id)
    return ctx.tokens.issue_token(user.id)
