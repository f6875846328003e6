"""Authentication gate for incoming requests."""

from __future__ import annotations

from collections.abc import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from ..logging import get_logger, set_user_context
from .context import ANONYMOUS, AuthContext
from .tokens import AuthenticationError, TokenIssuer

logger = get_logger(__name__)

BEARER_PREFIX = "Bearer "


def resolve_auth_context(authorization: str | None, issuer: TokenIssuer) -> AuthContext:
    """
    Build the AuthContext for a request from its Authorization header.

    The header carries the bare token; a ``Bearer`` prefix is also accepted.
    Missing, invalid, or expired tokens yield an anonymous context rather
    than an error, leaving it to operations that need an identity to reject
    the request.
    """
    if not authorization:
        return ANONYMOUS

    token = authorization.strip()
    if token.startswith(BEARER_PREFIX):
        token = token[len(BEARER_PREFIX) :].strip()

    if not token:
        return ANONYMOUS

    try:
        user_id = issuer.verify_token(token)
    except AuthenticationError as e:
        logger.warning("Token rejected, continuing unauthenticated", error=str(e))
        return ANONYMOUS

    return AuthContext(user_id=user_id)


def get_request_auth(request: Request) -> AuthContext:
    """Return the AuthContext attached by AuthenticationMiddleware."""
    return getattr(request.state, "auth", ANONYMOUS)


class AuthenticationMiddleware(BaseHTTPMiddleware):
    """Resolve the caller identity once per request and store it on request.state."""

    def __init__(self, app: ASGIApp, issuer: TokenIssuer):
        super().__init__(app)
        self.issuer = issuer

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        auth = resolve_auth_context(request.headers.get("authorization"), self.issuer)
        request.state.auth = auth
        set_user_context(auth.user_id)
        return await call_next(request)
