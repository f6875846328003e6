"""
Shared access control helpers for GraphQL resolvers
"""

import strawberry

from ..errors import AuthorizationError
from ..logging import get_logger
from .context import GraphQLContext

logger = get_logger(__name__)


def get_context(info: strawberry.Info) -> GraphQLContext:
    return info.context


def require_user_id(info: strawberry.Info) -> int:
    """
    Return the authenticated user id for the current request.

    Raises:
        AuthorizationError: If the request carries no valid identity
    """
    auth = get_context(info).auth
    if auth.user_id is None:
        logger.info("Unauthenticated access rejected", field=info.field_name)
        raise AuthorizationError("Authentication required.")
    return auth.user_id
