"""
Authentication for blogql: password hashing, tokens, and the request gate
"""

from .context import ANONYMOUS, AuthContext
from .middleware import AuthenticationMiddleware, get_request_auth, resolve_auth_context
from .passwords import hash_password, verify_password
from .tokens import AuthenticationError, TokenIssuer

__all__ = [
    "ANONYMOUS",
    "AuthContext",
    "AuthenticationError",
    "AuthenticationMiddleware",
    "TokenIssuer",
    "get_request_auth",
    "hash_password",
    "resolve_auth_context",
    "verify_password",
]
