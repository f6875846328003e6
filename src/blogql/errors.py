"""
Error kinds raised by resolvers and mapped to GraphQL error extensions
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Closed set of failure categories reported to clients."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    UNAUTHORIZED = "unauthorized"
    CREDENTIAL = "credential"
    INTERNAL = "internal"


class BlogError(Exception):
    """Base class for errors that are part of the API contract.

    graphql-core copies ``extensions`` from the original exception onto the
    GraphQLError it builds, so the kind reaches the client as
    ``errors[].extensions.code``.
    """

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
        self.extensions = {"code": self.kind.value}


class ValidationError(BlogError):
    """Required input is missing or empty."""

    kind = ErrorKind.VALIDATION


class NotFoundError(BlogError):
    """Referenced entity does not exist."""

    kind = ErrorKind.NOT_FOUND


class AuthorizationError(BlogError):
    """Identity is missing, or the record is not owned by the caller."""

    kind = ErrorKind.UNAUTHORIZED


class CredentialError(BlogError):
    """Supplied password does not match."""

    kind = ErrorKind.CREDENTIAL


def classify_error(error: BaseException | None) -> ErrorKind:
    """Map any exception to its ErrorKind; unknown exceptions are INTERNAL."""
    if isinstance(error, BlogError):
        return error.kind
    return ErrorKind.INTERNAL
