"""
Main GraphQL schema definition using Strawberry
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry
from fastapi import Request
from graphql import GraphQLError
from graphql import validate_schema as gql_validate_schema
from strawberry.fastapi import GraphQLRouter
from strawberry.types import ExecutionContext

from ..auth.middleware import get_request_auth
from ..errors import ErrorKind, classify_error
from ..logging import get_logger
from .context import GraphQLContext
from .mutations.root import Mutation
from .queries.root import Query

if TYPE_CHECKING:
    from ..auth.tokens import TokenIssuer
    from ..config import Settings
    from ..database.connection import Database

logger = get_logger(__name__)


class BlogSchema(strawberry.Schema):
    """Schema that logs resolver errors by kind instead of dumping every traceback."""

    def process_errors(
        self,
        errors: list[GraphQLError],
        execution_context: ExecutionContext | None = None,
    ) -> None:
        operation = execution_context.operation_name if execution_context else None
        for error in errors:
            # Errors without an original exception come from parsing or validating the document
            if error.original_error is None:
                kind = ErrorKind.VALIDATION
            else:
                kind = classify_error(error.original_error)

            if kind is ErrorKind.INTERNAL:
                logger.error(
                    "GraphQL operation failed",
                    kind=kind.value,
                    error=error.message,
                    path=error.path,
                    operation=operation,
                    exc_info=error.original_error,
                )
            else:
                logger.info(
                    "GraphQL operation rejected",
                    kind=kind.value,
                    error=error.message,
                    path=error.path,
                    operation=operation,
                )


# Create the GraphQL schema
schema = BlogSchema(query=Query, mutation=Mutation)


def validate_schema() -> None:
    """Validate the GraphQL schema at startup.

    Raises:
        Exception: If the schema is invalid or introspection fails
    """
    try:
        graphql_schema = schema._schema

        errors = gql_validate_schema(graphql_schema)
        if errors:
            error_messages = [str(e) for e in errors]
            raise Exception(f"GraphQL schema validation failed: {'; '.join(error_messages)}")

        from graphql import get_introspection_query, graphql_sync

        result = graphql_sync(graphql_schema, get_introspection_query())
        if result.errors:
            error_messages = [str(e) for e in result.errors]
            raise Exception(f"GraphQL introspection failed: {'; '.join(error_messages)}")

        logger.info("GraphQL schema validation successful")

    except Exception as e:
        logger.error("GraphQL schema validation failed", error=str(e))
        raise


def create_graphql_router(
    database: Database,
    tokens: TokenIssuer,
    settings: Settings,
) -> GraphQLRouter[GraphQLContext, None]:
    """Create a GraphQL router for FastAPI bound to the given services."""

    async def get_context(request: Request) -> GraphQLContext:
        """Get the context for GraphQL resolvers."""
        return GraphQLContext(
            auth=get_request_auth(request),
            database=database,
            tokens=tokens,
            settings=settings,
        )

    return GraphQLRouter(
        schema,
        path="/graphql",
        graphql_ide="graphiql" if settings.graphiql else None,
        context_getter=get_context,
    )
