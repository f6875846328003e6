"""
Main FastAPI application for blogql
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..auth.middleware import AuthenticationMiddleware
from ..auth.tokens import TokenIssuer
from ..config import Settings
from ..config import settings as default_settings
from ..database.connection import Database
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware

logger = get_logger(__name__)


def create_app(
    settings: Settings | None = None,
    database: Database | None = None,
    tokens: TokenIssuer | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    The database and token issuer are built from settings unless given,
    and are shared by every request the application serves.
    """
    settings = settings or default_settings
    configure_logging(debug=settings.debug, level=settings.log_level)

    database = database or Database.from_settings(settings)
    tokens = tokens or TokenIssuer.from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        logger.info("Starting blogql API...", environment=settings.environment)
        yield
        logger.info("Shutting down blogql API...")
        await database.dispose()

    app = FastAPI(
        title="blogql",
        description="GraphQL API for blog posts and user accounts",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )
    app.state.database = database
    app.state.tokens = tokens

    # Middleware added last runs first: logging, then CORS, then authentication
    app.add_middleware(AuthenticationMiddleware, issuer=tokens)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(LoggingContextMiddleware)

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        db_ok, db_error = await database.ping()
        return {
            "status": "healthy" if db_ok else "degraded",
            "version": __version__,
            "database": "ok" if db_ok else db_error,
        }

    try:
        from ..graphql.schema import create_graphql_router, validate_schema

        logger.info("Validating GraphQL schema...")
        validate_schema()

        graphql_router = create_graphql_router(database, tokens, settings)
        app.include_router(graphql_router, prefix="")
        logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")
    except Exception as e:  # pragma: no cover
        logger.error("Failed to initialize GraphQL endpoint", error=str(e))
        # Fail fast, the server should not start with a broken schema
        raise

    return app
