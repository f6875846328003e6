#!/usr/bin/env python3
"""
Main CLI entry point for the blogql server.
"""

import asyncio
import sys

import click
import uvicorn

from blogql import __version__
from blogql.config import settings
from blogql.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="blogql")
def cli() -> None:
    """blogql CLI - run the API server and prepare the database."""
    pass


@cli.command()
@click.option(
    "--host",
    default=settings.api_host,
    show_default=True,
    help="Host to bind to",
)
@click.option(
    "--port",
    default=settings.api_port,
    show_default=True,
    type=int,
    help="Port to bind to",
)
@click.option(
    "--reload",
    is_flag=True,
    default=settings.api_reload,
    help="Enable auto-reload for development",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str, port: int, reload: bool, log_level: str) -> None:
    """Start the blogql API server."""
    configure_logging(debug=(log_level == "debug"))

    logger.info("Starting blogql API server", host=host, port=port, reload=reload)

    try:
        uvicorn.run(
            "blogql.api.app:create_app",
            factory=True,
            host=host,
            port=port,
            reload=reload,
            log_level=log_level,
            access_log=True,
        )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command("init-db")
@click.option(
    "--database-url",
    default=None,
    help="Database URL (default: BLOGQL_DATABASE_URL)",
)
def init_db(database_url: str | None) -> None:
    """Create the users and blog_posts tables if they do not exist."""
    configure_logging(debug=settings.debug)

    from blogql.database.connection import Database

    async def _run() -> None:
        database = Database(database_url or settings.database_url, echo=settings.sql_echo)
        try:
            await database.create_schema()
        finally:
            await database.dispose()

    try:
        asyncio.run(_run())
    except Exception as e:
        logger.error("Database initialization failed", error=str(e))
        sys.exit(1)

    click.echo("Database schema is ready.")


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
