"""
Shared pytest fixtures and configuration for all tests.
"""

from collections.abc import AsyncGenerator, Awaitable, Callable
from pathlib import Path
from typing import Any

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from blogql.api.app import create_app
from blogql.auth.tokens import TokenIssuer
from blogql.config import Settings
from blogql.database.connection import Database

GraphQLCall = Callable[..., Awaitable[dict[str, Any]]]


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings pointing at a throwaway SQLite database."""
    return Settings(
        _env_file=None,
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'blog.db'}",
        jwt_secret="test-secret-key-for-testing-only",
        token_expires_in=3600,
        bcrypt_rounds=4,
        debug=True,
        log_level="WARNING",
    )


@pytest.fixture
def token_issuer(test_settings: Settings) -> TokenIssuer:
    return TokenIssuer.from_settings(test_settings)


@pytest_asyncio.fixture
async def database(test_settings: Settings) -> AsyncGenerator[Database, None]:
    """Provide a Database with the schema created."""
    db = Database.from_settings(test_settings)
    await db.create_schema()
    yield db
    await db.dispose()


@pytest_asyncio.fixture
async def client(
    test_settings: Settings, database: Database, token_issuer: TokenIssuer
) -> AsyncGenerator[AsyncClient, None]:
    app = create_app(test_settings, database=database, tokens=token_issuer)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def graphql(client: AsyncClient) -> GraphQLCall:
    """POST a GraphQL document and return the decoded response body."""

    async def _call(
        query: str, variables: dict[str, Any] | None = None, token: str | None = None
    ) -> dict[str, Any]:
        headers = {"Authorization": token} if token else {}
        response = await client.post(
            "/graphql", json={"query": query, "variables": variables or {}}, headers=headers
        )
        assert response.status_code == 200, response.text
        return response.json()

    return _call


@pytest.fixture
def make_user(graphql: GraphQLCall) -> Callable[[str], Awaitable[tuple[int, str]]]:
    """Register and log in a user through the API, returning (user_id, token)."""

    async def _make(email: str, password: str = "correct-horse") -> tuple[int, str]:
        registered = await graphql(
            """
            mutation ($email: String!, $password: String!) {
              register(firstName: "Test", lastName: "User", email: $email, password: $password)
            }
            """,
            {"email": email, "password": password},
        )
        logged_in = await graphql(
            "mutation ($email: String!, $password: String!) "
            "{ login(email: $email, password: $password) }",
            {"email": email, "password": password},
        )
        return int(registered["data"]["register"]), logged_in["data"]["login"]

    return _make


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "unit: mark test as unit test")
