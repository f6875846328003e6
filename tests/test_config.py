"""Unit tests for settings loading."""

import pytest

from blogql.config import Settings
from blogql.database.connection import to_async_url


@pytest.mark.unit
def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.token_expires_in == 3600
    assert settings.jwt_algorithm == "HS256"
    assert settings.bcrypt_rounds == 10


@pytest.mark.unit
def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("BLOGQL_JWT_SECRET", "from-env")
    monkeypatch.setenv("BLOGQL_API_PORT", "8123")
    monkeypatch.setenv("BLOGQL_DATABASE_URL", "postgresql://u:p@db:5432/blog")

    settings = Settings(_env_file=None)

    assert settings.jwt_secret == "from-env"
    assert settings.api_port == 8123
    assert settings.database_url == "postgresql://u:p@db:5432/blog"


@pytest.mark.unit
@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("postgresql://u@h/blog", "postgresql+asyncpg://u@h/blog"),
        ("sqlite:///blog.db", "sqlite+aiosqlite:///blog.db"),
        ("postgresql+asyncpg://u@h/blog", "postgresql+asyncpg://u@h/blog"),
    ],
)
def test_to_async_url(url, expected):
    assert to_async_url(url) == expected
