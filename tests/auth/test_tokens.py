"""Unit tests for the JWT token issuer."""

from datetime import UTC, datetime, timedelta

import jwt
import pytest

from blogql.auth.tokens import AuthenticationError, TokenIssuer


@pytest.fixture
def secret_key():
    return "test-secret-key-for-testing-only"


@pytest.fixture
def issuer(secret_key):
    return TokenIssuer(secret_key=secret_key, algorithm="HS256", expires_in=3600)


@pytest.mark.unit
class TestTokenIssuer:
    def test_issued_token_round_trips_user_id(self, issuer):
        token = issuer.issue_token(42)

        assert issuer.verify_token(token) == 42

    def test_token_expires_one_hour_after_issue(self, issuer, secret_key):
        now = datetime.now(UTC).replace(microsecond=0)
        token = issuer.issue_token(7, now=now)

        payload = jwt.decode(token, secret_key, algorithms=["HS256"])
        assert payload["sub"] == "7"
        assert payload["userId"] == 7
        assert payload["exp"] - payload["iat"] == 3600

    def test_token_accepted_just_before_expiry(self, issuer):
        issued_at = datetime.now(UTC) - timedelta(minutes=59)
        token = issuer.issue_token(3, now=issued_at)

        assert issuer.verify_token(token) == 3

    def test_expired_token_rejected(self, issuer):
        issued_at = datetime.now(UTC) - timedelta(hours=1, minutes=1)
        token = issuer.issue_token(3, now=issued_at)

        with pytest.raises(AuthenticationError, match="Invalid token"):
            issuer.verify_token(token)

    def test_wrong_secret_rejected(self, issuer):
        other = TokenIssuer(secret_key="another-secret-entirely-for-tests")
        token = other.issue_token(1)

        with pytest.raises(AuthenticationError):
            issuer.verify_token(token)

    def test_garbage_token_rejected(self, issuer):
        with pytest.raises(AuthenticationError):
            issuer.verify_token("not-a-jwt")

    def test_non_numeric_subject_rejected(self, issuer, secret_key):
        now = datetime.now(UTC)
        token = jwt.encode(
            {"sub": "alice", "exp": now + timedelta(hours=1)}, secret_key, algorithm="HS256"
        )

        with pytest.raises(AuthenticationError, match="subject"):
            issuer.verify_token(token)

    def test_missing_subject_rejected(self, issuer, secret_key):
        token = jwt.encode(
            {"exp": datetime.now(UTC) + timedelta(hours=1)}, secret_key, algorithm="HS256"
        )

        with pytest.raises(AuthenticationError):
            issuer.verify_token(token)
