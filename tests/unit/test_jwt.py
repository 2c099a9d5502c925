"""Unit tests for bearer token verification."""

from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from src.kernel.identity.jwt import TokenVerifier

SECRET = "test-secret-key-for-testing-only"


def _token(secret: str = SECRET, **overrides) -> str:
    now = datetime.now(timezone.utc)
    claims = {
        "sub": "2",
        "role": "director",
        "email": "director@example.com",
        "type": "access",
        "iat": now,
        "exp": now + timedelta(minutes=5),
        "jti": "token-1",
    }
    claims.update(overrides)
    claims = {key: value for key, value in claims.items() if value is not None}
    return jwt.encode(claims, secret, algorithm="HS256")


@pytest.fixture
def verifier() -> TokenVerifier:
    return TokenVerifier(secret_key=SECRET, algorithm="HS256")


class TestTokenVerifier:
    """Tests for TokenVerifier.verify_access_token."""
    
    def test_valid_token(self, verifier):
        payload = verifier.verify_access_token(_token())
        
        assert payload is not None
        assert payload.sub == "2"
        assert payload.role == "director"
        assert payload.jti == "token-1"
    
    def test_wrong_secret(self, verifier):
        assert verifier.verify_access_token(_token(secret="another-secret")) is None
    
    def test_expired(self, verifier):
        past = datetime.now(timezone.utc) - timedelta(minutes=1)
        assert verifier.verify_access_token(_token(exp=past)) is None
    
    def test_refresh_token_rejected(self, verifier):
        assert verifier.verify_access_token(_token(type="refresh")) is None
    
    def test_missing_role_rejected(self, verifier):
        token = jwt.encode(
            {
                "sub": "2",
                "type": "access",
                "exp": datetime.now(timezone.utc) + timedelta(minutes=5),
            },
            SECRET,
            algorithm="HS256",
        )
        assert verifier.verify_access_token(token) is None
    
    def test_garbage(self, verifier):
        assert verifier.verify_access_token("not-a-jwt") is None
