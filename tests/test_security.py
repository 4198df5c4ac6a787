"""
Tests for JWT helpers and the auth dependencies.

Tests:
- Token round trip and claims
- Expired and tampered tokens
- Bearer handling on protected endpoints
"""

import pytest
from datetime import timedelta
from jose import JWTError, jwt

from jobly.core.config import settings
from jobly.core.security import create_access_token, decode_token


class TestTokens:

    def test_round_trip(self):
        payload = decode_token(create_access_token("u1", is_admin=True))

        assert payload["sub"] == "u1"
        assert payload["is_admin"] is True
        assert "exp" in payload

    def test_default_is_not_admin(self):
        payload = decode_token(create_access_token("u1"))

        assert payload["is_admin"] is False

    def test_expired_token(self):
        token = create_access_token("u1", expires_delta=timedelta(seconds=-10))

        with pytest.raises(JWTError):
            decode_token(token)

    def test_token_signed_with_other_key(self):
        token = jwt.encode({"sub": "u1", "is_admin": True}, "not-the-key", algorithm=settings.ALGORITHM)

        with pytest.raises(JWTError):
            decode_token(token)


class TestProtectedEndpoints:

    def test_garbage_token_is_unauthorized(self, client, job_ids):
        response = client.delete(
            f"/jobs/{job_ids[0]}", headers={"Authorization": "Bearer not.a.token"}
        )

        assert response.status_code == 401

    def test_expired_admin_token_is_unauthorized(self, client, job_ids):
        token = create_access_token("admin", is_admin=True, expires_delta=timedelta(seconds=-10))

        response = client.delete(
            f"/jobs/{job_ids[0]}", headers={"Authorization": f"Bearer {token}"}
        )

        assert response.status_code == 401

    def test_token_without_subject_is_unauthorized(self, client, job_ids):
        token = jwt.encode({"is_admin": True}, settings.SECRET_KEY, algorithm=settings.ALGORITHM)

        response = client.delete(
            f"/jobs/{job_ids[0]}", headers={"Authorization": f"Bearer {token}"}
        )

        assert response.status_code == 401

    def test_public_endpoints_ignore_missing_token(self, client, job_ids):
        assert client.get("/jobs").status_code == 200
        assert client.get(f"/jobs/{job_ids[0]}").status_code == 200


class TestSettings:

    def test_database_url_names_psycopg2_driver(self):
        assert settings.DATABASE_URL.startswith("postgresql+psycopg2://")
