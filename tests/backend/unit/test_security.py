"""
Unit tests for core.security module.
Tests password hashing, JWT token creation/validation.
"""
import time

import jwt
import pytest

from askboard.core.security import (
    ACCESS_TOKEN_EXPIRE_MINUTES,
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)


class TestPasswordHashing:
    """Tests for password hashing and verification."""

    def test_hash_password_returns_different_hash_each_time(self):
        """Password hashing should produce different hashes (salt included)."""
        assert hash_password("TestPassword123") != hash_password("TestPassword123")

    def test_hash_is_not_plain_text(self):
        hashed = hash_password("TestPassword123")
        assert isinstance(hashed, str)
        assert hashed != "TestPassword123"
        assert hashed.startswith("$argon2")

    def test_verify_password_correct_password(self):
        hashed = hash_password("TestPassword123")
        assert verify_password("TestPassword123", hashed) is True

    def test_verify_password_incorrect_password(self):
        hashed = hash_password("TestPassword123")
        assert verify_password("WrongPassword456", hashed) is False


class TestJWTTokens:
    """Tests for JWT token creation and validation."""

    def test_token_carries_subject_and_role(self):
        token = create_access_token("user-123", "admin")
        payload = decode_access_token(token)
        assert payload["sub"] == "user-123"
        assert payload["role"] == "admin"

    def test_token_expiration_matches_setting(self):
        payload = decode_access_token(create_access_token("user-exp", "user"))
        assert payload["exp"] > time.time()
        diff_minutes = (payload["exp"] - payload["iat"]) / 60
        assert abs(diff_minutes - ACCESS_TOKEN_EXPIRE_MINUTES) < 1

    def test_decode_rejects_garbage(self):
        with pytest.raises(jwt.InvalidTokenError):
            decode_access_token("invalid.token.here")

    def test_decode_rejects_wrong_secret(self):
        forged = jwt.encode({"sub": "someone", "role": "admin"}, "wrong-secret", algorithm="HS256")
        with pytest.raises(jwt.InvalidSignatureError):
            decode_access_token(forged)

    def test_decode_rejects_expired_token(self):
        from askboard.core.security import JWT_ALG, JWT_SECRET

        expired = jwt.encode({"sub": "old", "role": "user", "exp": int(time.time()) - 10},
                             JWT_SECRET, algorithm=JWT_ALG)
        with pytest.raises(jwt.ExpiredSignatureError):
            decode_access_token(expired)
