"""
Tests for JWT creation and verification.
"""

from datetime import timedelta

import pytest
from jose import jwt as jose_jwt

from auth.jwt import TokenError, create_token, decode_token

SECRET = "unit-secret"
CLAIMS = {"userID": "42", "username": "alice", "email": "a@x.com"}


class TestCreateToken:
    def test_claims_survive(self):
        token = create_token(CLAIMS, SECRET)
        decoded = decode_token(token, SECRET)
        assert decoded["userID"] == "42"
        assert decoded["username"] == "alice"
        assert decoded["email"] == "a@x.com"

    def test_default_expiry_is_one_hour(self):
        decoded = decode_token(create_token(CLAIMS, SECRET), SECRET)
        assert decoded["exp"] - decoded["iat"] == 3600

    def test_input_claims_not_mutated(self):
        claims = dict(CLAIMS)
        create_token(claims, SECRET)
        assert "exp" not in claims

    def test_empty_secret_rejected(self):
        with pytest.raises(ValueError):
            create_token(CLAIMS, "")

    def test_is_hs256_jwt(self):
        token = create_token(CLAIMS, SECRET)
        assert token.count(".") == 2
        assert jose_jwt.get_unverified_header(token)["alg"] == "HS256"


class TestDecodeToken:
    def test_wrong_secret(self):
        token = create_token(CLAIMS, "other-secret")
        with pytest.raises(TokenError):
            decode_token(token, SECRET)

    def test_expired(self):
        token = create_token(CLAIMS, SECRET, expires_delta=timedelta(seconds=-5))
        with pytest.raises(TokenError, match="[Ee]xpired"):
            decode_token(token, SECRET)

    def test_garbage(self):
        with pytest.raises(TokenError):
            decode_token("not.a.token", SECRET)

    def test_empty(self):
        with pytest.raises(TokenError):
            decode_token("", SECRET)
