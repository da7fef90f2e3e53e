"""
JWT creation and verification.

Tokens are HS256 JWTs (python-jose) carrying ``userID``, ``username``,
``email``, ``iat`` and ``exp``.  The server keeps no session state: a
token is valid until it expires.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Dict

from jose import JWTError, jwt

DEFAULT_ALGORITHM = "HS256"
DEFAULT_EXPIRY = timedelta(hours=1)


class TokenError(Exception):
    """Raised when a token's signature, format or expiry is invalid."""


def create_token(
    claims: Dict[str, Any],
    secret: str,
    expires_delta: timedelta = DEFAULT_EXPIRY,
    algorithm: str = DEFAULT_ALGORITHM,
) -> str:
    """Sign ``claims`` plus ``iat``/``exp`` into a bearer token."""
    if not secret:
        raise ValueError("secret must not be empty")
    now = datetime.now(timezone.utc)
    to_encode = dict(claims)
    to_encode.update({"iat": now, "exp": now + expires_delta})
    return jwt.encode(to_encode, secret, algorithm=algorithm)


def decode_token(token: str, secret: str, algorithm: str = DEFAULT_ALGORITHM) -> Dict[str, Any]:
    """
    Verify signature and expiry and return the claims.

    Raises ``TokenError`` for anything that does not verify.
    """
    if not token:
        raise TokenError("empty token")
    try:
        return jwt.decode(token, secret, algorithms=[algorithm])
    except JWTError as exc:
        raise TokenError(str(exc)) from exc
