"""
FastAPI dependencies for authentication.

Provides ``get_auth_service`` and the ``get_current_user_id`` guard used
in front of protected routes.
"""

from __future__ import annotations

from typing import Optional

from fastapi import Depends, Header, Request

from api.errors import Forbidden, Unauthenticated
from auth.service import AuthService
from database.session import get_database


def get_auth_service(request: Request, db=Depends(get_database)) -> AuthService:
    return AuthService(db, request.app.state.settings)


async def get_current_user_id(
    authorization: Optional[str] = Header(None, alias="Authorization"),
    auth: AuthService = Depends(get_auth_service),
) -> str:
    """
    Verify the ``Authorization: Bearer <token>`` header and return the
    authenticated ``userID``.

    Missing header → 401.  Anything else that does not verify → 403.
    """
    auth.require_secret()
    if not authorization:
        raise Unauthenticated()

    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise Forbidden()
    return auth.authenticate(parts[1])
