"""
AuthService — registration, login, token verification and profile lookup.

The service owns no state of its own; it is handed the ``Database`` and
``Settings`` at construction and every call is independent.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import timedelta
from typing import Optional

from sqlalchemy.exc import IntegrityError, InterfaceError, OperationalError

from api.errors import (
    DuplicateCredential,
    Forbidden,
    InvalidCredentials,
    NotFound,
    ServiceUnavailable,
)
from auth.jwt import TokenError, create_token, decode_token
from auth.password import dummy_hash, hash_password_async, verify_password_async
from config.settings import Settings
from database.helpers import (
    create_user,
    find_user_by_username,
    find_user_by_username_or_email,
    get_user_by_id,
)
from database.session import Database

logger = logging.getLogger(__name__)

_STORE_DOWN_ERRORS = (OperationalError, InterfaceError, OSError)


@dataclass
class LoginResult:
    token: str
    user_id: str


@dataclass
class Profile:
    username: str
    email: str


class AuthService:
    def __init__(self, db: Optional[Database], settings: Settings):
        self._db = db
        self._settings = settings

    # ── Guards ───────────────────────────────────────────────────────────

    def _require_db(self) -> Database:
        if self._db is None:
            raise ServiceUnavailable("Database not configured")
        return self._db

    def require_secret(self) -> str:
        if not self._settings.secret_key:
            raise ServiceUnavailable("Server misconfigured (no SECRET_KEY)")
        return self._settings.secret_key

    # ── Operations ───────────────────────────────────────────────────────

    async def register(self, username: str, password: str, email: str) -> None:
        """
        Create a user.  Raises ``DuplicateCredential`` if the username or
        the email is already taken, whether the pre-check or the unique
        constraint catches it.
        """
        db = self._require_db()
        try:
            async with db.session() as session:
                existing = await find_user_by_username_or_email(session, username, email)
                if existing is not None:
                    raise DuplicateCredential()
                password_hash = await hash_password_async(password, self._settings.bcrypt_rounds)
                user = await create_user(session, username, email, password_hash)
        except IntegrityError:
            logger.info("Concurrent registration lost the race for %s / %s", username, email)
            raise DuplicateCredential()
        except _STORE_DOWN_ERRORS as exc:
            logger.error("Credential store unavailable during register: %s", exc)
            raise ServiceUnavailable("Database unavailable") from exc

        logger.info("Registered user %s (%s)", username, user.user_id)

    async def login(self, username: str, password: str) -> LoginResult:
        """
        Verify credentials and issue a token.

        Unknown username and wrong password raise the same
        ``InvalidCredentials`` so account existence is not revealed.
        """
        db = self._require_db()
        secret = self.require_secret()
        try:
            async with db.session() as session:
                user = await find_user_by_username(session, username)
        except _STORE_DOWN_ERRORS as exc:
            logger.error("Credential store unavailable during login: %s", exc)
            raise ServiceUnavailable("Database unavailable") from exc

        if user is None:
            # Same bcrypt cost as a wrong password.
            await verify_password_async(password, dummy_hash(self._settings.bcrypt_rounds))
            raise InvalidCredentials()
        if not await verify_password_async(password, user.password_hash):
            raise InvalidCredentials()

        user_id = str(user.user_id)
        token = create_token(
            {"userID": user_id, "username": user.username, "email": user.email},
            secret,
            expires_delta=timedelta(seconds=self._settings.jwt_expiry_seconds),
            algorithm=self._settings.jwt_algorithm,
        )
        logger.info("Login: %s (%s)", user.username, user_id)
        return LoginResult(token=token, user_id=user_id)

    def authenticate(self, token: str) -> str:
        """Return the ``userID`` claim of a valid token, else ``Forbidden``."""
        secret = self.require_secret()
        try:
            claims = decode_token(token, secret, algorithm=self._settings.jwt_algorithm)
        except TokenError as exc:
            logger.debug("Token rejected: %s", exc)
            raise Forbidden()
        user_id = claims.get("userID")
        if not user_id:
            raise Forbidden()
        return str(user_id)

    async def get_profile(self, user_id: str) -> Profile:
        db = self._require_db()
        try:
            async with db.session() as session:
                user = await get_user_by_id(session, user_id)
        except _STORE_DOWN_ERRORS as exc:
            logger.error("Credential store unavailable during profile lookup: %s", exc)
            raise ServiceUnavailable("Database unavailable") from exc

        if user is None:
            raise NotFound("User not found")
        return Profile(username=user.username, email=user.email)
