"""
Database helper functions — user lookups and inserts.
"""

from __future__ import annotations

import logging
import uuid
from typing import Optional

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from database.models import User

logger = logging.getLogger(__name__)


def _to_uuid(value: str | uuid.UUID) -> Optional[uuid.UUID]:
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except ValueError:
        return None


async def find_user_by_username_or_email(
    session: AsyncSession, username: str, email: str
) -> Optional[User]:
    result = await session.execute(
        select(User).where(or_(User.username == username, User.email == email)).limit(1)
    )
    return result.scalar_one_or_none()


async def find_user_by_username(session: AsyncSession, username: str) -> Optional[User]:
    result = await session.execute(select(User).where(User.username == username))
    return result.scalar_one_or_none()


async def get_user_by_id(session: AsyncSession, user_id: str | uuid.UUID) -> Optional[User]:
    """Return the user, or ``None`` for unknown or malformed ids."""
    uid = _to_uuid(user_id)
    if uid is None:
        return None
    return await session.get(User, uid)


async def create_user(
    session: AsyncSession, username: str, email: str, password_hash: str
) -> User:
    """
    Insert a user and flush so the unique constraints are checked now.

    Raises ``sqlalchemy.exc.IntegrityError`` when another row already holds
    the username or email.
    """
    user = User(
        user_id=uuid.uuid4(),
        username=username,
        email=email,
        password_hash=password_hash,
    )
    session.add(user)
    await session.flush()
    logger.debug("Inserted user row %s", user.user_id)
    return user
