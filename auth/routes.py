"""
Auth API routes — register, login, getUser.

Mounted at the application root.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from api.body import parse_payload, request_payload
from api.errors import ApiError, InternalFailure, ValidationFailure
from auth.dependencies import get_auth_service, get_current_user_id
from auth.service import AuthService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


# ── Request / response schemas ─────────────────────────────────────────


class RegisterRequest(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None
    email: Optional[str] = None


class LoginRequest(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None


class MessageResponse(BaseModel):
    message: str


class LoginResponse(BaseModel):
    token: str
    userID: str


class ProfileResponse(BaseModel):
    username: str
    email: str


def _require(*values: Optional[str]) -> None:
    if not all(values):
        raise ValidationFailure()


# ── Endpoints ──────────────────────────────────────────────────────────


@router.post("/register", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def register(
    payload: Dict[str, Any] = Depends(request_payload),
    auth: AuthService = Depends(get_auth_service),
) -> Dict[str, Any]:
    """Register a new user."""
    req = parse_payload(RegisterRequest, payload)
    _require(req.username, req.password, req.email)
    try:
        await auth.register(req.username, req.password, req.email)
    except ApiError:
        raise
    except Exception as exc:
        logger.exception("Error in /register")
        raise InternalFailure("Failed to register user") from exc
    return {"message": "User registered successfully"}


@router.post("/login", response_model=LoginResponse)
async def login(
    payload: Dict[str, Any] = Depends(request_payload),
    auth: AuthService = Depends(get_auth_service),
) -> Dict[str, Any]:
    """Login with username + password."""
    req = parse_payload(LoginRequest, payload)
    _require(req.username, req.password)
    try:
        result = await auth.login(req.username, req.password)
    except ApiError:
        raise
    except Exception as exc:
        logger.exception("Error in /login")
        raise InternalFailure("Failed to log in") from exc
    return {"token": result.token, "userID": result.user_id}


@router.get("/getUser", response_model=ProfileResponse)
async def get_user(
    user_id: str = Depends(get_current_user_id),
    auth: AuthService = Depends(get_auth_service),
) -> Dict[str, Any]:
    """Return the caller's username and email."""
    try:
        profile = await auth.get_profile(user_id)
    except ApiError:
        raise
    except Exception as exc:
        logger.exception("Error fetching user details")
        raise InternalFailure("Failed to fetch user details") from exc
    return {"username": profile.username, "email": profile.email}
