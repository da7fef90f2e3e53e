"""
Request body parsing shared by the POST routes.

Accepts JSON and ``application/x-www-form-urlencoded`` bodies and hands
back a plain dict; anything unparseable is a ``ValidationFailure``.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Type, TypeVar

from fastapi import Request
from pydantic import BaseModel, ValidationError

from api.errors import ValidationFailure

logger = logging.getLogger(__name__)

_FORM_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")

ModelT = TypeVar("ModelT", bound=BaseModel)


async def request_payload(request: Request) -> Dict[str, Any]:
    """Dependency: the request body as a dict, from JSON or a form post."""
    content_type = request.headers.get("content-type", "").split(";")[0].strip().lower()

    if content_type in _FORM_TYPES:
        form = await request.form()
        return {key: value for key, value in form.items() if isinstance(value, str)}

    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        payload = json.loads(raw)
    except ValueError:
        logger.debug("Undecodable body on %s (%s)", request.url.path, content_type or "no content-type")
        raise ValidationFailure()
    if not isinstance(payload, dict):
        raise ValidationFailure()
    return payload


def parse_payload(model: Type[ModelT], payload: Dict[str, Any]) -> ModelT:
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        logger.debug("Rejected body: %s", exc.errors())
        raise ValidationFailure()
