"""
Contact form relay — ``POST /api/contact/send``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel, Field

from api.body import parse_payload, request_payload
from api.errors import InternalFailure, ServiceUnavailable, ValidationFailure
from mail.sendgrid import MailDeliveryError, SendGridClient

logger = logging.getLogger(__name__)

router = APIRouter(tags=["contact"])


class ContactRequest(BaseModel):
    to: Optional[str] = None
    subject: Optional[str] = None
    body: Optional[str] = None
    reply_to: Optional[str] = Field(default=None, alias="replyTo")


def get_mailer(request: Request) -> SendGridClient:
    return request.app.state.mailer


@router.post("/api/contact/send")
async def send_contact(
    payload: Dict[str, Any] = Depends(request_payload),
    mailer: SendGridClient = Depends(get_mailer),
) -> Dict[str, Any]:
    """Relay a contact-form message through SendGrid."""
    req = parse_payload(ContactRequest, payload)
    if not (req.to and req.subject and req.body):
        raise ValidationFailure("Missing fields")
    if not mailer.has_api_key:
        raise ServiceUnavailable("Email not configured")
    if not mailer.has_sender:
        raise ServiceUnavailable("MAIL_FROM not configured")

    try:
        await mailer.send(req.to, req.subject, req.body, reply_to=req.reply_to or None)
    except MailDeliveryError as exc:
        logger.error("SendGrid error: %s %s", exc, exc.details)
        raise InternalFailure("mail_failed", details=exc.details) from exc
    return {"ok": True}
