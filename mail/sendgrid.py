"""
SendGridClient — async wrapper around the SendGrid v3 mail API.

One client is created at startup and reused for every request; its
underlying ``httpx.AsyncClient`` is closed on shutdown.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

logger = logging.getLogger(__name__)

_SEND_PATH = "/v3/mail/send"


class MailNotConfigured(RuntimeError):
    """The API key or sender address is missing."""


class MailDeliveryError(RuntimeError):
    """SendGrid refused the message or could not be reached."""

    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details


class SendGridClient:
    def __init__(
        self,
        api_key: str,
        mail_from: str,
        *,
        base_url: str = "https://api.sendgrid.com",
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.mail_from = mail_from
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            transport=transport,
            headers={"Authorization": f"Bearer {api_key}"},
        )

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key)

    @property
    def has_sender(self) -> bool:
        return bool(self.mail_from)

    def is_configured(self) -> bool:
        return self.has_api_key and self.has_sender

    @staticmethod
    def build_payload(
        to: str,
        from_addr: str,
        subject: str,
        body: str,
        reply_to: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Build the v3 ``mail/send`` JSON body for a plain-text message."""
        payload: Dict[str, Any] = {
            "personalizations": [{"to": [{"email": to}]}],
            "from": {"email": from_addr},
            "subject": subject,
            "content": [{"type": "text/plain", "value": body}],
        }
        if reply_to:
            payload["reply_to"] = {"email": reply_to}
        return payload

    async def send(
        self,
        to: str,
        subject: str,
        body: str,
        reply_to: Optional[str] = None,
    ) -> None:
        """
        Send a plain-text message from the configured sender.

        Raises
        ------
        MailNotConfigured
            If the API key or sender address is missing.
        MailDeliveryError
            If SendGrid answers with a non-2xx status or the request fails.
        """
        if not self.is_configured():
            raise MailNotConfigured("SendGrid API key or sender address missing")

        payload = self.build_payload(to, self.mail_from, subject, body, reply_to)
        try:
            resp = await self._client.post(_SEND_PATH, json=payload)
        except httpx.HTTPError as exc:
            raise MailDeliveryError(f"SendGrid request failed: {exc}") from exc

        if resp.is_error:
            try:
                details = resp.json()
            except ValueError:
                details = resp.text
            raise MailDeliveryError(f"SendGrid returned {resp.status_code}", details=details)

        logger.info("Mail sent to %s (status %d)", to, resp.status_code)

    async def aclose(self) -> None:
        await self._client.aclose()
