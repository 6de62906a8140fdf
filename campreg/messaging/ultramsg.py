"""UltraMsg WhatsApp API client."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from ..errors import ConfigurationError, UpstreamError
from .outcome import SendOutcome, SendStatus, decode_send_response

logger = logging.getLogger(__name__)

ULTRAMSG_BASE_URL = "https://api.ultramsg.com"

APPROVAL_MESSAGE = "🎉 Congratulations! You have been approved for the event. See you at OREMA Camping Tanger!"


class UltraMsgClient:
    """Sends WhatsApp chat messages through one UltraMsg instance."""

    def __init__(
        self,
        instance_id: str,
        token: str,
        base_url: str = ULTRAMSG_BASE_URL,
        timeout: float = 20.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        if not instance_id or not token:
            raise ConfigurationError("WhatsApp API configuration missing")
        self.instance_id = instance_id
        self.token = token
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    @property
    def chat_url(self) -> str:
        return f"{self.base_url}/{self.instance_id}/messages/chat"

    async def send_chat(self, to: str, body: str) -> SendOutcome:
        """Send one chat message and decode the provider's verdict.

        Raises:
            UpstreamError: The provider could not be reached or timed out
        """
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(
                    self.chat_url,
                    json={"token": self.token, "to": to, "body": body},
                )
        except httpx.TimeoutException as e:
            logger.error(f"UltraMsg request timed out after {self.timeout}s")
            raise UpstreamError("WhatsApp API request timed out") from e
        except httpx.HTTPError as e:
            logger.error(f"UltraMsg request failed: {type(e).__name__}: {e}")
            raise UpstreamError(f"WhatsApp API request failed: {e}") from e

        payload: Any
        try:
            payload = response.json()
        except ValueError:
            logger.error(f"UltraMsg returned non-JSON body (HTTP {response.status_code})")
            return SendOutcome(SendStatus.UNKNOWN)

        logger.info(f"UltraMsg API response: {payload}")
        return decode_send_response(payload)
