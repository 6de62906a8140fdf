"""Decode UltraMsg send responses into a strict outcome.

UltraMsg reports ``sent`` as either a bool or the strings "true"/"false",
with the reason in ``message``. Older API versions reply with an ``error``
field instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class SendStatus(Enum):
    SENT = "sent"
    INVALID_NUMBER = "invalid_number"
    LIMIT_REACHED = "limit_reached"
    FAILED = "failed"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class SendOutcome:
    status: SendStatus
    message: str | None = None

    @property
    def sent(self) -> bool:
        return self.status is SendStatus.SENT


def _as_flag(value: Any) -> bool | None:
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.lower() in ("true", "false"):
        return value.lower() == "true"
    return None


def decode_send_response(payload: Any) -> SendOutcome:
    """Normalize a raw UltraMsg JSON body before any branching happens."""
    if not isinstance(payload, dict):
        return SendOutcome(SendStatus.UNKNOWN)

    sent = _as_flag(payload.get("sent"))
    if sent is True:
        return SendOutcome(SendStatus.SENT, payload.get("message"))

    if sent is False:
        message = payload.get("message") or ""
        lowered = str(message).lower()
        if "invalid" in lowered:
            return SendOutcome(SendStatus.INVALID_NUMBER, str(message))
        if "limit" in lowered:
            return SendOutcome(SendStatus.LIMIT_REACHED, str(message))
        return SendOutcome(SendStatus.FAILED, str(message) or None)

    error = payload.get("error")
    if error:
        # Legacy errors may be a string or a list of {field: reason} objects
        text = error if isinstance(error, str) else str(error)
        if "limit" in text:
            return SendOutcome(SendStatus.LIMIT_REACHED, text)
        return SendOutcome(SendStatus.FAILED, text)

    return SendOutcome(SendStatus.UNKNOWN)
