"""Registration service error classes.

Every failure that reaches an endpoint is one of these. Each carries the
HTTP status it maps to; the API layer serializes them to ``{"error": ...}``.
"""

from __future__ import annotations

from typing import Any


class RegistrationError(Exception):
    """Base exception for all handled registration/notification failures."""

    status_code = 500

    def __init__(self, message: str, *, status_code: int | None = None, extra: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.extra = extra or {}

    def to_payload(self) -> dict[str, Any]:
        """Serialize to the JSON error body returned to callers."""
        return {"error": self.message, **self.extra}


class ConfigurationError(RegistrationError):
    """Raised when a required credential or URL is not configured."""

    status_code = 500


class InputValidationError(RegistrationError):
    """Raised when caller input is missing or malformed."""

    status_code = 400


class UnauthorizedError(RegistrationError):
    """Raised when the caller credential is missing or does not resolve to a session."""

    status_code = 401


class ForbiddenError(RegistrationError):
    """Raised when the caller is authenticated but not on the admin allow-list."""

    status_code = 403


class NotFoundError(RegistrationError):
    """Raised when a referenced registration does not exist."""

    status_code = 404


class PreconditionError(RegistrationError):
    """Raised when a business rule rejects an otherwise valid registration."""

    status_code = 400


class UpstreamError(RegistrationError):
    """Raised when the AI or messaging service is unreachable or answers unusably."""

    status_code = 500


class InvalidAIResponseError(UpstreamError):
    """Raised when the model reply lacks a SCORE or EXPLANATION field."""

    def __init__(self, message: str = "Invalid AI response format"):
        super().__init__(message)


class RateLimitError(UpstreamError):
    """Raised when the messaging provider reports its sending limit was reached."""

    status_code = 429

    def __init__(self, message: str = "limit_reached"):
        super().__init__(message)


class PersistenceError(RegistrationError):
    """Raised when a store write fails after an external side effect already happened."""

    status_code = 500
