"""Approval notification service - one-time WhatsApp message to approved applicants.

Workflow: authorize the caller, load the registration with the caller's
credential, check it is approved/unnotified/has a phone, send the message,
then record that it was sent.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from pocketbase.client import ClientResponseError  # type: ignore[attr-defined]

from campreg.errors import (
    InputValidationError,
    NotFoundError,
    PersistenceError,
    PreconditionError,
    RateLimitError,
    UnauthorizedError,
    UpstreamError,
)
from campreg.identity import AdminAllowList, SessionResolver, authorize_admin
from campreg.messaging import APPROVAL_MESSAGE, SendStatus, UltraMsgClient, normalize_phone
from campreg.models import RegistrationStatus
from campreg.repository import RegistrationRepository

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "WhatsApp approval notification sent successfully"


class ApprovalNotificationService:
    """Sends approval notifications - testable with mocked collaborators."""

    def __init__(
        self,
        resolver: SessionResolver,
        allow_list: AdminAllowList,
        repository_factory: Callable[[str], RegistrationRepository],
        messenger_factory: Callable[[], UltraMsgClient],
    ) -> None:
        """Initialize the service.

        Args:
            resolver: Resolves access tokens to identities
            allow_list: Admin emails permitted to send notifications
            repository_factory: Builds a repository acting with the given access token
            messenger_factory: Builds the messaging client (raises ConfigurationError when unconfigured)
        """
        self.resolver = resolver
        self.allow_list = allow_list
        self.repository_factory = repository_factory
        self.messenger_factory = messenger_factory

    async def send_approval(self, registration_id: str | None, access_token: str | None) -> str:
        """Send the approval message for one registration.

        Returns:
            Success message for the caller.

        Raises:
            RegistrationError subclass for every rejection path.
        """
        if not access_token:
            raise UnauthorizedError("Unauthorized - No access token")
        if not registration_id:
            raise InputValidationError("Registration ID is required")

        identity = await authorize_admin(access_token, self.resolver, self.allow_list)
        messenger = self.messenger_factory()
        repository = self.repository_factory(access_token)

        logger.info(f"Looking for registration with ID: {registration_id} (requested by {identity.email})")
        try:
            registration = await repository.get(registration_id)
        except ClientResponseError as e:
            logger.error(f"Registration lookup failed: {e}")
            detail = _store_error_message(e)
            raise NotFoundError(f"Registration not found. ID: {registration_id}, Error: {detail}") from e

        if registration.status is not RegistrationStatus.APPROVED:
            raise PreconditionError("Registration is not approved")
        if registration.approved_notified:
            raise PreconditionError("Approval notification already sent")
        if not registration.phone:
            raise PreconditionError("No phone number available for this registration")

        whatsapp_phone = normalize_phone(registration.phone)
        outcome = await messenger.send_chat(whatsapp_phone, APPROVAL_MESSAGE)

        if outcome.status is SendStatus.INVALID_NUMBER:
            raise InputValidationError("Invalid phone number. Please check the phone number format.")
        if outcome.status is SendStatus.LIMIT_REACHED:
            logger.warning("UltraMsg sending limit reached")
            raise RateLimitError()
        if outcome.status is SendStatus.FAILED:
            raise UpstreamError(outcome.message or "Failed to send WhatsApp message")
        if outcome.status is SendStatus.UNKNOWN:
            raise UpstreamError("Unknown response from WhatsApp API")

        try:
            recorded = await repository.mark_notified(registration_id)
        except ClientResponseError as e:
            logger.error(f"Failed to update notification status for {registration_id}: {e}")
            raise PersistenceError("Message sent but failed to update database") from e

        if not recorded:
            # Both requests passed the precondition check before either wrote the flag
            logger.warning(f"Concurrent approval notification detected for registration {registration_id}")

        logger.info(f"Approval notification sent for registration {registration_id}")
        return SUCCESS_MESSAGE


def _store_error_message(error: ClientResponseError) -> str:
    data = getattr(error, "data", None)
    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    return str(error) or "No data"
