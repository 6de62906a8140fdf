"""Registration service - business logic for submissions and admin review.

Keeps the endpoint handlers thin: this service validates, talks to the
RegistrationRepository and, for new submissions, the applicant scorer.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pocketbase.client import ClientResponseError  # type: ignore[attr-defined]

from campreg.errors import NotFoundError, PersistenceError, RegistrationError
from campreg.models import Registration, RegistrationStatus
from campreg.scoring import ApplicantProfile
from campreg.validation import validate_registration_fields

if TYPE_CHECKING:
    from campreg.repository import RegistrationRepository
    from campreg.scoring import ApplicantScorer

logger = logging.getLogger(__name__)


@dataclass
class SubmissionResult:
    registration: Registration
    scoring_error: str | None = None


@dataclass
class RegistrationListing:
    items: list[Registration]
    counts: dict[str, int]


def matches_search(registration: Registration, term: str) -> bool:
    """Case-insensitive match on name, email or phone."""
    needle = term.strip().lower()
    if not needle:
        return True
    haystacks = (registration.name, registration.email, registration.phone)
    return any(needle in (value or "").lower() for value in haystacks)


class RegistrationService:
    """Business logic for registrations - fully testable with a mocked repository."""

    def __init__(self, repository: RegistrationRepository, scorer: ApplicantScorer | None = None) -> None:
        """Initialize with repository for data access.

        Args:
            repository: RegistrationRepository acting with the appropriate credential
            scorer: Applicant scorer; required only for ``submit``
        """
        self.repo = repository
        self.scorer = scorer

    async def submit(self, data: dict[str, Any]) -> SubmissionResult:
        """Save a public form submission, then try to score it.

        The registration is persisted before scoring; a scoring failure is
        reported alongside the saved registration rather than failing it.
        """
        validate_registration_fields(data)

        record = {
            **data,
            "status": RegistrationStatus.NEW.value,
            "approved_notified": False,
        }
        try:
            registration = await self.repo.create(record)
        except ClientResponseError as e:
            logger.error(f"Failed to save registration for {data.get('email')}: {e}")
            raise PersistenceError(f"Failed to save registration: {e}") from e

        if self.scorer is None:
            return SubmissionResult(registration=registration, scoring_error="Scoring not available")

        try:
            result = await self.scorer.score(ApplicantProfile.from_registration(registration))
            registration = await self.repo.save_score(registration.id, result.score, result.explanation)
        except RegistrationError as e:
            logger.warning(f"Scoring failed for registration {registration.id}: {e.message}")
            return SubmissionResult(registration=registration, scoring_error=e.message)
        except ClientResponseError as e:
            logger.error(f"Failed to save score for registration {registration.id}: {e}")
            return SubmissionResult(registration=registration, scoring_error="Failed to save score")

        return SubmissionResult(registration=registration)

    async def list_registrations(
        self,
        status: RegistrationStatus | None = None,
        search: str | None = None,
    ) -> RegistrationListing:
        """List registrations newest first with per-status counts.

        Counts cover all registrations, independent of the filters, as the
        dashboard's summary cards show them.
        """
        everything = await self.repo.list_all()
        counts = Counter(r.status.value for r in everything)

        items = everything
        if status is not None:
            items = [r for r in items if r.status is status]
        if search:
            items = [r for r in items if matches_search(r, search)]

        return RegistrationListing(
            items=items,
            counts={s.value: counts.get(s.value, 0) for s in RegistrationStatus},
        )

    async def get(self, registration_id: str) -> Registration:
        try:
            return await self.repo.get(registration_id)
        except ClientResponseError as e:
            raise _not_found_or_persistence(registration_id, e) from e

    async def update_fields(self, registration_id: str, data: dict[str, Any]) -> Registration:
        """Apply an admin edit; only the supplied fields are validated and written."""
        validate_registration_fields(data, partial=True)
        try:
            return await self.repo.update(registration_id, data)
        except ClientResponseError as e:
            raise _not_found_or_persistence(registration_id, e) from e

    async def set_status(self, registration_id: str, status: RegistrationStatus) -> Registration:
        try:
            registration = await self.repo.update(registration_id, {"status": status.value})
        except ClientResponseError as e:
            raise _not_found_or_persistence(registration_id, e) from e
        logger.info(f"Registration {registration_id} status set to {status.value}")
        return registration

    async def delete(self, registration_id: str) -> None:
        try:
            await self.repo.delete(registration_id)
        except ClientResponseError as e:
            raise _not_found_or_persistence(registration_id, e) from e


def _not_found_or_persistence(registration_id: str, error: ClientResponseError) -> RegistrationError:
    if getattr(error, "status", None) == 404:
        return NotFoundError(f"Registration not found. ID: {registration_id}")
    logger.error(f"PocketBase error for registration {registration_id}: {error}")
    return PersistenceError(f"Store error: {error}")
