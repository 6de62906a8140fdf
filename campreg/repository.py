"""Registration Repository - data access for the registrations collection.

All PocketBase calls for registrations live here so the services can be
tested against a mocked repository. The SDK is synchronous; calls are
pushed to a worker thread.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from pocketbase import PocketBase

from .models import Registration

logger = logging.getLogger(__name__)

REGISTRATIONS_COLLECTION = "registrations"


def create_store_client(pocketbase_url: str, access_token: str | None = None) -> PocketBase:
    """Create a PocketBase client, optionally acting as the caller.

    With a token, every request carries the caller's credential, so the
    collection's API rules decide what the caller may read and write.
    """
    client = PocketBase(pocketbase_url)
    if access_token:
        client.auth_store.save(access_token, None)
    return client


class RegistrationRepository:
    """Repository for camp registration records"""

    def __init__(self, pb_client: PocketBase, collection: str = REGISTRATIONS_COLLECTION) -> None:
        self.pb = pb_client
        self.collection_name = collection

    def _collection(self) -> Any:
        return self.pb.collection(self.collection_name)

    async def get(self, registration_id: str) -> Registration:
        """Fetch one registration.

        Raises:
            ClientResponseError: Not found (status 404) or store failure
        """
        record = await asyncio.to_thread(self._collection().get_one, registration_id)
        return Registration.from_record(record)

    async def create(self, data: dict[str, Any]) -> Registration:
        record = await asyncio.to_thread(self._collection().create, data)
        logger.info(f"Created registration {record.id}")
        return Registration.from_record(record)

    async def update(self, registration_id: str, data: dict[str, Any]) -> Registration:
        # PocketBase maintains the "updated" autodate field
        record = await asyncio.to_thread(self._collection().update, registration_id, data)
        return Registration.from_record(record)

    async def delete(self, registration_id: str) -> None:
        await asyncio.to_thread(self._collection().delete, registration_id)
        logger.info(f"Deleted registration {registration_id}")

    async def list_all(self) -> list[Registration]:
        """List every registration, newest first."""
        records = await asyncio.to_thread(self._collection().get_full_list, query_params={"sort": "-created"})
        return [Registration.from_record(r) for r in records]

    async def save_score(self, registration_id: str, score: int, explanation: str) -> Registration:
        """Write a score and its explanation together."""
        return await self.update(registration_id, {"score": score, "score_explanation": explanation})

    async def mark_notified(self, registration_id: str) -> bool:
        """Set approved_notified, only if it is still false.

        Returns False when the flag was already set, i.e. another request
        recorded the notification first. The flag is never reset.
        """
        current = await asyncio.to_thread(self._collection().get_one, registration_id)
        if getattr(current, "approved_notified", False):
            logger.warning(f"Registration {registration_id} was already marked notified")
            return False

        await asyncio.to_thread(self._collection().update, registration_id, {"approved_notified": True})
        return True
