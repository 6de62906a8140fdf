"""
Caller identity resolution and admin authorization.

Sessions are issued by PocketBase; a token is valid when the auth
collection's auth-refresh endpoint accepts it.
"""

from __future__ import annotations

import base64
import json
import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, cast

import httpx

from .errors import ForbiddenError, UnauthorizedError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Identity:
    """A resolved, active session."""

    user_id: str
    email: str


def _decode_jwt_claims_unsafe(token: str) -> dict[str, Any]:
    """Decode JWT claims WITHOUT verification. For inspection only."""
    try:
        parts = token.split(".")
        if len(parts) != 3:
            return {}
        payload = parts[1]
        payload += "=" * (4 - len(payload) % 4)
        decoded = base64.urlsafe_b64decode(payload)
        return cast(dict[str, Any], json.loads(decoded))
    except Exception:
        return {}


def extract_bearer_token(authorization_header: str | None) -> str | None:
    """Extract bearer token from Authorization header."""
    if not authorization_header:
        return None

    parts = authorization_header.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        return None

    return parts[1]


class SessionResolver:
    """Resolves access tokens to identities by calling PocketBase auth-refresh."""

    def __init__(
        self,
        pocketbase_url: str,
        auth_collection: str = "users",
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.pocketbase_url = pocketbase_url.rstrip("/")
        self.auth_collection = auth_collection
        self.timeout = timeout
        self._transport = transport

    async def resolve(self, token: str) -> Identity | None:
        """Return the session's identity, or None if the token is not an active session."""
        if not token:
            return None

        # Superuser tokens are for the PocketBase dashboard only
        claims = _decode_jwt_claims_unsafe(token)
        if claims.get("collectionId") == "_superusers" or "3142635823" in str(claims.get("collectionId", "")):
            logger.warning("SECURITY: Rejecting _superusers token for API authentication")
            return None

        url = f"{self.pocketbase_url}/api/collections/{self.auth_collection}/auth-refresh"
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(url, headers={"Authorization": f"Bearer {token}"})
        except httpx.TimeoutException:
            logger.warning("PocketBase session validation timed out")
            return None
        except httpx.HTTPError as e:
            logger.error(f"Error validating session token: {type(e).__name__}: {e}")
            return None

        if response.status_code != 200:
            logger.debug(f"PocketBase auth-refresh returned status {response.status_code}")
            return None

        try:
            payload = response.json()
        except ValueError:
            logger.error("PocketBase auth-refresh returned a non-JSON body")
            return None

        record = payload.get("record") if isinstance(payload, dict) else None
        if not isinstance(record, dict):
            logger.error("PocketBase auth-refresh response has no auth record")
            return None

        identity = Identity(user_id=record.get("id", ""), email=record.get("email", "") or "")
        logger.debug(f"Session resolved for user {identity.user_id}")
        return identity


class AdminAllowList:
    """The set of email identities permitted to perform admin actions."""

    def __init__(self, emails: Iterable[str]):
        self._emails = frozenset(e.strip().lower() for e in emails if e and e.strip())

    def __contains__(self, email: object) -> bool:
        return isinstance(email, str) and email.strip().lower() in self._emails

    def __len__(self) -> int:
        return len(self._emails)

    def is_admin(self, email: str | None) -> bool:
        return email in self


async def authorize_admin(token: str | None, resolver: SessionResolver, allow_list: AdminAllowList) -> Identity:
    """Resolve the caller and require allow-list membership.

    Raises:
        UnauthorizedError: Missing token, or token is not an active session
        ForbiddenError: Valid session whose email is not an admin
    """
    if not token:
        raise UnauthorizedError("Unauthorized - No access token")

    identity = await resolver.resolve(token)
    if identity is None:
        raise UnauthorizedError("Unauthorized - Invalid token")

    if not allow_list.is_admin(identity.email):
        logger.warning(f"Non-admin user {identity.email} attempted an admin action")
        raise ForbiddenError("Access denied")

    return identity
