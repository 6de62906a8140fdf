"""
Shared dependencies for the registration API.

This module provides:
- PocketBase client management (service client, caller-scoped clients)
- Factories for the scorer, messaging client and services
- The admin authorization dependency for management endpoints
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from fastapi import Depends, Request

from campreg.errors import ConfigurationError
from campreg.identity import AdminAllowList, Identity, SessionResolver, authorize_admin, extract_bearer_token
from campreg.messaging import UltraMsgClient
from campreg.repository import RegistrationRepository, create_store_client
from campreg.scoring import ApplicantScorer
from pocketbase import PocketBase

from .services.notification_service import ApprovalNotificationService
from .services.registration_service import RegistrationService
from .settings import Settings, get_settings

logger = logging.getLogger(__name__)

# ========================================
# PocketBase Clients
# ========================================

# - service_pb: authenticated as superuser on startup; used only for public
#   form writes (create + score write-back)
# - caller-scoped clients: built per request from the caller's token so the
#   collection's API rules apply to admin reads and writes


class StoreState:
    """Holds the service PocketBase client once authenticated."""

    service_pb: PocketBase | None = None


store_state = StoreState()


async def authenticate_service_pb(settings: Settings) -> PocketBase:
    """Authenticate the service client with PocketBase as superuser."""
    pb = create_store_client(settings.pocketbase_url)
    try:
        await asyncio.to_thread(
            pb.collection("_superusers").auth_with_password,
            settings.pocketbase_admin_email,
            settings.pocketbase_admin_password,
        )
        logger.info("Successfully authenticated with PocketBase")
    except Exception as e:
        logger.error(f"Failed to authenticate with PocketBase: {e}")
        raise
    store_state.service_pb = pb
    return pb


def _require_store_url(settings: Settings) -> str:
    if not settings.pocketbase_url:
        raise ConfigurationError("Store configuration missing")
    return settings.pocketbase_url


def get_service_repository(settings: Settings = Depends(get_settings)) -> RegistrationRepository:
    """Repository acting as the service account (public form writes)."""
    pb = store_state.service_pb or create_store_client(_require_store_url(settings))
    return RegistrationRepository(pb, settings.registrations_collection)


def caller_repository_factory(settings: Settings) -> Callable[[str], RegistrationRepository]:
    """Return a factory building repositories that act with a caller's token."""

    def build(access_token: str) -> RegistrationRepository:
        pb = create_store_client(_require_store_url(settings), access_token)
        return RegistrationRepository(pb, settings.registrations_collection)

    return build


# ========================================
# Upstream Clients
# ========================================


def get_scorer(settings: Settings = Depends(get_settings)) -> ApplicantScorer:
    return ApplicantScorer(
        api_key=settings.gemini_api_key,
        model=settings.ai_model,
        base_url=settings.ai_base_url,
        timeout=settings.ai_timeout,
    )


def get_session_resolver(settings: Settings = Depends(get_settings)) -> SessionResolver:
    return SessionResolver(_require_store_url(settings), settings.auth_collection)


def get_admin_allow_list(settings: Settings = Depends(get_settings)) -> AdminAllowList:
    return AdminAllowList(settings.admin_email_list)


# ========================================
# Services
# ========================================


def get_notification_service(
    settings: Settings = Depends(get_settings),
    resolver: SessionResolver = Depends(get_session_resolver),
    allow_list: AdminAllowList = Depends(get_admin_allow_list),
) -> ApprovalNotificationService:
    def build_messenger() -> UltraMsgClient:
        return UltraMsgClient(
            instance_id=settings.ultramsg_instance_id,
            token=settings.ultramsg_token,
            base_url=settings.ultramsg_base_url,
            timeout=settings.messaging_timeout,
        )

    return ApprovalNotificationService(
        resolver=resolver,
        allow_list=allow_list,
        repository_factory=caller_repository_factory(settings),
        messenger_factory=build_messenger,
    )


def get_submission_service(
    repository: RegistrationRepository = Depends(get_service_repository),
    scorer: ApplicantScorer = Depends(get_scorer),
) -> RegistrationService:
    return RegistrationService(repository, scorer)


# ========================================
# Admin Authorization
# ========================================


async def require_admin(
    request: Request,
    resolver: SessionResolver = Depends(get_session_resolver),
    allow_list: AdminAllowList = Depends(get_admin_allow_list),
) -> tuple[Identity, str]:
    """Dependency requiring an admin bearer token; returns the identity and token."""
    token = extract_bearer_token(request.headers.get("Authorization"))
    identity = await authorize_admin(token, resolver, allow_list)
    # authorize_admin rejects missing tokens
    assert token is not None
    return identity, token


def get_admin_service(
    admin: tuple[Identity, str] = Depends(require_admin),
    settings: Settings = Depends(get_settings),
) -> RegistrationService:
    """Registration service acting with the admin caller's credential."""
    _, token = admin
    return RegistrationService(caller_repository_factory(settings)(token))


__all__ = [
    "StoreState",
    "store_state",
    "authenticate_service_pb",
    "caller_repository_factory",
    "get_admin_allow_list",
    "get_admin_service",
    "get_notification_service",
    "get_scorer",
    "get_service_repository",
    "get_session_resolver",
    "get_submission_service",
    "require_admin",
]
