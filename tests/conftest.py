"""
Root test configuration and fixtures for the registration service.

This conftest.py provides common fixtures for all test categories:
- unit/: Fast, isolated unit tests

Note: sys.path manipulation is handled here to ensure imports work correctly.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from types import SimpleNamespace
from typing import Any
from unittest.mock import Mock, patch

import pytest

# Add project root to path to allow imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Lifespan skips superuser auth whenever a test client starts the app
os.environ.setdefault("SKIP_PB_AUTH", "true")


def make_record(**fields: Any) -> SimpleNamespace:
    """Create a PocketBase-like record with attribute access."""
    defaults: dict[str, Any] = {
        "id": "reg_123",
        "name": "Amina El Idrissi",
        "email": "amina@example.com",
        "phone": "0612345678",
        "age": 19,
        "niveau_scolaire": "الإجازة",
        "school": "Université Abdelmalek Essaâdi",
        "org_status": "عضو(ة)",
        "previous_camps": "yes",
        "can_pay_350dh": "",
        "camp_expectation": "Meet new people and learn leadership",
        "extra_info": "No allergies",
        "photo_url": "https://example.com/photo.jpg",
        "status": "new",
        "score": 0,
        "score_explanation": "",
        "approved_notified": False,
        "created": "2025-07-01 10:00:00.000Z",
        "updated": "2025-07-01 10:00:00.000Z",
    }
    defaults.update(fields)
    return SimpleNamespace(**defaults)


def create_mock_pocketbase() -> Mock:
    """Create a comprehensive mock PocketBase instance."""
    mock_pb = Mock()

    # Collection mock with chaining support
    mock_collection = Mock()

    # Collection auth (for _superusers collection)
    mock_collection.auth_with_password = Mock(return_value=True)

    # Collection methods
    mock_collection.get_full_list = Mock(return_value=[])
    mock_collection.get_one = Mock(return_value=make_record())
    mock_collection.create = Mock(return_value=make_record())
    mock_collection.update = Mock(return_value=make_record())
    mock_collection.delete = Mock(return_value=True)

    # Make collection callable to return itself for chaining
    mock_pb.collection = Mock(return_value=mock_collection)

    # Auth store
    mock_pb.auth_store = Mock()
    mock_pb.auth_store.base_token = "mock-token"
    mock_pb.auth_store.base_model = Mock()

    return mock_pb


@pytest.fixture
def mock_pocketbase() -> Mock:
    """Create a mock PocketBase instance for tests that need it."""
    return create_mock_pocketbase()


@pytest.fixture(autouse=True)
def mock_all_external_services():
    """Automatically mock all external services to prevent real connections.

    This fixture is applied to all tests to ensure isolation from external
    services like PocketBase, unless explicitly disabled.
    """
    # Skip mocking for integration tests that explicitly need real connections
    if os.environ.get("SKIP_MOCKING") == "true":
        yield {}
        return

    mock_pb = create_mock_pocketbase()

    with patch("campreg.repository.PocketBase") as mock_pb_class:
        mock_pb_class.return_value = mock_pb
        yield {"pocketbase": mock_pb}


@pytest.fixture(autouse=True)
def reset_settings_cache():
    """Reset the cached Settings between tests to prevent state leakage."""
    from api.settings import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sample_record() -> SimpleNamespace:
    """A stored registration record as PocketBase returns it."""
    return make_record()


@pytest.fixture
def approved_record() -> SimpleNamespace:
    """An approved registration that has not been notified yet."""
    return make_record(status="approved", score=82, score_explanation="مناسب")


@pytest.fixture
def sample_form_data() -> dict[str, Any]:
    """A valid public form submission, in store field names."""
    return {
        "name": "Youssef Benali",
        "email": "youssef@example.com",
        "phone": "0661234567",
        "age": 18,
        "niveau_scolaire": "الثانوي التأهيلي",
        "school": "Lycée Ibn Batouta",
        "org_status": "منخرط(ة)",
        "previous_camps": "no",
        "can_pay_350dh": "yes",
        "camp_expectation": "Learn teamwork",
        "extra_info": "None",
        "photo_url": "https://example.com/y.jpg",
    }
