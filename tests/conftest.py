"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import Generator
from typing import Any
from unittest.mock import MagicMock

import pytest
import strawberry

from phonebook.seed import SEED_CONTACTS
from phonebook.store import ContactStore


@pytest.fixture
def store() -> ContactStore:
    """A contact store holding the sample contacts."""
    return ContactStore.from_seed(SEED_CONTACTS)


@pytest.fixture
def empty_store() -> ContactStore:
    """A contact store with no contacts."""
    return ContactStore()


@pytest.fixture
def mock_info(store: ContactStore) -> MagicMock:
    """Create a mock GraphQL info object whose context carries the store."""
    info = MagicMock(spec=strawberry.Info)
    info.context = {"request": MagicMock(), "store": store}
    return info


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")  # type: ignore[reportUnknownMemberType]
    config.addinivalue_line("markers", "unit: mark test as unit test")  # type: ignore[reportUnknownMemberType]
