"""Pytest configuration and shared fixtures."""

import os
from typing import Any
from uuid import uuid4

import pytest

# Set test environment before importing settings
os.environ["ENV"] = "development"
os.environ["LOG_LEVEL"] = "DEBUG"
os.environ["LOG_FORMAT"] = "text"


@pytest.fixture
def sample_service_document() -> dict[str, Any]:
    """Service as it appears on the wire."""
    return {
        "_id": str(uuid4()),
        "name": "Billing",
        "operations": [
            {"_id": str(uuid4()), "name": "read-invoices"},
            {"_id": str(uuid4()), "name": "write-invoices"},
        ],
    }


@pytest.fixture
def mock_settings() -> dict[str, Any]:
    """Mock settings for testing."""
    return {
        "app_name": "rbac-registry-test",
        "log_level": "DEBUG",
        "log_format": "text",
        "rbac_api_key": "test-api-key",
        "default_page_size": 5,
        "max_page_size": 50,
    }


# =============================================================================
# Markers
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests (no external dependencies)")
    config.addinivalue_line(
        "markers", "integration: Integration tests (require external services)"
    )
