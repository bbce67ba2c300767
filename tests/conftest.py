"""
Pytest configuration and shared fixtures for stock API tests.

This module provides the FastAPI test client, a fresh in-memory
repository per test, and common test data.
"""

import os
from collections.abc import Generator
from datetime import UTC, datetime

import pytest
from fastapi.testclient import TestClient

# Set test environment before imports
os.environ["ENVIRONMENT"] = "development"
os.environ["LOG_FILE_ENABLED"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"

from stock_api.core.config.config import Settings
from stock_api.infrastructure.persistence.in_memory_stock_repository import InMemoryStockRepository
from stock_api.presentation.app import create_app

FIXED_NOW = datetime(2024, 8, 1, 9, 30, 0, tzinfo=UTC)


@pytest.fixture
def fixed_now() -> datetime:
    """Timestamp every stock created in a test receives."""
    return FIXED_NOW


@pytest.fixture
def settings() -> Settings:
    """Development settings with authentication disabled."""
    return Settings(
        ENVIRONMENT="development",
        AUTH_ENABLED=False,
        DEFAULT_STORE_ID="store-1",
        DEFAULT_USER_ID="user-1",
        LOG_FORMAT="text",
        LOG_FILE_ENABLED=False,
    )


@pytest.fixture
def repository(fixed_now) -> InMemoryStockRepository:
    """Empty repository with a frozen clock."""
    return InMemoryStockRepository(clock=lambda: fixed_now)


@pytest.fixture
def app(settings, repository):
    """Create FastAPI application instance for testing."""
    return create_app(settings=settings, repository=repository)


@pytest.fixture
def client(app) -> Generator[TestClient, None, None]:
    """Create test client for FastAPI application."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def stock_payload() -> dict:
    """Valid body for POST /stocks."""
    return {"name": "ボールペン 黒", "price": 1280, "quantity": 40}


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "integration: integration test")
