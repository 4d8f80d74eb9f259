"""Pytest fixtures for testing"""

import pytest
from datetime import date
from fastapi.testclient import TestClient
from quote_gateway.api.main import create_app


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    return TestClient(create_app())


@pytest.fixture
def start_date() -> date:
    """Fixed purchase date so schedules are reproducible"""
    return date(2025, 1, 15)
