"""
API Test Layer Configuration

Layer 1: API Contract Tests
- Drive the FastAPI app in-process through httpx.ASGITransport
- The order store is mocked; routing, status codes, headers and
  response bodies are real

Usage:
    pytest tests/api -v                          # Run all API tests
    pytest tests/api -v -k "rate_limit"          # Run matching tests
    pytest tests/api -v --tb=short               # Short traceback
"""

import os
import sys
from typing import AsyncGenerator

import httpx
import pytest
import pytest_asyncio

os.environ["ENV"] = "testing"
os.environ["ENVIRONMENT"] = "testing"

# Add project root
sys.path.insert(
    0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
)

from microservices.order_tracking_service import main as tracking_main
from microservices.order_tracking_service.order_tracking_service import OrderTrackingService
from microservices.order_tracking_service.throttle import RequestThrottle
from tests.component.order_tracking.mocks import MockOrderStoreClient
from tests.contracts.order_tracking import FIXED_NOW


# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Configure custom markers"""
    config.addinivalue_line("markers", "api: marks tests as API contract tests")


# =============================================================================
# Service Fixtures
# =============================================================================


@pytest.fixture
def mock_order_client() -> MockOrderStoreClient:
    """Mock order store behind the app"""
    return MockOrderStoreClient()


@pytest.fixture
def install_service(monkeypatch, mock_order_client):
    """
    Install an OrderTrackingService on the running app

    ASGITransport does not run the lifespan, so the service is set on the
    global microservice directly. Returns a function so tests can choose
    the throttle limits.
    """

    def _install(max_requests: int = 1000, window_seconds: float = 60,
                 debug_endpoints: bool = False) -> OrderTrackingService:
        service = OrderTrackingService(
            order_client=mock_order_client,
            throttle=RequestThrottle(max_requests=max_requests, window_seconds=window_seconds),
            clock=lambda: FIXED_NOW,
        )
        monkeypatch.setattr(tracking_main.tracking_microservice, "tracking_service", service)
        monkeypatch.setattr(
            tracking_main.tracking_microservice, "debug_endpoints_enabled", debug_endpoints
        )
        return service

    return _install


@pytest.fixture
def tracking_service(install_service) -> OrderTrackingService:
    """Default service: generous throttle, debug routes off"""
    return install_service()


# =============================================================================
# HTTP Client Fixtures
# =============================================================================


@pytest_asyncio.fixture
async def client() -> AsyncGenerator[httpx.AsyncClient, None]:
    """Async HTTP client bound to the FastAPI app"""
    transport = httpx.ASGITransport(app=tracking_main.app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


# =============================================================================
# Assertion Helpers
# =============================================================================


class APIAssertions:
    """API-specific assertion helpers"""

    @staticmethod
    def assert_success(response: httpx.Response, expected_status: int = 200):
        """Assert response is successful"""
        assert response.status_code == expected_status, (
            f"Expected {expected_status}, got {response.status_code}: {response.text}"
        )
        assert response.json()["success"] is True

    @staticmethod
    def assert_error(response: httpx.Response, expected_status: int, code: str):
        """Assert response is an error body with the given status and code"""
        assert response.status_code == expected_status, (
            f"Expected {expected_status}, got {response.status_code}: {response.text}"
        )
        body = response.json()
        assert body["success"] is False
        assert body["code"] == code
        assert body["error"]
        assert body["message"]

    @staticmethod
    def assert_has_fields(data: dict, fields: list):
        """Assert response has required fields"""
        missing = [f for f in fields if f not in data]
        assert not missing, f"Missing fields: {missing}"


@pytest.fixture
def api_assert() -> APIAssertions:
    """Provide API assertion helpers"""
    return APIAssertions()
