"""
Root conftest.py - Global fixtures and configuration for all test layers.

Test Layers:
    - api/        : API contract tests (FastAPI app in-process, mocked order store)
    - component/  : Component tests (service and client with mocked dependencies)
    - unit/       : Unit tests (pure functions, no I/O)
    - contracts/  : Test data factories shared by every layer
"""
import os
import sys
from typing import Any, Dict

import pytest

# Add project root to path
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)

from tests.contracts.order_tracking import FIXED_NOW, OrderTrackingTestDataFactory


# =============================================================================
# Test Configuration
# =============================================================================

class TestConfig:
    """Centralized test configuration"""

    __test__ = False

    SERVICES = {
        "order_tracking_service": 8260,
    }

    HTTP_TIMEOUT = 30

    @classmethod
    def get_service_url(cls, service_name: str) -> str:
        port = cls.SERVICES.get(service_name)
        if not port:
            raise ValueError(f"Unknown service: {service_name}")
        return f"http://localhost:{port}"


@pytest.fixture(scope="session")
def test_config() -> TestConfig:
    """Provide test configuration"""
    return TestConfig()


# =============================================================================
# Sample Data Fixtures
# =============================================================================

@pytest.fixture
def factory() -> OrderTrackingTestDataFactory:
    """Provide test data factory"""
    return OrderTrackingTestDataFactory()


@pytest.fixture
def fixed_now():
    """Reference time every time-dependent test runs at"""
    return FIXED_NOW


@pytest.fixture
def sample_order(factory: OrderTrackingTestDataFactory) -> Dict[str, Any]:
    """Raw order record with one tracked fulfillment"""
    return factory.make_order(
        fulfillments=[factory.make_fulfillment(tracking_numbers=[factory.make_tracking_number()])]
    )


# =============================================================================
# Markers
# =============================================================================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line("markers", "api: API contract tests")
    config.addinivalue_line("markers", "component: Component tests")
    config.addinivalue_line("markers", "unit: Unit tests")
