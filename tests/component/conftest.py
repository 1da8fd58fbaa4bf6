"""
Component Test Layer Configuration

Structure:
    tests/component/
    └── order_tracking/   Service and client tests with a mocked order store
        └── mocks.py      Mock implementations

Usage:
    pytest tests/component -v
    pytest tests/component/order_tracking -v
"""
import os
import sys

import pytest

# Set testing environment BEFORE any imports
os.environ["ENV"] = "testing"
os.environ["ENVIRONMENT"] = "testing"

# Add project root
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from tests.component.order_tracking.mocks import MockOrderStoreClient
from tests.contracts.order_tracking import FIXED_NOW


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Configure custom markers"""
    config.addinivalue_line(
        "markers", "component: marks tests as component tests"
    )


# =============================================================================
# Order Store Mocks
# =============================================================================

@pytest.fixture
def mock_order_client() -> MockOrderStoreClient:
    """Mock order store client with no orders"""
    return MockOrderStoreClient()


@pytest.fixture
def fixed_clock():
    """Clock pinned to FIXED_NOW"""
    return lambda: FIXED_NOW
