"""
Order Tracking Service - Mock Dependencies

Mock implementations for component testing.
Returns raw order records as the real order store client does.
"""
from typing import Any, Dict, List, Optional


class MockOrderStoreClient:
    """Mock order store client for component testing

    Implements OrderStoreClientProtocol interface.
    Orders registered with set_orders() are returned for every query.
    """

    def __init__(self):
        self._orders: List[Dict[str, Any]] = []
        self._error: Optional[Exception] = None
        self._healthy = True
        self._call_log: List[Dict] = []
        self.closed = False

    def set_orders(self, orders: List[Dict[str, Any]]):
        """Set the records every query returns"""
        self._orders = list(orders)

    def set_error(self, error: Exception):
        """Set an error to raise on next call"""
        self._error = error

    def set_healthy(self, healthy: bool):
        self._healthy = healthy

    def _log_call(self, method: str, **kwargs):
        """Log method call for assertions"""
        self._call_log.append({"method": method, "kwargs": kwargs})

    def assert_called(self, method: str):
        """Assert that a method was called"""
        called_methods = [c["method"] for c in self._call_log]
        assert method in called_methods, f"Expected {method} to be called, but got {called_methods}"

    def assert_not_called(self, method: str):
        """Assert that a method was never called"""
        called_methods = [c["method"] for c in self._call_log]
        assert method not in called_methods, f"Expected {method} not to be called, but got {called_methods}"

    def get_call_count(self, method: str) -> int:
        """Get number of times a method was called"""
        return sum(1 for c in self._call_log if c["method"] == method)

    def last_params(self) -> Dict[str, str]:
        """Query params of the most recent list_orders call"""
        calls = [c for c in self._call_log if c["method"] == "list_orders"]
        assert calls, "list_orders was never called"
        return calls[-1]["kwargs"]["params"]

    async def list_orders(self, params: Dict[str, str]) -> List[Dict[str, Any]]:
        self._log_call("list_orders", params=params)
        if self._error:
            raise self._error
        return list(self._orders)

    async def health_check(self) -> bool:
        self._log_call("health_check")
        return self._healthy

    async def close(self) -> None:
        self._log_call("close")
        self.closed = True
