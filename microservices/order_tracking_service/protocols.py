"""
Order Tracking Service Protocols (Interfaces)

These interfaces define contracts for dependency injection.
NO import-time I/O dependencies - safe to import anywhere.
"""
from typing import Any, Dict, List, Optional, Protocol, runtime_checkable

# Import only models (no I/O dependencies)
from .models import ErrorKind


# ============================================================================
# Custom Exceptions - defined here to avoid importing the HTTP client
# ============================================================================

class TrackingError(Exception):
    """Base exception for tracking lookups

    Every subclass carries a stable code, a short title, a message that is
    safe to show the caller and the HTTP status the API answers with.
    """
    kind: ErrorKind = ErrorKind.INTERNAL_ERROR
    title: str = "Internal server error"
    default_message: str = "An unexpected error occurred while processing your request"
    status_code: int = 500

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class MissingCriteriaError(TrackingError):
    """Neither order number nor email supplied"""
    kind = ErrorKind.MISSING_CRITERIA
    title = "Missing required fields"
    default_message = "Please provide either order number or email address"
    status_code = 400


class InvalidOrderNumberError(TrackingError):
    """Order number failed validation"""
    kind = ErrorKind.INVALID_ORDER_NUMBER
    title = "Invalid order number"
    default_message = (
        "Order number must be 1-50 characters and contain only letters, "
        "numbers, hyphens, underscores, and #"
    )
    status_code = 400


class InvalidEmailError(TrackingError):
    """Email failed validation"""
    kind = ErrorKind.INVALID_EMAIL
    title = "Invalid email address"
    default_message = "Please provide a valid email address"
    status_code = 400


class OrderNotFoundError(TrackingError):
    """No order matched the search criteria"""
    kind = ErrorKind.NOT_FOUND
    title = "Order not found"
    default_message = "No order found with the provided details"
    status_code = 404


class RateLimitedError(TrackingError):
    """Client exceeded its lookup allowance"""
    kind = ErrorKind.RATE_LIMITED
    title = "Rate limit exceeded"
    default_message = "Too many requests from this IP, please try again later."
    status_code = 429

    def __init__(self, message: Optional[str] = None, retry_after: Optional[int] = None):
        super().__init__(message)
        self.retry_after = retry_after


class UpstreamError(TrackingError):
    """Order store call failed

    ``upstream_status`` keeps the order store's HTTP status (None for
    timeouts and network failures).
    """
    kind = ErrorKind.UPSTREAM_UNAVAILABLE
    title = "Service unavailable"
    default_message = "The order system is currently unavailable"
    status_code = 503

    def __init__(self, message: Optional[str] = None, upstream_status: Optional[int] = None):
        super().__init__(message)
        self.upstream_status = upstream_status


class UpstreamUnavailableError(UpstreamError):
    """Order store unreachable, timed out or answered with a server error"""
    pass


class UpstreamAuthError(UpstreamError):
    """Order store rejected the access token (401)"""
    kind = ErrorKind.UPSTREAM_AUTH_ERROR
    title = "Authentication failed"
    default_message = "Order system authentication error"
    status_code = 500


class UpstreamAccessDenied(UpstreamError):
    """Order store denied access to orders (403)"""
    kind = ErrorKind.UPSTREAM_ACCESS_DENIED
    title = "Access denied"
    default_message = "Order system access denied"
    status_code = 500


# ============================================================================
# Order Store Protocol
# ============================================================================

@runtime_checkable
class OrderStoreClientProtocol(Protocol):
    """
    Interface for the upstream order store.

    Implementations return raw order records and raise the UpstreamError
    family on failure. Used for dependency injection to enable testing.
    """

    async def list_orders(self, params: Dict[str, str]) -> List[Dict[str, Any]]:
        """Query orders; an empty list means no match"""
        ...

    async def health_check(self) -> bool:
        """Check if the order store is reachable"""
        ...

    async def close(self) -> None:
        """Release HTTP resources"""
        ...


# ============================================================================
# Throttle Protocol
# ============================================================================

@runtime_checkable
class ThrottleProtocol(Protocol):
    """Interface for per-client request admission"""

    def admit(self, client_id: str, now: Optional[float] = None) -> bool:
        """Record and admit a request, or reject it without recording"""
        ...

    def retry_after(self, client_id: str, now: Optional[float] = None) -> int:
        """Seconds until the client may be admitted again"""
        ...

    def reset(self) -> None:
        """Drop all recorded requests"""
        ...
