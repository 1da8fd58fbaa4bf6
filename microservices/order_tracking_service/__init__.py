"""
Order Tracking Service Microservice

Customer-facing shipping status lookups against the upstream order store
"""

from .order_tracking_service import OrderTrackingService
from .throttle import RequestThrottle
from .models import (
    TrackingStatus,
    ErrorKind,
    OrderCandidate,
    FulfillmentRecord,
    StatusResult,
    TrackOrderRequest,
    TrackingData,
    TrackingResponse,
    ErrorResponse,
)

__version__ = "1.0.0"
__all__ = [
    "OrderTrackingService",
    "RequestThrottle",
    "TrackingStatus",
    "ErrorKind",
    "OrderCandidate",
    "FulfillmentRecord",
    "StatusResult",
    "TrackOrderRequest",
    "TrackingData",
    "TrackingResponse",
    "ErrorResponse",
]
