"""
Order Tracking Service Contracts

Test data contracts for order_tracking_service testing.
"""

from .data_contract import (
    FIXED_NOW,
    OrderTrackingTestDataFactory,
    OrderRecordBuilder,
)

__all__ = [
    "FIXED_NOW",
    "OrderTrackingTestDataFactory",
    "OrderRecordBuilder",
]
