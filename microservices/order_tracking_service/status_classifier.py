"""
Status Classifier

Maps an order to a shipping status. Rules are checked in order and the
first match wins: delivered, then tracking present, then order age. The
classifier keeps no history; status is re-derived on every lookup.
"""

from datetime import datetime, timezone
from typing import Optional

from .models import OrderCandidate, StatusResult, TrackingStatus

PROCESSING_WINDOW_HOURS = 48

DELIVERED_REASON = "Order has been delivered"
IN_TRANSIT_REASON = "Order is in transit"
IN_TRANSIT_AGED_REASON = "Order is in transit (48+ hours)"


def hours_since(created_at: datetime, now: datetime) -> int:
    """Whole hours between created_at and now, truncated toward zero"""
    # Offset-less timestamps are UTC
    if created_at.tzinfo is None and now.tzinfo is not None:
        created_at = created_at.replace(tzinfo=timezone.utc)
    elif now.tzinfo is None and created_at.tzinfo is not None:
        now = now.replace(tzinfo=timezone.utc)
    return int((now - created_at).total_seconds() / 3600)


def classify(
    candidate: OrderCandidate,
    tracking_number: Optional[str],
    now: datetime
) -> StatusResult:
    """
    Derive the shipping status of an order

    Args:
        candidate: The located order
        tracking_number: Tracking number extracted from the order, if any
        now: Current time (timezone-aware when created_at is)

    Returns:
        Status plus the button-control hints for the storefront
    """
    if candidate.closed_at:
        return StatusResult(
            status=TrackingStatus.DELIVERED,
            tracking_number=tracking_number,
            delivered_at=candidate.closed_at,
            buttons_disabled=True,
            disabled_reason=DELIVERED_REASON,
        )

    if tracking_number:
        return StatusResult(
            status=TrackingStatus.IN_TRANSIT,
            tracking_number=tracking_number,
            buttons_disabled=True,
            disabled_reason=IN_TRANSIT_REASON,
        )

    if hours_since(candidate.created_at, now) < PROCESSING_WINDOW_HOURS:
        return StatusResult(
            status=TrackingStatus.PROCESSING,
            buttons_disabled=False,
        )

    return StatusResult(
        status=TrackingStatus.IN_TRANSIT,
        buttons_disabled=True,
        disabled_reason=IN_TRANSIT_AGED_REASON,
    )
