"""
Tracking Extractor

Upstream sources put the tracking number in different places on a
fulfillment. Each place is one strategy; strategies run in order against
the order's first fulfillment and the first non-empty value wins. Later
fulfillments are never consulted.
"""

import logging
from typing import Callable, Optional, Tuple

from .models import FulfillmentRecord, OrderCandidate

logger = logging.getLogger(__name__)

TrackingStrategy = Callable[[FulfillmentRecord], Optional[str]]


def _present(value: Optional[str]) -> Optional[str]:
    return value if value else None


def from_tracking_numbers(fulfillment: FulfillmentRecord) -> Optional[str]:
    if fulfillment.tracking_numbers:
        return _present(fulfillment.tracking_numbers[0])
    return None


def from_tracking_number(fulfillment: FulfillmentRecord) -> Optional[str]:
    return _present(fulfillment.tracking_number)


def from_camel_tracking_number(fulfillment: FulfillmentRecord) -> Optional[str]:
    return _present(fulfillment.tracking_number_camel)


def from_line_items(fulfillment: FulfillmentRecord) -> Optional[str]:
    for item in fulfillment.line_items:
        if item.tracking_number:
            return item.tracking_number
    return None


TRACKING_STRATEGIES: Tuple[Tuple[str, TrackingStrategy], ...] = (
    ("tracking_numbers", from_tracking_numbers),
    ("tracking_number", from_tracking_number),
    ("trackingNumber", from_camel_tracking_number),
    ("line_items", from_line_items),
)


def extract_from_fulfillment(fulfillment: FulfillmentRecord) -> Tuple[Optional[str], Optional[str]]:
    """
    Run the strategies against one fulfillment

    Returns:
        (tracking number, name of the strategy that found it); both None
        when no strategy matched
    """
    for name, strategy in TRACKING_STRATEGIES:
        tracking_number = strategy(fulfillment)
        if tracking_number:
            return tracking_number, name
    return None, None


def extract_tracking(candidate: OrderCandidate) -> Optional[str]:
    """Tracking number of the order's first fulfillment, if any"""
    if not candidate.fulfillments:
        return None
    tracking_number, source = extract_from_fulfillment(candidate.fulfillments[0])
    if tracking_number:
        logger.debug(f"Tracking number for {candidate.name} found in {source}")
    return tracking_number
