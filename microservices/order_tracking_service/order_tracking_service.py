"""
Order Tracking Service Business Logic

Answers "where is my order": throttles the caller, validates the search
criteria, locates the order upstream, extracts its tracking number and
derives the shipping status.
"""

from typing import Callable, Optional
from datetime import datetime, timezone
import logging

from .models import (
    ErrorResponse, FulfillmentDebugView, OrderCandidate, OrderDebugResponse,
    TrackingData, TrackingResponse
)
from .order_locator import OrderLocator
from .protocols import (
    OrderNotFoundError, OrderStoreClientProtocol, RateLimitedError,
    ThrottleProtocol, TrackingError
)
from .status_classifier import classify
from .tracking_extractor import extract_from_fulfillment, extract_tracking
from .validators import validate_order_number, validate_query

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _criteria_label(order_number: Optional[str], email: Optional[str]) -> str:
    criteria = []
    if order_number:
        criteria.append("order number")
    if email:
        criteria.append("email")
    return " and ".join(criteria)


class OrderTrackingService:
    """
    Order tracking business logic service

    Holds no per-request state. The throttle is the only state shared across
    requests and is owned by whoever constructs the service.
    """

    def __init__(
        self,
        order_client: OrderStoreClientProtocol,
        throttle: Optional[ThrottleProtocol] = None,
        clock: Callable[[], datetime] = utcnow
    ):
        """
        Initialize Order Tracking Service

        Args:
            order_client: Upstream order store client
            throttle: Per-client admission control (None disables throttling)
            clock: Returns the current time, injectable for tests
        """
        self.order_client = order_client
        self.throttle = throttle
        self.clock = clock
        self.locator = OrderLocator(order_client)

        logger.info("OrderTrackingService initialized")

    # Tracking Lookup

    async def track(
        self,
        order_number: Optional[str] = None,
        email: Optional[str] = None,
        client_id: str = "unknown"
    ) -> TrackingResponse:
        """
        Look up the shipping status of an order

        Args:
            order_number: Order number, with or without the leading #
            email: Email address on the order
            client_id: Caller identity used for throttling

        Returns:
            Normalized tracking result

        Raises:
            RateLimitedError: client over its limit
            MissingCriteriaError, InvalidOrderNumberError, InvalidEmailError:
                bad input, raised before the order store is contacted
            OrderNotFoundError: no order matched
            UpstreamError: the order store call failed
        """
        if self.throttle is not None and not self.throttle.admit(client_id):
            raise RateLimitedError(retry_after=self.throttle.retry_after(client_id))

        validate_query(order_number, email)

        order = await self.locator.locate(order_number, email)
        if order is None:
            logger.info(f"No order found by {_criteria_label(order_number, email)}")
            raise OrderNotFoundError(
                f"No order found with the provided {_criteria_label(order_number, email)}"
            )

        data = self.build_tracking_data(order)
        logger.info(
            f"Order {order.name}: {data.status.value}"
            f"{' (tracking ' + data.tracking_number + ')' if data.tracking_number else ''}"
        )
        return TrackingResponse(data=data)

    def build_tracking_data(self, order: OrderCandidate) -> TrackingData:
        """Extract, classify and assemble the result for a located order"""
        now = self.clock()
        tracking_number = extract_tracking(order)
        result = classify(order, tracking_number, now)

        return TrackingData(
            order_number=order.display_number,
            status=result.status,
            tracking_number=result.tracking_number,
            order_date=order.created_at,
            last_updated=now,
            delivered_at=result.delivered_at,
            buttons_disabled=result.buttons_disabled,
            disabled_reason=result.disabled_reason,
        )

    # Diagnostics

    async def debug_order(self, order_number: str) -> OrderDebugResponse:
        """
        Raw tracking view of an order, for support staff

        Looks the order up by number only and reports every tracking field
        the order store sent, plus which one the extractor would use.
        """
        validate_order_number(order_number)

        order = await self.locator.locate(order_number, None)
        if order is None:
            raise OrderNotFoundError(f"No order found with order number: {order_number}")

        tracking_number, source = (None, None)
        if order.fulfillments:
            tracking_number, source = extract_from_fulfillment(order.fulfillments[0])

        return OrderDebugResponse(
            name=order.name,
            email=order.email,
            created_at=order.created_at,
            closed_at=order.closed_at,
            fulfillment_status=order.fulfillment_status,
            financial_status=order.financial_status,
            tracking_number=tracking_number,
            tracking_source=source,
            fulfillment_details=[
                FulfillmentDebugView(
                    id=f.id,
                    tracking_numbers=f.tracking_numbers,
                    tracking_urls=f.tracking_urls,
                    tracking_company=f.tracking_company,
                    tracking_number=f.tracking_number,
                    trackingNumber=f.tracking_number_camel,
                    status=f.status,
                )
                for f in order.fulfillments
            ],
        )

    async def health_check(self) -> bool:
        """Whether the order store is reachable"""
        return await self.order_client.health_check()

    async def close(self):
        """Release the order store client and forget throttle state"""
        await self.order_client.close()
        if self.throttle is not None:
            self.throttle.reset()
        logger.info("OrderTrackingService closed")


def error_response(error: Exception) -> ErrorResponse:
    """
    Error body for any failure

    TrackingError messages are written to be shown to callers; anything
    else is reported as an internal error without detail.
    """
    if not isinstance(error, TrackingError):
        error = TrackingError()
    return ErrorResponse(
        error=error.title,
        message=error.message,
        code=error.kind,
    )
