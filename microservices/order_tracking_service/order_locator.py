"""
Order Locator

Builds the order store query from the supplied criteria and picks exactly
one order out of whatever the store returns.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence

from pydantic import ValidationError

from .models import ORDER_NAME_MARKER, OrderCandidate
from .protocols import MissingCriteriaError, OrderStoreClientProtocol, UpstreamUnavailableError

logger = logging.getLogger(__name__)

ORDER_FIELDS = (
    "id",
    "name",
    "email",
    "created_at",
    "fulfillments",
    "fulfillment_status",
    "financial_status",
    "closed_at",
)


def normalize_order_name(order_number: str) -> str:
    """Canonical display name: "1001" and "#1001" both become "#1001"."""
    if order_number.startswith(ORDER_NAME_MARKER):
        return order_number
    return f"{ORDER_NAME_MARKER}{order_number}"


def build_query_params(order_number: Optional[str], email: Optional[str]) -> Dict[str, str]:
    """
    Build order store query parameters

    The order number wins when both criteria are present; the email is then
    only used to pick among the results.
    """
    params = {
        "status": "any",
        "fields": ",".join(ORDER_FIELDS),
    }
    if order_number:
        params["name"] = normalize_order_name(order_number)
    elif email:
        params["email"] = email
    else:
        raise MissingCriteriaError()
    return params


def select_candidate(
    candidates: Sequence[OrderCandidate],
    order_number: Optional[str],
    email: Optional[str]
) -> Optional[OrderCandidate]:
    """
    Pick one order from the store's result set

    With both criteria the first order whose email matches (ignoring case)
    wins, falling back to the first result when none matches. With a single
    criterion the most recently created order wins; sorted() is stable so
    ties keep the store's order.
    """
    if not candidates:
        return None

    if order_number and email:
        wanted = email.lower()
        for candidate in candidates:
            if candidate.email and candidate.email.lower() == wanted:
                return candidate
        logger.info(
            f"No order email matched for {normalize_order_name(order_number)}, "
            f"using first of {len(candidates)} result(s)"
        )
        return candidates[0]

    return sorted(candidates, key=lambda c: c.created_at, reverse=True)[0]


def parse_candidates(records: List[Dict[str, Any]]) -> List[OrderCandidate]:
    """Parse raw order records, rejecting the payload if any record is malformed"""
    try:
        return [OrderCandidate.model_validate(record) for record in records]
    except ValidationError as e:
        logger.error(f"Order store returned malformed order records: {e.error_count()} error(s)")
        raise UpstreamUnavailableError("The order system returned an unexpected response")


class OrderLocator:
    """Finds the order a tracking lookup refers to"""

    def __init__(self, order_client: OrderStoreClientProtocol):
        self.order_client = order_client

    async def locate(
        self,
        order_number: Optional[str] = None,
        email: Optional[str] = None
    ) -> Optional[OrderCandidate]:
        """
        Locate a single order

        Args:
            order_number: Order number, with or without the leading #
            email: Email address on the order

        Returns:
            The selected order, or None when the store has no match

        Raises:
            MissingCriteriaError: neither criterion supplied
            UpstreamError: the order store call failed
        """
        params = build_query_params(order_number, email)
        by = "name" if "name" in params else "email"
        logger.debug(f"Querying order store by {by}")

        records = await self.order_client.list_orders(params)
        candidates = parse_candidates(records)
        logger.debug(f"Order store returned {len(candidates)} order(s)")

        return select_candidate(candidates, order_number, email)
