"""
Order Tracking Service Data Models

Pydantic models for upstream order records, derived shipping status and the
tracking API request/response contracts.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from typing import Optional, List, Any, Union
from datetime import datetime, timezone
from enum import Enum


ORDER_NAME_MARKER = "#"


class TrackingStatus(str, Enum):
    """Customer-facing shipping status"""
    PROCESSING = "Order Processing"
    IN_TRANSIT = "In Transit"
    DELIVERED = "Order Delivered"


class ErrorKind(str, Enum):
    """Stable machine-readable error codes"""
    MISSING_CRITERIA = "MISSING_FIELDS"
    INVALID_ORDER_NUMBER = "INVALID_ORDER_NUMBER"
    INVALID_EMAIL = "INVALID_EMAIL"
    NOT_FOUND = "ORDER_NOT_FOUND"
    RATE_LIMITED = "RATE_LIMIT_EXCEEDED"
    UPSTREAM_UNAVAILABLE = "UPSTREAM_UNAVAILABLE"
    UPSTREAM_AUTH_ERROR = "UPSTREAM_AUTH_ERROR"
    UPSTREAM_ACCESS_DENIED = "UPSTREAM_ACCESS_DENIED"
    INTERNAL_ERROR = "INTERNAL_ERROR"


# Upstream Order Models

class LineItem(BaseModel):
    """Fulfillment line item, only the fields tracking lookup reads"""
    model_config = ConfigDict(extra="ignore", frozen=True, coerce_numbers_to_str=True)

    id: Any = None
    tracking_number: Optional[str] = None


class FulfillmentRecord(BaseModel):
    """
    Fulfillment as returned by the order store

    Producers disagree on where the tracking number lives, so every field
    is optional and ids are kept as sent. ``trackingNumber`` is the camelCase
    variant some sources emit next to (or instead of) ``tracking_number``.
    Numeric tracking values are read as strings.
    """
    model_config = ConfigDict(
        extra="ignore", frozen=True, populate_by_name=True, coerce_numbers_to_str=True
    )

    id: Any = None
    status: Optional[str] = None
    tracking_company: Optional[str] = None
    tracking_numbers: List[str] = []
    tracking_urls: Any = None
    tracking_number: Optional[str] = None
    tracking_number_camel: Optional[str] = Field(None, alias="trackingNumber")
    line_items: List[LineItem] = []

    @field_validator("line_items", mode="before")
    @classmethod
    def none_as_empty(cls, v: Any) -> Any:
        return [] if v is None else v

    @field_validator("tracking_numbers", mode="before")
    @classmethod
    def tracking_values(cls, v: Any) -> Any:
        if v is None:
            return []
        if isinstance(v, (str, int, float)):
            v = [v]
        if isinstance(v, list):
            return [item for item in v if item is not None]
        return v


class OrderCandidate(BaseModel):
    """One order record returned by the upstream order store"""
    model_config = ConfigDict(extra="ignore", frozen=True)

    id: Union[int, str]
    name: str
    email: Optional[str] = None
    created_at: datetime
    closed_at: Optional[datetime] = None
    fulfillment_status: Optional[str] = None
    financial_status: Optional[str] = None
    fulfillments: List[FulfillmentRecord] = []

    @field_validator("fulfillments", mode="before")
    @classmethod
    def none_as_empty(cls, v: Any) -> Any:
        return [] if v is None else v

    @field_validator("created_at", "closed_at")
    @classmethod
    def assume_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        # Offset-less timestamps are UTC
        if v is not None and v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v

    @property
    def display_number(self) -> str:
        """Order name without the leading marker"""
        return self.name.replace(ORDER_NAME_MARKER, "", 1)


# Derived Status

class StatusResult(BaseModel):
    """Classifier output, derived fresh on every lookup"""
    status: TrackingStatus
    tracking_number: Optional[str] = None
    delivered_at: Optional[datetime] = None
    buttons_disabled: bool
    disabled_reason: Optional[str] = None


# Request Models

class TrackOrderRequest(BaseModel):
    """Tracking lookup request, at least one criterion required"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    order_number: Optional[str] = Field(None, description="Order number, with or without the leading #")
    email: Optional[str] = Field(None, description="Email address used on the order")

    @field_validator("order_number", "email", mode="before")
    @classmethod
    def blank_as_none(cls, v: Any) -> Any:
        if isinstance(v, str) and v == "":
            return None
        return v


# Response Models

class TrackingData(BaseModel):
    """Normalized tracking result"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    order_number: str
    status: TrackingStatus
    tracking_number: Optional[str] = None
    order_date: datetime
    last_updated: datetime
    delivered_at: Optional[datetime] = None
    buttons_disabled: bool
    disabled_reason: Optional[str] = None


class TrackingResponse(BaseModel):
    """Successful tracking lookup"""
    success: bool = True
    data: TrackingData


class ErrorResponse(BaseModel):
    """Failed tracking lookup"""
    success: bool = False
    error: str
    message: str
    code: ErrorKind


class FulfillmentDebugView(BaseModel):
    """Raw tracking fields of one fulfillment, as the order store sent them"""
    id: Any = None
    tracking_numbers: List[str] = []
    tracking_urls: Any = None
    tracking_company: Optional[str] = None
    tracking_number: Optional[str] = None
    trackingNumber: Optional[str] = None
    status: Optional[str] = None


class OrderDebugResponse(BaseModel):
    """Order debug view"""
    success: bool = True
    name: str
    email: Optional[str] = None
    created_at: datetime
    closed_at: Optional[datetime] = None
    fulfillment_status: Optional[str] = None
    financial_status: Optional[str] = None
    tracking_number: Optional[str] = None
    tracking_source: Optional[str] = None
    fulfillment_details: List[FulfillmentDebugView] = []


class TrackingServiceStatus(BaseModel):
    """Service health status"""
    service: str = "order_tracking_service"
    status: str = "healthy"
    version: str = "1.0.0"
    upstream_configured: bool
    upstream_reachable: Optional[bool] = None
    timestamp: datetime
