#!/usr/bin/env python3
"""Order tracking configuration

Upstream order store (Shopify Admin API) credentials, lookup throttling
and HTTP surface settings for the order tracking service.
"""
import os
from dataclasses import dataclass, field
from typing import List

def _bool(val: str) -> bool:
    return val.lower() == "true"

def _int(val: str, default: int) -> int:
    try:
        return int(val) if val else default
    except ValueError:
        return default

def _float(val: str, default: float) -> float:
    try:
        return float(val) if val else default
    except ValueError:
        return default

def _list(val: str) -> List[str]:
    return [item.strip() for item in val.split(",") if item.strip()]


DEFAULT_ALLOWED_ORIGINS = [
    "https://zevana.co",
    "https://www.zevana.co",
    "http://localhost:3000",
    "http://localhost:3001",
    "http://127.0.0.1:3000",
    "http://127.0.0.1:3001",
]


@dataclass
class TrackingConfig:
    """Order tracking settings"""

    # ===========================================
    # Upstream order store
    # ===========================================
    shopify_shop: str = ""
    shopify_access_token: str = ""
    shopify_api_version: str = "2024-04"
    upstream_timeout_seconds: float = 10.0

    # ===========================================
    # Per-client throttling
    # ===========================================
    rate_limit_max_requests: int = 100
    rate_limit_window_seconds: int = 15 * 60

    # ===========================================
    # HTTP surface
    # ===========================================
    allowed_origins: List[str] = field(default_factory=lambda: list(DEFAULT_ALLOWED_ORIGINS))
    debug_endpoints_enabled: bool = False

    @property
    def upstream_configured(self) -> bool:
        return bool(self.shopify_shop and self.shopify_access_token)

    @classmethod
    def from_env(cls) -> 'TrackingConfig':
        """Load tracking configuration from environment variables"""
        origins = os.getenv("TRACKING_ALLOWED_ORIGINS", "")
        return cls(
            shopify_shop=os.getenv("SHOPIFY_SHOP", ""),
            shopify_access_token=os.getenv("SHOPIFY_ACCESS_TOKEN", ""),
            shopify_api_version=os.getenv("SHOPIFY_API_VERSION", "2024-04"),
            upstream_timeout_seconds=_float(os.getenv("UPSTREAM_TIMEOUT_SECONDS", ""), 10.0),
            rate_limit_max_requests=_int(os.getenv("RATE_LIMIT_MAX_REQUESTS", ""), 100),
            rate_limit_window_seconds=_int(os.getenv("RATE_LIMIT_WINDOW_SECONDS", ""), 15 * 60),
            allowed_origins=_list(origins) if origins else list(DEFAULT_ALLOWED_ORIGINS),
            debug_endpoints_enabled=_bool(os.getenv("TRACKING_DEBUG_ENDPOINTS", "false")),
        )
