"""
Order Tracking Service Factory

Factory functions for creating service instances with real dependencies.
This is the ONLY place that imports I/O-dependent modules.

Usage:
    from .factory import create_order_tracking_service
    service = create_order_tracking_service(config_manager)
"""
from typing import Optional

from core.config_manager import ConfigManager

from .order_tracking_service import OrderTrackingService
from .throttle import RequestThrottle


def create_request_throttle(config_manager: ConfigManager) -> RequestThrottle:
    """Create the per-client throttle from configuration"""
    tracking = config_manager.get_tracking_config()
    return RequestThrottle(
        max_requests=tracking.rate_limit_max_requests,
        window_seconds=tracking.rate_limit_window_seconds,
    )


def create_order_tracking_service(
    config_manager: Optional[ConfigManager] = None,
    order_client=None,
    throttle: Optional[RequestThrottle] = None,
) -> OrderTrackingService:
    """
    Create OrderTrackingService with real dependencies.

    Use this in production, NOT in tests.

    Args:
        config_manager: Configuration manager
        order_client: Order store client (defaults to a ShopifyClient)
        throttle: Request throttle (defaults to one built from configuration)

    Returns:
        Configured OrderTrackingService instance
    """
    config_manager = config_manager or ConfigManager("order_tracking_service")
    tracking = config_manager.get_tracking_config()

    if order_client is None:
        # Import real client here (not at module level)
        from .clients import ShopifyClient

        order_client = ShopifyClient(
            shop=tracking.shopify_shop,
            access_token=tracking.shopify_access_token,
            api_version=tracking.shopify_api_version,
            timeout=tracking.upstream_timeout_seconds,
        )

    return OrderTrackingService(
        order_client=order_client,
        throttle=throttle or create_request_throttle(config_manager),
    )
