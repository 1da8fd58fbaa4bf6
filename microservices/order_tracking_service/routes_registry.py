"""
Order Tracking Service Routes Registry
Defines all API routes exposed by the service
"""

from typing import List, Dict, Any

SERVICE_ROUTES = [
    {
        "path": "/health",
        "methods": ["GET"],
        "auth_required": False,
        "description": "Service health check"
    },
    {
        "path": "/health/detailed",
        "methods": ["GET"],
        "auth_required": False,
        "description": "Health check including order store reachability"
    },
    # Tracking
    {
        "path": "/api/v1/track",
        "methods": ["POST"],
        "auth_required": False,
        "description": "Look up order shipping status"
    },
    {
        "path": "/api/v1/debug/{order_number}",
        "methods": ["GET"],
        "auth_required": False,
        "description": "Raw fulfillment tracking fields (when enabled)"
    },
    # Service Info
    {
        "path": "/api/v1/tracking/info",
        "methods": ["GET"],
        "auth_required": False,
        "description": "Get service information"
    },
]


def get_routes(include_debug: bool = False) -> List[Dict[str, Any]]:
    """Routes this instance actually serves"""
    if include_debug:
        return list(SERVICE_ROUTES)
    return [r for r in SERVICE_ROUTES if not r["path"].startswith("/api/v1/debug")]


def get_routes_summary(include_debug: bool = False) -> Dict[str, Any]:
    """Compact route metadata for the info endpoint"""
    routes = get_routes(include_debug)
    return {
        "route_count": len(routes),
        "base_path": "/api/v1",
        "paths": [r["path"] for r in routes],
        "methods": sorted({m for r in routes for m in r["methods"]}),
    }


# Service metadata
SERVICE_METADATA = {
    "service_name": "order_tracking_service",
    "version": "1.0.0",
    "tags": ["v1", "order-tracking", "e-commerce"],
    "capabilities": [
        "order_lookup",
        "tracking_extraction",
        "shipping_status",
        "rate_limiting"
    ]
}
