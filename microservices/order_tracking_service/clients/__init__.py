"""
Order Tracking Service Clients Module

HTTP clients for the upstream order store
"""

from .shopify_client import ShopifyClient

__all__ = [
    "ShopifyClient",
]
