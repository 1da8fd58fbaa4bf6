"""
Shopify Order Store Client for Order Tracking Service

HTTP client for the Shopify Admin REST API orders endpoint
"""

import httpx
import logging
from typing import Optional, List, Dict, Any

from core.service_client_base import BaseServiceClient

from ..protocols import UpstreamAccessDenied, UpstreamAuthError, UpstreamUnavailableError

logger = logging.getLogger(__name__)

DEFAULT_API_VERSION = "2024-04"
DEFAULT_TIMEOUT = 10.0


class ShopifyClient(BaseServiceClient):
    """Client for the Shopify Admin API"""

    service_name = "shopify"

    def __init__(
        self,
        shop: str,
        access_token: str,
        api_version: str = DEFAULT_API_VERSION,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize Shopify client

        Args:
            shop: Shop domain, e.g. "example.myshopify.com"
            access_token: Admin API access token
            api_version: Admin API version
            timeout: Request timeout in seconds
            transport: Optional httpx transport for testing
        """
        self.shop = shop
        self.api_version = api_version
        self.health_path = f"/admin/api/{api_version}/shop.json"
        super().__init__(
            base_url=f"https://{shop}",
            headers={"X-Shopify-Access-Token": access_token},
            timeout=timeout,
            transport=transport
        )

    @property
    def orders_path(self) -> str:
        return f"/admin/api/{self.api_version}/orders.json"

    async def list_orders(self, params: Dict[str, str]) -> List[Dict[str, Any]]:
        """
        List orders matching a search filter

        Args:
            params: Query parameters (status, fields, name or email)

        Returns:
            Raw order records; empty when nothing matched

        Raises:
            UpstreamAuthError: 401 from Shopify
            UpstreamAccessDenied: 403 from Shopify
            UpstreamUnavailableError: any other failure, including timeouts
        """
        try:
            response = await self.get(self.orders_path, params=params)
            response.raise_for_status()
            data = response.json()

        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            logger.error(f"Shopify orders request failed: {status_code}")
            if status_code == 401:
                raise UpstreamAuthError(upstream_status=status_code)
            if status_code == 403:
                raise UpstreamAccessDenied(upstream_status=status_code)
            raise UpstreamUnavailableError(upstream_status=status_code)
        except httpx.TimeoutException:
            logger.error(f"Shopify orders request timed out after {self.timeout}s")
            raise UpstreamUnavailableError()
        except httpx.RequestError as e:
            logger.error(f"Error calling Shopify: {type(e).__name__}")
            raise UpstreamUnavailableError()
        except ValueError:
            logger.error("Shopify returned a non-JSON orders response")
            raise UpstreamUnavailableError()

        if not isinstance(data, dict):
            logger.error("Shopify returned an unexpected orders payload")
            raise UpstreamUnavailableError()

        orders = data.get("orders") or []
        if not isinstance(orders, list):
            logger.error("Shopify returned an unexpected orders payload")
            raise UpstreamUnavailableError()
        return orders
