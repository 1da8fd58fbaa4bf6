"""
Base HTTP Client

Base class for clients of HTTP APIs a microservice depends on. Handles
the shared httpx.AsyncClient, default headers, timeout and lifecycle.
"""

import httpx
import logging
from typing import Optional, Dict, Any
from abc import ABC

logger = logging.getLogger(__name__)


class BaseServiceClient(ABC):
    """
    HTTP client base class

    Handles:
    1. Base URL handling
    2. Default headers
    3. HTTP client lifecycle
    4. Timeout control

    Example:
        class InventoryClient(BaseServiceClient):
            service_name = "inventory"

            async def get_item(self, item_id: str):
                response = await self.get(f"/items/{item_id}")
                return response.json()
    """

    # Subclasses define this
    service_name: str = None
    health_path: str = "/health"

    def __init__(
        self,
        base_url: str,
        headers: Optional[Dict[str, str]] = None,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize the client

        Args:
            base_url: API base URL
            headers: Headers sent with every request
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        if not self.service_name:
            raise ValueError(f"{self.__class__.__name__} must define 'service_name'")

        self.base_url = base_url.rstrip('/')
        self.timeout = timeout

        default_headers = self._build_default_headers()
        if headers:
            default_headers.update(headers)

        self.client = httpx.AsyncClient(
            timeout=timeout,
            headers=default_headers,
            transport=transport
        )

        logger.debug(f"Initialized {self.service_name} client: {self.base_url} (timeout={timeout}s)")

    def _build_default_headers(self) -> Dict[str, str]:
        """Headers every request carries"""
        return {
            "Content-Type": "application/json",
            "User-Agent": f"order-tracking-service/{self.service_name}"
        }

    async def close(self):
        """Close the HTTP client"""
        await self.client.aclose()
        logger.debug(f"Closed {self.service_name} client")

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    # ========================================
    # HTTP methods
    # ========================================

    async def get(
        self,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None
    ) -> httpx.Response:
        """GET request"""
        url = f"{self.base_url}{path}"
        response = await self.client.get(url, params=params, headers=headers)
        return response

    async def health_check(self) -> bool:
        """
        Health check

        Returns:
            Whether the API answered without a server error
        """
        try:
            response = await self.get(self.health_path)
            return response.status_code < 500
        except Exception as e:
            logger.warning(f"{self.service_name} health check failed: {e}")
            return False


__all__ = ["BaseServiceClient"]
