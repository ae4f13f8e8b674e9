"""
Shopify Admin API client used by the background sync
"""

import httpx
import logging
from typing import Dict, Any, Optional

logger = logging.getLogger(__name__)


class ShopifyClientError(Exception):
    """Raised when the Admin API call fails or cannot be made"""
    pass


class ShopifyAdminClient:
    """Client for the Shopify Admin API REST endpoints the sync reads"""

    def __init__(self, shop_domain: str, access_token: Optional[str], api_version: str = "2024-01",
                 timeout: float = 30.0, transport: Optional[httpx.AsyncBaseTransport] = None):
        """
        Args:
            shop_domain: <shop>.myshopify.com domain
            access_token: Decrypted Admin API access token
            api_version: Admin API version segment of the URL
            timeout: Per-request timeout in seconds
            transport: Optional httpx transport, used to stub the API in tests
        """
        if not access_token:
            raise ShopifyClientError("No valid access token for store")

        self.shop_domain = shop_domain
        self.access_token = access_token
        self.api_version = api_version
        self.timeout = timeout
        self.transport = transport

    @property
    def base_url(self) -> str:
        return f"https://{self.shop_domain}/admin/api/{self.api_version}"

    @property
    def headers(self) -> Dict[str, str]:
        return {
            'X-Shopify-Access-Token': self.access_token,
            'Content-Type': 'application/json'
        }

    async def _get(self, path: str) -> Dict[str, Any]:
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(f"{self.base_url}/{path}", headers=self.headers)
                response.raise_for_status()
                return response.json()
        except httpx.HTTPError as e:
            logger.error(f"Shopify request {path} failed for {self.shop_domain}: {e}")
            raise ShopifyClientError(f"Request to {path} failed: {e}")

    async def count_customers(self) -> int:
        data = await self._get("customers/count.json")
        return int(data.get('count', 0))

    async def count_orders(self, status: str = "any") -> int:
        data = await self._get(f"orders/count.json?status={status}")
        return int(data.get('count', 0))

