"""
Shopify Admin REST catalog client.

Used by the products endpoints to list products and write back descriptions.
Responses are returned exactly as Shopify sends them; this client never
reshapes product records.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx

from description_studio.integrations.errors import RequestError, UpstreamError
from description_studio.utils.settings_loader import SHOPIFY_API_VERSION

logger = logging.getLogger(__name__)


class ShopifyCatalogClient:
    def __init__(
        self,
        store_url: str,
        access_token: str,
        api_version: str = SHOPIFY_API_VERSION,
        timeout_seconds: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.store_url = _strip_scheme(store_url)
        self.access_token = access_token or ""
        self.api_version = api_version
        self.timeout_seconds = timeout_seconds
        self._transport = transport

    @property
    def base_url(self) -> str:
        return f"https://{self.store_url}/admin/api/{self.api_version}"

    def _headers(self) -> Dict[str, str]:
        return {
            "X-Shopify-Access-Token": self.access_token,
            "Content-Type": "application/json",
        }

    async def _request(self, endpoint: str, method: str = "GET", body: Optional[Dict[str, Any]] = None) -> Any:
        if not self.store_url or not self.access_token:
            raise UpstreamError("Shopify API Error: SHOPIFY_STORE_URL and SHOPIFY_ACCESS_TOKEN must be configured")

        url = f"{self.base_url}{endpoint}"
        logger.info("Shopify %s %s", method, endpoint)
        try:
            async with httpx.AsyncClient(timeout=self.timeout_seconds, transport=self._transport) as client:
                response = await client.request(method, url, json=body, headers=self._headers())
        except httpx.RequestError as e:
            logger.error(f"Request error connecting to Shopify: {e}")
            raise UpstreamError(f"Shopify API Error: {e}") from e

        if not response.is_success:
            logger.error(f"HTTP error from Shopify: {response.status_code} {response.text}")
            raise UpstreamError(
                f"Shopify API Error: {response.reason_phrase}",
                status_code=response.status_code,
                payload={"body": response.text},
            )

        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Non-JSON response from Shopify: {response.status_code} {response.text[:200]}")
            raise UpstreamError(
                "Shopify API Error: invalid JSON response",
                status_code=response.status_code,
                payload={"body": response.text},
            ) from e

    async def list_products(self) -> List[Dict[str, Any]]:
        data = await self._request("/products.json")
        return data.get("products", [])

    async def update_description(self, product_id: str, description_html: str) -> Dict[str, Any]:
        try:
            numeric_id = int(product_id)
        except (TypeError, ValueError) as e:
            raise RequestError(f"Invalid product id: {product_id!r}") from e

        body = {"product": {"id": numeric_id, "body_html": description_html}}
        return await self._request(f"/products/{numeric_id}.json", method="PUT", body=body)


def _strip_scheme(store_url: Optional[str]) -> str:
    value = (store_url or "").strip()
    for prefix in ("https://", "http://"):
        if value.lower().startswith(prefix):
            value = value[len(prefix):]
    return value.rstrip("/")
