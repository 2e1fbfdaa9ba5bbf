import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Query

from description_studio.api.dependencies import get_catalog_client
from description_studio.integrations.clients.real_http.shopify_catalog import ShopifyCatalogClient
from description_studio.integrations.contracts.catalog import DescriptionUpdateRequest, filter_products

logger = logging.getLogger(__name__)

api = APIRouter()
products_api = api


@api.get("/products", tags=["Products"])
async def list_products(
    search: Optional[str] = Query(default=None, description="Case-insensitive match on title or description"),
    catalog: ShopifyCatalogClient = Depends(get_catalog_client),
) -> List[Dict[str, Any]]:
    """Return the catalog's products exactly as Shopify sends them."""
    products = await catalog.list_products()
    logger.info("Fetched %s products (search=%r)", len(products), search)
    return filter_products(products, search)


@api.put("/products/{product_id}", tags=["Products"])
async def update_product(
    product_id: str,
    body: DescriptionUpdateRequest,
    catalog: ShopifyCatalogClient = Depends(get_catalog_client),
):
    """Write a new description to Shopify and return Shopify's raw response."""
    return await catalog.update_description(product_id, body.description)
