"""
Real HTTP integration clients.

These clients communicate with external systems via HTTP:
- Shopify Admin REST API (product list / description update)

Important:
- Endpoints must reach Shopify only through these clients
- Selection and construction of clients happens in description_studio/api/dependencies.py only.
"""

from .shopify_catalog import ShopifyCatalogClient

__all__ = ["ShopifyCatalogClient"]
