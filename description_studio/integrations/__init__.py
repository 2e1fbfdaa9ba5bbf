"""
Integrations layer.
This package contains all code used to communicate with external systems:
- Shopify product catalog (list products, update a description)

Key rule:
- Endpoints MUST NOT call external APIs directly.
- Endpoints call integration clients (under description_studio/integrations/clients).
"""

from .errors import GenerationError, RequestError, UpstreamError

__all__ = ["GenerationError", "RequestError", "UpstreamError"]
