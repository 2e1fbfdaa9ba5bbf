"""
Catalog and improvement contracts.

Defines the request/response shapes exchanged with the browser client:
- single improvement request ({currentDescription, productTitle})
- bulk improvement request ({products: [{id, title, description}]})
- per-item improvement results ({id, improvedDescription | error, success})
- description update body ({description})

Catalog products themselves are passed through untouched as plain dicts;
they are owned by Shopify and never reshaped here.

Product identifiers are normalized to strings at this boundary. Shopify hands
out numeric ids while the browser keys its selection by string, so every id
entering the API is coerced once and compared as a string afterwards.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def normalize_product_id(value: Any) -> str:
    if value is None or isinstance(value, bool):
        raise ValueError("product id must be a string or an integer")
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    text = str(value).strip()
    if not text:
        raise ValueError("product id must not be empty")
    return text


class ImproveDescriptionRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    current_description: Optional[str] = Field(default=None, alias="currentDescription")
    product_title: Optional[str] = Field(default=None, alias="productTitle")


class ImproveDescriptionResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    improved_description: str = Field(alias="improvedDescription")


class BulkProductItem(BaseModel):
    id: str
    title: Optional[str] = None
    description: Optional[str] = None

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> str:
        return normalize_product_id(value)


class BulkImproveRequest(BaseModel):
    products: List[BulkProductItem]


class ImprovementResult(BaseModel):
    """Outcome of one generation attempt inside a batch."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    success: bool
    improved_description: Optional[str] = Field(default=None, alias="improvedDescription")
    error: Optional[str] = None

    @classmethod
    def ok(cls, product_id: str, text: str) -> "ImprovementResult":
        return cls(id=product_id, success=True, improved_description=text)

    @classmethod
    def failed(cls, product_id: str, message: str) -> "ImprovementResult":
        return cls(id=product_id, success=False, error=message)

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class DescriptionUpdateRequest(BaseModel):
    description: str = ""


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def product_matches(product: Dict[str, Any], query: str) -> bool:
    """Case-insensitive substring match on a product's title or body_html."""
    needle = (query or "").lower()
    title = (product.get("title") or "").lower()
    body = (product.get("body_html") or "").lower()
    return needle in title or needle in body


def filter_products(products: List[Dict[str, Any]], query: Optional[str]) -> List[Dict[str, Any]]:
    """Return the products whose title or description contains query, preserving order."""
    if not query:
        return list(products)
    return [p for p in products if product_matches(p, query)]
