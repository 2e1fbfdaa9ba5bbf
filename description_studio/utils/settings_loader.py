"""
Runtime settings loader (port, Shopify credentials, OpenAI key).
"""

from __future__ import annotations

import logging
import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

SHOPIFY_API_VERSION = "2024-01"


class AppSettings(BaseModel):
    """Settings read from the process environment."""

    host: str = "0.0.0.0"
    port: int = Field(default=3000, ge=1, le=65535)
    shopify_store_url: str = ""
    shopify_access_token: str = ""
    shopify_api_version: str = SHOPIFY_API_VERSION
    openai_api_key: str = ""
    # Published by /api/config so the static page can reach a server hosted elsewhere.
    api_base_url: str = ""

    @property
    def shopify_configured(self) -> bool:
        return bool(self.shopify_store_url) and bool(self.shopify_access_token)

    @property
    def openai_configured(self) -> bool:
        return bool(self.openai_api_key)


_ENV_FIELDS = {
    "HOST": "host",
    "PORT": "port",
    "SHOPIFY_STORE_URL": "shopify_store_url",
    "SHOPIFY_ACCESS_TOKEN": "shopify_access_token",
    "OPENAI_API_KEY": "openai_api_key",
    "API_BASE_URL": "api_base_url",
}


def load_settings(environ: Optional[Mapping[str, str]] = None) -> AppSettings:
    """
    Build AppSettings from environment variables.

    Args:
        environ: Mapping to read from. Defaults to os.environ; a local .env file
            is merged into it once, when the API module is imported.

    Raises:
        ValidationError: If a value cannot be coerced (e.g. a non-numeric PORT)
    """
    if environ is None:
        environ = os.environ

    # Blank or whitespace-only values count as unset.
    data = {}
    for env_name, field_name in _ENV_FIELDS.items():
        raw = (environ.get(env_name) or "").strip()
        if raw:
            data[field_name] = raw

    try:
        return AppSettings(**data)
    except ValidationError as e:
        logger.error("Settings validation failed: %s", e)
        raise
