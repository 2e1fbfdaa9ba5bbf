from fastapi import Depends

from description_studio.generation.generate import DescriptionGenerator
from description_studio.integrations.clients.real_http.shopify_catalog import ShopifyCatalogClient
from description_studio.utils.settings_loader import AppSettings, load_settings


def get_settings() -> AppSettings:
    """Dependency for runtime settings (read from os.environ per request; .env is loaded once at import)."""
    return load_settings()


def get_catalog_client(settings: AppSettings = Depends(get_settings)) -> ShopifyCatalogClient:
    """Dependency for the Shopify catalog client"""
    return ShopifyCatalogClient(
        store_url=settings.shopify_store_url,
        access_token=settings.shopify_access_token,
        api_version=settings.shopify_api_version,
    )


def get_generator(settings: AppSettings = Depends(get_settings)) -> DescriptionGenerator:
    """Dependency for the description generator"""
    return DescriptionGenerator(api_key=settings.openai_api_key or None)
