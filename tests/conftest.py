"""Pytest fixtures for the catalog, generator and API tests."""

from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient
from openai import OpenAIError

from description_studio.api.dependencies import get_catalog_client, get_generator, get_settings
from description_studio.api.main import app
from description_studio.generation.generate import DescriptionGenerator
from description_studio.integrations.errors import UpstreamError
from description_studio.utils.settings_loader import load_settings


class DummyCompletions:
    """Stands in for client.chat.completions; fails for titles listed in fail_titles."""

    def __init__(self, fail_titles=()):
        self.fail_titles = set(fail_titles)
        self.calls = []

    def create(self, model, messages, temperature, max_tokens):
        self.calls.append({"model": model, "messages": messages, "temperature": temperature, "max_tokens": max_tokens})
        user_message = messages[-1]["content"]
        for title in self.fail_titles:
            if f"Ürün: {title}\n" in user_message:
                raise OpenAIError(f"generation failed for {title}")
        title_line = user_message.splitlines()[0]
        content = f"<p>Improved {title_line[len('Ürün: '):]}</p>"
        return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


class DummyOpenAI:
    def __init__(self, fail_titles=()):
        self.chat = SimpleNamespace(completions=DummyCompletions(fail_titles))


class FakeCatalog:
    def __init__(self, products=None, update_error=None, list_error=None):
        self.products = products or []
        self.update_error = update_error
        self.list_error = list_error
        self.updates = []

    async def list_products(self):
        if self.list_error:
            raise UpstreamError(self.list_error)
        return self.products

    async def update_description(self, product_id, description_html):
        if self.update_error:
            raise UpstreamError(self.update_error)
        self.updates.append((product_id, description_html))
        return {"product": {"id": int(product_id), "body_html": description_html}}


@pytest.fixture
def sample_products():
    return [
        {"id": 101, "title": "Leather Wallet", "body_html": "<p>Handmade wallet</p>", "image": {"src": "https://cdn/w.jpg"}},
        {"id": 102, "title": "Canvas Tote", "body_html": None, "image": None},
    ]


@pytest.fixture
def fake_catalog(sample_products):
    return FakeCatalog(products=sample_products)


@pytest.fixture
def dummy_openai():
    return DummyOpenAI()


@pytest.fixture
def generator(dummy_openai):
    return DescriptionGenerator(api_key="test", client=dummy_openai)


@pytest.fixture
def settings_env():
    """Environment mapping used by the get_settings override; tests may mutate it."""
    return {
        "SHOPIFY_STORE_URL": "test-shop.myshopify.com",
        "SHOPIFY_ACCESS_TOKEN": "shpat_test",
        "OPENAI_API_KEY": "sk-test",
    }


@pytest.fixture
def client(fake_catalog, generator, settings_env):
    app.dependency_overrides[get_settings] = lambda: load_settings(environ=settings_env)
    app.dependency_overrides[get_catalog_client] = lambda: fake_catalog
    app.dependency_overrides[get_generator] = lambda: generator
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def make_openai():
    """Factory for stand-in OpenAI clients: make_openai(fail_titles=[...])."""
    return DummyOpenAI
