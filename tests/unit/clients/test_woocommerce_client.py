"""
Tests for the WooCommerce client: configuration resolution and transport
lifecycle.
"""

from unittest.mock import AsyncMock

import pytest

from woocommerce_api import WooCommerce, WooCommerceFactory
from woocommerce_api.clients.http_client import WooHttpClient
from woocommerce_api.config.settings import WooCommerceSettings
from woocommerce_api.exceptions import WooCommerceConfigError


@pytest.mark.unit
class TestConfiguration:
    def test_explicit_arguments_win_over_environment(self, monkeypatch):
        monkeypatch.setenv("WOOCOMMERCE_BASE_URL", "https://env.example.com")
        settings = WooCommerceSettings(_env_file=None)

        client = WooCommerce(base_url="https://arg.example.com/", settings=settings)

        assert client.base_url == "https://arg.example.com"
        assert client.api_base_url == "https://arg.example.com/wp-json/wc/v3"

    def test_environment_is_the_fallback(self, monkeypatch):
        monkeypatch.setenv("WOOCOMMERCE_BASE_URL", "https://env.example.com")
        monkeypatch.setenv("WOOCOMMERCE_USE_FAKER", "1")

        client = WooCommerce(settings=WooCommerceSettings(_env_file=None))

        assert client.base_url == "https://env.example.com"
        assert client.use_faker is True

    def test_explicit_false_overrides_environment_true(self, monkeypatch):
        monkeypatch.setenv("WOOCOMMERCE_USE_FAKER", "true")

        client = WooCommerce(use_faker=False, settings=WooCommerceSettings(_env_file=None))

        assert client.use_faker is False

    @pytest.mark.asyncio
    async def test_live_call_without_base_url(self, empty_settings):
        client = WooCommerce(consumer_key="ck", consumer_secret="cs", settings=empty_settings)

        with pytest.raises(WooCommerceConfigError):
            await client.get_product(42)

    @pytest.mark.asyncio
    async def test_live_call_without_credentials(self, empty_settings):
        client = WooCommerce(base_url="https://shop.example.com", settings=empty_settings)

        with pytest.raises(WooCommerceConfigError):
            await client.get_products()

    @pytest.mark.asyncio
    async def test_fake_mode_needs_no_configuration(self, empty_settings):
        client = WooCommerce(use_faker=True, settings=empty_settings)

        products = await client.get_products(per_page=2)

        assert len(products) == 2

    def test_transport_is_built_from_configuration(self, empty_settings):
        client = WooCommerce(
            base_url="https://shop.example.com",
            consumer_key="ck",
            consumer_secret="cs",
            query_string_auth=True,
            settings=empty_settings,
        )

        http = client._get_http_client()

        assert isinstance(http, WooHttpClient)
        assert http.api_base_url == "https://shop.example.com/wp-json/wc/v3"
        assert http._query_string_auth is True
        assert client._get_http_client() is http


@pytest.mark.unit
class TestLifecycle:
    @pytest.mark.asyncio
    async def test_context_manager_closes_transport(self, empty_settings):
        transport = AsyncMock(spec=WooHttpClient)

        async with WooCommerce(use_faker=True, http_client=transport, settings=empty_settings):
            pass

        transport.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_close_without_transport(self, empty_settings):
        await WooCommerce(settings=empty_settings).close()

    def test_repr(self, empty_settings):
        client = WooCommerce(base_url="https://shop.example.com", settings=empty_settings)

        assert repr(client) == "WooCommerce(base_url='https://shop.example.com', use_faker=False)"


@pytest.mark.unit
class TestFactory:
    def test_create_fake(self):
        assert WooCommerceFactory.create_fake().use_faker is True

    def test_from_settings(self, monkeypatch):
        monkeypatch.setenv("WOOCOMMERCE_BASE_URL", "https://env.example.com")

        client = WooCommerceFactory.from_settings(WooCommerceSettings(_env_file=None))

        assert client.base_url == "https://env.example.com"

    def test_create_passes_arguments(self, empty_settings):
        client = WooCommerceFactory.create(base_url="https://shop.example.com", settings=empty_settings)

        assert client.base_url == "https://shop.example.com"
