"""
Shared pytest fixtures for all tests.

This module provides the WooCommerce clients (fake and live with a mocked
transport), canned API payloads and environment isolation.
"""

import os
from unittest.mock import AsyncMock

import pytest

from woocommerce_api.clients.http_client import WooHttpClient
from woocommerce_api.clients.woocommerce_client import WooCommerce
from woocommerce_api.config.settings import WooCommerceSettings, reset_settings
from woocommerce_api.utils.fake_helper import FakeHelper

TEST_BASE_URL = "https://shop.example.com"
TEST_CONSUMER_KEY = "ck_test"
TEST_CONSUMER_SECRET = "cs_test"


# ============================================================================
# ENVIRONMENT ISOLATION
# ============================================================================


@pytest.fixture(autouse=True)
def clean_woocommerce_env(monkeypatch):
    """Remove WOOCOMMERCE_* variables and the cached settings around each test."""
    for name in list(os.environ):
        if name.startswith("WOOCOMMERCE_"):
            monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture(autouse=True)
def seeded_faker():
    """Reproducible fake data."""
    FakeHelper.seed(1234)


@pytest.fixture
def empty_settings() -> WooCommerceSettings:
    """Settings that ignore any local .env file."""
    return WooCommerceSettings(_env_file=None)


# ============================================================================
# CLIENT FIXTURES
# ============================================================================


@pytest.fixture
def mock_transport():
    """Transport test-double; every verb is an AsyncMock."""
    transport = AsyncMock(spec=WooHttpClient)
    transport.get.return_value = {}
    transport.post.return_value = {}
    transport.put.return_value = {}
    transport.delete.return_value = {}
    return transport


@pytest.fixture
def live_client(mock_transport, empty_settings) -> WooCommerce:
    """Client in live mode whose transport is mocked."""
    return WooCommerce(
        base_url=TEST_BASE_URL,
        consumer_key=TEST_CONSUMER_KEY,
        consumer_secret=TEST_CONSUMER_SECRET,
        use_faker=False,
        http_client=mock_transport,
        settings=empty_settings,
    )


@pytest.fixture
def fake_client(mock_transport, empty_settings) -> WooCommerce:
    """Client with fake mode on by default; the transport must never be used."""
    return WooCommerce(use_faker=True, http_client=mock_transport, settings=empty_settings)


# ============================================================================
# PAYLOAD FIXTURES
# ============================================================================


@pytest.fixture
def product_payload() -> dict:
    """Product as returned by GET /products/{id} (context=view)."""
    return {
        "id": 42,
        "name": "Widget",
        "slug": "widget",
        "permalink": "https://shop.example.com/product/widget/",
        "date_created": "2024-03-01T10:15:00",
        "date_modified": "",
        "type": "simple",
        "status": "publish",
        "price": "9.99",
        "regular_price": "12.50",
        "sale_price": "",
        "stock_quantity": None,
        "stock_status": "instock",
        "related_ids": [7, 8],
        "upsell_ids": [9],
        "cross_sell_ids": [],
        "parent_id": 0,
        "categories": [{"id": 15, "name": "Tools", "slug": "tools"}],
        "images": [{"id": 3, "src": "https://shop.example.com/widget.png", "alt": ""}],
        "meta_data": [{"id": 1, "key": "_color", "value": "red"}],
        "_links": {"self": [{"href": "https://shop.example.com/wp-json/wc/v3/products/42"}]},
    }


@pytest.fixture
def order_payload() -> dict:
    return {
        "id": 727,
        "parent_id": 0,
        "number": "727",
        "status": "on-hold",
        "currency": "USD",
        "date_created": "2024-05-20T09:00:00",
        "total": "29.35",
        "customer_id": 26,
        "billing": {"first_name": "Ana", "last_name": "Gómez", "email": "ana@example.com"},
        "line_items": [
            {"id": 315, "name": "Widget", "product_id": 42, "quantity": 2, "subtotal": "19.98", "total": "19.98"},
            {"id": 316, "name": "Gadget", "product_id": 43, "quantity": 1, "subtotal": "9.37", "total": "9.37"},
        ],
        "refunds": [],
        "set_paid": False,
    }
