"""
End-to-end tests: the public client over a real WooHttpClient whose
network is replaced by httpx.MockTransport returning canned JSON.
"""

import json

import httpx
import pytest

from woocommerce_api import WooCommerce, WooCommerceApiError, WooHttpClient
from woocommerce_api.models import WooProductBatchRequest, WooProductTag


class FakeStore:
    """Routes requests to canned responses and records them."""

    def __init__(self, routes: dict[tuple[str, str], httpx.Response]):
        self.routes = routes
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.removeprefix("/wp-json/wc/v3")
        response = self.routes.get((request.method, path))
        if response is None:
            return httpx.Response(404, json={"code": "rest_no_route", "message": "No route.", "data": {"status": 404}})
        return response

    def last_body(self):
        return json.loads(self.requests[-1].content)


def make_client(store: FakeStore, use_faker: bool = False) -> WooCommerce:
    http = WooHttpClient(
        api_base_url="https://shop.example.com/wp-json/wc/v3",
        consumer_key="ck_test",
        consumer_secret="cs_test",
        transport=httpx.MockTransport(store),
    )
    return WooCommerce(base_url="https://shop.example.com", use_faker=use_faker, http_client=http)


@pytest.mark.integration
class TestEndToEnd:
    @pytest.mark.asyncio
    async def test_get_product(self):
        store = FakeStore(
            {("GET", "/products/42"): httpx.Response(200, json={"id": 42, "name": "Widget", "price": "9.99"})}
        )

        async with make_client(store) as woo:
            product = await woo.get_product(42)

        assert (product.id, product.name, product.price) == (42, "Widget", 9.99)

    @pytest.mark.asyncio
    async def test_create_tag_sends_no_id(self):
        store = FakeStore({("POST", "/products/tags"): httpx.Response(201, json={"id": 31, "name": "Sale"})})

        async with make_client(store) as woo:
            tag = await woo.create_product_tag(WooProductTag(name="Sale"))

        assert tag.id == 31
        assert store.last_body() == {"name": "Sale"}
        assert "id" not in store.last_body()

    @pytest.mark.asyncio
    async def test_batch_delete_only(self):
        store = FakeStore(
            {("POST", "/products/batch"): httpx.Response(200, json={"delete": [{"id": 5}, {"id": 6}]})}
        )

        async with make_client(store) as woo:
            response = await woo.batch_products(WooProductBatchRequest(delete=[5, 6]))

        assert store.last_body() == {"delete": [5, 6]}
        assert [product.id for product in response.delete] == [5, 6]

    @pytest.mark.asyncio
    async def test_fake_list_makes_no_http_call(self):
        store = FakeStore({})

        async with make_client(store) as woo:
            categories = await woo.get_categories(per_page=25, use_faker=True)

        assert len(categories) == 25
        assert store.requests == []

    @pytest.mark.asyncio
    async def test_refund_not_found(self):
        body = {
            "code": "woocommerce_rest_invalid_order_refund_id",
            "message": "Invalid order refund ID.",
            "data": {"status": 404},
        }
        store = FakeStore({("GET", "/orders/10/refunds/99"): httpx.Response(404, json=body)})

        async with make_client(store) as woo:
            with pytest.raises(WooCommerceApiError) as exc_info:
                await woo.get_order_refund(10, 99)

        assert exc_info.value.status_code == 404
        assert exc_info.value.response_body == body

    @pytest.mark.asyncio
    async def test_categories_query(self):
        store = FakeStore({("GET", "/products/categories"): httpx.Response(200, json=[])})

        async with make_client(store) as woo:
            await woo.get_categories(hide_empty=True)

        params = store.requests[-1].url.params
        assert params["order"] == "desc"
        assert params["orderby"] == "name"
        assert params["hide_empty"] == "true"
        for name in ("search", "parent", "slug"):
            assert name not in params
