"""
Tests for WooHttpClient using httpx.MockTransport.
"""

import json
import logging

import httpx
import pytest

from woocommerce_api.clients.http_client import WooHttpClient
from woocommerce_api.exceptions import WooCommerceApiError

API_BASE_URL = "https://shop.example.com/wp-json/wc/v3"


def make_client(handler, **kwargs) -> WooHttpClient:
    return WooHttpClient(
        api_base_url=API_BASE_URL,
        consumer_key="ck_test",
        consumer_secret="cs_test",
        transport=httpx.MockTransport(handler),
        **kwargs,
    )


@pytest.mark.unit
class TestRequests:
    @pytest.mark.asyncio
    async def test_path_is_joined_to_api_base(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"id": 42})

        async with make_client(handler) as http:
            data = await http.get("/products/42")

        assert data == {"id": 42}
        assert seen[0].url.path == "/wp-json/wc/v3/products/42"
        assert seen[0].headers["Accept"] == "application/json"

    @pytest.mark.asyncio
    async def test_query_params_are_encoded(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=[])

        async with make_client(handler) as http:
            await http.get("/products/categories", params={"include": "1,2,3", "hide_empty": True})

        params = seen[0].url.params
        assert params["include"] == "1,2,3"
        assert params["hide_empty"] == "true"

    @pytest.mark.asyncio
    async def test_json_body(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(201, json={"id": 31, "name": "Sale"})

        async with make_client(handler) as http:
            await http.post("/products/tags", json={"name": "Sale"})

        assert seen[0].method == "POST"
        assert json.loads(seen[0].content) == {"name": "Sale"}

    @pytest.mark.asyncio
    async def test_empty_body_returns_none(self):
        async with make_client(lambda request: httpx.Response(200, content=b"")) as http:
            assert await http.delete("/products/tags/3") is None


@pytest.mark.unit
class TestAuthentication:
    @pytest.mark.asyncio
    async def test_basic_auth_by_default(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={})

        async with make_client(handler) as http:
            await http.get("/system_status")

        assert seen[0].headers["Authorization"].startswith("Basic ")
        assert "consumer_key" not in seen[0].url.params

    @pytest.mark.asyncio
    async def test_query_string_auth(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={})

        async with make_client(handler, query_string_auth=True) as http:
            await http.get("/products", params={"page": 2})

        params = seen[0].url.params
        assert params["consumer_key"] == "ck_test"
        assert params["consumer_secret"] == "cs_test"
        assert params["page"] == "2"
        assert "Authorization" not in seen[0].headers


@pytest.mark.unit
class TestErrors:
    @pytest.mark.asyncio
    async def test_api_error_keeps_status_and_body(self):
        body = {
            "code": "woocommerce_rest_shop_order_invalid_id",
            "message": "Invalid ID.",
            "data": {"status": 404},
        }

        async with make_client(lambda request: httpx.Response(404, json=body)) as http:
            with pytest.raises(WooCommerceApiError) as exc_info:
                await http.get("/orders/10/refunds/99")

        error = exc_info.value
        assert error.status_code == 404
        assert error.is_not_found
        assert error.error_code == "woocommerce_rest_shop_order_invalid_id"
        assert error.error_message == "Invalid ID."
        assert error.response_body == body
        assert error.method == "GET"

    @pytest.mark.asyncio
    async def test_non_json_error_body(self):
        async with make_client(lambda request: httpx.Response(502, text="Bad gateway")) as http:
            with pytest.raises(WooCommerceApiError) as exc_info:
                await http.get("/products")

        assert exc_info.value.status_code == 502
        assert exc_info.value.error_code == "HTTP_502"
        assert exc_info.value.response_body == "Bad gateway"

    @pytest.mark.asyncio
    async def test_auth_error(self):
        body = {"code": "woocommerce_rest_cannot_view", "message": "Sorry, you cannot list resources.", "data": {"status": 401}}

        async with make_client(lambda request: httpx.Response(401, json=body)) as http:
            with pytest.raises(WooCommerceApiError) as exc_info:
                await http.get("/products")

        assert exc_info.value.is_auth_error

    @pytest.mark.asyncio
    async def test_error_url_hides_secret(self):
        async with make_client(lambda request: httpx.Response(400, json={}), query_string_auth=True) as http:
            with pytest.raises(WooCommerceApiError) as exc_info:
                await http.get("/products")

        assert "cs_test" not in exc_info.value.url
        assert exc_info.value.error_code == "HTTP_400"

    @pytest.mark.asyncio
    async def test_transport_error_propagates_unchanged(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with make_client(handler) as http:
            with pytest.raises(httpx.ConnectError):
                await http.get("/products")


@pytest.mark.unit
class TestLifecycle:
    @pytest.mark.asyncio
    async def test_client_is_created_lazily_and_closed(self):
        http = make_client(lambda request: httpx.Response(200, json=[]))

        assert http._client is None
        await http.get("/products")
        assert http._client is not None
        await http.close()
        assert http._client is None

    @pytest.mark.asyncio
    async def test_debug_logs_bodies(self, caplog):
        caplog.set_level(logging.DEBUG, logger="woocommerce_api.clients.http_client")

        async with make_client(lambda request: httpx.Response(200, json={"id": 7}), debug=True) as http:
            await http.get("/products/7")

        assert any(record.getMessage().startswith("<-- 200") for record in caplog.records)
