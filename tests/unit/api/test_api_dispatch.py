"""
Tests for live-mode dispatch: paths, query params and bodies handed to the
transport, and parsing of what it returns.
"""

import pytest

from woocommerce_api.exceptions import WooBatchConflictError, WooMissingIdentityError
from woocommerce_api.models import (
    WooLineItem,
    WooOrder,
    WooOrderBatchRequest,
    WooOrderRefund,
    WooOrderStatus,
    WooProduct,
    WooProductBatchRequest,
    WooProductFilterWithType,
    WooProductTag,
    WooProductTagBatchRequest,
    WooSettingOption,
)


@pytest.mark.unit
class TestReadOperations:
    @pytest.mark.asyncio
    async def test_get_product_parses_payload(self, live_client, mock_transport, product_payload):
        mock_transport.get.return_value = product_payload

        product = await live_client.get_product(42)

        assert product.id == 42
        assert product.price == 9.99
        mock_transport.get.assert_awaited_once_with("/products/42", params=None)

    @pytest.mark.asyncio
    async def test_list_sends_built_query(self, live_client, mock_transport):
        mock_transport.get.return_value = [{"id": 1, "name": "Tools"}, {"id": 2, "name": "Garden"}]

        categories = await live_client.get_categories(per_page=10, hide_empty=True)

        assert [category.id for category in categories] == [1, 2]
        mock_transport.get.assert_awaited_once_with(
            "/products/categories",
            params={
                "context": "view",
                "page": 1,
                "per_page": 10,
                "order": "desc",
                "orderby": "name",
                "hide_empty": True,
            },
        )

    @pytest.mark.asyncio
    async def test_empty_list_body(self, live_client, mock_transport):
        mock_transport.get.return_value = None

        assert await live_client.get_coupons() == []

    @pytest.mark.asyncio
    async def test_orders_status_filter(self, live_client, mock_transport):
        mock_transport.get.return_value = []

        await live_client.get_orders(status=[WooOrderStatus.PROCESSING, WooOrderStatus.COMPLETED])

        params = mock_transport.get.await_args.kwargs["params"]
        assert params["status"] == "processing,completed"

    @pytest.mark.asyncio
    async def test_order_refund_without_dp_sends_no_params(self, live_client, mock_transport):
        mock_transport.get.return_value = {"id": 99, "amount": "5.00"}

        refund = await live_client.get_order_refund(10, 99)

        assert isinstance(refund, WooOrderRefund)
        assert refund.amount == 5.0
        mock_transport.get.assert_awaited_once_with("/orders/10/refunds/99", params=None)

    @pytest.mark.asyncio
    async def test_product_with_options(self, live_client, mock_transport):
        product = WooProduct(id=42, related_ids=[7, 8], upsell_ids=[8, 9], parent_id=0)
        mock_transport.get.return_value = [{"id": 42}, {"id": 7}, {"id": 8}, {"id": 9}]

        expanded = await live_client.get_product_with_options(
            product, [WooProductFilterWithType.RELATED_IDS, WooProductFilterWithType.UPSELL_IDS]
        )

        mock_transport.get.assert_awaited_once_with("/products", params={"include": "42,7,8,9", "per_page": 4})
        assert expanded.main_product is product
        assert [item.id for item in expanded.related_products] == [7, 8]
        assert [item.id for item in expanded.upsell_products] == [8, 9]
        assert expanded.cross_sell_products is None

    @pytest.mark.asyncio
    async def test_product_with_options_requires_id(self, live_client, mock_transport):
        with pytest.raises(WooMissingIdentityError):
            await live_client.get_product_with_options(WooProduct(name="No id"), [])

        mock_transport.get.assert_not_called()


@pytest.mark.unit
class TestWriteOperations:
    @pytest.mark.asyncio
    async def test_create_body_has_no_id(self, live_client, mock_transport):
        mock_transport.post.return_value = {"id": 31, "name": "Sale", "count": 0}

        tag = await live_client.create_product_tag(WooProductTag(id=9, name="Sale"))

        assert tag.id == 31
        mock_transport.post.assert_awaited_once_with("/products/tags", json={"name": "Sale"})

    @pytest.mark.asyncio
    async def test_update_puts_to_resource_path(self, live_client, mock_transport):
        mock_transport.put.return_value = {"id": 42, "name": "Widget 2"}

        await live_client.update_product(WooProduct(id=42, name="Widget 2", price=3.0))

        mock_transport.put.assert_awaited_once_with("/products/42", json={"id": 42, "name": "Widget 2"})

    @pytest.mark.asyncio
    async def test_update_without_id_raises_before_io(self, live_client, mock_transport):
        with pytest.raises(WooMissingIdentityError) as exc_info:
            await live_client.update_product_tag(WooProductTag(name="Sale"))

        assert exc_info.value.operation == "update"
        mock_transport.put.assert_not_called()

    @pytest.mark.asyncio
    async def test_setting_option_group_is_required(self, live_client, mock_transport):
        with pytest.raises(WooMissingIdentityError):
            await live_client.update_setting_option(WooSettingOption(id="woocommerce_currency", value="EUR"))

        mock_transport.put.assert_not_called()

    @pytest.mark.asyncio
    async def test_setting_option_body_is_value_only(self, live_client, mock_transport):
        mock_transport.put.return_value = {"id": "woocommerce_currency", "value": "EUR", "group_id": "general"}
        option = WooSettingOption(id="woocommerce_currency", value="USD", label="Currency", group_id="general")

        updated = await live_client.update_setting_option(option.model_copy(update={"value": "EUR"}))

        assert updated.value == "EUR"
        mock_transport.put.assert_awaited_once_with(
            "/settings/general/woocommerce_currency", json={"id": "woocommerce_currency", "value": "EUR"}
        )

    @pytest.mark.asyncio
    async def test_duplicate_product(self, live_client, mock_transport):
        mock_transport.post.return_value = {"id": 43, "name": "Widget (Copy)"}

        copy = await live_client.duplicate_product(42)

        assert copy.id == 43
        mock_transport.post.assert_awaited_once_with("/products/42/duplicate", json=None)

    @pytest.mark.asyncio
    async def test_send_order_details(self, live_client, mock_transport):
        mock_transport.post.return_value = {"message": "Order details sent to ana@example.com, via REST API."}

        message = await live_client.send_order_details_to_customer(727, email="ana@example.com")

        assert message.startswith("Order details sent")
        mock_transport.post.assert_awaited_once_with(
            "/orders/727/actions/send_order_details", json={"email": "ana@example.com"}
        )


@pytest.mark.unit
class TestDeleteOperations:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "method, args, path",
        [
            ("delete_order_note", (10, 5), "/orders/10/notes/5"),
            ("delete_order_refund", (10, 99), "/orders/10/refunds/99"),
            ("delete_product_tag", (3,), "/products/tags/3"),
            ("delete_product_shipping_class", (4,), "/products/shipping_classes/4"),
            ("delete_product_review", (8,), "/products/reviews/8"),
            ("delete_webhook", (142,), "/webhooks/142"),
            ("delete_tax_rate", (72,), "/taxes/72"),
            ("delete_tax_class", ("reduced-rate",), "/taxes/classes/reduced-rate"),
            ("delete_shipping_zone", (5,), "/shipping/zones/5"),
            ("delete_shipping_zone_method", (5, 26), "/shipping/zones/5/methods/26"),
        ],
    )
    async def test_always_forced(self, live_client, mock_transport, method, args, path):
        await getattr(live_client, method)(*args)

        mock_transport.delete.assert_awaited_once_with(path, params={"force": True})

    @pytest.mark.asyncio
    async def test_trashable_resources_default_to_trash(self, live_client, mock_transport):
        await live_client.delete_product(42)
        await live_client.delete_order(727, force=True)

        assert mock_transport.delete.await_args_list[0].kwargs["params"] == {"force": False}
        assert mock_transport.delete.await_args_list[1].kwargs["params"] == {"force": True}

    @pytest.mark.asyncio
    async def test_customer_reassign(self, live_client, mock_transport):
        await live_client.delete_customer(26, reassign=1)

        mock_transport.delete.assert_awaited_once_with("/customers/26", params={"force": True, "reassign": 1})

    @pytest.mark.asyncio
    async def test_returns_deleted_snapshot(self, live_client, mock_transport):
        mock_transport.delete.return_value = {"id": 3, "name": "Sale"}

        deleted = await live_client.delete_product_tag(3)

        assert deleted == WooProductTag(id=3)
        assert deleted.name == "Sale"


@pytest.mark.unit
class TestBatchOperations:
    @pytest.mark.asyncio
    async def test_body_and_response(self, live_client, mock_transport):
        mock_transport.post.return_value = {"delete": [{"id": 5}, {"id": 6}]}

        response = await live_client.batch_products(WooProductBatchRequest(delete=[5, 6]))

        mock_transport.post.assert_awaited_once_with("/products/batch", json={"delete": [5, 6]})
        assert [item.id for item in response.delete] == [5, 6]
        assert response.create is None

    @pytest.mark.asyncio
    async def test_conflict_raises_before_io(self, live_client, mock_transport):
        request = WooProductTagBatchRequest(update=[WooProductTag(id=5, name="A")], delete=[5])

        with pytest.raises(WooBatchConflictError):
            await live_client.batch_product_tags(request)

        mock_transport.post.assert_not_called()


@pytest.fixture
def order_with_lines_payload(order_payload) -> dict:
    return {
        **order_payload,
        "shipping_lines": [{"id": 320, "method_title": "Flat rate", "method_id": "flat_rate", "total": "5.00"}],
        "fee_lines": [{"id": 321, "name": "Gift wrap", "tax_status": "taxable", "total": "2.00", "total_tax": "0.42"}],
    }


@pytest.mark.unit
class TestOrderLineIdentity:
    """Existing order lines are matched by id; a line sent without one is added as new."""

    @pytest.mark.asyncio
    async def test_update_order_sends_line_item_ids(self, live_client, mock_transport, order_payload):
        mock_transport.put.return_value = order_payload
        order = WooOrder.from_dict(order_payload)

        await live_client.update_order(order)

        body = mock_transport.put.await_args.kwargs["json"]
        assert [item["id"] for item in body["line_items"]] == [315, 316]

    @pytest.mark.asyncio
    async def test_update_order_keeps_every_line_id(self, live_client, mock_transport, order_with_lines_payload):
        mock_transport.put.return_value = order_with_lines_payload
        order = WooOrder.from_dict(order_with_lines_payload)
        changed = order.model_copy(
            update={"line_items": [order.line_items[0].model_copy(update={"quantity": 5}), order.line_items[1]]}
        )

        await live_client.update_order(changed)

        body = mock_transport.put.await_args.kwargs["json"]
        assert body["line_items"][0] == {
            "id": 315,
            "name": "Widget",
            "product_id": 42,
            "quantity": 5,
            "subtotal": "19.98",
            "total": "19.98",
        }
        assert [item["id"] for item in body["shipping_lines"]] == [320]
        assert [item["id"] for item in body["fee_lines"]] == [321]
        assert "total_tax" not in body["fee_lines"][0]

    @pytest.mark.asyncio
    async def test_batch_update_keeps_every_line_id(self, live_client, mock_transport, order_with_lines_payload):
        mock_transport.post.return_value = {"update": [order_with_lines_payload]}
        order = WooOrder.from_dict(order_with_lines_payload)

        response = await live_client.batch_orders(WooOrderBatchRequest(update=[order]))

        body = mock_transport.post.await_args.kwargs["json"]
        updated = body["update"][0]
        assert updated["id"] == 727
        assert [item["id"] for item in updated["line_items"]] == [315, 316]
        assert [item["id"] for item in updated["shipping_lines"]] == [320]
        assert [item["id"] for item in updated["fee_lines"]] == [321]
        assert response.update == [order]

    @pytest.mark.asyncio
    async def test_batch_create_new_lines_carry_no_id(self, live_client, mock_transport):
        new_order = WooOrder(line_items=[WooLineItem(product_id=42, quantity=1)])

        await live_client.batch_orders(WooOrderBatchRequest(create=[new_order]))

        body = mock_transport.post.await_args.kwargs["json"]
        assert body == {"create": [{"line_items": [{"product_id": 42, "quantity": 1}]}]}
