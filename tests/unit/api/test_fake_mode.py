"""
Tests for fake mode.

Fake mode answers every operation with generated data and never touches
the transport, whether it is enabled on the client or per call.
"""

import pytest

from woocommerce_api.exceptions import WooMissingIdentityError
from woocommerce_api.models import (
    WooCustomer,
    WooOrderNote,
    WooProduct,
    WooProductCategory,
    WooProductTag,
    WooProductTagBatchRequest,
    WooSettingOption,
    WooSettingOptionBatchRequest,
    WooShippingZoneLocation,
    WooShippingZoneLocationType,
    WooTaxClass,
    WooWebhook,
    WooWebhookBatchRequest,
    WooWebhookStatus,
)


def assert_transport_unused(transport):
    for verb in (transport.get, transport.post, transport.put, transport.delete):
        verb.assert_not_called()


@pytest.mark.unit
class TestFakeLists:
    @pytest.mark.asyncio
    async def test_list_size_follows_per_page(self, fake_client, mock_transport):
        categories = await fake_client.get_categories(per_page=25)

        assert len(categories) == 25
        assert all(isinstance(category, WooProductCategory) for category in categories)
        mock_transport.get.assert_not_called()

    @pytest.mark.asyncio
    async def test_each_paginated_resource(self, fake_client, mock_transport):
        assert len(await fake_client.get_products(per_page=3)) == 3
        assert len(await fake_client.get_orders(per_page=4)) == 4
        assert len(await fake_client.get_customers(per_page=2)) == 2
        assert len(await fake_client.get_coupons(per_page=5)) == 5
        assert len(await fake_client.get_product_variations(42, per_page=6)) == 6
        assert_transport_unused(mock_transport)

    @pytest.mark.asyncio
    async def test_unpaginated_list_is_not_empty(self, fake_client, mock_transport):
        notes = await fake_client.get_order_notes(10)
        groups = await fake_client.get_settings_groups()

        assert 1 <= len(notes) <= 10
        assert 1 <= len(groups) <= 10
        assert_transport_unused(mock_transport)

    @pytest.mark.asyncio
    async def test_paging_is_still_validated(self, fake_client, mock_transport):
        with pytest.raises(ValueError):
            await fake_client.get_products(per_page=500)


@pytest.mark.unit
class TestFakeSingleResource:
    @pytest.mark.asyncio
    async def test_get_keeps_requested_id(self, fake_client, mock_transport):
        product = await fake_client.get_product(42)
        note = await fake_client.get_order_note(10, 5)

        assert isinstance(product, WooProduct)
        assert product.id == 42
        assert note.id == 5
        assert_transport_unused(mock_transport)

    @pytest.mark.asyncio
    async def test_create_echoes_input_over_fake_data(self, fake_client, mock_transport):
        tag = await fake_client.create_product_tag(WooProductTag(name="Sale"))

        assert tag.name == "Sale"
        assert tag.id is not None
        assert_transport_unused(mock_transport)

    @pytest.mark.asyncio
    async def test_update_echoes_input(self, fake_client):
        customer = await fake_client.update_customer(WooCustomer(id=26, first_name="Ana"))

        assert customer.id == 26
        assert customer.first_name == "Ana"

    @pytest.mark.asyncio
    async def test_update_without_id_still_fails(self, fake_client):
        with pytest.raises(WooMissingIdentityError):
            await fake_client.update_product(WooProduct(name="No id"))

    @pytest.mark.asyncio
    async def test_delete_returns_snapshot_with_id(self, fake_client, mock_transport):
        deleted = await fake_client.delete_order_note(10, 5)

        assert isinstance(deleted, WooOrderNote)
        assert deleted.id == 5
        mock_transport.delete.assert_not_called()

    @pytest.mark.asyncio
    async def test_setting_option_update(self, fake_client):
        option = await fake_client.update_setting_option(
            WooSettingOption(id="woocommerce_currency", value="EUR"), group_id="general"
        )

        assert option.id == "woocommerce_currency"
        assert option.value == "EUR"

    @pytest.mark.asyncio
    async def test_send_order_details(self, fake_client, mock_transport):
        message = await fake_client.send_order_details_to_customer(727, email="ana@example.com")

        assert message == "Order details sent to ana@example.com, via REST API."
        mock_transport.post.assert_not_called()

    @pytest.mark.asyncio
    async def test_product_with_options_keeps_main_product(self, fake_client, mock_transport):
        product = WooProduct(id=42, name="Widget")

        expanded = await fake_client.get_product_with_options(product, [])

        assert expanded.main_product is product
        mock_transport.get.assert_not_called()


@pytest.mark.unit
class TestFakeBatch:
    @pytest.mark.asyncio
    async def test_batch_groups(self, fake_client, mock_transport):
        request = WooProductTagBatchRequest(
            create=[WooProductTag(name="New")],
            update=[WooProductTag(id=3, name="Renamed")],
            delete=[9],
        )

        response = await fake_client.batch_product_tags(request)

        assert response.create[0].name == "New"
        assert response.update[0].id == 3
        assert response.update[0].name == "Renamed"
        assert response.delete[0].id == 9
        mock_transport.post.assert_not_called()

    @pytest.mark.asyncio
    async def test_absent_groups_stay_absent(self, fake_client):
        response = await fake_client.batch_product_tags(WooProductTagBatchRequest(delete=[9]))

        assert response.create is None
        assert response.update is None

    @pytest.mark.asyncio
    async def test_settings_batch(self, fake_client):
        request = WooSettingOptionBatchRequest(update=[WooSettingOption(id="woocommerce_currency", value="EUR")])

        response = await fake_client.batch_update_setting_options("general", request)

        assert response.update[0].value == "EUR"


@pytest.mark.unit
class TestFakeStoreResources:
    @pytest.mark.asyncio
    async def test_keyed_resources_keep_requested_key(self, fake_client, mock_transport):
        country = await fake_client.get_country("ES")
        continent = await fake_client.get_continent("EU")
        gateway = await fake_client.get_payment_gateway("bacs")
        tool = await fake_client.get_system_status_tool("clear_transients")
        tax_class = await fake_client.delete_tax_class("reduced-rate")

        assert country.code == "ES"
        assert continent.code == "EU"
        assert gateway.id == "bacs"
        assert tool.id == "clear_transients"
        assert tax_class == WooTaxClass(slug="reduced-rate")
        assert_transport_unused(mock_transport)

    @pytest.mark.asyncio
    async def test_unpaginated_store_lists(self, fake_client, mock_transport):
        for method in ("get_tax_classes", "get_payment_gateways", "get_shipping_zones", "get_countries", "get_reports"):
            items = await getattr(fake_client, method)()
            assert 1 <= len(items) <= 10
        assert_transport_unused(mock_transport)

    @pytest.mark.asyncio
    async def test_paginated_store_lists(self, fake_client, mock_transport):
        assert len(await fake_client.get_webhooks(per_page=3)) == 3
        assert len(await fake_client.get_tax_rates(per_page=4)) == 4
        assert len(await fake_client.get_refunds(per_page=2)) == 2
        assert_transport_unused(mock_transport)

    @pytest.mark.asyncio
    async def test_zone_locations_are_echoed(self, fake_client, mock_transport):
        locations = [WooShippingZoneLocation(code="ES", type=WooShippingZoneLocationType.COUNTRY)]

        saved = await fake_client.update_shipping_zone_locations(5, locations)

        assert saved == locations
        mock_transport.put.assert_not_called()

    @pytest.mark.asyncio
    async def test_run_tool(self, fake_client, mock_transport):
        result = await fake_client.run_system_status_tool("recount_terms")

        assert result.id == "recount_terms"
        assert result.confirm is True
        mock_transport.put.assert_not_called()

    @pytest.mark.asyncio
    async def test_unknown_totals_resource_fails_in_fake_mode(self, fake_client):
        with pytest.raises(ValueError):
            await fake_client.get_totals_report("webhooks")

    @pytest.mark.asyncio
    async def test_webhook_batch(self, fake_client, mock_transport):
        request = WooWebhookBatchRequest(update=[WooWebhook(id=142, status=WooWebhookStatus.DISABLED)], delete=[143])

        response = await fake_client.batch_webhooks(request)

        assert response.update[0].status == WooWebhookStatus.DISABLED
        assert response.delete[0].id == 143
        mock_transport.post.assert_not_called()


@pytest.mark.unit
class TestPerCallOverride:
    @pytest.mark.asyncio
    async def test_live_client_can_fake_one_call(self, live_client, mock_transport):
        products = await live_client.get_products(per_page=2, use_faker=True)

        assert len(products) == 2
        mock_transport.get.assert_not_called()

    @pytest.mark.asyncio
    async def test_fake_client_can_go_live_for_one_call(self, fake_client, mock_transport):
        mock_transport.get.return_value = {"id": 42, "name": "Widget"}

        product = await fake_client.get_product(42, use_faker=False)

        assert product.name == "Widget"
        mock_transport.get.assert_awaited_once_with("/products/42", params=None)
