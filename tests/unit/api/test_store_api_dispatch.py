"""
Tests for live-mode dispatch of the store-level resources: webhooks, taxes,
payment gateways, shipping, reference data, global refunds, reports and
system status.
"""

from datetime import date, datetime

import pytest

from woocommerce_api.exceptions import WooMissingIdentityError
from woocommerce_api.models import (
    WooMethodSetting,
    WooPaymentGateway,
    WooReportPeriod,
    WooShippingZoneLocation,
    WooShippingZoneLocationType,
    WooShippingZoneMethod,
    WooTaxClass,
    WooTaxRate,
    WooTaxRateBatchRequest,
    WooWebhook,
    WooWebhookBatchRequest,
    WooWebhookFilterStatus,
    WooWebhookStatus,
)


@pytest.mark.unit
class TestWebhookDispatch:
    @pytest.mark.asyncio
    async def test_list_defaults_to_all_statuses(self, live_client, mock_transport):
        mock_transport.get.return_value = [{"id": 142, "status": "active", "topic": "order.created"}]

        webhooks = await live_client.get_webhooks()

        assert webhooks[0].status == WooWebhookStatus.ACTIVE
        mock_transport.get.assert_awaited_once_with(
            "/webhooks",
            params={"context": "view", "page": 1, "per_page": 10, "order": "desc", "orderby": "date", "status": "all"},
        )

    @pytest.mark.asyncio
    async def test_list_status_filter(self, live_client, mock_transport):
        mock_transport.get.return_value = []

        await live_client.get_webhooks(status=WooWebhookFilterStatus.PAUSED, after=datetime(2024, 1, 1))

        params = mock_transport.get.await_args.kwargs["params"]
        assert params["status"] == "paused"
        assert params["after"] == "2024-01-01T00:00:00"

    @pytest.mark.asyncio
    async def test_create_body(self, live_client, mock_transport):
        mock_transport.post.return_value = {"id": 143, "name": "Order created", "resource": "order", "event": "created"}
        webhook = WooWebhook(
            id=1,
            name="Order created",
            topic="order.created",
            delivery_url="https://hooks.example.com/orders",
            secret="s3cret",
            resource="order",
        )

        created = await live_client.create_webhook(webhook)

        assert created.id == 143
        assert created.resource == "order"
        mock_transport.post.assert_awaited_once_with(
            "/webhooks",
            json={
                "name": "Order created",
                "topic": "order.created",
                "delivery_url": "https://hooks.example.com/orders",
                "secret": "s3cret",
            },
        )

    @pytest.mark.asyncio
    async def test_update_requires_id(self, live_client, mock_transport):
        with pytest.raises(WooMissingIdentityError):
            await live_client.update_webhook(WooWebhook(status=WooWebhookStatus.PAUSED))

        mock_transport.put.assert_not_called()

    @pytest.mark.asyncio
    async def test_batch(self, live_client, mock_transport):
        mock_transport.post.return_value = {"update": [{"id": 142, "status": "paused"}], "delete": [{"id": 143}]}
        request = WooWebhookBatchRequest(update=[WooWebhook(id=142, status=WooWebhookStatus.PAUSED)], delete=[143])

        response = await live_client.batch_webhooks(request)

        mock_transport.post.assert_awaited_once_with(
            "/webhooks/batch", json={"update": [{"id": 142, "status": "paused"}], "delete": [143]}
        )
        assert response.update[0].status == WooWebhookStatus.PAUSED


@pytest.mark.unit
class TestTaxDispatch:
    @pytest.mark.asyncio
    async def test_tax_classes_are_not_paginated(self, live_client, mock_transport):
        mock_transport.get.return_value = [{"slug": "standard", "name": "Standard"}, {"slug": "zero-rate", "name": "Zero rate"}]

        classes = await live_client.get_tax_classes()

        assert [tax_class.slug for tax_class in classes] == ["standard", "zero-rate"]
        mock_transport.get.assert_awaited_once_with("/taxes/classes", params=None)

    @pytest.mark.asyncio
    async def test_create_tax_class_sends_name_only(self, live_client, mock_transport):
        mock_transport.post.return_value = {"slug": "reduced-rate", "name": "Reduced rate"}

        created = await live_client.create_tax_class(WooTaxClass(slug="ignored", name="Reduced rate"))

        assert created == WooTaxClass(slug="reduced-rate")
        mock_transport.post.assert_awaited_once_with("/taxes/classes", json={"name": "Reduced rate"})

    @pytest.mark.asyncio
    async def test_delete_tax_class_requires_slug(self, live_client, mock_transport):
        with pytest.raises(WooMissingIdentityError):
            await live_client.delete_tax_class("")

        mock_transport.delete.assert_not_called()

    @pytest.mark.asyncio
    async def test_tax_rates_class_filter(self, live_client, mock_transport):
        mock_transport.get.return_value = [{"id": 72, "rate": "21.0000", "class": "standard"}]

        rates = await live_client.get_tax_rates(tax_class="standard")

        assert rates[0].tax_class == "standard"
        mock_transport.get.assert_awaited_once_with(
            "/taxes",
            params={"context": "view", "page": 1, "per_page": 10, "order": "asc", "orderby": "order", "class": "standard"},
        )

    @pytest.mark.asyncio
    async def test_tax_rate_body_uses_class_key(self, live_client, mock_transport):
        mock_transport.post.return_value = {"id": 73, "country": "ES", "rate": "21.0000", "class": "standard"}

        await live_client.create_tax_rate(WooTaxRate(country="ES", rate="21.0000", name="IVA", tax_class="standard"))

        mock_transport.post.assert_awaited_once_with(
            "/taxes", json={"country": "ES", "rate": "21.0000", "name": "IVA", "class": "standard"}
        )

    @pytest.mark.asyncio
    async def test_batch_tax_rates(self, live_client, mock_transport):
        mock_transport.post.return_value = {"create": [{"id": 74, "country": "PT"}]}

        response = await live_client.batch_tax_rates(WooTaxRateBatchRequest(create=[WooTaxRate(country="PT", rate="23")]))

        mock_transport.post.assert_awaited_once_with("/taxes/batch", json={"create": [{"country": "PT", "rate": "23"}]})
        assert response.create[0].id == 74


@pytest.mark.unit
class TestPaymentGatewayDispatch:
    @pytest.mark.asyncio
    async def test_get_parses_settings(self, live_client, mock_transport):
        mock_transport.get.return_value = {
            "id": "bacs",
            "title": "Direct bank transfer",
            "enabled": True,
            "method_supports": ["products"],
            "settings": {"title": {"id": "title", "label": "Title", "type": "text", "value": "Direct bank transfer"}},
        }

        gateway = await live_client.get_payment_gateway("bacs")

        assert gateway.settings["title"].value == "Direct bank transfer"
        mock_transport.get.assert_awaited_once_with("/payment_gateways/bacs", params=None)

    @pytest.mark.asyncio
    async def test_update_sends_setting_values(self, live_client, mock_transport):
        mock_transport.put.return_value = {"id": "bacs", "enabled": False}
        gateway = WooPaymentGateway(
            id="bacs",
            enabled=False,
            method_title="BACS",
            settings={"title": WooMethodSetting(id="title", label="Title", type="text", value="Bank transfer")},
        )

        updated = await live_client.update_payment_gateway(gateway)

        assert updated.enabled is False
        mock_transport.put.assert_awaited_once_with(
            "/payment_gateways/bacs", json={"id": "bacs", "enabled": False, "settings": {"title": "Bank transfer"}}
        )


@pytest.mark.unit
class TestShippingDispatch:
    @pytest.mark.asyncio
    async def test_zone_locations_are_replaced_as_array(self, live_client, mock_transport):
        mock_transport.put.return_value = [{"code": "ES", "type": "country"}, {"code": "EU", "type": "continent"}]
        locations = [
            WooShippingZoneLocation(code="ES", type=WooShippingZoneLocationType.COUNTRY),
            WooShippingZoneLocation(code="EU", type=WooShippingZoneLocationType.CONTINENT),
        ]

        saved = await live_client.update_shipping_zone_locations(5, locations)

        assert [location.code for location in saved] == ["ES", "EU"]
        mock_transport.put.assert_awaited_once_with(
            "/shipping/zones/5/locations", json=[{"code": "ES", "type": "country"}, {"code": "EU", "type": "continent"}]
        )

    @pytest.mark.asyncio
    async def test_create_zone_method_sends_method_id(self, live_client, mock_transport):
        mock_transport.post.return_value = {"id": 26, "instance_id": 26, "method_id": "flat_rate", "enabled": True}

        method = await live_client.create_shipping_zone_method(5, WooShippingZoneMethod(method_id="flat_rate"))

        assert method.id == 26
        mock_transport.post.assert_awaited_once_with("/shipping/zones/5/methods", json={"method_id": "flat_rate"})

    @pytest.mark.asyncio
    async def test_update_zone_method_uses_instance_path(self, live_client, mock_transport):
        mock_transport.put.return_value = {"id": 26, "enabled": False}
        method = WooShippingZoneMethod(
            id=26,
            instance_id=26,
            enabled=False,
            settings={"cost": WooMethodSetting(id="cost", label="Cost", value="10.00")},
        )

        await live_client.update_shipping_zone_method(5, method)

        mock_transport.put.assert_awaited_once_with(
            "/shipping/zones/5/methods/26", json={"id": 26, "enabled": False, "settings": {"cost": "10.00"}}
        )

    @pytest.mark.asyncio
    async def test_shipping_methods(self, live_client, mock_transport):
        mock_transport.get.return_value = {"id": "flat_rate", "title": "Flat rate"}

        method = await live_client.get_shipping_method("flat_rate")

        assert method.title == "Flat rate"
        mock_transport.get.assert_awaited_once_with("/shipping_methods/flat_rate", params=None)


@pytest.mark.unit
class TestDataDispatch:
    @pytest.mark.asyncio
    async def test_country_with_states(self, live_client, mock_transport):
        mock_transport.get.return_value = {"code": "ES", "name": "Spain", "states": [{"code": "M", "name": "Madrid"}]}

        country = await live_client.get_country("ES")

        assert country.states[0].name == "Madrid"
        mock_transport.get.assert_awaited_once_with("/data/countries/ES", params=None)

    @pytest.mark.asyncio
    async def test_current_currency(self, live_client, mock_transport):
        mock_transport.get.return_value = {"code": "EUR", "name": "Euro", "symbol": "€"}

        currency = await live_client.get_current_currency()

        assert currency.symbol == "€"
        mock_transport.get.assert_awaited_once_with("/data/currencies/current", params=None)


@pytest.mark.unit
class TestRefundDispatch:
    @pytest.mark.asyncio
    async def test_global_refunds(self, live_client, mock_transport):
        mock_transport.get.return_value = [{"id": 99, "parent_id": 727, "amount": "5.00", "shipping_lines": []}]

        refunds = await live_client.get_refunds(parent=[727])

        assert refunds[0].parent_id == 727
        assert refunds[0].amount == 5.0
        params = mock_transport.get.await_args.kwargs["params"]
        assert mock_transport.get.await_args.args == ("/refunds",)
        assert params["parent"] == "727"
        assert "dp" not in params


@pytest.mark.unit
class TestReportDispatch:
    @pytest.mark.asyncio
    async def test_sales_report_period(self, live_client, mock_transport):
        mock_transport.get.return_value = [
            {"total_sales": "120.50", "total_orders": 3, "totals": {"2024-05-01": {"sales": "120.50", "orders": 3}}}
        ]

        reports = await live_client.get_sales_report(period=WooReportPeriod.LAST_MONTH)

        assert reports[0].total_sales == 120.5
        assert reports[0].totals["2024-05-01"].orders == 3
        mock_transport.get.assert_awaited_once_with(
            "/reports/sales", params={"context": "view", "period": "last_month"}
        )

    @pytest.mark.asyncio
    async def test_top_sellers_date_range(self, live_client, mock_transport):
        mock_transport.get.return_value = [{"title": "Widget", "product_id": 42, "quantity": 7}]

        sellers = await live_client.get_top_sellers_report(date_min=date(2024, 5, 1), date_max=datetime(2024, 5, 31, 18))

        assert sellers[0].product_id == 42
        params = mock_transport.get.await_args.kwargs["params"]
        assert params == {"context": "view", "date_min": "2024-05-01", "date_max": "2024-05-31"}

    @pytest.mark.asyncio
    async def test_totals_path(self, live_client, mock_transport):
        mock_transport.get.return_value = [{"slug": "processing", "name": "Processing", "total": 4}]

        totals = await live_client.get_orders_totals()

        assert totals[0].total == 4
        mock_transport.get.assert_awaited_once_with("/reports/orders/totals", params=None)

    @pytest.mark.asyncio
    async def test_unknown_totals_resource_raises_before_io(self, live_client, mock_transport):
        with pytest.raises(ValueError):
            await live_client.get_totals_report("webhooks")

        mock_transport.get.assert_not_called()


@pytest.mark.unit
class TestSystemStatusDispatch:
    @pytest.mark.asyncio
    async def test_status_sections(self, live_client, mock_transport):
        mock_transport.get.return_value = {
            "environment": {"wp_version": "6.5", "php_version": "8.2.10"},
            "settings": {"currency": "EUR", "number_of_decimals": 2},
            "active_plugins": [{"plugin": "woocommerce/woocommerce.php"}],
            "post_type_counts": [{"type": "product", "count": 12}],
        }

        status = await live_client.get_system_status()

        assert status.environment.php_version == "8.2.10"
        assert status.settings.currency == "EUR"
        assert status.database is None

    @pytest.mark.asyncio
    async def test_run_tool_confirms(self, live_client, mock_transport):
        mock_transport.put.return_value = {
            "id": "clear_transients",
            "name": "WooCommerce transients",
            "success": True,
            "message": "Product transients cleared",
        }

        result = await live_client.run_system_status_tool("clear_transients")

        assert result.success is True
        mock_transport.put.assert_awaited_once_with(
            "/system_status/tools/clear_transients", json={"id": "clear_transients", "confirm": True}
        )
