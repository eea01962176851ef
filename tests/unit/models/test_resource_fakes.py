"""
Tests for the fake() factories used by fake mode.
"""

import pytest

from woocommerce_api.models import (
    WooCoupon,
    WooCustomer,
    WooOrder,
    WooOrderNote,
    WooOrderRefund,
    WooOrderStatus,
    WooProduct,
    WooProductCategory,
    WooProductReview,
    WooProductShippingClass,
    WooProductTag,
    WooProductVariation,
    WooProductWithChildren,
    WooRefund,
    WooSalesReport,
    WooSettingOption,
    WooSettingsGroup,
    WooShippingZone,
    WooShippingZoneLocation,
    WooShippingZoneMethod,
    WooSystemStatus,
    WooTaxClass,
    WooTaxRate,
    WooWebhook,
)
from woocommerce_api.utils.fake_helper import FakeHelper

RESOURCE_MODELS = [
    WooProduct,
    WooProductCategory,
    WooProductTag,
    WooProductShippingClass,
    WooProductReview,
    WooProductVariation,
    WooCoupon,
    WooCustomer,
    WooOrder,
    WooOrderNote,
    WooOrderRefund,
    WooRefund,
    WooWebhook,
    WooTaxRate,
    WooShippingZone,
    WooShippingZoneMethod,
]


@pytest.mark.unit
class TestResourceFakes:
    @pytest.mark.parametrize("model", RESOURCE_MODELS)
    def test_fake_has_positive_id(self, model):
        item = model.fake()

        assert isinstance(item, model)
        assert item.id is not None and item.id > 0

    @pytest.mark.parametrize("model", RESOURCE_MODELS)
    def test_fake_serializes_to_request_body(self, model):
        body = model.fake().to_dict()

        assert isinstance(body, dict)
        assert "_links" not in body

    def test_seed_makes_fakes_reproducible(self):
        FakeHelper.seed(7)
        first = WooProduct.fake()
        FakeHelper.seed(7)
        second = WooProduct.fake()

        assert (first.id, first.name, first.sku, first.regular_price) == (
            second.id,
            second.name,
            second.sku,
            second.regular_price,
        )

    def test_fake_order_status_is_never_a_filter_value(self):
        for _ in range(20):
            assert WooOrder.fake().status not in (WooOrderStatus.ANY, WooOrderStatus.CHECKOUT_DRAFT)

    def test_fake_settings_use_string_ids(self):
        assert isinstance(WooSettingsGroup.fake().id, str)
        assert WooSettingOption.fake().id.startswith("woocommerce_")

    def test_fake_product_with_children(self):
        expanded = WooProductWithChildren.fake()

        assert isinstance(expanded.main_product, WooProduct)

    def test_fake_webhook_resource_matches_topic(self):
        webhook = WooWebhook.fake()

        assert webhook.topic == f"{webhook.resource}.{webhook.event}"
        assert "resource" not in webhook.to_dict()

    def test_fake_tax_class_is_keyed_by_slug(self):
        tax_class = WooTaxClass.fake()

        assert tax_class.slug == tax_class.name.lower()
        assert tax_class.to_dict() == {"name": tax_class.name}

    def test_fake_zone_method_sends_setting_values(self):
        method = WooShippingZoneMethod.fake()

        body = method.to_dict()

        assert body["id"] == method.instance_id
        assert "instance_id" not in body
        assert body["settings"] == {key: setting.value for key, setting in method.settings.items()}

    def test_fake_zone_location_code_matches_type(self):
        for _ in range(20):
            location = WooShippingZoneLocation.fake()
            assert location.code
            if location.type.value == "state":
                assert ":" in location.code

    def test_fake_sales_report_totals_add_up(self):
        report = WooSalesReport.fake()

        assert report.total_orders == sum(item.orders for item in report.totals.values())

    def test_fake_system_status_sections(self):
        status = WooSystemStatus.fake()

        assert status.environment.wp_version
        assert status.settings.number_of_decimals == 2
