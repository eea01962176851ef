"""
Modelo de cupón WooCommerce
"""

from typing import Optional, Self

from woocommerce_api.utils.fake_helper import FakeHelper

from .base import WooDateTime, WooLinks, WooMetaData, WooMoney, WooResourceModel, read_only_field
from .enums import WooCouponDiscountType


class WooCoupon(WooResourceModel):
    """Cupón de descuento"""

    code: Optional[str] = None
    amount: WooMoney = None
    date_created: WooDateTime = read_only_field()
    date_created_gmt: WooDateTime = read_only_field()
    date_modified: WooDateTime = read_only_field()
    date_modified_gmt: WooDateTime = read_only_field()
    discount_type: Optional[WooCouponDiscountType] = None
    description: Optional[str] = None
    date_expires: WooDateTime = None
    date_expires_gmt: WooDateTime = None
    usage_count: Optional[int] = read_only_field()
    individual_use: Optional[bool] = None
    product_ids: Optional[list[int]] = None
    excluded_product_ids: Optional[list[int]] = None
    usage_limit: Optional[int] = None
    usage_limit_per_user: Optional[int] = None
    limit_usage_to_x_items: Optional[int] = None
    free_shipping: Optional[bool] = None
    product_categories: Optional[list[int]] = None
    excluded_product_categories: Optional[list[int]] = None
    exclude_sale_items: Optional[bool] = None
    minimum_amount: WooMoney = None
    maximum_amount: WooMoney = None
    email_restrictions: Optional[list[str]] = None
    used_by: Optional[list[str]] = read_only_field()
    meta_data: Optional[list[WooMetaData]] = None
    links: Optional[WooLinks] = read_only_field(alias="_links")

    @classmethod
    def fake(cls) -> Self:
        return cls(
            id=FakeHelper.integer(1000),
            code=FakeHelper.word().upper(),
            amount=FakeHelper.price(),
            date_created=FakeHelper.datetime(),
            date_created_gmt=FakeHelper.datetime(),
            date_modified=FakeHelper.datetime(),
            date_modified_gmt=FakeHelper.datetime(),
            discount_type=WooCouponDiscountType.fake(),
            description=FakeHelper.sentence(),
            date_expires=FakeHelper.datetime(),
            date_expires_gmt=FakeHelper.datetime(),
            usage_count=FakeHelper.integer(50, 0),
            individual_use=FakeHelper.boolean(),
            product_ids=FakeHelper.integers(3),
            excluded_product_ids=FakeHelper.integers(2),
            usage_limit=FakeHelper.integer(),
            usage_limit_per_user=FakeHelper.integer(5),
            limit_usage_to_x_items=FakeHelper.integer(10),
            free_shipping=FakeHelper.boolean(),
            product_categories=FakeHelper.integers(2),
            excluded_product_categories=FakeHelper.integers(2),
            exclude_sale_items=FakeHelper.boolean(),
            minimum_amount=FakeHelper.price(),
            maximum_amount=FakeHelper.price(),
            email_restrictions=FakeHelper.list(FakeHelper.email, 3),
            used_by=FakeHelper.list(FakeHelper.email, 3),
            meta_data=FakeHelper.list(WooMetaData.fake, 2),
        )
