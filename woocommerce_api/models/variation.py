"""
Modelo de variación de producto WooCommerce
"""

from typing import Optional, Self

from woocommerce_api.utils.fake_helper import FakeHelper

from .base import (
    WooDateTime,
    WooLinks,
    WooMetaData,
    WooMoney,
    WooOptionalInt,
    WooResourceModel,
    read_only_field,
)
from .enums import WooProductBackorder, WooProductStatus, WooProductStockStatus, WooTaxStatus
from .product import WooProductDefaultAttribute, WooProductDimension, WooProductDownload, WooProductImage


class WooProductVariation(WooResourceModel):
    """Variación de un producto variable"""

    date_created: WooDateTime = read_only_field()
    date_created_gmt: WooDateTime = read_only_field()
    date_modified: WooDateTime = read_only_field()
    date_modified_gmt: WooDateTime = read_only_field()
    description: Optional[str] = None
    permalink: Optional[str] = read_only_field()
    sku: Optional[str] = None
    price: WooMoney = read_only_field()
    regular_price: WooMoney = None
    sale_price: WooMoney = None
    date_on_sale_from: WooDateTime = None
    date_on_sale_from_gmt: WooDateTime = None
    date_on_sale_to: WooDateTime = None
    date_on_sale_to_gmt: WooDateTime = None
    on_sale: Optional[bool] = read_only_field()
    status: Optional[WooProductStatus] = None
    purchasable: Optional[bool] = read_only_field()
    virtual: Optional[bool] = None
    downloadable: Optional[bool] = None
    downloads: Optional[list[WooProductDownload]] = None
    download_limit: Optional[int] = None
    download_expiry: Optional[int] = None
    tax_status: Optional[WooTaxStatus] = None
    tax_class: Optional[str] = None
    manage_stock: Optional[bool] = None
    stock_quantity: WooOptionalInt = None
    stock_status: Optional[WooProductStockStatus] = None
    backorders: Optional[WooProductBackorder] = None
    backorders_allowed: Optional[bool] = read_only_field()
    backordered: Optional[bool] = read_only_field()
    low_stock_amount: WooOptionalInt = None
    weight: Optional[str] = None
    dimensions: Optional[WooProductDimension] = None
    shipping_class: Optional[str] = None
    shipping_class_id: WooOptionalInt = read_only_field()
    image: Optional[WooProductImage] = None
    attributes: Optional[list[WooProductDefaultAttribute]] = None
    menu_order: Optional[int] = None
    meta_data: Optional[list[WooMetaData]] = None
    links: Optional[WooLinks] = read_only_field(alias="_links")

    @classmethod
    def fake(cls) -> Self:
        regular_price = FakeHelper.price()
        return cls(
            id=FakeHelper.integer(10_000),
            date_created=FakeHelper.datetime(),
            date_created_gmt=FakeHelper.datetime(),
            date_modified=FakeHelper.datetime(),
            date_modified_gmt=FakeHelper.datetime(),
            description=FakeHelper.sentence(),
            permalink=FakeHelper.url(),
            sku=FakeHelper.sku(),
            price=regular_price,
            regular_price=regular_price,
            sale_price=round(regular_price * 0.9, 2),
            on_sale=FakeHelper.boolean(),
            status=WooProductStatus.fake(),
            purchasable=True,
            virtual=FakeHelper.boolean(),
            downloadable=FakeHelper.boolean(),
            downloads=FakeHelper.list(WooProductDownload.fake, 2),
            download_limit=-1,
            download_expiry=-1,
            tax_status=WooTaxStatus.fake(),
            tax_class="",
            manage_stock=FakeHelper.boolean(),
            stock_quantity=FakeHelper.integer(100, 0),
            stock_status=WooProductStockStatus.fake(),
            backorders=WooProductBackorder.fake(),
            backorders_allowed=FakeHelper.boolean(),
            backordered=FakeHelper.boolean(),
            weight=str(FakeHelper.integer(10)),
            dimensions=WooProductDimension.fake(),
            shipping_class=FakeHelper.slug(),
            shipping_class_id=FakeHelper.integer(),
            image=WooProductImage.fake(),
            attributes=FakeHelper.list(WooProductDefaultAttribute.fake, 3),
            menu_order=0,
            meta_data=FakeHelper.list(WooMetaData.fake, 2),
        )
