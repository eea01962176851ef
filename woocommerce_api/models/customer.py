"""
Modelos de cliente WooCommerce
"""

from typing import Optional, Self

from woocommerce_api.utils.fake_helper import FakeHelper

from .address import WooBilling, WooShipping
from .base import WooBaseModel, WooDateTime, WooLinks, WooMetaData, WooResourceModel, read_only_field


class WooCustomer(WooResourceModel):
    """Cliente registrado"""

    date_created: WooDateTime = read_only_field()
    date_created_gmt: WooDateTime = read_only_field()
    date_modified: WooDateTime = read_only_field()
    date_modified_gmt: WooDateTime = read_only_field()
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    role: Optional[str] = read_only_field()
    username: Optional[str] = None
    password: Optional[str] = None
    billing: Optional[WooBilling] = None
    shipping: Optional[WooShipping] = None
    is_paying_customer: Optional[bool] = read_only_field()
    avatar_url: Optional[str] = read_only_field()
    meta_data: Optional[list[WooMetaData]] = None
    links: Optional[WooLinks] = read_only_field(alias="_links")

    @classmethod
    def fake(cls) -> Self:
        return cls(
            id=FakeHelper.integer(1000),
            date_created=FakeHelper.datetime(),
            date_created_gmt=FakeHelper.datetime(),
            date_modified=FakeHelper.datetime(),
            date_modified_gmt=FakeHelper.datetime(),
            email=FakeHelper.email(),
            first_name=FakeHelper.first_name(),
            last_name=FakeHelper.last_name(),
            role="customer",
            username=FakeHelper.username(),
            billing=WooBilling.fake(),
            shipping=WooShipping.fake(),
            is_paying_customer=FakeHelper.boolean(),
            avatar_url=FakeHelper.image(),
            meta_data=FakeHelper.list(WooMetaData.fake, 2),
        )


class WooCustomerDownloadFile(WooBaseModel):
    """Archivo de una descarga"""

    name: Optional[str] = None
    file: Optional[str] = None

    @classmethod
    def fake(cls) -> Self:
        return cls(name=FakeHelper.word(), file=FakeHelper.url())


class WooCustomerDownload(WooBaseModel):
    """Descarga disponible para un cliente (solo lectura)"""

    download_id: Optional[str] = None
    download_url: Optional[str] = None
    product_id: Optional[int] = None
    product_name: Optional[str] = None
    download_name: Optional[str] = None
    order_id: Optional[int] = None
    order_key: Optional[str] = None
    downloads_remaining: Optional[str] = None
    access_expires: Optional[str] = None
    access_expires_gmt: Optional[str] = None
    file: Optional[WooCustomerDownloadFile] = None

    @classmethod
    def fake(cls) -> Self:
        return cls(
            download_id=FakeHelper.uuid(),
            download_url=FakeHelper.url(),
            product_id=FakeHelper.integer(1000),
            product_name=FakeHelper.word(),
            download_name=FakeHelper.word(),
            order_id=FakeHelper.integer(1000),
            order_key=f"wc_order_{FakeHelper.word()}",
            downloads_remaining="unlimited",
            access_expires="never",
            access_expires_gmt="never",
            file=WooCustomerDownloadFile.fake(),
        )
