"""
Modelos de pedido WooCommerce
Responsabilidad: Pedido, líneas del pedido, notas y reembolsos (por pedido y globales)
"""

from typing import Optional, Self

from woocommerce_api.utils.fake_helper import FakeHelper

from .address import WooBilling, WooShipping
from .base import (
    WooBaseModel,
    WooDateTime,
    WooLinks,
    WooMetaData,
    WooMoney,
    WooResourceModel,
    read_only_field,
)
from .enums import WooOrderStatus, WooTaxStatus


class WooFeeLineTax(WooBaseModel):
    """Impuesto aplicado a una línea"""

    id: Optional[int] = None
    total: WooMoney = None
    subtotal: WooMoney = None

    @classmethod
    def fake(cls) -> Self:
        return cls(id=FakeHelper.integer(), total=FakeHelper.decimal(10), subtotal=FakeHelper.decimal(10))


class WooLineItemImage(WooBaseModel):
    id: Optional[int] = None
    src: Optional[str] = None


class WooLineItem(WooBaseModel):
    """Línea de producto del pedido"""

    id: Optional[int] = None
    name: Optional[str] = None
    product_id: Optional[int] = None
    variation_id: Optional[int] = None
    quantity: Optional[int] = None
    tax_class: Optional[str] = None
    subtotal: WooMoney = None
    subtotal_tax: WooMoney = read_only_field()
    total: WooMoney = None
    total_tax: WooMoney = read_only_field()
    taxes: Optional[list[WooFeeLineTax]] = read_only_field()
    meta_data: Optional[list[WooMetaData]] = None
    sku: Optional[str] = read_only_field()
    price: WooMoney = read_only_field()
    image: Optional[WooLineItemImage] = read_only_field()
    parent_name: Optional[str] = read_only_field()

    @classmethod
    def fake(cls) -> Self:
        quantity = FakeHelper.integer(5)
        price = FakeHelper.price()
        return cls(
            id=FakeHelper.integer(1000),
            name=FakeHelper.word().title(),
            product_id=FakeHelper.integer(1000),
            variation_id=0,
            quantity=quantity,
            tax_class="",
            subtotal=round(price * quantity, 2),
            subtotal_tax=0.0,
            total=round(price * quantity, 2),
            total_tax=0.0,
            taxes=FakeHelper.list(WooFeeLineTax.fake, 2),
            meta_data=FakeHelper.list(WooMetaData.fake, 2),
            sku=FakeHelper.sku(),
            price=price,
            image=WooLineItemImage(id=FakeHelper.integer(), src=FakeHelper.image()),
        )


class WooTaxLine(WooBaseModel):
    """Línea de impuestos (calculada por el servidor)"""

    id: Optional[int] = None
    rate_code: Optional[str] = None
    rate_id: Optional[int] = None
    label: Optional[str] = None
    compound: Optional[bool] = None
    tax_total: WooMoney = None
    shipping_tax_total: WooMoney = None
    rate_percent: Optional[float] = None
    meta_data: Optional[list[WooMetaData]] = None

    @classmethod
    def fake(cls) -> Self:
        return cls(
            id=FakeHelper.integer(),
            rate_code=FakeHelper.word().upper(),
            rate_id=FakeHelper.integer(),
            label=FakeHelper.word(),
            compound=FakeHelper.boolean(),
            tax_total=FakeHelper.decimal(20),
            shipping_tax_total=FakeHelper.decimal(5),
            rate_percent=float(FakeHelper.integer(25)),
        )


class WooShippingLine(WooBaseModel):
    """Línea de envío"""

    id: Optional[int] = None
    method_title: Optional[str] = None
    method_id: Optional[str] = None
    instance_id: Optional[str] = None
    total: WooMoney = None
    total_tax: WooMoney = read_only_field()
    taxes: Optional[list[WooFeeLineTax]] = read_only_field()
    meta_data: Optional[list[WooMetaData]] = None

    @classmethod
    def fake(cls) -> Self:
        return cls(
            id=FakeHelper.integer(),
            method_title="Flat Rate",
            method_id="flat_rate",
            total=FakeHelper.decimal(20),
            total_tax=0.0,
        )


class WooFeeLine(WooBaseModel):
    """Línea de cargo adicional"""

    id: Optional[int] = None
    name: Optional[str] = None
    tax_class: Optional[str] = None
    tax_status: Optional[WooTaxStatus] = None
    total: WooMoney = None
    total_tax: WooMoney = read_only_field()
    taxes: Optional[list[WooFeeLineTax]] = read_only_field()
    meta_data: Optional[list[WooMetaData]] = None

    @classmethod
    def fake(cls) -> Self:
        return cls(
            id=FakeHelper.integer(),
            name=FakeHelper.word(),
            tax_class="",
            tax_status=WooTaxStatus.fake(),
            total=FakeHelper.decimal(20),
            total_tax=0.0,
        )


class WooCouponLine(WooBaseModel):
    """Cupón aplicado al pedido"""

    id: Optional[int] = None
    code: Optional[str] = None
    discount: WooMoney = read_only_field()
    discount_tax: WooMoney = read_only_field()
    meta_data: Optional[list[WooMetaData]] = None

    @classmethod
    def fake(cls) -> Self:
        return cls(
            id=FakeHelper.integer(),
            code=FakeHelper.word().upper(),
            discount=FakeHelper.decimal(20),
            discount_tax=0.0,
        )


class WooOrderRefundRef(WooBaseModel):
    """Resumen de reembolso incluido en el pedido"""

    id: Optional[int] = None
    reason: Optional[str] = None
    total: WooMoney = None

    @classmethod
    def fake(cls) -> Self:
        return cls(id=FakeHelper.integer(), reason=FakeHelper.sentence(), total=-FakeHelper.decimal(50))


class WooOrder(WooResourceModel):
    """Pedido WooCommerce"""

    parent_id: Optional[int] = None
    number: Optional[str] = read_only_field()
    order_key: Optional[str] = read_only_field()
    created_via: Optional[str] = read_only_field()
    version: Optional[str] = read_only_field()
    status: Optional[WooOrderStatus] = None
    currency: Optional[str] = None
    date_created: WooDateTime = read_only_field()
    date_created_gmt: WooDateTime = read_only_field()
    date_modified: WooDateTime = read_only_field()
    date_modified_gmt: WooDateTime = read_only_field()
    discount_total: WooMoney = read_only_field()
    discount_tax: WooMoney = read_only_field()
    shipping_total: WooMoney = read_only_field()
    shipping_tax: WooMoney = read_only_field()
    cart_tax: WooMoney = read_only_field()
    total: WooMoney = read_only_field()
    total_tax: WooMoney = read_only_field()
    prices_include_tax: Optional[bool] = read_only_field()
    customer_id: Optional[int] = None
    customer_ip_address: Optional[str] = read_only_field()
    customer_user_agent: Optional[str] = read_only_field()
    customer_note: Optional[str] = None
    billing: Optional[WooBilling] = None
    shipping: Optional[WooShipping] = None
    payment_method: Optional[str] = None
    payment_method_title: Optional[str] = None
    transaction_id: Optional[str] = None
    date_paid: WooDateTime = read_only_field()
    date_paid_gmt: WooDateTime = read_only_field()
    date_completed: WooDateTime = read_only_field()
    date_completed_gmt: WooDateTime = read_only_field()
    cart_hash: Optional[str] = read_only_field()
    meta_data: Optional[list[WooMetaData]] = None
    line_items: Optional[list[WooLineItem]] = None
    tax_lines: Optional[list[WooTaxLine]] = read_only_field()
    shipping_lines: Optional[list[WooShippingLine]] = None
    fee_lines: Optional[list[WooFeeLine]] = None
    coupon_lines: Optional[list[WooCouponLine]] = None
    refunds: Optional[list[WooOrderRefundRef]] = read_only_field()
    # Write-only: mark the order paid and reduce stock
    set_paid: Optional[bool] = None
    links: Optional[WooLinks] = read_only_field(alias="_links")

    @classmethod
    def fake(cls) -> Self:
        line_items = FakeHelper.list(WooLineItem.fake, 4)
        total = round(sum(item.total or 0 for item in line_items), 2)
        return cls(
            id=FakeHelper.integer(10_000),
            parent_id=0,
            number=str(FakeHelper.integer(10_000)),
            order_key=f"wc_order_{FakeHelper.word()}",
            created_via="rest-api",
            version="9.0.0",
            status=WooOrderStatus.fake(),
            currency="USD",
            date_created=FakeHelper.datetime(),
            date_created_gmt=FakeHelper.datetime(),
            date_modified=FakeHelper.datetime(),
            date_modified_gmt=FakeHelper.datetime(),
            discount_total=0.0,
            discount_tax=0.0,
            shipping_total=FakeHelper.decimal(20),
            shipping_tax=0.0,
            cart_tax=0.0,
            total=total,
            total_tax=0.0,
            prices_include_tax=FakeHelper.boolean(),
            customer_id=FakeHelper.integer(1000),
            customer_ip_address=FakeHelper.ip_address(),
            customer_user_agent="Mozilla/5.0",
            customer_note=FakeHelper.sentence(),
            billing=WooBilling.fake(),
            shipping=WooShipping.fake(),
            payment_method="bacs",
            payment_method_title="Direct Bank Transfer",
            transaction_id=FakeHelper.uuid(),
            date_paid=FakeHelper.datetime(),
            date_paid_gmt=FakeHelper.datetime(),
            date_completed=FakeHelper.datetime(),
            date_completed_gmt=FakeHelper.datetime(),
            cart_hash=FakeHelper.uuid(),
            meta_data=FakeHelper.list(WooMetaData.fake, 2),
            line_items=line_items,
            tax_lines=FakeHelper.list(WooTaxLine.fake, 2),
            shipping_lines=FakeHelper.list(WooShippingLine.fake, 2),
            fee_lines=FakeHelper.list(WooFeeLine.fake, 2),
            coupon_lines=FakeHelper.list(WooCouponLine.fake, 2),
            refunds=FakeHelper.list(WooOrderRefundRef.fake, 2),
        )

    def is_paid(self) -> bool:
        return self.date_paid is not None


class WooOrderNote(WooResourceModel):
    """Nota de pedido"""

    author: Optional[str] = read_only_field()
    date_created: WooDateTime = read_only_field()
    date_created_gmt: WooDateTime = read_only_field()
    note: Optional[str] = None
    customer_note: Optional[bool] = None
    # Write-only: attribute the note to the current API user
    added_by_user: Optional[bool] = None
    links: Optional[WooLinks] = read_only_field(alias="_links")

    @classmethod
    def fake(cls) -> Self:
        return cls(
            id=FakeHelper.integer(1000),
            author=FakeHelper.first_name(),
            date_created=FakeHelper.datetime(),
            date_created_gmt=FakeHelper.datetime(),
            note=FakeHelper.sentence(),
            customer_note=FakeHelper.boolean(),
        )


class WooRefundLineItem(WooBaseModel):
    """Línea de un reembolso"""

    id: Optional[int] = None
    name: Optional[str] = read_only_field()
    product_id: Optional[int] = read_only_field()
    variation_id: Optional[int] = read_only_field()
    quantity: Optional[int] = None
    tax_class: Optional[str] = read_only_field()
    subtotal: WooMoney = read_only_field()
    subtotal_tax: WooMoney = read_only_field()
    total: WooMoney = read_only_field()
    total_tax: WooMoney = read_only_field()
    taxes: Optional[list[WooFeeLineTax]] = None
    meta_data: Optional[list[WooMetaData]] = None
    sku: Optional[str] = read_only_field()
    price: WooMoney = read_only_field()
    # Write-only: amount to refund for this line
    refund_total: WooMoney = None

    @classmethod
    def fake(cls) -> Self:
        return cls(
            id=FakeHelper.integer(1000),
            name=FakeHelper.word(),
            product_id=FakeHelper.integer(1000),
            variation_id=0,
            quantity=-FakeHelper.integer(3),
            subtotal=-FakeHelper.price(),
            total=-FakeHelper.price(),
            sku=FakeHelper.sku(),
            price=FakeHelper.price(),
        )


class WooOrderRefund(WooResourceModel):
    """Reembolso de un pedido"""

    date_created: WooDateTime = read_only_field()
    date_created_gmt: WooDateTime = read_only_field()
    amount: WooMoney = None
    reason: Optional[str] = None
    refunded_by: Optional[int] = None
    refunded_payment: Optional[bool] = read_only_field()
    meta_data: Optional[list[WooMetaData]] = None
    line_items: Optional[list[WooRefundLineItem]] = None
    # Write-only flags
    api_refund: Optional[bool] = None
    api_restock: Optional[bool] = None
    links: Optional[WooLinks] = read_only_field(alias="_links")

    @classmethod
    def fake(cls) -> Self:
        return cls(
            id=FakeHelper.integer(1000),
            date_created=FakeHelper.datetime(),
            date_created_gmt=FakeHelper.datetime(),
            amount=FakeHelper.price(),
            reason=FakeHelper.sentence(),
            refunded_by=FakeHelper.integer(),
            refunded_payment=FakeHelper.boolean(),
            meta_data=FakeHelper.list(WooMetaData.fake, 2),
            line_items=FakeHelper.list(WooRefundLineItem.fake, 3),
        )


class WooRefund(WooOrderRefund):
    """
    Reembolso leído desde el listado global `/refunds`.

    Además de los campos del reembolso de pedido trae el pedido al que
    pertenece (`parent_id`) y las líneas de impuestos, envío y cargos.
    """

    parent_id: Optional[int] = read_only_field()
    tax_lines: Optional[list[WooTaxLine]] = read_only_field()
    shipping_lines: Optional[list[WooShippingLine]] = read_only_field()
    fee_lines: Optional[list[WooFeeLine]] = read_only_field()

    @classmethod
    def fake(cls) -> Self:
        return cls.overlay(
            WooOrderRefund.fake(),
            cls(
                parent_id=FakeHelper.integer(10_000),
                tax_lines=FakeHelper.list(WooTaxLine.fake, 2),
                shipping_lines=FakeHelper.list(WooShippingLine.fake, 2),
                fee_lines=FakeHelper.list(WooFeeLine.fake, 2),
            ),
        )
