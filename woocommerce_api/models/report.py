"""
Modelos de reportes (solo lectura)
Responsabilidad: Ventas por período, más vendidos y totales por estado/tipo.
"""

from typing import Optional, Self

from woocommerce_api.utils.fake_helper import FakeHelper

from .base import WooBaseModel, WooLinks, WooMoney, read_only_field


class WooReportIndexEntry(WooBaseModel):
    """Entrada del índice `/reports`"""

    slug: Optional[str] = None
    description: Optional[str] = None
    links: Optional[WooLinks] = read_only_field(alias="_links")

    @classmethod
    def fake(cls) -> Self:
        return cls(
            slug=FakeHelper.random_item(["sales", "top_sellers", "orders/totals", "coupons/totals"]),
            description=FakeHelper.sentence(),
        )


class WooSalesReportTotals(WooBaseModel):
    """Totales de un intervalo (día o mes) del reporte de ventas"""

    sales: WooMoney = None
    orders: Optional[int] = None
    items: Optional[int] = None
    tax: WooMoney = None
    shipping: WooMoney = None
    discount: WooMoney = None
    customers: Optional[int] = None

    @classmethod
    def fake(cls) -> Self:
        return cls(
            sales=FakeHelper.price(),
            orders=FakeHelper.integer(50, 0),
            items=FakeHelper.integer(100, 0),
            tax=FakeHelper.decimal(20),
            shipping=FakeHelper.decimal(20),
            discount=FakeHelper.decimal(10),
            customers=FakeHelper.integer(20, 0),
        )


class WooSalesReport(WooBaseModel):
    """Reporte de ventas; `totals` se indexa por fecha (`2024-01-31` o `2024-01`)"""

    total_sales: WooMoney = None
    net_sales: WooMoney = None
    average_sales: WooMoney = None
    total_orders: Optional[int] = None
    total_items: Optional[int] = None
    total_tax: WooMoney = None
    total_shipping: WooMoney = None
    total_refunds: WooMoney = None
    total_discount: WooMoney = None
    totals_grouped_by: Optional[str] = None
    totals: Optional[dict[str, WooSalesReportTotals]] = None
    total_customers: Optional[int] = None
    links: Optional[WooLinks] = read_only_field(alias="_links")

    @classmethod
    def fake(cls) -> Self:
        totals = {FakeHelper.datetime().date().isoformat(): WooSalesReportTotals.fake() for _ in range(3)}
        total_sales = round(sum(item.sales or 0 for item in totals.values()), 2)
        return cls(
            total_sales=total_sales,
            net_sales=total_sales,
            average_sales=round(total_sales / len(totals), 2),
            total_orders=sum(item.orders or 0 for item in totals.values()),
            total_items=sum(item.items or 0 for item in totals.values()),
            total_tax=0.0,
            total_shipping=0.0,
            total_refunds=0.0,
            total_discount=0.0,
            totals_grouped_by="day",
            totals=totals,
            total_customers=sum(item.customers or 0 for item in totals.values()),
        )


class WooTopSellerReport(WooBaseModel):
    """Producto más vendido en el período"""

    title: Optional[str] = None
    product_id: Optional[int] = None
    quantity: Optional[int] = None
    links: Optional[WooLinks] = read_only_field(alias="_links")

    @classmethod
    def fake(cls) -> Self:
        return cls(
            title=FakeHelper.word().title(),
            product_id=FakeHelper.integer(1000),
            quantity=FakeHelper.integer(50),
        )


class WooReportTotal(WooBaseModel):
    """
    Fila de los reportes de totales (`/reports/<recurso>/totals`).

    `slug` es el estado, tipo o rol agrupado (`processing`, `simple`,
    `paying`, ...).
    """

    slug: Optional[str] = None
    name: Optional[str] = None
    total: Optional[int] = None

    @classmethod
    def fake(cls) -> Self:
        slug = FakeHelper.slug()
        return cls(slug=slug, name=slug.replace("-", " ").title(), total=FakeHelper.integer(100, 0))
