"""
Constructores de query params para los listados.

Responsabilidad: Traducir filtros opcionales a un dict plano con los nombres
exactos que espera WooCommerce (`per_page`, `orderby`, `hide_empty`, ...).
Funciones puras y deterministas.
"""

from collections.abc import Sequence
from datetime import date, datetime
from enum import Enum
from typing import Any, Optional

from woocommerce_api.models.enums import (
    WooCategoryOrderBy,
    WooContext,
    WooCouponOrderBy,
    WooCustomerOrderBy,
    WooCustomerRole,
    WooFilterStatus,
    WooOrderNoteType,
    WooOrderOrderBy,
    WooOrderStatus,
    WooProductFilterWithType,
    WooProductReviewFilterStatus,
    WooProductReviewOrderBy,
    WooProductSortOrderBy,
    WooProductStockStatus,
    WooProductTagOrderBy,
    WooProductType,
    WooRefundOrderBy,
    WooReportPeriod,
    WooSortOrder,
    WooTaxRateOrderBy,
    WooVariationOrderBy,
    WooWebhookFilterStatus,
    WooWebhookOrderBy,
)

MAX_PER_PAGE = 100


def to_query_value(value: Any) -> Any:
    """Convert a filter value to its wire representation."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, (list, tuple, set, frozenset)):
        return ",".join(str(to_query_value(item)) for item in value)
    return value


class QueryParams(dict):
    """Flat `name -> value` map; `optional` skips None values."""

    def required(self, name: str, value: Any) -> "QueryParams":
        self[name] = to_query_value(value)
        return self

    def optional(self, name: str, value: Any) -> "QueryParams":
        if value is not None:
            self[name] = to_query_value(value)
        return self


def validate_paging(page: int, per_page: int) -> None:
    if page < 1:
        raise ValueError(f"page must be >= 1, got {page}")
    if not 1 <= per_page <= MAX_PER_PAGE:
        raise ValueError(f"per_page must be between 1 and {MAX_PER_PAGE}, got {per_page}")


def _base_query(
    context: WooContext,
    page: int,
    per_page: int,
    order: WooSortOrder,
    orderby: Any,
) -> QueryParams:
    validate_paging(page, per_page)
    return (
        QueryParams()
        .required("context", context)
        .required("page", page)
        .required("per_page", per_page)
        .required("order", order)
        .required("orderby", orderby)
    )


# ============================================================================
# Catálogo
# ============================================================================


def build_categories_query(
    context: WooContext = WooContext.VIEW,
    page: int = 1,
    per_page: int = 10,
    search: Optional[str] = None,
    exclude: Optional[Sequence[int]] = None,
    include: Optional[Sequence[int]] = None,
    order: WooSortOrder = WooSortOrder.DESC,
    orderby: WooCategoryOrderBy = WooCategoryOrderBy.NAME,
    hide_empty: Optional[bool] = None,
    parent: Optional[int] = None,
    product: Optional[int] = None,
    slug: Optional[str] = None,
) -> QueryParams:
    return (
        _base_query(context, page, per_page, order, orderby)
        .optional("search", search)
        .optional("exclude", exclude)
        .optional("include", include)
        .optional("hide_empty", hide_empty)
        .optional("parent", parent)
        .optional("product", product)
        .optional("slug", slug)
    )


def build_product_tags_query(
    context: WooContext = WooContext.VIEW,
    page: int = 1,
    per_page: int = 10,
    search: Optional[str] = None,
    exclude: Optional[Sequence[int]] = None,
    include: Optional[Sequence[int]] = None,
    offset: Optional[int] = None,
    order: WooSortOrder = WooSortOrder.DESC,
    orderby: WooProductTagOrderBy = WooProductTagOrderBy.NAME,
    hide_empty: Optional[bool] = None,
    product: Optional[int] = None,
    slug: Optional[str] = None,
) -> QueryParams:
    """Tags and shipping classes take the same filters."""
    return (
        _base_query(context, page, per_page, order, orderby)
        .optional("search", search)
        .optional("exclude", exclude)
        .optional("include", include)
        .optional("offset", offset)
        .optional("hide_empty", hide_empty)
        .optional("product", product)
        .optional("slug", slug)
    )


build_product_shipping_classes_query = build_product_tags_query


def build_products_query(
    context: WooContext = WooContext.VIEW,
    page: int = 1,
    per_page: int = 10,
    search: Optional[str] = None,
    after: Optional[datetime] = None,
    before: Optional[datetime] = None,
    modified_after: Optional[datetime] = None,
    modified_before: Optional[datetime] = None,
    dates_are_gmt: Optional[bool] = None,
    exclude: Optional[Sequence[int]] = None,
    include: Optional[Sequence[int]] = None,
    offset: Optional[int] = None,
    order: WooSortOrder = WooSortOrder.DESC,
    orderby: WooProductSortOrderBy = WooProductSortOrderBy.DATE,
    parent: Optional[Sequence[int]] = None,
    parent_exclude: Optional[Sequence[int]] = None,
    slug: Optional[str] = None,
    status: WooFilterStatus = WooFilterStatus.ANY,
    type: Optional[WooProductType] = None,
    sku: Optional[str] = None,
    featured: Optional[bool] = None,
    category: Optional[int] = None,
    tag: Optional[int] = None,
    shipping_class: Optional[int] = None,
    attribute: Optional[str] = None,
    attribute_term: Optional[str] = None,
    tax_class: Optional[str] = None,
    on_sale: Optional[bool] = None,
    min_price: Optional[float] = None,
    max_price: Optional[float] = None,
    stock_status: Optional[WooProductStockStatus] = None,
) -> QueryParams:
    return (
        _base_query(context, page, per_page, order, orderby)
        .required("status", status)
        .optional("search", search)
        .optional("after", after)
        .optional("before", before)
        .optional("modified_after", modified_after)
        .optional("modified_before", modified_before)
        .optional("dates_are_gmt", dates_are_gmt)
        .optional("exclude", exclude)
        .optional("include", include)
        .optional("offset", offset)
        .optional("parent", parent)
        .optional("parent_exclude", parent_exclude)
        .optional("slug", slug)
        .optional("type", type)
        .optional("sku", sku)
        .optional("featured", featured)
        .optional("category", category)
        .optional("tag", tag)
        .optional("shipping_class", shipping_class)
        .optional("attribute", attribute)
        .optional("attribute_term", attribute_term)
        .optional("tax_class", tax_class)
        .optional("on_sale", on_sale)
        .optional("min_price", min_price)
        .optional("max_price", max_price)
        .optional("stock_status", stock_status)
    )


def build_variations_query(
    context: WooContext = WooContext.VIEW,
    page: int = 1,
    per_page: int = 10,
    search: Optional[str] = None,
    after: Optional[datetime] = None,
    before: Optional[datetime] = None,
    exclude: Optional[Sequence[int]] = None,
    include: Optional[Sequence[int]] = None,
    offset: Optional[int] = None,
    order: WooSortOrder = WooSortOrder.DESC,
    orderby: WooVariationOrderBy = WooVariationOrderBy.DATE,
    parent: Optional[Sequence[int]] = None,
    parent_exclude: Optional[Sequence[int]] = None,
    slug: Optional[str] = None,
    status: WooFilterStatus = WooFilterStatus.ANY,
    sku: Optional[str] = None,
    tax_class: Optional[str] = None,
    on_sale: Optional[bool] = None,
    min_price: Optional[float] = None,
    max_price: Optional[float] = None,
    stock_status: Optional[WooProductStockStatus] = None,
) -> QueryParams:
    return (
        _base_query(context, page, per_page, order, orderby)
        .required("status", status)
        .optional("search", search)
        .optional("after", after)
        .optional("before", before)
        .optional("exclude", exclude)
        .optional("include", include)
        .optional("offset", offset)
        .optional("parent", parent)
        .optional("parent_exclude", parent_exclude)
        .optional("slug", slug)
        .optional("sku", sku)
        .optional("tax_class", tax_class)
        .optional("on_sale", on_sale)
        .optional("min_price", min_price)
        .optional("max_price", max_price)
        .optional("stock_status", stock_status)
    )


def build_product_reviews_query(
    context: WooContext = WooContext.VIEW,
    page: int = 1,
    per_page: int = 10,
    search: Optional[str] = None,
    after: Optional[datetime] = None,
    before: Optional[datetime] = None,
    exclude: Optional[Sequence[int]] = None,
    include: Optional[Sequence[int]] = None,
    offset: Optional[int] = None,
    order: WooSortOrder = WooSortOrder.DESC,
    orderby: WooProductReviewOrderBy = WooProductReviewOrderBy.DATE_GMT,
    reviewer: Optional[Sequence[int]] = None,
    reviewer_exclude: Optional[Sequence[int]] = None,
    reviewer_email: Optional[Sequence[str]] = None,
    product: Optional[Sequence[int]] = None,
    status: WooProductReviewFilterStatus = WooProductReviewFilterStatus.APPROVED,
) -> QueryParams:
    return (
        _base_query(context, page, per_page, order, orderby)
        .required("status", status)
        .optional("search", search)
        .optional("after", after)
        .optional("before", before)
        .optional("exclude", exclude)
        .optional("include", include)
        .optional("offset", offset)
        .optional("reviewer", reviewer)
        .optional("reviewer_exclude", reviewer_exclude)
        .optional("reviewer_email", reviewer_email)
        .optional("product", product)
    )


# ============================================================================
# Ventas
# ============================================================================


def build_coupons_query(
    context: WooContext = WooContext.VIEW,
    page: int = 1,
    per_page: int = 10,
    search: Optional[str] = None,
    after: Optional[datetime] = None,
    before: Optional[datetime] = None,
    modified_after: Optional[datetime] = None,
    modified_before: Optional[datetime] = None,
    dates_are_gmt: Optional[bool] = None,
    exclude: Optional[Sequence[int]] = None,
    include: Optional[Sequence[int]] = None,
    offset: Optional[int] = None,
    order: WooSortOrder = WooSortOrder.DESC,
    orderby: WooCouponOrderBy = WooCouponOrderBy.DATE,
    code: Optional[str] = None,
) -> QueryParams:
    return (
        _base_query(context, page, per_page, order, orderby)
        .optional("search", search)
        .optional("after", after)
        .optional("before", before)
        .optional("modified_after", modified_after)
        .optional("modified_before", modified_before)
        .optional("dates_are_gmt", dates_are_gmt)
        .optional("exclude", exclude)
        .optional("include", include)
        .optional("offset", offset)
        .optional("code", code)
    )


def build_customers_query(
    context: WooContext = WooContext.VIEW,
    page: int = 1,
    per_page: int = 10,
    search: Optional[str] = None,
    exclude: Optional[Sequence[int]] = None,
    include: Optional[Sequence[int]] = None,
    offset: Optional[int] = None,
    order: WooSortOrder = WooSortOrder.ASC,
    orderby: WooCustomerOrderBy = WooCustomerOrderBy.NAME,
    email: Optional[str] = None,
    role: WooCustomerRole = WooCustomerRole.CUSTOMER,
) -> QueryParams:
    return (
        _base_query(context, page, per_page, order, orderby)
        .required("role", role)
        .optional("search", search)
        .optional("exclude", exclude)
        .optional("include", include)
        .optional("offset", offset)
        .optional("email", email)
    )


def build_orders_query(
    context: WooContext = WooContext.VIEW,
    page: int = 1,
    per_page: int = 10,
    search: Optional[str] = None,
    after: Optional[datetime] = None,
    before: Optional[datetime] = None,
    modified_after: Optional[datetime] = None,
    modified_before: Optional[datetime] = None,
    dates_are_gmt: Optional[bool] = None,
    exclude: Optional[Sequence[int]] = None,
    include: Optional[Sequence[int]] = None,
    offset: Optional[int] = None,
    order: WooSortOrder = WooSortOrder.DESC,
    orderby: WooOrderOrderBy = WooOrderOrderBy.DATE,
    parent: Optional[Sequence[int]] = None,
    parent_exclude: Optional[Sequence[int]] = None,
    status: Sequence[WooOrderStatus] = (WooOrderStatus.ANY,),
    customer: Optional[int] = None,
    product: Optional[int] = None,
    dp: Optional[int] = None,
) -> QueryParams:
    return (
        _base_query(context, page, per_page, order, orderby)
        .required("status", status)
        .optional("search", search)
        .optional("after", after)
        .optional("before", before)
        .optional("modified_after", modified_after)
        .optional("modified_before", modified_before)
        .optional("dates_are_gmt", dates_are_gmt)
        .optional("exclude", exclude)
        .optional("include", include)
        .optional("offset", offset)
        .optional("parent", parent)
        .optional("parent_exclude", parent_exclude)
        .optional("customer", customer)
        .optional("product", product)
        .optional("dp", dp)
    )


def build_order_notes_query(
    context: WooContext = WooContext.VIEW,
    type: WooOrderNoteType = WooOrderNoteType.ANY,
) -> QueryParams:
    """Order notes are not paginated."""
    return QueryParams().required("context", context).required("type", type)


def build_order_refunds_query(
    context: WooContext = WooContext.VIEW,
    page: int = 1,
    per_page: int = 10,
    search: Optional[str] = None,
    after: Optional[datetime] = None,
    before: Optional[datetime] = None,
    exclude: Optional[Sequence[int]] = None,
    include: Optional[Sequence[int]] = None,
    offset: Optional[int] = None,
    order: WooSortOrder = WooSortOrder.DESC,
    orderby: WooRefundOrderBy = WooRefundOrderBy.DATE,
    parent: Optional[Sequence[int]] = None,
    parent_exclude: Optional[Sequence[int]] = None,
    dp: Optional[int] = 2,
) -> QueryParams:
    return (
        _base_query(context, page, per_page, order, orderby)
        .optional("search", search)
        .optional("after", after)
        .optional("before", before)
        .optional("exclude", exclude)
        .optional("include", include)
        .optional("offset", offset)
        .optional("parent", parent)
        .optional("parent_exclude", parent_exclude)
        .optional("dp", dp)
    )


def collect_product_option_ids(product: Any, types: Sequence[WooProductFilterWithType]) -> list[int]:
    """
    Product id followed by the ids of the selected relationship lists,
    de-duplicated in first-seen order.
    """
    ids: list[int] = [product.id]
    for option in types:
        if option == WooProductFilterWithType.PARENT_ID:
            if product.parent_id:
                ids.append(product.parent_id)
        else:
            ids.extend(getattr(product, option.value) or [])
    return list(dict.fromkeys(ids))


def build_product_with_options_query(product: Any, types: Sequence[WooProductFilterWithType]) -> QueryParams:
    ids = collect_product_option_ids(product, types)
    return QueryParams().required("include", ids).required("per_page", min(len(ids), MAX_PER_PAGE))


# ============================================================================
# Tienda
# ============================================================================


def build_webhooks_query(
    context: WooContext = WooContext.VIEW,
    page: int = 1,
    per_page: int = 10,
    search: Optional[str] = None,
    after: Optional[datetime] = None,
    before: Optional[datetime] = None,
    exclude: Optional[Sequence[int]] = None,
    include: Optional[Sequence[int]] = None,
    offset: Optional[int] = None,
    order: WooSortOrder = WooSortOrder.DESC,
    orderby: WooWebhookOrderBy = WooWebhookOrderBy.DATE,
    status: WooWebhookFilterStatus = WooWebhookFilterStatus.ALL,
) -> QueryParams:
    return (
        _base_query(context, page, per_page, order, orderby)
        .required("status", status)
        .optional("search", search)
        .optional("after", after)
        .optional("before", before)
        .optional("exclude", exclude)
        .optional("include", include)
        .optional("offset", offset)
    )


def build_tax_rates_query(
    context: WooContext = WooContext.VIEW,
    page: int = 1,
    per_page: int = 10,
    offset: Optional[int] = None,
    order: WooSortOrder = WooSortOrder.ASC,
    orderby: WooTaxRateOrderBy = WooTaxRateOrderBy.ORDER,
    tax_class: Optional[str] = None,
) -> QueryParams:
    """`tax_class` travels as `class`."""
    return (
        _base_query(context, page, per_page, order, orderby)
        .optional("offset", offset)
        .optional("class", tax_class)
    )


def build_report_query(
    context: WooContext = WooContext.VIEW,
    period: Optional[WooReportPeriod] = None,
    date_min: Optional[date] = None,
    date_max: Optional[date] = None,
) -> QueryParams:
    """
    Sales and top-sellers reports are not paginated.

    `period` and the `date_min` / `date_max` range are alternatives; the
    server prefers the range when both are sent.
    """
    if isinstance(date_min, datetime):
        date_min = date_min.date()
    if isinstance(date_max, datetime):
        date_max = date_max.date()
    return (
        QueryParams()
        .required("context", context)
        .optional("period", period)
        .optional("date_min", date_min)
        .optional("date_max", date_max)
    )
