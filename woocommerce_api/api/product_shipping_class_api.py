"""
API de clases de envío
"""

from collections.abc import Sequence
from typing import Optional

from woocommerce_api.models.batch import (
    WooProductShippingClassBatchRequest,
    WooProductShippingClassBatchResponse,
)
from woocommerce_api.models.category import WooProductShippingClass
from woocommerce_api.models.enums import WooContext, WooProductTagOrderBy, WooSortOrder

from .base import WooApiBase
from .endpoints import ProductShippingClassEndpoints
from .query import build_product_shipping_classes_query


class ProductShippingClassApiMixin(WooApiBase):
    async def get_product_shipping_classes(
        self,
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
        use_faker: Optional[bool] = None,
    ) -> list[WooProductShippingClass]:
        params = build_product_shipping_classes_query(
            context=context,
            page=page,
            per_page=per_page,
            search=search,
            exclude=exclude,
            include=include,
            offset=offset,
            order=order,
            orderby=orderby,
            hide_empty=hide_empty,
            product=product,
            slug=slug,
        )
        return await self._list(
            WooProductShippingClass, ProductShippingClassEndpoints.collection(), params, use_faker
        )

    async def get_product_shipping_class(
        self, shipping_class_id: int, use_faker: Optional[bool] = None
    ) -> WooProductShippingClass:
        return await self._retrieve(
            WooProductShippingClass,
            ProductShippingClassEndpoints.by_id(shipping_class_id),
            shipping_class_id,
            use_faker=use_faker,
        )

    async def create_product_shipping_class(
        self, shipping_class: WooProductShippingClass, use_faker: Optional[bool] = None
    ) -> WooProductShippingClass:
        return await self._create(
            WooProductShippingClass, ProductShippingClassEndpoints.collection(), shipping_class, use_faker
        )

    async def update_product_shipping_class(
        self, shipping_class: WooProductShippingClass, use_faker: Optional[bool] = None
    ) -> WooProductShippingClass:
        shipping_class_id = self._require_id(shipping_class, "shipping class", "update")
        return await self._update(
            WooProductShippingClass,
            ProductShippingClassEndpoints.by_id(shipping_class_id),
            shipping_class,
            use_faker,
        )

    async def delete_product_shipping_class(
        self, shipping_class_id: int, use_faker: Optional[bool] = None
    ) -> WooProductShippingClass:
        return await self._delete(
            WooProductShippingClass,
            ProductShippingClassEndpoints.by_id(shipping_class_id),
            shipping_class_id,
            params={"force": True},
            use_faker=use_faker,
        )

    async def batch_product_shipping_classes(
        self, request: WooProductShippingClassBatchRequest, use_faker: Optional[bool] = None
    ) -> WooProductShippingClassBatchResponse:
        return await self._batch(
            WooProductShippingClass,
            WooProductShippingClassBatchResponse,
            ProductShippingClassEndpoints.batch(),
            request,
            use_faker,
        )
