"""
API de variaciones de producto
"""

from collections.abc import Sequence
from datetime import datetime
from typing import Optional

from woocommerce_api.models.batch import WooProductVariationBatchRequest, WooProductVariationBatchResponse
from woocommerce_api.models.enums import (
    WooContext,
    WooFilterStatus,
    WooProductStockStatus,
    WooSortOrder,
    WooVariationOrderBy,
)
from woocommerce_api.models.variation import WooProductVariation

from .base import WooApiBase
from .endpoints import VariationEndpoints
from .query import build_variations_query


class VariationApiMixin(WooApiBase):
    async def get_product_variations(
        self,
        product_id: int,
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
        use_faker: Optional[bool] = None,
    ) -> list[WooProductVariation]:
        params = build_variations_query(
            context=context,
            page=page,
            per_page=per_page,
            search=search,
            after=after,
            before=before,
            exclude=exclude,
            include=include,
            offset=offset,
            order=order,
            orderby=orderby,
            parent=parent,
            parent_exclude=parent_exclude,
            slug=slug,
            status=status,
            sku=sku,
            tax_class=tax_class,
            on_sale=on_sale,
            min_price=min_price,
            max_price=max_price,
            stock_status=stock_status,
        )
        return await self._list(WooProductVariation, VariationEndpoints.collection(product_id), params, use_faker)

    async def get_product_variation(
        self, product_id: int, variation_id: int, use_faker: Optional[bool] = None
    ) -> WooProductVariation:
        return await self._retrieve(
            WooProductVariation,
            VariationEndpoints.by_id(product_id, variation_id),
            variation_id,
            use_faker=use_faker,
        )

    async def create_product_variation(
        self, product_id: int, variation: WooProductVariation, use_faker: Optional[bool] = None
    ) -> WooProductVariation:
        return await self._create(
            WooProductVariation, VariationEndpoints.collection(product_id), variation, use_faker
        )

    async def update_product_variation(
        self, product_id: int, variation: WooProductVariation, use_faker: Optional[bool] = None
    ) -> WooProductVariation:
        variation_id = self._require_id(variation, "product variation", "update")
        return await self._update(
            WooProductVariation, VariationEndpoints.by_id(product_id, variation_id), variation, use_faker
        )

    async def delete_product_variation(
        self,
        product_id: int,
        variation_id: int,
        force: bool = False,
        use_faker: Optional[bool] = None,
    ) -> WooProductVariation:
        return await self._delete(
            WooProductVariation,
            VariationEndpoints.by_id(product_id, variation_id),
            variation_id,
            params={"force": force},
            use_faker=use_faker,
        )

    async def batch_product_variations(
        self,
        product_id: int,
        request: WooProductVariationBatchRequest,
        use_faker: Optional[bool] = None,
    ) -> WooProductVariationBatchResponse:
        return await self._batch(
            WooProductVariation,
            WooProductVariationBatchResponse,
            VariationEndpoints.batch(product_id),
            request,
            use_faker,
        )
