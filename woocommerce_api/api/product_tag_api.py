"""
API de tags de producto
"""

from collections.abc import Sequence
from typing import Optional

from woocommerce_api.models.batch import WooProductTagBatchRequest, WooProductTagBatchResponse
from woocommerce_api.models.category import WooProductTag
from woocommerce_api.models.enums import WooContext, WooProductTagOrderBy, WooSortOrder

from .base import WooApiBase
from .endpoints import ProductTagEndpoints
from .query import build_product_tags_query


class ProductTagApiMixin(WooApiBase):
    async def get_product_tags(
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
    ) -> list[WooProductTag]:
        params = build_product_tags_query(
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
        return await self._list(WooProductTag, ProductTagEndpoints.collection(), params, use_faker)

    async def get_product_tag(self, tag_id: int, use_faker: Optional[bool] = None) -> WooProductTag:
        return await self._retrieve(WooProductTag, ProductTagEndpoints.by_id(tag_id), tag_id, use_faker=use_faker)

    async def create_product_tag(self, tag: WooProductTag, use_faker: Optional[bool] = None) -> WooProductTag:
        return await self._create(WooProductTag, ProductTagEndpoints.collection(), tag, use_faker)

    async def update_product_tag(self, tag: WooProductTag, use_faker: Optional[bool] = None) -> WooProductTag:
        tag_id = self._require_id(tag, "product tag", "update")
        return await self._update(WooProductTag, ProductTagEndpoints.by_id(tag_id), tag, use_faker)

    async def delete_product_tag(self, tag_id: int, use_faker: Optional[bool] = None) -> WooProductTag:
        """Los tags no admiten papelera: siempre force=true."""
        return await self._delete(
            WooProductTag, ProductTagEndpoints.by_id(tag_id), tag_id, params={"force": True}, use_faker=use_faker
        )

    async def batch_product_tags(
        self, request: WooProductTagBatchRequest, use_faker: Optional[bool] = None
    ) -> WooProductTagBatchResponse:
        return await self._batch(
            WooProductTag, WooProductTagBatchResponse, ProductTagEndpoints.batch(), request, use_faker
        )
