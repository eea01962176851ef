"""
API de categorías de producto
"""

from collections.abc import Sequence
from typing import Optional

from woocommerce_api.models.batch import WooProductCategoryBatchRequest, WooProductCategoryBatchResponse
from woocommerce_api.models.category import WooProductCategory
from woocommerce_api.models.enums import WooCategoryOrderBy, WooContext, WooSortOrder

from .base import WooApiBase
from .endpoints import CategoryEndpoints
from .query import build_categories_query


class CategoryApiMixin(WooApiBase):
    async def get_categories(
        self,
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
        use_faker: Optional[bool] = None,
    ) -> list[WooProductCategory]:
        """Una página de categorías (no pagina automáticamente)."""
        params = build_categories_query(
            context=context,
            page=page,
            per_page=per_page,
            search=search,
            exclude=exclude,
            include=include,
            order=order,
            orderby=orderby,
            hide_empty=hide_empty,
            parent=parent,
            product=product,
            slug=slug,
        )
        return await self._list(WooProductCategory, CategoryEndpoints.collection(), params, use_faker)

    async def get_category(self, category_id: int, use_faker: Optional[bool] = None) -> WooProductCategory:
        return await self._retrieve(
            WooProductCategory, CategoryEndpoints.by_id(category_id), category_id, use_faker=use_faker
        )

    async def create_category(
        self, category: WooProductCategory, use_faker: Optional[bool] = None
    ) -> WooProductCategory:
        return await self._create(WooProductCategory, CategoryEndpoints.collection(), category, use_faker)

    async def update_category(
        self, category: WooProductCategory, use_faker: Optional[bool] = None
    ) -> WooProductCategory:
        category_id = self._require_id(category, "category", "update")
        return await self._update(WooProductCategory, CategoryEndpoints.by_id(category_id), category, use_faker)

    async def delete_category(
        self, category_id: int, force: bool = False, use_faker: Optional[bool] = None
    ) -> WooProductCategory:
        return await self._delete(
            WooProductCategory,
            CategoryEndpoints.by_id(category_id),
            category_id,
            params={"force": force},
            use_faker=use_faker,
        )

    async def batch_categories(
        self, request: WooProductCategoryBatchRequest, use_faker: Optional[bool] = None
    ) -> WooProductCategoryBatchResponse:
        return await self._batch(
            WooProductCategory,
            WooProductCategoryBatchResponse,
            CategoryEndpoints.batch(),
            request,
            use_faker,
        )
