"""
API de productos
"""

import logging
from collections.abc import Sequence
from datetime import datetime
from typing import Optional

from woocommerce_api.models.batch import WooProductBatchRequest, WooProductBatchResponse
from woocommerce_api.models.enums import (
    WooContext,
    WooFilterStatus,
    WooProductFilterWithType,
    WooProductSortOrderBy,
    WooProductStockStatus,
    WooProductType,
    WooSortOrder,
)
from woocommerce_api.models.product import WooProduct, WooProductWithChildren

from .base import WooApiBase
from .endpoints import ProductEndpoints
from .query import build_product_with_options_query, build_products_query

logger = logging.getLogger(__name__)


class ProductApiMixin(WooApiBase):
    async def get_products(
        self,
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
        use_faker: Optional[bool] = None,
    ) -> list[WooProduct]:
        """
        Una página de productos.

        Para recorrer todo el catálogo, incrementar `page` hasta recibir
        una lista vacía.
        """
        params = build_products_query(
            context=context,
            page=page,
            per_page=per_page,
            search=search,
            after=after,
            before=before,
            modified_after=modified_after,
            modified_before=modified_before,
            dates_are_gmt=dates_are_gmt,
            exclude=exclude,
            include=include,
            offset=offset,
            order=order,
            orderby=orderby,
            parent=parent,
            parent_exclude=parent_exclude,
            slug=slug,
            status=status,
            type=type,
            sku=sku,
            featured=featured,
            category=category,
            tag=tag,
            shipping_class=shipping_class,
            attribute=attribute,
            attribute_term=attribute_term,
            tax_class=tax_class,
            on_sale=on_sale,
            min_price=min_price,
            max_price=max_price,
            stock_status=stock_status,
        )
        return await self._list(WooProduct, ProductEndpoints.collection(), params, use_faker)

    async def get_product(self, product_id: int, use_faker: Optional[bool] = None) -> WooProduct:
        return await self._retrieve(WooProduct, ProductEndpoints.by_id(product_id), product_id, use_faker=use_faker)

    async def get_product_with_options(
        self,
        product: WooProduct,
        types: Sequence[WooProductFilterWithType],
        use_faker: Optional[bool] = None,
    ) -> WooProductWithChildren:
        """
        Trae en un solo GET el producto y los productos relacionados elegidos.

        Args:
            product: Producto principal (debe tener id)
            types: Listas de relación a incluir (related_ids, upsell_ids, ...)

        Returns:
            WooProductWithChildren con los productos repartidos por relación
        """
        self._require_id(product, "product", "expand")

        if self._is_using_faker(use_faker):
            logger.debug(f"faker: product with options {product.id}")
            return WooProductWithChildren.fake().model_copy(update={"main_product": product})

        params = build_product_with_options_query(product, types)
        data = await self._get_http_client().get(ProductEndpoints.collection(), params=params)
        products = [WooProduct.from_dict(item) for item in data or []]
        return WooProductWithChildren.from_products(products, product)

    async def create_product(self, product: WooProduct, use_faker: Optional[bool] = None) -> WooProduct:
        return await self._create(WooProduct, ProductEndpoints.collection(), product, use_faker)

    async def duplicate_product(self, product_id: int, use_faker: Optional[bool] = None) -> WooProduct:
        """Clona el producto en el servidor; devuelve la copia con su nuevo id."""
        return await self._post_action(WooProduct, ProductEndpoints.duplicate(product_id), use_faker=use_faker)

    async def update_product(self, product: WooProduct, use_faker: Optional[bool] = None) -> WooProduct:
        product_id = self._require_id(product, "product", "update")
        return await self._update(WooProduct, ProductEndpoints.by_id(product_id), product, use_faker)

    async def delete_product(
        self, product_id: int, force: bool = False, use_faker: Optional[bool] = None
    ) -> WooProduct:
        return await self._delete(
            WooProduct, ProductEndpoints.by_id(product_id), product_id, params={"force": force}, use_faker=use_faker
        )

    async def batch_products(
        self, request: WooProductBatchRequest, use_faker: Optional[bool] = None
    ) -> WooProductBatchResponse:
        return await self._batch(WooProduct, WooProductBatchResponse, ProductEndpoints.batch(), request, use_faker)
