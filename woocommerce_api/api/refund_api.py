"""
API de reembolsos globales (`/refunds`, todos los pedidos)
"""

from collections.abc import Sequence
from datetime import datetime
from typing import Optional

from woocommerce_api.models.enums import WooContext, WooRefundOrderBy, WooSortOrder
from woocommerce_api.models.order import WooRefund

from .base import WooApiBase
from .endpoints import RefundEndpoints
from .query import build_order_refunds_query


class RefundApiMixin(WooApiBase):
    async def get_refunds(
        self,
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
        dp: Optional[int] = None,
        use_faker: Optional[bool] = None,
    ) -> list[WooRefund]:
        """Mismos filtros que los reembolsos de un pedido; `parent` filtra por pedido."""
        params = build_order_refunds_query(
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
            dp=dp,
        )
        return await self._list(WooRefund, RefundEndpoints.collection(), params, use_faker)
