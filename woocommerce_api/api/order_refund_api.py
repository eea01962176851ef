"""
API de reembolsos de pedido

Los reembolsos no admiten papelera: el borrado siempre envía force=true.
"""

from collections.abc import Sequence
from datetime import datetime
from typing import Optional

from woocommerce_api.models.enums import WooContext, WooRefundOrderBy, WooSortOrder
from woocommerce_api.models.order import WooOrderRefund

from .base import WooApiBase
from .endpoints import OrderRefundEndpoints
from .query import QueryParams, build_order_refunds_query


class OrderRefundApiMixin(WooApiBase):
    async def get_order_refunds(
        self,
        order_id: int,
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
        use_faker: Optional[bool] = None,
    ) -> list[WooOrderRefund]:
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
        return await self._list(WooOrderRefund, OrderRefundEndpoints.collection(order_id), params, use_faker)

    async def get_order_refund(
        self,
        order_id: int,
        refund_id: int,
        dp: Optional[int] = None,
        use_faker: Optional[bool] = None,
    ) -> WooOrderRefund:
        """`dp`: decimales de los importes en la respuesta."""
        params = QueryParams().optional("dp", dp)
        return await self._retrieve(
            WooOrderRefund,
            OrderRefundEndpoints.by_id(order_id, refund_id),
            refund_id,
            params=params or None,
            use_faker=use_faker,
        )

    async def create_order_refund(
        self, order_id: int, refund: WooOrderRefund, use_faker: Optional[bool] = None
    ) -> WooOrderRefund:
        return await self._create(WooOrderRefund, OrderRefundEndpoints.collection(order_id), refund, use_faker)

    async def delete_order_refund(
        self, order_id: int, refund_id: int, use_faker: Optional[bool] = None
    ) -> WooOrderRefund:
        return await self._delete(
            WooOrderRefund,
            OrderRefundEndpoints.by_id(order_id, refund_id),
            refund_id,
            params={"force": True},
            use_faker=use_faker,
        )
