"""
API de pedidos
"""

import logging
from collections.abc import Sequence
from datetime import datetime
from typing import Optional

from woocommerce_api.models.batch import WooOrderBatchRequest, WooOrderBatchResponse
from woocommerce_api.models.enums import WooContext, WooOrderOrderBy, WooOrderStatus, WooSortOrder
from woocommerce_api.models.order import WooOrder

from .base import WooApiBase
from .endpoints import OrderEndpoints
from .query import QueryParams, build_orders_query

logger = logging.getLogger(__name__)


class OrderApiMixin(WooApiBase):
    async def get_orders(
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
        orderby: WooOrderOrderBy = WooOrderOrderBy.DATE,
        parent: Optional[Sequence[int]] = None,
        parent_exclude: Optional[Sequence[int]] = None,
        status: Sequence[WooOrderStatus] = (WooOrderStatus.ANY,),
        customer: Optional[int] = None,
        product: Optional[int] = None,
        dp: Optional[int] = None,
        use_faker: Optional[bool] = None,
    ) -> list[WooOrder]:
        """
        Una página de pedidos.

        `status` acepta varios estados; se envían separados por comas.
        """
        params = build_orders_query(
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
            status=status,
            customer=customer,
            product=product,
            dp=dp,
        )
        return await self._list(WooOrder, OrderEndpoints.collection(), params, use_faker)

    async def get_order(self, order_id: int, use_faker: Optional[bool] = None) -> WooOrder:
        return await self._retrieve(WooOrder, OrderEndpoints.by_id(order_id), order_id, use_faker=use_faker)

    async def create_order(self, order: WooOrder, use_faker: Optional[bool] = None) -> WooOrder:
        return await self._create(WooOrder, OrderEndpoints.collection(), order, use_faker)

    async def update_order(self, order: WooOrder, use_faker: Optional[bool] = None) -> WooOrder:
        order_id = self._require_id(order, "order", "update")
        return await self._update(WooOrder, OrderEndpoints.by_id(order_id), order, use_faker)

    async def delete_order(self, order_id: int, force: bool = False, use_faker: Optional[bool] = None) -> WooOrder:
        """Con force=False el pedido va a la papelera."""
        return await self._delete(
            WooOrder, OrderEndpoints.by_id(order_id), order_id, params={"force": force}, use_faker=use_faker
        )

    async def batch_orders(
        self, request: WooOrderBatchRequest, use_faker: Optional[bool] = None
    ) -> WooOrderBatchResponse:
        return await self._batch(WooOrder, WooOrderBatchResponse, OrderEndpoints.batch(), request, use_faker)

    async def send_order_details_to_customer(
        self,
        order_id: int,
        email: Optional[str] = None,
        force_email_update: Optional[bool] = None,
        use_faker: Optional[bool] = None,
    ) -> str:
        """
        Envía al cliente el email con el detalle del pedido.

        Returns:
            Mensaje devuelto por WooCommerce
        """
        if self._is_using_faker(use_faker):
            logger.debug(f"faker: send order details {order_id}")
            return f"Order details sent to {email or 'woo@example.com'}, via REST API."

        body = QueryParams().optional("email", email).optional("force_email_update", force_email_update)
        data = await self._get_http_client().post(OrderEndpoints.send_details(order_id), json=dict(body))
        return (data or {}).get("message", "")
