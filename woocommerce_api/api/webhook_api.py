"""
API de webhooks

WooCommerce no manda los webhooks a la papelera: el borrado siempre envía
force=true.
"""

from collections.abc import Sequence
from datetime import datetime
from typing import Optional

from woocommerce_api.models.batch import WooWebhookBatchRequest, WooWebhookBatchResponse
from woocommerce_api.models.enums import WooContext, WooSortOrder, WooWebhookFilterStatus, WooWebhookOrderBy
from woocommerce_api.models.webhook import WooWebhook

from .base import WooApiBase
from .endpoints import WebhookEndpoints
from .query import build_webhooks_query


class WebhookApiMixin(WooApiBase):
    async def get_webhooks(
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
        orderby: WooWebhookOrderBy = WooWebhookOrderBy.DATE,
        status: WooWebhookFilterStatus = WooWebhookFilterStatus.ALL,
        use_faker: Optional[bool] = None,
    ) -> list[WooWebhook]:
        params = build_webhooks_query(
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
            status=status,
        )
        return await self._list(WooWebhook, WebhookEndpoints.collection(), params, use_faker)

    async def get_webhook(self, webhook_id: int, use_faker: Optional[bool] = None) -> WooWebhook:
        return await self._retrieve(WooWebhook, WebhookEndpoints.by_id(webhook_id), webhook_id, use_faker=use_faker)

    async def create_webhook(self, webhook: WooWebhook, use_faker: Optional[bool] = None) -> WooWebhook:
        return await self._create(WooWebhook, WebhookEndpoints.collection(), webhook, use_faker)

    async def update_webhook(self, webhook: WooWebhook, use_faker: Optional[bool] = None) -> WooWebhook:
        webhook_id = self._require_id(webhook, "webhook", "update")
        return await self._update(WooWebhook, WebhookEndpoints.by_id(webhook_id), webhook, use_faker)

    async def delete_webhook(self, webhook_id: int, use_faker: Optional[bool] = None) -> WooWebhook:
        return await self._delete(
            WooWebhook, WebhookEndpoints.by_id(webhook_id), webhook_id, params={"force": True}, use_faker=use_faker
        )

    async def batch_webhooks(
        self, request: WooWebhookBatchRequest, use_faker: Optional[bool] = None
    ) -> WooWebhookBatchResponse:
        return await self._batch(WooWebhook, WooWebhookBatchResponse, WebhookEndpoints.batch(), request, use_faker)
