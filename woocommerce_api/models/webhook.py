"""
Modelos de webhooks
Responsabilidad: Suscripciones de la tienda a eventos (`order.created`, ...)
"""

from typing import Optional, Self

from woocommerce_api.utils.fake_helper import FakeHelper

from .base import WooDateTime, WooLinks, WooResourceModel, read_only_field
from .enums import WooWebhookStatus

# Built-in topics; plugins may register `action.<hook>` topics too, so the
# field stays a plain string.
WEBHOOK_TOPICS = (
    "coupon.created",
    "coupon.updated",
    "coupon.deleted",
    "customer.created",
    "customer.updated",
    "customer.deleted",
    "order.created",
    "order.updated",
    "order.deleted",
    "product.created",
    "product.updated",
    "product.deleted",
)


class WooWebhook(WooResourceModel):
    """Webhook WooCommerce"""

    name: Optional[str] = None
    status: Optional[WooWebhookStatus] = None
    topic: Optional[str] = None
    resource: Optional[str] = read_only_field()
    event: Optional[str] = read_only_field()
    hooks: Optional[list[str]] = read_only_field()
    delivery_url: Optional[str] = None
    # Write-only: HMAC key for the X-WC-Webhook-Signature header
    secret: Optional[str] = None
    api_version: Optional[str] = None
    date_created: WooDateTime = read_only_field()
    date_created_gmt: WooDateTime = read_only_field()
    date_modified: WooDateTime = read_only_field()
    date_modified_gmt: WooDateTime = read_only_field()
    links: Optional[WooLinks] = read_only_field(alias="_links")

    @classmethod
    def fake(cls) -> Self:
        topic = FakeHelper.random_item(WEBHOOK_TOPICS)
        resource, event = topic.split(".")
        return cls(
            id=FakeHelper.integer(1000),
            name=FakeHelper.sentence(),
            status=WooWebhookStatus.fake(),
            topic=topic,
            resource=resource,
            event=event,
            hooks=[f"woocommerce_{event}_{resource}"],
            delivery_url=FakeHelper.url(),
            api_version="wp_api_v3",
            date_created=FakeHelper.datetime(),
            date_created_gmt=FakeHelper.datetime(),
            date_modified=FakeHelper.datetime(),
            date_modified_gmt=FakeHelper.datetime(),
        )

    @property
    def is_active(self) -> bool:
        return self.status == WooWebhookStatus.ACTIVE
