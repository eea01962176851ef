"""
Modelo de reseña de producto WooCommerce
"""

from typing import Any, Optional, Self

from woocommerce_api.utils.fake_helper import FakeHelper

from .base import WooDateTime, WooLinks, WooResourceModel, read_only_field
from .enums import WooProductReviewStatus


class WooProductReview(WooResourceModel):
    """Reseña de un producto"""

    date_created: WooDateTime = read_only_field()
    date_created_gmt: WooDateTime = read_only_field()
    product_id: Optional[int] = None
    product_name: Optional[str] = read_only_field()
    product_permalink: Optional[str] = read_only_field()
    status: Optional[WooProductReviewStatus] = None
    reviewer: Optional[str] = None
    reviewer_email: Optional[str] = None
    review: Optional[str] = None
    rating: Optional[int] = None
    verified: Optional[bool] = read_only_field()
    reviewer_avatar_urls: Optional[dict[str, Any]] = read_only_field()
    links: Optional[WooLinks] = read_only_field(alias="_links")

    @classmethod
    def fake(cls) -> Self:
        return cls(
            id=FakeHelper.integer(1000),
            date_created=FakeHelper.datetime(),
            date_created_gmt=FakeHelper.datetime(),
            product_id=FakeHelper.integer(1000),
            product_name=FakeHelper.word().title(),
            product_permalink=FakeHelper.url(),
            status=WooProductReviewStatus.APPROVED,
            reviewer=f"{FakeHelper.first_name()} {FakeHelper.last_name()}",
            reviewer_email=FakeHelper.email(),
            review=FakeHelper.paragraph(),
            rating=FakeHelper.integer(5, 0),
            verified=FakeHelper.boolean(),
            reviewer_avatar_urls={"24": FakeHelper.image(), "48": FakeHelper.image(), "96": FakeHelper.image()},
        )
