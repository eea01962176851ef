"""
API de reseñas de producto
"""

from collections.abc import Sequence
from datetime import datetime
from typing import Optional

from woocommerce_api.models.batch import WooProductReviewBatchRequest, WooProductReviewBatchResponse
from woocommerce_api.models.enums import (
    WooContext,
    WooProductReviewFilterStatus,
    WooProductReviewOrderBy,
    WooSortOrder,
)
from woocommerce_api.models.review import WooProductReview

from .base import WooApiBase
from .endpoints import ProductReviewEndpoints
from .query import build_product_reviews_query


class ProductReviewApiMixin(WooApiBase):
    async def get_product_reviews(
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
        orderby: WooProductReviewOrderBy = WooProductReviewOrderBy.DATE_GMT,
        reviewer: Optional[Sequence[int]] = None,
        reviewer_exclude: Optional[Sequence[int]] = None,
        reviewer_email: Optional[Sequence[str]] = None,
        product: Optional[Sequence[int]] = None,
        status: WooProductReviewFilterStatus = WooProductReviewFilterStatus.APPROVED,
        use_faker: Optional[bool] = None,
    ) -> list[WooProductReview]:
        params = build_product_reviews_query(
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
            reviewer=reviewer,
            reviewer_exclude=reviewer_exclude,
            reviewer_email=reviewer_email,
            product=product,
            status=status,
        )
        return await self._list(WooProductReview, ProductReviewEndpoints.collection(), params, use_faker)

    async def get_product_review(self, review_id: int, use_faker: Optional[bool] = None) -> WooProductReview:
        return await self._retrieve(
            WooProductReview, ProductReviewEndpoints.by_id(review_id), review_id, use_faker=use_faker
        )

    async def create_product_review(
        self, review: WooProductReview, use_faker: Optional[bool] = None
    ) -> WooProductReview:
        return await self._create(WooProductReview, ProductReviewEndpoints.collection(), review, use_faker)

    async def update_product_review(
        self, review: WooProductReview, use_faker: Optional[bool] = None
    ) -> WooProductReview:
        review_id = self._require_id(review, "product review", "update")
        return await self._update(WooProductReview, ProductReviewEndpoints.by_id(review_id), review, use_faker)

    async def delete_product_review(self, review_id: int, use_faker: Optional[bool] = None) -> WooProductReview:
        return await self._delete(
            WooProductReview,
            ProductReviewEndpoints.by_id(review_id),
            review_id,
            params={"force": True},
            use_faker=use_faker,
        )

    async def batch_product_reviews(
        self, request: WooProductReviewBatchRequest, use_faker: Optional[bool] = None
    ) -> WooProductReviewBatchResponse:
        return await self._batch(
            WooProductReview, WooProductReviewBatchResponse, ProductReviewEndpoints.batch(), request, use_faker
        )
