"""
API de cupones
"""

from collections.abc import Sequence
from datetime import datetime
from typing import Optional

from woocommerce_api.models.batch import WooCouponBatchRequest, WooCouponBatchResponse
from woocommerce_api.models.coupon import WooCoupon
from woocommerce_api.models.enums import WooContext, WooCouponOrderBy, WooSortOrder

from .base import WooApiBase
from .endpoints import CouponEndpoints
from .query import build_coupons_query


class CouponApiMixin(WooApiBase):
    async def get_coupons(
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
        orderby: WooCouponOrderBy = WooCouponOrderBy.DATE,
        code: Optional[str] = None,
        use_faker: Optional[bool] = None,
    ) -> list[WooCoupon]:
        params = build_coupons_query(
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
            code=code,
        )
        return await self._list(WooCoupon, CouponEndpoints.collection(), params, use_faker)

    async def get_coupon(self, coupon_id: int, use_faker: Optional[bool] = None) -> WooCoupon:
        return await self._retrieve(WooCoupon, CouponEndpoints.by_id(coupon_id), coupon_id, use_faker=use_faker)

    async def create_coupon(self, coupon: WooCoupon, use_faker: Optional[bool] = None) -> WooCoupon:
        return await self._create(WooCoupon, CouponEndpoints.collection(), coupon, use_faker)

    async def update_coupon(self, coupon: WooCoupon, use_faker: Optional[bool] = None) -> WooCoupon:
        coupon_id = self._require_id(coupon, "coupon", "update")
        return await self._update(WooCoupon, CouponEndpoints.by_id(coupon_id), coupon, use_faker)

    async def delete_coupon(
        self, coupon_id: int, force: bool = False, use_faker: Optional[bool] = None
    ) -> WooCoupon:
        return await self._delete(
            WooCoupon, CouponEndpoints.by_id(coupon_id), coupon_id, params={"force": force}, use_faker=use_faker
        )

    async def batch_coupons(
        self, request: WooCouponBatchRequest, use_faker: Optional[bool] = None
    ) -> WooCouponBatchResponse:
        return await self._batch(WooCoupon, WooCouponBatchResponse, CouponEndpoints.batch(), request, use_faker)
