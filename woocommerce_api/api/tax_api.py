"""
API de impuestos: clases y tasas

Ninguno de los dos recursos admite papelera; los borrados envían force=true.
"""

from typing import Optional

from woocommerce_api.exceptions import WooMissingIdentityError
from woocommerce_api.models.batch import WooTaxRateBatchRequest, WooTaxRateBatchResponse
from woocommerce_api.models.enums import WooContext, WooSortOrder, WooTaxRateOrderBy
from woocommerce_api.models.tax import WooTaxClass, WooTaxRate

from .base import WooApiBase
from .endpoints import TaxClassEndpoints, TaxRateEndpoints
from .query import build_tax_rates_query


class TaxApiMixin(WooApiBase):
    # ============================================================================
    # Clases de impuesto
    # ============================================================================

    async def get_tax_classes(self, use_faker: Optional[bool] = None) -> list[WooTaxClass]:
        return await self._list(WooTaxClass, TaxClassEndpoints.collection(), use_faker=use_faker)

    async def create_tax_class(self, tax_class: WooTaxClass, use_faker: Optional[bool] = None) -> WooTaxClass:
        """Solo se envía `name`; el servidor genera el slug."""
        return await self._create(WooTaxClass, TaxClassEndpoints.collection(), tax_class, use_faker)

    async def delete_tax_class(self, slug: str, use_faker: Optional[bool] = None) -> WooTaxClass:
        if not slug:
            raise WooMissingIdentityError("tax class", "delete")
        return await self._delete(
            WooTaxClass,
            TaxClassEndpoints.by_slug(slug),
            slug,
            params={"force": True},
            use_faker=use_faker,
            id_field="slug",
        )

    # ============================================================================
    # Tasas de impuesto
    # ============================================================================

    async def get_tax_rates(
        self,
        context: WooContext = WooContext.VIEW,
        page: int = 1,
        per_page: int = 10,
        offset: Optional[int] = None,
        order: WooSortOrder = WooSortOrder.ASC,
        orderby: WooTaxRateOrderBy = WooTaxRateOrderBy.ORDER,
        tax_class: Optional[str] = None,
        use_faker: Optional[bool] = None,
    ) -> list[WooTaxRate]:
        params = build_tax_rates_query(
            context=context,
            page=page,
            per_page=per_page,
            offset=offset,
            order=order,
            orderby=orderby,
            tax_class=tax_class,
        )
        return await self._list(WooTaxRate, TaxRateEndpoints.collection(), params, use_faker)

    async def get_tax_rate(self, tax_rate_id: int, use_faker: Optional[bool] = None) -> WooTaxRate:
        return await self._retrieve(WooTaxRate, TaxRateEndpoints.by_id(tax_rate_id), tax_rate_id, use_faker=use_faker)

    async def create_tax_rate(self, tax_rate: WooTaxRate, use_faker: Optional[bool] = None) -> WooTaxRate:
        return await self._create(WooTaxRate, TaxRateEndpoints.collection(), tax_rate, use_faker)

    async def update_tax_rate(self, tax_rate: WooTaxRate, use_faker: Optional[bool] = None) -> WooTaxRate:
        tax_rate_id = self._require_id(tax_rate, "tax rate", "update")
        return await self._update(WooTaxRate, TaxRateEndpoints.by_id(tax_rate_id), tax_rate, use_faker)

    async def delete_tax_rate(self, tax_rate_id: int, use_faker: Optional[bool] = None) -> WooTaxRate:
        return await self._delete(
            WooTaxRate, TaxRateEndpoints.by_id(tax_rate_id), tax_rate_id, params={"force": True}, use_faker=use_faker
        )

    async def batch_tax_rates(
        self, request: WooTaxRateBatchRequest, use_faker: Optional[bool] = None
    ) -> WooTaxRateBatchResponse:
        return await self._batch(WooTaxRate, WooTaxRateBatchResponse, TaxRateEndpoints.batch(), request, use_faker)
