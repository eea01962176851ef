"""
API de reportes (solo lectura)
"""

from datetime import date
from typing import Optional

from woocommerce_api.models.enums import WooContext, WooReportPeriod
from woocommerce_api.models.report import WooReportIndexEntry, WooReportTotal, WooSalesReport, WooTopSellerReport

from .base import WooApiBase
from .endpoints import ReportEndpoints
from .query import build_report_query

# Resources with a `/reports/<resource>/totals` endpoint
REPORT_TOTALS_RESOURCES = ("coupons", "customers", "orders", "products", "reviews")


class ReportApiMixin(WooApiBase):
    async def get_reports(self, use_faker: Optional[bool] = None) -> list[WooReportIndexEntry]:
        return await self._list(WooReportIndexEntry, ReportEndpoints.index(), use_faker=use_faker)

    async def get_sales_report(
        self,
        context: WooContext = WooContext.VIEW,
        period: Optional[WooReportPeriod] = None,
        date_min: Optional[date] = None,
        date_max: Optional[date] = None,
        use_faker: Optional[bool] = None,
    ) -> list[WooSalesReport]:
        params = build_report_query(context=context, period=period, date_min=date_min, date_max=date_max)
        return await self._list(WooSalesReport, ReportEndpoints.sales(), params, use_faker)

    async def get_top_sellers_report(
        self,
        context: WooContext = WooContext.VIEW,
        period: Optional[WooReportPeriod] = None,
        date_min: Optional[date] = None,
        date_max: Optional[date] = None,
        use_faker: Optional[bool] = None,
    ) -> list[WooTopSellerReport]:
        params = build_report_query(context=context, period=period, date_min=date_min, date_max=date_max)
        return await self._list(WooTopSellerReport, ReportEndpoints.top_sellers(), params, use_faker)

    async def get_totals_report(self, resource: str, use_faker: Optional[bool] = None) -> list[WooReportTotal]:
        """
        Totales agrupados de un recurso.

        Args:
            resource: coupons, customers, orders, products o reviews
        """
        if resource not in REPORT_TOTALS_RESOURCES:
            raise ValueError(f"resource must be one of {REPORT_TOTALS_RESOURCES}, got {resource!r}")
        return await self._list(WooReportTotal, ReportEndpoints.totals(resource), use_faker=use_faker)

    async def get_coupons_totals(self, use_faker: Optional[bool] = None) -> list[WooReportTotal]:
        return await self.get_totals_report("coupons", use_faker)

    async def get_customers_totals(self, use_faker: Optional[bool] = None) -> list[WooReportTotal]:
        return await self.get_totals_report("customers", use_faker)

    async def get_orders_totals(self, use_faker: Optional[bool] = None) -> list[WooReportTotal]:
        return await self.get_totals_report("orders", use_faker)

    async def get_products_totals(self, use_faker: Optional[bool] = None) -> list[WooReportTotal]:
        return await self.get_totals_report("products", use_faker)

    async def get_reviews_totals(self, use_faker: Optional[bool] = None) -> list[WooReportTotal]:
        return await self.get_totals_report("reviews", use_faker)
