"""
API de clientes
"""

from collections.abc import Sequence
from typing import Optional

from woocommerce_api.models.batch import WooCustomerBatchRequest, WooCustomerBatchResponse
from woocommerce_api.models.customer import WooCustomer, WooCustomerDownload
from woocommerce_api.models.enums import WooContext, WooCustomerOrderBy, WooCustomerRole, WooSortOrder

from .base import WooApiBase
from .endpoints import CustomerEndpoints
from .query import QueryParams, build_customers_query


class CustomerApiMixin(WooApiBase):
    async def get_customers(
        self,
        context: WooContext = WooContext.VIEW,
        page: int = 1,
        per_page: int = 10,
        search: Optional[str] = None,
        exclude: Optional[Sequence[int]] = None,
        include: Optional[Sequence[int]] = None,
        offset: Optional[int] = None,
        order: WooSortOrder = WooSortOrder.ASC,
        orderby: WooCustomerOrderBy = WooCustomerOrderBy.NAME,
        email: Optional[str] = None,
        role: WooCustomerRole = WooCustomerRole.CUSTOMER,
        use_faker: Optional[bool] = None,
    ) -> list[WooCustomer]:
        params = build_customers_query(
            context=context,
            page=page,
            per_page=per_page,
            search=search,
            exclude=exclude,
            include=include,
            offset=offset,
            order=order,
            orderby=orderby,
            email=email,
            role=role,
        )
        return await self._list(WooCustomer, CustomerEndpoints.collection(), params, use_faker)

    async def get_customer(self, customer_id: int, use_faker: Optional[bool] = None) -> WooCustomer:
        return await self._retrieve(
            WooCustomer, CustomerEndpoints.by_id(customer_id), customer_id, use_faker=use_faker
        )

    async def create_customer(self, customer: WooCustomer, use_faker: Optional[bool] = None) -> WooCustomer:
        return await self._create(WooCustomer, CustomerEndpoints.collection(), customer, use_faker)

    async def update_customer(self, customer: WooCustomer, use_faker: Optional[bool] = None) -> WooCustomer:
        customer_id = self._require_id(customer, "customer", "update")
        return await self._update(WooCustomer, CustomerEndpoints.by_id(customer_id), customer, use_faker)

    async def delete_customer(
        self, customer_id: int, reassign: Optional[int] = None, use_faker: Optional[bool] = None
    ) -> WooCustomer:
        """
        Borra un cliente. Los clientes no van a la papelera: siempre force=true.

        `reassign` transfiere los posts del usuario borrado a otro usuario.
        """
        params = QueryParams().required("force", True).optional("reassign", reassign)
        return await self._delete(
            WooCustomer, CustomerEndpoints.by_id(customer_id), customer_id, params=params, use_faker=use_faker
        )

    async def get_customer_downloads(
        self, customer_id: int, use_faker: Optional[bool] = None
    ) -> list[WooCustomerDownload]:
        return await self._list(WooCustomerDownload, CustomerEndpoints.downloads(customer_id), use_faker=use_faker)

    async def batch_customers(
        self, request: WooCustomerBatchRequest, use_faker: Optional[bool] = None
    ) -> WooCustomerBatchResponse:
        return await self._batch(
            WooCustomer, WooCustomerBatchResponse, CustomerEndpoints.batch(), request, use_faker
        )
