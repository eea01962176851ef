"""
API de pasarelas de pago
"""

from typing import Optional

from woocommerce_api.models.payment_gateway import WooPaymentGateway

from .base import WooApiBase
from .endpoints import PaymentGatewayEndpoints


class PaymentGatewayApiMixin(WooApiBase):
    async def get_payment_gateways(self, use_faker: Optional[bool] = None) -> list[WooPaymentGateway]:
        return await self._list(WooPaymentGateway, PaymentGatewayEndpoints.collection(), use_faker=use_faker)

    async def get_payment_gateway(self, gateway_id: str, use_faker: Optional[bool] = None) -> WooPaymentGateway:
        return await self._retrieve(
            WooPaymentGateway, PaymentGatewayEndpoints.by_id(gateway_id), gateway_id, use_faker=use_faker
        )

    async def update_payment_gateway(
        self, gateway: WooPaymentGateway, use_faker: Optional[bool] = None
    ) -> WooPaymentGateway:
        """Envía `settings` como `{id: value}`."""
        gateway_id = self._require_id(gateway, "payment gateway", "update")
        return await self._update(WooPaymentGateway, PaymentGatewayEndpoints.by_id(gateway_id), gateway, use_faker)
