"""
API de envíos: zonas, ubicaciones y métodos de cada zona, y métodos de envío
registrados en la tienda.

Zonas y métodos de zona no admiten papelera; los borrados envían force=true.
"""

from typing import Optional

from woocommerce_api.models.shipping import (
    WooShippingMethod,
    WooShippingZone,
    WooShippingZoneLocation,
    WooShippingZoneMethod,
)

from .base import WooApiBase
from .endpoints import ShippingMethodEndpoints, ShippingZoneEndpoints


class ShippingApiMixin(WooApiBase):
    # ============================================================================
    # Zonas
    # ============================================================================

    async def get_shipping_zones(self, use_faker: Optional[bool] = None) -> list[WooShippingZone]:
        return await self._list(WooShippingZone, ShippingZoneEndpoints.collection(), use_faker=use_faker)

    async def get_shipping_zone(self, zone_id: int, use_faker: Optional[bool] = None) -> WooShippingZone:
        return await self._retrieve(WooShippingZone, ShippingZoneEndpoints.by_id(zone_id), zone_id, use_faker=use_faker)

    async def create_shipping_zone(self, zone: WooShippingZone, use_faker: Optional[bool] = None) -> WooShippingZone:
        return await self._create(WooShippingZone, ShippingZoneEndpoints.collection(), zone, use_faker)

    async def update_shipping_zone(self, zone: WooShippingZone, use_faker: Optional[bool] = None) -> WooShippingZone:
        zone_id = self._require_id(zone, "shipping zone", "update")
        return await self._update(WooShippingZone, ShippingZoneEndpoints.by_id(zone_id), zone, use_faker)

    async def delete_shipping_zone(self, zone_id: int, use_faker: Optional[bool] = None) -> WooShippingZone:
        return await self._delete(
            WooShippingZone, ShippingZoneEndpoints.by_id(zone_id), zone_id, params={"force": True}, use_faker=use_faker
        )

    # ============================================================================
    # Ubicaciones de zona
    # ============================================================================

    async def get_shipping_zone_locations(
        self, zone_id: int, use_faker: Optional[bool] = None
    ) -> list[WooShippingZoneLocation]:
        return await self._list(WooShippingZoneLocation, ShippingZoneEndpoints.locations(zone_id), use_faker=use_faker)

    async def update_shipping_zone_locations(
        self,
        zone_id: int,
        locations: list[WooShippingZoneLocation],
        use_faker: Optional[bool] = None,
    ) -> list[WooShippingZoneLocation]:
        """Reemplaza todas las ubicaciones de la zona; una lista vacía las borra."""
        return await self._replace_list(
            WooShippingZoneLocation, ShippingZoneEndpoints.locations(zone_id), locations, use_faker
        )

    # ============================================================================
    # Métodos de zona
    # ============================================================================

    async def get_shipping_zone_methods(
        self, zone_id: int, use_faker: Optional[bool] = None
    ) -> list[WooShippingZoneMethod]:
        return await self._list(WooShippingZoneMethod, ShippingZoneEndpoints.methods(zone_id), use_faker=use_faker)

    async def get_shipping_zone_method(
        self, zone_id: int, instance_id: int, use_faker: Optional[bool] = None
    ) -> WooShippingZoneMethod:
        return await self._retrieve(
            WooShippingZoneMethod,
            ShippingZoneEndpoints.method(zone_id, instance_id),
            instance_id,
            use_faker=use_faker,
        )

    async def create_shipping_zone_method(
        self, zone_id: int, method: WooShippingZoneMethod, use_faker: Optional[bool] = None
    ) -> WooShippingZoneMethod:
        return await self._create(WooShippingZoneMethod, ShippingZoneEndpoints.methods(zone_id), method, use_faker)

    async def update_shipping_zone_method(
        self, zone_id: int, method: WooShippingZoneMethod, use_faker: Optional[bool] = None
    ) -> WooShippingZoneMethod:
        instance_id = self._require_id(method, "shipping zone method", "update")
        return await self._update(
            WooShippingZoneMethod, ShippingZoneEndpoints.method(zone_id, instance_id), method, use_faker
        )

    async def delete_shipping_zone_method(
        self, zone_id: int, instance_id: int, use_faker: Optional[bool] = None
    ) -> WooShippingZoneMethod:
        return await self._delete(
            WooShippingZoneMethod,
            ShippingZoneEndpoints.method(zone_id, instance_id),
            instance_id,
            params={"force": True},
            use_faker=use_faker,
        )

    # ============================================================================
    # Métodos de envío
    # ============================================================================

    async def get_shipping_methods(self, use_faker: Optional[bool] = None) -> list[WooShippingMethod]:
        return await self._list(WooShippingMethod, ShippingMethodEndpoints.collection(), use_faker=use_faker)

    async def get_shipping_method(self, method_id: str, use_faker: Optional[bool] = None) -> WooShippingMethod:
        return await self._retrieve(
            WooShippingMethod, ShippingMethodEndpoints.by_id(method_id), method_id, use_faker=use_faker
        )
