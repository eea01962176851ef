"""
Modelos de envío: zonas, ubicaciones de zona, métodos de zona y métodos
de envío disponibles
"""

from typing import Any, Optional, Self

from pydantic import SerializationInfo, field_serializer

from woocommerce_api.utils.fake_helper import FakeHelper

from .base import WooBaseModel, WooLinks, WooResourceModel, read_only_field
from .enums import WooShippingZoneLocationType
from .settings import WooMethodSetting, fake_method_settings, settings_to_values

CONTINENT_CODES = ("AF", "AN", "AS", "EU", "NA", "OC", "SA")


class WooShippingZone(WooResourceModel):
    """Zona de envío; la zona 0 ("resto del mundo") no se puede borrar"""

    name: Optional[str] = None
    order: Optional[int] = None
    links: Optional[WooLinks] = read_only_field(alias="_links")

    @classmethod
    def fake(cls) -> Self:
        return cls(id=FakeHelper.integer(100), name=FakeHelper.country(), order=FakeHelper.integer(10, 0))


class WooShippingZoneLocation(WooBaseModel):
    """Ubicación que pertenece a una zona"""

    code: Optional[str] = None
    type: Optional[WooShippingZoneLocationType] = None
    links: Optional[WooLinks] = read_only_field(alias="_links")

    @classmethod
    def fake(cls) -> Self:
        location_type = WooShippingZoneLocationType.fake()
        code = {
            WooShippingZoneLocationType.POSTCODE: FakeHelper.postcode,
            WooShippingZoneLocationType.STATE: lambda: f"{FakeHelper.country_code()}:{FakeHelper.state()}",
            WooShippingZoneLocationType.COUNTRY: FakeHelper.country_code,
            WooShippingZoneLocationType.CONTINENT: lambda: FakeHelper.random_item(CONTINENT_CODES),
        }[location_type]()
        return cls(code=code, type=location_type)


class WooShippingZoneMethod(WooResourceModel):
    """
    Método de envío dentro de una zona.

    `id` es el id de instancia; `method_id` (`flat_rate`, `free_shipping`)
    solo se envía al crear.
    """

    instance_id: Optional[int] = read_only_field()
    title: Optional[str] = read_only_field()
    order: Optional[int] = None
    enabled: Optional[bool] = None
    method_id: Optional[str] = None
    method_title: Optional[str] = read_only_field()
    method_description: Optional[str] = read_only_field()
    settings: Optional[dict[str, WooMethodSetting]] = None
    links: Optional[WooLinks] = read_only_field(alias="_links")

    @field_serializer("settings")
    def _serialize_settings(self, settings: Optional[dict[str, WooMethodSetting]], info: SerializationInfo) -> Any:
        return settings_to_values(settings, info)

    @classmethod
    def fake(cls) -> Self:
        instance_id = FakeHelper.integer(100)
        method_id = FakeHelper.random_item(["flat_rate", "free_shipping", "local_pickup"])
        return cls(
            id=instance_id,
            instance_id=instance_id,
            title=method_id.replace("_", " ").title(),
            order=FakeHelper.integer(10, 0),
            enabled=FakeHelper.boolean(),
            method_id=method_id,
            method_title=method_id.replace("_", " ").title(),
            method_description=FakeHelper.sentence(),
            settings=fake_method_settings(),
        )


class WooShippingMethod(WooBaseModel):
    """Método de envío registrado en la tienda (solo lectura)"""

    id: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    links: Optional[WooLinks] = read_only_field(alias="_links")

    @classmethod
    def fake(cls) -> Self:
        return cls(
            id=FakeHelper.random_item(["flat_rate", "free_shipping", "local_pickup"]),
            title=FakeHelper.word().title(),
            description=FakeHelper.sentence(),
        )
