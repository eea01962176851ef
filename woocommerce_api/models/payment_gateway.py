"""
Modelos de pasarelas de pago

Las pasarelas se identifican por string (`bacs`, `stripe`) y no se crean ni
borran por la API: solo se listan y se actualizan.
"""

from typing import Any, Optional, Self

from pydantic import SerializationInfo, field_serializer

from woocommerce_api.utils.fake_helper import FakeHelper

from .base import WooBaseModel, WooLinks, read_only_field
from .settings import WooMethodSetting, fake_method_settings, settings_to_values


class WooPaymentGateway(WooBaseModel):
    """Pasarela de pago"""

    id: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    order: Optional[int] = None
    enabled: Optional[bool] = None
    method_title: Optional[str] = read_only_field()
    method_description: Optional[str] = read_only_field()
    method_supports: Optional[list[str]] = read_only_field()
    settings: Optional[dict[str, WooMethodSetting]] = None
    links: Optional[WooLinks] = read_only_field(alias="_links")

    @field_serializer("settings")
    def _serialize_settings(self, settings: Optional[dict[str, WooMethodSetting]], info: SerializationInfo) -> Any:
        return settings_to_values(settings, info)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, WooPaymentGateway) and self.id is not None and other.id is not None:
            return self.id == other.id
        return super().__eq__(other)

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.id))

    @classmethod
    def fake(cls) -> Self:
        return cls(
            id=FakeHelper.random_item(["bacs", "cheque", "cod", "paypal", "stripe"]),
            title=FakeHelper.word().title(),
            description=FakeHelper.sentence(),
            order=FakeHelper.integer(10, 0),
            enabled=FakeHelper.boolean(),
            method_title=FakeHelper.sentence(),
            method_description=FakeHelper.sentence(),
            method_supports=["products", "refunds"],
            settings=fake_method_settings(),
        )
