"""
Modelos de ajustes de la tienda (grupos y opciones) y ajustes de métodos
(pasarelas de pago, métodos de envío de zona)

Los ajustes se identifican por strings (`general`, `woocommerce_currency`),
por eso no heredan de WooResourceModel.
"""

from typing import Any, Optional, Self

from pydantic import SerializationInfo

from woocommerce_api.utils.fake_helper import FakeHelper

from .base import WooBaseModel, WooLinks, read_only_field


class WooSettingsGroup(WooBaseModel):
    """Grupo de ajustes (solo lectura)"""

    id: Optional[str] = None
    label: Optional[str] = None
    description: Optional[str] = None
    parent_id: Optional[str] = None
    sub_groups: Optional[list[str]] = None
    links: Optional[WooLinks] = read_only_field(alias="_links")

    @classmethod
    def fake(cls) -> Self:
        return cls(
            id=FakeHelper.slug(),
            label=FakeHelper.word().title(),
            description=FakeHelper.sentence(),
            parent_id="",
            sub_groups=FakeHelper.list(FakeHelper.slug, 3),
        )


class WooSettingOption(WooBaseModel):
    """Opción de un grupo de ajustes; solo `value` es escribible"""

    id: Optional[str] = None
    label: Optional[str] = read_only_field()
    description: Optional[str] = read_only_field()
    value: Any = None
    default: Any = read_only_field()
    tip: Optional[str] = read_only_field()
    placeholder: Optional[str] = read_only_field()
    type: Optional[str] = read_only_field()
    options: Optional[dict[str, Any]] = read_only_field()
    group_id: Optional[str] = read_only_field()
    links: Optional[WooLinks] = read_only_field(alias="_links")

    def __eq__(self, other: object) -> bool:
        if isinstance(other, WooSettingOption) and self.id is not None and other.id is not None:
            return (self.group_id, self.id) == (other.group_id, other.id)
        return super().__eq__(other)

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.group_id, self.id))

    @classmethod
    def fake(cls) -> Self:
        return cls(
            id=f"woocommerce_{FakeHelper.word()}",
            label=FakeHelper.word().title(),
            description=FakeHelper.sentence(),
            value=FakeHelper.word(),
            default="",
            tip=FakeHelper.sentence(),
            placeholder="",
            type=FakeHelper.random_item(["text", "select", "checkbox", "number"]),
            group_id="general",
        )


class WooMethodSetting(WooBaseModel):
    """
    Ajuste de una pasarela de pago o de un método de envío de zona.

    En las peticiones de escritura solo viaja `value`: el recurso padre envía
    `settings` como `{clave: valor}`.
    """

    id: Optional[str] = None
    label: Optional[str] = None
    description: Optional[str] = None
    type: Optional[str] = None
    value: Any = None
    default: Any = None
    tip: Optional[str] = None
    placeholder: Optional[str] = None
    options: Optional[dict[str, Any]] = None

    @classmethod
    def fake(cls) -> Self:
        return cls(
            id=FakeHelper.word(),
            label=FakeHelper.word().title(),
            description=FakeHelper.sentence(),
            type=FakeHelper.random_item(["text", "select", "checkbox", "price"]),
            value=FakeHelper.word(),
            default="",
            tip=FakeHelper.sentence(),
            placeholder="",
        )


def fake_method_settings() -> dict[str, WooMethodSetting]:
    settings = {}
    for setting in FakeHelper.list(WooMethodSetting.fake, 4):
        settings[setting.id] = setting
    return settings


def settings_to_values(settings: Optional[dict[str, WooMethodSetting]], info: SerializationInfo) -> Any:
    """Write bodies carry `{id: value}`; snapshots keep the full setting objects."""
    if settings is None:
        return None
    if (info.context or {}).get("write"):
        return {key: setting.value for key, setting in settings.items()}
    return {key: setting.model_dump(mode="json", by_alias=True, exclude_none=True) for key, setting in settings.items()}
