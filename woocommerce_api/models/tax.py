"""
Modelos de impuestos: clases y tasas
"""

from typing import Optional, Self

from pydantic import Field

from woocommerce_api.utils.fake_helper import FakeHelper

from .base import WooBaseModel, WooLinks, WooResourceModel, read_only_field


class WooTaxClass(WooBaseModel):
    """
    Clase de impuesto.

    Se identifica por `slug` (`standard`, `reduced-rate`, ...); el slug lo
    genera el servidor a partir de `name`.
    """

    slug: Optional[str] = read_only_field()
    name: Optional[str] = None
    links: Optional[WooLinks] = read_only_field(alias="_links")

    def __eq__(self, other: object) -> bool:
        if isinstance(other, WooTaxClass) and self.slug is not None and other.slug is not None:
            return self.slug == other.slug
        return super().__eq__(other)

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.slug))

    @classmethod
    def fake(cls) -> Self:
        name = FakeHelper.word().title()
        return cls(slug=name.lower(), name=name)


class WooTaxRate(WooResourceModel):
    """Tasa de impuesto"""

    country: Optional[str] = None
    state: Optional[str] = None
    postcode: Optional[str] = None
    city: Optional[str] = None
    postcodes: Optional[list[str]] = None
    cities: Optional[list[str]] = None
    # Percentage as a string, e.g. "21.0000"
    rate: Optional[str] = None
    name: Optional[str] = None
    priority: Optional[int] = None
    compound: Optional[bool] = None
    shipping: Optional[bool] = None
    order: Optional[int] = None
    tax_class: Optional[str] = Field(None, alias="class")
    links: Optional[WooLinks] = read_only_field(alias="_links")

    @classmethod
    def fake(cls) -> Self:
        return cls(
            id=FakeHelper.integer(1000),
            country=FakeHelper.country_code(),
            state=FakeHelper.state(),
            postcode=FakeHelper.postcode(),
            city=FakeHelper.city(),
            postcodes=FakeHelper.list(FakeHelper.postcode, 3),
            cities=FakeHelper.list(FakeHelper.city, 3),
            rate=f"{FakeHelper.decimal(25):.4f}",
            name=FakeHelper.word().upper(),
            priority=FakeHelper.integer(10),
            compound=FakeHelper.boolean(),
            shipping=FakeHelper.boolean(),
            order=FakeHelper.integer(10, 0),
            tax_class="standard",
        )
