"""
Modelos de datos de referencia (continentes, países, monedas)
Responsabilidad: Recursos de solo lectura identificados por código.
"""

from typing import Optional, Self

from woocommerce_api.utils.fake_helper import FakeHelper

from .base import WooBaseModel, WooLinks, read_only_field
from .shipping import CONTINENT_CODES


class WooDataIndexEntry(WooBaseModel):
    """Entrada del índice `/data`"""

    slug: Optional[str] = None
    description: Optional[str] = None
    links: Optional[WooLinks] = read_only_field(alias="_links")

    @classmethod
    def fake(cls) -> Self:
        return cls(
            slug=FakeHelper.random_item(["continents", "countries", "currencies"]),
            description=FakeHelper.sentence(),
        )


class WooCountryState(WooBaseModel):
    code: Optional[str] = None
    name: Optional[str] = None

    @classmethod
    def fake(cls) -> Self:
        return cls(code=FakeHelper.state(), name=FakeHelper.city())


class WooContinentCountry(WooBaseModel):
    """País dentro de un continente, con sus convenciones locales"""

    code: Optional[str] = None
    name: Optional[str] = None
    currency_code: Optional[str] = None
    currency_pos: Optional[str] = None
    decimal_sep: Optional[str] = None
    thousand_sep: Optional[str] = None
    num_decimals: Optional[int] = None
    dimension_unit: Optional[str] = None
    weight_unit: Optional[str] = None
    states: Optional[list[WooCountryState]] = None

    @classmethod
    def fake(cls) -> Self:
        return cls(
            code=FakeHelper.country_code(),
            name=FakeHelper.country(),
            currency_code=FakeHelper.currency_code(),
            currency_pos=FakeHelper.random_item(["left", "right", "left_space", "right_space"]),
            decimal_sep=".",
            thousand_sep=",",
            num_decimals=2,
            dimension_unit="cm",
            weight_unit="kg",
            states=FakeHelper.list(WooCountryState.fake, 5),
        )


class WooContinent(WooBaseModel):
    code: Optional[str] = None
    name: Optional[str] = None
    countries: Optional[list[WooContinentCountry]] = None
    links: Optional[WooLinks] = read_only_field(alias="_links")

    @classmethod
    def fake(cls) -> Self:
        return cls(
            code=FakeHelper.random_item(CONTINENT_CODES),
            name=FakeHelper.word().title(),
            countries=FakeHelper.list(WooContinentCountry.fake, 5),
        )


class WooCountry(WooBaseModel):
    code: Optional[str] = None
    name: Optional[str] = None
    states: Optional[list[WooCountryState]] = None
    links: Optional[WooLinks] = read_only_field(alias="_links")

    @classmethod
    def fake(cls) -> Self:
        return cls(
            code=FakeHelper.country_code(),
            name=FakeHelper.country(),
            states=FakeHelper.list(WooCountryState.fake, 5),
        )


class WooCurrency(WooBaseModel):
    code: Optional[str] = None
    name: Optional[str] = None
    symbol: Optional[str] = None
    links: Optional[WooLinks] = read_only_field(alias="_links")

    @classmethod
    def fake(cls) -> Self:
        return cls(
            code=FakeHelper.currency_code(),
            name=FakeHelper.currency_name(),
            symbol=FakeHelper.random_item(["$", "€", "£", "¥"]),
        )
