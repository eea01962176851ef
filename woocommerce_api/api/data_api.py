"""
API de datos de referencia (continentes, países, monedas)

Todo es de solo lectura; los recursos se piden por código (`EU`, `ES`, `EUR`).
"""

from typing import Optional

from woocommerce_api.models.data import WooContinent, WooCountry, WooCurrency, WooDataIndexEntry

from .base import WooApiBase
from .endpoints import DataEndpoints


class DataApiMixin(WooApiBase):
    async def get_data_index(self, use_faker: Optional[bool] = None) -> list[WooDataIndexEntry]:
        return await self._list(WooDataIndexEntry, DataEndpoints.index(), use_faker=use_faker)

    async def get_continents(self, use_faker: Optional[bool] = None) -> list[WooContinent]:
        return await self._list(WooContinent, DataEndpoints.continents(), use_faker=use_faker)

    async def get_continent(self, code: str, use_faker: Optional[bool] = None) -> WooContinent:
        return await self._retrieve(
            WooContinent, DataEndpoints.continent(code), code, use_faker=use_faker, id_field="code"
        )

    async def get_countries(self, use_faker: Optional[bool] = None) -> list[WooCountry]:
        return await self._list(WooCountry, DataEndpoints.countries(), use_faker=use_faker)

    async def get_country(self, code: str, use_faker: Optional[bool] = None) -> WooCountry:
        return await self._retrieve(WooCountry, DataEndpoints.country(code), code, use_faker=use_faker, id_field="code")

    async def get_currencies(self, use_faker: Optional[bool] = None) -> list[WooCurrency]:
        return await self._list(WooCurrency, DataEndpoints.currencies(), use_faker=use_faker)

    async def get_currency(self, code: str, use_faker: Optional[bool] = None) -> WooCurrency:
        return await self._retrieve(
            WooCurrency, DataEndpoints.currency(code), code, use_faker=use_faker, id_field="code"
        )

    async def get_current_currency(self, use_faker: Optional[bool] = None) -> WooCurrency:
        return await self._retrieve(WooCurrency, DataEndpoints.current_currency(), use_faker=use_faker)
