"""
API de ajustes de la tienda
"""

from typing import Optional

from woocommerce_api.exceptions import WooMissingIdentityError
from woocommerce_api.models.batch import WooSettingOptionBatchRequest, WooSettingOptionBatchResponse
from woocommerce_api.models.settings import WooSettingOption, WooSettingsGroup

from .base import WooApiBase
from .endpoints import SettingsEndpoints


class SettingsApiMixin(WooApiBase):
    async def get_settings_groups(self, use_faker: Optional[bool] = None) -> list[WooSettingsGroup]:
        return await self._list(WooSettingsGroup, SettingsEndpoints.groups(), use_faker=use_faker)

    async def get_setting_options(
        self, group_id: str, use_faker: Optional[bool] = None
    ) -> list[WooSettingOption]:
        return await self._list(WooSettingOption, SettingsEndpoints.group(group_id), use_faker=use_faker)

    async def get_setting_option(
        self, group_id: str, option_id: str, use_faker: Optional[bool] = None
    ) -> WooSettingOption:
        return await self._retrieve(
            WooSettingOption, SettingsEndpoints.option(group_id, option_id), option_id, use_faker=use_faker
        )

    async def update_setting_option(
        self,
        option: WooSettingOption,
        group_id: Optional[str] = None,
        use_faker: Optional[bool] = None,
    ) -> WooSettingOption:
        """
        Actualiza el `value` de una opción.

        El grupo se toma de `group_id` o, si no se pasa, de `option.group_id`.
        """
        option_id = self._require_id(option, "setting option", "update")
        group_id = group_id or option.group_id
        if not group_id:
            raise WooMissingIdentityError("setting option group", "update")
        return await self._update(
            WooSettingOption, SettingsEndpoints.option(group_id, option_id), option, use_faker
        )

    async def batch_update_setting_options(
        self,
        group_id: str,
        request: WooSettingOptionBatchRequest,
        use_faker: Optional[bool] = None,
    ) -> WooSettingOptionBatchResponse:
        return await self._batch(
            WooSettingOption, WooSettingOptionBatchResponse, SettingsEndpoints.batch(group_id), request, use_faker
        )
