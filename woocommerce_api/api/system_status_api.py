"""
API de estado del sistema y herramientas de mantenimiento
"""

import logging
from typing import Optional

from woocommerce_api.exceptions import WooMissingIdentityError
from woocommerce_api.models.system_status import WooSystemStatus, WooSystemStatusTool

from .base import WooApiBase
from .endpoints import SystemStatusEndpoints

logger = logging.getLogger(__name__)


class SystemStatusApiMixin(WooApiBase):
    async def get_system_status(self, use_faker: Optional[bool] = None) -> WooSystemStatus:
        return await self._retrieve(WooSystemStatus, SystemStatusEndpoints.status(), use_faker=use_faker)

    async def get_system_status_tools(self, use_faker: Optional[bool] = None) -> list[WooSystemStatusTool]:
        return await self._list(WooSystemStatusTool, SystemStatusEndpoints.tools(), use_faker=use_faker)

    async def get_system_status_tool(self, tool_id: str, use_faker: Optional[bool] = None) -> WooSystemStatusTool:
        return await self._retrieve(
            WooSystemStatusTool, SystemStatusEndpoints.tool(tool_id), tool_id, use_faker=use_faker
        )

    async def run_system_status_tool(self, tool_id: str, use_faker: Optional[bool] = None) -> WooSystemStatusTool:
        """
        Ejecuta la herramienta (PUT con `confirm: true`).

        La respuesta trae `success` y `message` con el resultado.
        """
        if not tool_id:
            raise WooMissingIdentityError("system status tool", "run")
        logger.info(f"Running WooCommerce system status tool {tool_id}")
        tool = WooSystemStatusTool(id=tool_id, confirm=True)
        return await self._update(WooSystemStatusTool, SystemStatusEndpoints.tool(tool_id), tool, use_faker)
