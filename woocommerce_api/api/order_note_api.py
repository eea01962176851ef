"""
API de notas de pedido

Las notas no admiten papelera: el borrado siempre envía force=true.
"""

from typing import Optional

from woocommerce_api.models.enums import WooContext, WooOrderNoteType
from woocommerce_api.models.order import WooOrderNote

from .base import WooApiBase
from .endpoints import OrderNoteEndpoints
from .query import build_order_notes_query


class OrderNoteApiMixin(WooApiBase):
    async def get_order_notes(
        self,
        order_id: int,
        context: WooContext = WooContext.VIEW,
        type: WooOrderNoteType = WooOrderNoteType.ANY,
        use_faker: Optional[bool] = None,
    ) -> list[WooOrderNote]:
        params = build_order_notes_query(context=context, type=type)
        return await self._list(WooOrderNote, OrderNoteEndpoints.collection(order_id), params, use_faker)

    async def get_order_note(
        self, order_id: int, note_id: int, use_faker: Optional[bool] = None
    ) -> WooOrderNote:
        return await self._retrieve(
            WooOrderNote, OrderNoteEndpoints.by_id(order_id, note_id), note_id, use_faker=use_faker
        )

    async def create_order_note(
        self, order_id: int, note: WooOrderNote, use_faker: Optional[bool] = None
    ) -> WooOrderNote:
        return await self._create(WooOrderNote, OrderNoteEndpoints.collection(order_id), note, use_faker)

    async def delete_order_note(
        self, order_id: int, note_id: int, use_faker: Optional[bool] = None
    ) -> WooOrderNote:
        return await self._delete(
            WooOrderNote,
            OrderNoteEndpoints.by_id(order_id, note_id),
            note_id,
            params={"force": True},
            use_faker=use_faker,
        )
