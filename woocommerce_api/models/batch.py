"""
Envoltorios de operaciones batch
Responsabilidad: Agrupar create / update / delete de un recurso en una sola
petición y leer la respuesta grupo a grupo.
"""

import logging
from typing import Any, Generic, Optional, TypeVar

from pydantic import Field, model_validator

from woocommerce_api.exceptions import WooBatchConflictError

from .base import WooBaseModel
from .category import WooProductCategory, WooProductShippingClass, WooProductTag
from .coupon import WooCoupon
from .customer import WooCustomer
from .order import WooOrder
from .product import WooProduct
from .review import WooProductReview
from .settings import WooSettingOption
from .tax import WooTaxRate
from .variation import WooProductVariation
from .webhook import WooWebhook

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=WooBaseModel)

BATCH_GROUPS = ("create", "update", "delete")


class WooBatchRequest(WooBaseModel, Generic[T]):
    """
    Petición batch.

    Un grupo en None no se envía; una lista vacía explícita se envía como `[]`
    (WooCommerce distingue ambos casos).
    """

    create: Optional[list[T]] = None
    update: Optional[list[T]] = None
    delete: Optional[list[int]] = None

    def to_dict(self, include_id: bool = True) -> dict[str, Any]:
        body: dict[str, Any] = {}
        if self.create is not None:
            body["create"] = [item.to_dict(include_id=False) for item in self.create]
        if self.update is not None:
            body["update"] = [item.to_dict() for item in self.update]
        if self.delete is not None:
            body["delete"] = list(self.delete)
        return body

    def validate_identities(self) -> None:
        """Raise WooBatchConflictError unless every update has an id and no id is both updated and deleted."""
        update_ids = []
        for position, item in enumerate(self.update or []):
            item_id = getattr(item, "id", None)
            if item_id is None:
                raise WooBatchConflictError(f"Batch update entry #{position} has no 'id'")
            update_ids.append(item_id)

        conflicts = sorted(set(update_ids) & set(self.delete or []), key=str)
        if conflicts:
            raise WooBatchConflictError(f"Ids present in both 'update' and 'delete': {conflicts}")

    @property
    def is_empty(self) -> bool:
        return not (self.create or self.update or self.delete)


class WooBatchItemError(WooBaseModel):
    """Error devuelto por el servidor para una entrada del batch"""

    id: Any = None
    code: Optional[str] = None
    message: Optional[str] = None
    status: Optional[int] = None
    group: Optional[str] = None


class WooBatchResponse(WooBaseModel, Generic[T]):
    """
    Respuesta batch.

    Cada grupo es opcional. Las entradas con un objeto `error` se separan en
    `errors` en lugar de parsearse como T.
    """

    create: Optional[list[T]] = None
    update: Optional[list[T]] = None
    delete: Optional[list[T]] = None
    errors: list[WooBatchItemError] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _collect_item_errors(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        data = dict(data)
        errors = list(data.get("errors") or [])
        for group in BATCH_GROUPS:
            entries = data.get(group)
            if entries is None:
                continue
            kept = []
            for entry in entries:
                error = entry.get("error") if isinstance(entry, dict) else None
                if isinstance(error, dict):
                    error_data = error.get("data") if isinstance(error.get("data"), dict) else {}
                    errors.append(
                        {
                            "id": entry.get("id"),
                            "code": error.get("code"),
                            "message": error.get("message"),
                            "status": error_data.get("status"),
                            "group": group,
                        }
                    )
                else:
                    kept.append(entry)
            data[group] = kept

        if errors:
            logger.debug(f"Batch response carries {len(errors)} item error(s)")
        data["errors"] = errors
        return data

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)


# Concrete envelopes per resource
WooProductCategoryBatchRequest = WooBatchRequest[WooProductCategory]
WooProductCategoryBatchResponse = WooBatchResponse[WooProductCategory]
WooCouponBatchRequest = WooBatchRequest[WooCoupon]
WooCouponBatchResponse = WooBatchResponse[WooCoupon]
WooCustomerBatchRequest = WooBatchRequest[WooCustomer]
WooCustomerBatchResponse = WooBatchResponse[WooCustomer]
WooOrderBatchRequest = WooBatchRequest[WooOrder]
WooOrderBatchResponse = WooBatchResponse[WooOrder]
WooProductBatchRequest = WooBatchRequest[WooProduct]
WooProductBatchResponse = WooBatchResponse[WooProduct]
WooProductTagBatchRequest = WooBatchRequest[WooProductTag]
WooProductTagBatchResponse = WooBatchResponse[WooProductTag]
WooProductShippingClassBatchRequest = WooBatchRequest[WooProductShippingClass]
WooProductShippingClassBatchResponse = WooBatchResponse[WooProductShippingClass]
WooProductReviewBatchRequest = WooBatchRequest[WooProductReview]
WooProductReviewBatchResponse = WooBatchResponse[WooProductReview]
WooProductVariationBatchRequest = WooBatchRequest[WooProductVariation]
WooProductVariationBatchResponse = WooBatchResponse[WooProductVariation]
WooTaxRateBatchRequest = WooBatchRequest[WooTaxRate]
WooTaxRateBatchResponse = WooBatchResponse[WooTaxRate]
WooWebhookBatchRequest = WooBatchRequest[WooWebhook]
WooWebhookBatchResponse = WooBatchResponse[WooWebhook]


class WooSettingOptionBatchRequest(WooBaseModel):
    """Batch de opciones de ajustes: WooCommerce solo admite `update`"""

    update: Optional[list[WooSettingOption]] = None

    def to_dict(self, include_id: bool = True) -> dict[str, Any]:
        if self.update is None:
            return {}
        return {"update": [item.to_dict() for item in self.update]}

    def validate_identities(self) -> None:
        for position, item in enumerate(self.update or []):
            if item.id is None:
                raise WooBatchConflictError(f"Batch update entry #{position} has no 'id'")


class WooSettingOptionBatchResponse(WooBaseModel):
    update: Optional[list[WooSettingOption]] = None
