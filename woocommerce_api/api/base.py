"""
Dispatcher común de las operaciones REST.

Responsabilidad: Resolver el modo faker, llamar al transporte y mapear la
respuesta JSON a modelos. Los mixins de cada recurso solo arman paths,
query params y cuerpos.
"""

import logging
from typing import TYPE_CHECKING, Any, Optional, TypeVar

from woocommerce_api.exceptions import WooMissingIdentityError
from woocommerce_api.models.base import WooBaseModel
from woocommerce_api.utils.fake_helper import FakeHelper

if TYPE_CHECKING:
    from woocommerce_api.clients.http_client import WooHttpClient

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=WooBaseModel)

# Non-paginated fake lists return between 1 and this many items
FAKE_UNPAGED_MAX = 10


class WooApiBase:
    """
    Base de todos los mixins de API.

    Subclasses provide `use_faker` (client-wide default) and
    `_get_http_client()`; the fake-mode check always happens before the
    transport is touched.
    """

    use_faker: bool = False

    def _get_http_client(self) -> "WooHttpClient":
        raise NotImplementedError

    def _is_using_faker(self, use_faker: Optional[bool]) -> bool:
        return use_faker if use_faker is not None else self.use_faker

    @staticmethod
    def _require_id(item: Any, resource: str, operation: str) -> Any:
        item_id = getattr(item, "id", None)
        if item_id is None:
            raise WooMissingIdentityError(resource, operation)
        return item_id

    @staticmethod
    def _fake_with_id(model: type[M], resource_id: Any = None, id_field: str = "id") -> M:
        """Fake item carrying the requested key (`id`, or `slug` / `code` for keyed resources)."""
        item = model.fake()
        if resource_id is None:
            return item
        return item.model_copy(update={id_field: resource_id})

    # ============================================================================
    # Operaciones genéricas
    # ============================================================================

    async def _list(
        self,
        model: type[M],
        path: str,
        params: Optional[dict[str, Any]] = None,
        use_faker: Optional[bool] = None,
    ) -> list[M]:
        if self._is_using_faker(use_faker):
            per_page = (params or {}).get("per_page")
            count = per_page if per_page is not None else FakeHelper.integer(FAKE_UNPAGED_MAX)
            logger.debug(f"faker: list {model.__name__} x{count}")
            return [model.fake() for _ in range(count)]

        data = await self._get_http_client().get(path, params=params)
        return [model.from_dict(item) for item in data or []]

    async def _retrieve(
        self,
        model: type[M],
        path: str,
        resource_id: Any = None,
        params: Optional[dict[str, Any]] = None,
        use_faker: Optional[bool] = None,
        id_field: str = "id",
    ) -> M:
        if self._is_using_faker(use_faker):
            logger.debug(f"faker: get {model.__name__} {resource_id}")
            return self._fake_with_id(model, resource_id, id_field)

        data = await self._get_http_client().get(path, params=params)
        return model.from_dict(data)

    async def _create(
        self,
        model: type[M],
        path: str,
        item: WooBaseModel,
        use_faker: Optional[bool] = None,
    ) -> M:
        if self._is_using_faker(use_faker):
            logger.debug(f"faker: create {model.__name__}")
            return model.overlay(model.fake(), item)

        data = await self._get_http_client().post(path, json=item.to_dict(include_id=False))
        return model.from_dict(data)

    async def _update(
        self,
        model: type[M],
        path: str,
        item: WooBaseModel,
        use_faker: Optional[bool] = None,
    ) -> M:
        if self._is_using_faker(use_faker):
            logger.debug(f"faker: update {model.__name__}")
            return model.overlay(model.fake(), item)

        data = await self._get_http_client().put(path, json=item.to_dict())
        return model.from_dict(data)

    async def _post_action(
        self,
        model: type[M],
        path: str,
        body: Optional[dict[str, Any]] = None,
        use_faker: Optional[bool] = None,
    ) -> M:
        """POST to an action path that answers with a resource (duplicate)."""
        if self._is_using_faker(use_faker):
            logger.debug(f"faker: action {path}")
            return model.fake()

        data = await self._get_http_client().post(path, json=body)
        return model.from_dict(data)

    async def _delete(
        self,
        model: type[M],
        path: str,
        resource_id: Any,
        params: Optional[dict[str, Any]] = None,
        use_faker: Optional[bool] = None,
        id_field: str = "id",
    ) -> M:
        if self._is_using_faker(use_faker):
            logger.debug(f"faker: delete {model.__name__} {resource_id}")
            return self._fake_with_id(model, resource_id, id_field)

        data = await self._get_http_client().delete(path, params=params)
        return model.from_dict(data)

    async def _replace_list(
        self,
        model: type[M],
        path: str,
        items: list[WooBaseModel],
        use_faker: Optional[bool] = None,
    ) -> list[M]:
        """PUT a whole collection (the body is a JSON array) and read it back."""
        if self._is_using_faker(use_faker):
            logger.debug(f"faker: replace {model.__name__} x{len(items)}")
            return [model.from_dict(item.to_snapshot()) for item in items]

        data = await self._get_http_client().put(path, json=[item.to_dict() for item in items])
        return [model.from_dict(item) for item in data or []]

    async def _batch(
        self,
        model: type[M],
        response_model: type[WooBaseModel],
        path: str,
        request: Any,
        use_faker: Optional[bool] = None,
    ) -> Any:
        request.validate_identities()

        if self._is_using_faker(use_faker):
            logger.debug(f"faker: batch {model.__name__}")
            fake_response: dict[str, Any] = {}
            if getattr(request, "create", None) is not None:
                fake_response["create"] = [model.overlay(model.fake(), item) for item in request.create]
            if request.update is not None:
                fake_response["update"] = list(request.update)
            if getattr(request, "delete", None) is not None:
                fake_response["delete"] = [self._fake_with_id(model, item_id) for item_id in request.delete]
            return response_model(**fake_response)

        data = await self._get_http_client().post(path, json=request.to_dict())
        return response_model.from_dict(data or {})
