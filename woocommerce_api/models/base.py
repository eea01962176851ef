"""
Modelos base para la API WooCommerce
Responsabilidad: Definir clases base, tipos tolerantes y el contrato
from_dict / to_dict / fake compartido por todos los recursos.
"""

import logging
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Annotated, Any, Optional, Self

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    PlainSerializer,
    SerializationInfo,
    SerializerFunctionWrapHandler,
    model_serializer,
)

from woocommerce_api.utils.fake_helper import FakeHelper

logger = logging.getLogger(__name__)

# Serialization context flag: strip read-only fields for request bodies
WRITE_CONTEXT = {"write": True}


class WooEnum(str, Enum):
    """
    Closed WooCommerce enumeration.

    Unknown wire values never raise: they resolve to `fallback()` (the first
    member unless a subclass says otherwise).
    """

    @classmethod
    def fallback(cls) -> "WooEnum":
        return next(iter(cls))

    @classmethod
    def _missing_(cls, value: object) -> "WooEnum":
        member = cls.fallback()
        logger.debug(f"Unknown {cls.__name__} value {value!r}, falling back to {member.value!r}")
        return member

    @classmethod
    def fake(cls) -> Self:
        return FakeHelper.random_item(list(cls))

    def __str__(self) -> str:
        return self.value


def _parse_datetime(value: Any) -> Any:
    if value is None or isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
        try:
            return datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            logger.debug(f"Unparseable datetime {value!r}, treated as absent")
            return None
    return value


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


def _format_money(value: float | None) -> str | None:
    if value is None:
        return None
    try:
        return format(Decimal(str(value)).normalize(), "f")
    except InvalidOperation:
        return str(value)


# Tolerant field types. The validator sits outside Optional so that blank
# strings become None before the union is evaluated.
WooDateTime = Annotated[Optional[datetime], BeforeValidator(_parse_datetime)]
WooMoney = Annotated[
    Optional[float],
    BeforeValidator(_blank_to_none),
    PlainSerializer(_format_money, return_type=Optional[str], when_used="json"),
]
WooOptionalInt = Annotated[Optional[int], BeforeValidator(_blank_to_none)]


def read_only_field(default: Any = None, **kwargs: Any) -> Any:
    """Field the server computes; it is parsed but never sent back."""
    return Field(default, json_schema_extra={"read_only": True}, **kwargs)


class WooBaseModel(BaseModel):
    """Modelo base para todos los modelos WooCommerce"""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

    @classmethod
    def read_only_fields(cls) -> frozenset[str]:
        names = set()
        for name, field in cls.model_fields.items():
            extra = field.json_schema_extra
            if isinstance(extra, dict) and extra.get("read_only"):
                names.add(field.alias or name)
        return frozenset(names)

    @model_serializer(mode="wrap")
    def _serialize(self, handler: SerializerFunctionWrapHandler, info: SerializationInfo) -> dict[str, Any]:
        data = handler(self)
        context = info.context or {}
        if context.get("write") and isinstance(data, dict):
            for name in self.read_only_fields():
                data.pop(name, None)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Build the model from a decoded JSON object."""
        return cls.model_validate(data)

    def to_dict(self, include_id: bool = True) -> dict[str, Any]:
        """
        JSON-ready request body.

        Unset fields and read-only server fields are omitted; `id` is kept
        unless `include_id` is False (create requests).
        """
        exclude = None if include_id else {"id"}
        return self.model_dump(
            mode="json",
            by_alias=True,
            exclude_none=True,
            exclude=exclude,
            context=WRITE_CONTEXT,
        )

    def to_snapshot(self) -> dict[str, Any]:
        """Every set field, read-only ones included."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def overlay(cls, base: "WooBaseModel", changes: "WooBaseModel") -> Self:
        """Merge the set fields of `changes` over `base` (used by fake mode)."""
        return cls.from_dict({**base.to_snapshot(), **changes.to_snapshot()})

    @classmethod
    def fake(cls) -> Self:
        raise NotImplementedError(f"{cls.__name__} does not provide fake data")


class WooResourceModel(WooBaseModel):
    """
    REST resource with a server-assigned integer id.

    Two instances of the same resource type with the same id are equal even
    if other fields differ: they stand for the same remote resource.
    """

    id: Optional[int] = None

    def __eq__(self, other: object) -> bool:
        if type(other) is type(self) and self.id is not None and other.id is not None:  # type: ignore[attr-defined]
            return self.id == other.id  # type: ignore[attr-defined]
        return super().__eq__(other)

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.id))

    def with_id(self, resource_id: int) -> Self:
        return self.model_copy(update={"id": resource_id})


class WooMetaData(WooBaseModel):
    """Entrada de meta_data"""

    id: Optional[int] = read_only_field()
    key: Optional[str] = None
    value: Any = None

    @classmethod
    def fake(cls) -> Self:
        return cls(id=FakeHelper.integer(), key=FakeHelper.word(), value=FakeHelper.sentence())


class WooLinks(WooBaseModel):
    """HAL links (`_links`) returned with every resource"""

    self_: Optional[list[dict[str, Any]]] = Field(None, alias="self")
    collection: Optional[list[dict[str, Any]]] = None
    up: Optional[list[dict[str, Any]]] = None

    @classmethod
    def fake(cls) -> Self:
        return cls(self=[{"href": FakeHelper.url()}], collection=[{"href": FakeHelper.url()}])
