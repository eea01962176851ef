"""
Modelos de taxonomías de producto: categorías, tags y clases de envío
"""

from typing import Optional, Self

from woocommerce_api.utils.fake_helper import FakeHelper

from .base import WooBaseModel, WooDateTime, WooLinks, WooResourceModel, read_only_field
from .enums import WooCategoryDisplay


class WooCategoryImage(WooBaseModel):
    """Imagen de categoría"""

    id: Optional[int] = None
    date_created: WooDateTime = read_only_field()
    date_created_gmt: WooDateTime = read_only_field()
    date_modified: WooDateTime = read_only_field()
    date_modified_gmt: WooDateTime = read_only_field()
    src: Optional[str] = None
    name: Optional[str] = None
    alt: Optional[str] = None

    @classmethod
    def fake(cls) -> Self:
        return cls(
            id=FakeHelper.integer(),
            date_created=FakeHelper.datetime(),
            date_modified=FakeHelper.datetime(),
            src=FakeHelper.image(),
            name=FakeHelper.word(),
            alt=FakeHelper.word(),
        )


class WooProductCategory(WooResourceModel):
    """Categoría de producto"""

    name: Optional[str] = None
    slug: Optional[str] = None
    parent: Optional[int] = None
    description: Optional[str] = None
    display: Optional[WooCategoryDisplay] = None
    image: Optional[WooCategoryImage] = None
    menu_order: Optional[int] = None
    count: Optional[int] = read_only_field()
    links: Optional[WooLinks] = read_only_field(alias="_links")

    @classmethod
    def fake(cls) -> Self:
        return cls(
            id=FakeHelper.integer(1000),
            name=FakeHelper.word().title(),
            slug=FakeHelper.slug(),
            parent=0,
            description=FakeHelper.sentence(),
            display=WooCategoryDisplay.fake(),
            image=WooCategoryImage.fake(),
            menu_order=FakeHelper.integer(10, 0),
            count=FakeHelper.integer(100, 0),
            links=WooLinks.fake(),
        )


class WooProductTag(WooResourceModel):
    """Tag de producto"""

    name: Optional[str] = None
    slug: Optional[str] = None
    description: Optional[str] = None
    count: Optional[int] = read_only_field()
    links: Optional[WooLinks] = read_only_field(alias="_links")

    @classmethod
    def fake(cls) -> Self:
        return cls(
            id=FakeHelper.integer(1000),
            name=FakeHelper.word(),
            slug=FakeHelper.slug(),
            description=FakeHelper.sentence(),
            count=FakeHelper.integer(100, 0),
        )


class WooProductShippingClass(WooProductTag):
    """Clase de envío (mismo esquema que un tag)"""
