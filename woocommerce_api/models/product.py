"""
Modelo de producto WooCommerce
Responsabilidad: Definir la estructura completa del producto y sus value objects
"""

from typing import Optional, Self

from woocommerce_api.utils.fake_helper import FakeHelper

from .base import (
    WooBaseModel,
    WooDateTime,
    WooLinks,
    WooMetaData,
    WooMoney,
    WooOptionalInt,
    WooResourceModel,
    read_only_field,
)
from .enums import (
    WooProductBackorder,
    WooProductCatalogVisibility,
    WooProductStatus,
    WooProductStockStatus,
    WooProductType,
    WooTaxStatus,
)


class WooProductImage(WooBaseModel):
    """Imagen de producto"""

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
            date_created_gmt=FakeHelper.datetime(),
            date_modified=FakeHelper.datetime(),
            date_modified_gmt=FakeHelper.datetime(),
            src=FakeHelper.image(),
            name=FakeHelper.word(),
            alt=FakeHelper.sentence(),
        )


class WooProductDimension(WooBaseModel):
    """Dimensiones (strings, en la unidad configurada en la tienda)"""

    length: Optional[str] = None
    width: Optional[str] = None
    height: Optional[str] = None

    @classmethod
    def fake(cls) -> Self:
        return cls(
            length=str(FakeHelper.integer(50)),
            width=str(FakeHelper.integer(50)),
            height=str(FakeHelper.integer(50)),
        )


class WooProductDownload(WooBaseModel):
    """Archivo descargable"""

    id: Optional[str] = None
    name: Optional[str] = None
    file: Optional[str] = None

    @classmethod
    def fake(cls) -> Self:
        return cls(id=FakeHelper.uuid(), name=FakeHelper.word(), file=FakeHelper.url())


class WooProductItemAttribute(WooBaseModel):
    """Atributo asignado al producto"""

    id: Optional[int] = None
    name: Optional[str] = None
    position: Optional[int] = None
    visible: Optional[bool] = None
    variation: Optional[bool] = None
    options: Optional[list[str]] = None

    @classmethod
    def fake(cls) -> Self:
        return cls(
            id=FakeHelper.integer(),
            name=FakeHelper.word(),
            position=FakeHelper.integer(10, 0),
            visible=FakeHelper.boolean(),
            variation=FakeHelper.boolean(),
            options=FakeHelper.list(FakeHelper.word, 5),
        )


class WooProductDefaultAttribute(WooBaseModel):
    """Atributo por defecto de un producto variable / atributo de una variación"""

    id: Optional[int] = None
    name: Optional[str] = None
    option: Optional[str] = None

    @classmethod
    def fake(cls) -> Self:
        return cls(id=FakeHelper.integer(), name=FakeHelper.word(), option=FakeHelper.word())


class WooProductCategoryRef(WooBaseModel):
    """Categoría referenciada desde un producto"""

    id: Optional[int] = None
    name: Optional[str] = read_only_field()
    slug: Optional[str] = read_only_field()

    @classmethod
    def fake(cls) -> Self:
        return cls(id=FakeHelper.integer(), name=FakeHelper.word(), slug=FakeHelper.slug())


class WooProductItemTag(WooProductCategoryRef):
    """Tag referenciado desde un producto"""


class WooProduct(WooResourceModel):
    """Producto WooCommerce"""

    name: Optional[str] = None
    slug: Optional[str] = None
    permalink: Optional[str] = read_only_field()
    date_created: WooDateTime = read_only_field()
    date_created_gmt: WooDateTime = read_only_field()
    date_modified: WooDateTime = read_only_field()
    date_modified_gmt: WooDateTime = read_only_field()
    type: Optional[WooProductType] = None
    status: Optional[WooProductStatus] = None
    featured: Optional[bool] = None
    catalog_visibility: Optional[WooProductCatalogVisibility] = None
    description: Optional[str] = None
    short_description: Optional[str] = None
    sku: Optional[str] = None
    price: WooMoney = read_only_field()
    regular_price: WooMoney = None
    sale_price: WooMoney = None
    date_on_sale_from: WooDateTime = None
    date_on_sale_from_gmt: WooDateTime = None
    date_on_sale_to: WooDateTime = None
    date_on_sale_to_gmt: WooDateTime = None
    price_html: Optional[str] = read_only_field()
    on_sale: Optional[bool] = read_only_field()
    purchasable: Optional[bool] = read_only_field()
    total_sales: WooOptionalInt = read_only_field()
    virtual: Optional[bool] = None
    downloadable: Optional[bool] = None
    downloads: Optional[list[WooProductDownload]] = None
    download_limit: Optional[int] = None
    download_expiry: Optional[int] = None
    external_url: Optional[str] = None
    button_text: Optional[str] = None
    tax_status: Optional[WooTaxStatus] = None
    tax_class: Optional[str] = None
    manage_stock: Optional[bool] = None
    stock_quantity: WooOptionalInt = None
    stock_status: Optional[WooProductStockStatus] = None
    backorders: Optional[WooProductBackorder] = None
    backorders_allowed: Optional[bool] = read_only_field()
    backordered: Optional[bool] = read_only_field()
    low_stock_amount: WooOptionalInt = None
    sold_individually: Optional[bool] = None
    weight: Optional[str] = None
    dimensions: Optional[WooProductDimension] = None
    shipping_required: Optional[bool] = read_only_field()
    shipping_taxable: Optional[bool] = read_only_field()
    shipping_class: Optional[str] = None
    shipping_class_id: WooOptionalInt = read_only_field()
    reviews_allowed: Optional[bool] = None
    average_rating: Optional[str] = read_only_field()
    rating_count: WooOptionalInt = read_only_field()
    related_ids: Optional[list[int]] = read_only_field()
    upsell_ids: Optional[list[int]] = None
    cross_sell_ids: Optional[list[int]] = None
    parent_id: WooOptionalInt = None
    purchase_note: Optional[str] = None
    categories: Optional[list[WooProductCategoryRef]] = None
    tags: Optional[list[WooProductItemTag]] = None
    images: Optional[list[WooProductImage]] = None
    attributes: Optional[list[WooProductItemAttribute]] = None
    default_attributes: Optional[list[WooProductDefaultAttribute]] = None
    variations: Optional[list[int]] = read_only_field()
    grouped_products: Optional[list[int]] = None
    menu_order: Optional[int] = None
    meta_data: Optional[list[WooMetaData]] = None
    links: Optional[WooLinks] = read_only_field(alias="_links")

    @classmethod
    def fake(cls) -> Self:
        regular_price = FakeHelper.price()
        return cls(
            id=FakeHelper.integer(10_000),
            name=FakeHelper.word().title(),
            slug=FakeHelper.slug(),
            permalink=FakeHelper.url(),
            date_created=FakeHelper.datetime(),
            date_created_gmt=FakeHelper.datetime(),
            date_modified=FakeHelper.datetime(),
            date_modified_gmt=FakeHelper.datetime(),
            type=WooProductType.fake(),
            status=WooProductStatus.fake(),
            featured=FakeHelper.boolean(),
            catalog_visibility=WooProductCatalogVisibility.fake(),
            description=FakeHelper.paragraph(),
            short_description=FakeHelper.sentence(),
            sku=FakeHelper.sku(),
            price=regular_price,
            regular_price=regular_price,
            sale_price=round(regular_price * 0.8, 2),
            date_on_sale_from=FakeHelper.datetime(),
            date_on_sale_to=FakeHelper.datetime(),
            price_html=f"<span>{regular_price}</span>",
            on_sale=FakeHelper.boolean(),
            purchasable=FakeHelper.boolean(),
            total_sales=FakeHelper.integer(1000, 0),
            virtual=FakeHelper.boolean(),
            downloadable=FakeHelper.boolean(),
            downloads=FakeHelper.list(WooProductDownload.fake, 3),
            download_limit=-1,
            download_expiry=-1,
            external_url=FakeHelper.url(),
            button_text=FakeHelper.word(),
            tax_status=WooTaxStatus.fake(),
            tax_class="",
            manage_stock=FakeHelper.boolean(),
            stock_quantity=FakeHelper.integer(200, 0),
            stock_status=WooProductStockStatus.fake(),
            backorders=WooProductBackorder.fake(),
            backorders_allowed=FakeHelper.boolean(),
            backordered=FakeHelper.boolean(),
            sold_individually=FakeHelper.boolean(),
            weight=str(FakeHelper.integer(20)),
            dimensions=WooProductDimension.fake(),
            shipping_required=FakeHelper.boolean(),
            shipping_taxable=FakeHelper.boolean(),
            shipping_class=FakeHelper.slug(),
            shipping_class_id=FakeHelper.integer(),
            reviews_allowed=FakeHelper.boolean(),
            average_rating=f"{FakeHelper.decimal(5):.2f}",
            rating_count=FakeHelper.integer(100, 0),
            related_ids=FakeHelper.integers(),
            upsell_ids=FakeHelper.integers(),
            cross_sell_ids=FakeHelper.integers(),
            parent_id=0,
            purchase_note=FakeHelper.sentence(),
            categories=FakeHelper.list(WooProductCategoryRef.fake, 3),
            tags=FakeHelper.list(WooProductItemTag.fake, 3),
            images=FakeHelper.list(WooProductImage.fake, 4),
            attributes=FakeHelper.list(WooProductItemAttribute.fake, 3),
            default_attributes=FakeHelper.list(WooProductDefaultAttribute.fake, 2),
            variations=FakeHelper.integers(),
            grouped_products=FakeHelper.integers(),
            menu_order=0,
            meta_data=FakeHelper.list(WooMetaData.fake, 3),
        )

    def get_primary_image(self) -> Optional[WooProductImage]:
        """Primera imagen del producto (la principal en WooCommerce)"""
        if self.images:
            return self.images[0]
        return None

    def is_variable(self) -> bool:
        return self.type == WooProductType.VARIABLE

    def is_in_stock(self) -> bool:
        return self.stock_status != WooProductStockStatus.OUTOFSTOCK


class WooProductWithChildren(WooBaseModel):
    """Producto principal junto con sus productos relacionados"""

    main_product: WooProduct
    related_products: Optional[list[WooProduct]] = None
    upsell_products: Optional[list[WooProduct]] = None
    cross_sell_products: Optional[list[WooProduct]] = None
    parent_product: Optional[WooProduct] = None
    grouped_products: Optional[list[WooProduct]] = None
    variations: Optional[list[WooProduct]] = None

    @classmethod
    def from_products(cls, products: list[WooProduct], main_product: WooProduct) -> Self:
        """Partition an `include=` listing by the main product's relationship lists."""
        related, upsells, cross_sells, grouped, variations = [], [], [], [], []
        parent = None

        for product in products:
            if product.id is None or product.id == main_product.id:
                continue
            if product.id in (main_product.related_ids or []):
                related.append(product)
            if product.id in (main_product.upsell_ids or []):
                upsells.append(product)
            if product.id in (main_product.cross_sell_ids or []):
                cross_sells.append(product)
            if product.id in (main_product.grouped_products or []):
                grouped.append(product)
            if product.id in (main_product.variations or []):
                variations.append(product)
            if main_product.parent_id and product.id == main_product.parent_id:
                parent = product

        return cls(
            main_product=main_product,
            related_products=related or None,
            upsell_products=upsells or None,
            cross_sell_products=cross_sells or None,
            parent_product=parent,
            grouped_products=grouped or None,
            variations=variations or None,
        )

    @classmethod
    def fake(cls) -> Self:
        return cls(
            main_product=WooProduct.fake(),
            related_products=FakeHelper.list(WooProduct.fake, 4),
            upsell_products=FakeHelper.list(WooProduct.fake, 4),
            cross_sell_products=FakeHelper.list(WooProduct.fake, 4),
            parent_product=WooProduct.fake(),
            grouped_products=FakeHelper.list(WooProduct.fake, 4),
            variations=FakeHelper.list(WooProduct.fake, 4),
        )
