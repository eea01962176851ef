"""
Enumeraciones de la API WooCommerce
Responsabilidad: Valores cerrados con su nombre exacto en el wire.
"""

from woocommerce_api.utils.fake_helper import FakeHelper

from .base import WooEnum

# ---------------------------------------------------------------------------
# Query-side enums
# ---------------------------------------------------------------------------


class WooContext(WooEnum):
    VIEW = "view"
    EDIT = "edit"


class WooSortOrder(WooEnum):
    DESC = "desc"
    ASC = "asc"


class WooFilterStatus(WooEnum):
    ANY = "any"
    DRAFT = "draft"
    PENDING = "pending"
    PRIVATE = "private"
    PUBLISH = "publish"


class WooProductSortOrderBy(WooEnum):
    DATE = "date"
    ID = "id"
    INCLUDE = "include"
    TITLE = "title"
    SLUG = "slug"
    PRICE = "price"
    POPULARITY = "popularity"
    RATING = "rating"


class WooCategoryOrderBy(WooEnum):
    NAME = "name"
    ID = "id"
    INCLUDE = "include"
    SLUG = "slug"
    TERM_GROUP = "term_group"
    DESCRIPTION = "description"
    COUNT = "count"


# Tags and shipping classes share the term ordering keys
WooProductTagOrderBy = WooCategoryOrderBy


class WooCouponOrderBy(WooEnum):
    DATE = "date"
    MODIFIED = "modified"
    ID = "id"
    INCLUDE = "include"
    TITLE = "title"
    SLUG = "slug"


class WooOrderOrderBy(WooEnum):
    DATE = "date"
    MODIFIED = "modified"
    ID = "id"
    INCLUDE = "include"
    TITLE = "title"
    SLUG = "slug"


# Refunds and variations accept the same post ordering keys as orders
WooRefundOrderBy = WooOrderOrderBy
WooVariationOrderBy = WooOrderOrderBy


class WooOrderNoteType(WooEnum):
    ANY = "any"
    CUSTOMER = "customer"
    INTERNAL = "internal"


class WooProductReviewOrderBy(WooEnum):
    DATE = "date"
    DATE_GMT = "date_gmt"
    ID = "id"
    SLUG = "slug"
    INCLUDE = "include"
    PRODUCT = "product"


class WooProductReviewFilterStatus(WooEnum):
    APPROVED = "approved"
    ALL = "all"
    HOLD = "hold"
    SPAM = "spam"
    TRASH = "trash"


class WooCustomerOrderBy(WooEnum):
    NAME = "name"
    ID = "id"
    INCLUDE = "include"
    REGISTERED_DATE = "registered_date"


class WooCustomerRole(WooEnum):
    CUSTOMER = "customer"
    ALL = "all"
    ADMINISTRATOR = "administrator"
    EDITOR = "editor"
    AUTHOR = "author"
    CONTRIBUTOR = "contributor"
    SUBSCRIBER = "subscriber"
    SHOP_MANAGER = "shop_manager"


class WooProductFilterWithType(WooEnum):
    """Relationship lists merged by `get_product_with_options`."""

    RELATED_IDS = "related_ids"
    UPSELL_IDS = "upsell_ids"
    CROSS_SELL_IDS = "cross_sell_ids"
    PARENT_ID = "parent_id"
    VARIATIONS = "variations"
    GROUPED_PRODUCTS = "grouped_products"


class WooWebhookFilterStatus(WooEnum):
    ALL = "all"
    ACTIVE = "active"
    PAUSED = "paused"
    DISABLED = "disabled"


class WooWebhookOrderBy(WooEnum):
    DATE = "date"
    ID = "id"
    TITLE = "title"


class WooTaxRateOrderBy(WooEnum):
    ORDER = "order"
    ID = "id"
    PRIORITY = "priority"


class WooReportPeriod(WooEnum):
    WEEK = "week"
    MONTH = "month"
    LAST_MONTH = "last_month"
    YEAR = "year"


# ---------------------------------------------------------------------------
# Model-side enums
# ---------------------------------------------------------------------------


class WooProductType(WooEnum):
    SIMPLE = "simple"
    GROUPED = "grouped"
    EXTERNAL = "external"
    VARIABLE = "variable"


class WooProductStatus(WooEnum):
    DRAFT = "draft"
    PENDING = "pending"
    PRIVATE = "private"
    PUBLISH = "publish"

    @classmethod
    def fallback(cls) -> "WooProductStatus":
        return cls.PUBLISH


class WooProductCatalogVisibility(WooEnum):
    VISIBLE = "visible"
    CATALOG = "catalog"
    SEARCH = "search"
    HIDDEN = "hidden"


class WooTaxStatus(WooEnum):
    TAXABLE = "taxable"
    SHIPPING = "shipping"
    NONE = "none"


WooProductTaxStatus = WooTaxStatus


class WooProductStockStatus(WooEnum):
    INSTOCK = "instock"
    OUTOFSTOCK = "outofstock"
    ONBACKORDER = "onbackorder"


class WooProductBackorder(WooEnum):
    NO = "no"
    NOTIFY = "notify"
    YES = "yes"


class WooCategoryDisplay(WooEnum):
    DEFAULT = "default"
    PRODUCTS = "products"
    SUBCATEGORIES = "subcategories"
    BOTH = "both"


class WooCouponDiscountType(WooEnum):
    FIXED_CART = "fixed_cart"
    PERCENT = "percent"
    FIXED_PRODUCT = "fixed_product"


class WooOrderStatus(WooEnum):
    PENDING = "pending"
    PROCESSING = "processing"
    ON_HOLD = "on-hold"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    REFUNDED = "refunded"
    FAILED = "failed"
    TRASH = "trash"
    CHECKOUT_DRAFT = "checkout-draft"
    # Only meaningful as a list filter
    ANY = "any"

    @classmethod
    def fake(cls) -> "WooOrderStatus":
        return FakeHelper.random_item([status for status in cls if status not in (cls.ANY, cls.CHECKOUT_DRAFT)])


class WooProductReviewStatus(WooEnum):
    APPROVED = "approved"
    HOLD = "hold"
    SPAM = "spam"
    UNSPAM = "unspam"
    TRASH = "trash"
    UNTRASH = "untrash"


class WooWebhookStatus(WooEnum):
    ACTIVE = "active"
    PAUSED = "paused"
    DISABLED = "disabled"


class WooShippingZoneLocationType(WooEnum):
    POSTCODE = "postcode"
    STATE = "state"
    COUNTRY = "country"
    CONTINENT = "continent"
