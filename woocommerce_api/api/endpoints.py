"""
Rutas de la API REST de WooCommerce.

Responsabilidad: Construir paths relativos a `/wp-json/wc/v3`. Sin I/O; la
URL base la agrega el transporte.
"""


class CategoryEndpoints:
    COLLECTION = "/products/categories"

    @classmethod
    def collection(cls) -> str:
        return cls.COLLECTION

    @classmethod
    def by_id(cls, category_id: int) -> str:
        return f"{cls.COLLECTION}/{category_id}"

    @classmethod
    def batch(cls) -> str:
        return f"{cls.COLLECTION}/batch"


class CouponEndpoints:
    COLLECTION = "/coupons"

    @classmethod
    def collection(cls) -> str:
        return cls.COLLECTION

    @classmethod
    def by_id(cls, coupon_id: int) -> str:
        return f"{cls.COLLECTION}/{coupon_id}"

    @classmethod
    def batch(cls) -> str:
        return f"{cls.COLLECTION}/batch"


class CustomerEndpoints:
    COLLECTION = "/customers"

    @classmethod
    def collection(cls) -> str:
        return cls.COLLECTION

    @classmethod
    def by_id(cls, customer_id: int) -> str:
        return f"{cls.COLLECTION}/{customer_id}"

    @classmethod
    def downloads(cls, customer_id: int) -> str:
        return f"{cls.COLLECTION}/{customer_id}/downloads"

    @classmethod
    def batch(cls) -> str:
        return f"{cls.COLLECTION}/batch"


class OrderEndpoints:
    COLLECTION = "/orders"

    @classmethod
    def collection(cls) -> str:
        return cls.COLLECTION

    @classmethod
    def by_id(cls, order_id: int) -> str:
        return f"{cls.COLLECTION}/{order_id}"

    @classmethod
    def send_details(cls, order_id: int) -> str:
        return f"{cls.COLLECTION}/{order_id}/actions/send_order_details"

    @classmethod
    def batch(cls) -> str:
        return f"{cls.COLLECTION}/batch"


class OrderNoteEndpoints:
    @staticmethod
    def collection(order_id: int) -> str:
        return f"/orders/{order_id}/notes"

    @staticmethod
    def by_id(order_id: int, note_id: int) -> str:
        return f"/orders/{order_id}/notes/{note_id}"


class OrderRefundEndpoints:
    @staticmethod
    def collection(order_id: int) -> str:
        return f"/orders/{order_id}/refunds"

    @staticmethod
    def by_id(order_id: int, refund_id: int) -> str:
        return f"/orders/{order_id}/refunds/{refund_id}"


class ProductEndpoints:
    COLLECTION = "/products"

    @classmethod
    def collection(cls) -> str:
        return cls.COLLECTION

    @classmethod
    def by_id(cls, product_id: int) -> str:
        return f"{cls.COLLECTION}/{product_id}"

    @classmethod
    def duplicate(cls, product_id: int) -> str:
        return f"{cls.COLLECTION}/{product_id}/duplicate"

    @classmethod
    def batch(cls) -> str:
        return f"{cls.COLLECTION}/batch"


class ProductTagEndpoints(CategoryEndpoints):
    COLLECTION = "/products/tags"


class ProductShippingClassEndpoints(CategoryEndpoints):
    COLLECTION = "/products/shipping_classes"


class ProductReviewEndpoints(CategoryEndpoints):
    COLLECTION = "/products/reviews"


class VariationEndpoints:
    @staticmethod
    def collection(product_id: int) -> str:
        return f"/products/{product_id}/variations"

    @staticmethod
    def by_id(product_id: int, variation_id: int) -> str:
        return f"/products/{product_id}/variations/{variation_id}"

    @staticmethod
    def batch(product_id: int) -> str:
        return f"/products/{product_id}/variations/batch"


class SettingsEndpoints:
    COLLECTION = "/settings"

    @classmethod
    def groups(cls) -> str:
        return cls.COLLECTION

    @classmethod
    def group(cls, group_id: str) -> str:
        return f"{cls.COLLECTION}/{group_id}"

    @classmethod
    def option(cls, group_id: str, option_id: str) -> str:
        return f"{cls.COLLECTION}/{group_id}/{option_id}"

    @classmethod
    def batch(cls, group_id: str) -> str:
        return f"{cls.COLLECTION}/{group_id}/batch"


class WebhookEndpoints(CategoryEndpoints):
    COLLECTION = "/webhooks"


class TaxRateEndpoints(CategoryEndpoints):
    COLLECTION = "/taxes"


class TaxClassEndpoints:
    COLLECTION = "/taxes/classes"

    @classmethod
    def collection(cls) -> str:
        return cls.COLLECTION

    @classmethod
    def by_slug(cls, slug: str) -> str:
        return f"{cls.COLLECTION}/{slug}"


class PaymentGatewayEndpoints:
    COLLECTION = "/payment_gateways"

    @classmethod
    def collection(cls) -> str:
        return cls.COLLECTION

    @classmethod
    def by_id(cls, gateway_id: str) -> str:
        return f"{cls.COLLECTION}/{gateway_id}"


class ShippingZoneEndpoints:
    COLLECTION = "/shipping/zones"

    @classmethod
    def collection(cls) -> str:
        return cls.COLLECTION

    @classmethod
    def by_id(cls, zone_id: int) -> str:
        return f"{cls.COLLECTION}/{zone_id}"

    @classmethod
    def locations(cls, zone_id: int) -> str:
        return f"{cls.COLLECTION}/{zone_id}/locations"

    @classmethod
    def methods(cls, zone_id: int) -> str:
        return f"{cls.COLLECTION}/{zone_id}/methods"

    @classmethod
    def method(cls, zone_id: int, instance_id: int) -> str:
        return f"{cls.COLLECTION}/{zone_id}/methods/{instance_id}"


class ShippingMethodEndpoints(PaymentGatewayEndpoints):
    COLLECTION = "/shipping_methods"


class RefundEndpoints:
    COLLECTION = "/refunds"

    @classmethod
    def collection(cls) -> str:
        return cls.COLLECTION


class DataEndpoints:
    COLLECTION = "/data"

    @classmethod
    def index(cls) -> str:
        return cls.COLLECTION

    @classmethod
    def continents(cls) -> str:
        return f"{cls.COLLECTION}/continents"

    @classmethod
    def continent(cls, code: str) -> str:
        return f"{cls.COLLECTION}/continents/{code}"

    @classmethod
    def countries(cls) -> str:
        return f"{cls.COLLECTION}/countries"

    @classmethod
    def country(cls, code: str) -> str:
        return f"{cls.COLLECTION}/countries/{code}"

    @classmethod
    def currencies(cls) -> str:
        return f"{cls.COLLECTION}/currencies"

    @classmethod
    def currency(cls, code: str) -> str:
        return f"{cls.COLLECTION}/currencies/{code}"

    @classmethod
    def current_currency(cls) -> str:
        return f"{cls.COLLECTION}/currencies/current"


class ReportEndpoints:
    COLLECTION = "/reports"

    @classmethod
    def index(cls) -> str:
        return cls.COLLECTION

    @classmethod
    def sales(cls) -> str:
        return f"{cls.COLLECTION}/sales"

    @classmethod
    def top_sellers(cls) -> str:
        return f"{cls.COLLECTION}/top_sellers"

    @classmethod
    def totals(cls, resource: str) -> str:
        """`resource`: coupons, customers, orders, products or reviews."""
        return f"{cls.COLLECTION}/{resource}/totals"


class SystemStatusEndpoints:
    COLLECTION = "/system_status"

    @classmethod
    def status(cls) -> str:
        return cls.COLLECTION

    @classmethod
    def tools(cls) -> str:
        return f"{cls.COLLECTION}/tools"

    @classmethod
    def tool(cls, tool_id: str) -> str:
        return f"{cls.COLLECTION}/tools/{tool_id}"
