"""
Operaciones de la API REST agrupadas por recurso (mixins de WooCommerce)
"""

from .base import WooApiBase
from .category_api import CategoryApiMixin
from .coupon_api import CouponApiMixin
from .customer_api import CustomerApiMixin
from .data_api import DataApiMixin
from .endpoints import (
    CategoryEndpoints,
    CouponEndpoints,
    CustomerEndpoints,
    DataEndpoints,
    OrderEndpoints,
    OrderNoteEndpoints,
    OrderRefundEndpoints,
    PaymentGatewayEndpoints,
    ProductEndpoints,
    ProductReviewEndpoints,
    ProductShippingClassEndpoints,
    ProductTagEndpoints,
    RefundEndpoints,
    ReportEndpoints,
    SettingsEndpoints,
    ShippingMethodEndpoints,
    ShippingZoneEndpoints,
    SystemStatusEndpoints,
    TaxClassEndpoints,
    TaxRateEndpoints,
    VariationEndpoints,
    WebhookEndpoints,
)
from .order_api import OrderApiMixin
from .order_note_api import OrderNoteApiMixin
from .order_refund_api import OrderRefundApiMixin
from .payment_gateway_api import PaymentGatewayApiMixin
from .product_api import ProductApiMixin
from .product_review_api import ProductReviewApiMixin
from .product_shipping_class_api import ProductShippingClassApiMixin
from .product_tag_api import ProductTagApiMixin
from .query import QueryParams
from .refund_api import RefundApiMixin
from .report_api import ReportApiMixin
from .settings_api import SettingsApiMixin
from .shipping_api import ShippingApiMixin
from .system_status_api import SystemStatusApiMixin
from .tax_api import TaxApiMixin
from .variation_api import VariationApiMixin
from .webhook_api import WebhookApiMixin

__all__ = [
    "WooApiBase",
    "QueryParams",
    # Mixins
    "CategoryApiMixin",
    "CouponApiMixin",
    "CustomerApiMixin",
    "OrderApiMixin",
    "OrderNoteApiMixin",
    "OrderRefundApiMixin",
    "ProductApiMixin",
    "ProductTagApiMixin",
    "ProductShippingClassApiMixin",
    "ProductReviewApiMixin",
    "VariationApiMixin",
    "SettingsApiMixin",
    "WebhookApiMixin",
    "TaxApiMixin",
    "PaymentGatewayApiMixin",
    "ShippingApiMixin",
    "DataApiMixin",
    "RefundApiMixin",
    "ReportApiMixin",
    "SystemStatusApiMixin",
    # Endpoints
    "CategoryEndpoints",
    "CouponEndpoints",
    "CustomerEndpoints",
    "OrderEndpoints",
    "OrderNoteEndpoints",
    "OrderRefundEndpoints",
    "ProductEndpoints",
    "ProductTagEndpoints",
    "ProductShippingClassEndpoints",
    "ProductReviewEndpoints",
    "VariationEndpoints",
    "SettingsEndpoints",
    "WebhookEndpoints",
    "TaxClassEndpoints",
    "TaxRateEndpoints",
    "PaymentGatewayEndpoints",
    "ShippingZoneEndpoints",
    "ShippingMethodEndpoints",
    "DataEndpoints",
    "RefundEndpoints",
    "ReportEndpoints",
    "SystemStatusEndpoints",
]
