"""
Modelos WooCommerce - Recursos de la API REST organizados por responsabilidad
"""

# Direcciones
from .address import WooBilling, WooShipping

# Base
from .base import (
    WRITE_CONTEXT,
    WooBaseModel,
    WooDateTime,
    WooEnum,
    WooLinks,
    WooMetaData,
    WooMoney,
    WooOptionalInt,
    WooResourceModel,
    read_only_field,
)

# Batch
from .batch import (
    WooBatchItemError,
    WooBatchRequest,
    WooBatchResponse,
    WooCouponBatchRequest,
    WooCouponBatchResponse,
    WooCustomerBatchRequest,
    WooCustomerBatchResponse,
    WooOrderBatchRequest,
    WooOrderBatchResponse,
    WooProductBatchRequest,
    WooProductBatchResponse,
    WooProductCategoryBatchRequest,
    WooProductCategoryBatchResponse,
    WooProductReviewBatchRequest,
    WooProductReviewBatchResponse,
    WooProductShippingClassBatchRequest,
    WooProductShippingClassBatchResponse,
    WooProductTagBatchRequest,
    WooProductTagBatchResponse,
    WooProductVariationBatchRequest,
    WooProductVariationBatchResponse,
    WooSettingOptionBatchRequest,
    WooSettingOptionBatchResponse,
    WooTaxRateBatchRequest,
    WooTaxRateBatchResponse,
    WooWebhookBatchRequest,
    WooWebhookBatchResponse,
)

# Taxonomías
from .category import WooCategoryImage, WooProductCategory, WooProductShippingClass, WooProductTag

# Cupones y clientes
from .coupon import WooCoupon
from .customer import WooCustomer, WooCustomerDownload, WooCustomerDownloadFile

# Datos de referencia
from .data import WooContinent, WooContinentCountry, WooCountry, WooCountryState, WooCurrency, WooDataIndexEntry

# Enumeraciones
from .enums import (
    WooCategoryDisplay,
    WooCategoryOrderBy,
    WooContext,
    WooCouponDiscountType,
    WooCouponOrderBy,
    WooCustomerOrderBy,
    WooCustomerRole,
    WooFilterStatus,
    WooOrderNoteType,
    WooOrderOrderBy,
    WooOrderStatus,
    WooProductBackorder,
    WooProductCatalogVisibility,
    WooProductFilterWithType,
    WooProductReviewFilterStatus,
    WooProductReviewOrderBy,
    WooProductReviewStatus,
    WooProductSortOrderBy,
    WooProductStatus,
    WooProductStockStatus,
    WooProductTagOrderBy,
    WooProductTaxStatus,
    WooProductType,
    WooRefundOrderBy,
    WooReportPeriod,
    WooShippingZoneLocationType,
    WooSortOrder,
    WooTaxRateOrderBy,
    WooTaxStatus,
    WooVariationOrderBy,
    WooWebhookFilterStatus,
    WooWebhookOrderBy,
    WooWebhookStatus,
)

# Pedidos
from .order import (
    WooCouponLine,
    WooFeeLine,
    WooFeeLineTax,
    WooLineItem,
    WooLineItemImage,
    WooOrder,
    WooOrderNote,
    WooOrderRefund,
    WooOrderRefundRef,
    WooRefund,
    WooRefundLineItem,
    WooShippingLine,
    WooTaxLine,
)

# Pasarelas de pago
from .payment_gateway import WooPaymentGateway

# Productos
from .product import (
    WooProduct,
    WooProductCategoryRef,
    WooProductDefaultAttribute,
    WooProductDimension,
    WooProductDownload,
    WooProductImage,
    WooProductItemAttribute,
    WooProductItemTag,
    WooProductWithChildren,
)
from .review import WooProductReview

# Reportes
from .report import WooReportIndexEntry, WooReportTotal, WooSalesReport, WooSalesReportTotals, WooTopSellerReport

# Ajustes
from .settings import WooMethodSetting, WooSettingOption, WooSettingsGroup

# Envíos
from .shipping import WooShippingMethod, WooShippingZone, WooShippingZoneLocation, WooShippingZoneMethod

# Estado del sistema
from .system_status import (
    WooSystemStatus,
    WooSystemStatusDatabase,
    WooSystemStatusEnvironment,
    WooSystemStatusSecurity,
    WooSystemStatusSettings,
    WooSystemStatusTheme,
    WooSystemStatusTool,
)

# Impuestos
from .tax import WooTaxClass, WooTaxRate
from .variation import WooProductVariation

# Webhooks
from .webhook import WEBHOOK_TOPICS, WooWebhook

__all__ = [
    # Base
    "WRITE_CONTEXT",
    "WooBaseModel",
    "WooResourceModel",
    "WooEnum",
    "WooDateTime",
    "WooMoney",
    "WooOptionalInt",
    "WooLinks",
    "WooMetaData",
    "read_only_field",
    # Direcciones
    "WooBilling",
    "WooShipping",
    # Taxonomías
    "WooCategoryImage",
    "WooProductCategory",
    "WooProductTag",
    "WooProductShippingClass",
    # Cupones y clientes
    "WooCoupon",
    "WooCustomer",
    "WooCustomerDownload",
    "WooCustomerDownloadFile",
    # Pedidos
    "WooOrder",
    "WooOrderNote",
    "WooOrderRefund",
    "WooOrderRefundRef",
    "WooLineItem",
    "WooLineItemImage",
    "WooTaxLine",
    "WooShippingLine",
    "WooFeeLine",
    "WooFeeLineTax",
    "WooCouponLine",
    "WooRefundLineItem",
    "WooRefund",
    # Pasarelas de pago
    "WooPaymentGateway",
    # Envíos
    "WooShippingZone",
    "WooShippingZoneLocation",
    "WooShippingZoneMethod",
    "WooShippingMethod",
    # Impuestos
    "WooTaxClass",
    "WooTaxRate",
    # Webhooks
    "WEBHOOK_TOPICS",
    "WooWebhook",
    # Datos de referencia
    "WooDataIndexEntry",
    "WooContinent",
    "WooContinentCountry",
    "WooCountry",
    "WooCountryState",
    "WooCurrency",
    # Reportes
    "WooReportIndexEntry",
    "WooSalesReport",
    "WooSalesReportTotals",
    "WooTopSellerReport",
    "WooReportTotal",
    # Estado del sistema
    "WooSystemStatus",
    "WooSystemStatusEnvironment",
    "WooSystemStatusDatabase",
    "WooSystemStatusTheme",
    "WooSystemStatusSettings",
    "WooSystemStatusSecurity",
    "WooSystemStatusTool",
    # Productos
    "WooProduct",
    "WooProductWithChildren",
    "WooProductImage",
    "WooProductDimension",
    "WooProductDownload",
    "WooProductItemAttribute",
    "WooProductDefaultAttribute",
    "WooProductCategoryRef",
    "WooProductItemTag",
    "WooProductReview",
    "WooProductVariation",
    # Ajustes
    "WooSettingsGroup",
    "WooSettingOption",
    "WooMethodSetting",
    # Batch
    "WooBatchRequest",
    "WooBatchResponse",
    "WooBatchItemError",
    "WooProductCategoryBatchRequest",
    "WooProductCategoryBatchResponse",
    "WooCouponBatchRequest",
    "WooCouponBatchResponse",
    "WooCustomerBatchRequest",
    "WooCustomerBatchResponse",
    "WooOrderBatchRequest",
    "WooOrderBatchResponse",
    "WooProductBatchRequest",
    "WooProductBatchResponse",
    "WooProductTagBatchRequest",
    "WooProductTagBatchResponse",
    "WooProductShippingClassBatchRequest",
    "WooProductShippingClassBatchResponse",
    "WooProductReviewBatchRequest",
    "WooProductReviewBatchResponse",
    "WooProductVariationBatchRequest",
    "WooProductVariationBatchResponse",
    "WooSettingOptionBatchRequest",
    "WooSettingOptionBatchResponse",
    "WooTaxRateBatchRequest",
    "WooTaxRateBatchResponse",
    "WooWebhookBatchRequest",
    "WooWebhookBatchResponse",
    # Enumeraciones
    "WooContext",
    "WooSortOrder",
    "WooFilterStatus",
    "WooProductSortOrderBy",
    "WooProductType",
    "WooProductStatus",
    "WooProductCatalogVisibility",
    "WooProductTaxStatus",
    "WooTaxStatus",
    "WooProductStockStatus",
    "WooProductBackorder",
    "WooProductFilterWithType",
    "WooCategoryDisplay",
    "WooCategoryOrderBy",
    "WooCouponOrderBy",
    "WooCouponDiscountType",
    "WooOrderStatus",
    "WooOrderOrderBy",
    "WooOrderNoteType",
    "WooRefundOrderBy",
    "WooProductTagOrderBy",
    "WooProductReviewStatus",
    "WooProductReviewFilterStatus",
    "WooProductReviewOrderBy",
    "WooCustomerRole",
    "WooCustomerOrderBy",
    "WooVariationOrderBy",
    "WooWebhookStatus",
    "WooWebhookFilterStatus",
    "WooWebhookOrderBy",
    "WooTaxRateOrderBy",
    "WooShippingZoneLocationType",
    "WooReportPeriod",
]
