"""
woocommerce_api - Cliente tipado y asíncrono para la API REST de WooCommerce
"""

from woocommerce_api.clients import WooCommerce, WooCommerceFactory, WooHttpClient
from woocommerce_api.config import WooCommerceSettings, get_settings
from woocommerce_api.exceptions import (
    WooBatchConflictError,
    WooCommerceApiError,
    WooCommerceConfigError,
    WooCommerceError,
    WooMissingIdentityError,
)
from woocommerce_api.utils import FakeHelper
from woocommerce_api.version import __version__

__all__ = [
    "__version__",
    "WooCommerce",
    "WooCommerceFactory",
    "WooHttpClient",
    "WooCommerceSettings",
    "get_settings",
    "FakeHelper",
    # Exceptions
    "WooCommerceError",
    "WooCommerceApiError",
    "WooCommerceConfigError",
    "WooMissingIdentityError",
    "WooBatchConflictError",
]
