"""
Clientes HTTP para la API WooCommerce
"""

from .http_client import WooHttpClient
from .woocommerce_client import WooCommerce, WooCommerceFactory

__all__ = [
    "WooHttpClient",
    "WooCommerce",
    "WooCommerceFactory",
]
