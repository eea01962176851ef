from .settings import WooCommerceSettings, get_settings, reset_settings

__all__ = [
    "WooCommerceSettings",
    "get_settings",
    "reset_settings",
]
