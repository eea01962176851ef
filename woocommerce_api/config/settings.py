from typing import Any

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from woocommerce_api.version import __version__


class WooCommerceSettings(BaseSettings):
    """
    Configuración del cliente WooCommerce utilizando Pydantic BaseSettings.
    Carga automáticamente las variables de entorno.
    """

    # Store connection
    WOOCOMMERCE_BASE_URL: str | None = Field(None, description="URL base de la tienda, ej. https://shop.example.com")
    WOOCOMMERCE_API_PATH: str = Field("/wp-json/wc/v3", description="Ruta de la API REST de WooCommerce")
    WOOCOMMERCE_CONSUMER_KEY: str | None = Field(None, description="Consumer key (ck_...)")
    WOOCOMMERCE_CONSUMER_SECRET: str | None = Field(None, description="Consumer secret (cs_...)")

    # HTTP behaviour
    WOOCOMMERCE_TIMEOUT: float = Field(30.0, description="Timeout de las requests en segundos")
    WOOCOMMERCE_VERIFY_SSL: bool = Field(True, description="Verificar certificados TLS")
    WOOCOMMERCE_QUERY_STRING_AUTH: bool = Field(
        False, description="Enviar credenciales como query params en lugar de Basic Auth"
    )
    WOOCOMMERCE_USER_AGENT: str = Field(
        f"WooCommerce-API-Python/{__version__}", description="User-Agent de las requests"
    )

    # Development
    WOOCOMMERCE_USE_FAKER: bool = Field(False, description="Responder con datos falsos sin llamar a la API")
    WOOCOMMERCE_DEBUG: bool = Field(False, description="Loguear requests y responses completas (solo para debug)")

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignorar campos extras en lugar de generar un error
    )

    def __init__(self, **data: Any):
        super().__init__(**data)

    @field_validator("WOOCOMMERCE_BASE_URL", mode="before")
    @classmethod
    def strip_base_url(cls, value):
        if isinstance(value, str):
            value = value.strip().rstrip("/")
            return value or None
        return value

    @field_validator("WOOCOMMERCE_API_PATH")
    @classmethod
    def normalize_api_path(cls, v: str) -> str:
        v = v.strip().rstrip("/")
        if v and not v.startswith("/"):
            v = f"/{v}"
        return v

    @field_validator("WOOCOMMERCE_TIMEOUT")
    @classmethod
    def validate_timeout(cls, v):
        if v <= 0:
            raise ValueError("WOOCOMMERCE_TIMEOUT must be greater than 0")
        return v

    @computed_field
    @property
    def api_base_url(self) -> str | None:
        """Construye la URL base de la API REST"""
        if not self.WOOCOMMERCE_BASE_URL:
            return None
        return f"{self.WOOCOMMERCE_BASE_URL}{self.WOOCOMMERCE_API_PATH}"

    @computed_field
    @property
    def has_credentials(self) -> bool:
        return bool(self.WOOCOMMERCE_CONSUMER_KEY and self.WOOCOMMERCE_CONSUMER_SECRET)


# Singleton para configuración
_settings_instance = None


def get_settings() -> WooCommerceSettings:
    """
    Retorna una instancia cacheada de la configuración.
    Esto evita cargar las variables de entorno múltiples veces.
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = WooCommerceSettings()
    return _settings_instance


def reset_settings() -> None:
    """Descarta la instancia cacheada (útil en tests)."""
    global _settings_instance
    _settings_instance = None
