"""
Modelos de estado del sistema y herramientas de mantenimiento

El informe es de solo lectura y muy amplio; se modelan las secciones
habituales y el resto de claves se ignora.
"""

from typing import Any, Optional, Self

from woocommerce_api.utils.fake_helper import FakeHelper

from .base import WooBaseModel, WooLinks, read_only_field


class WooSystemStatusEnvironment(WooBaseModel):
    home_url: Optional[str] = None
    site_url: Optional[str] = None
    version: Optional[str] = None
    log_directory: Optional[str] = None
    log_directory_writable: Optional[bool] = None
    wp_version: Optional[str] = None
    wp_multisite: Optional[bool] = None
    wp_memory_limit: Optional[int] = None
    wp_debug_mode: Optional[bool] = None
    wp_cron: Optional[bool] = None
    language: Optional[str] = None
    server_info: Optional[str] = None
    php_version: Optional[str] = None
    php_post_max_size: Optional[int] = None
    php_max_execution_time: Optional[int] = None
    php_max_input_vars: Optional[int] = None
    curl_version: Optional[str] = None
    suhosin_installed: Optional[bool] = None
    max_upload_size: Optional[int] = None
    mysql_version: Optional[str] = None
    default_timezone: Optional[str] = None
    fsockopen_or_curl_enabled: Optional[bool] = None
    soapclient_enabled: Optional[bool] = None
    domdocument_enabled: Optional[bool] = None
    gzip_enabled: Optional[bool] = None
    mbstring_enabled: Optional[bool] = None
    remote_post_successful: Optional[bool] = None
    remote_post_response: Optional[str] = None
    remote_get_successful: Optional[bool] = None
    remote_get_response: Optional[str] = None

    @classmethod
    def fake(cls) -> Self:
        url = FakeHelper.url()
        return cls(
            home_url=url,
            site_url=url,
            version=FakeHelper.version(),
            wp_version=FakeHelper.version(),
            wp_multisite=False,
            wp_memory_limit=268_435_456,
            wp_debug_mode=FakeHelper.boolean(),
            wp_cron=True,
            language="en_US",
            php_version="8.2.0",
            mysql_version="8.0.36",
            default_timezone="UTC",
            remote_post_successful=True,
            remote_get_successful=True,
        )


class WooSystemStatusDatabase(WooBaseModel):
    wc_database_version: Optional[str] = None
    database_prefix: Optional[str] = None
    maxmind_geoip_database: Optional[str] = None
    database_tables: Optional[dict[str, Any]] = None

    @classmethod
    def fake(cls) -> Self:
        return cls(wc_database_version=FakeHelper.version(), database_prefix="wp_")


class WooSystemStatusTheme(WooBaseModel):
    name: Optional[str] = None
    version: Optional[str] = None
    version_latest: Optional[str] = None
    author_url: Optional[str] = None
    is_child_theme: Optional[bool] = None
    has_woocommerce_support: Optional[bool] = None
    has_woocommerce_file: Optional[bool] = None
    has_outdated_templates: Optional[bool] = None
    overrides: Optional[list[Any]] = None
    parent_name: Optional[str] = None
    parent_version: Optional[str] = None
    parent_author_url: Optional[str] = None

    @classmethod
    def fake(cls) -> Self:
        version = FakeHelper.version()
        return cls(
            name=FakeHelper.word().title(),
            version=version,
            version_latest=version,
            author_url=FakeHelper.url(),
            is_child_theme=False,
            has_woocommerce_support=True,
            has_outdated_templates=False,
        )


class WooSystemStatusSettings(WooBaseModel):
    api_enabled: Optional[bool] = None
    force_ssl: Optional[bool] = None
    currency: Optional[str] = None
    currency_symbol: Optional[str] = None
    currency_position: Optional[str] = None
    thousand_separator: Optional[str] = None
    decimal_separator: Optional[str] = None
    number_of_decimals: Optional[int] = None
    geolocation_enabled: Optional[bool] = None
    taxonomies: Optional[dict[str, Any]] = None

    @classmethod
    def fake(cls) -> Self:
        return cls(
            api_enabled=True,
            force_ssl=FakeHelper.boolean(),
            currency=FakeHelper.currency_code(),
            currency_symbol="$",
            currency_position="left",
            thousand_separator=",",
            decimal_separator=".",
            number_of_decimals=2,
            geolocation_enabled=FakeHelper.boolean(),
        )


class WooSystemStatusSecurity(WooBaseModel):
    secure_connection: Optional[bool] = None
    hide_errors: Optional[bool] = None

    @classmethod
    def fake(cls) -> Self:
        return cls(secure_connection=True, hide_errors=FakeHelper.boolean())


class WooSystemStatus(WooBaseModel):
    """Informe `/system_status`"""

    environment: Optional[WooSystemStatusEnvironment] = None
    database: Optional[WooSystemStatusDatabase] = None
    # Plugin and page entries are free-form objects
    active_plugins: Optional[list[Any]] = None
    inactive_plugins: Optional[list[Any]] = None
    theme: Optional[WooSystemStatusTheme] = None
    settings: Optional[WooSystemStatusSettings] = None
    security: Optional[WooSystemStatusSecurity] = None
    pages: Optional[list[Any]] = None

    @classmethod
    def fake(cls) -> Self:
        return cls(
            environment=WooSystemStatusEnvironment.fake(),
            database=WooSystemStatusDatabase.fake(),
            active_plugins=[{"plugin": "woocommerce/woocommerce.php", "name": "WooCommerce"}],
            inactive_plugins=[],
            theme=WooSystemStatusTheme.fake(),
            settings=WooSystemStatusSettings.fake(),
            security=WooSystemStatusSecurity.fake(),
            pages=[],
        )


class WooSystemStatusTool(WooBaseModel):
    """
    Herramienta de mantenimiento (`clear_transients`, ...).

    `success` y `message` solo llegan en la respuesta de ejecutar la
    herramienta; `confirm` es el flag de escritura que la ejecuta.
    """

    id: Optional[str] = None
    name: Optional[str] = read_only_field()
    action: Optional[str] = read_only_field()
    description: Optional[str] = read_only_field()
    success: Optional[bool] = read_only_field()
    message: Optional[str] = read_only_field()
    confirm: Optional[bool] = None
    links: Optional[WooLinks] = read_only_field(alias="_links")

    @classmethod
    def fake(cls) -> Self:
        tool_id = FakeHelper.random_item(["clear_transients", "clear_expired_transients", "recount_terms"])
        return cls(
            id=tool_id,
            name=tool_id.replace("_", " ").capitalize(),
            action=FakeHelper.sentence(),
            description=FakeHelper.sentence(),
        )
