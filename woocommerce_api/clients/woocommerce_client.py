"""
WooCommerce API Client

Punto de entrada de la librería: agrupa todas las operaciones REST y decide,
por llamada, si responder con datos falsos o ir a la red.
"""

import logging
from typing import Any

from woocommerce_api.api import (
    CategoryApiMixin,
    CouponApiMixin,
    CustomerApiMixin,
    DataApiMixin,
    OrderApiMixin,
    OrderNoteApiMixin,
    OrderRefundApiMixin,
    PaymentGatewayApiMixin,
    ProductApiMixin,
    ProductReviewApiMixin,
    ProductShippingClassApiMixin,
    ProductTagApiMixin,
    RefundApiMixin,
    ReportApiMixin,
    SettingsApiMixin,
    ShippingApiMixin,
    SystemStatusApiMixin,
    TaxApiMixin,
    VariationApiMixin,
    WebhookApiMixin,
)
from woocommerce_api.config.settings import WooCommerceSettings, get_settings
from woocommerce_api.exceptions import WooCommerceConfigError

from .http_client import WooHttpClient

logger = logging.getLogger(__name__)


class WooCommerce(
    CategoryApiMixin,
    CouponApiMixin,
    CustomerApiMixin,
    OrderApiMixin,
    OrderNoteApiMixin,
    OrderRefundApiMixin,
    ProductApiMixin,
    ProductTagApiMixin,
    ProductShippingClassApiMixin,
    ProductReviewApiMixin,
    VariationApiMixin,
    SettingsApiMixin,
    WebhookApiMixin,
    TaxApiMixin,
    PaymentGatewayApiMixin,
    ShippingApiMixin,
    DataApiMixin,
    RefundApiMixin,
    ReportApiMixin,
    SystemStatusApiMixin,
):
    """
    Async client for the WooCommerce REST API.

    Every argument falls back to WooCommerceSettings (WOOCOMMERCE_* env vars).
    Configuration is fixed at construction; `use_faker` can still be
    overridden per call.

    Environment Variables:
        WOOCOMMERCE_BASE_URL: Store URL
        WOOCOMMERCE_CONSUMER_KEY / WOOCOMMERCE_CONSUMER_SECRET: REST credentials
        WOOCOMMERCE_USE_FAKER: Answer with fake data, no network (default: False)

    Example:
        async with WooCommerce(base_url="https://shop.example.com",
                               consumer_key="ck_...", consumer_secret="cs_...") as woo:
            products = await woo.get_products(per_page=20)
    """

    def __init__(
        self,
        base_url: str | None = None,
        consumer_key: str | None = None,
        consumer_secret: str | None = None,
        api_path: str | None = None,
        timeout: float | None = None,
        verify_ssl: bool | None = None,
        query_string_auth: bool | None = None,
        use_faker: bool | None = None,
        debug: bool | None = None,
        http_client: WooHttpClient | None = None,
        settings: WooCommerceSettings | None = None,
    ):
        """
        Initialize WooCommerce client.

        Args:
            base_url: Store URL (defaults to env WOOCOMMERCE_BASE_URL)
            consumer_key: Consumer key (defaults to env WOOCOMMERCE_CONSUMER_KEY)
            consumer_secret: Consumer secret (defaults to env WOOCOMMERCE_CONSUMER_SECRET)
            api_path: REST prefix (defaults to /wp-json/wc/v3)
            timeout: Request timeout in seconds
            verify_ssl: Verify TLS certificates
            query_string_auth: Send credentials as query params
            use_faker: Default fake-data mode for every call
            debug: Log request/response bodies
            http_client: Ready transport (tests)
            settings: Settings instance (defaults to get_settings())
        """
        settings = settings or get_settings()

        self._base_url = (base_url or settings.WOOCOMMERCE_BASE_URL or "").strip().rstrip("/") or None
        self._api_path = api_path or settings.WOOCOMMERCE_API_PATH
        self._consumer_key = consumer_key or settings.WOOCOMMERCE_CONSUMER_KEY
        self._consumer_secret = consumer_secret or settings.WOOCOMMERCE_CONSUMER_SECRET
        self._timeout = timeout or settings.WOOCOMMERCE_TIMEOUT
        self._verify_ssl = verify_ssl if verify_ssl is not None else settings.WOOCOMMERCE_VERIFY_SSL
        self._query_string_auth = (
            query_string_auth if query_string_auth is not None else settings.WOOCOMMERCE_QUERY_STRING_AUTH
        )
        self._use_faker = use_faker if use_faker is not None else settings.WOOCOMMERCE_USE_FAKER
        self._debug = debug if debug is not None else settings.WOOCOMMERCE_DEBUG
        self._user_agent = settings.WOOCOMMERCE_USER_AGENT
        self._http_client = http_client

    @property
    def use_faker(self) -> bool:  # type: ignore[override]
        return self._use_faker

    @property
    def base_url(self) -> str | None:
        return self._base_url

    @property
    def api_base_url(self) -> str | None:
        if not self._base_url:
            return None
        return f"{self._base_url}{self._api_path}"

    def _get_http_client(self) -> WooHttpClient:
        """Return the transport, creating it on first live call."""
        if self._http_client is None:
            if not self.api_base_url:
                raise WooCommerceConfigError(
                    "WooCommerce base URL is not configured (base_url or WOOCOMMERCE_BASE_URL)"
                )
            if not (self._consumer_key and self._consumer_secret):
                raise WooCommerceConfigError(
                    "WooCommerce credentials are not configured "
                    "(consumer_key/consumer_secret or WOOCOMMERCE_CONSUMER_KEY/WOOCOMMERCE_CONSUMER_SECRET)"
                )
            logger.info(f"Creating WooCommerce transport for {self.api_base_url}")
            self._http_client = WooHttpClient(
                api_base_url=self.api_base_url,
                consumer_key=self._consumer_key,
                consumer_secret=self._consumer_secret,
                timeout=self._timeout,
                verify_ssl=self._verify_ssl,
                query_string_auth=self._query_string_auth,
                user_agent=self._user_agent,
                debug=self._debug,
            )
        return self._http_client

    async def close(self) -> None:
        """Release the transport, if one was created."""
        if self._http_client is not None:
            await self._http_client.close()

    async def __aenter__(self) -> "WooCommerce":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()

    def __repr__(self) -> str:
        return f"WooCommerce(base_url={self._base_url!r}, use_faker={self._use_faker})"


class WooCommerceFactory:
    """Factory for creating WooCommerce clients."""

    @staticmethod
    def create(
        base_url: str | None = None,
        consumer_key: str | None = None,
        consumer_secret: str | None = None,
        use_faker: bool | None = None,
        **kwargs: Any,
    ) -> WooCommerce:
        """
        Create client; missing arguments come from the environment.

        Returns:
            WooCommerce instance
        """
        return WooCommerce(
            base_url=base_url,
            consumer_key=consumer_key,
            consumer_secret=consumer_secret,
            use_faker=use_faker,
            **kwargs,
        )

    @staticmethod
    def from_settings(settings: WooCommerceSettings | None = None) -> WooCommerce:
        """Create client entirely from WooCommerceSettings."""
        return WooCommerce(settings=settings or get_settings())

    @staticmethod
    def create_fake() -> WooCommerce:
        """Client that always answers with fake data (demos, tests)."""
        return WooCommerce(use_faker=True)
