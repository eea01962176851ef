"""
WooCommerce HTTP Client

Async transport for the WooCommerce REST API (`/wp-json/wc/v3`).
Uses httpx with a persistent AsyncClient, Basic Auth (or query-string auth)
and maps non-2xx responses to WooCommerceApiError.
"""

import logging
from typing import Any

import httpx

from woocommerce_api.exceptions import WooCommerceApiError
from woocommerce_api.version import __version__

logger = logging.getLogger(__name__)


class WooHttpClient:
    """
    HTTP client for the WooCommerce REST API.

    Single Responsibility: Execute one request per call and decode the JSON
    answer. No retries: transport errors (httpx.RequestError) propagate
    unchanged.

    Example:
        async with WooHttpClient("https://shop.example.com/wp-json/wc/v3", "ck_..", "cs_..") as http:
            products = await http.get("/products", params={"per_page": 5})
    """

    DEFAULT_TIMEOUT = 30.0

    def __init__(
        self,
        api_base_url: str,
        consumer_key: str,
        consumer_secret: str,
        timeout: float = DEFAULT_TIMEOUT,
        verify_ssl: bool = True,
        query_string_auth: bool = False,
        user_agent: str | None = None,
        debug: bool = False,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize HTTP client.

        Args:
            api_base_url: Store URL plus API path, e.g. https://shop.example.com/wp-json/wc/v3
            consumer_key: WooCommerce REST consumer key
            consumer_secret: WooCommerce REST consumer secret
            timeout: Request timeout in seconds
            verify_ssl: Verify TLS certificates
            query_string_auth: Send credentials as query params instead of Basic Auth
            user_agent: User-Agent header
            debug: Log request and response bodies at DEBUG
            transport: Custom httpx transport (tests use httpx.MockTransport)
        """
        self.api_base_url = api_base_url.rstrip("/")
        self._consumer_key = consumer_key
        self._consumer_secret = consumer_secret
        self._timeout = timeout
        self._verify_ssl = verify_ssl
        self._query_string_auth = query_string_auth
        self._user_agent = user_agent or f"WooCommerce-API-Python/{__version__}"
        self._debug = debug
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def initialize(self) -> None:
        """Initialize persistent HTTP client."""
        if self._client is not None:
            return

        auth = None
        params = None
        if self._query_string_auth:
            params = {"consumer_key": self._consumer_key, "consumer_secret": self._consumer_secret}
        else:
            auth = httpx.BasicAuth(self._consumer_key, self._consumer_secret)

        event_hooks = None
        if self._debug:
            event_hooks = {"request": [self._log_request], "response": [self._log_response]}

        self._client = httpx.AsyncClient(
            base_url=self.api_base_url,
            auth=auth,
            params=params,
            headers=self._get_headers(),
            timeout=httpx.Timeout(self._timeout),
            verify=self._verify_ssl,
            transport=self._transport,
            event_hooks=event_hooks,
        )

    async def close(self) -> None:
        """Close HTTP client and release resources."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "WooHttpClient":
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def _ensure_client(self) -> httpx.AsyncClient:
        """Ensure HTTP client is initialized."""
        if self._client is None:
            await self.initialize()
        return self._client  # type: ignore

    def _get_headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": self._user_agent,
        }

    # ============================================================================
    # HTTP verbs
    # ============================================================================

    async def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return await self.request("GET", path, params=params)

    async def post(self, path: str, params: dict[str, Any] | None = None, json: Any = None) -> Any:
        return await self.request("POST", path, params=params, json=json)

    async def put(self, path: str, params: dict[str, Any] | None = None, json: Any = None) -> Any:
        return await self.request("PUT", path, params=params, json=json)

    async def delete(self, path: str, params: dict[str, Any] | None = None, json: Any = None) -> Any:
        return await self.request("DELETE", path, params=params, json=json)

    async def request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> Any:
        """
        Execute a single request.

        Returns:
            Decoded JSON body, or None for an empty body

        Raises:
            WooCommerceApiError: On non-2xx responses
            httpx.RequestError: On connection errors and timeouts (unchanged)
        """
        client = await self._ensure_client()
        logger.debug(f"WooCommerce {method} {path} params={params}")

        response = await client.request(method, path, params=params, json=json)

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            self._handle_http_error(e)

        if not response.content:
            return None
        return response.json()

    def _handle_http_error(self, error: httpx.HTTPStatusError) -> None:
        """
        Map a non-2xx response to WooCommerceApiError.

        WooCommerce answers errors with {"code", "message", "data": {"status"}};
        the decoded body is kept in `response_body` as-is.

        Raises:
            WooCommerceApiError: Always
        """
        response = error.response
        status = response.status_code

        try:
            body: Any = response.json()
        except ValueError:
            body = response.text

        if isinstance(body, dict):
            code = body.get("code") or f"HTTP_{status}"
            message = body.get("message") or response.reason_phrase
            data = body.get("data")
        else:
            code = f"HTTP_{status}"
            message = body or response.reason_phrase
            data = None

        log = logger.error if status >= 500 else logger.warning
        log(f"WooCommerce {error.request.method} {error.request.url.path} failed: {status} {code}")

        raise WooCommerceApiError(
            status_code=status,
            error_code=code,
            error_message=message,
            data=data,
            response_body=body,
            method=error.request.method,
            url=str(error.request.url.copy_remove_param("consumer_secret")),
        ) from error

    # ============================================================================
    # Debug hooks
    # ============================================================================

    @staticmethod
    async def _log_request(request: httpx.Request) -> None:
        logger.debug(f"--> {request.method} {request.url.path} body={request.content.decode(errors='replace')}")

    @staticmethod
    async def _log_response(response: httpx.Response) -> None:
        await response.aread()
        logger.debug(f"<-- {response.status_code} {response.request.url.path} body={response.text}")
