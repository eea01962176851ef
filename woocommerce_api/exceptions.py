"""
WooCommerce API Exceptions.

Single Responsibility: Define exception types raised by this library.

Transport failures (httpx.RequestError: connection refused, DNS, timeouts)
are NOT wrapped; they reach the caller unchanged.
"""

from typing import Any


class WooCommerceError(Exception):
    """Base error for the WooCommerce client."""

    pass


class WooCommerceConfigError(WooCommerceError, ValueError):
    """Base URL or credentials are missing for a live request."""

    pass


class WooMissingIdentityError(WooCommerceError, ValueError):
    """
    A model without `id` was passed to an operation that targets an
    existing resource (update, delete, custom actions).

    Raised before any request is issued.
    """

    def __init__(self, resource: str, operation: str):
        self.resource = resource
        self.operation = operation
        super().__init__(f"Cannot {operation} {resource}: the model has no 'id'")


class WooBatchConflictError(WooCommerceError, ValueError):
    """Batch request with ids that are missing or used in more than one group."""

    pass


class WooCommerceApiError(WooCommerceError):
    """
    Non-2xx response from the WooCommerce REST API.

    WooCommerce error bodies look like:
        {"code": "woocommerce_rest_shop_order_invalid_id",
         "message": "Invalid ID.",
         "data": {"status": 404}}
    """

    def __init__(
        self,
        status_code: int,
        error_code: str,
        error_message: str,
        data: Any = None,
        response_body: Any = None,
        method: str | None = None,
        url: str | None = None,
    ):
        self.status_code = status_code
        self.error_code = error_code
        self.error_message = error_message
        self.data = data
        self.response_body = response_body
        self.method = method
        self.url = url
        super().__init__(f"[{status_code} {error_code}] {error_message}")

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404

    @property
    def is_auth_error(self) -> bool:
        return self.status_code in (401, 403)
