"""BagelPay SDK Client implementation."""

import asyncio
from collections.abc import Mapping
from typing import Any, TypeVar

import httpx
import structlog
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from .casing import to_internal_form, to_wire_form
from .config import BagelPayConfig
from .exceptions import (
    BagelPayConnectionError,
    BagelPayError,
    BagelPayTimeoutError,
    exception_for_status,
)
from .models import (
    ApiError,
    CheckoutRequest,
    CheckoutResponse,
    CreateProductRequest,
    CustomerListResponse,
    Product,
    ProductListResponse,
    Subscription,
    SubscriptionListResponse,
    TransactionListResponse,
    UpdateProductRequest,
)
from .version import __version__

logger = structlog.get_logger(__name__)

MUTATING_METHODS = frozenset({"POST", "PUT", "PATCH"})

# Codes that mark a 2xx body carrying ``code``/``msg`` as a failure.
EMBEDDED_FAILURE_CODES = frozenset({400, 401, 403, 404, 422, 500})

ModelT = TypeVar("ModelT", bound=BaseModel)


class BagelPayClient:
    """
    Async client for the BagelPay payments API.

    Each method performs a single request; nothing is retried. Failures are
    raised as BagelPayError subclasses.

    Example:
        ```python
        from bagelpay import BagelPayClient, BagelPayConfig, CheckoutRequest

        config = BagelPayConfig(api_key="your-test-api-key")
        async with BagelPayClient(config) as client:
            checkout = await client.create_checkout(
                CheckoutRequest(product_id="prod_123", units="1")
            )
            print(checkout.checkout_url)
        ```
    """

    def __init__(self, config: BagelPayConfig) -> None:
        """
        Initialize BagelPay client.

        Args:
            config: Client configuration
        """
        self.config = config
        self._client: httpx.AsyncClient | None = None
        logger.info(
            "BagelPayClient initialized",
            base_url=self.config.base_url,
            test_mode=self.config.test_mode,
        )

    async def __aenter__(self) -> "BagelPayClient":
        """Async context manager entry."""
        self._get_client()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.config.base_url,
                timeout=self.config.timeout,
                verify=self.config.verify_ssl,
            )
        return self._client

    def _get_headers(self) -> dict[str, str]:
        """Get request headers."""
        return {
            "Content-Type": "application/json",
            "User-Agent": f"BagelPay-Python-SDK/{__version__}",
            "x-api-key": self.config.api_key,
        }

    async def close(self) -> None:
        """Close the HTTP client and cleanup resources."""
        if self._client:
            await self._client.aclose()
            self._client = None
            logger.info("BagelPayClient closed")

    # =========================================================================
    # Request Dispatch
    # =========================================================================

    async def _request(
        self,
        method: str,
        path: str,
        body: Any = None,
        params: Mapping[str, Any] | None = None,
    ) -> Any:
        """
        Send one request and return the decoded body in internal form.

        Args:
            method: HTTP method
            path: Endpoint path, appended to the configured base URL
            body: JSON-compatible body in internal form; only sent for
                POST, PUT and PATCH
            params: Query parameters; ``None`` values are omitted

        Returns:
            Decoded response body with camelCase keys

        Raises:
            BagelPayTimeoutError: If the request exceeds the configured timeout
            BagelPayConnectionError: If the request could not be completed
            BagelPayAPIError: If the API reports a failure
            BagelPayError: If a successful response is not valid JSON
        """
        method = method.upper()
        client = self._get_client()

        query = _encode_params(params)
        payload = None
        if body is not None and method in MUTATING_METHODS:
            payload = to_wire_form(body)

        logger.debug("BagelPay request", method=method, path=path, params=query)

        try:
            response = await asyncio.wait_for(
                client.request(
                    method,
                    path,
                    headers=self._get_headers(),
                    params=query or None,
                    json=payload,
                ),
                timeout=self.config.timeout,
            )
        except (httpx.TimeoutException, asyncio.TimeoutError) as e:
            logger.error("BagelPay request timed out", method=method, path=path)
            raise BagelPayTimeoutError(
                f"Request timeout after {self.config.timeout}s"
            ) from e
        except httpx.RequestError as e:
            logger.error("BagelPay request failed", method=method, path=path, error=str(e))
            raise BagelPayConnectionError(f"Request failed: {e}") from e

        if response.status_code >= 400:
            self._handle_error(response)

        try:
            data = response.json()
        except ValueError as e:
            raise BagelPayError(f"Invalid JSON response: {response.text}") from e

        embedded_code = _embedded_failure_code(data)
        if embedded_code is not None:
            error = ApiError.from_payload(data)
            logger.warning(
                "BagelPay API error in successful response",
                path=path,
                code=embedded_code,
                message=error.message,
            )
            raise exception_for_status(embedded_code)(
                error.message,
                status_code=embedded_code,
                error_code=error.code,
                payload=data,
            )

        return to_internal_form(data)

    def _handle_error(self, response: httpx.Response) -> None:
        """
        Handle HTTP error responses.

        Args:
            response: HTTP response with a status code of 400 or above

        Raises:
            BagelPayAuthenticationError: For 401 and 403 responses
            BagelPayValidationError: For 400 and 422 responses
            BagelPayNotFoundError: For 404 responses
            BagelPayRateLimitError: For 429 responses
            BagelPayServerError: For 5xx responses
            BagelPayAPIError: For other errors
        """
        status_code = response.status_code
        error_class = exception_for_status(status_code)

        try:
            error_data = response.json()
        except ValueError:
            logger.warning("BagelPay API error", status_code=status_code)
            raise error_class(
                f"HTTP {status_code}: {response.reason_phrase}",
                status_code=status_code,
            ) from None

        error = ApiError.from_payload(error_data)
        logger.warning(
            "BagelPay API error",
            status_code=status_code,
            code=error.code,
            message=error.message,
        )
        raise error_class(
            error.message,
            status_code=status_code,
            error_code=error.code,
            payload=error_data,
        )

    # =========================================================================
    # Checkout Methods
    # =========================================================================

    async def create_checkout(
        self, request: CheckoutRequest | Mapping[str, Any]
    ) -> CheckoutResponse:
        """
        Create a checkout session.

        Args:
            request: Checkout details

        Returns:
            CheckoutResponse with the payment ID and hosted checkout URL
        """
        data = await self._request(
            "POST", "/api/payments/checkouts", body=_dump_request(request)
        )
        checkout = _parse(CheckoutResponse, _unwrap(data))
        logger.info(
            "Checkout created",
            payment_id=checkout.payment_id,
            product_id=checkout.product_id,
        )
        return checkout

    # =========================================================================
    # Product Methods
    # =========================================================================

    async def create_product(
        self, request: CreateProductRequest | Mapping[str, Any]
    ) -> Product:
        """
        Create a product.

        Args:
            request: Product details

        Returns:
            The created Product

        Raises:
            BagelPayValidationError: If the API rejects the product data
        """
        data = await self._request(
            "POST", "/api/products/create", body=_dump_request(request)
        )
        product = _parse(Product, _unwrap(data))
        logger.info("Product created", product_id=product.product_id)
        return product

    async def list_products(
        self, page_num: int = 1, page_size: int = 10
    ) -> ProductListResponse:
        """
        List products.

        Args:
            page_num: Page number, starting at 1
            page_size: Number of products per page

        Returns:
            ProductListResponse with items and total count
        """
        data = await self._request(
            "GET",
            "/api/products/list",
            params={"pageNum": page_num, "pageSize": page_size},
        )
        return _parse(ProductListResponse, data)

    async def get_product(self, product_id: str) -> Product:
        """
        Get a product by ID.

        Raises:
            BagelPayNotFoundError: If the product does not exist
        """
        data = await self._request("GET", f"/api/products/{product_id}")
        return _parse(Product, _unwrap(data))

    async def archive_product(self, product_id: str) -> Product:
        """Archive a product."""
        data = await self._request("POST", f"/api/products/{product_id}/archive")
        logger.info("Product archived", product_id=product_id)
        return _parse(Product, _unwrap(data))

    async def unarchive_product(self, product_id: str) -> Product:
        """Restore an archived product."""
        data = await self._request("POST", f"/api/products/{product_id}/unarchive")
        logger.info("Product unarchived", product_id=product_id)
        return _parse(Product, _unwrap(data))

    async def update_product(
        self, request: UpdateProductRequest | Mapping[str, Any]
    ) -> Product:
        """
        Update a product.

        Args:
            request: Full product details, including the product ID

        Returns:
            The updated Product
        """
        data = await self._request(
            "POST", "/api/products/update", body=_dump_request(request)
        )
        product = _parse(Product, _unwrap(data))
        logger.info("Product updated", product_id=product.product_id)
        return product

    # =========================================================================
    # Transaction Methods
    # =========================================================================

    async def list_transactions(
        self, page_num: int = 1, page_size: int = 10
    ) -> TransactionListResponse:
        """List transactions, newest first as ordered by the API."""
        data = await self._request(
            "GET",
            "/api/transactions/list",
            params={"pageNum": page_num, "pageSize": page_size},
        )
        return _parse(TransactionListResponse, data)

    # =========================================================================
    # Subscription Methods
    # =========================================================================

    async def list_subscriptions(
        self, page_num: int = 1, page_size: int = 10
    ) -> SubscriptionListResponse:
        """List subscriptions."""
        data = await self._request(
            "GET",
            "/api/subscriptions/list",
            params={"pageNum": page_num, "pageSize": page_size},
        )
        return _parse(SubscriptionListResponse, data)

    async def get_subscription(self, subscription_id: str) -> Subscription:
        """
        Get a subscription by ID.

        Raises:
            BagelPayNotFoundError: If the subscription does not exist
        """
        data = await self._request("GET", f"/api/subscriptions/{subscription_id}")
        return _parse(Subscription, _unwrap(data))

    async def cancel_subscription(self, subscription_id: str) -> Subscription:
        """
        Cancel a subscription.

        Args:
            subscription_id: Subscription ID

        Returns:
            Subscription snapshot after cancellation
        """
        data = await self._request(
            "POST", f"/api/subscriptions/{subscription_id}/cancel"
        )
        subscription = _parse(Subscription, _unwrap(data))
        logger.info(
            "Subscription canceled",
            subscription_id=subscription_id,
            status=subscription.status,
        )
        return subscription

    # =========================================================================
    # Customer Methods
    # =========================================================================

    async def list_customers(
        self, page_num: int = 1, page_size: int = 10
    ) -> CustomerListResponse:
        """List customers with their subscription and payment totals."""
        data = await self._request(
            "GET",
            "/api/customers/list",
            params={"pageNum": page_num, "pageSize": page_size},
        )
        return _parse(CustomerListResponse, data)


def _dump_request(request: BaseModel | Mapping[str, Any]) -> dict[str, Any]:
    """Convert a request model or mapping to an internal-form body."""
    if isinstance(request, BaseModel):
        return request.model_dump(mode="json", by_alias=True, exclude_none=True)
    return dict(request)


def _unwrap(data: Any) -> Any:
    """Return the ``data`` member of an enveloped response, if present."""
    if isinstance(data, Mapping) and data.get("data"):
        return data["data"]
    return data


def _encode_params(params: Mapping[str, Any] | None) -> dict[str, str]:
    """String-encode query parameters, dropping ``None`` values."""
    if not params:
        return {}
    encoded: dict[str, str] = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            encoded[key] = "true" if value else "false"
        else:
            encoded[key] = str(value)
    return encoded


def _embedded_failure_code(data: Any) -> int | None:
    """Return the failure code of a 2xx body that reports an error, else None."""
    if not isinstance(data, Mapping) or "code" not in data or "msg" not in data:
        return None
    code = data["code"]
    if isinstance(code, bool):
        return None
    if isinstance(code, str) and code.isdigit():
        code = int(code)
    if isinstance(code, int) and code in EMBEDDED_FAILURE_CODES:
        return code
    return None


def _parse(model: type[ModelT], data: Any) -> ModelT:
    """Validate a decoded response into ``model``."""
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        logger.warning(
            "BagelPay response did not match model",
            model=model.__name__,
            errors=e.error_count(),
        )
        raise BagelPayError(f"Invalid response: {e}") from e
