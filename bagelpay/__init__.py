"""
BagelPay SDK - Python client for the BagelPay payments API

Example:
    ```python
    from bagelpay import BagelPayClient, BagelPayConfig, CheckoutRequest, Customer

    config = BagelPayConfig(api_key="your-test-api-key")

    async with BagelPayClient(config) as client:
        checkout = await client.create_checkout(
            CheckoutRequest(
                product_id="prod_123456789",
                units="1",
                customer=Customer(email="customer@example.com"),
                success_url="https://yoursite.com/success",
            )
        )
        print(checkout.checkout_url)
    ```
"""

from .casing import camel_to_snake, snake_to_camel, to_internal_form, to_wire_form
from .client import BagelPayClient
from .config import LIVE_BASE_URL, TEST_BASE_URL, BagelPayConfig
from .exceptions import (
    BagelPayAPIError,
    BagelPayAuthenticationError,
    BagelPayConnectionError,
    BagelPayError,
    BagelPayNotFoundError,
    BagelPayRateLimitError,
    BagelPayServerError,
    BagelPayTimeoutError,
    BagelPayValidationError,
    exception_for_status,
)
from .models import (
    ApiError,
    BillingType,
    CheckoutRequest,
    CheckoutResponse,
    CreateProductRequest,
    Customer,
    CustomerData,
    CustomerListResponse,
    ListResponse,
    Product,
    ProductListResponse,
    RecurringInterval,
    Subscription,
    SubscriptionCustomer,
    SubscriptionListResponse,
    Transaction,
    TransactionCustomer,
    TransactionListResponse,
    UpdateProductRequest,
)
from .version import __version__

__all__ = [
    # Version
    "__version__",
    # Client
    "BagelPayClient",
    # Configuration
    "BagelPayConfig",
    "TEST_BASE_URL",
    "LIVE_BASE_URL",
    # Exceptions
    "BagelPayError",
    "BagelPayTimeoutError",
    "BagelPayConnectionError",
    "BagelPayAPIError",
    "BagelPayAuthenticationError",
    "BagelPayValidationError",
    "BagelPayNotFoundError",
    "BagelPayRateLimitError",
    "BagelPayServerError",
    "exception_for_status",
    # Key conversion
    "snake_to_camel",
    "camel_to_snake",
    "to_internal_form",
    "to_wire_form",
    # Enums
    "BillingType",
    "RecurringInterval",
    # Checkout Models
    "Customer",
    "CheckoutRequest",
    "CheckoutResponse",
    # Product Models
    "CreateProductRequest",
    "UpdateProductRequest",
    "Product",
    "ProductListResponse",
    # Transaction Models
    "Transaction",
    "TransactionCustomer",
    "TransactionListResponse",
    # Subscription Models
    "Subscription",
    "SubscriptionCustomer",
    "SubscriptionListResponse",
    # Customer Models
    "CustomerData",
    "CustomerListResponse",
    # Shared
    "ListResponse",
    "ApiError",
]
