"""Data models for BagelPay SDK.

Attributes are ``snake_case``. Every model also validates from, and dumps to,
the SDK's internal ``camelCase`` form through generated aliases, which is the
form the client hands back after decoding a response.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from .casing import snake_to_camel

Amount = int | float


class BagelPayModel(BaseModel):
    """Base model mapping snake_case attributes to camelCase keys."""

    model_config = ConfigDict(alias_generator=snake_to_camel, populate_by_name=True)


# =============================================================================
# Enums
# =============================================================================


class BillingType(str, Enum):
    """How a product is charged."""

    subscription = "subscription"
    single_payment = "single_payment"


class RecurringInterval(str, Enum):
    """Billing period of a subscription product."""

    daily = "daily"
    weekly = "weekly"
    monthly = "monthly"
    three_months = "3months"
    six_months = "6months"


# =============================================================================
# Checkout Models
# =============================================================================


class Customer(BagelPayModel):
    """Customer attached to a checkout session."""

    email: str = Field(..., description="Customer email")


class CheckoutRequest(BagelPayModel):
    """Model for creating a checkout session."""

    product_id: str = Field(..., description="Product being purchased")
    customer: Customer | None = None
    request_id: str | None = Field(None, description="Caller-supplied request identifier")
    units: str | None = Field(None, description="Number of units, as a string")
    success_url: str | None = Field(None, description="Redirect after payment")
    metadata: dict[str, Any] | None = None


class CheckoutResponse(BagelPayModel):
    """Checkout session returned by the API."""

    object: str | None = None
    units: int | None = None
    metadata: dict[str, Any] | None = None
    status: str | None = None
    mode: str | None = None
    payment_id: str | None = None
    product_id: str | None = None
    request_id: str | None = None
    success_url: str | None = None
    checkout_url: str | None = Field(None, description="Hosted payment page")
    created_at: str | None = None
    updated_at: str | None = None
    expires_on: str | None = None


# =============================================================================
# Product Models
# =============================================================================


class CreateProductRequest(BagelPayModel):
    """Model for creating a product.

    ``recurring_interval`` only applies to ``subscription`` products.
    """

    name: str
    price: float
    currency: str = Field(..., description="ISO currency code, e.g. USD")
    billing_type: BillingType
    description: str | None = None
    tax_inclusive: bool = False
    tax_category: str | None = None
    recurring_interval: RecurringInterval | None = None
    trial_days: int = 0


class UpdateProductRequest(CreateProductRequest):
    """Model for updating a product."""

    product_id: str


class Product(BagelPayModel):
    """Product model."""

    product_id: str | None = None
    store_id: str | None = None
    name: str | None = None
    description: str | None = None
    price: float | None = None
    currency: str | None = None
    object: str | None = None
    mode: str | None = None
    product_url: str | None = None
    billing_type: str | None = None
    billing_period: str | None = None
    tax_category: str | None = None
    tax_inclusive: bool | None = None
    is_archive: bool | None = None
    trial_days: int | None = None
    recurring_interval: str | None = None
    created_at: str | None = None
    updated_at: str | None = None


# =============================================================================
# Transaction Models
# =============================================================================


class TransactionCustomer(BagelPayModel):
    """Customer reference embedded in a transaction."""

    id: str | None = None
    email: str | None = None


class Transaction(BagelPayModel):
    """Completed monetary event. Amounts are in minor currency units."""

    object: str | None = None
    order_id: str | None = None
    transaction_id: str | None = None
    amount: Amount | None = None
    amount_paid: Amount | None = None
    discount_amount: Amount | None = None
    currency: str | None = None
    tax_amount: Amount | None = None
    tax_country: str | None = None
    refunded_amount: Amount | None = None
    type: str | None = None
    customer: TransactionCustomer | None = None
    created_at: str | None = None
    updated_at: str | None = None
    remark: str | None = None
    mode: str | None = None
    fees: Amount | None = None
    tax: Amount | None = None
    net: Amount | None = None


# =============================================================================
# Subscription Models
# =============================================================================


class SubscriptionCustomer(BagelPayModel):
    """Customer reference embedded in a subscription."""

    id: str | None = None
    email: str | None = None


class Subscription(BagelPayModel):
    """Subscription snapshot."""

    subscription_id: str | None = None
    status: str | None = Field(None, description="trialing, active, paused, canceled, ...")
    remark: str | None = None
    customer: SubscriptionCustomer | None = None
    mode: str | None = None
    last4: str | None = None
    product_id: str | None = None
    store_id: str | None = None
    billing_period_start: str | None = None
    billing_period_end: str | None = None
    cancel_at: str | None = None
    trial_start: str | None = None
    trial_end: str | None = None
    units: int | None = None
    created_at: str | None = None
    updated_at: str | None = None
    product_name: str | None = None
    payment_method: str | None = None
    next_billing_amount: str | None = None
    recurring_interval: str | None = None


# =============================================================================
# Customer Models
# =============================================================================


class CustomerData(BagelPayModel):
    """Customer with aggregate subscription and payment figures."""

    id: int | None = None
    name: str | None = None
    email: str | None = None
    remark: str | None = None
    subscriptions: int | None = None
    payments: int | None = None
    store_id: str | None = None
    total_spend: Amount | None = None
    created_at: str | None = None
    updated_at: str | None = None


# =============================================================================
# List Responses
# =============================================================================

ItemT = TypeVar("ItemT")


class ListResponse(BagelPayModel, Generic[ItemT]):
    """One page of items with the grand total."""

    total: int = 0
    items: list[ItemT] = Field(default_factory=list)
    code: int | None = None
    msg: str | None = None


class ProductListResponse(ListResponse[Product]):
    """Page of products."""


class TransactionListResponse(ListResponse[Transaction]):
    """Page of transactions."""


class SubscriptionListResponse(ListResponse[Subscription]):
    """Page of subscriptions."""


class CustomerListResponse(ListResponse[CustomerData]):
    """Page of customers."""


# =============================================================================
# Errors
# =============================================================================


class ErrorPayload(BaseModel):
    """Optional fields an error body may carry."""

    message: str | None = None
    msg: str | None = None
    error: str | None = None
    code: int | str | None = None


class ApiError(BaseModel):
    """Normalized description of an API failure."""

    message: str = "An error occurred"
    error: str = "Unknown error"
    code: str | None = None
    payload: Any = None

    @classmethod
    def from_payload(cls, payload: Any) -> "ApiError":
        """
        Extract the error fields from a decoded failure body.

        ``message`` is preferred over ``msg``. Fields with an unexpected type
        are ignored individually rather than discarding the whole body.

        Args:
            payload: Decoded JSON body of the failed response

        Returns:
            ApiError holding the message, the stringified code and the raw body
        """
        parsed = ErrorPayload()
        if isinstance(payload, Mapping):
            try:
                parsed = ErrorPayload.model_validate(payload)
            except PydanticValidationError:
                fields: dict[str, Any] = {}
                for name in ErrorPayload.model_fields:
                    if name not in payload:
                        continue
                    try:
                        ErrorPayload.model_validate({name: payload[name]})
                    except PydanticValidationError:
                        continue
                    fields[name] = payload[name]
                parsed = ErrorPayload.model_validate(fields)

        return cls(
            message=parsed.message or parsed.msg or "An error occurred",
            error=parsed.error or "Unknown error",
            code=str(parsed.code) if parsed.code is not None else None,
            payload=payload,
        )
