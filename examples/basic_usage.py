"""
Basic usage example for BagelPay SDK.

This example demonstrates the fundamental operations:
- Creating, listing, updating and archiving products
- Creating a checkout session
- Listing transactions
- Branching on error kinds

Before running:
    export BAGELPAY_API_KEY="your_api_key_here"
    export BAGELPAY_TEST_MODE="false"   # optional, defaults to the test environment
"""

import asyncio
import random
from datetime import datetime, timezone

from bagelpay import (
    BagelPayAPIError,
    BagelPayAuthenticationError,
    BagelPayClient,
    BagelPayConfig,
    BagelPayError,
    BagelPayNotFoundError,
    BagelPayValidationError,
    BillingType,
    CheckoutRequest,
    CreateProductRequest,
    Customer,
    RecurringInterval,
    UpdateProductRequest,
)


async def main() -> None:
    """Run basic usage example."""
    config = BagelPayConfig.from_env()
    print("=== BagelPay SDK Basic Usage Example ===\n")
    print(f"Mode: {'Test' if config.is_test_mode else 'Live'}")
    print(f"Base URL: {config.base_url}")
    print(f"API Key: {config.api_key[:8]}...{config.api_key[-4:]}\n")

    async with BagelPayClient(config) as client:
        # 1. Create a subscription product
        print("1. Creating product...")
        try:
            product = await client.create_product(
                CreateProductRequest(
                    name=f"Product_PY_{random.randint(1000, 9999)}",
                    description="Monthly access to the premium plan",
                    price=29.99,
                    currency="USD",
                    billing_type=BillingType.subscription,
                    tax_category="saas_services",
                    recurring_interval=RecurringInterval.monthly,
                    trial_days=7,
                )
            )
        except BagelPayValidationError as e:
            print(f"✗ Validation error: {e}\n")
            return
        except BagelPayAuthenticationError as e:
            print(f"✗ Authentication failed, check BAGELPAY_API_KEY: {e}\n")
            return
        print(f"✓ Product created: {product.product_id}")
        print(f"  Price: ${product.price}/{product.recurring_interval} {product.currency}")
        print(f"  URL: {product.product_url}\n")

        # 2. List products
        print("2. Listing products...")
        page = await client.list_products(page_num=1, page_size=5)
        print(f"✓ {page.total} products in total, showing {len(page.items)}")
        for item in page.items:
            print(f"  - {item.name} ({item.product_id}) archived={item.is_archive}")
        print()

        # 3. Update the product
        print("3. Updating product...")
        updated = await client.update_product(
            UpdateProductRequest(
                product_id=product.product_id,
                name=f"{product.name}_Updated",
                description="Updated description",
                price=39.99,
                currency="USD",
                billing_type=BillingType.subscription,
                tax_category="saas_services",
                recurring_interval=RecurringInterval.monthly,
                trial_days=14,
            )
        )
        print(f"✓ Product updated: {updated.name} now ${updated.price}\n")

        # 4. Create a checkout session
        print("4. Creating checkout session...")
        request_id = f"req_{datetime.now(timezone.utc):%Y%m%d%H%M%S}"
        checkout = await client.create_checkout(
            CheckoutRequest(
                product_id=product.product_id,
                request_id=request_id,
                units="1",
                customer=Customer(email="customer@example.com"),
                success_url="https://yoursite.com/success",
                metadata={"orderId": request_id},
            )
        )
        print(f"✓ Checkout created: {checkout.payment_id}")
        print(f"  Payment URL: {checkout.checkout_url}")
        print(f"  Expires on: {checkout.expires_on}\n")

        # 5. List transactions
        print("5. Listing transactions...")
        transactions = await client.list_transactions(page_size=5)
        print(f"✓ {transactions.total} transactions in total")
        for txn in transactions.items:
            customer = txn.customer.email if txn.customer else "unknown"
            print(f"  - {txn.transaction_id}: {txn.amount} {txn.currency} from {customer}")
        print()

        # 6. Archive and restore the product
        print("6. Archiving product...")
        archived = await client.archive_product(product.product_id)
        print(f"✓ Archived: {archived.is_archive}")
        restored = await client.unarchive_product(product.product_id)
        print(f"✓ Unarchived: {not restored.is_archive}\n")

        # 7. Error handling
        print("7. Fetching a product that does not exist...")
        try:
            await client.get_product("prod_does_not_exist")
        except BagelPayNotFoundError as e:
            print(f"✓ Not found as expected: {e}")
        except BagelPayAPIError as e:
            print(f"✗ API error: {e} (status {e.status_code})")
        except BagelPayError as e:
            print(f"✗ Request failed: {e}")


if __name__ == "__main__":
    asyncio.run(main())
