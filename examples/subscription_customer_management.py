"""
Subscription and customer management example for BagelPay SDK.

Lists subscriptions grouped by status, shows the details of one, lists
customers with their spend, and optionally cancels a subscription.

Before running:
    export BAGELPAY_API_KEY="your_api_key_here"
    export BAGELPAY_CANCEL_SUBSCRIPTION_ID="sub_..."   # optional
"""

import asyncio
import os
from collections import Counter

from bagelpay import (
    BagelPayAPIError,
    BagelPayClient,
    BagelPayConfig,
    BagelPayNotFoundError,
)


async def main() -> None:
    """Run subscription and customer management example."""
    config = BagelPayConfig.from_env()

    async with BagelPayClient(config) as client:
        print("=== BagelPay Subscriptions & Customers ===\n")

        # 1. Subscriptions by status
        subscriptions = await client.list_subscriptions(page_size=50)
        print(f"1. {subscriptions.total} subscriptions in total")
        for status, count in Counter(s.status for s in subscriptions.items).most_common():
            print(f"  {status}: {count}")
        print()

        # 2. Details of the first subscription
        if subscriptions.items:
            subscription_id = subscriptions.items[0].subscription_id
            subscription = await client.get_subscription(subscription_id)
            print(f"2. Subscription {subscription.subscription_id}")
            print(f"  Product: {subscription.product_name} ({subscription.product_id})")
            print(f"  Status: {subscription.status}")
            print(f"  Period: {subscription.billing_period_start} -> {subscription.billing_period_end}")
            if subscription.trial_end:
                print(f"  Trial ends: {subscription.trial_end}")
            if subscription.cancel_at:
                print(f"  Cancels at: {subscription.cancel_at}")
            print(f"  Next billing amount: {subscription.next_billing_amount}\n")

        # 3. Customers
        customers = await client.list_customers(page_size=20)
        print(f"3. {customers.total} customers in total")
        for customer in customers.items:
            spend = (customer.total_spend or 0) / 100
            print(
                f"  {customer.email}: {customer.subscriptions} subscriptions, "
                f"{customer.payments} payments, ${spend:.2f} spent"
            )
        print()

        # 4. Cancel a subscription
        cancel_id = os.environ.get("BAGELPAY_CANCEL_SUBSCRIPTION_ID")
        if not cancel_id:
            print("4. Set BAGELPAY_CANCEL_SUBSCRIPTION_ID to try cancellation")
            return
        try:
            canceled = await client.cancel_subscription(cancel_id)
            print(f"4. ✓ Subscription {cancel_id} is now {canceled.status}")
        except BagelPayNotFoundError:
            print(f"4. ✗ Subscription {cancel_id} not found")
        except BagelPayAPIError as e:
            print(f"4. ✗ Cancellation failed: {e}")


if __name__ == "__main__":
    asyncio.run(main())
