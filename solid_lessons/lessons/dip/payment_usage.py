"""Usage of the refactored payment system.

The payment method is chosen freely without changing OrderService.
"""
from solid_lessons.lessons.dip.payment_refactored import (
    PayPalPayment,
    StripePayment,
    BankCardPayment,
    OrderService,
)
from solid_lessons.lessons.dip.doubles import MockPaymentProcessor


def main() -> None:
    order_with_paypal = OrderService(PayPalPayment())
    order_with_stripe = OrderService(StripePayment())
    order_with_card = OrderService(BankCardPayment())

    print("=== Testing different payment systems ===")

    print("\n1. Paying via PayPal:")
    order_with_paypal.process_order(100)

    print("\n2. Paying via Stripe:")
    order_with_stripe.process_order(200)

    print("\n3. Paying by bank card:")
    order_with_card.process_order(150)

    print("\n4. Testing with a mock object:")
    order_with_mock = OrderService(MockPaymentProcessor())
    order_with_mock.process_order(500)


if __name__ == "__main__":
    main()
