"""Violating the Dependency Inversion Principle.

Problems with this code:
- OrderService is hard-wired to PayPalPayment
- Adding Stripe or bank cards means rewriting OrderService
- Hard to test, a mock can't be substituted
- The high-level class depends on a concrete implementation, not an abstraction
"""


class PayPalPayment:

    def process_payment(self, amount: float) -> bool:
        print(f"Processing {amount} UAH via PayPal")
        return True


class OrderService:

    def __init__(self):
        # Hard dependency on a concrete implementation
        self._payment_processor = PayPalPayment()

    def process_order(self, amount: float) -> bool:
        print("Processing order...")
        success = self._payment_processor.process_payment(amount)
        if success:
            print("Order paid successfully!")
        return success


def main() -> None:
    OrderService().process_order(100)


if __name__ == "__main__":
    main()
