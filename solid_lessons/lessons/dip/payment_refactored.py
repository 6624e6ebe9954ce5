"""Correct implementation of the Dependency Inversion Principle.

Benefits of this approach:
- OrderService depends on the PaymentProcessor abstraction, not an implementation
- New payment methods are added without changing OrderService
- Easy to test with mock objects
- Dependencies are passed in from outside (Dependency Injection)
"""
from abc import ABC, abstractmethod


class PaymentProcessor(ABC):
    """Abstraction every payment method implements."""

    @abstractmethod
    def process_payment(self, amount: float) -> bool:
        """
        Charge an amount.

        Args:
            amount: Amount to charge

        Returns:
            True if the payment went through
        """
        pass


class PayPalPayment(PaymentProcessor):

    def process_payment(self, amount: float) -> bool:
        print(f"Processing {amount} UAH via PayPal")
        return True


class StripePayment(PaymentProcessor):

    def process_payment(self, amount: float) -> bool:
        print(f"Processing {amount} UAH via Stripe")
        return True


class BankCardPayment(PaymentProcessor):

    def process_payment(self, amount: float) -> bool:
        print(f"Processing {amount} UAH via bank card")
        return True


class OrderService:
    """High-level order service that depends only on PaymentProcessor."""

    def __init__(self, payment_processor: PaymentProcessor):
        """
        Initialize order service.

        Args:
            payment_processor: Payment processor (Dependency Injection)
        """
        self._payment_processor = payment_processor

    def process_order(self, amount: float) -> bool:
        print("Processing order...")

        success = self._payment_processor.process_payment(amount)

        if success:
            print("Order paid successfully!")
        return success
