"""Advanced Dependency Inversion example.

This module shows:
- Several abstractions combined in one class
- A more realistic business scenario
- Dependency Injection of several collaborators
- A factory that wires services per environment (Factory Pattern)
"""
import logging

from solid_lessons.lessons.dip.payment_refactored import (
    PaymentProcessor,
    PayPalPayment,
    StripePayment,
)
from solid_lessons.lessons.dip.logging_refactored import Logger, ConsoleLogger, FileLogger
from solid_lessons.lessons.dip.doubles import FakePaymentProcessor, RecordingLogger


_logger = logging.getLogger(__name__)


class AdvancedOrderService:
    """Order service depending on a payment processor and a logger."""

    def __init__(self, payment_processor: PaymentProcessor, logger: Logger):
        """
        Initialize advanced order service.

        Args:
            payment_processor: Payment processor (Dependency Injection)
            logger: Logger (Dependency Injection)
        """
        self._payment_processor = payment_processor
        self._logger = logger

    def process_order(self, customer_name: str, amount: float) -> bool:
        """
        Validate and pay for an order.

        Args:
            customer_name: Customer placing the order
            amount: Order amount

        Returns:
            True if the order was paid; False for a non-positive amount,
            a declined payment or a processor error
        """
        self._logger.log(f"Starting order processing for {customer_name}, amount {amount} UAH")

        try:
            if amount <= 0:
                self._logger.log(f"Error: invalid order amount {amount}")
                return False

            self._logger.log(f"Processing payment of {amount} UAH")
            payment_success = self._payment_processor.process_payment(amount)

            if payment_success:
                self._logger.log(f"Payment processed successfully for {customer_name}")
                self._logger.log("Order completed successfully")
                return True

            self._logger.log(f"Payment processing failed for {customer_name}")
            return False
        except Exception as e:
            self._logger.log(f"Critical error while processing order: {e}")
            return False

    def refund_order(self, customer_name: str, amount: float) -> bool:
        self._logger.log(f"Starting refund for {customer_name}, amount {amount} UAH")
        self._logger.log(f"Refunded {amount} UAH to {customer_name}")
        return True


class OrderServiceFactory:
    """
    Factory for order services in different configurations.

    Centralizes wiring so callers never construct collaborators themselves.
    """

    @staticmethod
    def create_development_service() -> AdvancedOrderService:
        return AdvancedOrderService(PayPalPayment(), ConsoleLogger())

    @staticmethod
    def create_production_service() -> AdvancedOrderService:
        return AdvancedOrderService(StripePayment(), FileLogger())

    @staticmethod
    def create_test_service(
        payment_processor: PaymentProcessor,
        logger: Logger
    ) -> AdvancedOrderService:
        return AdvancedOrderService(payment_processor, logger)

    @staticmethod
    def create_service(environment: str = "development") -> AdvancedOrderService:
        """
        Create an order service for a named environment.

        Args:
            environment: "development" or "production"

        Returns:
            AdvancedOrderService wired for that environment

        Raises:
            ValueError: If the environment is not supported
        """
        environment = environment.lower()

        if environment == "development":
            service = OrderServiceFactory.create_development_service()
        elif environment == "production":
            service = OrderServiceFactory.create_production_service()
        else:
            raise ValueError(f"Unsupported order service environment: {environment}")

        _logger.debug(f"Order service created for {environment}")
        return service


def main() -> None:
    print("=== Advanced Dependency Inversion example ===")

    print("\n1. Development configuration:")
    dev_service = OrderServiceFactory.create_development_service()
    dev_service.process_order("Ivan Petrenko", 1500)

    print("\n2. Production configuration:")
    prod_service = OrderServiceFactory.create_production_service()
    prod_service.process_order("Maria Ivanenko", 2500)

    print("\n3. Test configuration:")
    test_logger = RecordingLogger(prefix="[TEST LOG]")
    test_service = OrderServiceFactory.create_test_service(FakePaymentProcessor(True), test_logger)

    result = test_service.process_order("Test Customer", 1000)
    print(f"Test result: {'Success' if result else 'Failure'}")
    print(f"Log count: {len(test_logger.get_logs())}")

    print("\n4. Test with a failing payment:")
    failing_service = OrderServiceFactory.create_test_service(FakePaymentProcessor(False), test_logger)
    fail_result = failing_service.process_order("Failing Customer", 500)
    print(f"Failing test result: {'Success' if fail_result else 'Failure'}")

    print("\n=== Benefits of this approach ===")
    print("✓ Easy to test with mock objects")
    print("✓ Configuration changes per environment")
    print("✓ Flexible, easily extended code")
    print("✓ Business logic separated from technical details")
    print("✓ Follows the Open/Closed Principle")


if __name__ == "__main__":
    main()
