import logging
from unittest.mock import Mock

import pytest

from solid_lessons.lessons.dip import payment_violation
from solid_lessons.lessons.dip.advanced_usage import AdvancedOrderService, OrderServiceFactory
from solid_lessons.lessons.dip.doubles import FakePaymentProcessor, MockPaymentProcessor, RecordingLogger
from solid_lessons.lessons.dip.logging_refactored import (
    ConsoleLogger,
    FileLogger,
    Logger,
    RemoteLogger,
    StdlibLogger,
    UserService,
)
from solid_lessons.lessons.dip.payment_refactored import (
    BankCardPayment,
    OrderService,
    PaymentProcessor,
    PayPalPayment,
    StripePayment,
)


class TestPaymentViolation:

    def test_order_is_paid_via_paypal(self, capsys):
        paid = payment_violation.OrderService().process_order(100)

        assert paid is True
        assert capsys.readouterr().out == (
            "Processing order...\n"
            "Processing 100 UAH via PayPal\n"
            "Order paid successfully!\n"
        )


class TestPaymentRefactored:

    @pytest.mark.parametrize("processor,channel", [
        (PayPalPayment(), "via PayPal"),
        (StripePayment(), "via Stripe"),
        (BankCardPayment(), "via bank card"),
    ])
    def test_processors(self, processor, channel, capsys):
        paid = OrderService(processor).process_order(150)

        assert paid is True
        assert f"Processing 150 UAH {channel}" in capsys.readouterr().out

    def test_declined_payment(self, capsys):
        paid = OrderService(FakePaymentProcessor(should_succeed=False)).process_order(500)

        out = capsys.readouterr().out
        assert paid is False
        assert "[TEST] Testing payment of 500 UAH" in out
        assert "Order paid successfully!" not in out

    def test_injected_processor_is_used(self):
        processor = Mock(spec=PaymentProcessor)
        processor.process_payment.return_value = True

        assert OrderService(processor).process_order(250) is True
        processor.process_payment.assert_called_once_with(250)

    def test_mock_processor(self, capsys):
        assert MockPaymentProcessor().process_payment(500) is True
        assert capsys.readouterr().out == "[MOCK] Simulating payment of 500 UAH\n"


class TestLoggers:

    @pytest.mark.parametrize("logger,line", [
        (ConsoleLogger(), "[CONSOLE]: hello"),
        (FileLogger(), "[FILE]: Writing to file - hello"),
        (RemoteLogger(), "[REMOTE]: Sending to server - hello"),
    ])
    def test_backends(self, logger, line, capsys):
        logger.log("hello")

        assert capsys.readouterr().out == f"{line}\n"

    def test_stdlib_logger_forwards_to_logging(self):
        target = Mock(spec=logging.Logger)

        StdlibLogger(logger=target, level=logging.WARNING).log("hello")

        target.log.assert_called_once_with(logging.WARNING, "hello")

    def test_user_service_logs_two_lines_per_operation(self):
        logger = RecordingLogger()
        service = UserService(logger)

        service.create_user("Ivan", "ivan@example.com")
        service.delete_user("user123")

        assert logger.get_logs() == [
            "Creating user Ivan",
            "User Ivan created successfully",
            "Deleting user with ID: user123",
            "User user123 deleted",
        ]

    def test_recording_logger(self, capsys):
        logger = RecordingLogger(prefix="[TEST LOG]")

        logger.log("first")
        logs = logger.get_logs()
        logs.append("tampered")

        assert logger.get_logs() == ["first"]
        assert capsys.readouterr().out == "[TEST LOG]: first\n"

        logger.clear_logs()
        assert logger.get_logs() == []

    def test_logger_is_abstract(self):
        with pytest.raises(TypeError):
            Logger()


class TestAdvancedOrderService:

    def test_successful_order(self):
        # Arrange
        logger = RecordingLogger()
        service = AdvancedOrderService(FakePaymentProcessor(True), logger)

        # Act
        paid = service.process_order("Ivan", 1500)

        # Assert
        assert paid is True
        assert logger.get_logs() == [
            "Starting order processing for Ivan, amount 1500 UAH",
            "Processing payment of 1500 UAH",
            "Payment processed successfully for Ivan",
            "Order completed successfully",
        ]

    def test_declined_payment(self):
        logger = RecordingLogger()
        service = AdvancedOrderService(FakePaymentProcessor(False), logger)

        assert service.process_order("Ivan", 500) is False
        assert logger.get_logs()[-1] == "Payment processing failed for Ivan"

    @pytest.mark.parametrize("amount", [0, -10])
    def test_non_positive_amount_skips_payment(self, amount):
        processor = Mock(spec=PaymentProcessor)
        logger = RecordingLogger()
        service = AdvancedOrderService(processor, logger)

        assert service.process_order("Ivan", amount) is False
        processor.process_payment.assert_not_called()
        assert logger.get_logs()[-1] == f"Error: invalid order amount {amount}"

    def test_processor_error_is_reported_as_failure(self):
        processor = Mock(spec=PaymentProcessor)
        processor.process_payment.side_effect = RuntimeError("gateway down")
        logger = RecordingLogger()
        service = AdvancedOrderService(processor, logger)

        assert service.process_order("Ivan", 100) is False
        assert logger.get_logs()[-1] == "Critical error while processing order: gateway down"

    def test_refund(self):
        logger = RecordingLogger()
        service = AdvancedOrderService(FakePaymentProcessor(True), logger)

        assert service.refund_order("Ivan", 300) is True
        assert logger.get_logs() == [
            "Starting refund for Ivan, amount 300 UAH",
            "Refunded 300 UAH to Ivan",
        ]


class TestOrderServiceFactory:

    def test_development_wiring(self, capsys):
        service = OrderServiceFactory.create_service("development")

        service.process_order("Ivan", 100)

        out = capsys.readouterr().out
        assert "[CONSOLE]: Starting order processing for Ivan, amount 100 UAH" in out
        assert "Processing 100 UAH via PayPal" in out

    def test_production_wiring_is_case_insensitive(self, capsys):
        service = OrderServiceFactory.create_service("PRODUCTION")

        service.process_order("Maria", 2500)

        out = capsys.readouterr().out
        assert "[FILE]: Writing to file - Starting order processing for Maria" in out
        assert "Processing 2500 UAH via Stripe" in out

    def test_unsupported_environment(self):
        with pytest.raises(ValueError, match="Unsupported order service environment: staging"):
            OrderServiceFactory.create_service("staging")

    def test_test_service_uses_given_collaborators(self):
        processor = Mock(spec=PaymentProcessor)
        processor.process_payment.return_value = True
        logger = RecordingLogger()

        service = OrderServiceFactory.create_test_service(processor, logger)

        assert service.process_order("Test Customer", 1000) is True
        processor.process_payment.assert_called_once_with(1000)
        assert len(logger.get_logs()) == 4
