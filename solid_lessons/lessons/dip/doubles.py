"""Test doubles for the payment and logging abstractions."""
from typing import List

from solid_lessons.lessons.dip.payment_refactored import PaymentProcessor
from solid_lessons.lessons.dip.logging_refactored import Logger


class MockPaymentProcessor(PaymentProcessor):
    """Payment processor that only pretends to charge."""

    def process_payment(self, amount: float) -> bool:
        print(f"[MOCK] Simulating payment of {amount} UAH")
        return True


class FakePaymentProcessor(PaymentProcessor):
    """Payment processor with a configurable outcome."""

    def __init__(self, should_succeed: bool = True):
        self._should_succeed = should_succeed

    def process_payment(self, amount: float) -> bool:
        print(f"[TEST] Testing payment of {amount} UAH")
        return self._should_succeed


class RecordingLogger(Logger):
    """Logger that keeps every message in memory."""

    def __init__(self, prefix: str = "[MOCK]"):
        self._prefix = prefix
        self._logs: List[str] = []

    def log(self, message: str) -> None:
        self._logs.append(message)
        print(f"{self._prefix}: {message}")

    def get_logs(self) -> List[str]:
        return list(self._logs)

    def clear_logs(self) -> None:
        self._logs = []
