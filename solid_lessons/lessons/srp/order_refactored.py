"""Order classes refactored to follow the Single Responsibility Principle.

Each class now has a single responsibility:
- Order: only manages order items and customer information
- OrderCalculator: only handles price calculations
- OrderEmailService: only handles e-mail notifications
- OrderLogger: only handles logging
"""
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List


TAX_RATE = 0.2


@dataclass(frozen=True)
class OrderItem:
    """Single line of an order."""

    name: str
    price: float
    quantity: int


class Order:
    """Order items plus the customer's e-mail."""

    def __init__(self, customer_email: str):
        self._customer_email = customer_email
        self._items: List[OrderItem] = []

    def add_item(self, name: str, price: float, quantity: int) -> None:
        self._items.append(OrderItem(name=name, price=price, quantity=quantity))

    def get_items(self) -> List[OrderItem]:
        return list(self._items)

    def get_customer_email(self) -> str:
        return self._customer_email


class OrderCalculator:
    """Price calculations for orders."""

    @staticmethod
    def calculate_total(order: Order) -> float:
        return sum(item.price * item.quantity for item in order.get_items())

    @staticmethod
    def calculate_tax(order: Order) -> float:
        return OrderCalculator.calculate_total(order) * TAX_RATE

    @staticmethod
    def calculate_total_with_tax(order: Order) -> float:
        return OrderCalculator.calculate_total(order) + OrderCalculator.calculate_tax(order)


class OrderEmailService:
    """E-mail notifications for orders (stubbed with console output)."""

    @staticmethod
    def send_confirmation_email(order: Order) -> None:
        total = OrderCalculator.calculate_total_with_tax(order)
        email_body = (
            f"Thank you for your order!\n"
            f"Items: {len(order.get_items())}\n"
            f"Total: {total:.2f} UAH"
        )
        OrderEmailService._send_email(order.get_customer_email(), "Order confirmation", email_body)

    @staticmethod
    def _send_email(to: str, subject: str, body: str) -> None:
        print(f"Sending email to {to}")
        print(f"Subject: {subject}")
        print(f"Body: {body}")


class OrderLogger:
    """Order logging (stubbed with console output)."""

    @staticmethod
    def log_order(order: Order) -> None:
        timestamp = datetime.now(timezone.utc).isoformat()
        total = OrderCalculator.calculate_total_with_tax(order)
        log_entry = f"[{timestamp}] Order created for {order.get_customer_email()}, Total: {total:.2f} UAH"
        OrderLogger._write_to_log_file(log_entry)

    @staticmethod
    def _write_to_log_file(entry: str) -> None:
        print(f"Writing to log: {entry}")
