"""Order class that violates the Single Responsibility Principle.

This class has several responsibilities:
1. Managing order items
2. Calculating prices and taxes
3. Sending confirmation e-mails
4. Logging order information

Bad example - too many reasons to change this class.
"""
from datetime import datetime, timezone
from typing import Any, Dict, List


TAX_RATE = 0.2


class Order:
    """Order that also calculates, e-mails and logs itself."""

    def __init__(self, customer_email: str):
        self._customer_email = customer_email
        self._items: List[Dict[str, Any]] = []

    def add_item(self, name: str, price: float, quantity: int) -> None:
        self._items.append({"name": name, "price": price, "quantity": quantity})

    def get_items(self) -> List[Dict[str, Any]]:
        return [dict(item) for item in self._items]

    def calculate_total(self) -> float:
        return sum(item["price"] * item["quantity"] for item in self._items)

    def calculate_tax(self) -> float:
        return self.calculate_total() * TAX_RATE

    def calculate_total_with_tax(self) -> float:
        return self.calculate_total() + self.calculate_tax()

    def send_confirmation_email(self) -> None:
        total = self.calculate_total_with_tax()
        email_body = (
            f"Thank you for your order!\n"
            f"Items: {len(self._items)}\n"
            f"Total: {total:.2f} UAH"
        )
        self._send_email(self._customer_email, "Order confirmation", email_body)

    def _send_email(self, to: str, subject: str, body: str) -> None:
        print(f"Sending email to {to}")
        print(f"Subject: {subject}")
        print(f"Body: {body}")

    def log_order(self) -> None:
        timestamp = datetime.now(timezone.utc).isoformat()
        log_entry = (
            f"[{timestamp}] Order created for {self._customer_email}, "
            f"Total: {self.calculate_total_with_tax():.2f} UAH"
        )
        self._write_to_log_file(log_entry)

    def _write_to_log_file(self, entry: str) -> None:
        print(f"Writing to log: {entry}")


def main() -> None:
    order = Order("customer@example.com")
    order.add_item("Laptop", 25000, 1)
    order.add_item("Mouse", 500, 2)
    order.send_confirmation_email()
    order.log_order()


if __name__ == "__main__":
    main()
