"""Discount system that violates the Open/Closed Principle.

Problems:
- Type switches for every customer type
- Logic duplicated between methods
- A new customer type means changing existing code
- Hard to test individual discount types
"""
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Callable, Optional


class CustomerType(str, Enum):
    REGULAR = "regular"
    PREMIUM = "premium"
    VIP = "vip"
    STUDENT = "student"


@dataclass
class Customer:
    id: str
    name: str
    type: CustomerType
    member_since: date


class DiscountCalculator:
    """Calculator that switches on the customer type."""

    def __init__(self, today: Optional[Callable[[], date]] = None):
        self._today = today or date.today

    def calculate_discount(self, customer: Customer, order_amount: float) -> float:
        if customer.type == CustomerType.REGULAR:
            return 0
        elif customer.type == CustomerType.PREMIUM:
            return order_amount * 0.1
        elif customer.type == CustomerType.VIP:
            if self._years_since_membership(customer.member_since) >= 2:
                return order_amount * 0.2
            return order_amount * 0.15
        elif customer.type == CustomerType.STUDENT:
            return min(order_amount * 0.15, 500)
        else:
            raise ValueError(f"Unknown customer type: {customer.type}")

    def get_discount_description(self, customer: Customer) -> str:
        if customer.type == CustomerType.REGULAR:
            return "No discount"
        elif customer.type == CustomerType.PREMIUM:
            return "10% off all items"
        elif customer.type == CustomerType.VIP:
            if self._years_since_membership(customer.member_since) >= 2:
                return "VIP 20% off all items"
            return "VIP 15% off all items"
        elif customer.type == CustomerType.STUDENT:
            return "Student discount 15% (max 500 UAH)"
        else:
            raise ValueError(f"Unknown customer type: {customer.type}")

    def _years_since_membership(self, member_since: date) -> int:
        return self._today().year - member_since.year


def main() -> None:
    calculator = DiscountCalculator()
    customers = [
        Customer("1", "Ivan Regular", CustomerType.REGULAR, date(2023, 1, 1)),
        Customer("2", "Maria Premium", CustomerType.PREMIUM, date(2022, 6, 15)),
        Customer("3", "Oleksandr VIP", CustomerType.VIP, date(2020, 3, 20)),
        Customer("4", "Anna Student", CustomerType.STUDENT, date(2023, 9, 1)),
    ]

    for customer in customers:
        discount = calculator.calculate_discount(customer, 1000)
        print(f"{customer.name}: {calculator.get_discount_description(customer)} -> {discount:.2f} UAH")


if __name__ == "__main__":
    main()
