"""Discount system refactored to follow the Open/Closed Principle.

Benefits:
- Each discount strategy is encapsulated in its own class (Strategy Pattern)
- New discount types are added without changing existing code
- A customer can switch strategy at runtime
- Each strategy is tested on its own
"""
from abc import ABC, abstractmethod
from datetime import date
from typing import Callable, Optional


class DiscountStrategy(ABC):
    """Base class for every discount strategy."""

    @abstractmethod
    def calculate_discount(self, order_amount: float, member_since: date) -> float:
        """
        Calculate the discount for an order.

        Args:
            order_amount: Order amount before discount
            member_since: Date the customer joined

        Returns:
            Discount amount
        """
        pass

    @abstractmethod
    def get_description(self) -> str:
        pass


class NoDiscountStrategy(DiscountStrategy):

    def calculate_discount(self, order_amount: float, member_since: date) -> float:
        return 0

    def get_description(self) -> str:
        return "No discount"


class PremiumDiscountStrategy(DiscountStrategy):

    def calculate_discount(self, order_amount: float, member_since: date) -> float:
        return order_amount * 0.1

    def get_description(self) -> str:
        return "10% off all items"


class VipDiscountStrategy(DiscountStrategy):
    """20% for members of two years or more, 15% otherwise."""

    LOYALTY_YEARS = 2

    def __init__(self, today: Optional[Callable[[], date]] = None):
        """
        Initialize VIP strategy.

        Args:
            today: Provider of the current date (defaults to date.today)
        """
        self._today = today or date.today

    def calculate_discount(self, order_amount: float, member_since: date) -> float:
        if self._years_since_membership(member_since) >= self.LOYALTY_YEARS:
            return order_amount * 0.2
        return order_amount * 0.15

    def get_description(self) -> str:
        return "VIP discount up to 20% off all items"

    def _years_since_membership(self, member_since: date) -> int:
        # Calendar years only; join month and day are ignored
        return self._today().year - member_since.year


class StudentDiscountStrategy(DiscountStrategy):

    MAX_DISCOUNT = 500

    def calculate_discount(self, order_amount: float, member_since: date) -> float:
        return min(order_amount * 0.15, self.MAX_DISCOUNT)

    def get_description(self) -> str:
        return "Student discount 15% (max 500 UAH)"


class Customer:
    """Customer holding exactly one active discount strategy."""

    def __init__(
        self,
        customer_id: str,
        name: str,
        discount_strategy: DiscountStrategy,
        member_since: date
    ):
        self._id = customer_id
        self._name = name
        self._discount_strategy = discount_strategy
        self._member_since = member_since

    def get_id(self) -> str:
        return self._id

    def get_name(self) -> str:
        return self._name

    def get_discount_strategy(self) -> DiscountStrategy:
        return self._discount_strategy

    def get_member_since(self) -> date:
        return self._member_since

    def set_discount_strategy(self, strategy: DiscountStrategy) -> None:
        self._discount_strategy = strategy


class DiscountCalculator:
    """Discount calculator that does not depend on concrete customer types."""

    def calculate_discount(self, customer: Customer, order_amount: float) -> float:
        return customer.get_discount_strategy().calculate_discount(
            order_amount, customer.get_member_since()
        )

    def get_discount_description(self, customer: Customer) -> str:
        return customer.get_discount_strategy().get_description()

    def calculate_final_price(self, customer: Customer, order_amount: float) -> float:
        discount = self.calculate_discount(customer, order_amount)
        return order_amount - discount

    def generate_discount_report(self, customer: Customer, order_amount: float) -> str:
        """
        Build a printable discount report for a customer's order.

        Args:
            customer: Customer placing the order
            order_amount: Order amount before discount

        Returns:
            Multi-line report with amounts rounded to two decimals
        """
        discount = self.calculate_discount(customer, order_amount)
        final_price = self.calculate_final_price(customer, order_amount)
        description = self.get_discount_description(customer)

        return (
            f"Customer: {customer.get_name()}\n"
            f"Order amount: {order_amount} UAH\n"
            f"Discount type: {description}\n"
            f"Discount: {discount:.2f} UAH\n"
            f"To pay: {final_price:.2f} UAH"
        )
