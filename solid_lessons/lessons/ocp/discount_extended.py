"""Extending the discount system with new strategies.

New discount types are added without changing existing code.
"""
from datetime import date

from solid_lessons.lessons.ocp.discount_refactored import DiscountStrategy


class SeniorDiscountStrategy(DiscountStrategy):

    def calculate_discount(self, order_amount: float, member_since: date) -> float:
        return order_amount * 0.12

    def get_description(self) -> str:
        return "Senior discount 12%"


class SeasonalDiscountStrategy(DiscountStrategy):
    """Seasonal discount with a configurable rate."""

    def __init__(self, seasonal_rate: float, season_name: str):
        self._seasonal_rate = seasonal_rate
        self._season_name = season_name

    def calculate_discount(self, order_amount: float, member_since: date) -> float:
        return order_amount * self._seasonal_rate

    def get_description(self) -> str:
        return f"{self._season_name} discount {self._seasonal_rate * 100:g}%"
