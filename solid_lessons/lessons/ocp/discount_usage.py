"""Usage of the refactored discount system.

Shows:
- Customers created with different discount strategies
- Switching a customer's strategy at runtime
- New discount types plugged in without touching the calculator
"""
from datetime import date

from solid_lessons.lessons.ocp.discount_refactored import (
    Customer,
    DiscountCalculator,
    NoDiscountStrategy,
    PremiumDiscountStrategy,
    VipDiscountStrategy,
    StudentDiscountStrategy,
)
from solid_lessons.lessons.ocp.discount_extended import (
    SeniorDiscountStrategy,
    SeasonalDiscountStrategy,
)


def main() -> None:
    customers = [
        Customer("1", "Ivan Regular", NoDiscountStrategy(), date(2023, 1, 1)),
        Customer("2", "Maria Premium", PremiumDiscountStrategy(), date(2022, 6, 15)),
        Customer("3", "Oleksandr VIP", VipDiscountStrategy(), date(2020, 3, 20)),
        Customer("4", "Anna Student", StudentDiscountStrategy(), date(2023, 9, 1)),
        Customer("5", "Petro Senior", SeniorDiscountStrategy(), date(2021, 12, 10)),
    ]

    new_year_discount = SeasonalDiscountStrategy(0.25, "New Year")
    customers.append(Customer("6", "Oksana New Year", new_year_discount, date(2023, 1, 15)))

    calculator = DiscountCalculator()
    order_amount = 1000

    for customer in customers:
        print(calculator.generate_discount_report(customer, order_amount))
        print("---")

    regular_customer = customers[0]
    print(f"Before status change: {calculator.get_discount_description(regular_customer)}")

    regular_customer.set_discount_strategy(VipDiscountStrategy())
    print(f"After becoming VIP: {calculator.get_discount_description(regular_customer)}")


if __name__ == "__main__":
    main()
