"""Usage of the refactored order classes."""
from solid_lessons.lessons.srp.order_refactored import (
    Order,
    OrderCalculator,
    OrderEmailService,
    OrderLogger,
)


def main() -> None:
    order = Order("customer@example.com")
    order.add_item("Laptop", 25000, 1)
    order.add_item("Mouse", 500, 2)

    total = OrderCalculator.calculate_total_with_tax(order)
    print(f"Total: {total:.2f} UAH")

    OrderEmailService.send_confirmation_email(order)
    OrderLogger.log_order(order)


if __name__ == "__main__":
    main()
