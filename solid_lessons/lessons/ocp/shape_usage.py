"""Usage of the refactored shape system through a single interface."""
from typing import List

from solid_lessons.lessons.ocp.shape_refactored import (
    Shape,
    Circle,
    Rectangle,
    Triangle,
    AreaCalculator,
)
from solid_lessons.lessons.ocp.shape_extended import Square, Ellipse


def main() -> None:
    shapes: List[Shape] = [
        Circle(5),
        Rectangle(4, 6),
        Triangle(3, 8),
        Square(4),
        Ellipse(3, 2),
    ]

    calculator = AreaCalculator()

    for shape in shapes:
        print(f"{shape.get_info()}: area = {shape.calculate_area():.2f}")

    print(calculator.get_area_statistics(shapes))


if __name__ == "__main__":
    main()
