"""Example of violating the Open/Closed Principle.

Problems with this approach:
- Adding a new shape means modifying existing code in several places
- The type switches grow with every new shape
- High risk of mistakes when adding new types
- The calculator knows about every shape
"""
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Union


class ShapeType(str, Enum):
    CIRCLE = "circle"
    RECTANGLE = "rectangle"
    TRIANGLE = "triangle"


@dataclass
class Circle:
    radius: float
    type: ShapeType = field(default=ShapeType.CIRCLE, init=False)


@dataclass
class Rectangle:
    width: float
    height: float
    type: ShapeType = field(default=ShapeType.RECTANGLE, init=False)


@dataclass
class Triangle:
    base: float
    height: float
    type: ShapeType = field(default=ShapeType.TRIANGLE, init=False)


Shape = Union[Circle, Rectangle, Triangle]


class AreaCalculator:
    """Calculator that has to know every shape type."""

    def calculate_area(self, shape: Shape) -> float:
        if shape.type == ShapeType.CIRCLE:
            return math.pi * shape.radius ** 2
        elif shape.type == ShapeType.RECTANGLE:
            return shape.width * shape.height
        elif shape.type == ShapeType.TRIANGLE:
            return shape.base * shape.height / 2
        else:
            raise ValueError(f"Unknown shape type: {shape.type}")

    def calculate_total_area(self, shapes: List[Shape]) -> float:
        return sum(self.calculate_area(shape) for shape in shapes)

    def get_shape_info(self, shape: Shape) -> str:
        if shape.type == ShapeType.CIRCLE:
            return f"Circle with radius {shape.radius}"
        elif shape.type == ShapeType.RECTANGLE:
            return f"Rectangle {shape.width}x{shape.height}"
        elif shape.type == ShapeType.TRIANGLE:
            return f"Triangle with base {shape.base} and height {shape.height}"
        else:
            raise ValueError(f"Unknown shape type: {shape.type}")


def main() -> None:
    calculator = AreaCalculator()
    shapes: List[Shape] = [Circle(5), Rectangle(4, 6), Triangle(3, 8)]

    for shape in shapes:
        print(f"{calculator.get_shape_info(shape)}: area = {calculator.calculate_area(shape):.2f}")
    print(f"Total area: {calculator.calculate_total_area(shapes):.2f}")


if __name__ == "__main__":
    main()
