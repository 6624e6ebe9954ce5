"""Shapes refactored to follow the Open/Closed Principle.

Benefits of this approach:
- New shapes are added without changing existing code
- Each shape encapsulates its own logic
- No type switches
- Open for extension, closed for modification
"""
import math
from abc import ABC, abstractmethod
from typing import List


class Shape(ABC):
    """Base class for every shape."""

    @abstractmethod
    def calculate_area(self) -> float:
        pass

    @abstractmethod
    def get_info(self) -> str:
        pass


class Circle(Shape):

    def __init__(self, radius: float):
        self._radius = radius

    def calculate_area(self) -> float:
        return math.pi * self._radius ** 2

    def get_info(self) -> str:
        return f"Circle with radius {self._radius}"

    def get_radius(self) -> float:
        return self._radius


class Rectangle(Shape):

    def __init__(self, width: float, height: float):
        self._width = width
        self._height = height

    def calculate_area(self) -> float:
        return self._width * self._height

    def get_info(self) -> str:
        return f"Rectangle {self._width}x{self._height}"

    def get_width(self) -> float:
        return self._width

    def get_height(self) -> float:
        return self._height


class Triangle(Shape):

    def __init__(self, base: float, height: float):
        self._base = base
        self._height = height

    def calculate_area(self) -> float:
        return self._base * self._height / 2

    def get_info(self) -> str:
        return f"Triangle with base {self._base} and height {self._height}"

    def get_base(self) -> float:
        return self._base

    def get_height(self) -> float:
        return self._height


class AreaCalculator:
    """Area calculator that depends only on the Shape abstraction."""

    def calculate_area(self, shape: Shape) -> float:
        return shape.calculate_area()

    def calculate_total_area(self, shapes: List[Shape]) -> float:
        return sum(shape.calculate_area() for shape in shapes)

    def get_shape_info(self, shape: Shape) -> str:
        return shape.get_info()

    def get_area_statistics(self, shapes: List[Shape]) -> str:
        """
        Summarize total and average area of a collection of shapes.

        Args:
            shapes: Shapes to summarize

        Returns:
            Statistics line with two-decimal totals; an empty collection
            reports zero for both the total and the average
        """
        total_area = self.calculate_total_area(shapes)
        shape_count = len(shapes)
        average_area = total_area / shape_count if shape_count else 0.0

        return (
            f"Total area: {total_area:.2f}, "
            f"Shape count: {shape_count}, "
            f"Average area: {average_area:.2f}"
        )
