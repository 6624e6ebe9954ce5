"""Correct implementation of the Liskov Substitution Principle.

Benefits of this approach:
- Each class has its own logic without breaking a contract
- A shared interface instead of inheritance
- Predictable behavior
- New shapes are easy to add
"""
from abc import ABC, abstractmethod


class Shape(ABC):

    @abstractmethod
    def get_area(self) -> float:
        pass


class Rectangle(Shape):

    def __init__(self, width: float, height: float):
        self._width = width
        self._height = height

    def set_width(self, width: float) -> None:
        self._width = width

    def set_height(self, height: float) -> None:
        self._height = height

    def get_width(self) -> float:
        return self._width

    def get_height(self) -> float:
        return self._height

    def get_area(self) -> float:
        return self._width * self._height


class Square(Shape):

    def __init__(self, side: float):
        self._side = side

    def set_side(self, side: float) -> None:
        self._side = side

    def get_side(self) -> float:
        return self._side

    def get_area(self) -> float:
        return self._side * self._side


def calculate_area(shape: Shape) -> float:
    area = shape.get_area()
    print(f"Shape area: {area}")
    return area
