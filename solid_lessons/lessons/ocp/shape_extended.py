"""Extending the shape system with new shapes.

New classes are added without touching the existing ones.
"""
import math

from solid_lessons.lessons.ocp.shape_refactored import Shape


class Square(Shape):

    def __init__(self, side: float):
        self._side = side

    def calculate_area(self) -> float:
        return self._side * self._side

    def get_info(self) -> str:
        return f"Square with side {self._side}"

    def get_side(self) -> float:
        return self._side


class Ellipse(Shape):

    def __init__(self, major_axis: float, minor_axis: float):
        self._major_axis = major_axis
        self._minor_axis = minor_axis

    def calculate_area(self) -> float:
        return math.pi * self._major_axis * self._minor_axis

    def get_info(self) -> str:
        return f"Ellipse with semi-axes {self._major_axis} and {self._minor_axis}"
