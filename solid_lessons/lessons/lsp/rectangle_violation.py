"""Example of violating the Liskov Substitution Principle.

Problems with this approach:
- Square changes the behavior of its parent Rectangle
- Functions written for Rectangle give surprising results with Square
- Width and height are expected to be set independently
- Callers end up adding type checks
"""


class Rectangle:

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


class Square(Rectangle):
    """Square that keeps both sides equal, breaking the Rectangle contract."""

    def __init__(self, side: float):
        super().__init__(side, side)

    def set_width(self, width: float) -> None:
        self._width = width
        self._height = width

    def set_height(self, height: float) -> None:
        self._width = height
        self._height = height


def resize_rectangle(rectangle: Rectangle) -> float:
    """
    Resize a rectangle to 5x4 and report the resulting area.

    Args:
        rectangle: Rectangle (or anything claiming to be one)

    Returns:
        Actual area after resizing
    """
    rectangle.set_width(5)
    rectangle.set_height(4)

    area = rectangle.get_area()
    print(f"Expected area: 20, Actual area: {area}")
    return area


def main() -> None:
    resize_rectangle(Rectangle(2, 3))
    resize_rectangle(Square(3))


if __name__ == "__main__":
    main()
