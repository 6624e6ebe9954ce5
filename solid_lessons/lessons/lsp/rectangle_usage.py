"""Usage of the refactored shapes through the common Shape interface."""
from solid_lessons.lessons.lsp.rectangle_refactored import Rectangle, Square, calculate_area


def main() -> None:
    rectangle = Rectangle(5, 4)
    square = Square(3)

    calculate_area(rectangle)  # Shape area: 20
    calculate_area(square)  # Shape area: 9

    print("\n--- Working with a rectangle ---")
    print(f"Initial size: {rectangle.get_width()}x{rectangle.get_height()}")
    rectangle.set_width(10)
    rectangle.set_height(2)
    print(f"New size: {rectangle.get_width()}x{rectangle.get_height()}")
    print(f"Area: {rectangle.get_area()}")

    print("\n--- Working with a square ---")
    print(f"Initial side: {square.get_side()}")
    square.set_side(7)
    print(f"New side: {square.get_side()}")
    print(f"Area: {square.get_area()}")

    shapes = [Rectangle(3, 4), Square(5), Rectangle(2, 8), Square(6)]

    print("\n--- Areas of different shapes ---")
    for index, shape in enumerate(shapes, start=1):
        print(f"Shape {index}: area = {shape.get_area()}")


if __name__ == "__main__":
    main()
