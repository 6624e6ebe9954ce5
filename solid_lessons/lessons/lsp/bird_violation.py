"""Violating the Liskov Substitution Principle with birds.

Problems with this approach:
- A penguin can't fly but is forced to implement fly()
- Methods that don't fit the subclass have to raise
- Callers can't trust fly() and need try/except blocks
"""


class Bird:

    def __init__(self, name: str):
        self.name = name

    def fly(self) -> None:
        print(f"{self.name} flies in the sky")

    def make_sound(self) -> None:
        print(f"{self.name} makes a sound")


class Eagle(Bird):

    def __init__(self):
        super().__init__("Eagle")

    def fly(self) -> None:
        print(f"{self.name} soars high above the mountains")

    def make_sound(self) -> None:
        print(f"{self.name} screeches")


class Penguin(Bird):

    def __init__(self):
        super().__init__("Penguin")

    def fly(self) -> None:
        raise NotImplementedError("Penguins can't fly!")

    def make_sound(self) -> None:
        print(f"{self.name} makes penguin sounds")

    def swim(self) -> None:
        print(f"{self.name} swims playfully under water")


def make_bird_fly(bird: Bird) -> None:
    try:
        bird.fly()
    except NotImplementedError as e:
        print(f"Error: {e}")


def main() -> None:
    for bird in (Eagle(), Penguin()):
        make_bird_fly(bird)


if __name__ == "__main__":
    main()
