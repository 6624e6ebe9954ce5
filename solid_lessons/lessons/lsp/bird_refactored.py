"""Birds modelled with capability interfaces.

Benefits of this approach:
- Each animal implements only what it can actually do
- Code that needs flight only accepts things that fly
- New animals with different abilities are easy to add
"""
from abc import ABC, abstractmethod


class Animal(ABC):
    """Anything with a name that makes a sound."""

    name: str

    @abstractmethod
    def make_sound(self) -> None:
        pass


class Flyable(ABC):

    @abstractmethod
    def fly(self) -> None:
        pass


class Swimmable(ABC):

    @abstractmethod
    def swim(self) -> None:
        pass


class Eagle(Animal, Flyable):
    name = "Eagle"

    def fly(self) -> None:
        print(f"{self.name} soars high above the mountains")

    def make_sound(self) -> None:
        print(f"{self.name} screeches")


class Penguin(Animal, Swimmable):
    name = "Penguin"

    def swim(self) -> None:
        print(f"{self.name} swims playfully under water")

    def make_sound(self) -> None:
        print(f"{self.name} makes penguin sounds")


class Duck(Animal, Flyable, Swimmable):
    name = "Duck"

    def fly(self) -> None:
        print(f"{self.name} flies over the pond")

    def swim(self) -> None:
        print(f"{self.name} swims on the surface")

    def make_sound(self) -> None:
        print(f"{self.name} quacks")


def make_animal_sound(animal: Animal) -> None:
    animal.make_sound()


def make_flyable_thing_fly(flyable: Flyable) -> None:
    """
    Make something that can fly, fly.

    Args:
        flyable: Object implementing Flyable

    Raises:
        TypeError: If the object does not implement Flyable
    """
    if not isinstance(flyable, Flyable):
        raise TypeError(f"{type(flyable).__name__} does not implement Flyable")
    flyable.fly()
