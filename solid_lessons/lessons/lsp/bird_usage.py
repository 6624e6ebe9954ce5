"""Usage of the refactored animals through capability interfaces."""
from solid_lessons.lessons.lsp.bird_refactored import (
    Eagle,
    Penguin,
    Duck,
    make_animal_sound,
    make_flyable_thing_fly,
)


def main() -> None:
    eagle = Eagle()
    penguin = Penguin()
    duck = Duck()

    print("--- Every animal can make a sound ---")
    make_animal_sound(eagle)
    make_animal_sound(penguin)
    make_animal_sound(duck)

    print("\n--- Only flying animals can fly ---")
    make_flyable_thing_fly(eagle)
    make_flyable_thing_fly(duck)
    # make_flyable_thing_fly(penguin) raises TypeError: Penguin is not Flyable

    print("\n--- Specific abilities ---")
    print("Penguin swims:")
    penguin.swim()

    print("\nDuck can both fly and swim:")
    duck.fly()
    duck.swim()

    all_animals = [eagle, penguin, duck]
    flying_animals = [eagle, duck]
    swimming_animals = [penguin, duck]

    print("\n--- All animals ---")
    for animal in all_animals:
        print(f"{animal.name}:")
        animal.make_sound()

    print("\n--- Flying animals ---")
    for animal in flying_animals:
        animal.fly()

    print("\n--- Swimming animals ---")
    for animal in swimming_animals:
        animal.swim()


if __name__ == "__main__":
    main()
