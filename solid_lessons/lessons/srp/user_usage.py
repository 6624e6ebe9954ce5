"""Usage of the refactored user classes.

Each class has its own responsibility and can be used independently.
"""
from solid_lessons.lessons.srp.user_refactored import (
    User,
    UserValidator,
    UserRepository,
    UserFormatter,
)


def main() -> None:
    user = User("Oleksandr", "alex@example.com", 25)

    is_valid = UserValidator.validate_user(user)
    print(f"User is valid: {is_valid}")

    repository = UserRepository()
    repository.save_user(user)

    print(UserFormatter.to_display_string(user))
    print(UserFormatter.to_json(user))


if __name__ == "__main__":
    main()
