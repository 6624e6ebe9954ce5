"""User class that violates the Single Responsibility Principle.

This class has several responsibilities:
1. Storing user data
2. Validating user data
3. Saving to the database
4. Formatting data for display

Bad example - a class should have only one reason to change.
"""
import json
import re


EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class User:
    """User that stores, validates, persists and formats itself."""

    def __init__(self, name: str, email: str, age: int):
        self._name = name
        self._email = email
        self._age = age

    def get_name(self) -> str:
        return self._name

    def get_email(self) -> str:
        return self._email

    def get_age(self) -> int:
        return self._age

    def validate_email(self) -> bool:
        return EMAIL_PATTERN.match(self._email) is not None

    def validate_age(self) -> bool:
        return 0 <= self._age <= 120

    def validate_name(self) -> bool:
        return 2 <= len(self._name) <= 50

    def save_to_database(self) -> None:
        """
        Validate the user and pretend to persist it.

        Raises:
            ValueError: If any field is invalid
        """
        if self.validate_email() and self.validate_age() and self.validate_name():
            print(f"Saving user {self._name} to database...")
            self._execute_query(
                f"INSERT INTO users (name, email, age) "
                f"VALUES ('{self._name}', '{self._email}', {self._age})"
            )
        else:
            raise ValueError("Invalid user data")

    def _execute_query(self, query: str) -> None:
        print(f"Executing: {query}")

    def to_display_string(self) -> str:
        return f"User: {self._name} ({self._email}), Age: {self._age}"

    def to_json(self) -> str:
        return json.dumps({
            "name": self._name,
            "email": self._email,
            "age": self._age,
        }, ensure_ascii=False, separators=(",", ":"))


def main() -> None:
    user = User("Oleksandr", "alex@example.com", 25)
    user.save_to_database()
    print(user.to_display_string())
    print(user.to_json())

    # One invalid field and the whole multi-purpose class refuses to save
    invalid_user = User("A", "not-an-email", 150)
    invalid_user.save_to_database()


if __name__ == "__main__":
    main()
