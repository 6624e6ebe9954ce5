"""User classes refactored to follow the Single Responsibility Principle.

Each class now has a single responsibility:
- User: only stores user data
- UserValidator: only validates user data
- UserRepository: only handles database operations
- UserFormatter: only formats user data for display
"""
import json
import re


EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class User:
    """Plain user record."""

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


class UserValidator:
    """Validation rules for users."""

    @staticmethod
    def validate_email(email: str) -> bool:
        return EMAIL_PATTERN.match(email) is not None

    @staticmethod
    def validate_age(age: int) -> bool:
        return 0 <= age <= 120

    @staticmethod
    def validate_name(name: str) -> bool:
        return 2 <= len(name) <= 50

    @staticmethod
    def validate_user(user: User) -> bool:
        """
        Validate every field of a user.

        Args:
            user: User to validate

        Returns:
            True if email, age and name are all valid
        """
        return (
            UserValidator.validate_email(user.get_email())
            and UserValidator.validate_age(user.get_age())
            and UserValidator.validate_name(user.get_name())
        )


class UserRepository:
    """Database operations for users (stubbed with console output)."""

    def save_user(self, user: User) -> None:
        """
        Save a user after validating it.

        Args:
            user: User to save

        Raises:
            ValueError: If the user is invalid
        """
        if not UserValidator.validate_user(user):
            raise ValueError("Invalid user data")

        print(f"Saving user {user.get_name()} to database...")
        query = (
            f"INSERT INTO users (name, email, age) "
            f"VALUES ('{user.get_name()}', '{user.get_email()}', {user.get_age()})"
        )
        self._execute_query(query)

    def _execute_query(self, query: str) -> None:
        print(f"Executing: {query}")


class UserFormatter:
    """Display formatting for users."""

    @staticmethod
    def to_display_string(user: User) -> str:
        return f"User: {user.get_name()} ({user.get_email()}), Age: {user.get_age()}"

    @staticmethod
    def to_json(user: User) -> str:
        return json.dumps({
            "name": user.get_name(),
            "email": user.get_email(),
            "age": user.get_age(),
        }, ensure_ascii=False, separators=(",", ":"))
