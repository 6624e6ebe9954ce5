"""Dependency Inversion Principle applied to logging.

Benefits of this approach:
- UserService depends on the Logger abstraction, not an implementation
- The logging backend (console, file, remote server) changes freely
- Easy to test with recording loggers
- Business logic is separated from logging details
- Different environments use different loggers
"""
import logging
from abc import ABC, abstractmethod
from typing import Optional


class Logger(ABC):
    """Abstraction for writing a log line."""

    @abstractmethod
    def log(self, message: str) -> None:
        pass


class ConsoleLogger(Logger):

    def log(self, message: str) -> None:
        print(f"[CONSOLE]: {message}")


class FileLogger(Logger):

    def log(self, message: str) -> None:
        print(f"[FILE]: Writing to file - {message}")


class RemoteLogger(Logger):

    def log(self, message: str) -> None:
        print(f"[REMOTE]: Sending to server - {message}")


class StdlibLogger(Logger):
    """Logger backed by Python's logging module."""

    def __init__(self, logger: Optional[logging.Logger] = None, level: int = logging.INFO):
        """
        Initialize stdlib-backed logger.

        Args:
            logger: Target logger (defaults to this module's logger)
            level: Level every message is emitted at
        """
        self._logger = logger or logging.getLogger(__name__)
        self._level = level

    def log(self, message: str) -> None:
        self._logger.log(self._level, message)


class UserService:
    """User operations that log through an injected Logger."""

    def __init__(self, logger: Logger):
        self._logger = logger

    def create_user(self, name: str, email: str) -> None:
        self._logger.log(f"Creating user {name}")
        self._logger.log(f"User {name} created successfully")

    def delete_user(self, user_id: str) -> None:
        self._logger.log(f"Deleting user with ID: {user_id}")
        self._logger.log(f"User {user_id} deleted")
