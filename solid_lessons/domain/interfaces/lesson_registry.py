"""Interface for lesson registries (Registry Pattern).

Keeps track of every runnable lesson so the runner and the views
can look lessons up without importing lesson modules directly.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from solid_lessons.domain.entities.lesson import Lesson, Principle


class ILessonRegistry(ABC):
    """
    Interface for lesson registries following Registry Pattern.

    Manages registration and lookup of lessons by id and principle.
    """

    @abstractmethod
    def register_lesson(self, lesson: Lesson) -> None:
        """
        Register a lesson.

        Args:
            lesson: Lesson instance

        Raises:
            ValueError: If lesson is invalid
        """
        pass

    @abstractmethod
    def get_lesson(self, lesson_id: str) -> Optional[Lesson]:
        """
        Get a lesson by id.

        Args:
            lesson_id: Lesson identifier (e.g., "ocp.discount")

        Returns:
            Lesson if found, None otherwise
        """
        pass

    @abstractmethod
    def get_all_lessons(self) -> List[Lesson]:
        """
        Get all registered lessons.

        Returns:
            Lessons in registration order
        """
        pass

    @abstractmethod
    def get_lessons_by_principle(self, principle: Principle) -> List[Lesson]:
        """
        Get all lessons for a specific principle.

        Args:
            principle: Principle to filter by

        Returns:
            Lessons for the principle, in registration order
        """
        pass
