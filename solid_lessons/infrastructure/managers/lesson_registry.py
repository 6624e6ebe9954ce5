"""Lesson registry implementation (Registry Pattern).

Stores every runnable lesson and serves lookups by id and principle.
"""
import logging
from typing import Dict, List, Optional

from solid_lessons.domain.entities.lesson import Lesson, Principle
from solid_lessons.domain.interfaces.lesson_registry import ILessonRegistry


logger = logging.getLogger(__name__)


class LessonRegistry(ILessonRegistry):
    """
    Implementation of lesson registry following Registry Pattern.

    Lessons are kept in registration order.
    """

    def __init__(self):
        """Initialize lesson registry with empty storage."""
        self._lessons: Dict[str, Lesson] = {}
        self._logger = logging.getLogger(__name__)

    def register_lesson(self, lesson: Lesson) -> None:
        """
        Register a lesson.

        Args:
            lesson: Lesson instance

        Raises:
            ValueError: If lesson is not a Lesson or has no id
        """
        if not isinstance(lesson, Lesson):
            self._logger.error(f"Rejected lesson registration: {type(lesson).__name__} is not a Lesson")
            raise ValueError("Lesson must be a Lesson instance")

        if not lesson.lesson_id:
            self._logger.error("Rejected lesson registration: empty lesson_id")
            raise ValueError("Lesson must have a valid lesson_id")

        if lesson.lesson_id in self._lessons:
            self._logger.warning(
                f"Lesson '{lesson.lesson_id}' already registered. Overwriting."
            )

        self._lessons[lesson.lesson_id] = lesson
        self._logger.debug(
            f"Registered lesson '{lesson.lesson_id}' "
            f"for principle '{lesson.principle.code}'"
        )

    def get_lesson(self, lesson_id: str) -> Optional[Lesson]:
        return self._lessons.get(lesson_id)

    def get_all_lessons(self) -> List[Lesson]:
        return list(self._lessons.values())

    def get_lessons_by_principle(self, principle: Principle) -> List[Lesson]:
        return [
            lesson for lesson in self._lessons.values()
            if lesson.principle is principle
        ]
