"""Domain interfaces following Dependency Inversion Principle."""

from solid_lessons.domain.interfaces.lesson_registry import ILessonRegistry

__all__ = [
    "ILessonRegistry",
]
