"""Domain entities - core business objects."""
from solid_lessons.domain.entities.lesson import Lesson, LessonKind, LessonResult, Principle

__all__ = [
    "Lesson",
    "LessonKind",
    "LessonResult",
    "Principle",
]
