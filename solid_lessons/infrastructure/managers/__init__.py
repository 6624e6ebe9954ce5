"""Registry implementations (Infrastructure Layer).

These implement domain interfaces defined in solid_lessons.domain.interfaces.
"""
from solid_lessons.infrastructure.managers.lesson_registry import LessonRegistry

__all__ = [
    "LessonRegistry",
]
