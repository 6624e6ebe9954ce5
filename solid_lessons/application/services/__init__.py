"""Application services."""
from solid_lessons.application.services.lesson_runner import LessonRunner

__all__ = ["LessonRunner"]
