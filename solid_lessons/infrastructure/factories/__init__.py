"""Factories for building the lesson catalog (Factory Pattern)."""

from solid_lessons.infrastructure.factories.lesson_catalog_factory import LessonCatalogFactory

__all__ = [
    "LessonCatalogFactory",
]
