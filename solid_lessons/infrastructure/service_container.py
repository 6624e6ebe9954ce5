"""Service container for dependency injection (IoC Container Pattern)."""
import logging
from typing import Optional

from flask import current_app, has_app_context

from solid_lessons.application.services.lesson_runner import LessonRunner
from solid_lessons.config.settings import Config
from solid_lessons.domain.interfaces.lesson_registry import ILessonRegistry
from solid_lessons.infrastructure.factories.lesson_catalog_factory import LessonCatalogFactory
from solid_lessons.infrastructure.managers.lesson_registry import LessonRegistry
from solid_lessons.lessons.dip.advanced_usage import AdvancedOrderService, OrderServiceFactory


class ServiceContainer:
    """
    Service container implementing Dependency Injection pattern.

    Follows Singleton pattern and Dependency Inversion Principle.
    Services are created lazily on first access.
    """

    _instance: Optional['ServiceContainer'] = None
    _lesson_registry: Optional[ILessonRegistry] = None
    _lesson_runner: Optional[LessonRunner] = None
    _order_service: Optional[AdvancedOrderService] = None

    def __new__(cls):
        """Singleton pattern implementation."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """Initialize service container."""
        self._logger = logging.getLogger(__name__)

    @classmethod
    def reset(cls) -> None:
        """Drop the singleton and every cached service."""
        cls._instance = None
        cls._lesson_registry = None
        cls._lesson_runner = None
        cls._order_service = None

    def get_lesson_registry(self) -> ILessonRegistry:
        """Get or create lesson registry instance."""
        if self._lesson_registry is None:
            try:
                registry = LessonRegistry()
                LessonCatalogFactory.initialize_catalog(registry)
                type(self)._lesson_registry = registry
                self._logger.info("LessonRegistry created")
            except Exception as e:
                self._logger.error(f"Failed to create LessonRegistry: {e}")
                raise
        return self._lesson_registry

    def get_lesson_runner(self) -> LessonRunner:
        """Get or create lesson runner instance."""
        if self._lesson_runner is None:
            type(self)._lesson_runner = LessonRunner(lesson_registry=self.get_lesson_registry())
            self._logger.info("LessonRunner created")
        return self._lesson_runner

    def get_order_service(self) -> AdvancedOrderService:
        """Get or create the order service for the configured environment."""
        if self._order_service is None:
            environment = self._order_service_environment()
            try:
                type(self)._order_service = OrderServiceFactory.create_service(environment)
                self._logger.info(f"AdvancedOrderService created for {environment}")
            except Exception as e:
                self._logger.error(f"Failed to create AdvancedOrderService: {e}")
                raise
        return self._order_service

    @staticmethod
    def _order_service_environment() -> str:
        """Environment name from the running app's config, else from Config."""
        if has_app_context():
            return current_app.config.get("ORDER_SERVICE_ENV", Config.ORDER_SERVICE_ENV)
        return Config.ORDER_SERVICE_ENV
