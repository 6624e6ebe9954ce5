import pytest
from flask import Flask

from solid_lessons.application.services.lesson_runner import LessonRunner
from solid_lessons.config.settings import Config
from solid_lessons.infrastructure.service_container import ServiceContainer
from solid_lessons.lessons.dip.advanced_usage import AdvancedOrderService


class TestServiceContainer:

    def test_is_a_singleton(self):
        assert ServiceContainer() is ServiceContainer()

    def test_registry_is_created_once_with_catalog(self):
        container = ServiceContainer()

        registry = container.get_lesson_registry()

        assert registry is ServiceContainer().get_lesson_registry()
        assert len(registry.get_all_lessons()) == 20

    def test_runner_uses_container_registry(self):
        container = ServiceContainer()

        runner = container.get_lesson_runner()

        assert isinstance(runner, LessonRunner)
        assert runner.lesson_registry is container.get_lesson_registry()

    def test_order_service_follows_configuration(self, monkeypatch, capsys):
        monkeypatch.setattr(Config, "ORDER_SERVICE_ENV", "production")

        service = ServiceContainer().get_order_service()
        service.process_order("Maria", 100)

        assert isinstance(service, AdvancedOrderService)
        assert "via Stripe" in capsys.readouterr().out

    def test_order_service_prefers_app_config(self, monkeypatch, capsys):
        monkeypatch.setattr(Config, "ORDER_SERVICE_ENV", "development")
        app = Flask(__name__)
        app.config["ORDER_SERVICE_ENV"] = "production"

        with app.app_context():
            service = ServiceContainer().get_order_service()
        service.process_order("Maria", 100)

        assert "via Stripe" in capsys.readouterr().out

    def test_unsupported_order_environment_raises(self, monkeypatch):
        monkeypatch.setattr(Config, "ORDER_SERVICE_ENV", "staging")

        with pytest.raises(ValueError, match="Unsupported order service environment"):
            ServiceContainer().get_order_service()

    def test_reset_drops_cached_services(self):
        first = ServiceContainer().get_lesson_registry()

        ServiceContainer.reset()

        assert ServiceContainer().get_lesson_registry() is not first
