import logging

import pytest

from solid_lessons.config.settings import (
    Config,
    DevelopmentConfig,
    ProductionConfig,
    TestingConfig,
    get_config,
)


class TestConfig:

    def test_debug_wins_over_log_level(self, monkeypatch):
        monkeypatch.setattr(Config, "DEBUG", True)
        monkeypatch.setattr(Config, "LOG_LEVEL", "ERROR")

        assert Config.get_log_level() == logging.DEBUG

    def test_named_log_level(self, monkeypatch):
        monkeypatch.setattr(Config, "DEBUG", False)
        monkeypatch.setattr(Config, "LOG_LEVEL", "WARNING")

        assert Config.get_log_level() == logging.WARNING

    def test_unknown_log_level_falls_back_to_info(self, monkeypatch):
        monkeypatch.setattr(Config, "DEBUG", False)
        monkeypatch.setattr(Config, "LOG_LEVEL", "LOUD")

        assert Config.get_log_level() == logging.INFO

    def test_validate_accepts_defaults(self, monkeypatch):
        monkeypatch.setattr(Config, "LOG_LEVEL", "INFO")
        monkeypatch.setattr(Config, "ORDER_SERVICE_ENV", "development")

        Config.validate()

    def test_validate_lists_every_problem(self, monkeypatch):
        monkeypatch.setattr(Config, "LOG_LEVEL", "LOUD")
        monkeypatch.setattr(Config, "ORDER_SERVICE_ENV", "staging")

        with pytest.raises(ValueError) as exc_info:
            Config.validate()

        assert "LOG_LEVEL=LOUD" in str(exc_info.value)
        assert "ORDER_SERVICE_ENV=staging" in str(exc_info.value)

    def test_testing_config_disables_metrics(self):
        assert TestingConfig.TESTING is True
        assert TestingConfig.ENABLE_METRICS is False


class TestGetConfig:

    @pytest.mark.parametrize("env,expected", [
        ("development", DevelopmentConfig),
        ("production", ProductionConfig),
        ("Testing", TestingConfig),
        ("unknown", DevelopmentConfig),
    ])
    def test_selects_by_flask_env(self, monkeypatch, env, expected):
        monkeypatch.setenv("FLASK_ENV", env)

        assert get_config() is expected

    def test_defaults_to_development(self, monkeypatch):
        monkeypatch.delenv("FLASK_ENV", raising=False)

        assert get_config() is DevelopmentConfig
