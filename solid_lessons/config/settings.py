"""Application configuration with environment-based settings."""
import logging
import os

from dotenv import load_dotenv


VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
VALID_ORDER_SERVICE_ENVS = ("development", "production")


class Config:
    """Base configuration class following Single Responsibility Principle."""

    # Load environment variables
    load_dotenv()

    # Application
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    SECRET_KEY: str = os.getenv("SECRET_KEY", "dev-secret-key-change-in-production")

    # Monitoring
    ENABLE_METRICS: bool = os.getenv("ENABLE_METRICS", "true").lower() == "true"

    # Lessons
    ORDER_SERVICE_ENV: str = os.getenv("ORDER_SERVICE_ENV", "development").lower()

    @classmethod
    def validate(cls) -> None:
        """Validate configuration values."""
        problems = []

        if cls.LOG_LEVEL not in VALID_LOG_LEVELS:
            problems.append(f"LOG_LEVEL={cls.LOG_LEVEL}")
        if cls.ORDER_SERVICE_ENV not in VALID_ORDER_SERVICE_ENVS:
            problems.append(f"ORDER_SERVICE_ENV={cls.ORDER_SERVICE_ENV}")

        if problems:
            raise ValueError(f"Invalid configuration values: {', '.join(problems)}")

    @classmethod
    def get_log_level(cls) -> int:
        """Resolve the logging level, DEBUG always winning."""
        if cls.DEBUG:
            return logging.DEBUG
        if cls.LOG_LEVEL in VALID_LOG_LEVELS:
            return getattr(logging, cls.LOG_LEVEL)
        return logging.INFO


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    ENABLE_METRICS = False


def get_config() -> type[Config]:
    """Factory method to get configuration based on environment."""
    env = os.getenv("FLASK_ENV", "development").lower()

    config_map = {
        "development": DevelopmentConfig,
        "production": ProductionConfig,
        "testing": TestingConfig,
    }

    return config_map.get(env, DevelopmentConfig)
