"""Flask application factory for the lesson viewer."""
import logging
import sys

from flask import Flask, jsonify

from solid_lessons.config.settings import Config, get_config


def create_app(config_class=None) -> Flask:
    """
    Create and configure the lesson viewer application.

    Implements Factory Pattern and Dependency Injection.

    Args:
        config_class: Optional configuration class (for testing)

    Returns:
        Configured Flask application
    """
    # Deferred: importing the package must not load the lesson catalog
    from solid_lessons.infrastructure.service_container import ServiceContainer
    from solid_lessons.middleware.error_handler import init_error_handlers
    from solid_lessons.middleware.monitoring import register_metrics_middleware
    from solid_lessons.views import health_blueprint, lessons_blueprint

    _logger = logging.getLogger(__name__)

    try:
        app = Flask(__name__)

        config = config_class or get_config()
        app.config.from_object(config)

        _configure_logging(config)

        app.register_blueprint(lessons_blueprint)
        app.register_blueprint(health_blueprint)

        @app.route("/", methods=["GET"])
        def root():
            """Root endpoint."""
            return jsonify({
                "status": "ok",
                "service": "solid-lessons",
                "message": "Service is running"
            }), 200

        try:
            config.validate()
        except ValueError as e:
            _logger.warning(f"Configuration validation warning: {e}")

        init_error_handlers(app)
        if app.config.get("ENABLE_METRICS"):
            register_metrics_middleware(app)

        app.config['service_container'] = ServiceContainer()

        _logger.info(f"Application ready - routes: {[str(rule) for rule in app.url_map.iter_rules()]}")

    except Exception as e:
        _logger.critical(f"Failed to create Flask application: {e}", exc_info=True)
        raise

    return app


def _configure_logging(config: type[Config] = Config) -> None:
    """Configure application logging."""
    logging.basicConfig(
        level=config.get_log_level(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stdout,
        force=True
    )
