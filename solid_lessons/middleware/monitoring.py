"""Monitoring and metrics middleware using Prometheus."""
import logging
from typing import Callable

from flask import current_app, has_app_context, request
from prometheus_client import Counter, Histogram, make_wsgi_app
from werkzeug.exceptions import HTTPException
from werkzeug.middleware.dispatcher import DispatcherMiddleware

from solid_lessons.config.settings import Config

logger = logging.getLogger(__name__)

# Prometheus metrics
lesson_runs_total = Counter(
    'solid_lessons_runs_total',
    'Total number of lesson runs',
    ['lesson_id', 'status']
)

lesson_run_duration = Histogram(
    'solid_lessons_run_duration_seconds',
    'Time spent running a lesson',
    ['lesson_id'],
    buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0]
)

http_requests_total = Counter(
    'solid_lessons_http_requests_total',
    'Total number of lesson viewer requests',
    ['method', 'endpoint', 'status']
)


def register_metrics_middleware(app) -> None:
    """
    Register Prometheus metrics middleware.

    Args:
        app: Flask application instance
    """
    if not app.config.get("ENABLE_METRICS", Config.ENABLE_METRICS):
        return

    # Serve /metrics from the Prometheus WSGI app
    app.wsgi_app = DispatcherMiddleware(app.wsgi_app, {
        '/metrics': make_wsgi_app()
    })

    logger.info("Prometheus metrics enabled at /metrics")


def track_request(endpoint: str):
    """
    Decorator to track lesson viewer request metrics.

    Args:
        endpoint: Endpoint name for metrics
    """
    def decorator(f: Callable) -> Callable:
        def wrapper(*args, **kwargs):
            try:
                response = f(*args, **kwargs)
            except HTTPException as e:
                http_requests_total.labels(
                    method=request.method,
                    endpoint=endpoint,
                    status=e.code
                ).inc()
                raise
            except Exception:
                http_requests_total.labels(
                    method=request.method,
                    endpoint=endpoint,
                    status=500
                ).inc()
                raise

            status_code = response[1] if isinstance(response, tuple) else 200
            http_requests_total.labels(
                method=request.method,
                endpoint=endpoint,
                status=status_code
            ).inc()
            return response

        wrapper.__name__ = f.__name__
        return wrapper
    return decorator


def metrics_enabled() -> bool:
    """Whether metrics are on for the running app, falling back to Config."""
    if has_app_context():
        return bool(current_app.config.get("ENABLE_METRICS", Config.ENABLE_METRICS))
    return Config.ENABLE_METRICS


def track_lesson_run(lesson_id: str, success: bool, duration_seconds: float) -> None:
    """
    Track lesson run metrics.

    Args:
        lesson_id: Lesson identifier
        success: Whether the lesson ran to completion
        duration_seconds: Time the lesson took
    """
    try:
        if metrics_enabled():
            status = "success" if success else "error"
            lesson_runs_total.labels(lesson_id=lesson_id, status=status).inc()
            lesson_run_duration.labels(lesson_id=lesson_id).observe(duration_seconds)
    except Exception as e:
        # Metrics must never break a lesson run
        logger.debug(f"Failed to track lesson run metrics: {e}")
