"""Health check endpoints."""
import logging
from collections import Counter

from flask import Blueprint, current_app, jsonify

health_blueprint = Blueprint("health", __name__)
_logger = logging.getLogger(__name__)


def _lesson_registry():
    return current_app.config["service_container"].get_lesson_registry()


@health_blueprint.route("/health", methods=["GET"])
def health_check():
    """
    Health summary with the number of loaded lessons per principle.

    Returns:
        JSON response with health status and lesson counts
    """
    lessons = _lesson_registry().get_all_lessons()
    per_principle = Counter(lesson.principle.code for lesson in lessons)

    return jsonify({
        "status": "healthy",
        "service": "solid-lessons",
        "lesson_count": len(lessons),
        "lessons_per_principle": dict(per_principle)
    }), 200


@health_blueprint.route("/health/ready", methods=["GET"])
def readiness_check():
    """
    Readiness check endpoint (checks the lesson catalog).

    Returns:
        JSON response with readiness status
    """
    checks = {
        "lesson_catalog": False,
        "overall": False
    }

    try:
        checks["lesson_catalog"] = bool(_lesson_registry().get_all_lessons())
    except Exception as e:
        _logger.error(f"Lesson catalog health check failed: {e}")
        checks["lesson_catalog"] = False

    checks["overall"] = checks["lesson_catalog"]

    status_code = 200 if checks["overall"] else 503

    return jsonify({
        "status": "ready" if checks["overall"] else "not_ready",
        "checks": checks
    }), status_code
