"""Lesson viewer endpoints."""
import io
import logging
import math
from contextlib import redirect_stdout

from flask import Blueprint, abort, current_app, jsonify, request

from solid_lessons.application.services.lesson_runner import STDOUT_LOCK
from solid_lessons.domain.entities.lesson import Principle
from solid_lessons.middleware.monitoring import track_request


lessons_blueprint = Blueprint("lessons", __name__)
_logger = logging.getLogger(__name__)


def _container():
    return current_app.config["service_container"]


@lessons_blueprint.route("/lessons", methods=["GET"])
@track_request("lessons")
def list_lessons():
    """
    List the lesson catalog, optionally filtered by ?principle=<code>.

    Returns:
        JSON response with the lessons
    """
    registry = _container().get_lesson_registry()
    principle_code = request.args.get("principle")

    if principle_code:
        try:
            principle = Principle.from_code(principle_code)
        except ValueError as e:
            abort(400, description=str(e))
        lessons = registry.get_lessons_by_principle(principle)
    else:
        lessons = registry.get_all_lessons()

    return jsonify({
        "status": "ok",
        "count": len(lessons),
        "lessons": [lesson.to_dict() for lesson in lessons]
    }), 200


@lessons_blueprint.route("/lessons/<lesson_id>/run", methods=["POST"])
@track_request("run_lesson")
def run_lesson(lesson_id: str):
    """
    Run a lesson and return its captured narration.

    Args:
        lesson_id: Lesson identifier from the URL

    Returns:
        JSON response with the lesson result
    """
    runner = _container().get_lesson_runner()

    try:
        result = runner.run(lesson_id)
    except ValueError as e:
        abort(404, description=str(e))

    _logger.info(f"Lesson '{lesson_id}' run via viewer, succeeded={result.succeeded}")
    return jsonify({"status": "ok", "result": result.to_dict()}), 200


@lessons_blueprint.route("/orders", methods=["POST"])
@track_request("orders")
def place_order():
    """
    Place an order through the configured order service.

    Expects JSON with "customer_name" and "amount".

    Returns:
        JSON response with the payment flag and the service's narration
    """
    body = request.get_json(silent=True) or {}
    customer_name = body.get("customer_name")
    amount = body.get("amount")

    if (not customer_name or isinstance(amount, bool)
            or not isinstance(amount, (int, float))
            or (isinstance(amount, float) and not math.isfinite(amount))):
        abort(400, description="customer_name and finite numeric amount are required")

    order_service = _container().get_order_service()
    buffer = io.StringIO()
    with STDOUT_LOCK, redirect_stdout(buffer):
        paid = order_service.process_order(customer_name, amount)

    return jsonify({
        "status": "ok",
        "paid": paid,
        "output": buffer.getvalue()
    }), 200
