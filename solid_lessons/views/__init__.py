"""Views module - exports all blueprints."""
from solid_lessons.views.lessons import lessons_blueprint
from solid_lessons.views.health import health_blueprint

__all__ = ["lessons_blueprint", "health_blueprint"]
