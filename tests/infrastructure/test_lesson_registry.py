import logging

import pytest

from solid_lessons.domain.entities.lesson import Lesson, LessonKind, LessonResult, Principle
from solid_lessons.infrastructure.managers.lesson_registry import LessonRegistry


def _lesson(lesson_id="ocp.test", principle=Principle.OCP, title="Test lesson"):
    return Lesson(lesson_id, principle, LessonKind.REFACTORED, title, lambda: None)


class TestPrinciple:

    def test_from_code_is_case_insensitive(self):
        assert Principle.from_code("OCP") is Principle.OCP

    def test_from_code_unknown(self):
        with pytest.raises(ValueError, match="Unknown principle: xyz"):
            Principle.from_code("xyz")

    def test_lesson_numbers(self):
        assert [p.lesson_number for p in Principle] == [2, 3, 4, 5, 6]


class TestLesson:

    def test_requires_id(self):
        with pytest.raises(ValueError, match="lesson_id is required"):
            _lesson(lesson_id="")

    def test_requires_title(self):
        with pytest.raises(ValueError, match="title is required"):
            _lesson(title="")

    def test_requires_callable_entrypoint(self):
        with pytest.raises(ValueError, match="entrypoint must be callable"):
            Lesson("x", Principle.SRP, LessonKind.VIOLATION, "X", "not callable")

    def test_to_dict(self):
        assert _lesson().to_dict() == {
            "lesson_id": "ocp.test",
            "principle": "ocp",
            "lesson_number": 3,
            "kind": "refactored",
            "title": "Test lesson",
        }

    def test_result_to_dict(self):
        result = LessonResult("ocp.test", False, "out\n", error="ValueError: bad", duration_seconds=0.5)

        assert result.to_dict() == {
            "lesson_id": "ocp.test",
            "succeeded": False,
            "output": "out\n",
            "error": "ValueError: bad",
            "duration_seconds": 0.5,
        }


class TestLessonRegistry:

    def test_register_and_get(self):
        registry = LessonRegistry()
        lesson = _lesson()

        registry.register_lesson(lesson)

        assert registry.get_lesson("ocp.test") is lesson

    def test_get_unknown_returns_none(self):
        assert LessonRegistry().get_lesson("missing") is None

    def test_rejects_non_lessons(self):
        with pytest.raises(ValueError, match="Lesson must be a Lesson instance"):
            LessonRegistry().register_lesson({"lesson_id": "x"})

    def test_rejection_is_logged_as_error(self, caplog):
        with caplog.at_level(logging.ERROR):
            with pytest.raises(ValueError):
                LessonRegistry().register_lesson("not a lesson")

        assert any(record.levelno == logging.ERROR for record in caplog.records)
        assert "str is not a Lesson" in caplog.text

    def test_overwrite_logs_warning(self, caplog):
        registry = LessonRegistry()
        registry.register_lesson(_lesson(title="First"))
        replacement = _lesson(title="Second")

        with caplog.at_level(logging.WARNING):
            registry.register_lesson(replacement)

        assert registry.get_lesson("ocp.test") is replacement
        assert "already registered" in caplog.text

    def test_keeps_registration_order(self):
        registry = LessonRegistry()
        for lesson_id in ("b", "a", "c"):
            registry.register_lesson(_lesson(lesson_id=lesson_id))

        assert [lesson.lesson_id for lesson in registry.get_all_lessons()] == ["b", "a", "c"]

    def test_get_all_returns_copy(self):
        registry = LessonRegistry()
        registry.register_lesson(_lesson())

        registry.get_all_lessons().clear()

        assert len(registry.get_all_lessons()) == 1

    def test_filter_by_principle(self):
        registry = LessonRegistry()
        registry.register_lesson(_lesson("ocp.one", Principle.OCP))
        registry.register_lesson(_lesson("dip.one", Principle.DIP))

        lessons = registry.get_lessons_by_principle(Principle.DIP)

        assert [lesson.lesson_id for lesson in lessons] == ["dip.one"]
        assert registry.get_lessons_by_principle(Principle.LSP) == []
