"""Service for running lessons and capturing their narration."""
import io
import logging
import threading
import time
from contextlib import redirect_stdout
from typing import List

from solid_lessons.domain.entities.lesson import Lesson, LessonResult
from solid_lessons.domain.interfaces.lesson_registry import ILessonRegistry
from solid_lessons.middleware.monitoring import track_lesson_run


logger = logging.getLogger(__name__)

# redirect_stdout swaps sys.stdout for the whole process; hold this while capturing
STDOUT_LOCK = threading.Lock()


class LessonRunner:
    """
    Service that executes lessons from a registry.

    A lesson prints its narration to standard output; the runner captures
    it and returns it in a LessonResult. Violation lessons that end in an
    unsupported capability raise, which is reported as a failed result
    rather than propagated.
    """

    def __init__(self, lesson_registry: ILessonRegistry):
        """
        Initialize lesson runner.

        Args:
            lesson_registry: Registry to look lessons up in (Dependency Injection)
        """
        self.lesson_registry = lesson_registry
        self._logger = logging.getLogger(__name__)

    def run(self, lesson_id: str) -> LessonResult:
        """
        Run a single lesson.

        Args:
            lesson_id: Identifier of the lesson to run

        Returns:
            LessonResult with the captured output

        Raises:
            ValueError: If no lesson has that id
        """
        lesson = self.lesson_registry.get_lesson(lesson_id)
        if lesson is None:
            self._logger.error(f"Lesson not found: {lesson_id}")
            raise ValueError(f"Unknown lesson: {lesson_id}")

        return self._execute(lesson)

    def run_all(self) -> List[LessonResult]:
        """
        Run every registered lesson in registration order.

        Returns:
            One LessonResult per lesson
        """
        return [self._execute(lesson) for lesson in self.lesson_registry.get_all_lessons()]

    def _execute(self, lesson: Lesson) -> LessonResult:
        self._logger.info(f"Running lesson '{lesson.lesson_id}'")
        buffer = io.StringIO()
        error = None
        start_time = time.perf_counter()

        try:
            with STDOUT_LOCK, redirect_stdout(buffer):
                lesson.entrypoint()
        except Exception as e:
            error = f"{type(e).__name__}: {e}"
            self._logger.warning(f"Lesson '{lesson.lesson_id}' ended with {error}")

        duration = time.perf_counter() - start_time
        succeeded = error is None
        track_lesson_run(lesson.lesson_id, succeeded, duration)

        return LessonResult(
            lesson_id=lesson.lesson_id,
            succeeded=succeeded,
            output=buffer.getvalue(),
            error=error,
            duration_seconds=duration,
        )
