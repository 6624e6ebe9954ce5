"""Lesson domain entities."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Optional


class Principle(Enum):
    """The five design principles, one lesson each."""

    SRP = (2, "srp", "Single Responsibility Principle")
    OCP = (3, "ocp", "Open/Closed Principle")
    LSP = (4, "lsp", "Liskov Substitution Principle")
    ISP = (5, "isp", "Interface Segregation Principle")
    DIP = (6, "dip", "Dependency Inversion Principle")

    def __init__(self, lesson_number: int, code: str, title: str):
        self.lesson_number = lesson_number
        self.code = code
        self.title = title

    @classmethod
    def from_code(cls, code: str) -> "Principle":
        """
        Look up a principle by its short code.

        Args:
            code: Short code such as "ocp" (case-insensitive)

        Returns:
            Matching principle

        Raises:
            ValueError: If no principle has that code
        """
        for principle in cls:
            if principle.code == code.lower():
                return principle
        raise ValueError(f"Unknown principle: {code}")


class LessonKind(str, Enum):
    VIOLATION = "violation"
    REFACTORED = "refactored"


@dataclass
class Lesson:
    """Domain entity representing a runnable lesson."""

    lesson_id: str
    principle: Principle
    kind: LessonKind
    title: str
    entrypoint: Callable[[], None] = field(repr=False, compare=False)

    def __post_init__(self):
        """Validate lesson entity."""
        if not self.lesson_id:
            raise ValueError("lesson_id is required")
        if not self.title:
            raise ValueError("title is required")
        if not callable(self.entrypoint):
            raise ValueError("entrypoint must be callable")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "lesson_id": self.lesson_id,
            "principle": self.principle.code,
            "lesson_number": self.principle.lesson_number,
            "kind": self.kind.value,
            "title": self.title,
        }


@dataclass
class LessonResult:
    """Outcome of running a lesson: its narration and any failure."""

    lesson_id: str
    succeeded: bool
    output: str
    error: Optional[str] = None
    duration_seconds: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "lesson_id": self.lesson_id,
            "succeeded": self.succeeded,
            "output": self.output,
            "error": self.error,
            "duration_seconds": self.duration_seconds,
        }
