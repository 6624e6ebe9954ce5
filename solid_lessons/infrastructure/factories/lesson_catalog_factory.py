"""Factory for initializing the lesson catalog (Factory Pattern).

This factory registers every lesson entrypoint with a registry,
in lesson order (SRP first, DIP last).
"""
import logging
from typing import List

from solid_lessons.domain.entities.lesson import Lesson, LessonKind, Principle
from solid_lessons.domain.interfaces.lesson_registry import ILessonRegistry
from solid_lessons.lessons.srp import user_violation, user_usage, order_violation, order_usage
from solid_lessons.lessons.ocp import shape_violation, shape_usage, discount_violation, discount_usage
from solid_lessons.lessons.lsp import rectangle_violation, rectangle_usage, bird_violation, bird_usage
from solid_lessons.lessons.isp import printer_violation, printer_usage, employee_violation, employee_usage
from solid_lessons.lessons.dip import payment_violation, payment_usage, logging_usage, advanced_usage


logger = logging.getLogger(__name__)


class LessonCatalogFactory:
    """
    Factory for the catalog of built-in lessons.

    Adding a lesson means adding one entry here; the runner and views
    pick it up through the registry.
    """

    @staticmethod
    def create_lessons() -> List[Lesson]:
        """
        Create every built-in lesson.

        Returns:
            Lessons in lesson order
        """
        violation = LessonKind.VIOLATION
        refactored = LessonKind.REFACTORED

        return [
            Lesson("srp.user-violation", Principle.SRP, violation,
                   "User that validates, saves and formats itself", user_violation.main),
            Lesson("srp.user", Principle.SRP, refactored,
                   "User split into validator, repository and formatter", user_usage.main),
            Lesson("srp.order-violation", Principle.SRP, violation,
                   "Order that calculates, e-mails and logs itself", order_violation.main),
            Lesson("srp.order", Principle.SRP, refactored,
                   "Order split into calculator, e-mail service and logger", order_usage.main),
            Lesson("ocp.shape-violation", Principle.OCP, violation,
                   "Area calculator switching on shape type", shape_violation.main),
            Lesson("ocp.shape", Principle.OCP, refactored,
                   "Shapes computing their own area", shape_usage.main),
            Lesson("ocp.discount-violation", Principle.OCP, violation,
                   "Discount calculator switching on customer type", discount_violation.main),
            Lesson("ocp.discount", Principle.OCP, refactored,
                   "Swappable discount strategies", discount_usage.main),
            Lesson("lsp.rectangle-violation", Principle.LSP, violation,
                   "Square breaking the Rectangle contract", rectangle_violation.main),
            Lesson("lsp.rectangle", Principle.LSP, refactored,
                   "Rectangle and Square as sibling shapes", rectangle_usage.main),
            Lesson("lsp.bird-violation", Principle.LSP, violation,
                   "Penguin forced to fly", bird_violation.main),
            Lesson("lsp.bird", Principle.LSP, refactored,
                   "Animals with flying and swimming capabilities", bird_usage.main),
            Lesson("isp.printer-violation", Principle.ISP, violation,
                   "Simple printer behind an all-in-one interface", printer_violation.main),
            Lesson("isp.printer", Principle.ISP, refactored,
                   "Printers implementing only what they support", printer_usage.main),
            Lesson("isp.employee-violation", Principle.ISP, violation,
                   "Regular employee forced to manage", employee_violation.main),
            Lesson("isp.employee", Principle.ISP, refactored,
                   "Employees with separate role interfaces", employee_usage.main),
            Lesson("dip.payment-violation", Principle.DIP, violation,
                   "Order service hard-wired to PayPal", payment_violation.main),
            Lesson("dip.payment", Principle.DIP, refactored,
                   "Order service with an injected payment processor", payment_usage.main),
            Lesson("dip.logging", Principle.DIP, refactored,
                   "User service with an injected logger", logging_usage.main),
            Lesson("dip.advanced", Principle.DIP, refactored,
                   "Order service combining payments and logging", advanced_usage.main),
        ]

    @staticmethod
    def initialize_catalog(registry: ILessonRegistry) -> None:
        """
        Register every built-in lesson.

        Args:
            registry: Lesson registry to register lessons with
        """
        logger.info("Initializing lesson catalog...")

        lessons = LessonCatalogFactory.create_lessons()
        for lesson in lessons:
            registry.register_lesson(lesson)

        logger.info(f"Lesson catalog initialized with {len(lessons)} lessons")
