#!/usr/bin/env python3
"""Run lessons from the catalog and print their narration.

Usage:
    python run_lessons.py                 # every lesson, in order
    python run_lessons.py ocp.discount    # selected lessons only
"""
import logging
import sys

from solid_lessons.config.settings import get_config
from solid_lessons.infrastructure.service_container import ServiceContainer


def run_lessons(lesson_ids) -> int:
    """Run the given lessons (all when empty) and return the exit code."""
    container = ServiceContainer()
    runner = container.get_lesson_runner()

    try:
        results = [runner.run(lesson_id) for lesson_id in lesson_ids] if lesson_ids else runner.run_all()
    except ValueError as e:
        print(f"✗ {e}")
        return 1

    for result in results:
        print("=" * 60)
        print(result.lesson_id)
        print("=" * 60)
        print(result.output, end="")
        if result.succeeded:
            print(f"✓ Completed in {result.duration_seconds:.4f}s\n")
        else:
            print(f"✗ Ended with {result.error}\n")

    return 0


if __name__ == "__main__":
    logging.basicConfig(level=get_config().get_log_level(), stream=sys.stderr)
    sys.exit(run_lessons(sys.argv[1:]))
