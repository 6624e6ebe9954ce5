"""Lesson 6 - Dependency Inversion Principle (payments, logging)."""
