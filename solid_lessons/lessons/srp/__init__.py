"""Lesson 2 - Single Responsibility Principle (users, orders)."""
