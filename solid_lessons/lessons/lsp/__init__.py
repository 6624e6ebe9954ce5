"""Lesson 4 - Liskov Substitution Principle (rectangles, birds)."""
