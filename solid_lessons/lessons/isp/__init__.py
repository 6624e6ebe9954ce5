"""Lesson 5 - Interface Segregation Principle (printers, employees)."""
