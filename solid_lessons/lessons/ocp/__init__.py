"""Lesson 3 - Open/Closed Principle (shapes, discounts)."""
