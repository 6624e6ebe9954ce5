"""Domain layer - lesson entities and interfaces.

This layer contains:
- Domain entities
- Registry interfaces
"""
