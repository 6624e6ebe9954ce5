"""Lesson modules, one package per principle.

Each package holds violation modules (the anti-pattern), refactored modules
(the fix), extended modules (adding behavior without edits) and usage
modules. Usage and violation modules expose ``main()`` and run it when
executed with ``python -m``.
"""
