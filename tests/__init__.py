"""
Test suite for riemann

Contains:
- tests/unit/          : Unit tests for individual modules and algebraic laws
"""
