"""
Test suite for complex-math

Contains:
- tests/unit/          : Unit tests for individual modules
"""
