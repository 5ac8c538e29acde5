"""
Core domain models and mathematical primitives.

This module contains the Complex value type and the float primitives it is
built on. It has no I/O and no shared mutable state.
"""
