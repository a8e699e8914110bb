"""
Data package initialization.

This package contains data models used throughout the application,
such as the result of a factorial computation.
"""

from .factorial_result import FactorialResult, FactorialStrategy

__all__ = [
    "FactorialResult",
    "FactorialStrategy",
]
