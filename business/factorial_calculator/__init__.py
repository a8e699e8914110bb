"""
Factorial Calculator Module

This module provides functionality for calculating factorials of non-negative integers.
It includes an interface, an exact iterative implementation and a float64-based
implementation, together with the errors they raise.
"""

from .constants import MAX_FACTORIAL_INPUT, UINT64_MAX
from .exceptions import InvalidArgumentError, FactorialOverflowError
from .ifactorial_calculator import IFactorialCalculator
from .factorial_calculator import FactorialCalculator
from .float_factorial_calculator import FloatFactorialCalculator

__all__ = [
    "IFactorialCalculator",
    "FactorialCalculator",
    "FloatFactorialCalculator",
    "InvalidArgumentError",
    "FactorialOverflowError",
    "MAX_FACTORIAL_INPUT",
    "UINT64_MAX",
]
