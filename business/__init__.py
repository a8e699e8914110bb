"""
Business package for the factorial greeter.

This package contains the domain services of the program: the greeting
formatter and the factorial calculator strategies.
"""

from .factorial_calculator import (
    IFactorialCalculator,
    FactorialCalculator,
    FloatFactorialCalculator,
    InvalidArgumentError,
    FactorialOverflowError,
)
from .greeting_formatter import GreetingFormatter, IGreetingFormatter, GreetingTemplate

__all__ = [
    "IFactorialCalculator",
    "FactorialCalculator",
    "FloatFactorialCalculator",
    "InvalidArgumentError",
    "FactorialOverflowError",
    "GreetingFormatter",
    "IGreetingFormatter",
    "GreetingTemplate",
]
