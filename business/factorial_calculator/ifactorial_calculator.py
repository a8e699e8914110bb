"""
Factorial Calculator Interface

This module defines the abstract interface for computing factorials.
It provides a contract that every calculation strategy must follow.
"""

from abc import ABC, abstractmethod

from .exceptions import InvalidArgumentError


class IFactorialCalculator(ABC):
    """
    Abstract interface for factorial computation.

    This interface defines the contract for classes that compute the factorial
    of a non-negative integer as an unsigned 64-bit value. Input validation is
    shared by all implementations through ``validate_input``.
    """

    #: Name used to select the implementation from configuration.
    strategy: str = ""

    @abstractmethod
    def compute_factorial(self, n: int) -> int:
        """
        Compute the factorial of a non-negative integer.

        Args:
            n (int): A non-negative integer (>= 0) for which to compute the factorial.

        Returns:
            int: The factorial of n (n!), between 1 and 2**64 - 1.

        Raises:
            InvalidArgumentError: If n is negative.
            FactorialOverflowError: If n! does not fit in 64 unsigned bits.
            TypeError: If n is not an integer.
        """
        pass

    @staticmethod
    def validate_input(n: int) -> None:
        """
        Check the preconditions shared by every strategy.

        Raises:
            TypeError: If n is not an integer (booleans are rejected too).
            InvalidArgumentError: If n is negative.
        """
        if isinstance(n, bool) or not isinstance(n, int):
            raise TypeError(f"Expected an integer, got {type(n).__name__}")
        if n < 0:
            raise InvalidArgumentError()
