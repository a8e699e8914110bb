"""
Factorial Calculator Implementation

This module contains the exact implementation of the factorial calculator,
which computes the factorial of a non-negative integer by integer accumulation.
"""

import logging

from .constants import MAX_FACTORIAL_INPUT
from .exceptions import FactorialOverflowError
from .ifactorial_calculator import IFactorialCalculator

logger = logging.getLogger(__name__)


class FactorialCalculator(IFactorialCalculator):
    """
    Exact implementation of IFactorialCalculator using an iterative method.

    Every intermediate product is a Python integer, so the result is exact for
    the whole accepted range (0..20). Inputs whose factorial would not fit in
    an unsigned 64-bit integer are rejected before the loop runs.
    """

    strategy = "exact"

    def compute_factorial(self, n: int) -> int:
        """
        Compute the factorial of a non-negative integer.

        Args:
            n (int): A non-negative integer for which to compute the factorial.
                     Must be between 0 and 20 inclusive.

        Returns:
            int: The factorial of n (n!).

        Raises:
            InvalidArgumentError: If n is negative.
            FactorialOverflowError: If n is greater than 20.
            TypeError: If n is not an integer.

        Examples:
            >>> calculator = FactorialCalculator()
            >>> calculator.compute_factorial(0)
            1
            >>> calculator.compute_factorial(5)
            120
        """
        self.validate_input(n)
        if n > MAX_FACTORIAL_INPUT:
            raise FactorialOverflowError(n)
        result = 1
        for i in range(2, n + 1):
            result *= i
        logger.debug("Computed %d! = %d (exact)", n, result)
        return result
