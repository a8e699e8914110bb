"""
Floating-point Factorial Calculator

Computes n! through a double-precision intermediate and narrows it to an
integer, matching programs that delegate the factorial to a floating-point
math primitive.
"""

import logging

import numpy as np

from .constants import FLOAT64_FACTORIAL_LIMIT, UINT64_MAX
from .exceptions import FactorialOverflowError
from .ifactorial_calculator import IFactorialCalculator

logger = logging.getLogger(__name__)


class FloatFactorialCalculator(IFactorialCalculator):
    """
    Implementation of IFactorialCalculator with a float64 intermediate.

    For 0..20 each partial product has an odd part below 2**53, so the float64
    product is exact and the result equals the exact strategy. The narrowing
    step refuses non-finite values and values outside the unsigned 64-bit range.
    """

    strategy = "float"

    def compute_factorial(self, n: int) -> int:
        self.validate_input(n)
        # float64 overflows to inf from 171! onward
        stop = min(n, FLOAT64_FACTORIAL_LIMIT + 1)
        with np.errstate(over="ignore"):
            value = float(np.prod(np.arange(1, stop + 1, dtype=np.float64)))
        result = self._narrow(n, value)
        logger.debug("Computed %d! = %d (float64 intermediate %r)", n, result, value)
        return result

    @staticmethod
    def _narrow(n: int, value: float) -> int:
        """Convert the float64 factorial to an unsigned 64-bit integer."""
        if not np.isfinite(value) or value > float(UINT64_MAX):
            raise FactorialOverflowError(n)
        # float(UINT64_MAX) rounds up to 2**64
        result = int(value)
        if result > UINT64_MAX:
            raise FactorialOverflowError(n)
        return result
