"""Constants for the factorial calculator."""

from data.factorial_result import UINT64_MAX

MAX_FACTORIAL_INPUT = 20
FLOAT64_FACTORIAL_LIMIT = 170

NEGATIVE_INPUT_MESSAGE = "Factorial is not defined for negative numbers."
OVERFLOW_MESSAGE = "Factorial of {n} does not fit in an unsigned 64-bit integer."
