from .constants import NEGATIVE_INPUT_MESSAGE, OVERFLOW_MESSAGE


class InvalidArgumentError(ValueError):
    """Raised when the factorial is requested for a negative number."""

    def __init__(self, message: str = NEGATIVE_INPUT_MESSAGE):
        super().__init__(message)


class FactorialOverflowError(OverflowError):
    """Raised when n! does not fit in an unsigned 64-bit integer."""

    def __init__(self, n: int):
        self.n = n
        super().__init__(OVERFLOW_MESSAGE.format(n=n))
