from enum import Enum

from pydantic import BaseModel, Field

UINT64_MAX = 2 ** 64 - 1


class FactorialStrategy(str, Enum):
    """Available factorial calculation strategies."""
    EXACT = "exact"
    FLOAT = "float"


class FactorialResult(BaseModel):
    """
    Data model representing a successful factorial computation.

    Attributes:
        n (int): The non-negative input.
        result (int): n! as an unsigned 64-bit value.
        strategy (FactorialStrategy): The strategy that produced the result.
    """
    n: int = Field(..., ge=0, description="Input of the factorial")
    result: int = Field(..., ge=1, le=UINT64_MAX, description="n! in the unsigned 64-bit range")
    strategy: FactorialStrategy = Field(FactorialStrategy.EXACT, description="Calculation strategy")

    def describe(self) -> str:
        """Return the console line for this result."""
        return f"Factorial of {self.n} is {self.result}"
