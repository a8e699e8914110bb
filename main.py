#!/usr/bin/env python3
"""
Factorial greeter.

Prints a greeting, asks for a non-negative integer on standard input and
prints its factorial.

Usage
-----
    echo 5 | python main.py                    # exact computation
    echo 5 | python main.py --strategy float   # float64 intermediate
"""

import argparse
import sys
from typing import List, Optional, TextIO

from pydantic import ValidationError

from business.factorial_calculator import InvalidArgumentError, FactorialOverflowError
from config import AppConfig
from container import build_container
from data.factorial_result import FactorialResult, FactorialStrategy
from logging_config import setup_logging

SERVICE_NAME = "factorial_greeter"
PROMPT = "Enter a non-negative integer to compute its factorial: "

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_CONFIG_ERROR = 2


class InputError(ValueError):
    """Raised when standard input does not hold an integer."""


def read_integer(stdin: TextIO) -> int:
    """Read one line from ``stdin`` and parse it as a base-10 integer.

    Raises:
        InputError: On end of input or when the line is not an integer.
    """
    try:
        line = stdin.readline()
    except UnicodeDecodeError:
        raise InputError("Invalid input: expected an integer.")
    text = line.strip()
    if not text:
        raise InputError("No input provided.")
    # Plain ASCII decimal digits only: int() would also take "1_000" and non-ASCII digits
    digits = text.lstrip("+-")
    if not (digits.isascii() and digits.isdigit()):
        raise InputError(f"Invalid input '{text}': expected an integer.")
    try:
        return int(text, 10)
    except ValueError:
        raise InputError(f"Invalid input '{text}': expected an integer.")


def run(config: AppConfig, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None) -> int:
    """Greet, read an integer and print its factorial.

    Streams default to the process standard streams.

    Returns:
        int: EXIT_OK on success, EXIT_FAILURE when the input is rejected.
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    logger = setup_logging(
        SERVICE_NAME,
        log_dir=config.log_dir,
        level=config.log_level_value,
        console=config.log_to_console,
    )
    container = build_container(config)
    formatter = container.greeting_formatter()
    calculator = container.factorial_calculator()

    print(formatter.format_greeting(config.name), file=stdout)
    print(PROMPT, end="", file=stdout)
    stdout.flush()

    try:
        n = read_integer(stdin)
        result = FactorialResult(
            n=n,
            result=calculator.compute_factorial(n),
            strategy=FactorialStrategy(calculator.strategy),
        )
    except (InputError, InvalidArgumentError, FactorialOverflowError) as e:
        logger.warning("Factorial request rejected: %s", e)
        print(f"Error: {e}", file=stderr)
        return EXIT_FAILURE
    except Exception:
        logger.exception("Unexpected error while computing the factorial")
        raise

    logger.info("Computed factorial of %d with %s strategy", result.n, result.strategy.value)
    print(result.describe(), file=stdout)
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Greet the user and compute n! for a non-negative integer n.")
    parser.add_argument("--name", help="Name used in the greeting (default: $GREETER_NAME or Bob)")
    parser.add_argument(
        "--strategy",
        choices=[s.value for s in FactorialStrategy],
        help="Factorial strategy (default: $FACTORIAL_STRATEGY or exact)",
    )
    parser.add_argument("--log-level", help="Logging level (default: $LOG_LEVEL or INFO)")
    args = parser.parse_args(argv)

    try:
        config = AppConfig.from_env(name=args.name, strategy=args.strategy, log_level=args.log_level)
    except ValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    return run(config)


if __name__ == "__main__":  # pragma: no cover - exercised via CLI
    sys.exit(main())
