"""
Application configuration.

Settings are read from environment variables and validated with pydantic.
Every value has a default, so the program runs unconfigured.
"""

import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from data.factorial_result import FactorialStrategy

FALSE_VALUES = {"0", "false", "no", "off"}


def env_value(name: str, default: str) -> str:
    """Return a stripped environment variable, or ``default`` when it is unset or blank."""
    value = (os.getenv(name) or "").strip()
    return value or default


def env_enabled(name: str, default: bool = False) -> bool:
    """Interpret an environment variable as a boolean flag."""
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() not in FALSE_VALUES


class AppConfig(BaseModel):
    """
    Configuration of the factorial greeter.

    Attributes:
        name (str): Name used in the greeting.
        factorial_strategy (FactorialStrategy): Which calculator computes the factorial.
        log_level (str): Name of a standard logging level.
        log_dir (Path): Directory for log files.
        log_to_console (bool): Also emit log records on stderr.
    """
    name: str = Field("Bob", description="Name used in the greeting")
    factorial_strategy: FactorialStrategy = Field(FactorialStrategy.EXACT, description="Factorial strategy")
    log_level: str = Field("INFO", description="Logging level name")
    log_dir: Path = Field(Path("logs"), description="Directory for log files")
    log_to_console: bool = Field(False, description="Mirror log records to stderr")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)

    @classmethod
    def from_env(cls, name: Optional[str] = None, strategy: Optional[str] = None,
                 log_level: Optional[str] = None) -> "AppConfig":
        """
        Build the configuration from the environment.

        Explicit arguments take precedence over the environment variables
        GREETER_NAME, FACTORIAL_STRATEGY, LOG_LEVEL, LOG_DIR and LOG_TO_CONSOLE.

        Raises:
            pydantic.ValidationError: If a value is invalid.
        """
        return cls(
            name=name if name is not None else os.getenv("GREETER_NAME", "Bob"),
            factorial_strategy=(strategy or env_value("FACTORIAL_STRATEGY", FactorialStrategy.EXACT.value)).lower(),
            log_level=log_level or env_value("LOG_LEVEL", "INFO"),
            log_dir=Path(env_value("LOG_DIR", "logs")),
            log_to_console=env_enabled("LOG_TO_CONSOLE"),
        )
