# business/greeting_formatter/__init__.py

"""Module greeting_formatter for producing user-facing greetings.

This module provides access to the main components of the package,
including the GreetingFormatter service, IGreetingFormatter interface, and GreetingTemplate.
"""

from .greeting_formatter import GreetingFormatter
from .interfaces import IGreetingFormatter
from .models import GreetingTemplate, DEFAULT_GREETING_TEMPLATE

__all__ = [
    "GreetingFormatter",
    "IGreetingFormatter",
    "GreetingTemplate",
    "DEFAULT_GREETING_TEMPLATE",
]
