import logging
from typing import Optional

from .interfaces import IGreetingFormatter
from .models import GreetingTemplate

logger = logging.getLogger(__name__)


class GreetingFormatter(IGreetingFormatter):
    """Service class that implements IGreetingFormatter.

    The name is interpolated into a GreetingTemplate. Nothing is stored between
    calls, so the same name always yields the same greeting.
    """

    def __init__(self, template: Optional[GreetingTemplate] = None):
        """Create a formatter using the given template, or the default one."""
        self._template = template or GreetingTemplate()

    @property
    def template(self) -> GreetingTemplate:
        return self._template

    def format_greeting(self, name: str) -> str:
        """Return the greeting for ``name``.

        Args:
            name (str): The name to greet. Braces in it are copied literally.

        Returns:
            str: For example ``"Hello, Bob! Welcome to our program."``.
        """
        greeting = self._template.render(name)
        logger.debug("Formatted greeting for %r", name)
        return greeting
