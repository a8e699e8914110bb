from abc import ABC, abstractmethod


class IGreetingFormatter(ABC):
    """Interface for components that turn a name into a greeting."""

    @abstractmethod
    def format_greeting(self, name: str) -> str:
        """Returns a greeting containing the given name.

        Any string is accepted, including an empty one.
        """
        ...
