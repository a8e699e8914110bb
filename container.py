from dependency_injector import containers, providers

from business.factorial_calculator import FactorialCalculator, FloatFactorialCalculator
from business.greeting_formatter import GreetingFormatter
from config import AppConfig


class Container(containers.DeclarativeContainer):
    """DI Container for managing dependencies."""

    config = providers.Configuration()

    greeting_formatter = providers.Singleton(GreetingFormatter)

    factorial_calculator = providers.Selector(
        config.factorial_strategy,
        exact=providers.Singleton(FactorialCalculator),
        float=providers.Singleton(FloatFactorialCalculator),
    )


def build_container(app_config: AppConfig) -> Container:
    """Create a container configured from ``app_config``."""
    container = Container()
    container.config.from_dict(app_config.model_dump(mode="json"))
    return container
