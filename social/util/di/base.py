"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Infrastructure that tests can swap for in-memory twins
Component = Literal["graph", "media"]


class ProviderBase(Provider):
    """Base for all DI providers.

    Attributes:
        __mock_component__: Swappable component a provider family serves
            (``graph`` or ``media``); None for the concrete config, domain
            and application providers
        __is_mock__: Whether this provider serves the in-memory twin
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
