"""Provider metadata shared by production and test providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Provider families that tests may swap for in-memory fakes
Component = Literal["persistence", "storage"]


class ProviderBase(Provider):
    """Dishka provider tagged with the component it implements.

    Attributes:
        __mock_component__: Swappable family this provider belongs to, or
            None for providers that are always real (config, domain, use cases)
        __is_mock__: True for the in-memory variant of a family
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
