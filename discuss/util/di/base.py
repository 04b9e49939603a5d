"""Provider base carrying mock/production metadata."""

from typing import ClassVar, Literal

from dishka import Provider

# Components with a swappable (mock) implementation
Component = Literal["persistence"]


class ProviderBase(Provider):
    """dishka provider tagged for implementation selection.

    A component base sets ``__mock_component__`` and has one subclass per
    implementation, told apart by ``__is_mock__``. Providers without
    subclasses are used as they are.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
