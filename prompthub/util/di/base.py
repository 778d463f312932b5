"""Provider base class."""

from typing import ClassVar, Literal

from dishka import Provider

# Infrastructure that tests replace with in-process fakes
Component = Literal["persistence", "storage"]


class ProviderBase(Provider):
    """Dishka provider tagged for component selection.

    ``__mock_component__`` names the swappable component a provider family
    implements, ``__is_mock__`` marks the test variant.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
