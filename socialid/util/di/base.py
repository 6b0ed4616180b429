"""Base class for socialid DI providers."""

from dishka import Provider as DishkaProvider
from dishka import Scope


class Provider(DishkaProvider):
    """DI provider whose factories default to application scope.

    Everything socialid provides lives as long as the orchestrator: the
    registry is built once and released on container close.
    """

    scope = Scope.APP
