"""Host collaborators: execution context and lifecycle hook."""

import asyncio
from abc import abstractmethod
from collections.abc import Callable, Coroutine
from typing import Any, Protocol, TypeVar

from socialid.domain.shared.port import Port

T = TypeVar("T")

RecoverListener = Callable[[], None]


class HostContext(Port, Protocol):
    """Execution context the host hands to every authentication."""

    @property
    @abstractmethod
    def device_alias(self) -> str:
        """Alias identifying this device to the first-party service."""
        ...

    @abstractmethod
    def spawn(self, coro: Coroutine[Any, Any, T]) -> asyncio.Task[T]:
        """Run a coroutine off the caller's stack and return its task."""
        ...


class LifecycleHook(Port, Protocol):
    """Registration point for the host's "attempt recovery now" event."""

    @abstractmethod
    def on_recover(self, listener: RecoverListener) -> None:
        """Register a listener called when the host wants a recovery attempt."""
        ...
