"""Asyncio-backed host collaborators."""

import asyncio
import logging
import uuid
from collections.abc import Coroutine
from typing import Any, TypeVar

from socialid.domain.shared.error import ConfigurationError
from socialid.domain.social.port.host import HostContext, LifecycleHook, RecoverListener

logger = logging.getLogger(__name__)

T = TypeVar("T")


class AsyncioHostContext(HostContext):
    """Host context that schedules attempts as tasks on an event loop.

    Without an explicit loop, tasks go to the loop running at spawn time.
    Spawned tasks are kept referenced until they finish.
    """

    def __init__(
        self,
        device_alias: str | None = None,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        self._device_alias = device_alias or f"device-{uuid.uuid4().hex[:12]}"
        self._loop = loop
        self._tasks: set[asyncio.Task[Any]] = set()

    @property
    def device_alias(self) -> str:
        return self._device_alias

    @property
    def pending(self) -> int:
        return len(self._tasks)

    def spawn(self, coro: Coroutine[Any, Any, T]) -> asyncio.Task[T]:
        """Schedule a coroutine on the host loop.

        Raises:
            ConfigurationError: If no loop was given and none is running
        """
        try:
            loop = self._loop or asyncio.get_running_loop()
        except RuntimeError as e:
            coro.close()
            raise ConfigurationError(
                "No running event loop to schedule the login on. "
                "Call from async code or pass a loop to AsyncioHostContext."
            ) from e
        task = loop.create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def drain(self) -> None:
        """Wait for every spawned task, including ones spawned meanwhile."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)


class InProcessLifecycleHook(LifecycleHook):
    """Lifecycle hook the host fires by calling ``fire()``."""

    def __init__(self) -> None:
        self._listeners: list[RecoverListener] = []

    def on_recover(self, listener: RecoverListener) -> None:
        self._listeners.append(listener)

    def fire(self) -> None:
        """Notify listeners; a failing listener never reaches the caller."""
        for listener in self._listeners:
            try:
                listener()
            except Exception:
                logger.exception("Recovery listener %r failed", listener)
