"""Single-shot result delivery."""

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from socialid.domain.shared.error import SocialIdError

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class AuthResult(Generic[T]):
    """Outcome of an asynchronous attempt: either ``data`` or ``error``."""

    data: T | None = None
    error: SocialIdError | None = None

    @classmethod
    def success(cls, data: T) -> "AuthResult[T]":
        return cls(data=data)

    @classmethod
    def failure(cls, error: SocialIdError) -> "AuthResult[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the data or raise the carried error."""
        if self.error is not None:
            raise self.error
        assert self.data is not None
        return self.data


Callback = Callable[[AuthResult[T]], None]


class SingleShot(Generic[T]):
    """Callback guard that forwards the first delivery and drops the rest."""

    def __init__(self, callback: Callback[T]) -> None:
        self._callback = callback
        self._lock = threading.Lock()
        self._delivered = False

    @property
    def delivered(self) -> bool:
        return self._delivered

    def __call__(self, result: AuthResult[T]) -> None:
        with self._lock:
            if self._delivered:
                logger.warning(
                    "Dropping duplicate result delivery (ok=%s, code=%s)",
                    result.ok,
                    result.error.code if result.error is not None else None,
                )
                return
            self._delivered = True
        self._callback(result)
