"""Persisted account record."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class AccountRecord:
    """An account saved by the host after a previous login.

    The core only reads records. ``provider`` is kept as the raw stored tag so
    that tags written by newer versions survive a round trip.
    """

    name: str
    provider: str
    password: str | None = None
    tokens: dict[str, str] = field(default_factory=dict)
