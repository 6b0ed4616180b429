"""Marker base for domain ports."""

from typing import Protocol


class Port(Protocol):
    """Boundary implemented by an infrastructure adapter."""
