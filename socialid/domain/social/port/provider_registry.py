"""Provider registry port for the social domain."""

from abc import abstractmethod
from typing import Protocol

from socialid.domain.shared.port import Port
from socialid.domain.social.model.value import ProviderId
from socialid.domain.social.port.social_provider import SocialProvider


class ProviderRegistry(Port, Protocol):
    """Owns the SocialProvider bound to each provider id.

    At most one provider is bound per id. The registry is mutated while
    building and on teardown only.
    """

    @abstractmethod
    def register(self, provider_id: ProviderId, provider: SocialProvider | None) -> None:
        """Bind a provider, replacing any previous binding.

        Args:
            provider_id: The id to bind under
            provider: The provider, or None to clear the slot
        """
        ...

    @abstractmethod
    def get(self, provider_id: ProviderId) -> SocialProvider | None:
        """Get the provider bound under an id, None if absent."""
        ...

    @abstractmethod
    def provider_ids(self) -> list[ProviderId]:
        """Get the ids that currently have a provider bound."""
        ...

    @abstractmethod
    def release_all(self) -> None:
        """Release every bound provider, then clear all bindings."""
        ...

    def has(self, provider_id: ProviderId) -> bool:
        """Check whether a provider is bound under an id."""
        return self.get(provider_id) is not None
