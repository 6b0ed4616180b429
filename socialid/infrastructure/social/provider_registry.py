"""Provider registry implementation."""

import logging

from socialid.domain.social.model.value import ProviderId
from socialid.domain.social.port.provider_registry import ProviderRegistry
from socialid.domain.social.port.social_provider import SocialProvider

logger = logging.getLogger(__name__)


class InMemoryProviderRegistry(ProviderRegistry):
    """In-memory provider registry.

    Stores a mapping of provider ids to their implementations.
    Providers are registered by the Builder and released on teardown.
    """

    def __init__(self, providers: dict[ProviderId, SocialProvider] | None = None) -> None:
        """Initialize registry with optional initial providers.

        Args:
            providers: Optional dict mapping provider ids to implementations
        """
        self._providers: dict[ProviderId, SocialProvider] = dict(providers or {})

    def register(self, provider_id: ProviderId, provider: SocialProvider | None) -> None:
        """Register a provider.

        Args:
            provider_id: The provider id
            provider: The provider implementation, or None to clear the slot
        """
        if self.has(provider_id):
            logger.warning(
                "Overriding the social provider registered under id %s. "
                "Make sure custom providers use a unique id.",
                provider_id,
            )
        if provider is None:
            self._providers.pop(provider_id, None)
        else:
            self._providers[provider_id] = provider

    def get(self, provider_id: ProviderId) -> SocialProvider | None:
        """Get a provider by id."""
        return self._providers.get(provider_id)

    def provider_ids(self) -> list[ProviderId]:
        """Get ids with a provider bound, in registration order."""
        return list(self._providers.keys())

    def release_all(self) -> None:
        """Release every provider, then forget them.

        A provider whose release fails is logged and the rest are still released.
        """
        try:
            for provider_id, provider in self._providers.items():
                logger.debug("Releasing provider %s", provider_id)
                try:
                    provider.release()
                except Exception:
                    logger.exception("Failed to release provider %s", provider_id)
        finally:
            self._providers.clear()
