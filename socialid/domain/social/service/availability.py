"""Availability gating for social providers."""

import logging

from socialid.domain.social.model.value import ProviderId
from socialid.domain.social.port.provider_registry import ProviderRegistry

logger = logging.getLogger(__name__)


class AvailabilityChecker:
    """Decides whether a provider can be used right now.

    A provider is available when it is registered, its client library is
    present and its linked app is available. The checks run in that order and
    stop at the first failure, so an unbound id never reaches a vendor probe.
    """

    def __init__(self, registry: ProviderRegistry) -> None:
        self._registry = registry

    def is_available(self, provider_id: ProviderId) -> bool:
        provider = self._registry.get(provider_id)
        if provider is None:
            logger.debug("Provider %s is not registered", provider_id)
            return False
        try:
            if not provider.is_library_available():
                logger.debug("Provider %s library is not available", provider_id)
                return False
            if not provider.is_linked_app_available():
                logger.debug("Provider %s linked app is not available", provider_id)
                return False
        except Exception:
            logger.exception("Availability probe failed for provider %s", provider_id)
            return False
        return True
