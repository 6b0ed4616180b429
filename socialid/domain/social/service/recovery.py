"""Silent re-authentication from a persisted account."""

import logging

from socialid.domain.social.model.account import AccountRecord
from socialid.domain.social.model.value import ProviderTag, RecoveryPolicy
from socialid.domain.social.port.account_store import AccountStore
from socialid.domain.social.port.host import HostContext
from socialid.domain.social.port.provider_registry import ProviderRegistry
from socialid.domain.social.port.social_provider import SocialProvider
from socialid.domain.social.service.availability import AvailabilityChecker

logger = logging.getLogger(__name__)


class CredentialRecoveryManager:
    """Logs the stored account back in when the host asks for it.

    Recovery is fire-and-forget: providers are called without a callback and
    nothing raised while recovering reaches the lifecycle hook.
    """

    def __init__(
        self,
        registry: ProviderRegistry,
        host: HostContext,
        policy: RecoveryPolicy = RecoveryPolicy.NEVER,
        store: AccountStore | None = None,
    ) -> None:
        self._registry = registry
        self._availability = AvailabilityChecker(registry)
        self._host = host
        self._policy = policy
        self._store = store

    @property
    def policy(self) -> RecoveryPolicy:
        return self._policy

    def recover(self) -> None:
        if self._policy is not RecoveryPolicy.ALWAYS or self._store is None:
            return
        try:
            self._recover(self._store)
        except Exception:
            logger.exception("Account recovery failed")

    def _recover(self, store: AccountStore) -> None:
        record = store.recover_account()
        if record is None:
            logger.debug("No stored account to recover")
            return

        tag = ProviderTag.parse(store.get_token_provider(record))
        if tag is None:
            logger.debug("Stored account %s has an unknown provider tag", record.name)
            return

        provider_id = tag.provider_id
        if not self._availability.is_available(provider_id):
            logger.warning("Cannot recover %s account: provider %s is not available", tag, provider_id)
            return
        provider = self._registry.get(provider_id)
        assert provider is not None

        if not self._attach_credential(store, record, tag, provider):
            return
        logger.info("Recovering %s account %s", tag, record.name)
        provider.authenticate(self._host, None)

    def _attach_credential(
        self,
        store: AccountStore,
        record: AccountRecord,
        tag: ProviderTag,
        provider: SocialProvider,
    ) -> bool:
        if tag is ProviderTag.NATIVE:
            profile = store.get_auth_profile(record, self._host.device_alias)
            if profile is None:
                logger.warning("Stored account %s has no native credentials", record.name)
                return False
            provider.set_auth_profile(profile)
            return True

        token = store.get_auth_token(record, tag.value)
        if token is None:
            logger.warning("Stored account %s has no %s token", record.name, tag)
            return False
        provider.set_social_token(token)
        return True
