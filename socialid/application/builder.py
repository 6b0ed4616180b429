"""Assembles an AuthenticationOrchestrator."""

import logging
from collections.abc import Callable

from socialid.config import Config
from socialid.domain.social.model.value import BuiltinProvider, ProviderId, RecoveryPolicy
from socialid.domain.social.port.account_store import AccountStore
from socialid.domain.social.port.host import HostContext, LifecycleHook
from socialid.domain.social.port.identity_gateway import IdentityGateway
from socialid.domain.social.port.provider_registry import ProviderRegistry
from socialid.domain.social.port.social_provider import SocialProvider
from socialid.domain.social.service.orchestrator import AuthenticationOrchestrator
from socialid.domain.social.service.recovery import CredentialRecoveryManager
from socialid.infrastructure.local.paths import SocialIdPaths
from socialid.infrastructure.social.account_store import JsonFileAccountStore
from socialid.infrastructure.social.provider_registry import InMemoryProviderRegistry
from socialid.infrastructure.social.providers import (
    FacebookProvider,
    GoogleProvider,
    NativeIdentityProvider,
)
from socialid.infrastructure.social.providers.vendor import Handshake, LinkedAppProbe

logger = logging.getLogger(__name__)

AccountStoreFactory = Callable[[str], AccountStore]


class Builder:
    """Configures providers and recovery, then builds the orchestrator.

    Example:
        orchestrator = (
            Builder(host, gateway, lifecycle)
            .with_native()
            .with_facebook()
            .store_credentials("com.example.accounts")
            .recovery_policy(RecoveryPolicy.ALWAYS)
            .build()
        )
    """

    def __init__(
        self,
        host: HostContext,
        gateway: IdentityGateway,
        lifecycle: LifecycleHook | None = None,
        account_store_factory: AccountStoreFactory | None = None,
        registry: ProviderRegistry | None = None,
    ) -> None:
        self._host = host
        self._gateway = gateway
        self._lifecycle = lifecycle
        self._account_store_factory = account_store_factory or JsonFileAccountStore
        self._registry = registry if registry is not None else InMemoryProviderRegistry()
        self._recovery_policy = RecoveryPolicy.NEVER
        self._account_type: str | None = None
        self._built: AuthenticationOrchestrator | None = None

    @classmethod
    def from_config(
        cls,
        config: Config,
        host: HostContext,
        gateway: IdentityGateway,
        lifecycle: LifecycleHook | None = None,
    ) -> "Builder":
        """Create a builder with the providers and recovery named in config."""
        paths = SocialIdPaths(config.recovery.base_dir)
        builder = cls(
            host,
            gateway,
            lifecycle,
            account_store_factory=lambda account_type: JsonFileAccountStore(account_type, paths),
        )
        if config.providers.native:
            builder.with_native()
        if config.providers.google.enabled:
            builder.with_google(config.providers.google.client_id)
        if config.providers.facebook.enabled:
            builder.with_facebook()
        return builder.store_credentials(config.recovery.account_type).recovery_policy(
            config.recovery.policy
        )

    def with_native(self) -> "Builder":
        """Add the first-party identity service provider."""
        return self.with_provider(BuiltinProvider.NATIVE, NativeIdentityProvider(self._gateway))

    def with_google(
        self,
        client_id: str,
        handshake: Handshake | None = None,
        linked_app_probe: LinkedAppProbe | None = None,
    ) -> "Builder":
        """Add Google sign-in.

        Raises:
            ConfigurationError: If client_id is empty
        """
        provider = GoogleProvider(self._gateway, client_id, handshake, linked_app_probe)
        return self.with_provider(BuiltinProvider.GOOGLE, provider)

    def with_facebook(
        self,
        handshake: Handshake | None = None,
        linked_app_probe: LinkedAppProbe | None = None,
    ) -> "Builder":
        """Add Facebook login."""
        provider = FacebookProvider(self._gateway, handshake, linked_app_probe)
        return self.with_provider(BuiltinProvider.FACEBOOK, provider)

    def with_provider(self, provider_id: ProviderId, provider: SocialProvider | None) -> "Builder":
        """Register a provider under an id, overwriting any earlier one.

        Ignored with a warning once the orchestrator has been built.
        """
        if self._built is not None:
            logger.warning(
                "Ignoring provider %s: the orchestrator is already built",
                provider_id,
            )
            return self
        self._registry.register(provider_id, provider)
        return self

    def store_credentials(self, account_type: str | None) -> "Builder":
        """Set the namespace of the persisted account; None disables it."""
        self._account_type = account_type
        return self

    def recovery_policy(self, policy: RecoveryPolicy | str | int) -> "Builder":
        """Set whether the persisted account is logged in on recovery."""
        self._recovery_policy = RecoveryPolicy.parse(policy)
        return self

    def build(self) -> AuthenticationOrchestrator:
        """Build the orchestrator and register it with the lifecycle hook.

        Building twice returns the same orchestrator.
        """
        if self._built is not None:
            return self._built

        store: AccountStore | None = None
        if self._recovery_policy is RecoveryPolicy.ALWAYS:
            if self._account_type:
                store = self._account_store_factory(self._account_type)
            else:
                logger.warning("Recovery policy is ALWAYS but no account type was set")

        recovery = CredentialRecoveryManager(
            self._registry,
            self._host,
            policy=self._recovery_policy,
            store=store,
        )
        orchestrator = AuthenticationOrchestrator(
            self._registry,
            self._host,
            self._gateway,
            recovery=recovery,
            recovery_policy=self._recovery_policy,
            account_type=self._account_type if store is not None else None,
        )
        if self._lifecycle is not None:
            self._lifecycle.on_recover(orchestrator.recover_account)
        logger.info(
            "Social authentication ready: providers=%s, recovery=%s",
            self._registry.provider_ids(),
            self._recovery_policy.name,
        )
        self._built = orchestrator
        return orchestrator
