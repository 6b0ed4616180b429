"""Authentication orchestrator: the login and registration entry point."""

import asyncio
import logging
from collections.abc import Generator
from typing import Any

from socialid.domain.shared.error import InvalidArgumentError, ProviderNotAvailableError
from socialid.domain.social.model.profile import AuthProfile, IdentifiedUser, UserProfile
from socialid.domain.social.model.result import Callback
from socialid.domain.social.model.value import ProviderId, RecoveryPolicy
from socialid.domain.social.port.host import HostContext
from socialid.domain.social.port.identity_gateway import IdentityGateway
from socialid.domain.social.port.provider_registry import ProviderRegistry
from socialid.domain.social.service.availability import AvailabilityChecker
from socialid.domain.social.service.recovery import CredentialRecoveryManager

logger = logging.getLogger(__name__)


class PendingRegistration:
    """Handle for a registration that has not been sent yet.

    Call ``execute()`` to schedule it on the host context, or await the
    handle directly. The request is sent at most once.
    """

    def __init__(
        self,
        host: HostContext,
        gateway: IdentityGateway,
        auth_profile: AuthProfile,
        user_profile: UserProfile,
        description: str = "Sign in with the identity service",
    ) -> None:
        self._host = host
        self._gateway = gateway
        self.auth_profile = auth_profile
        self.user_profile = user_profile
        self.description = description
        self._task: asyncio.Task[UserProfile] | None = None

    @property
    def started(self) -> bool:
        return self._task is not None

    def execute(self) -> asyncio.Task[UserProfile]:
        if self._task is None:
            logger.info("%s: registering %s", self.description, self.auth_profile.identifier)
            self._task = self._host.spawn(
                self._gateway.register(self.auth_profile, self.user_profile)
            )
        return self._task

    def __await__(self) -> Generator[Any, None, UserProfile]:
        return self.execute().__await__()


class AuthenticationOrchestrator:
    """Entry point for logins and registrations across providers.

    - login_with_identity: log in attaching a caller-supplied credential
    - login_with_provider: log in with whatever the provider already holds
    - register: create an account on the first-party identity service
    - recover_account: silent login from the persisted account (lifecycle hook)

    Preconditions are checked synchronously; once they hold, the provider
    takes over and reports through the callback. An in-flight callback may
    still arrive after ``release()``.
    """

    def __init__(
        self,
        registry: ProviderRegistry,
        host: HostContext,
        gateway: IdentityGateway,
        recovery: CredentialRecoveryManager | None = None,
        recovery_policy: RecoveryPolicy = RecoveryPolicy.NEVER,
        account_type: str | None = None,
    ) -> None:
        self._registry = registry
        self._availability = AvailabilityChecker(registry)
        self._host = host
        self._gateway = gateway
        self._recovery = recovery
        self._recovery_policy = recovery_policy
        self._account_type = account_type

    @property
    def registry(self) -> ProviderRegistry:
        return self._registry

    @property
    def recovery_policy(self) -> RecoveryPolicy:
        return self._recovery_policy

    @property
    def account_type(self) -> str | None:
        return self._account_type

    def login_with_identity(
        self,
        provider_id: ProviderId,
        auth_profile: AuthProfile | None,
        callback: Callback[IdentifiedUser],
    ) -> None:
        """Log in with a provider, attaching ``auth_profile`` first when given.

        Raises:
            InvalidArgumentError: If callback is None
            ProviderNotAvailableError: If the provider cannot be used
        """
        self._login(provider_id, auth_profile, callback)

    def login_with_provider(
        self,
        provider_id: ProviderId,
        callback: Callback[IdentifiedUser],
    ) -> None:
        """Log in with the credential the provider already holds.

        Raises:
            InvalidArgumentError: If callback is None
            ProviderNotAvailableError: If the provider cannot be used
        """
        self._login(provider_id, None, callback)

    def register(self, auth_profile: AuthProfile, user_profile: UserProfile) -> PendingRegistration:
        """Prepare a registration on the first-party identity service.

        The auth profile is copied and stamped with the device alias; nothing
        is sent until the returned handle is executed or awaited.
        """
        if auth_profile is None:
            raise InvalidArgumentError("auth_profile must not be None", argument="auth_profile")
        if user_profile is None:
            raise InvalidArgumentError("user_profile must not be None", argument="user_profile")
        stamped = auth_profile.with_alias(self._host.device_alias)
        return PendingRegistration(self._host, self._gateway, stamped, user_profile)

    def is_available(self, provider_id: ProviderId) -> bool:
        """Check if a provider is registered, has its library and its linked app."""
        return self._availability.is_available(provider_id)

    def recover_account(self) -> None:
        """Lifecycle hook entry point: silently log in from the stored account."""
        if self._recovery is None:
            logger.debug("Account recovery is not configured")
            return
        self._recovery.recover()

    def release(self) -> None:
        """Release every registered provider."""
        self._registry.release_all()

    def _login(
        self,
        provider_id: ProviderId,
        auth_profile: AuthProfile | None,
        callback: Callback[IdentifiedUser] | None,
    ) -> None:
        if callback is None:
            raise InvalidArgumentError("callback must not be None", argument="callback")
        if not self._availability.is_available(provider_id):
            raise ProviderNotAvailableError(provider_id)

        provider = self._registry.get(provider_id)
        assert provider is not None
        if auth_profile is not None:
            provider.set_auth_profile(auth_profile)
        logger.info("Delegating login to provider %s", provider_id)
        provider.authenticate(self._host, callback)
