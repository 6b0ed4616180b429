"""First-party identity service provider."""

from socialid.domain.shared.error import ProviderAuthFailure
from socialid.domain.social.model.profile import AuthProfile, IdentifiedUser
from socialid.domain.social.model.value import ProviderTag
from socialid.domain.social.port.host import HostContext
from socialid.domain.social.port.identity_gateway import IdentityGateway
from socialid.infrastructure.social.providers.base import BaseSocialProvider


class NativeIdentityProvider(BaseSocialProvider):
    """Logs in with username and password on the first-party service.

    Always available: it needs no vendor library or linked app.
    """

    def __init__(self, gateway: IdentityGateway) -> None:
        super().__init__()
        self._gateway = gateway

    @property
    def tag(self) -> ProviderTag:
        return ProviderTag.NATIVE

    async def _login(
        self,
        context: HostContext,
        auth_profile: AuthProfile | None,
        token: str | None,
    ) -> IdentifiedUser:
        if auth_profile is None:
            raise ProviderAuthFailure(
                "An auth profile is required to log in with the identity service",
                code=ProviderAuthFailure.PROVIDER_ERROR,
            )
        if auth_profile.alias is None:
            auth_profile = auth_profile.with_alias(context.device_alias)
        return await self._gateway.login(auth_profile)
