"""Third-party social network providers."""

import importlib.util
import logging
from collections.abc import Awaitable, Callable

from socialid.domain.shared.error import ConfigurationError, ProviderAuthFailure
from socialid.domain.social.model.profile import AuthProfile, IdentifiedUser
from socialid.domain.social.model.value import ProviderTag
from socialid.domain.social.port.host import HostContext
from socialid.domain.social.port.identity_gateway import IdentityGateway
from socialid.infrastructure.social.providers.base import BaseSocialProvider

logger = logging.getLogger(__name__)

Handshake = Callable[[HostContext], Awaitable[str]]
"""Vendor sign-in flow returning a bearer token."""

LinkedAppProbe = Callable[[], bool]


def module_available(name: str) -> bool:
    """Check whether a module can be imported without importing it."""
    try:
        return importlib.util.find_spec(name) is not None
    except (ImportError, ValueError):
        return False


class VendorSocialProvider(BaseSocialProvider):
    """Exchanges a vendor bearer token for a first-party identity.

    The token comes from ``set_social_token`` (recovery, or a handshake the
    host ran itself) or else from the injected ``handshake``. A token
    obtained through the handshake is kept for later logins.
    """

    library: str = ""

    def __init__(
        self,
        gateway: IdentityGateway,
        handshake: Handshake | None = None,
        linked_app_probe: LinkedAppProbe | None = None,
    ) -> None:
        super().__init__()
        self._gateway = gateway
        self._handshake = handshake
        self._linked_app_probe = linked_app_probe

    def is_library_available(self) -> bool:
        return module_available(self.library)

    def is_linked_app_available(self) -> bool:
        if self._linked_app_probe is None:
            return True
        return self._linked_app_probe()

    async def _login(
        self,
        context: HostContext,
        auth_profile: AuthProfile | None,
        token: str | None,
    ) -> IdentifiedUser:
        if token is None:
            if self._handshake is None:
                raise ProviderAuthFailure(
                    f"No {self.tag} token available and no sign-in flow configured",
                    code=ProviderAuthFailure.PROVIDER_ERROR,
                )
            logger.debug("Running %s sign-in flow", self.tag)
            token = await self._handshake(context)
            self._social_token = token
        return await self._gateway.login_with_token(
            ProviderTag(self.tag), token, context.device_alias
        )


class GoogleProvider(VendorSocialProvider):
    """Google sign-in, backed by the google-auth client library."""

    library = "google.oauth2"

    def __init__(
        self,
        gateway: IdentityGateway,
        client_id: str,
        handshake: Handshake | None = None,
        linked_app_probe: LinkedAppProbe | None = None,
    ) -> None:
        if not client_id:
            raise ConfigurationError(
                "A Google OAuth2 web client id is required. "
                "Set SOCIALID_PROVIDERS__GOOGLE__CLIENT_ID or providers.google.client_id."
            )
        super().__init__(gateway, handshake, linked_app_probe)
        self.client_id = client_id

    @property
    def tag(self) -> ProviderTag:
        return ProviderTag.GOOGLE


class FacebookProvider(VendorSocialProvider):
    """Facebook login, backed by the facebook-sdk client library."""

    library = "facebook"

    @property
    def tag(self) -> ProviderTag:
        return ProviderTag.FACEBOOK
