"""Providers supplied by the host application."""

from collections.abc import Awaitable, Callable

from socialid.domain.social.model.profile import AuthProfile, IdentifiedUser
from socialid.domain.social.port.host import HostContext
from socialid.infrastructure.social.providers.base import BaseSocialProvider

CustomLogin = Callable[
    [HostContext, AuthProfile | None, str | None], Awaitable[IdentifiedUser]
]


class CustomProvider(BaseSocialProvider):
    """Wraps a host coroutine as a provider.

    Example:
        async def login(context, profile, token):
            return IdentifiedUser(id="42", provider="corporate-sso")

        builder.with_provider(10, CustomProvider("corporate-sso", login))
    """

    def __init__(
        self,
        name: str,
        login: CustomLogin,
        library_probe: Callable[[], bool] | None = None,
        linked_app_probe: Callable[[], bool] | None = None,
    ) -> None:
        super().__init__()
        self._name = name
        self._login_fn = login
        self._library_probe = library_probe
        self._linked_app_probe = linked_app_probe

    @property
    def tag(self) -> str:
        return self._name

    def is_library_available(self) -> bool:
        return self._library_probe() if self._library_probe else True

    def is_linked_app_available(self) -> bool:
        return self._linked_app_probe() if self._linked_app_probe else True

    async def _login(
        self,
        context: HostContext,
        auth_profile: AuthProfile | None,
        token: str | None,
    ) -> IdentifiedUser:
        return await self._login_fn(context, auth_profile, token)
