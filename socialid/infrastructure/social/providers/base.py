"""Shared behaviour of the social provider adapters."""

import logging
from abc import abstractmethod

from socialid.domain.shared.error import ProviderAuthFailure, SocialIdError
from socialid.domain.social.model.profile import AuthProfile, IdentifiedUser
from socialid.domain.social.model.result import AuthResult, Callback, SingleShot
from socialid.domain.social.model.value import ProviderTag
from socialid.domain.social.port.host import HostContext
from socialid.domain.social.port.social_provider import SocialProvider

logger = logging.getLogger(__name__)


class BaseSocialProvider(SocialProvider):
    """Holds the attached credentials and turns a login coroutine into a
    callback delivery.

    Credentials are read when ``authenticate`` is called, so changes made
    after that do not affect an attempt already scheduled.
    """

    def __init__(self) -> None:
        self._auth_profile: AuthProfile | None = None
        self._social_token: str | None = None

    @property
    @abstractmethod
    def tag(self) -> ProviderTag | str:
        """Tag identifying this provider in logs and stored accounts."""
        ...

    @abstractmethod
    async def _login(
        self,
        context: HostContext,
        auth_profile: AuthProfile | None,
        token: str | None,
    ) -> IdentifiedUser:
        """Perform the attempt.

        Raises:
            ProviderAuthFailure: If the attempt fails
        """
        ...

    def is_library_available(self) -> bool:
        return True

    def is_linked_app_available(self) -> bool:
        return True

    def set_auth_profile(self, profile: AuthProfile | None) -> None:
        self._auth_profile = profile

    def set_social_token(self, token: str | None) -> None:
        self._social_token = token

    def release(self) -> None:
        self._auth_profile = None
        self._social_token = None

    def authenticate(
        self,
        context: HostContext,
        callback: Callback[IdentifiedUser] | None,
    ) -> None:
        deliver = SingleShot(callback) if callback is not None else None
        context.spawn(
            self._attempt(context, self._auth_profile, self._social_token, deliver)
        )

    async def _attempt(
        self,
        context: HostContext,
        auth_profile: AuthProfile | None,
        token: str | None,
        deliver: SingleShot[IdentifiedUser] | None,
    ) -> None:
        result: AuthResult[IdentifiedUser]
        try:
            user = await self._login(context, auth_profile, token)
        except SocialIdError as e:
            result = AuthResult.failure(e)
        except Exception as e:
            logger.exception("Unexpected error while logging in with %s", self.tag)
            result = AuthResult.failure(
                ProviderAuthFailure(f"{self.tag} login failed: {e}")
            )
        else:
            logger.info("Logged in with %s as %s", self.tag, user.id)
            result = AuthResult.success(user)

        if deliver is None:
            if result.error is not None:
                logger.warning(
                    "Silent login with %s failed: %s (%s)",
                    self.tag,
                    result.error.message,
                    result.error.code,
                )
            return
        try:
            deliver(result)
        except Exception:
            logger.exception("Login callback for %s raised", self.tag)
