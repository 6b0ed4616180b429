"""Social provider port for the social domain."""

from abc import abstractmethod
from typing import Protocol

from socialid.domain.shared.port import Port
from socialid.domain.social.model.profile import AuthProfile, IdentifiedUser
from socialid.domain.social.model.result import Callback
from socialid.domain.social.port.host import HostContext


class SocialProvider(Port, Protocol):
    """Port for a pluggable identity backend.

    Implementations are adapters in infrastructure/ (e.g., NativeIdentityProvider).
    Every implementation must invoke a non-None callback exactly once.
    """

    @abstractmethod
    def is_library_available(self) -> bool:
        """Whether the client library this provider needs can be used."""
        ...

    @abstractmethod
    def is_linked_app_available(self) -> bool:
        """Whether the host app this provider delegates to is present."""
        ...

    @abstractmethod
    def authenticate(
        self,
        context: HostContext,
        callback: Callback[IdentifiedUser] | None,
    ) -> None:
        """Start an authentication attempt and return without waiting for it.

        Args:
            context: Host execution context the attempt is scheduled on
            callback: Receives the outcome; None for a silent recovery login
        """
        ...

    @abstractmethod
    def set_auth_profile(self, profile: AuthProfile | None) -> None:
        """Attach the credential used by the next authentication."""
        ...

    @abstractmethod
    def set_social_token(self, token: str | None) -> None:
        """Attach a bearer token obtained by a previous vendor handshake."""
        ...

    @abstractmethod
    def release(self) -> None:
        """Drop held credentials and vendor resources."""
        ...
