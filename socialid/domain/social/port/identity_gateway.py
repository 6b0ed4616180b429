"""First-party identity service port."""

from abc import abstractmethod
from typing import Protocol

from socialid.domain.shared.port import Port
from socialid.domain.social.model.profile import AuthProfile, IdentifiedUser, UserProfile
from socialid.domain.social.model.value import ProviderTag


class IdentityGateway(Port, Protocol):
    """Boundary to the first-party identity service.

    Every social login ends here: vendor providers exchange their bearer
    token for a first-party identity.
    """

    @abstractmethod
    async def login(self, auth_profile: AuthProfile) -> IdentifiedUser:
        """Log in with native credentials.

        Raises:
            ProviderAuthFailure: If the service is unreachable or rejects the login
        """
        ...

    @abstractmethod
    async def login_with_token(
        self,
        tag: ProviderTag,
        token: str,
        alias: str | None,
    ) -> IdentifiedUser:
        """Log in with a bearer token issued by a social vendor.

        Raises:
            ProviderAuthFailure: If the service is unreachable or rejects the token
        """
        ...

    @abstractmethod
    async def register(self, auth_profile: AuthProfile, user_profile: UserProfile) -> UserProfile:
        """Create a first-party account.

        Raises:
            ProviderAuthFailure: If the service is unreachable or rejects the account
        """
        ...
