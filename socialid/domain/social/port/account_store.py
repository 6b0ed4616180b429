"""Persisted account store port for the social domain."""

from abc import abstractmethod
from typing import Protocol

from socialid.domain.shared.port import Port
from socialid.domain.social.model.account import AccountRecord
from socialid.domain.social.model.profile import AuthProfile


class AccountStore(Port, Protocol):
    """Read access to the account saved by a previous session."""

    @abstractmethod
    def recover_account(self) -> AccountRecord | None:
        """Get the stored account, None when nothing was saved."""
        ...

    @abstractmethod
    def get_token_provider(self, record: AccountRecord) -> str:
        """Get the provider tag the account was stored with."""
        ...

    @abstractmethod
    def get_auth_token(self, record: AccountRecord, tag: str) -> str | None:
        """Get the bearer token stored for a vendor tag."""
        ...

    @abstractmethod
    def get_auth_profile(self, record: AccountRecord, alias: str) -> AuthProfile | None:
        """Rebuild native credentials from the account for a device alias."""
        ...
