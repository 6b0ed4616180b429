"""Credential and identity payloads."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from socialid.domain.social.model.value import ProviderTag


class AuthProfile(BaseModel):
    """Credentials supplied before a login or a registration.

    ``network`` tells the back-end how to interpret ``password``: a plain
    password for the native provider, a bearer token for a social one.
    """

    identifier: str
    password: str | None = None
    device_id: str | None = None
    network: ProviderTag = ProviderTag.NATIVE
    alias: str | None = None

    def with_alias(self, alias: str) -> "AuthProfile":
        return self.model_copy(update={"alias": alias})


class UserProfile(BaseModel):
    """Identity attributes declared at registration."""

    model_config = ConfigDict(populate_by_name=True)

    identified_id: str | None = Field(default=None, alias="identifiedId")
    display_name: str | None = Field(default=None, alias="displayName")
    name: str | None = None
    surname: str | None = None
    email: str | None = None
    photo: str | None = None


class IdentifiedUser(BaseModel):
    """Identity resolved by a successful login."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    provider: ProviderTag | str
    token: str | None = Field(default=None, repr=False)
    user: UserProfile | None = None
    raw_data: dict[str, Any] = Field(default_factory=dict, exclude=True, repr=False)
