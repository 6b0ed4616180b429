"""Value objects for the social domain."""

from enum import IntEnum, StrEnum

ProviderId = int
"""Key a SocialProvider is registered under. Ids 0-2 are the built-ins."""


class BuiltinProvider(IntEnum):
    """Reserved provider ids.

    Members compare and hash as plain ints, so a registry keyed by
    ``ProviderId`` accepts either form.
    """

    NATIVE = 0
    GOOGLE = 1
    FACEBOOK = 2


class ProviderTag(StrEnum):
    """Provider tag stored with a persisted account record."""

    NATIVE = "native"
    GOOGLE = "google"
    FACEBOOK = "facebook"

    @property
    def provider_id(self) -> ProviderId:
        return _TAG_TO_ID[self]

    @classmethod
    def parse(cls, value: str | None) -> "ProviderTag | None":
        """Map a stored tag to a known tag, or None when unrecognized."""
        try:
            return cls(value)
        except ValueError:
            return None


_TAG_TO_ID: dict[ProviderTag, ProviderId] = {
    ProviderTag.NATIVE: BuiltinProvider.NATIVE,
    ProviderTag.GOOGLE: BuiltinProvider.GOOGLE,
    ProviderTag.FACEBOOK: BuiltinProvider.FACEBOOK,
}


class RecoveryPolicy(IntEnum):
    """Whether a persisted account is used to log in again on start-up."""

    NEVER = 0
    ALWAYS = 1

    @classmethod
    def parse(cls, value: "str | int | RecoveryPolicy") -> "RecoveryPolicy":
        if isinstance(value, str) and not value.isdigit():
            try:
                return cls[value.upper()]
            except KeyError:
                raise ValueError(f"Unknown recovery policy: {value}") from None
        return cls(int(value))
