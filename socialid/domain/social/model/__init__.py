from socialid.domain.social.model.account import AccountRecord
from socialid.domain.social.model.profile import AuthProfile, IdentifiedUser, UserProfile
from socialid.domain.social.model.result import AuthResult, Callback, SingleShot
from socialid.domain.social.model.value import (
    BuiltinProvider,
    ProviderId,
    ProviderTag,
    RecoveryPolicy,
)

__all__ = [
    "AccountRecord",
    "AuthProfile",
    "AuthResult",
    "BuiltinProvider",
    "Callback",
    "IdentifiedUser",
    "ProviderId",
    "ProviderTag",
    "RecoveryPolicy",
    "SingleShot",
    "UserProfile",
]
