"""Multi-provider social authentication orchestrator."""

from socialid.application.builder import Builder
from socialid.domain.shared.error import (
    ConfigurationError,
    InvalidArgumentError,
    ProviderAuthFailure,
    ProviderNotAvailableError,
    SocialIdError,
)
from socialid.domain.social.model import (
    AuthProfile,
    AuthResult,
    BuiltinProvider,
    IdentifiedUser,
    ProviderTag,
    RecoveryPolicy,
    UserProfile,
)
from socialid.domain.social.service.orchestrator import (
    AuthenticationOrchestrator,
    PendingRegistration,
)

__all__ = [
    "AuthProfile",
    "AuthResult",
    "AuthenticationOrchestrator",
    "Builder",
    "BuiltinProvider",
    "ConfigurationError",
    "IdentifiedUser",
    "InvalidArgumentError",
    "PendingRegistration",
    "ProviderAuthFailure",
    "ProviderNotAvailableError",
    "ProviderTag",
    "RecoveryPolicy",
    "SocialIdError",
    "UserProfile",
]
