"""Error hierarchy for socialid.

Error layers:
- SocialIdError: Base class for all socialid errors
- DomainError: Caller-fixable precondition failures, raised synchronously
- InfrastructureError: Provider, back-end and configuration failures

ProviderAuthFailure is never raised out of the orchestrator: providers deliver
it through the result callback.
"""


class SocialIdError(Exception):
    """Base class for all socialid errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(message)


# =============================================================================
# Domain Errors (precondition failures - raised at the call site)
# =============================================================================


class DomainError(SocialIdError):
    """Base class for domain errors."""


class InvalidArgumentError(DomainError):
    """A required argument is missing or malformed."""

    def __init__(self, message: str, argument: str | None = None) -> None:
        super().__init__(message, code="invalid_argument")
        self.argument = argument


class ProviderNotAvailableError(DomainError):
    """Provider is unregistered, its library is missing or its app is not linked."""

    def __init__(self, provider_id: int) -> None:
        super().__init__(
            "The social network you are trying to log with is not available. "
            f"Social network id: {provider_id}",
            code="provider_not_available",
        )
        self.provider_id = provider_id


# =============================================================================
# Infrastructure Errors (provider and system failures)
# =============================================================================


class InfrastructureError(SocialIdError):
    """Base class for infrastructure/system errors."""


class ProviderAuthFailure(InfrastructureError):
    """An authentication attempt failed inside a provider."""

    NO_INTERNET = "no_internet"
    PROVIDER_ERROR = "provider_error"

    def __init__(self, message: str, code: str = PROVIDER_ERROR) -> None:
        super().__init__(message, code=code)


class ConfigurationError(InfrastructureError):
    """System misconfiguration detected."""
