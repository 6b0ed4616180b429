from socialid.infrastructure.social.providers.base import BaseSocialProvider
from socialid.infrastructure.social.providers.custom import CustomProvider
from socialid.infrastructure.social.providers.native import NativeIdentityProvider
from socialid.infrastructure.social.providers.vendor import (
    FacebookProvider,
    GoogleProvider,
    VendorSocialProvider,
)

__all__ = [
    "BaseSocialProvider",
    "CustomProvider",
    "FacebookProvider",
    "GoogleProvider",
    "NativeIdentityProvider",
    "VendorSocialProvider",
]
