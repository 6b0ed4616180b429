"""HTTP adapter for the first-party identity service."""

import logging
from typing import Any

import httpx
import logfire
from pydantic import ValidationError

from socialid.config import BackendConfig
from socialid.domain.shared.error import ProviderAuthFailure
from socialid.domain.social.model.profile import AuthProfile, IdentifiedUser, UserProfile
from socialid.domain.social.model.value import ProviderTag
from socialid.domain.social.port.identity_gateway import IdentityGateway

logger = logging.getLogger(__name__)


def _auth_payload(auth_profile: AuthProfile) -> dict[str, Any]:
    return {
        "username": auth_profile.identifier,
        "password": auth_profile.password,
        "deviceId": auth_profile.device_id,
        "network": auth_profile.network.value,
        "alias": auth_profile.alias,
    }


class HttpIdentityGateway(IdentityGateway):
    """IdentityGateway implementation over the service's JSON API."""

    def __init__(self, config: BackendConfig, http_client: httpx.AsyncClient) -> None:
        self._config = config
        self._http = http_client

    async def login(self, auth_profile: AuthProfile) -> IdentifiedUser:
        """Log in with native credentials."""
        data = await self._post(self._config.login_path, _auth_payload(auth_profile))
        return self._identified_user(ProviderTag.NATIVE, data)

    async def login_with_token(
        self,
        tag: ProviderTag,
        token: str,
        alias: str | None,
    ) -> IdentifiedUser:
        """Exchange a vendor bearer token for an identity."""
        payload = {"network": tag.value, "socialToken": token, "alias": alias}
        data = await self._post(self._config.login_path, payload)
        return self._identified_user(tag, data)

    async def register(self, auth_profile: AuthProfile, user_profile: UserProfile) -> UserProfile:
        """Create an account and return the stored profile."""
        payload = {
            "auth": _auth_payload(auth_profile),
            "profile": user_profile.model_dump(by_alias=True, exclude_none=True),
        }
        data = await self._post(self._config.register_path, payload)
        try:
            return UserProfile.model_validate(data.get("profile", data))
        except ValidationError as e:
            raise ProviderAuthFailure(f"Malformed registration response: {e}") from e

    async def _post(self, path: str, payload: dict[str, Any]) -> dict[str, Any]:
        url = f"{self._config.url.rstrip('/')}{path}"
        with logfire.span("identity service request", path=path):
            try:
                response = await self._http.post(
                    url,
                    json=payload,
                    headers={"Accept": "application/json"},
                )
            except httpx.RequestError as e:
                logger.warning("Identity service request failed: %s", e)
                raise ProviderAuthFailure(
                    "Failed to connect to the identity service",
                    code=ProviderAuthFailure.NO_INTERNET,
                ) from e

        if response.status_code >= 400:
            logger.error(
                "Identity service rejected request: status=%d, body=%s",
                response.status_code,
                response.text,
            )
            raise ProviderAuthFailure(
                f"Identity service rejected the request: {response.status_code}",
                code=ProviderAuthFailure.PROVIDER_ERROR,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise ProviderAuthFailure("Identity service returned invalid JSON") from e
        if not isinstance(data, dict):
            raise ProviderAuthFailure("Identity service returned an unexpected payload")
        return data

    @staticmethod
    def _identified_user(tag: ProviderTag, data: dict[str, Any]) -> IdentifiedUser:
        # {"user": {"identifiedId": "...", ...}, "token": {"accessToken": "..."}}
        user_data = data.get("user") or {}
        token = data.get("token")
        if isinstance(token, dict):
            token = token.get("accessToken")
        user_id = data.get("id") or user_data.get("identifiedId")
        if not user_id:
            raise ProviderAuthFailure("Identity service response missing user id")
        try:
            user = UserProfile.model_validate(user_data) if user_data else None
        except ValidationError as e:
            raise ProviderAuthFailure(f"Malformed user profile: {e}") from e
        return IdentifiedUser(
            id=str(user_id),
            provider=tag,
            token=token,
            user=user,
            raw_data=data,
        )
