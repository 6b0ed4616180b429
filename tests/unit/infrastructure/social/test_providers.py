"""Tests for the social provider adapters."""

import logging
from unittest.mock import AsyncMock, MagicMock

import pytest

from socialid.domain.shared.error import ConfigurationError, ProviderAuthFailure
from socialid.domain.social.model.profile import AuthProfile, IdentifiedUser
from socialid.domain.social.model.result import AuthResult
from socialid.domain.social.model.value import ProviderTag
from socialid.infrastructure.social.host import AsyncioHostContext
from socialid.infrastructure.social.providers import (
    CustomProvider,
    FacebookProvider,
    GoogleProvider,
    NativeIdentityProvider,
)
from socialid.infrastructure.social.providers.vendor import module_available


def make_gateway(user: IdentifiedUser | None = None) -> AsyncMock:
    gateway = AsyncMock()
    user = user or IdentifiedUser(id="u-1", provider=ProviderTag.NATIVE)
    gateway.login.return_value = user
    gateway.login_with_token.return_value = user
    return gateway


class Recorder:
    """Callback collecting every delivered result."""

    def __init__(self) -> None:
        self.results: list[AuthResult[IdentifiedUser]] = []

    def __call__(self, result: AuthResult[IdentifiedUser]) -> None:
        self.results.append(result)


class TestNativeIdentityProvider:
    def test_always_available(self) -> None:
        provider = NativeIdentityProvider(make_gateway())
        assert provider.is_library_available()
        assert provider.is_linked_app_available()

    @pytest.mark.asyncio
    async def test_authenticate_delivers_identity_once(self) -> None:
        gateway = make_gateway()
        host = AsyncioHostContext(device_alias="alias-1")
        provider = NativeIdentityProvider(gateway)
        provider.set_auth_profile(AuthProfile(identifier="jane", password="secret"))
        recorder = Recorder()

        provider.authenticate(host, recorder)
        await host.drain()

        assert len(recorder.results) == 1
        assert recorder.results[0].unwrap().id == "u-1"
        sent = gateway.login.call_args.args[0]
        assert sent.identifier == "jane"
        assert sent.alias == "alias-1"

    @pytest.mark.asyncio
    async def test_authenticate_returns_before_login_runs(self) -> None:
        gateway = make_gateway()
        host = AsyncioHostContext()
        provider = NativeIdentityProvider(gateway)
        provider.set_auth_profile(AuthProfile(identifier="jane", password="secret"))
        recorder = Recorder()

        provider.authenticate(host, recorder)

        assert recorder.results == []
        gateway.login.assert_not_called()
        await host.drain()
        assert len(recorder.results) == 1

    @pytest.mark.asyncio
    async def test_credentials_read_when_authenticate_is_called(self) -> None:
        gateway = make_gateway()
        host = AsyncioHostContext()
        provider = NativeIdentityProvider(gateway)
        provider.set_auth_profile(AuthProfile(identifier="first", password="pw"))

        provider.authenticate(host, Recorder())
        provider.set_auth_profile(AuthProfile(identifier="second", password="pw"))
        await host.drain()

        assert gateway.login.call_args.args[0].identifier == "first"

    @pytest.mark.asyncio
    async def test_missing_profile_fails_through_callback(self) -> None:
        host = AsyncioHostContext()
        provider = NativeIdentityProvider(make_gateway())
        recorder = Recorder()

        provider.authenticate(host, recorder)
        await host.drain()

        assert len(recorder.results) == 1
        error = recorder.results[0].error
        assert isinstance(error, ProviderAuthFailure)
        assert error.code == "provider_error"

    @pytest.mark.asyncio
    async def test_gateway_failure_is_passed_through_unchanged(self) -> None:
        failure = ProviderAuthFailure("offline", code=ProviderAuthFailure.NO_INTERNET)
        gateway = make_gateway()
        gateway.login.side_effect = failure
        host = AsyncioHostContext()
        provider = NativeIdentityProvider(gateway)
        provider.set_auth_profile(AuthProfile(identifier="jane", password="pw"))
        recorder = Recorder()

        provider.authenticate(host, recorder)
        await host.drain()

        assert recorder.results[0].error is failure

    @pytest.mark.asyncio
    async def test_unexpected_error_becomes_provider_failure(self) -> None:
        gateway = make_gateway()
        gateway.login.side_effect = KeyError("token")
        host = AsyncioHostContext()
        provider = NativeIdentityProvider(gateway)
        provider.set_auth_profile(AuthProfile(identifier="jane", password="pw"))
        recorder = Recorder()

        provider.authenticate(host, recorder)
        await host.drain()

        assert isinstance(recorder.results[0].error, ProviderAuthFailure)

    @pytest.mark.asyncio
    async def test_silent_failure_is_logged_not_raised(self, caplog: pytest.LogCaptureFixture) -> None:
        gateway = make_gateway()
        gateway.login.side_effect = ProviderAuthFailure("rejected")
        host = AsyncioHostContext()
        provider = NativeIdentityProvider(gateway)
        provider.set_auth_profile(AuthProfile(identifier="jane", password="pw"))

        with caplog.at_level(logging.WARNING):
            provider.authenticate(host, None)
            await host.drain()

        assert "Silent login with native failed" in caplog.text

    @pytest.mark.asyncio
    async def test_raising_callback_is_logged_not_propagated(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        host = MagicMock()
        host.device_alias = "alias-1"
        provider = NativeIdentityProvider(make_gateway())
        provider.set_auth_profile(AuthProfile(identifier="jane", password="pw"))
        callback = MagicMock(side_effect=RuntimeError("host bug"))

        provider.authenticate(host, callback)
        attempt = host.spawn.call_args.args[0]
        with caplog.at_level(logging.ERROR):
            await attempt

        callback.assert_called_once()
        assert "Login callback for native raised" in caplog.text

    def test_release_drops_credentials(self) -> None:
        provider = NativeIdentityProvider(make_gateway())
        provider.set_auth_profile(AuthProfile(identifier="jane"))
        provider.set_social_token("t")

        provider.release()
        provider.release()

        assert provider._auth_profile is None
        assert provider._social_token is None


class TestVendorProviders:
    def test_google_requires_client_id(self) -> None:
        with pytest.raises(ConfigurationError):
            GoogleProvider(make_gateway(), client_id="")

    def test_library_availability_follows_import_probe(self) -> None:
        provider = FacebookProvider(make_gateway())
        provider.library = "socialid_tests_no_such_vendor_sdk"
        assert provider.is_library_available() is False

        provider.library = "json"
        assert provider.is_library_available() is True

    def test_module_available_handles_missing_parent_package(self) -> None:
        assert module_available("socialid_tests_missing.child") is False

    def test_linked_app_probe(self) -> None:
        assert FacebookProvider(make_gateway()).is_linked_app_available() is True
        provider = FacebookProvider(make_gateway(), linked_app_probe=lambda: False)
        assert provider.is_linked_app_available() is False

    @pytest.mark.asyncio
    async def test_stored_token_is_exchanged(self) -> None:
        gateway = make_gateway()
        host = AsyncioHostContext(device_alias="alias-1")
        handshake = AsyncMock(return_value="fresh")
        provider = GoogleProvider(gateway, client_id="client", handshake=handshake)
        provider.set_social_token("stored")
        recorder = Recorder()

        provider.authenticate(host, recorder)
        await host.drain()

        gateway.login_with_token.assert_awaited_once_with(ProviderTag.GOOGLE, "stored", "alias-1")
        handshake.assert_not_called()
        assert recorder.results[0].ok

    @pytest.mark.asyncio
    async def test_handshake_runs_without_token_and_is_remembered(self) -> None:
        gateway = make_gateway()
        host = AsyncioHostContext(device_alias="alias-1")
        handshake = AsyncMock(return_value="fresh")
        provider = FacebookProvider(gateway, handshake=handshake)

        provider.authenticate(host, Recorder())
        await host.drain()
        provider.authenticate(host, Recorder())
        await host.drain()

        handshake.assert_awaited_once_with(host)
        assert gateway.login_with_token.await_count == 2
        gateway.login_with_token.assert_awaited_with(ProviderTag.FACEBOOK, "fresh", "alias-1")

    @pytest.mark.asyncio
    async def test_no_token_and_no_handshake_fails(self) -> None:
        host = AsyncioHostContext()
        provider = FacebookProvider(make_gateway())
        recorder = Recorder()

        provider.authenticate(host, recorder)
        await host.drain()

        assert recorder.results[0].error is not None
        assert recorder.results[0].error.code == "provider_error"


class TestCustomProvider:
    @pytest.mark.asyncio
    async def test_wraps_host_coroutine(self) -> None:
        user = IdentifiedUser(id="sso-7", provider="corporate-sso")
        login = AsyncMock(return_value=user)
        host = AsyncioHostContext()
        provider = CustomProvider("corporate-sso", login)
        profile = AuthProfile(identifier="jane")
        provider.set_auth_profile(profile)
        recorder = Recorder()

        provider.authenticate(host, recorder)
        await host.drain()

        login.assert_awaited_once_with(host, profile, None)
        assert recorder.results[0].unwrap() is user
        assert provider.tag == "corporate-sso"

    def test_probes_default_to_available(self) -> None:
        provider = CustomProvider("x", AsyncMock())
        assert provider.is_library_available()
        assert provider.is_linked_app_available()

    def test_probes_are_used(self) -> None:
        library_probe = MagicMock(return_value=False)
        provider = CustomProvider("x", AsyncMock(), library_probe=library_probe)
        assert provider.is_library_available() is False
        library_probe.assert_called_once_with()
