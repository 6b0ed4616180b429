"""Tests for JsonFileAccountStore."""

from pathlib import Path

import pytest

from socialid.domain.social.model.account import AccountRecord
from socialid.domain.social.model.value import ProviderTag
from socialid.infrastructure.local.paths import SocialIdPaths
from socialid.infrastructure.social.account_store import JsonFileAccountStore


@pytest.fixture
def paths(tmp_path: Path) -> SocialIdPaths:
    return SocialIdPaths(base_dir=tmp_path)


class TestJsonFileAccountStore:
    def test_empty_account_type_rejected(self, paths: SocialIdPaths) -> None:
        with pytest.raises(ValueError):
            JsonFileAccountStore("", paths)

    def test_no_file_means_no_record(self, paths: SocialIdPaths) -> None:
        assert JsonFileAccountStore("com.example", paths).recover_account() is None

    def test_saved_record_is_recovered(self, paths: SocialIdPaths) -> None:
        store = JsonFileAccountStore("com.example", paths)
        record = AccountRecord(name="jane", provider="google", tokens={"google": "g-token"})

        store.save(record)

        recovered = store.recover_account()
        assert recovered == record
        assert store.get_token_provider(recovered) == "google"
        assert store.get_auth_token(recovered, "google") == "g-token"
        assert store.get_auth_token(recovered, "facebook") is None

    def test_auth_profile_rebuilt_with_alias(self, paths: SocialIdPaths) -> None:
        store = JsonFileAccountStore("com.example", paths)
        record = AccountRecord(name="jane", provider="native", password="secret")

        profile = store.get_auth_profile(record, "alias-1")

        assert profile is not None
        assert profile.identifier == "jane"
        assert profile.password == "secret"
        assert profile.alias == "alias-1"
        assert profile.network is ProviderTag.NATIVE

    def test_no_password_means_no_auth_profile(self, paths: SocialIdPaths) -> None:
        store = JsonFileAccountStore("com.example", paths)
        assert store.get_auth_profile(AccountRecord(name="jane", provider="native"), "a") is None

    def test_malformed_file_is_ignored(self, paths: SocialIdPaths) -> None:
        store = JsonFileAccountStore("com.example", paths)
        paths.ensure_directories()
        store.file.write_text("{not json")

        assert store.recover_account() is None

    def test_record_missing_fields_is_ignored(self, paths: SocialIdPaths) -> None:
        store = JsonFileAccountStore("com.example", paths)
        paths.ensure_directories()
        store.file.write_text('{"name": "jane"}')

        assert store.recover_account() is None

    def test_namespaces_are_isolated(self, paths: SocialIdPaths) -> None:
        JsonFileAccountStore("one", paths).save(AccountRecord(name="a", provider="native"))
        assert JsonFileAccountStore("two", paths).recover_account() is None

    def test_clear_forgets_account(self, paths: SocialIdPaths) -> None:
        store = JsonFileAccountStore("com.example", paths)
        store.save(AccountRecord(name="jane", provider="native"))

        store.clear()
        store.clear()

        assert store.recover_account() is None


class TestSocialIdPaths:
    def test_account_file_sanitizes_namespace(self, tmp_path: Path) -> None:
        paths = SocialIdPaths(base_dir=tmp_path)
        path = paths.account_file("../com/example accounts")
        assert path.parent == tmp_path / "accounts"
        assert path.name == ".._com_example_accounts.json"

    def test_default_base_is_home(self) -> None:
        assert SocialIdPaths().base == Path.home() / ".socialid"
