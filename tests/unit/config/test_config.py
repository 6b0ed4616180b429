"""Tests for settings loading."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from socialid.config import Config
from socialid.domain.social.model.value import RecoveryPolicy


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("SOCIALID_CONFIG_FILE", raising=False)
    monkeypatch.delenv("SOCIALID_RECOVERY__POLICY", raising=False)
    monkeypatch.delenv("SOCIALID_BACKEND__URL", raising=False)


class TestConfig:
    def test_defaults(self) -> None:
        config = Config()
        assert config.providers.native is True
        assert config.providers.google.enabled is False
        assert config.recovery.policy is RecoveryPolicy.NEVER
        assert config.backend.login_path == "/api/segmentation/identified/login"

    def test_nested_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SOCIALID_RECOVERY__POLICY", "always")
        monkeypatch.setenv("SOCIALID_BACKEND__URL", "https://id.example.com")

        config = Config()

        assert config.recovery.policy is RecoveryPolicy.ALWAYS
        assert config.backend.url == "https://id.example.com"

    def test_yaml_file(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        config_file = tmp_path / "socialid.yaml"
        config_file.write_text(
            "providers:\n"
            "  facebook:\n"
            "    enabled: true\n"
            "recovery:\n"
            "  policy: 1\n"
            "  account_type: com.example\n"
        )
        monkeypatch.setenv("SOCIALID_CONFIG_FILE", str(config_file))

        config = Config()

        assert config.providers.facebook.enabled is True
        assert config.recovery.policy is RecoveryPolicy.ALWAYS
        assert config.recovery.account_type == "com.example"

    def test_env_beats_yaml(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        config_file = tmp_path / "socialid.yaml"
        config_file.write_text("recovery:\n  policy: always\n")
        monkeypatch.setenv("SOCIALID_CONFIG_FILE", str(config_file))
        monkeypatch.setenv("SOCIALID_RECOVERY__POLICY", "never")

        assert Config().recovery.policy is RecoveryPolicy.NEVER

    def test_unknown_policy_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Config(recovery={"policy": "sometimes"})
