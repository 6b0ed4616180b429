"""JSON file account store."""

import json
import logging
from dataclasses import asdict
from pathlib import Path

from socialid.domain.social.model.account import AccountRecord
from socialid.domain.social.model.profile import AuthProfile
from socialid.domain.social.model.value import ProviderTag
from socialid.domain.social.port.account_store import AccountStore
from socialid.infrastructure.local.paths import SocialIdPaths

logger = logging.getLogger(__name__)


class JsonFileAccountStore(AccountStore):
    """Account store keeping one account per account type in a JSON file.

    File format:
        {"name": "jane", "provider": "google", "password": null,
         "tokens": {"google": "ya29..."}}
    """

    def __init__(self, account_type: str, paths: SocialIdPaths | None = None) -> None:
        if not account_type:
            raise ValueError("account_type must not be empty")
        self.account_type = account_type
        self._paths = paths or SocialIdPaths()

    @property
    def file(self) -> Path:
        return self._paths.account_file(self.account_type)

    def recover_account(self) -> AccountRecord | None:
        if not self.file.exists():
            return None
        try:
            data = json.loads(self.file.read_text())
            return AccountRecord(
                name=data["name"],
                provider=data["provider"],
                password=data.get("password"),
                tokens=dict(data.get("tokens") or {}),
            )
        except (OSError, ValueError, KeyError, TypeError) as e:
            logger.warning("Ignoring unreadable account file %s: %s", self.file, e)
            return None

    def get_token_provider(self, record: AccountRecord) -> str:
        return record.provider

    def get_auth_token(self, record: AccountRecord, tag: str) -> str | None:
        return record.tokens.get(tag)

    def get_auth_profile(self, record: AccountRecord, alias: str) -> AuthProfile | None:
        if record.password is None:
            return None
        return AuthProfile(
            identifier=record.name,
            password=record.password,
            network=ProviderTag.NATIVE,
            alias=alias,
        )

    def save(self, record: AccountRecord) -> None:
        """Persist an account, replacing the previous one."""
        self._paths.ensure_directories()
        self.file.write_text(json.dumps(asdict(record), indent=2))

    def clear(self) -> None:
        """Forget the stored account."""
        self.file.unlink(missing_ok=True)
