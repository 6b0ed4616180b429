"""Manages the ~/.socialid directory structure."""

import re
from pathlib import Path

_UNSAFE = re.compile(r"[^A-Za-z0-9._-]")


class SocialIdPaths:
    """Manages paths within the ~/.socialid directory.

    Directory structure:
        ~/.socialid/
            accounts/
                <account type>.json   # Account saved for one namespace
    """

    def __init__(self, base_dir: Path | None = None) -> None:
        """Initialize paths.

        Args:
            base_dir: Override base directory (default: ~/.socialid).
                      Useful for testing.
        """
        self._base = base_dir or Path.home() / ".socialid"

    @property
    def base(self) -> Path:
        """Base directory (~/.socialid)."""
        return self._base

    @property
    def accounts_dir(self) -> Path:
        """Stored accounts directory."""
        return self._base / "accounts"

    def account_file(self, account_type: str) -> Path:
        """File holding the account stored under an account type."""
        return self.accounts_dir / f"{_UNSAFE.sub('_', account_type)}.json"

    def ensure_directories(self) -> None:
        """Create all required directories if they don't exist."""
        self.accounts_dir.mkdir(parents=True, exist_ok=True)
