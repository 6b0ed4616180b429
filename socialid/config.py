import logging
import os
import sys
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from socialid.domain.social.model.value import RecoveryPolicy


# =============================================================================
# Identity Service Configuration
# =============================================================================


class BackendConfig(BaseModel):
    """First-party identity service (nested in Config, uses env_nested_delimiter)."""

    url: str = "http://localhost:8080"
    login_path: str = "/api/segmentation/identified/login"
    register_path: str = "/api/segmentation/identified/register"
    timeout: float = 10.0  # Seconds per request


# =============================================================================
# Provider Configuration
# =============================================================================


class GoogleConfig(BaseModel):
    """Google sign-in configuration."""

    enabled: bool = False
    client_id: str = ""  # OAuth2 web client id


class FacebookConfig(BaseModel):
    """Facebook login configuration."""

    enabled: bool = False


class ProvidersConfig(BaseModel):
    """Which built-in providers the builder registers."""

    native: bool = True
    google: GoogleConfig = GoogleConfig()
    facebook: FacebookConfig = FacebookConfig()


class RecoveryConfig(BaseModel):
    """Persisted account recovery.

    The account store is only used when policy is ALWAYS and account_type
    names a namespace.
    """

    policy: RecoveryPolicy = RecoveryPolicy.NEVER
    account_type: str | None = None
    base_dir: Path | None = None  # Defaults to ~/.socialid

    @field_validator("policy", mode="before")
    @classmethod
    def parse_policy(cls, v: Any) -> RecoveryPolicy:
        return RecoveryPolicy.parse(v)


class LoggingConfig(BaseModel):
    """Logging configuration (nested in Config, uses env_nested_delimiter)."""

    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"

    @property
    def file(self) -> str | None:
        """Get log file path from SOCIALID_LOG_FILE env var."""
        return os.environ.get("SOCIALID_LOG_FILE")


# =============================================================================
# Application Configuration
# =============================================================================


class YamlConfigSettingsSource(PydanticBaseSettingsSource):
    """Load settings from YAML file specified by SOCIALID_CONFIG_FILE env var."""

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Get the value for a field from the YAML config."""
        yaml_data = self._load_yaml_config()
        field_value = yaml_data.get(field_name)
        return field_value, field_name, False

    def __call__(self) -> dict[str, Any]:
        """Return all settings from YAML file."""
        return self._load_yaml_config()

    def _load_yaml_config(self) -> dict[str, Any]:
        """Load config from YAML file if specified."""
        config_file = os.environ.get("SOCIALID_CONFIG_FILE")
        if config_file:
            path = Path(config_file)
            if path.exists():
                return yaml.safe_load(path.read_text()) or {}
        return {}


class Config(BaseSettings):
    backend: BackendConfig = BackendConfig()
    providers: ProvidersConfig = ProvidersConfig()
    recovery: RecoveryConfig = RecoveryConfig()
    logging: LoggingConfig = LoggingConfig()
    device_alias: str | None = None  # Generated per process when unset

    model_config = {
        "env_prefix": "SOCIALID_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_nested_delimiter": "__",  # Allows SOCIALID_BACKEND__URL override
    }

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings sources to include YAML config.

        Priority (highest to lowest):
        1. init_settings - values passed to Config()
        2. env_settings - environment variables
        3. dotenv_settings - .env file
        4. yaml_settings - SOCIALID_CONFIG_FILE yaml
        5. file_secret_settings - secrets from files
        """
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )


def configure_logging(config: LoggingConfig) -> None:
    """Configure Python logging based on config.

    Should be called early in application startup so that all loggers pick
    up the configuration.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(config.level)

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    formatter = logging.Formatter(config.format, datefmt=config.date_format)

    if config.file:
        log_path = Path(config.file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_path)
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(config.level)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    # Reduce noise from third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)

    logging.debug("Logging configured: level=%s, file=%s", config.level, config.file)
