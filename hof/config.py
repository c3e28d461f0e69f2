import logging
import os
import sys
from pathlib import Path

from pydantic import BaseModel, Field, model_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    YamlConfigSettingsSource,
)
from typing_extensions import Self


# =============================================================================
# Admin Configuration
# =============================================================================


class AdminKey(BaseModel):
    """A named shared key accepted in the Authorization header."""

    username: str = Field(min_length=1)  # Shown in logs, never in responses
    key: str = Field(min_length=1)


class AdminConfig(BaseModel):
    """Admin surface configuration (nested in Config, uses env_nested_delimiter).

    When ``enabled`` is false the /admin routes are not mounted at all.
    """

    enabled: bool = False
    keys: list[AdminKey] = []

    @model_validator(mode="after")
    def check_keys(self) -> Self:
        seen: set[str] = set()
        for admin in self.keys:
            if admin.key in seen:
                raise ValueError(f"Duplicate admin key configured for {admin.username!r}")
            seen.add(admin.key)
        if self.enabled and not self.keys:
            raise ValueError("admin.enabled requires at least one entry in admin.keys")
        return self


# =============================================================================
# Application Configuration
# =============================================================================


class Server(BaseModel):
    """Server configuration (nested in Config, uses env_nested_delimiter)."""

    name: str = "Hall of Fame"
    version: str = "0.1.0"
    description: str = "Public acknowledgements of security reporters"
    project_name: str = "Hall of Fame"  # Shown on the public page
    host: str = "127.0.0.1"
    port: int = 8080


class DatabaseConfig(BaseModel):
    """Database configuration (nested in Config, uses env_nested_delimiter)."""

    url: str = "sqlite+aiosqlite:///~/.local/share/hof/records.db"  # XDG data directory
    echo: bool = False


class LoggingConfig(BaseModel):
    """Logging configuration (nested in Config, uses env_nested_delimiter)."""

    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"

    @property
    def file(self) -> str | None:
        """Get log file path from HOF_LOG_FILE env var."""
        return os.environ.get("HOF_LOG_FILE")


class Config(BaseSettings):
    server: Server = Server()
    database: DatabaseConfig = DatabaseConfig()
    logging: LoggingConfig = LoggingConfig()
    admin: AdminConfig = AdminConfig()

    model_config = {
        "env_prefix": "HOF_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_nested_delimiter": "__",  # Allows HOF_DATABASE__URL override
        "frozen": True,
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
        """Layer the HOF_CONFIG_FILE yaml under env vars and .env.

        Explicit Config(...) arguments win over everything; file secrets
        come last.
        """
        sources: tuple[PydanticBaseSettingsSource, ...] = (init_settings, env_settings, dotenv_settings)
        config_file = os.environ.get("HOF_CONFIG_FILE")
        if config_file:
            sources += (YamlConfigSettingsSource(settings_cls, yaml_file=Path(config_file)),)
        return (*sources, file_secret_settings)


# Third-party loggers that are only interesting when something is wrong
QUIET_LOGGERS = ("asyncio", "aiosqlite", "httpx", "httpcore")


def _log_handler(config: LoggingConfig) -> logging.Handler:
    if not config.file:
        return logging.StreamHandler(sys.stderr)
    log_path = Path(config.file).expanduser()
    log_path.parent.mkdir(parents=True, exist_ok=True)
    return logging.FileHandler(log_path)


def configure_logging(config: LoggingConfig) -> None:
    """Install a single root handler (HOF_LOG_FILE or stderr).

    Called by the app factory before anything logs. Calling it again
    replaces the handler instead of stacking a second one.
    """
    root = logging.getLogger()
    root.setLevel(config.level)
    for existing in list(root.handlers):
        root.removeHandler(existing)

    handler = _log_handler(config)
    handler.setLevel(config.level)
    handler.setFormatter(logging.Formatter(config.format, datefmt=config.date_format))
    root.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.debug("Logging configured: level=%s, file=%s", config.level, config.file)
