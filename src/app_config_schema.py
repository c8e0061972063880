"""Dataclass schema objects used by runtime configuration loading."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

DEFAULT_CONFIG_FILE = "config.toml"
CALENDAR_READONLY_SCOPE = "https://www.googleapis.com/auth/calendar.readonly"


class AppConfigurationError(Exception):
    """Raised when application configuration fails."""


@dataclass(frozen=True)
class AuthSettings:
    """OAuth installed-app settings from `[auth]`."""
    client_secret_file: str = "credentials.json"
    token_dir: str = "tokens"
    token_file: str = "token.json"
    scope: str = CALENDAR_READONLY_SCOPE
    loopback_host: str = "localhost"
    loopback_port: int = 8888
    consent_timeout_seconds: float = 300.0
    open_browser: bool = True

    def __post_init__(self) -> None:
        if not self.client_secret_file.strip():
            raise AppConfigurationError("auth.client_secret_file cannot be empty.")
        if not self.token_file.strip():
            raise AppConfigurationError("auth.token_file cannot be empty.")
        if not 0 <= self.loopback_port <= 65535:
            raise AppConfigurationError(
                f"auth.loopback_port must be in [0, 65535], got: {self.loopback_port}"
            )
        if self.consent_timeout_seconds < 0:
            raise AppConfigurationError("auth.consent_timeout_seconds must be >= 0.")

    @property
    def consent_timeout(self) -> Optional[float]:
        """Seconds to wait for the browser callback; ``None`` waits forever."""
        return self.consent_timeout_seconds or None


@dataclass(frozen=True)
class ApiSettings:
    """Calendar API client settings from `[api]`."""
    application_name: str = "calendar-cli"
    mock_application_name: str = "calendar-cli-mock"
    http_timeout_seconds: float = 30.0

    def __post_init__(self) -> None:
        if self.http_timeout_seconds <= 0:
            raise AppConfigurationError("api.http_timeout_seconds must be > 0.")


@dataclass(frozen=True)
class OutputSettings:
    """Terminal rendering settings from `[output]`."""
    indent: int = 2

    def __post_init__(self) -> None:
        if self.indent < 0:
            raise AppConfigurationError("output.indent must be >= 0.")


@dataclass(frozen=True)
class LoggingSettings:
    """Log verbosity from `[logging]`."""
    level: str = "WARNING"


@dataclass(frozen=True)
class AppConfig:
    """Complete typed runtime configuration loaded from `config.toml`."""
    auth: AuthSettings = field(default_factory=AuthSettings)
    api: ApiSettings = field(default_factory=ApiSettings)
    output: OutputSettings = field(default_factory=OutputSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)
    source_file: str = ""


@dataclass(frozen=True)
class EnvironmentOverrides:
    """Environment-provided overrides kept out of `config.toml`."""
    client_secret_file: Optional[str]
    log_level: Optional[str]
