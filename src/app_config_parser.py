"""Typed parser for config.toml sections into immutable app settings."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping

from app_config_schema import (
    ApiSettings,
    AppConfig,
    AppConfigurationError,
    AuthSettings,
    LoggingSettings,
    OutputSettings,
)

_AUTH_DEFAULTS = AuthSettings()
_API_DEFAULTS = ApiSettings()
_OUTPUT_DEFAULTS = OutputSettings()
_LOGGING_DEFAULTS = LoggingSettings()


def parse_app_config(
    raw: Mapping[str, Any],
    *,
    base_dir: Path,
    source_file: str,
) -> AppConfig:
    """Parse raw TOML mappings into strongly typed application settings."""
    return AppConfig(
        auth=_parse_auth_settings(_section(raw, "auth"), base_dir=base_dir),
        api=_parse_api_settings(_section(raw, "api")),
        output=_parse_output_settings(_section(raw, "output")),
        logging=_parse_logging_settings(_section(raw, "logging")),
        source_file=source_file,
    )


def _parse_auth_settings(section: Mapping[str, Any], *, base_dir: Path) -> AuthSettings:
    _forbid_secret_fields(section, "auth", ("client_id", "client_secret"))
    return AuthSettings(
        client_secret_file=_resolve_path(
            base_dir,
            _as_str(
                section.get("client_secret_file", _AUTH_DEFAULTS.client_secret_file),
                "auth.client_secret_file",
            ),
        ),
        token_dir=_resolve_path(
            base_dir,
            _as_str(section.get("token_dir", _AUTH_DEFAULTS.token_dir), "auth.token_dir"),
        ),
        token_file=_as_str(
            section.get("token_file", _AUTH_DEFAULTS.token_file),
            "auth.token_file",
        ),
        scope=_as_str(section.get("scope", _AUTH_DEFAULTS.scope), "auth.scope"),
        loopback_host=_as_str(
            section.get("loopback_host", _AUTH_DEFAULTS.loopback_host),
            "auth.loopback_host",
        ),
        loopback_port=_as_int(
            section.get("loopback_port", _AUTH_DEFAULTS.loopback_port),
            "auth.loopback_port",
        ),
        consent_timeout_seconds=_as_float(
            section.get(
                "consent_timeout_seconds",
                _AUTH_DEFAULTS.consent_timeout_seconds,
            ),
            "auth.consent_timeout_seconds",
        ),
        open_browser=_as_bool(
            section.get("open_browser", _AUTH_DEFAULTS.open_browser),
            "auth.open_browser",
        ),
    )


def _parse_api_settings(section: Mapping[str, Any]) -> ApiSettings:
    return ApiSettings(
        application_name=_as_str(
            section.get("application_name", _API_DEFAULTS.application_name),
            "api.application_name",
        ),
        mock_application_name=_as_str(
            section.get("mock_application_name", _API_DEFAULTS.mock_application_name),
            "api.mock_application_name",
        ),
        http_timeout_seconds=_as_float(
            section.get("http_timeout_seconds", _API_DEFAULTS.http_timeout_seconds),
            "api.http_timeout_seconds",
        ),
    )


def _parse_output_settings(section: Mapping[str, Any]) -> OutputSettings:
    return OutputSettings(
        indent=_as_int(section.get("indent", _OUTPUT_DEFAULTS.indent), "output.indent"),
    )


def _parse_logging_settings(section: Mapping[str, Any]) -> LoggingSettings:
    return LoggingSettings(
        level=_as_log_level(
            section.get("level", _LOGGING_DEFAULTS.level),
            "logging.level",
        ),
    )


def _section(root: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    raw = root.get(name, {})
    if raw is None:
        return {}
    if not isinstance(raw, Mapping):
        raise AppConfigurationError(f"[{name}] must be a table.")
    return raw


def _as_str(value: Any, field: str) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    raise AppConfigurationError(f"{field} must be a string.")


def _as_bool(value: Any, field: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("true", "1", "yes", "on"):
            return True
        if lowered in ("false", "0", "no", "off"):
            return False
    raise AppConfigurationError(f"{field} must be a boolean.")


def _as_int(value: Any, field: str) -> int:
    if isinstance(value, bool):
        raise AppConfigurationError(f"{field} must be an integer.")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip(), 10)
        except ValueError as error:
            raise AppConfigurationError(f"{field} must be an integer.") from error
    raise AppConfigurationError(f"{field} must be an integer.")


def _as_float(value: Any, field: str) -> float:
    if isinstance(value, bool):
        raise AppConfigurationError(f"{field} must be a float.")
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError as error:
            raise AppConfigurationError(f"{field} must be a float.") from error
    raise AppConfigurationError(f"{field} must be a float.")


def _as_log_level(value: Any, field: str) -> str:
    name = _as_str(value, field).upper()
    if not isinstance(logging.getLevelName(name), int):
        raise AppConfigurationError(f"{field} must be a logging level name, got: {name}")
    return name


def _resolve_path(base_dir: Path, raw: str) -> str:
    if not raw:
        return ""
    path = Path(raw).expanduser()
    if not path.is_absolute():
        path = (base_dir / path).resolve()
    return str(path)


def _forbid_secret_fields(
    section: Mapping[str, Any],
    section_name: str,
    fields: tuple[str, ...],
) -> None:
    present = [field for field in fields if field in section]
    if present:
        joined = ", ".join(f"{section_name}.{field}" for field in present)
        raise AppConfigurationError(
            f"Secret values must not be stored in config.toml: {joined}. "
            "Keep them in the client secret file."
        )
