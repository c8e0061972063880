from __future__ import annotations

import dataclasses
import os
from pathlib import Path
from typing import Mapping

try:  # Python 3.11+
    import tomllib
except ModuleNotFoundError:  # pragma: no cover - fallback for older runtimes
    import tomli as tomllib  # type: ignore

from app_config_parser import parse_app_config
from app_config_schema import (
    DEFAULT_CONFIG_FILE,
    AppConfig,
    AppConfigurationError,
    EnvironmentOverrides,
)

CONFIG_FILE_ENV = "CALENDAR_CLI_CONFIG_FILE"
CLIENT_SECRET_FILE_ENV = "CALENDAR_CLI_CLIENT_SECRET_FILE"
LOG_LEVEL_ENV = "CALENDAR_CLI_LOG_LEVEL"

__all__ = [
    "AppConfig",
    "AppConfigurationError",
    "EnvironmentOverrides",
    "apply_environment_overrides",
    "load_app_config",
    "load_environment_overrides",
    "resolve_config_path",
]


def resolve_config_path(
    config_path: str | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> tuple[Path, bool]:
    """Return the config path and whether it was requested explicitly."""
    env = environ if environ is not None else os.environ
    env_path = env.get(CONFIG_FILE_ENV, "").strip() or None
    raw = config_path or env_path or DEFAULT_CONFIG_FILE
    path = Path(raw).expanduser()
    if not path.is_absolute():
        path = (Path.cwd() / path).resolve()
    return path, bool(config_path or env_path)


def load_app_config(
    config_path: str | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> AppConfig:
    path, explicit = resolve_config_path(config_path, environ=environ)
    if not path.exists():
        if explicit:
            raise AppConfigurationError(f"Config file not found: {path}")
        return parse_app_config({}, base_dir=Path.cwd(), source_file="")
    if not path.is_file():
        raise AppConfigurationError(f"Config path is not a file: {path}")

    try:
        with open(path, "rb") as fh:
            raw = tomllib.load(fh)
    except Exception as error:
        raise AppConfigurationError(f"Failed to parse config TOML: {error}") from error

    return parse_app_config(raw, base_dir=path.parent, source_file=str(path))


def load_environment_overrides(
    *,
    environ: Mapping[str, str] | None = None,
) -> EnvironmentOverrides:
    env = environ if environ is not None else os.environ
    client_secret_file = env.get(CLIENT_SECRET_FILE_ENV, "").strip() or None
    log_level = env.get(LOG_LEVEL_ENV, "").strip().upper() or None
    return EnvironmentOverrides(
        client_secret_file=(
            str(Path(client_secret_file).expanduser().resolve())
            if client_secret_file
            else None
        ),
        log_level=log_level,
    )


def apply_environment_overrides(
    app_config: AppConfig,
    overrides: EnvironmentOverrides,
) -> AppConfig:
    """Fold environment overrides into a new immutable config."""
    auth = app_config.auth
    if overrides.client_secret_file:
        auth = dataclasses.replace(auth, client_secret_file=overrides.client_secret_file)
    logging_settings = app_config.logging
    if overrides.log_level:
        logging_settings = dataclasses.replace(logging_settings, level=overrides.log_level)
    return dataclasses.replace(app_config, auth=auth, logging=logging_settings)
