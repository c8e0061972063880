"""Boundary adapter around google-auth's installed-app OAuth flow.

Credentials are loaded from the on-disk token cache when possible. A cache
miss starts the interactive consent flow on a loopback listener, which blocks
until the browser callback arrives or ``consent_timeout_seconds`` elapses.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from google.auth.exceptions import GoogleAuthError
from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import InstalledAppFlow

from app_config_schema import AuthSettings

from .errors import AuthorizationError, ClientSecretNotFoundError


def authorize(
    settings: AuthSettings,
    *,
    logger: Optional[logging.Logger] = None,
) -> Credentials:
    """Return usable credentials for ``settings.scope``."""
    logger = logger or logging.getLogger(__name__)
    client_secret = Path(settings.client_secret_file)
    if not client_secret.is_file():
        raise ClientSecretNotFoundError(
            f"OAuth client secret file not found: {client_secret}. "
            "Download it from the Google Cloud console."
        )

    token_path = Path(settings.token_dir) / settings.token_file
    scopes = [settings.scope]

    credentials = _load_cached_credentials(token_path, scopes)
    if credentials is not None and credentials.valid:
        logger.debug("Using cached credentials from %s", token_path)
        return credentials

    if credentials is not None and credentials.expired and credentials.refresh_token:
        logger.info("Refreshing expired credentials")
        try:
            credentials.refresh(Request())
        except GoogleAuthError as error:
            raise AuthorizationError(f"Failed to refresh credentials: {error}") from error
    else:
        credentials = _run_consent_flow(settings, client_secret, scopes, logger)

    _store_credentials(token_path, credentials)
    return credentials


def _load_cached_credentials(
    token_path: Path,
    scopes: list[str],
) -> Optional[Credentials]:
    if not token_path.exists():
        return None
    try:
        return Credentials.from_authorized_user_file(str(token_path), scopes)
    except (OSError, ValueError) as error:
        raise AuthorizationError(
            f"Token cache is unreadable or malformed: {token_path} ({error})"
        ) from error


def _run_consent_flow(
    settings: AuthSettings,
    client_secret: Path,
    scopes: list[str],
    logger: logging.Logger,
) -> Credentials:
    logger.info(
        "Starting browser consent on %s:%d",
        settings.loopback_host,
        settings.loopback_port,
    )
    try:
        flow = InstalledAppFlow.from_client_secrets_file(str(client_secret), scopes=scopes)
        credentials = flow.run_local_server(
            host=settings.loopback_host,
            port=settings.loopback_port,
            open_browser=settings.open_browser,
            timeout_seconds=settings.consent_timeout,
            access_type="offline",
        )
    except Exception as error:
        raise AuthorizationError(f"Authorization flow failed: {error}") from error

    if credentials is None:
        raise AuthorizationError("Authorization flow returned no credentials.")
    return credentials


def _store_credentials(token_path: Path, credentials: Credentials) -> None:
    try:
        token_path.parent.mkdir(parents=True, exist_ok=True)
        token_path.write_text(credentials.to_json(), encoding="utf-8")
    except OSError as error:
        raise AuthorizationError(f"Failed to write token cache {token_path}: {error}") from error
