"""OAuth installed-app authorization for live calendar access."""

from .errors import AuthError, AuthorizationError, ClientSecretNotFoundError
from .flow import authorize

__all__ = [
    "AuthError",
    "AuthorizationError",
    "ClientSecretNotFoundError",
    "authorize",
]
