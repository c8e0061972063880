class AuthError(Exception):
    """Base exception for authorization failures."""


class ClientSecretNotFoundError(AuthError):
    """Raised when the OAuth client secret file is missing."""


class AuthorizationError(AuthError):
    """Raised when cached or interactive authorization fails."""
