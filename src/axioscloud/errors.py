"""Exception hierarchy for the Axios client.

Each layer raises its own error type so callers can tell a broken envelope
from a vendor-side refusal or a vendor format change.
"""

from __future__ import annotations


class AxiosError(Exception):
    """Base exception for all axioscloud failures."""


class TransportDecodingError(AxiosError):
    """Raised when a wire envelope cannot be turned back into JSON."""


class MalformedResponseError(AxiosError):
    """Raised when vendor data lacks markup the normalizers depend on."""


class UnsupportedActionError(AxiosError):
    """Raised for an action name the API facade does not know."""


class AuthenticationError(AxiosError):
    """Raised when login or the web session exchange fails."""


class NotLoggedInError(AxiosError):
    """Raised when a session-bound call is made before login."""


class APIError(AxiosError):
    """Raised when the service answers with ``errorcode == -1``."""

    def __init__(self, message: str) -> None:
        super().__init__(f'Axios ha risposto con un errore: "{message}"')
        self.message = message
