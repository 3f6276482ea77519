"""Client library for the Axios Cloud school register.

Usage:
    from axioscloud import AxiosAPI

    api = AxiosAPI()
    api.login(codice_fiscale, codice_utente, password)
    voti = api.get("voti")
"""

__version__ = "0.1.0"

from .api import ACTIONS, AxiosAPI
from .client import AxiosClient
from .codec import decode, encode, rc4
from .config import ClientConfig, get_config, reset_config, set_config
from .errors import (
    APIError,
    AuthenticationError,
    AxiosError,
    MalformedResponseError,
    NotLoggedInError,
    TransportDecodingError,
    UnsupportedActionError,
)
from .web import extract_cookie, to_session_id

__all__ = [
    "__version__",
    # Facade and transport
    "AxiosAPI",
    "AxiosClient",
    "ACTIONS",
    "to_session_id",
    "extract_cookie",
    # Envelope codec
    "encode",
    "decode",
    "rc4",
    # Configuration
    "ClientConfig",
    "get_config",
    "set_config",
    "reset_config",
    # Errors
    "AxiosError",
    "APIError",
    "AuthenticationError",
    "MalformedResponseError",
    "NotLoggedInError",
    "TransportDecodingError",
    "UnsupportedActionError",
]
