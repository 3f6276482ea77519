"""Web session exchange for the Axios browser portals.

The mobile ``usersession`` is not accepted by the web portals. Getting an
``ASP.NET_SessionId`` for Scuola Digitale takes two hops:

1. ``GET_URL_WEB`` returns a signed form; posting it to Registro Famiglie
   yields a Registro Famiglie session cookie.
2. With that cookie, Registro Famiglie issues an SSO form; posting it to
   Scuola Digitale yields the final session cookie.
"""

from __future__ import annotations

import re
from typing import Any, Optional, Union
from urllib.parse import unquote

import requests

from .codec import decode, encode
from .config import ClientConfig, get_config
from .errors import AuthenticationError
from .logutils import get_logger, with_context

logger = get_logger(__name__)

SESSION_COOKIE = "ASP.NET_SessionId"

REGISTRO_FAMIGLIE_ORIGIN = "https://registrofamiglie.axioscloud.it"
SSO_URL = f"{REGISTRO_FAMIGLIE_ORIGIN}/Pages/SD/SD_Ajax_Post.aspx?Action=SSO&Others=undefined&App=SD"
SCUOLA_DIGITALE_LOGIN = "https://scuoladigitale.axioscloud.it/Pages/SD/SD_Login.aspx"

# The portals only answer Android WebView user agents
REGISTRO_FAMIGLIE_USER_AGENT = (
    "Mozilla/5.0 (Linux; Android 7.1.1; ONEPLUS A5000 Build/NMF26X; wv) "
    "AppleWebKit/537.36 (KHTML, like Gecko) Version/4.0 Chrome/119.0.6045.193 Safari/537.36"
)
SCUOLA_DIGITALE_USER_AGENT = (
    "Mozilla/5.0 (Linux; Android 13; 2201117SY Build/TP1A.220624.014; wv) "
    "AppleWebKit/537.36 (KHTML, like Gecko) Version/4.0 Chrome/127.0.6533.64 Mobile Safari/537.36"
)


def extract_cookie(set_cookie: Union[str, list[str], None], name: str) -> Optional[str]:
    """Extract a cookie value from one or more ``Set-Cookie`` header values.

    Only a cookie called exactly ``name`` matches (``xname=`` does not). When
    the cookie is set more than once the last value wins. The value is
    percent-decoded.

    >>> extract_cookie("foo=1; Path=/; HttpOnly", "foo")
    '1'
    >>> extract_cookie(["foo=1; Path=/", "bar=2; Path=/"], "bar")
    '2'
    """
    if not set_cookie or not name:
        return None

    header = ", ".join(set_cookie) if isinstance(set_cookie, list) else str(set_cookie)
    pattern = re.compile(rf"(?:^|[;,]\s*){re.escape(name)}=([^;,]+)")

    matches = pattern.findall(header)
    if not matches:
        return None
    return unquote(matches[-1])


def _session_cookie(response: requests.Response, step: str) -> str:
    header = response.headers.get("Set-Cookie")
    if not header:
        raise AuthenticationError(f"to_session_id ({step}): no Set-Cookie header in response")

    cookie = extract_cookie(header, SESSION_COOKIE)
    if cookie is None:
        raise AuthenticationError(f"to_session_id ({step}): no {SESSION_COOKIE} cookie")
    return cookie


def _registro_famiglie_form(
    codice_fiscale: str, usersession: str, config: ClientConfig, session: requests.Session
) -> dict[str, Any]:
    request = {
        "sCodiceFiscale": codice_fiscale,
        "sSessionGuid": usersession,
        "sCommandJSON": {"sApplication": "FAM", "sService": "GET_URL_WEB"},
        "sVendorToken": config.vendor_token,
    }
    url = (
        f"{config.get_service_url('RetrieveDataInformation')}"
        f"?json={encode(request, key=config.rc4_key)}"
    )
    response = session.get(
        url, headers={"X-Requested-With": config.requested_with}, timeout=config.timeout
    )
    response.raise_for_status()
    return decode(response.text, key=config.rc4_key)["response"]


def _post_form(
    form: dict[str, Any], headers: dict[str, str], config: ClientConfig, session: requests.Session
) -> requests.Response:
    # The session cookie is only visible on the redirect itself
    response = session.post(
        form["url"],
        data={"parameters": form["parameters"], "action": form["action"]},
        headers=headers,
        allow_redirects=False,
        timeout=config.timeout,
    )
    response.raise_for_status()
    return response


def to_session_id(
    codice_fiscale: str,
    usersession: str,
    config: Optional[ClientConfig] = None,
    session: Optional[requests.Session] = None,
) -> str:
    """Convert a mobile ``usersession`` into a Scuola Digitale ``ASP.NET_SessionId``.

    Args:
        codice_fiscale: School fiscal code
        usersession: Session returned by login
        config: Client configuration (defaults to the process-wide one)
        session: ``requests.Session`` to use for the exchange

    Returns:
        The Scuola Digitale session cookie value

    Raises:
        AuthenticationError: If a hop does not set the session cookie
        requests.HTTPError: On HTTP status >= 400
    """
    config = config or get_config()
    session = session or requests.Session()

    with with_context(operation="to_session_id", codice_fiscale=codice_fiscale):
        logger.info("Exchanging mobile session for Registro Famiglie session")
        form = _registro_famiglie_form(codice_fiscale, usersession, config, session)
        response = _post_form(
            form,
            {
                "Content-Type": "application/x-www-form-urlencoded",
                "User-Agent": REGISTRO_FAMIGLIE_USER_AGENT,
                "X-Requested-With": config.requested_with,
            },
            config,
            session,
        )
        registro_famiglie_cookie = _session_cookie(response, "RF")

        logger.info("Exchanging Registro Famiglie session for Scuola Digitale session")
        response = session.post(
            SSO_URL,
            json={"appurl": SCUOLA_DIGITALE_LOGIN},
            headers={
                "X-Requested-With": "XMLHttpRequest",
                "Origin": REGISTRO_FAMIGLIE_ORIGIN,
                "Cookie": f"{SESSION_COOKIE}={registro_famiglie_cookie}",
            },
            timeout=config.timeout,
        )
        response.raise_for_status()
        sso_form = response.json()

        response = _post_form(
            sso_form,
            {
                "Content-Type": "application/x-www-form-urlencoded",
                "Origin": REGISTRO_FAMIGLIE_ORIGIN,
                "Referer": f"{REGISTRO_FAMIGLIE_ORIGIN}/",
                "User-Agent": SCUOLA_DIGITALE_USER_AGENT,
                "X-Requested-With": config.requested_with,
            },
            config,
            session,
        )
        return _session_cookie(response, "SD")
