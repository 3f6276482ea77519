"""HTTP transport for the Axios REST service.

Every request and reply travels inside an RC4/base64/percent-encoded envelope
(see :mod:`axioscloud.codec`). This module only builds envelopes, performs a
single blocking request per call and unwraps the reply; it does not retry.
"""

from __future__ import annotations

import json
from typing import Any, Optional

import requests

from .codec import decode, encode
from .config import ClientConfig, get_config
from .errors import APIError, AuthenticationError
from .logutils import get_logger, with_context
from .parsers.helpers import to_title_case

logger = get_logger(__name__)

DEFAULT_APPLICATION = "FAM"
LOGIN_APP_NAME = "ALU_APP"
# Login2 expects the credentials envelope percent-encoded twice
LOGIN_PERCENT_LAYERS = 2


def is_error_reply(reply: Any) -> bool:
    """True if a decoded reply carries the vendor error marker (``errorcode == -1``)."""
    return isinstance(reply, dict) and str(reply.get("errorcode")) == "-1"


class AxiosClient:
    """Thin client over the three REST endpoints the mobile app uses.

    Args:
        config: Client configuration (defaults to the process-wide one)
        session: Optional ``requests.Session`` to reuse connections or to
            inject a stub in tests
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = config or get_config()
        self.session = session or requests.Session()

    @property
    def vendor_token(self) -> str:
        return self.config.vendor_token

    @property
    def base_url(self) -> str:
        return self.config.base_url

    def _encode(self, value: Any, layers: int = 1) -> str:
        return encode(value, layers, key=self.config.rc4_key)

    def _decode(self, body: str) -> Any:
        return decode(body, key=self.config.rc4_key)

    def _retrieve(self, endpoint: str, envelope: str) -> Any:
        # The envelope is already percent-encoded, so it goes straight into the URL
        url = f"{self.config.get_service_url(endpoint)}?json={envelope}"
        response = self.session.get(
            url,
            headers={"X-Requested-With": self.config.requested_with},
            timeout=self.config.timeout,
        )
        response.raise_for_status()
        return self._decode(response.text)

    def get(
        self,
        service: str,
        student_info: dict[str, Any],
        application: str = DEFAULT_APPLICATION,
        data: Optional[dict[str, Any]] = None,
    ) -> Any:
        """Call a read-only vendor service through ``RetrieveDataInformation``.

        Args:
            service: Vendor service name, e.g. ``GET_VOTI_LIST_DETAIL``
            student_info: ``{"CodiceFiscale", "SessionGuid", "VendorToken"}``
            application: Vendor application code
            data: Extra service parameters

        Returns:
            The ``response`` field of the decoded reply

        Raises:
            APIError: If the vendor answers with ``errorcode == -1``
            TransportDecodingError: If the reply envelope is malformed
            requests.HTTPError: On HTTP status >= 400
        """
        request = {
            "sCodiceFiscale": student_info.get("CodiceFiscale"),
            "sSessionGuid": student_info.get("SessionGuid"),
            "sCommandJSON": {
                "sApplication": application,
                "sService": service,
                "data": data or {},
            },
            "sVendorToken": student_info.get("VendorToken"),
        }

        with with_context(operation="get", service=service):
            logger.info("Requesting service", extra={"extra_data": {"service": service}})
            reply = self._retrieve("RetrieveDataInformation", self._encode(request))

        if is_error_reply(reply):
            raise APIError(reply.get("errormessage", ""))
        return reply["response"]

    def post(self, request_body: str) -> Any:
        """Send an already-encoded command envelope to ``ExecuteCommand``.

        The decoded reply is returned as-is; callers check ``errorcode``.
        """
        with with_context(operation="post"):
            logger.info("Executing command")
            response = self.session.post(
                self.config.get_service_url("ExecuteCommand"),
                data=json.dumps({"JsonRequest": request_body}),
                headers={"Content-Type": "application/json"},
                timeout=self.config.timeout,
            )
            response.raise_for_status()
            return self._decode(response.text)

    def login(self, codice_fiscale: str, codice_utente: str, password: str) -> dict[str, Any]:
        """Authenticate a student and return the session plus profile.

        Args:
            codice_fiscale: School fiscal code
            codice_utente: Student user code
            password: Student password

        Returns:
            ``{"usersession", "studente": {...}, "attivo"}``

        Raises:
            AuthenticationError: If the vendor rejects the credentials
        """
        credentials = {
            "sCodiceFiscale": codice_fiscale,
            "sUserName": codice_utente,
            "sPassword": password,
            "sAppName": LOGIN_APP_NAME,
            "sVendorToken": self.config.vendor_token,
        }

        with with_context(operation="login", codice_fiscale=codice_fiscale):
            logger.info("Logging in")
            reply = self._retrieve("Login2", self._encode(credentials, LOGIN_PERCENT_LAYERS))

            if reply.get("errormessage"):
                logger.warning("Login rejected")
                raise AuthenticationError(
                    f'Axios ha risposto con un errore: "{reply["errormessage"]}"'
                )

        profile = reply["response"]
        return {
            "usersession": profile.get("usersession"),
            "studente": {
                "nome": to_title_case(profile.get("nome") or ""),
                "cognome": to_title_case(profile.get("cognome") or ""),
                "dataNascita": profile.get("dataNascita"),
                "QRCode": profile.get("sQR"),
                "idAlunno": profile.get("idAlunno"),
                "pin": {
                    "SD": profile.get("userPinSd"),
                    "RE": profile.get("userPinRe"),
                },
            },
            "attivo": profile.get("utenteAttivo"),
        }
