"""Unit tests for the HTTP transport client."""

import json
from unittest.mock import MagicMock

import pytest
import requests

from axioscloud.client import AxiosClient, is_error_reply
from axioscloud.codec import decode, encode
from axioscloud.errors import APIError, AuthenticationError, TransportDecodingError

TEST_RC4_KEY = "test-rc4-key"
TEST_VENDOR_TOKEN = "00000000-0000-0000-0000-000000000000"

pytestmark = pytest.mark.unit


SAMPLE_STUDENT_INFO = {
    "CodiceFiscale": "80012345678",
    "SessionGuid": "6f1c2e4a-0000-4b7e-9d3a-123456789abc",
    "VendorToken": TEST_VENDOR_TOKEN,
}

SAMPLE_LOGIN_REPLY = {
    "errorcode": 0,
    "errormessage": "",
    "response": {
        "usersession": "6f1c2e4a-0000-4b7e-9d3a-123456789abc",
        "nome": "GIULIA MARIA",
        "cognome": "DE ROSSI",
        "dataNascita": "03/04/2009",
        "sQR": "QR-123",
        "idAlunno": "1234567",
        "userPinSd": "1111",
        "userPinRe": "2222",
        "utenteAttivo": "True",
    },
}


def _response(reply, headers=None):
    response = MagicMock()
    response.text = json.dumps(encode(reply, key=TEST_RC4_KEY))
    response.headers = headers or {}
    return response


def _session(reply):
    session = MagicMock()
    session.get.return_value = _response(reply)
    session.post.return_value = _response(reply)
    return session


def _sent_envelope(session):
    url = session.get.call_args.args[0]
    return url.split("?json=", 1)[1]


class TestIsErrorReply:
    """Tests for is_error_reply."""

    def test_numeric_and_string_codes(self):
        """Both -1 and "-1" mark an error."""
        assert is_error_reply({"errorcode": -1})
        assert is_error_reply({"errorcode": "-1"})

    def test_success_codes(self):
        """Anything else is not an error."""
        assert not is_error_reply({"errorcode": 0})
        assert not is_error_reply({})
        assert not is_error_reply(None)
        assert not is_error_reply(["errorcode"])


class TestGet:
    """Tests for AxiosClient.get."""

    def test_returns_response_field(self, client_config):
        """The decoded reply's response field should be returned."""
        session = _session({"errorcode": 0, "response": [{"idVoto": "1"}]})
        client = AxiosClient(client_config, session)

        assert client.get("GET_VOTI_LIST_DETAIL", SAMPLE_STUDENT_INFO) == [{"idVoto": "1"}]

    def test_request_envelope(self, client_config):
        """The request should carry the student info and the service command."""
        session = _session({"errorcode": 0, "response": []})
        client = AxiosClient(client_config, session)

        client.get("GET_TIMELINE", SAMPLE_STUDENT_INFO, "FAM", {"dataGiorno": "01/12/2025"})

        url = session.get.call_args.args[0]
        assert url.startswith("https://axios.test/ws/RetrieveDataInformation?json=")
        assert decode(_sent_envelope(session), False, key=TEST_RC4_KEY) == {
            "sCodiceFiscale": "80012345678",
            "sSessionGuid": "6f1c2e4a-0000-4b7e-9d3a-123456789abc",
            "sCommandJSON": {
                "sApplication": "FAM",
                "sService": "GET_TIMELINE",
                "data": {"dataGiorno": "01/12/2025"},
            },
            "sVendorToken": TEST_VENDOR_TOKEN,
        }

    def test_default_data_is_empty_object(self, client_config):
        """Services without parameters should send an empty data object."""
        session = _session({"errorcode": 0, "response": []})
        AxiosClient(client_config, session).get("GET_NOTE_MASTER", SAMPLE_STUDENT_INFO)

        sent = decode(_sent_envelope(session), False, key=TEST_RC4_KEY)
        assert sent["sCommandJSON"]["data"] == {}

    def test_headers_and_timeout(self, client_config):
        """Requests should identify the mobile app and use the configured timeout."""
        session = _session({"errorcode": 0, "response": []})
        AxiosClient(client_config, session).get("GET_NOTE_MASTER", SAMPLE_STUDENT_INFO)

        kwargs = session.get.call_args.kwargs
        assert kwargs["headers"] == {"X-Requested-With": "com.axiositalia.re.students"}
        assert kwargs["timeout"] == 5.0

    def test_error_reply_raises(self, client_config):
        """errorcode -1 should raise APIError with the vendor message."""
        session = _session({"errorcode": -1, "errormessage": "Sessione scaduta"})
        client = AxiosClient(client_config, session)

        with pytest.raises(APIError) as exc_info:
            client.get("GET_NOTE_MASTER", SAMPLE_STUDENT_INFO)

        assert exc_info.value.message == "Sessione scaduta"
        assert str(exc_info.value) == 'Axios ha risposto con un errore: "Sessione scaduta"'

    def test_http_error_propagates(self, client_config):
        """HTTP failures should surface as requests.HTTPError."""
        session = _session({})
        session.get.return_value.raise_for_status.side_effect = requests.HTTPError("500")

        with pytest.raises(requests.HTTPError):
            AxiosClient(client_config, session).get("GET_NOTE_MASTER", SAMPLE_STUDENT_INFO)

    def test_garbage_body_raises(self, client_config):
        """A body that is not an envelope should raise TransportDecodingError."""
        session = _session({})
        session.get.return_value.text = "<html>Service Unavailable</html>"

        with pytest.raises(TransportDecodingError):
            AxiosClient(client_config, session).get("GET_NOTE_MASTER", SAMPLE_STUDENT_INFO)


class TestPost:
    """Tests for AxiosClient.post."""

    def test_wraps_body_and_returns_decoded_reply(self, client_config):
        """The envelope should be sent as JsonRequest and the reply returned whole."""
        reply = {"errorcode": 0, "response": None}
        session = _session(reply)

        assert AxiosClient(client_config, session).post("ENVELOPE") == reply

        call = session.post.call_args
        assert call.args[0] == "https://axios.test/ws/ExecuteCommand"
        assert json.loads(call.kwargs["data"]) == {"JsonRequest": "ENVELOPE"}
        assert call.kwargs["headers"] == {"Content-Type": "application/json"}

    def test_error_reply_is_not_raised(self, client_config):
        """post leaves errorcode handling to the caller."""
        reply = {"errorcode": -1, "errormessage": "Errore"}
        assert AxiosClient(client_config, _session(reply)).post("ENVELOPE") == reply


class TestLogin:
    """Tests for AxiosClient.login."""

    def test_profile_shape(self, client_config):
        """The profile should be reshaped and names title-cased."""
        result = AxiosClient(client_config, _session(SAMPLE_LOGIN_REPLY)).login(
            "80012345678", "1234567", "secret"
        )

        assert result == {
            "usersession": "6f1c2e4a-0000-4b7e-9d3a-123456789abc",
            "studente": {
                "nome": "Giulia Maria",
                "cognome": "De Rossi",
                "dataNascita": "03/04/2009",
                "QRCode": "QR-123",
                "idAlunno": "1234567",
                "pin": {"SD": "1111", "RE": "2222"},
            },
            "attivo": "True",
        }

    def test_credentials_envelope(self, client_config):
        """Credentials should go to Login2, percent-encoded twice."""
        session = _session(SAMPLE_LOGIN_REPLY)
        AxiosClient(client_config, session).login("80012345678", "1234567", "secret")

        url = session.get.call_args.args[0]
        assert url.startswith("https://axios.test/ws/Login2?json=")

        credentials = {
            "sCodiceFiscale": "80012345678",
            "sUserName": "1234567",
            "sPassword": "secret",
            "sAppName": "ALU_APP",
            "sVendorToken": TEST_VENDOR_TOKEN,
        }
        assert _sent_envelope(session) == encode(credentials, 2, key=TEST_RC4_KEY)

    def test_rejected_credentials(self, client_config):
        """A reply with an error message should raise AuthenticationError."""
        session = _session({"errorcode": -1, "errormessage": "Credenziali errate"})

        with pytest.raises(AuthenticationError, match="Credenziali errate"):
            AxiosClient(client_config, session).login("80012345678", "1234567", "wrong")
