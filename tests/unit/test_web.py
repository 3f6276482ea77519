"""Unit tests for the web portal session exchange."""

import json
from unittest.mock import MagicMock

import pytest
import requests

from axioscloud.codec import decode, encode
from axioscloud.errors import AuthenticationError
from axioscloud.web import SSO_URL, extract_cookie, to_session_id

TEST_RC4_KEY = "test-rc4-key"

pytestmark = pytest.mark.unit


SAMPLE_RF_FORM = {
    "url": "https://registrofamiglie.axioscloud.it/Pages/SD/SD_Login.aspx",
    "parameters": "abc123",
    "action": "login",
}

SAMPLE_SD_FORM = {
    "url": "https://scuoladigitale.axioscloud.it/Pages/SD/SD_Login.aspx",
    "parameters": "def456",
    "action": "sso",
}


def _response(headers=None, text="", json_body=None):
    response = MagicMock()
    response.headers = headers or {}
    response.text = text
    response.json.return_value = json_body
    return response


def _session(rf_cookie="rf-cookie", sd_cookie="sd-cookie"):
    session = MagicMock()
    session.get.return_value = _response(
        text=json.dumps(encode({"errorcode": 0, "response": SAMPLE_RF_FORM}, key=TEST_RC4_KEY))
    )
    rf_headers = {"Set-Cookie": f"ASP.NET_SessionId={rf_cookie}; path=/; HttpOnly"} if rf_cookie else {}
    sd_headers = {"Set-Cookie": f"ASP.NET_SessionId={sd_cookie}; path=/; HttpOnly"} if sd_cookie else {}
    session.post.side_effect = [
        _response(headers=rf_headers),
        _response(json_body=SAMPLE_SD_FORM),
        _response(headers=sd_headers),
    ]
    return session


class TestExtractCookie:
    """Tests for extract_cookie."""

    def test_single_cookie(self):
        """The value should stop at the attribute separator."""
        assert extract_cookie("ASP.NET_SessionId=abc; path=/; HttpOnly", "ASP.NET_SessionId") == "abc"

    def test_among_others(self):
        """The named cookie should be found among several."""
        header = "lang=it; path=/, ASP.NET_SessionId=abc; path=/"
        assert extract_cookie(header, "ASP.NET_SessionId") == "abc"

    def test_list_of_headers(self):
        """Multiple header values should be searched together."""
        headers = ["lang=it; path=/", "ASP.NET_SessionId=abc; path=/"]
        assert extract_cookie(headers, "ASP.NET_SessionId") == "abc"

    def test_last_value_wins(self):
        """A cookie set twice should yield its last value."""
        assert extract_cookie("sid=old; path=/, sid=new; path=/", "sid") == "new"

    def test_exact_name(self):
        """A cookie whose name merely ends with the wanted one should not match."""
        assert extract_cookie("xsid=abc; path=/", "sid") is None

    def test_percent_decoded(self):
        """Values should be percent-decoded."""
        assert extract_cookie("token=a%2Fb%3D; path=/", "token") == "a/b="

    def test_missing(self):
        """Missing headers or names should give None."""
        assert extract_cookie("lang=it", "sid") is None
        assert extract_cookie(None, "sid") is None
        assert extract_cookie("", "sid") is None
        assert extract_cookie([], "sid") is None
        assert extract_cookie("sid=abc", "") is None


class TestToSessionId:
    """Tests for to_session_id."""

    def test_returns_final_cookie(self, client_config):
        """The Scuola Digitale cookie should be returned."""
        session = _session()
        assert to_session_id("80012345678", "usersession", client_config, session) == "sd-cookie"

    def test_url_web_request(self, client_config):
        """The first hop should ask the REST service for the signed form."""
        session = _session()
        to_session_id("80012345678", "usersession", client_config, session)

        url = session.get.call_args.args[0]
        prefix = "https://axios.test/ws/RetrieveDataInformation?json="
        assert url.startswith(prefix)
        assert decode(url[len(prefix):], False, key=TEST_RC4_KEY) == {
            "sCodiceFiscale": "80012345678",
            "sSessionGuid": "usersession",
            "sCommandJSON": {"sApplication": "FAM", "sService": "GET_URL_WEB"},
            "sVendorToken": client_config.vendor_token,
        }

    def test_hops(self, client_config):
        """Forms should be posted without following redirects, carrying the RF cookie."""
        session = _session()
        to_session_id("80012345678", "usersession", client_config, session)

        rf_post, sso_post, sd_post = session.post.call_args_list

        assert rf_post.args[0] == SAMPLE_RF_FORM["url"]
        assert rf_post.kwargs["data"] == {"parameters": "abc123", "action": "login"}
        assert rf_post.kwargs["allow_redirects"] is False

        assert sso_post.args[0] == SSO_URL
        assert sso_post.kwargs["headers"]["Cookie"] == "ASP.NET_SessionId=rf-cookie"

        assert sd_post.args[0] == SAMPLE_SD_FORM["url"]
        assert sd_post.kwargs["data"] == {"parameters": "def456", "action": "sso"}
        assert sd_post.kwargs["allow_redirects"] is False

    def test_missing_registro_famiglie_cookie(self, client_config):
        """A first hop without a session cookie should fail."""
        with pytest.raises(AuthenticationError, match="RF"):
            to_session_id("80012345678", "usersession", client_config, _session(rf_cookie=None))

    def test_missing_scuola_digitale_cookie(self, client_config):
        """A last hop without a session cookie should fail."""
        with pytest.raises(AuthenticationError, match="SD"):
            to_session_id("80012345678", "usersession", client_config, _session(sd_cookie=None))

    def test_http_error(self, client_config):
        """HTTP failures on any hop should propagate."""
        session = _session()
        session.get.return_value.raise_for_status.side_effect = requests.HTTPError("403")
        with pytest.raises(requests.HTTPError):
            to_session_id("80012345678", "usersession", client_config, session)
