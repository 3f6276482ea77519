"""Session-aware facade over :class:`AxiosClient`.

Maps user-facing action names (``"voti"``, ``"note"``...) to vendor services,
digs the interesting part out of each reply and runs the matching normalizer.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import Any, Callable, Optional, Union

from . import web
from .client import AxiosClient, is_error_reply
from .codec import encode
from .errors import APIError, NotLoggedInError, UnsupportedActionError
from .logutils import get_logger, with_context
from .parsers import (
    parse_argomenti,
    parse_assenze,
    parse_compiti,
    parse_comunicazioni,
    parse_curriculum,
    parse_note,
    parse_orario,
    parse_pagella,
    parse_permessi,
    parse_studente,
    parse_timeline,
    parse_verifiche,
    parse_voti,
)

logger = get_logger(__name__)

APPLICATION = "FAM"
COMMAND_SERVICE = "APP_PROCESS_QUEUE"
ALREADY_READ = "Comunicazione già letta"

_WHITESPACE = re.compile(r"\s")


def _parse_comunicazioni_entry(entry: dict[str, Any]) -> list[dict[str, Any]]:
    return parse_comunicazioni(entry["comunicazioni"], entry.get("idAlunno"))


@dataclass(frozen=True)
class Action:
    """A vendor service, where its payload sits in the reply, and its normalizer."""

    service: str
    parser: Callable[[Any], Any]
    path: tuple[Union[int, str], ...] = ()

    def extract(self, raw: Any) -> Any:
        data = raw
        for step in self.path:
            data = data[step]
        return data


ACTIONS: dict[str, Action] = {
    "compiti": Action("GET_COMPITI_MASTER", parse_compiti, (0, "compiti")),
    "verifiche": Action("GET_COMPITI_MASTER", parse_verifiche, (0, "compiti")),
    "voti": Action("GET_VOTI_LIST_DETAIL", parse_voti),
    "comunicazioni": Action("GET_COMUNICAZIONI_MASTER", _parse_comunicazioni_entry, (0,)),
    "permessi": Action("GET_AUTORIZZAZIONI_MASTER", parse_permessi, (0,)),
    "orario": Action("GET_ORARIO_MASTER", parse_orario, (0, "orario")),
    "argomenti": Action("GET_ARGOMENTI_MASTER", parse_argomenti, (0, "argomenti")),
    "assenze": Action("GET_ASSENZE_MASTER", parse_assenze),
    "note": Action("GET_NOTE_MASTER", parse_note),
    "curriculum": Action("GET_CURRICULUM_MASTER", parse_curriculum, (0, "curriculum")),
    "pagella": Action("GET_PAGELLA_MASTER", parse_pagella),
    "studente": Action("GET_STUDENTI", parse_studente, (0,)),
}


def normalize_action(azione: str) -> str:
    """Lower-case an action name and drop all whitespace (``" Voti "`` -> ``"voti"``)."""
    return _WHITESPACE.sub("", azione.lower())


class AxiosAPI:
    """Logged-in view of the Axios service for a single student.

    Example:
        api = AxiosAPI()
        api.login("80012345678", "1234567", "password")
        voti = api.get("voti")
    """

    def __init__(self, client: Optional[AxiosClient] = None) -> None:
        self.client = client or AxiosClient()
        self.codice_fiscale: Optional[str] = None
        self.usersession: Optional[str] = None
        self.session_id: Optional[str] = None

    @property
    def is_logged_in(self) -> bool:
        return self.usersession is not None

    @property
    def is_web_logged_in(self) -> bool:
        return self.session_id is not None

    def login(self, codice_fiscale: str, codice_utente: str, password: str) -> dict[str, Any]:
        """Log in and remember the school code and session for later calls."""
        result = self.client.login(codice_fiscale, codice_utente, password)
        self.codice_fiscale = codice_fiscale
        self.usersession = result["usersession"]
        logger.info("Logged in", extra={"extra_data": {"codice_fiscale": codice_fiscale}})
        return result

    def _session(self, usersession: Optional[str]) -> str:
        session = usersession or self.usersession
        if not self.codice_fiscale or not session:
            raise NotLoggedInError("Effettuare il login prima di chiamare questo metodo.")
        return session

    def get_student_info(self, usersession: Optional[str] = None) -> dict[str, Any]:
        """Build the student descriptor every vendor request carries.

        Raises:
            NotLoggedInError: If there is no school code or session yet
        """
        return {
            "CodiceFiscale": self.codice_fiscale,
            "SessionGuid": self._session(usersession),
            "VendorToken": self.client.vendor_token,
        }

    def get(self, azione: str, usersession: Optional[str] = None) -> Any:
        """Fetch and normalize one kind of student data.

        Args:
            azione: Action name, case and whitespace insensitive
            usersession: Session to use instead of the stored one

        Raises:
            NotLoggedInError: If called before login
            UnsupportedActionError: If the action name is unknown
        """
        student_info = self.get_student_info(usersession)

        name = normalize_action(azione)
        action = ACTIONS.get(name)
        if action is None:
            raise UnsupportedActionError(f"Azione non supportata: {azione!r}")

        with with_context(operation=name, codice_fiscale=self.codice_fiscale):
            raw = self.client.get(action.service, student_info, APPLICATION)
            return action.parser(action.extract(raw))

    def get_timeline(self, data: str, usersession: Optional[str] = None) -> dict[str, Any]:
        """Fetch the timeline of one day (``dd/mm/yyyy``)."""
        student_info = self.get_student_info(usersession)

        with with_context(operation="timeline", codice_fiscale=self.codice_fiscale):
            raw = self.client.get("GET_TIMELINE", student_info, APPLICATION, {"dataGiorno": data})
            return parse_timeline(raw[0])

    def _command(self, module: str, data: Any, usersession: Optional[str]) -> Any:
        request = {
            "sCodiceFiscale": self.codice_fiscale,
            "sSessionGuid": self._session(usersession),
            "sCommandJSON": {
                "sApplication": APPLICATION,
                "sService": COMMAND_SERVICE,
                "sModule": module,
                "data": data,
            },
            "sVendorToken": self.client.vendor_token,
        }

        with with_context(operation=module.lower(), codice_fiscale=self.codice_fiscale):
            # Commands travel as bare base64, without percent-encoding
            reply = self.client.post(encode(request, 0, key=self.client.config.rc4_key))

        if is_error_reply(reply):
            raise APIError(reply.get("errormessage", ""))
        return reply

    def segna_comunicazione_letta(self, data: Any, usersession: Optional[str] = None) -> str:
        """Mark an announcement as read.

        Args:
            data: ``{"id": ..., "idAlunno": ...}`` as found in a normalized announcement

        Returns:
            The vendor reply serialized as JSON, or a fixed message when the
            announcement was already read
        """
        reply = self._command("COMUNICAZIONI_READ", data, usersession)
        response = reply.get("response") if isinstance(reply, dict) else reply
        if response is None:
            return ALREADY_READ
        return json.dumps(response, ensure_ascii=False)

    def rispondi_comunicazione(self, data: Any, usersession: Optional[str] = None) -> Any:
        """Reply to an announcement that expects an answer; returns the raw vendor reply."""
        return self._command("COMUNICAZIONI_RISPOSTA", data, usersession)

    def to_session_id(
        self, codice_fiscale: Optional[str] = None, usersession: Optional[str] = None
    ) -> str:
        """Exchange the mobile session for a Scuola Digitale web session cookie."""
        school = codice_fiscale or self.codice_fiscale
        session = usersession or self.usersession
        if not school or not session:
            raise NotLoggedInError("Effettuare il login prima di chiamare questo metodo.")

        self.session_id = web.to_session_id(
            school, session, config=self.client.config, session=self.client.session
        )
        return self.session_id
