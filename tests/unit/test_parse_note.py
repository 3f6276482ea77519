"""Unit tests for the disciplinary notes normalizer."""

import pytest

from axioscloud.errors import MalformedResponseError
from axioscloud.parsers import parse_note

pytestmark = pytest.mark.unit


SAMPLE_NOTE = [
    {
        "descFrazione": "PRIMO QUADRIMESTRE",
        "note": [
            {
                "id": "4001",
                "data": "15/01/2026",
                "tipo": "C",
                "descNota": "<b>Disciplinare</b></span>&nbsp;Comportamento scorretto durante la lezione",
                "descDoc": "Prof. Rossi",
                "isLetta": "True",
                "vistatoUtente": "Genitore Mario",
                "vistatoData": "16/01/2026 08:30:00",
            },
            {
                "id": "4002",
                "data": "20/01/2026",
                "tipo": "S",
                "descNota": "<b>Positiva</b></span>&nbsp;Ottima partecipazione alle attività",
                "descDoc": "Prof. Bianchi",
                "isLetta": "True",
                "vistatoUtente": "Genitore Mario",
                "vistatoData": "20/01/2026 14:00:00",
            },
        ],
    },
    {
        "descFrazione": "SECONDO QUADRIMESTRE",
        "note": [
            {
                "id": "4003",
                "data": "10/03/2026",
                "tipo": "S",
                "descNota": "<b>Ammonizione</b></span>&nbsp;Ritardo ripetuto",
                "descDoc": "Prof. Verdi",
                "isLetta": "False",
                "vistatoUtente": "",
                "vistatoData": "",
            }
        ],
    },
]


class TestParseNote:
    """Tests for parse_note."""

    def test_keeps_periods(self):
        """Notes should stay grouped by school period."""
        result = parse_note(SAMPLE_NOTE)
        assert [p["quadrimestre"] for p in result] == ["PRIMO QUADRIMESTRE", "SECONDO QUADRIMESTRE"]
        assert [len(p["note"]) for p in result] == [2, 1]

    def test_full_record(self):
        """A read note should be fully normalized."""
        nota = parse_note(SAMPLE_NOTE)[0]["note"][0]
        assert nota == {
            "data": "15/01/2026",
            "tipo": "Classe",
            "tipoNota": "Disciplinare",
            "docente": "Prof. Rossi",
            "nota": "Comportamento scorretto durante la lezione",
            "letta": True,
            "lettaDa": "Genitore Mario",
            "lettaIl": ["16/01/2026", "08:30:00"],
        }

    def test_student_note(self):
        """Target 'S' should map to Studente."""
        nota = parse_note(SAMPLE_NOTE)[0]["note"][1]
        assert nota["tipo"] == "Studente"
        assert nota["tipoNota"] == "Positiva"
        assert nota["nota"] == "Ottima partecipazione alle attività"

    def test_unread_note(self):
        """An unread note should have no reader and an empty read date."""
        nota = parse_note(SAMPLE_NOTE)[1]["note"][0]
        assert nota["letta"] is False
        assert nota["lettaDa"] == ""
        assert nota["lettaIl"] == [""]

    def test_missing_markup(self):
        """A note body without the bold label should raise MalformedResponseError."""
        raw = [{"descFrazione": "P1", "note": [{"descNota": "testo libero", "vistatoData": ""}]}]
        with pytest.raises(MalformedResponseError):
            parse_note(raw)

    def test_none_fails(self):
        """None should fail loudly."""
        with pytest.raises(TypeError):
            parse_note(None)
