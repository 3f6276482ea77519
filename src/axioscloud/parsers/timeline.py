"""Daily timeline: the events of one day plus running totals."""

from typing import Any

from .assenze import ABSENCE_CODES, ABSENCE_LABELS
from .helpers import convert_lookup, extract_bold_label
from .models import RawTimeline, RawTimelineEvent
from .note import NOTE_TARGET_CODES, NOTE_TARGET_LABELS
from .voti import GRADE_KIND_CODES, GRADE_KIND_LABELS

EVENT_CODES = ("C", "L", "M", "N", "A", "V")
EVENT_LABELS = ("Comunicazione", "Argomento", "Compito", "Nota", "Assenza", "Voto")

# Event type -> subtype lookup tables
SUBTYPE_TABLES = {
    "A": (ABSENCE_CODES, ABSENCE_LABELS),
    "V": (GRADE_KIND_CODES, GRADE_KIND_LABELS),
    "N": (NOTE_TARGET_CODES, NOTE_TARGET_LABELS),
}

HOMEWORK_EVENT = "M"
NOTE_EVENT = "N"
TEST_MARKER = "<b>Verifica</b>"
TEST_SUBTYPE = "Verifica"


def _parse_event(event: RawTimelineEvent) -> dict[str, Any]:
    subtipo: Any = ""
    descrizione = event.desc.notes
    titolo = event.desc.title
    sottotitolo = event.desc.subtitle

    if event.type in SUBTYPE_TABLES:
        codes, labels = SUBTYPE_TABLES[event.type]
        subtipo = convert_lookup(event.subType, codes, labels)
    elif event.type == HOMEWORK_EVENT and descrizione and TEST_MARKER in descrizione:
        # Homework flagged as a test
        subtipo = TEST_SUBTYPE
        descrizione = descrizione.replace(TEST_MARKER, "", 1).strip()

    if event.type == NOTE_EVENT:
        titolo, sottotitolo = extract_bold_label(event.desc.subtitle)

    return {
        "data": event.data,
        "tipo": convert_lookup(event.type, EVENT_CODES, EVENT_LABELS),
        "subTipo": subtipo,
        "id": event.id,
        "ora": [event.oralez, event.ora],
        "titolo": titolo,
        "sottoTitolo": sottotitolo,
        "descrizione": descrizione,
    }


def parse_timeline(raw_data: dict[str, Any]) -> dict[str, Any]:
    """Normalize one day of the timeline.

    Args:
        raw_data: The first element of the vendor GET_TIMELINE response

    Returns:
        ``{"oggi": [...events], "dati": {...totals}}``

    Raises:
        MalformedResponseError: If a note event subtitle lacks the bold label
    """
    timeline = RawTimeline.model_validate(raw_data)
    totali = timeline.totali

    return {
        "oggi": [_parse_event(event) for event in timeline.today],
        "dati": {
            "media": timeline.media_a,
            "assenzeTot": totali.assenze_totali,
            "assenzeDaGiust": totali.assenze_da_giust,
            "ritardiTot": totali.ritardi_totali,
            "ritardiDaGiust": totali.ritardi_da_giust,
            "usciteTot": totali.uscite_totali,
            "usciteDaGiust": totali.uscite_da_giust,
        },
    }
