"""School announcements (comunicazioni) with their attachments."""

from typing import Any, Optional

from .helpers import convert_lookup, remove_html_tags, to_bool
from .models import RawComunicazione

KIND_CODES = ("1", "4", "5")
KIND_LABELS = ("Circolare", "Scuola/Famiglia", "Comunicazione")

OPTIONS_SEPARATOR = "|"


def parse_comunicazioni(
    raw_data: list[dict[str, Any]], id_alunno: Optional[str]
) -> list[dict[str, Any]]:
    """Normalize announcements.

    ``id_alunno`` is attached to every record because marking an
    announcement as read, or replying to it, needs the student id alongside
    the announcement id.
    """
    result = []

    for item in raw_data:
        record = RawComunicazione.model_validate(item)
        result.append({
            "data": record.data,
            "titolo": record.titolo,
            "testo": remove_html_tags(record.desc),
            "id": record.id,
            "idAlunno": id_alunno,
            "tipo": convert_lookup(record.tipo, KIND_CODES, KIND_LABELS),
            "letta": to_bool(record.letta, "S"),
            "allegati": [
                {"nome": allegato.sourceName, "desc": allegato.desc, "downloadLink": allegato.URL}
                for allegato in record.allegati
            ],
            "prevedeRisposta": not to_bool(record.tipo_risposta, "0"),
            "opzioniRisposta": record.opzioni.split(OPTIONS_SEPARATOR),
        })

    return result
