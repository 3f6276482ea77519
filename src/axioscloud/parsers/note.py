"""Disciplinary notes per school period."""

from typing import Any

from .helpers import convert_lookup, extract_bold_label, split_date_time, to_bool
from .models import RawNotePeriodo

NOTE_TARGET_CODES = ("C", "S")
NOTE_TARGET_LABELS = ("Classe", "Studente")


def parse_note(raw_data: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Normalize disciplinary notes, keeping the per-period grouping.

    Note bodies are rich text of the form
    ``<span><b>Kind</b></span>&nbsp;Text``; the bold label becomes
    ``tipoNota`` and the trailing text becomes ``nota``.

    Raises:
        MalformedResponseError: If a note body lacks the expected markup
    """
    result = []

    for item in raw_data:
        period = RawNotePeriodo.model_validate(item)
        note = []

        for nota in period.note:
            label, text = extract_bold_label(nota.descNota)
            note.append({
                "data": nota.data,
                "tipo": convert_lookup(nota.tipo, NOTE_TARGET_CODES, NOTE_TARGET_LABELS),
                "tipoNota": label,
                "docente": nota.descDoc,
                "nota": text,
                "letta": to_bool(nota.isLetta, "True"),
                "lettaDa": nota.vistatoUtente,
                "lettaIl": split_date_time(nota.vistatoData),
            })

        result.append({"quadrimestre": period.descFrazione, "note": note})

    return result
