"""Leave requests and permissions (permessi)."""

from typing import Any

from .helpers import convert_lookup, remove_seconds, split_date_time, to_bool
from .models import RawPermessi, RawPermesso

PERMISSION_CODES = ("A", "U", "E", "G", "D")
PERMISSION_LABELS = (
    "Assenza",
    "Uscita Anticipata",
    "Entrata Posticipata",
    "Uscita Didattica",
    "DaD (Didattica a distanza)",
)

# Requests are raised by adult students, permissions by their families
CATEGORIES = (
    "richiesteDaAutorizzare",
    "richiesteNonAutorizzate",
    "permessiDaAutorizzare",
    "permessiAutorizzati",
)


def _parse_permesso(item: RawPermesso) -> dict[str, Any]:
    return {
        "id": item.id,
        "data": [item.dataInizio, item.dataFine],
        "tipo": convert_lookup(item.tipo, PERMISSION_CODES, PERMISSION_LABELS),
        # 0 means the whole day
        "ora": item.ora,
        "orario": remove_seconds(item.orario),
        "motivo": item.motivo,
        "note": item.note,
        "diClasse": to_bool(item.classe, "True"),
        "calcolata": to_bool(item.calcolo, "True"),
        "giustificata": to_bool(item.giustificato, "True"),
        "info": {
            "inseritoDa": item.utenteInserimento,
            "rispostoDa": item.utenteAutorizzazione,
            "rispostoIl": split_date_time(item.dataAutorizzazione),
        },
    }


def parse_permessi(raw_data: dict[str, Any]) -> dict[str, list[dict[str, Any]]]:
    """Normalize the four permission lists, keeping their keys."""
    permessi = RawPermessi.model_validate(raw_data)
    return {
        category: [_parse_permesso(item) for item in getattr(permessi, category)]
        for category in CATEGORIES
    }
