"""Absences, late entries and early exits per school period."""

from typing import Any

from .helpers import convert_lookup, remove_seconds, to_bool
from .models import RawAssenzePeriodo

ABSENCE_CODES = ("T", "A", "U", "R", "E")
ABSENCE_LABELS = ("Tutte", "Assenza", "Uscita anticipata", "Ritardo", "Rientri")

JUSTIFIED_BY_CODES = ("1", "2")
JUSTIFIED_BY_LABELS = ("Genitore/Tutore", "Docente")


def parse_assenze(raw_data: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Normalize absence records, keeping the per-period grouping."""
    result = []

    for item in raw_data:
        period = RawAssenzePeriodo.model_validate(item)
        assenze = []

        for assenza in period.assenze:
            assenze.append({
                "id": assenza.id,
                "data": assenza.data,
                "tipo": convert_lookup(assenza.tipo, ABSENCE_CODES, ABSENCE_LABELS),
                # Lesson hour and time are only set for late entries and early exits
                "ora": assenza.oralez or "",
                "orario": remove_seconds(assenza.ora) if assenza.ora else "",
                "motivo": assenza.motivo,
                "calcolata": to_bool(assenza.calcolata, "1"),
                "giustificabile": to_bool(assenza.giustificabile, "1"),
                "giustificata": not to_bool(assenza.tipogiust, "0"),
                "giustificataDa": convert_lookup(
                    assenza.tipogiust, JUSTIFIED_BY_CODES, JUSTIFIED_BY_LABELS
                ),
                "giustficataData": assenza.datagiust,
            })

        result.append({"quadrimestre": period.descFrazione, "assenze": assenze})

    return result
