"""Grades (voti)."""

from typing import Any

from .helpers import convert_lookup
from .models import RawVotiPeriodo

GRADE_KIND_CODES = ("T", "S", "G", "O", "P", "A")
GRADE_KIND_LABELS = ("Tutti", "Scritto", "Grafico", "Orale", "Pratico", "Unico")


def parse_voti(raw_data: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Flatten grades across periods into a single list.

    Unlike absences and notes, the period grouping is dropped here.
    """
    result = []

    for item in raw_data:
        period = RawVotiPeriodo.model_validate(item)
        for voto in period.voti:
            result.append({
                "id": voto.idVoto,
                "materia": voto.descMat,
                "tipo": convert_lookup(voto.tipo, GRADE_KIND_CODES, GRADE_KIND_LABELS),
                "voto": voto.voto,
                "peso": voto.peso,
                "data": voto.data,
                "commento": voto.commento,
                "professore": voto.docente,
            })

    return result
