"""Weekly lesson timetable."""

from typing import Any

from .helpers import convert_lookup
from .models import RawOrarioGiorno

DAY_CODES = ("G1", "G2", "G3", "G4", "G5", "G6")
DAY_LABELS = ("Lunedì", "Martedì", "Mercoledì", "Giovedì", "Venerdì", "Sabato")


def parse_orario(raw_data: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Normalize the timetable; one entry per vendor day, in vendor order."""
    result = []

    for item in raw_data:
        day = RawOrarioGiorno.model_validate(item)
        result.append({
            "giorno": convert_lookup(day.giorno, DAY_CODES, DAY_LABELS),
            "orario": [
                {
                    "ora": materia.ora,
                    "durata": [materia.da, materia.a],
                    "materia": materia.descMat,
                    "docente": materia.descDoc,
                }
                for materia in day.materie
            ],
        })

    return result
