"""School career history (curriculum)."""

from typing import Any

from .helpers import to_number
from .models import RawCurriculum


def parse_curriculum(raw_data: list[dict[str, Any]]) -> list[dict[str, Any]]:
    result = []

    for item in raw_data:
        record = RawCurriculum.model_validate(item)
        result.append({
            "codiceMeccanografico": record.idPlesso,
            "scuola": record.descScuola,
            "indirizzo": record.descCorso,
            "annoScolastico": record.annoScolastico.split("/"),
            "classe": record.classe,
            "sezione": record.sezione,
            "esito": record.descEsito,
            # Years without an assigned credit report an empty string
            "crediti": 0 if record.credito == "" else to_number(record.credito),
        })

    return result
