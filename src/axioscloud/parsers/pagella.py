"""End-of-period report cards (pagella)."""

from typing import Any, Optional

from .helpers import floor_average, remove_html_tags, to_bool, to_number
from .models import RawPagellaPeriodo, RawSchedaCarenza


def _parse_debito(scheda: Optional[RawSchedaCarenza]) -> dict[str, Any]:
    if scheda is None:
        return {}
    return {
        "motivo": scheda.motivo,
        "argomenti": scheda.rilevate,
        "modRecupero": scheda.modalitaRecupero,
        "tipoVerifica": scheda.verifica,
        "dataVerifica": scheda.dataVerifica,
        "argVerifica": scheda.verificaArgomenti,
        "giudizioVerifica": scheda.verificaGiudizio,
    }


def parse_pagella(raw_data: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Normalize report cards, one entry per school period.

    ``voto`` is the final mark of each subject as the vendor sends it. The
    period ``media`` is the mean of those marks floored to two decimals, and
    is NaN for a period with no subjects. A subject with a learning-gap sheet
    (``schedaCarenza``) gets it as ``debito``; otherwise ``debito`` is empty.
    """
    result = []

    for item in raw_data:
        period = RawPagellaPeriodo.model_validate(item)

        materie = [
            {
                "materia": materia.descMat,
                "voto": materia.mediaVoti,
                "debito": _parse_debito(materia.schedaCarenza),
                "giudizio": materia.giudizio,
                "assenze": to_number(materia.assenze),
            }
            for materia in period.materie
        ]
        voti = [to_number(materia.mediaVoti) for materia in period.materie]

        result.append({
            "quadrimestre": period.descFrazione,
            "media": floor_average(voti),
            "esito": period.esito,
            "giudizio": remove_html_tags(period.giudizio),
            "materie": materie,
            "dataVisualizzazione": period.dataVisualizzazione,
            "URL": period.URL,
            "letta": to_bool(period.letta, "S"),
            "visibile": to_bool(period.visibile, "true"),
        })

    return result
