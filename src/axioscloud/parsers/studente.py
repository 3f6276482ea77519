"""Student profile (studente)."""

from typing import Any

from .helpers import to_bool
from .models import RawStudente


def parse_studente(raw_data: dict[str, Any]) -> dict[str, Any]:
    """Normalize the student profile; feature flags use the ``'S'`` sentinel."""
    studente = RawStudente.model_validate(raw_data)
    return {
        "idAlunno": studente.idAlunno,
        "id": studente.userId,
        "cognome": studente.cognome,
        "nome": studente.nome,
        "sesso": studente.sesso,
        "dataNascita": studente.dataNascita,
        "avatar": studente.avatar,
        "idPlesso": studente.idPlesso,
        "security": studente.security,
        "flagGiustifica": to_bool(studente.flagGiustifica, "S"),
        "flagInvalsi": to_bool(studente.flagInvalsi, "S"),
        "flagDocumenti": to_bool(studente.flagDocumenti, "S"),
        "flagPagoScuola": to_bool(studente.flagPagoScuola, "S"),
        "flagConsiglioOrientamento": to_bool(studente.flagConsiglioOrientamento, "S"),
    }
