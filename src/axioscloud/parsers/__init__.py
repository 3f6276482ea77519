"""Normalizers turning raw vendor records into the public data shapes."""

from .argomenti import parse_argomenti
from .assenze import parse_assenze
from .compiti import parse_compiti, parse_verifiche
from .comunicazioni import parse_comunicazioni
from .curriculum import parse_curriculum
from .note import parse_note
from .orario import parse_orario
from .pagella import parse_pagella
from .permessi import parse_permessi
from .studente import parse_studente
from .timeline import parse_timeline
from .voti import parse_voti

__all__ = [
    "parse_argomenti",
    "parse_assenze",
    "parse_compiti",
    "parse_comunicazioni",
    "parse_curriculum",
    "parse_note",
    "parse_orario",
    "parse_pagella",
    "parse_permessi",
    "parse_studente",
    "parse_timeline",
    "parse_verifiche",
    "parse_voti",
]
