"""Pydantic models for raw vendor records.

Field names mirror the vendor payloads exactly. Every model ignores unknown
fields and accepts numbers where strings are expected, since the vendor mixes
``"5"`` and ``5`` for the same field across schools. Fields a parser calls
string methods on are required; fields that are only copied through are
optional.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class VendorRecord(BaseModel):
    """Base for all raw vendor records."""

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)


# Argomenti


class RawArgomento(VendorRecord):
    idArgomento: Optional[str] = None
    data: str
    descMat: Optional[str] = None
    descArgomenti: Optional[str] = None
    oreLezione: str
    data_pubblicazione: str


# Assenze


class RawAssenza(VendorRecord):
    id: Optional[str] = None
    data: Optional[str] = None
    tipo: Optional[str] = None
    oralez: Optional[str] = None
    ora: Optional[str] = None
    motivo: Optional[str] = None
    calcolata: Optional[str] = None
    giustificabile: Optional[str] = None
    tipogiust: Optional[str] = None
    datagiust: Optional[str] = None


class RawAssenzePeriodo(VendorRecord):
    descFrazione: Optional[str] = None
    assenze: list[RawAssenza]


# Compiti and verifiche share one vendor list


class RawCompito(VendorRecord):
    idCompito: Optional[str] = None
    tipo_nota: Optional[str] = None
    data: str
    descMat: Optional[str] = None
    descCompiti: Optional[str] = None
    data_pubblicazione: str


# Comunicazioni


class RawAllegato(VendorRecord):
    sourceName: Optional[str] = None
    desc: Optional[str] = None
    URL: Optional[str] = None


class RawComunicazione(VendorRecord):
    id: Optional[str] = None
    data: Optional[str] = None
    titolo: Optional[str] = None
    desc: str
    tipo: Optional[str] = None
    allegati: list[RawAllegato]
    letta: Optional[str] = None
    opzioni: str
    tipo_risposta: Optional[str] = None


# Curriculum


class RawCurriculum(VendorRecord):
    idPlesso: Optional[str] = None
    descScuola: Optional[str] = None
    descCorso: Optional[str] = None
    annoScolastico: str
    classe: str
    sezione: Optional[str] = None
    descEsito: Optional[str] = None
    credito: Optional[str] = None


# Note


class RawNota(VendorRecord):
    data: Optional[str] = None
    tipo: Optional[str] = None
    descNota: str
    descDoc: Optional[str] = None
    isLetta: Optional[str] = None
    vistatoUtente: Optional[str] = None
    vistatoData: str


class RawNotePeriodo(VendorRecord):
    descFrazione: Optional[str] = None
    note: list[RawNota]


# Orario


class RawOrarioMateria(VendorRecord):
    ora: Optional[str] = None
    da: Optional[str] = None
    a: Optional[str] = None
    descMat: Optional[str] = None
    descDoc: Optional[str] = None


class RawOrarioGiorno(VendorRecord):
    giorno: Optional[str] = None
    materie: list[RawOrarioMateria]


# Pagella


class RawSchedaCarenza(VendorRecord):
    motivo: Optional[str] = None
    rilevate: Optional[str] = None
    modalitaRecupero: Optional[str] = None
    verifica: Optional[str] = None
    dataVerifica: Optional[str] = None
    verificaArgomenti: Optional[str] = None
    verificaGiudizio: Optional[str] = None


class RawPagellaMateria(VendorRecord):
    descMat: Optional[str] = None
    mediaVoti: Optional[str] = None
    giudizio: Optional[str] = None
    assenze: Optional[str] = None
    schedaCarenza: Optional[RawSchedaCarenza] = None


class RawPagellaPeriodo(VendorRecord):
    descFrazione: Optional[str] = None
    materie: list[RawPagellaMateria]
    esito: Optional[str] = None
    giudizio: str
    URL: Optional[str] = None
    letta: Optional[str] = None
    visibile: Optional[str] = None
    dataVisualizzazione: Optional[str] = None


# Permessi


class RawPermesso(VendorRecord):
    id: Optional[str] = None
    tipo: Optional[str] = None
    dataInizio: Optional[str] = None
    dataFine: Optional[str] = None
    ora: Optional[str] = None
    orario: Optional[str] = None
    motivo: Optional[str] = None
    note: Optional[str] = None
    classe: Optional[str] = None
    calcolo: Optional[str] = None
    giustificato: Optional[str] = None
    utenteInserimento: Optional[str] = None
    utenteAutorizzazione: Optional[str] = None
    dataAutorizzazione: str


class RawPermessi(VendorRecord):
    richiesteDaAutorizzare: list[RawPermesso]
    richiesteNonAutorizzate: list[RawPermesso]
    permessiDaAutorizzare: list[RawPermesso]
    permessiAutorizzati: list[RawPermesso]


# Studente


class RawStudente(VendorRecord):
    idAlunno: Optional[str] = None
    userId: Optional[str] = None
    cognome: Optional[str] = None
    nome: Optional[str] = None
    sesso: Optional[str] = None
    dataNascita: Optional[str] = None
    avatar: Optional[str] = None
    idPlesso: Optional[str] = None
    security: Optional[str] = None
    flagGiustifica: Optional[str] = None
    flagInvalsi: Optional[str] = None
    flagDocumenti: Optional[str] = None
    flagPagoScuola: Optional[str] = None
    flagConsiglioOrientamento: Optional[str] = None


# Timeline


class RawTimelineDesc(VendorRecord):
    title: Optional[str] = None
    subtitle: Optional[str] = None
    notes: Optional[str] = None


class RawTimelineEvent(VendorRecord):
    id: Optional[str] = None
    type: Optional[str] = None
    subType: Optional[str] = None
    data: Optional[str] = None
    ora: Optional[str] = None
    oralez: Optional[str] = None
    desc: RawTimelineDesc


class RawTimelineTotali(VendorRecord):
    assenze_totali: Optional[str] = None
    assenze_da_giust: Optional[str] = None
    ritardi_totali: Optional[str] = None
    ritardi_da_giust: Optional[str] = None
    uscite_totali: Optional[str] = None
    uscite_da_giust: Optional[str] = None


class RawTimeline(VendorRecord):
    today: list[RawTimelineEvent]
    totali: RawTimelineTotali
    media_a: Optional[str] = None


# Voti


class RawVoto(VendorRecord):
    idVoto: Optional[str] = None
    descMat: Optional[str] = None
    tipo: Optional[str] = None
    voto: Optional[str] = None
    peso: Optional[str] = None
    data: Optional[str] = None
    commento: Optional[str] = None
    docente: Optional[str] = None


class RawVotiPeriodo(VendorRecord):
    descFrazione: Optional[str] = None
    voti: list[RawVoto]
