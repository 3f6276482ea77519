"""Homework (compiti) and scheduled tests (verifiche).

The vendor serves both in one list: all homework first, then every test
starting at the first record whose ``tipo_nota`` is 6.
"""

from typing import Any

from ..errors import MalformedResponseError
from .helpers import date_time_pair, split_at_marker, split_date_time
from .models import RawCompito

TEST_NOTE_TYPE = "6"
TEST_TITLE_END = "</b>"


def _split_records(raw_data: list[dict[str, Any]]) -> tuple[list[RawCompito], list[RawCompito]]:
    records = [RawCompito.model_validate(item) for item in raw_data]
    return split_at_marker(records, lambda record: record.tipo_nota, TEST_NOTE_TYPE)


def parse_compiti(raw_data: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Return the homework records preceding the first test."""
    compiti, _ = _split_records(raw_data)
    return [
        {
            "id": record.idCompito,
            "materia": record.descMat,
            "compito": record.descCompiti,
            "perGiorno": split_date_time(record.data)[0],
            "pubblicato": date_time_pair(record.data_pubblicazione),
        }
        for record in compiti
    ]


def parse_verifiche(raw_data: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Return the test records, from the first test to the end of the list.

    Test descriptions open with a bold title (``<b>Verifica</b> ...``); only
    the text after it is kept.

    Raises:
        MalformedResponseError: If a test description has no closing ``</b>``
    """
    _, verifiche = _split_records(raw_data)

    result = []
    for record in verifiche:
        parts = (record.descCompiti or "").split(TEST_TITLE_END)
        if len(parts) < 2:
            raise MalformedResponseError(
                f"Test {record.idCompito} has no {TEST_TITLE_END!r} in its description"
            )
        result.append({
            "materia": record.descMat,
            "verifica": parts[1].strip(),
            "perGiorno": split_date_time(record.data)[0],
            "pubblicato": date_time_pair(record.data_pubblicazione),
        })

    return result
