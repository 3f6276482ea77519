"""Lesson topics (argomenti) grouped by lesson day."""

from typing import Any, Optional

from .helpers import date_time_pair, group_by_adjacent, split_date_time
from .models import RawArgomento


def parse_argomenti(raw_data: Optional[list[dict[str, Any]]]) -> list[list[dict[str, Any]]]:
    """Normalize lesson topics into one list per consecutive lesson day.

    The vendor returns topics as a flat, date-ordered list. Consecutive
    records sharing the date part of ``data`` form one group; the same date
    reappearing later starts a new group.

    Args:
        raw_data: Vendor topic records, or None

    Returns:
        List of day groups; empty when there is no data
    """
    if not raw_data:
        return []

    topics = []
    for item in raw_data:
        record = RawArgomento.model_validate(item)
        topics.append({
            "id": record.idArgomento,
            "materia": record.descMat,
            "argomento": record.descArgomenti,
            "ore": record.oreLezione.split("-"),
            "giorno": split_date_time(record.data)[0],
            "pubblicato": date_time_pair(record.data_pubblicazione),
        })

    return group_by_adjacent(topics, key=lambda topic: topic["giorno"])
