"""Small conversions shared by the endpoint parsers.

The vendor encodes enumerations as single letters, booleans as per-field
sentinel strings, and dates and times as one space-separated string. These
helpers undo each of those conventions without guessing: anything they do not
recognise is returned unchanged or raises.
"""

from __future__ import annotations

import math
import re
from itertools import groupby
from typing import Any, Callable, Iterable, Sequence, TypeVar

from ..errors import MalformedResponseError

T = TypeVar("T")

_HTML_TAG = re.compile(r"<(.*?)>")
_BOLD = re.compile(r"<b>(.*?)</b>")
_WORD = re.compile(r"\w\S*")

# Separates the bold label from the body in note-like rich text fields
LABEL_SEPARATOR = "</span>&nbsp;"


def convert_lookup(code: Any, codes: Sequence[Any], labels: Sequence[Any]) -> Any:
    """Translate a vendor code to its label using parallel tables.

    The first position where ``code`` appears in ``codes`` selects the label.
    Unknown codes are returned unchanged; a match past the end of ``labels``
    gives ``None``.
    """
    try:
        index = list(codes).index(code)
    except ValueError:
        return code
    return labels[index] if index < len(labels) else None


def loose_equals(value: Any, other: Any) -> bool:
    """Equality that treats a number and its string form as equal (``1 == "1"``)."""
    if value == other:
        return True
    if isinstance(value, str) != isinstance(other, str):
        number, text = (other, value) if isinstance(value, str) else (value, other)
        if isinstance(number, (int, float)):
            return to_number(text) == number
    return False


def to_bool(value: Any, true_value: Any = "True") -> bool:
    """Return True iff ``value`` equals the field's true sentinel.

    Sentinels differ per field (``"True"``, ``"1"``, ``"S"``, ``"true"``) and
    string comparison is case-sensitive.
    """
    return loose_equals(value, true_value)


def split_date_time(value: str) -> list[str]:
    """Split ``"dd/mm/yyyy hh:mm:ss"`` on the first space.

    >>> split_date_time("27/11/2025 08:15:45")
    ['27/11/2025', '08:15:45']
    >>> split_date_time("27/11/2025")
    ['27/11/2025']
    """
    return value.split(" ", 1)


def date_time_pair(value: str) -> list[str | None]:
    """``split_date_time`` padded to exactly ``[date, time]``; time is None when absent."""
    parts = split_date_time(value)
    return [parts[0], parts[1] if len(parts) > 1 else None]


def remove_seconds(value: Any) -> Any:
    """Reduce ``HH:MM:SS`` to ``HH:MM``; any other shape is returned as is."""
    if not isinstance(value, str):
        return value
    parts = value.split(":")
    if len(parts) != 3:
        return value
    return ":".join(parts[:2])


def remove_html_tags(text: str) -> str:
    """Strip every ``<...>`` tag on a single line, keeping entities and inner text.

    Tags broken across lines are left in place.
    """
    return _HTML_TAG.sub("", text)


def to_title_case(text: str) -> str:
    """Capitalize the first letter of each word and lower-case the rest."""
    return _WORD.sub(lambda m: m.group(0)[0].upper() + m.group(0)[1:].lower(), text)


def extract_bold_label(html: Any) -> tuple[str, str]:
    """Split ``<b>Label</b></span>&nbsp;Body`` into ``("Label", "Body")``.

    Raises:
        MalformedResponseError: If the bold label or the separator is missing
    """
    if not isinstance(html, str):
        raise MalformedResponseError(f"Expected rich text, got {type(html).__name__}")

    match = _BOLD.search(html)
    if match is None:
        raise MalformedResponseError(f"No <b> label in {html!r}")

    parts = html.split(LABEL_SEPARATOR)
    if len(parts) < 2:
        raise MalformedResponseError(f"No {LABEL_SEPARATOR!r} separator in {html!r}")

    return match.group(1), parts[1].strip()


def group_by_adjacent(items: Iterable[T], key: Callable[[T], Any]) -> list[list[T]]:
    """Group consecutive items sharing the same key, preserving order.

    A key seen again after a different one starts a new group.
    """
    return [list(group) for _, group in groupby(items, key=key)]


def split_at_marker(
    items: Iterable[T], marker: Callable[[T], Any], value: Any
) -> tuple[list[T], list[T]]:
    """Partition items at the first one whose marker equals ``value``.

    Returns:
        ``(before, from_first_match)``; ``(all, [])`` if no item matches
    """
    items = list(items)
    for index, item in enumerate(items):
        if loose_equals(marker(item), value):
            return items[:index], items[index:]
    return items, []


def to_number(value: Any) -> int | float:
    """Parse a vendor numeric string; empty means 0, garbage means NaN."""
    if isinstance(value, (int, float)):
        return value
    if value is None:
        return math.nan

    text = str(value).strip()
    if not text:
        return 0
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        return math.nan


def floor_average(values: Sequence[float]) -> float:
    """Mean of ``values`` floored to two decimals; NaN when there are none."""
    if not values:
        return math.nan
    mean = sum(values) / len(values)
    if not math.isfinite(mean):
        return mean
    return math.floor(mean * 100) / 100
