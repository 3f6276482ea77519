"""Unicode-safe base64 helpers.

Text is always UTF-8 encoded before base64. On the way back the service has
historically also produced the narrower one-byte-per-character form, so
decoding falls back to latin-1 instead of failing on invalid UTF-8.
"""

from __future__ import annotations

import base64


def to_base64_safe(value: str | bytes) -> str:
    """Encode text (as UTF-8) or raw bytes to base64."""
    if isinstance(value, str):
        value = value.encode("utf-8")
    return base64.b64encode(value).decode("ascii")


def from_base64_safe_bytes(text: str) -> bytes:
    """Decode base64 to raw bytes.

    Raises:
        binascii.Error: If ``text`` is not valid base64
    """
    return base64.b64decode(text, validate=True)


def bytes_to_text(data: bytes) -> str:
    """Decode bytes as UTF-8, falling back to one byte per character."""
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        return data.decode("latin-1")


def from_base64_safe(text: str) -> str:
    """Decode base64 produced by :func:`to_base64_safe` back to text."""
    return bytes_to_text(from_base64_safe_bytes(text))
