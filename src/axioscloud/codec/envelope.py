"""Wire envelope used by every Axios request and response.

Encoding pipeline::

    JSON value -> compact JSON text -> UTF-8 -> RC4 -> base64 -> percent-encode (n times)

Decoding undoes it, except that the number of percent-encoding layers is not
known in advance: the wire string is unquoted until a pass changes nothing.
"""

from __future__ import annotations

import json
from typing import Any
from urllib.parse import quote, unquote

from ..config import get_config
from ..errors import TransportDecodingError
from ..logutils import get_logger
from .base64_safe import bytes_to_text, from_base64_safe_bytes, to_base64_safe
from .rc4 import normalize_key, rc4

logger = get_logger(__name__)

# Characters encodeURIComponent leaves alone besides letters, digits and "_.-~"
URI_COMPONENT_SAFE = "!*'()"

# Upper bound on unquote passes before the input is treated as garbage
MAX_UNQUOTE_PASSES = 16


def _resolve_key(key: str | bytes | None) -> bytes:
    return normalize_key(key if key is not None else get_config().rc4_key)


def encode(value: Any, layers: int = 1, *, key: str | bytes | None = None) -> str:
    """Encode a JSON-serializable value into a wire envelope.

    Args:
        value: Any JSON-serializable value
        layers: How many times to percent-encode the result (0 = none)
        key: RC4 key (defaults to the configured key)

    Returns:
        Envelope string; URL-safe whenever ``layers >= 1``
    """
    if layers < 0:
        raise ValueError(f"layers must be >= 0, got {layers}")

    payload = json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    encoded = to_base64_safe(rc4(_resolve_key(key), payload.encode("utf-8")))

    for _ in range(layers):
        encoded = quote(encoded, safe=URI_COMPONENT_SAFE)

    return encoded


def unquote_to_fixpoint(text: str, max_passes: int = MAX_UNQUOTE_PASSES) -> str:
    """Percent-decode ``text`` until a pass leaves it unchanged.

    Raises:
        TransportDecodingError: If no fixpoint is reached within ``max_passes``
    """
    for _ in range(max_passes):
        decoded = unquote(text)
        if decoded == text:
            return decoded
        text = decoded
    raise TransportDecodingError(
        f"Percent-decoding did not converge after {max_passes} passes"
    )


def decode(wire: str, json_wrapped: bool = True, *, key: str | bytes | None = None) -> Any:
    """Decode a wire envelope back into its JSON value.

    Args:
        wire: Envelope as received
        json_wrapped: The envelope is itself a JSON string literal (the
            shape of raw HTTP response bodies) and must be unwrapped first
        key: RC4 key (defaults to the configured key)

    Returns:
        The decoded JSON value

    Raises:
        TransportDecodingError: If any stage of the pipeline fails
    """
    secret = _resolve_key(key)

    try:
        if json_wrapped:
            wire = json.loads(wire)
            if not isinstance(wire, str):
                raise TransportDecodingError(
                    f"Expected a JSON string literal, got {type(wire).__name__}"
                )

        text = unquote_to_fixpoint(wire)
        plain = rc4(secret, from_base64_safe_bytes(text))
        return json.loads(bytes_to_text(plain))

    except TransportDecodingError as e:
        logger.debug("Envelope decoding failed", extra={"extra_data": {"error": str(e)}})
        raise
    except (ValueError, TypeError) as e:
        # binascii.Error and JSONDecodeError are both ValueErrors
        logger.debug(
            "Envelope decoding failed",
            extra={"extra_data": {"error": str(e), "stage": type(e).__name__}},
        )
        raise TransportDecodingError(f"Invalid envelope: {e}") from e
