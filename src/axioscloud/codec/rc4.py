"""RC4 stream cipher used by the Axios transport.

The vendor obfuscates every request and response body with plain RC4. This
is not encryption in any useful sense (no nonce, a fixed key shared by all
clients) and must not be relied on for confidentiality.
"""

from __future__ import annotations

MAX_KEY_LENGTH = 256


def normalize_key(key: str | bytes) -> bytes:
    """Return the key as bytes, checking the 1..256 byte length bound."""
    if isinstance(key, str):
        key = key.encode("utf-8")
    if not key:
        raise ValueError("RC4 key must not be empty")
    if len(key) > MAX_KEY_LENGTH:
        raise ValueError(f"RC4 key must be at most {MAX_KEY_LENGTH} bytes, got {len(key)}")
    return key


def rc4(key: str | bytes, data: bytes) -> bytes:
    """Apply the RC4 keystream for ``key`` to ``data``.

    The operation is its own inverse: ``rc4(k, rc4(k, d)) == d``.

    Args:
        key: Cipher key, 1 to 256 bytes (strings are UTF-8 encoded)
        data: Bytes to transform

    Returns:
        Transformed bytes, same length as ``data``

    Raises:
        ValueError: If the key is empty or longer than 256 bytes
    """
    key = normalize_key(key)

    # Key scheduling
    state = list(range(256))
    j = 0
    for i in range(256):
        j = (j + state[i] + key[i % len(key)]) % 256
        state[i], state[j] = state[j], state[i]

    # Keystream generation
    out = bytearray(len(data))
    i = j = 0
    for n, byte in enumerate(data):
        i = (i + 1) % 256
        j = (j + state[i]) % 256
        state[i], state[j] = state[j], state[i]
        out[n] = byte ^ state[(state[i] + state[j]) % 256]

    return bytes(out)
