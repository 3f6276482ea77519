"""Transport codec for Axios request and response bodies."""

from .base64_safe import bytes_to_text, from_base64_safe, from_base64_safe_bytes, to_base64_safe
from .envelope import MAX_UNQUOTE_PASSES, decode, encode, unquote_to_fixpoint
from .rc4 import rc4

__all__ = [
    "MAX_UNQUOTE_PASSES",
    "bytes_to_text",
    "decode",
    "encode",
    "from_base64_safe",
    "from_base64_safe_bytes",
    "rc4",
    "to_base64_safe",
    "unquote_to_fixpoint",
]
