"""Masking of credentials and session identifiers in log output.

Request payloads carry the account password, the session GUID and the vendor
token in ``sPassword`` / ``sSessionGuid`` / ``sVendorToken`` fields; none of
them may reach a log sink.
"""

from __future__ import annotations

import re
from typing import Any

MASK = "***MASKED***"

# Key/value pairs whose value must be hidden, in JSON or key=value form
SENSITIVE_PATTERNS: list[re.Pattern[str]] = [
    re.compile(
        r'(["\']?(?:s?password|pwd)["\']?\s*[:=]\s*)["\']?[^"\'\s,}\]]+["\']?',
        re.IGNORECASE,
    ),
    re.compile(
        r'(["\']?s?(?:session_?guid|usersession|vendor_?token)["\']?\s*[:=]\s*)["\']?[^"\'\s,}\]]+["\']?',
        re.IGNORECASE,
    ),
    re.compile(
        r'(["\']?(?:rc4_?key|api[_-]?key|secret|token)["\']?\s*[:=]\s*)["\']?[^"\'\s,}\]]+["\']?',
        re.IGNORECASE,
    ),
    re.compile(r'(ASP\.NET_SessionId=)[^;\s,]+', re.IGNORECASE),
]

# Substrings of dict keys whose values are always masked
SENSITIVE_KEYWORDS: set[str] = {
    "password",
    "pwd",
    "sessionguid",
    "usersession",
    "vendortoken",
    "vendor_token",
    "rc4",
    "token",
    "secret",
    "cookie",
    "pin",
}


def mask_sensitive_string(text: str) -> str:
    """Mask sensitive key/value pairs in a string."""
    if not text:
        return text
    for pattern in SENSITIVE_PATTERNS:
        text = pattern.sub(r"\g<1>" + MASK, text)
    return text


def is_sensitive_key(key: str) -> bool:
    """Check if a key name indicates sensitive data."""
    lower_key = key.lower()
    return any(keyword in lower_key for keyword in SENSITIVE_KEYWORDS)


def mask_dict(data: dict[str, Any], depth: int = 0, max_depth: int = 10) -> dict[str, Any]:
    """Recursively mask sensitive values in a dictionary."""
    if depth >= max_depth:
        return data

    result: dict[str, Any] = {}
    for key, value in data.items():
        if is_sensitive_key(str(key)):
            result[key] = MASK
        elif isinstance(value, dict):
            result[key] = mask_dict(value, depth + 1, max_depth)
        elif isinstance(value, list):
            result[key] = [
                mask_dict(item, depth + 1, max_depth) if isinstance(item, dict) else item
                for item in value
            ]
        elif isinstance(value, str):
            result[key] = mask_sensitive_string(value)
        else:
            result[key] = value
    return result
