"""OTLP identifier normalization."""

from __future__ import annotations

import re

# traceId is 16 bytes, spanId is 8 bytes, both hex-encoded in OTLP/JSON
TRACE_ID_HEX_LENGTH = 32
SPAN_ID_HEX_LENGTH = 16

_NON_HEX = re.compile(r"[^0-9a-fA-F]")


def normalize_hex_id(value: str, target_length: int) -> str:
    """Force *value* into exactly *target_length* lower-case hex characters.

    Non-hex characters are dropped, short IDs are left-padded with ``0``
    and long IDs keep their leading characters.

    >>> normalize_hex_id("abc", 8)
    '00000abc'
    """
    cleaned = _NON_HEX.sub("", value or "").lower()
    if len(cleaned) < target_length:
        return cleaned.rjust(target_length, "0")
    return cleaned[:target_length]


def normalize_trace_id(value: str) -> str:
    return normalize_hex_id(value, TRACE_ID_HEX_LENGTH)


def normalize_span_id(value: str) -> str:
    return normalize_hex_id(value, SPAN_ID_HEX_LENGTH)
