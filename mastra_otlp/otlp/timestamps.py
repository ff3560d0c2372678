"""
时间戳转换 — 毫秒时间点 → OTLP 纳秒整数。

OTLP/JSON 的 64 位整数以十进制字符串传输，float 无法精确表示纳秒时间戳，
所以全程使用 int 运算。
"""

from __future__ import annotations

import time
from datetime import datetime, timedelta, timezone
from typing import Optional

from mastra_otlp.tracing.types import PointInTime

NANOS_PER_MILLI = 1_000_000

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MS = timedelta(milliseconds=1)


def to_epoch_millis(value: PointInTime) -> int:
    """Millisecond epoch of a ``datetime`` (naive = UTC) or a number."""
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return (value - _EPOCH) // _ONE_MS
    return int(value)


def to_unix_nano(value: Optional[PointInTime] = None) -> int:
    """Nanoseconds since the epoch; ``None`` means now."""
    if value is None:
        return time.time_ns() // NANOS_PER_MILLI * NANOS_PER_MILLI
    return to_epoch_millis(value) * NANOS_PER_MILLI


def to_unix_nano_string(value: Optional[PointInTime] = None) -> str:
    return str(to_unix_nano(value))
