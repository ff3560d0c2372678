"""
属性编码 — 任意类型的值 → OTLP ``KeyValue`` 列表。

编码规则:
- str       → stringValue
- bool      → boolValue
- int/float → intValue（十进制字符串，小数部分截断）
- list      → arrayValue，元素统一转成 stringValue
- 其他      → stringValue（JSON 序列化）
"""

from __future__ import annotations

import json
import math
from typing import Any, Dict, List, Mapping

from mastra_otlp.tracing.types import ExportedSpan

KeyValue = Dict[str, Any]

INPUT_KEY = "mastra.input"
OUTPUT_KEY = "mastra.output"
SPAN_TYPE_KEY = "span.type"
ERROR_KEY = "error"
ERROR_MESSAGE_KEY = "error.message"


def to_json(value: Any) -> str:
    """Compact JSON; objects json can't handle fall back to ``str()``."""
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"), default=str)


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, (dict, list, tuple)):
        return to_json(value)
    return str(value)


def _present(value: Any) -> bool:
    """Scalar emptiness check: None, "", 0, False and NaN count as absent.

    Containers always count as present, even when empty.
    """
    if value is None or isinstance(value, (dict, list, tuple)):
        return value is not None
    if isinstance(value, float) and math.isnan(value):
        return False
    if isinstance(value, (str, int, float)):
        return bool(value)
    return True


def encode_value(value: Any) -> Dict[str, Any]:
    """Encode a single value as an OTLP ``AnyValue``."""
    if isinstance(value, str):
        return {"stringValue": value}
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return {"boolValue": value}
    if isinstance(value, int):
        # int() first: IntEnum members format as "Kind.NAME" before 3.11
        return {"intValue": str(int(value))}
    if isinstance(value, float) and math.isfinite(value):
        # fractional part is dropped on purpose; consumers read intValue
        return {"intValue": str(int(value))}
    if isinstance(value, (list, tuple)):
        return {"arrayValue": {"values": [{"stringValue": _stringify(v)} for v in value]}}
    return {"stringValue": to_json(value)}


def encode_attributes(attributes: Mapping[str, Any]) -> List[KeyValue]:
    """Encode a mapping into OTLP key/value pairs, keeping its order."""
    return [{"key": str(key), "value": encode_value(value)} for key, value in attributes.items()]


def span_attributes(span: ExportedSpan) -> List[KeyValue]:
    """Full attribute list for *span*.

    Order: span attributes, ``span.type``, metadata, then input, output and
    the error pair when present. Later keys overwrite earlier ones in place.
    """
    merged: Dict[str, Any] = {
        **(span.attributes or {}),
        SPAN_TYPE_KEY: span.type,
        **(span.metadata or {}),
    }
    attrs = encode_attributes(merged)

    if _present(span.input):
        attrs.append({"key": INPUT_KEY, "value": {"stringValue": to_json(span.input)}})
    if _present(span.output):
        attrs.append({"key": OUTPUT_KEY, "value": {"stringValue": to_json(span.output)}})
    if span.error_info is not None:
        attrs.append({"key": ERROR_KEY, "value": {"boolValue": True}})
        attrs.append({"key": ERROR_MESSAGE_KEY, "value": {"stringValue": span.error_info.message}})

    return attrs
