"""
OTLP — OpenTelemetry 协议 (OTLP/JSON) 编码与传输。

Usage::

    from mastra_otlp.otlp import build_payload, OTLPHttpTransport

    payload = build_payload(span, service_name="browsing-agent")
    ok = await OTLPHttpTransport("http://localhost:4318/v1/traces").send(payload)
"""

from mastra_otlp.otlp.attributes import encode_attributes, encode_value, span_attributes
from mastra_otlp.otlp.ids import (
    SPAN_ID_HEX_LENGTH,
    TRACE_ID_HEX_LENGTH,
    normalize_hex_id,
)
from mastra_otlp.otlp.kinds import OtlpSpanKind, map_span_kind
from mastra_otlp.otlp.payload import build_payload, count_spans, describe_structure
from mastra_otlp.otlp.timestamps import to_unix_nano, to_unix_nano_string
from mastra_otlp.otlp.transport import InProcessTransport, OTLPHttpTransport, SpanTransport

__all__ = [
    "SPAN_ID_HEX_LENGTH",
    "TRACE_ID_HEX_LENGTH",
    "normalize_hex_id",
    "to_unix_nano",
    "to_unix_nano_string",
    "encode_value",
    "encode_attributes",
    "span_attributes",
    "OtlpSpanKind",
    "map_span_kind",
    "build_payload",
    "count_spans",
    "describe_structure",
    "SpanTransport",
    "OTLPHttpTransport",
    "InProcessTransport",
]
