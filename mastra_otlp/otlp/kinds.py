"""Span type → OTLP span kind."""

from __future__ import annotations

from enum import IntEnum
from typing import Dict

from mastra_otlp.tracing.types import SpanType


class OtlpSpanKind(IntEnum):
    UNSPECIFIED = 0
    INTERNAL = 1
    SERVER = 2
    CLIENT = 3
    PRODUCER = 4
    CONSUMER = 5


_KIND_MAP: Dict[str, OtlpSpanKind] = {
    SpanType.AGENT_RUN.value: OtlpSpanKind.INTERNAL,
    SpanType.WORKFLOW_RUN.value: OtlpSpanKind.INTERNAL,
    SpanType.PROCESSOR_RUN.value: OtlpSpanKind.INTERNAL,
    SpanType.TOOL_CALL.value: OtlpSpanKind.CLIENT,
    SpanType.MODEL_GENERATION.value: OtlpSpanKind.CLIENT,
    SpanType.MODEL_STEP.value: OtlpSpanKind.CLIENT,
    SpanType.MCP_TOOL_CALL.value: OtlpSpanKind.CLIENT,
}


def map_span_kind(span_type: str) -> int:
    """Return the OTLP kind code for *span_type*, INTERNAL when unknown."""
    key = span_type.value if isinstance(span_type, SpanType) else span_type
    return int(_KIND_MAP.get(key, OtlpSpanKind.INTERNAL))
