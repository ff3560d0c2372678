"""
Tracing 数据类型定义。

Agent 运行时产生的追踪事件（TracingEvent）及其携带的已完成 Span（ExportedSpan）。
这些对象由外部追踪系统创建，导出器只读取，不修改。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional, Union

# datetime or integer millisecond epoch
PointInTime = Union[datetime, int, float]


# ──────────────────────────────────────────────
# Enums
# ──────────────────────────────────────────────


class TracingEventType(str, Enum):
    SPAN_STARTED = "span_started"
    SPAN_UPDATED = "span_updated"
    SPAN_ENDED = "span_ended"


class SpanType(str, Enum):
    AGENT_RUN = "agent_run"
    WORKFLOW_RUN = "workflow_run"
    WORKFLOW_STEP = "workflow_step"
    PROCESSOR_RUN = "processor_run"
    TOOL_CALL = "tool_call"
    MCP_TOOL_CALL = "mcp_tool_call"
    MODEL_GENERATION = "model_generation"
    MODEL_STEP = "model_step"
    MODEL_CHUNK = "model_chunk"
    GENERIC = "generic"

    @classmethod
    def parse(cls, value: Any) -> "SpanType":
        """Return the matching category, or ``GENERIC`` for unknown values."""
        try:
            return cls(value)
        except ValueError:
            return cls.GENERIC


# ──────────────────────────────────────────────
# Span payload
# ──────────────────────────────────────────────


@dataclass(frozen=True)
class ErrorInfo:
    """Error attached to a span. Its presence marks the span as failed."""

    message: str = ""
    id: Optional[str] = None
    domain: Optional[str] = None
    category: Optional[str] = None
    details: Optional[Dict[str, Any]] = None

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "ErrorInfo":
        return cls(
            message=str(d.get("message", "")),
            id=d.get("id"),
            domain=d.get("domain"),
            category=d.get("category"),
            details=d.get("details"),
        )


@dataclass(frozen=True)
class ExportedSpan:
    """A completed span handed over by the tracing subsystem.

    Attributes:
        id: Span identifier (opaque, any length).
        trace_id: Trace identifier (opaque, any length).
        parent_span_id: Enclosing span ID, ``None`` for root spans.
        name: Human-readable name; may be missing.
        type: Semantic category, normally a :class:`SpanType` value.
        start_time: ``datetime`` or millisecond epoch.
        end_time: ``datetime`` or millisecond epoch.
        attributes: Type-specific attributes.
        metadata: User metadata, merged into the exported attributes.
        input: Span input, exported as JSON.
        output: Span output, exported as JSON.
        error_info: Error details if the span failed.
    """

    id: str
    trace_id: str
    type: str = SpanType.GENERIC.value
    name: Optional[str] = None
    parent_span_id: Optional[str] = None
    start_time: Optional[PointInTime] = None
    end_time: Optional[PointInTime] = None
    attributes: Dict[str, Any] = field(default_factory=dict)
    metadata: Optional[Dict[str, Any]] = None
    input: Any = None
    output: Any = None
    error_info: Optional[ErrorInfo] = None

    @property
    def span_type(self) -> SpanType:
        return SpanType.parse(self.type)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "ExportedSpan":
        """Build from a wire dict; camelCase and snake_case keys both work."""

        def pick(*keys: str) -> Any:
            for k in keys:
                if d.get(k) is not None:
                    return d[k]
            return None

        span_type = pick("type")
        error = pick("errorInfo", "error_info")
        if isinstance(error, dict):
            error = ErrorInfo.from_dict(error)

        return cls(
            id=str(pick("id", "spanId", "span_id") or ""),
            trace_id=str(pick("traceId", "trace_id") or ""),
            type=span_type.value if isinstance(span_type, SpanType) else str(span_type or SpanType.GENERIC.value),
            name=pick("name"),
            parent_span_id=pick("parentSpanId", "parent_span_id"),
            start_time=_parse_time(pick("startTime", "start_time")),
            end_time=_parse_time(pick("endTime", "end_time")),
            attributes=dict(pick("attributes") or {}),
            metadata=pick("metadata"),
            input=pick("input"),
            output=pick("output"),
            error_info=error,
        )


@dataclass(frozen=True)
class TracingEvent:
    """One span lifecycle transition."""

    type: TracingEventType
    exported_span: ExportedSpan

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "TracingEvent":
        span = d.get("exportedSpan", d.get("exported_span")) or {}
        return cls(
            type=TracingEventType(d.get("type")),
            exported_span=span if isinstance(span, ExportedSpan) else ExportedSpan.from_dict(span),
        )


def _parse_time(value: Any) -> Optional[PointInTime]:
    if isinstance(value, str):
        # fromisoformat() only learned the "Z" suffix in 3.11
        if value.endswith("Z"):
            value = value[:-1] + "+00:00"
        return datetime.fromisoformat(value)
    return value
