"""
Tracing — 追踪事件数据模型。

运行时在每次 Span 状态变化时发出一个 TracingEvent，
只有 ``span_ended`` 事件会被导出到 OTLP 后端。
"""

from mastra_otlp.tracing.types import (
    ErrorInfo,
    ExportedSpan,
    SpanType,
    TracingEvent,
    TracingEventType,
)

__all__ = [
    "ErrorInfo",
    "ExportedSpan",
    "SpanType",
    "TracingEvent",
    "TracingEventType",
]
