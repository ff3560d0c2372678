"""
Mastra OTLP Exporter — 将 Mastra 追踪事件导出为 OTLP/JSON。

把 Agent 运行时产生的 span_ended 事件转换为 OpenTelemetry 协议格式，
通过 HTTP POST 发送到任意 OTLP 兼容的采集端。

Quick Start:
    from mastra_otlp import OtelExporter, ExporterConfig, setup_logging

    setup_logging(debug=True)
    exporter = OtelExporter(ExporterConfig.from_env())

    await exporter.export_tracing_event(event)
"""

__version__ = "0.1.0"

from mastra_otlp.core.config import ExporterConfig, parse_headers
from mastra_otlp.exporters.base import ExporterLifecycle, TracingExporter
from mastra_otlp.exporters.console import ConsoleExporter
from mastra_otlp.exporters.group import ExporterGroup
from mastra_otlp.exporters.otel import OtelExporter
from mastra_otlp.otlp.payload import build_payload
from mastra_otlp.otlp.transport import InProcessTransport, OTLPHttpTransport, SpanTransport
from mastra_otlp.tracing.types import (
    ErrorInfo,
    ExportedSpan,
    SpanType,
    TracingEvent,
    TracingEventType,
)
from mastra_otlp.utils.logger import setup_logging

__all__ = [
    "ExporterConfig",
    "parse_headers",
    "ExporterLifecycle",
    "TracingExporter",
    "ConsoleExporter",
    "ExporterGroup",
    "OtelExporter",
    "build_payload",
    "SpanTransport",
    "OTLPHttpTransport",
    "InProcessTransport",
    "ErrorInfo",
    "ExportedSpan",
    "SpanType",
    "TracingEvent",
    "TracingEventType",
    "setup_logging",
    "__version__",
]
