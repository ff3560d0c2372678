"""
Exporters — 把追踪事件发送到外部系统。

- OtelExporter: OTLP/JSON over HTTP
- ConsoleExporter: 本地日志
- ExporterGroup: 同时分发到多个导出器
"""

from mastra_otlp.exporters.base import ExporterLifecycle, TracingExporter
from mastra_otlp.exporters.console import ConsoleExporter
from mastra_otlp.exporters.group import ExporterGroup
from mastra_otlp.exporters.otel import OtelExporter

__all__ = [
    "ExporterLifecycle",
    "TracingExporter",
    "ConsoleExporter",
    "ExporterGroup",
    "OtelExporter",
]
