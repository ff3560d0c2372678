"""
OTLP Exporter — 将结束的 Span 转为 OTLP/JSON 并 POST 到采集端。

只导出 ``span_ended`` 事件；任何失败只记录日志，不会抛给调用方。

Usage::

    from mastra_otlp import OtelExporter, ExporterConfig

    exporter = OtelExporter(ExporterConfig(
        endpoint="http://localhost:4318/v1/traces",
        service_name="browsing-agent",
        headers={"x-integration-token": "..."},
    ))
    await exporter.export_tracing_event(event)
"""

from __future__ import annotations

import logging
from typing import Optional

from mastra_otlp.core.config import SUPPORTED_PROTOCOL, ExporterConfig
from mastra_otlp.exporters.base import ExporterLifecycle
from mastra_otlp.otlp.payload import build_payload, count_spans
from mastra_otlp.otlp.transport import OTLPHttpTransport, SpanTransport
from mastra_otlp.tracing.types import TracingEvent, TracingEventType

logger = logging.getLogger("mastra_otlp.exporters.otel")


class OtelExporter:
    """Exports completed spans to an OTLP/JSON HTTP endpoint.

    Parameters:
        config: Endpoint, headers and service name.
        transport: Override the delivery mechanism (default: HTTP POST
            to ``config.endpoint``).

    The exporter starts enabled and is disabled for good when the endpoint
    is missing or the protocol is not ``http/json``.
    """

    name = "otel-exporter"

    def __init__(
        self,
        config: ExporterConfig,
        transport: Optional[SpanTransport] = None,
    ) -> None:
        self.config = config
        self._lifecycle = ExporterLifecycle(self.name, logger)
        self._transport = transport

        if not config.has_endpoint:
            self.disable("Missing OTLP endpoint")
            return
        if config.protocol != SUPPORTED_PROTOCOL:
            self.disable(f"Unsupported OTLP protocol: {config.protocol}")
            return

        if self._transport is None:
            self._transport = OTLPHttpTransport(
                config.endpoint,
                headers=config.headers,
                timeout=config.timeout,
            )

    # ── lifecycle ──

    @property
    def logger(self) -> logging.Logger:
        return self._lifecycle.logger

    @property
    def is_disabled(self) -> bool:
        return self._lifecycle.is_disabled

    def disable(self, reason: str) -> None:
        self._lifecycle.disable(reason)

    async def shutdown(self) -> None:
        self.disable("shutdown")

    # ── export ──

    async def export_tracing_event(self, event: TracingEvent) -> None:
        if self.is_disabled:
            return
        # OTLP wants completed spans with end times
        if event.type != TracingEventType.SPAN_ENDED:
            return

        span = event.exported_span
        try:
            payload = build_payload(span, self.config.service_name)
        except Exception as e:
            self.logger.error("Error exporting trace: %s", e)
            return

        if count_spans(payload) == 0:
            self.logger.warning("No spans to export for span: %s", span.name)
            return

        self.logger.debug(
            "Exporting span: %s, traceId: %s, spanId: %s",
            span.name,
            span.trace_id,
            span.id,
        )
        assert self._transport is not None
        try:
            await self._transport.send(payload)
        except Exception as e:
            self.logger.error("Error exporting trace: %s", e)
