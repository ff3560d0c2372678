"""Console exporter — logs every tracing event, for local debugging."""

from __future__ import annotations

import logging
from typing import Optional

from mastra_otlp.exporters.base import ExporterLifecycle
from mastra_otlp.otlp.timestamps import to_epoch_millis
from mastra_otlp.tracing.types import ExportedSpan, TracingEvent, TracingEventType

logger = logging.getLogger("mastra_otlp.exporters.console")


class ConsoleExporter:
    """Writes span lifecycle events to the console logger."""

    name = "console-exporter"

    def __init__(self, level: int = logging.INFO) -> None:
        self.level = level
        self._lifecycle = ExporterLifecycle(self.name, logger)

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

    async def export_tracing_event(self, event: TracingEvent) -> None:
        if self.is_disabled:
            return
        span = event.exported_span
        status = "error" if span.error_info is not None else "ok"

        if event.type == TracingEventType.SPAN_ENDED:
            duration = _duration_ms(span)
            self.logger.log(
                self.level,
                "[Trace] %s %s %s | %s | %s | trace=%s span=%s",
                event.type.value.upper(),
                span.type.upper(),
                span.name or "unknown",
                status,
                f"{duration}ms" if duration is not None else "-",
                span.trace_id,
                span.id,
            )
        else:
            self.logger.log(
                self.level,
                "[Trace] %s %s %s | trace=%s span=%s",
                event.type.value.upper(),
                span.type.upper(),
                span.name or "unknown",
                span.trace_id,
                span.id,
            )


def _duration_ms(span: ExportedSpan) -> Optional[int]:
    if span.start_time is None or span.end_time is None:
        return None
    return to_epoch_millis(span.end_time) - to_epoch_millis(span.start_time)
