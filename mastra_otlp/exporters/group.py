"""
ExporterGroup — 一个事件同时分发给多个导出器。

各导出器并发执行，互不影响：某个导出器抛出异常只记录日志。
"""

from __future__ import annotations

import asyncio
import logging
from typing import List, Sequence

from mastra_otlp.exporters.base import TracingExporter
from mastra_otlp.tracing.types import TracingEvent

logger = logging.getLogger("mastra_otlp.exporters.group")


class ExporterGroup:
    """Fan-out of tracing events to several exporters.

    Usage::

        group = ExporterGroup([ConsoleExporter(), OtelExporter(config)])
        await group.export_tracing_event(event)
    """

    def __init__(self, exporters: Sequence[TracingExporter]) -> None:
        self._exporters: List[TracingExporter] = list(exporters)

    @property
    def exporters(self) -> List[TracingExporter]:
        return list(self._exporters)

    @property
    def active(self) -> List[TracingExporter]:
        return [e for e in self._exporters if not e.is_disabled]

    async def export_tracing_event(self, event: TracingEvent) -> None:
        targets = self.active
        if not targets:
            return
        results = await asyncio.gather(
            *(e.export_tracing_event(event) for e in targets),
            return_exceptions=True,
        )
        for exporter, result in zip(targets, results):
            if isinstance(result, Exception):
                logger.error("Exporter %s failed: %s", exporter.name, result)

    async def shutdown(self) -> None:
        results = await asyncio.gather(
            *(e.shutdown() for e in self._exporters),
            return_exceptions=True,
        )
        for exporter, result in zip(self._exporters, results):
            if isinstance(result, Exception):
                logger.error("Exporter %s shutdown failed: %s", exporter.name, result)
