"""
Exporter 基础能力 — 组合而非继承。

每个导出器持有一个 ExporterLifecycle，提供:
- disable(reason): 永久禁用（第一次的原因生效）
- is_disabled: 是否已禁用
- logger: 该导出器专用的 Logger
"""

from __future__ import annotations

import logging
from typing import Optional, Protocol, runtime_checkable

from mastra_otlp.tracing.types import TracingEvent


@runtime_checkable
class TracingExporter(Protocol):
    """Interface every exporter implements."""

    name: str

    @property
    def is_disabled(self) -> bool: ...

    async def export_tracing_event(self, event: TracingEvent) -> None: ...

    async def shutdown(self) -> None: ...


class ExporterLifecycle:
    """Enabled → disabled state holder. Disabled is terminal."""

    def __init__(self, name: str, logger: Optional[logging.Logger] = None) -> None:
        self.name = name
        self.logger = logger or logging.getLogger(f"mastra_otlp.exporters.{name}")
        self._disabled_reason: Optional[str] = None

    @property
    def is_disabled(self) -> bool:
        return self._disabled_reason is not None

    @property
    def disabled_reason(self) -> Optional[str]:
        return self._disabled_reason

    def disable(self, reason: str) -> None:
        if self._disabled_reason is not None:
            return
        self._disabled_reason = reason or "disabled"
        self.logger.warning("%s disabled: %s", self.name, self._disabled_reason)
