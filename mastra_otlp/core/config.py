"""
导出器配置管理。

支持从环境变量 (.env) 或代码直接构造。
环境变量沿用 OpenTelemetry 的标准命名 (OTEL_EXPORTER_OTLP_*)。
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Dict, Optional
from urllib.parse import unquote

from dotenv import load_dotenv

SUPPORTED_PROTOCOL = "http/json"


def parse_headers(raw: Optional[str]) -> Dict[str, str]:
    """Parse ``"k1=v1,k2=v2"`` into a dict. Values are URL-decoded."""
    headers: Dict[str, str] = {}
    if not raw:
        return headers
    for item in raw.split(","):
        key, sep, value = item.partition("=")
        key = key.strip()
        if not sep or not key:
            continue
        headers[key] = unquote(value.strip())
    return headers


@dataclass
class ExporterConfig:
    """OTLP 导出器配置。"""

    # ── 目标 ──
    endpoint: str = ""
    protocol: str = SUPPORTED_PROTOCOL  # only "http/json" is implemented
    headers: Dict[str, str] = field(default_factory=dict)

    # ── Resource ──
    service_name: str = "mastra-app"

    # ── 传输 ──
    timeout: Optional[float] = None  # seconds; None = socket default

    @property
    def has_endpoint(self) -> bool:
        return bool(self.endpoint and self.endpoint.strip())

    @classmethod
    def from_env(cls, env_file: str = ".env") -> ExporterConfig:
        """
        从 .env 文件和环境变量中加载配置。

        环境变量优先级高于 .env 文件。
        """
        load_dotenv(env_file, override=False)

        endpoint = os.getenv("OTEL_EXPORTER_OTLP_TRACES_ENDPOINT") or os.getenv(
            "OTEL_EXPORTER_OTLP_ENDPOINT", ""
        )

        timeout_ms = os.getenv("OTEL_EXPORTER_OTLP_TIMEOUT", "").strip()
        timeout = int(timeout_ms) / 1000.0 if timeout_ms else None

        return cls(
            endpoint=endpoint.strip(),
            protocol=os.getenv("OTEL_EXPORTER_OTLP_PROTOCOL", SUPPORTED_PROTOCOL).strip().lower(),
            headers=parse_headers(os.getenv("OTEL_EXPORTER_OTLP_HEADERS")),
            service_name=os.getenv("OTEL_SERVICE_NAME", "mastra-app").strip() or "mastra-app",
            timeout=timeout,
        )

    def summary(self) -> str:
        """返回配置摘要（header 值脱敏）。"""
        masked = ", ".join(f"{k}={v[:4]}..." for k, v in self.headers.items()) or "无"
        return (
            f"Endpoint: {self.endpoint or '未配置'}\n"
            f"Protocol: {self.protocol}\n"
            f"Service: {self.service_name}\n"
            f"Headers: {masked}\n"
            f"Timeout: {self.timeout if self.timeout is not None else 'default'}"
        )
