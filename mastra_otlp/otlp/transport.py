"""OTLP transport layer (HTTP, InProcess).

Transports never raise: a failed export is logged and dropped, so the
tracing pipeline that produced the span is never disturbed.
"""

from __future__ import annotations

import asyncio
import inspect
import json
import logging
import urllib.error
import urllib.request
from typing import Any, Callable, Dict, Optional, Protocol, runtime_checkable

from mastra_otlp.otlp.payload import count_spans, describe_structure

logger = logging.getLogger("mastra_otlp.otlp.transport")

_MAX_ERROR_BODY = 128 * 1024  # 128KB
_ERROR_PREVIEW = 200


# ──────────────────────────────────────────────
# Transport Protocol
# ──────────────────────────────────────────────


@runtime_checkable
class SpanTransport(Protocol):
    """Delivers one OTLP payload; returns True when it was accepted."""

    async def send(self, payload: Dict[str, Any]) -> bool:
        ...


# ──────────────────────────────────────────────
# OTLPHttpTransport
# ──────────────────────────────────────────────


class OTLPHttpTransport:
    """SpanTransport over HTTP POST with a JSON body.

    Uses ``urllib.request`` in ``asyncio.to_thread`` so the blocking call
    does not stall the event loop. With ``timeout=None`` the socket default
    applies.
    """

    def __init__(
        self,
        endpoint: str,
        headers: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self.endpoint = endpoint
        self.headers = dict(headers or {})
        self.timeout = timeout

    async def send(self, payload: Dict[str, Any]) -> bool:
        try:
            return await asyncio.to_thread(self._sync_send, payload)
        except Exception as e:
            logger.error("Error exporting trace: %s", e)
            return False

    def _sync_send(self, payload: Dict[str, Any]) -> bool:
        body = json.dumps(payload).encode("utf-8")
        req = urllib.request.Request(
            self.endpoint,
            data=body,
            headers={"Content-Type": "application/json", **self.headers},
            method="POST",
        )
        kwargs: Dict[str, Any] = {}
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout

        try:
            with urllib.request.urlopen(req, **kwargs) as resp:
                status = resp.status
                if not 200 <= status < 300:
                    self._report_rejection(payload, status, resp.reason, _read_text(resp))
                    return False
        except urllib.error.HTTPError as e:
            self._report_rejection(payload, e.code, e.reason, _read_text(e))
            return False

        logger.debug("Successfully exported trace with span: %s", _span_name(payload))
        return True

    def _report_rejection(self, payload: Dict[str, Any], status: int, reason: Any, text: str) -> None:
        logger.warning(
            "Failed to export trace: %s %s. Response: %s",
            status,
            reason,
            text[:_ERROR_PREVIEW],
        )
        logger.error("Full OTLP payload:\n%s", json.dumps(payload, indent=2, default=str))
        logger.error("Span count: %d", count_spans(payload))
        logger.error("Span path check: %s", describe_structure(payload))


# ──────────────────────────────────────────────
# InProcessTransport
# ──────────────────────────────────────────────


class InProcessTransport:
    """SpanTransport that hands payloads to a callable (sync or async).

    Used to feed an in-process collector, and for deterministic tests.
    Exceptions raised by the handler are logged, not propagated.
    """

    def __init__(self, handler: Callable[[Dict[str, Any]], Any]) -> None:
        self.handler = handler

    async def send(self, payload: Dict[str, Any]) -> bool:
        try:
            result = self.handler(payload)
            if inspect.isawaitable(result):
                await result
        except Exception as e:
            logger.error("Error exporting trace: %s", e)
            return False
        return True


# ──────────────────────────────────────────────
# Helpers
# ──────────────────────────────────────────────


def _read_text(resp: Any) -> str:
    try:
        raw = resp.read(_MAX_ERROR_BODY)
        return raw.decode("utf-8", errors="replace")
    except Exception:
        return "Unable to read error response"


def _span_name(payload: Dict[str, Any]) -> str:
    try:
        return payload["resourceSpans"][0]["scopeSpans"][0]["spans"][0]["name"]
    except (KeyError, IndexError, TypeError):
        return "unknown"
