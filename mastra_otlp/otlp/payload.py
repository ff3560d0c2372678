"""
OTLP/JSON 载荷构建。

每次导出生成一个独立的信封:
resourceSpans[0] → scopeSpans[0] → spans[0]
"""

from __future__ import annotations

from typing import Any, Dict

from mastra_otlp.otlp.attributes import span_attributes
from mastra_otlp.otlp.ids import normalize_span_id, normalize_trace_id
from mastra_otlp.otlp.kinds import map_span_kind
from mastra_otlp.otlp.timestamps import to_unix_nano_string
from mastra_otlp.tracing.types import ExportedSpan

SCOPE_NAME = "mastra"
SCOPE_VERSION = "1.0.0"
DEFAULT_SERVICE_NAME = "mastra-app"
DEFAULT_SPAN_NAME = "unknown"

STATUS_OK = 1
STATUS_ERROR = 2


def build_otlp_span(span: ExportedSpan) -> Dict[str, Any]:
    """Convert one ExportedSpan into an OTLP span dict."""
    otlp_span: Dict[str, Any] = {
        "traceId": normalize_trace_id(span.trace_id),
        "spanId": normalize_span_id(span.id),
    }
    if span.parent_span_id:
        otlp_span["parentSpanId"] = normalize_span_id(span.parent_span_id)

    status: Dict[str, Any] = {"code": STATUS_ERROR if span.error_info is not None else STATUS_OK}
    if span.error_info is not None and span.error_info.message:
        status["message"] = span.error_info.message

    otlp_span.update(
        {
            "name": span.name or DEFAULT_SPAN_NAME,
            "kind": map_span_kind(span.type),
            "startTimeUnixNano": to_unix_nano_string(span.start_time),
            # end time should always be set on span_ended; now is the fallback
            "endTimeUnixNano": to_unix_nano_string(span.end_time),
            "attributes": span_attributes(span),
            "status": status,
        }
    )
    return otlp_span


def build_payload(span: ExportedSpan, service_name: str = DEFAULT_SERVICE_NAME) -> Dict[str, Any]:
    """Wrap *span* in a single resource/scope envelope."""
    return {
        "resourceSpans": [
            {
                "resource": {
                    "attributes": [
                        {
                            "key": "service.name",
                            "value": {"stringValue": service_name or DEFAULT_SERVICE_NAME},
                        }
                    ]
                },
                "scopeSpans": [
                    {
                        "scope": {"name": SCOPE_NAME, "version": SCOPE_VERSION},
                        "spans": [build_otlp_span(span)],
                    }
                ],
            }
        ]
    }


def _first(seq: Any) -> Any:
    if isinstance(seq, list) and seq:
        return seq[0]
    return None


def count_spans(payload: Dict[str, Any]) -> int:
    """Spans at ``resourceSpans[0].scopeSpans[0].spans``; 0 if any level is missing."""
    resource = _first((payload or {}).get("resourceSpans"))
    scope = _first((resource or {}).get("scopeSpans"))
    spans = (scope or {}).get("spans")
    return len(spans) if isinstance(spans, list) else 0


def describe_structure(payload: Dict[str, Any]) -> Dict[str, Any]:
    """Presence and length of every nesting level, for diagnostics."""
    resource_spans = (payload or {}).get("resourceSpans")
    scope_spans = (_first(resource_spans) or {}).get("scopeSpans")
    spans = (_first(scope_spans) or {}).get("spans")

    def length(seq: Any) -> Any:
        return len(seq) if isinstance(seq, list) else None

    return {
        "has_resource_spans": resource_spans is not None,
        "resource_spans_length": length(resource_spans),
        "has_scope_spans": scope_spans is not None,
        "scope_spans_length": length(scope_spans),
        "has_spans": spans is not None,
        "spans_length": length(spans),
    }
