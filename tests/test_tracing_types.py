"""
测试追踪事件数据模型的解析。
"""

from datetime import datetime, timezone

import pytest

from mastra_otlp.tracing.types import ErrorInfo, ExportedSpan, SpanType, TracingEvent, TracingEventType


class TestSpanType:

    def test_known(self):
        assert SpanType.parse("tool_call") is SpanType.TOOL_CALL

    def test_unknown_is_generic(self):
        assert SpanType.parse("unknown_type") is SpanType.GENERIC
        assert SpanType.parse(None) is SpanType.GENERIC


class TestExportedSpanFromDict:

    def test_camel_case(self):
        span = ExportedSpan.from_dict({
            "id": "s1",
            "traceId": "t1",
            "parentSpanId": "p1",
            "name": "fetch-page",
            "type": "tool_call",
            "startTime": "2024-01-01T00:00:00Z",
            "endTime": 1704067200250,
            "attributes": {"url": "https://x"},
            "metadata": {"user": "u1"},
            "input": {"q": 1},
            "errorInfo": {"message": "boom", "domain": "TOOL"},
        })
        assert span.trace_id == "t1"
        assert span.parent_span_id == "p1"
        assert span.start_time == datetime(2024, 1, 1, tzinfo=timezone.utc)
        assert span.end_time == 1704067200250
        assert span.attributes == {"url": "https://x"}
        assert span.error_info == ErrorInfo(message="boom", domain="TOOL")
        assert span.span_type is SpanType.TOOL_CALL

    def test_snake_case(self):
        span = ExportedSpan.from_dict({"id": "s1", "trace_id": "t1", "parent_span_id": "p1"})
        assert span.trace_id == "t1"
        assert span.parent_span_id == "p1"

    def test_defaults(self):
        span = ExportedSpan.from_dict({"id": "s1", "traceId": "t1"})
        assert span.type == "generic"
        assert span.name is None
        assert span.attributes == {}
        assert span.error_info is None

    def test_unknown_type_kept_verbatim(self):
        span = ExportedSpan.from_dict({"id": "s1", "traceId": "t1", "type": "custom_thing"})
        assert span.type == "custom_thing"
        assert span.span_type is SpanType.GENERIC

    def test_frozen(self):
        span = ExportedSpan(id="a", trace_id="b")
        with pytest.raises(AttributeError):
            span.name = "x"


class TestTracingEventFromDict:

    def test_parse(self):
        event = TracingEvent.from_dict({
            "type": "span_ended",
            "exportedSpan": {"id": "s1", "traceId": "t1", "type": "agent_run"},
        })
        assert event.type is TracingEventType.SPAN_ENDED
        assert event.exported_span.type == "agent_run"

    def test_unknown_event_type(self):
        with pytest.raises(ValueError):
            TracingEvent.from_dict({"type": "span_exploded", "exportedSpan": {}})
