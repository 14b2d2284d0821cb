"""Tests for telemetry spans."""

from buildlayout.services.result import ServiceResult
from buildlayout.services.telemetry import (
    Span,
    disable_telemetry,
    enable_telemetry,
    trace_span,
    traced,
)


@traced
def _operation() -> ServiceResult:
    with trace_span("inner") as span:
        if span is not None:
            span.annotate("files", 3)
    return ServiceResult(ok=True, op="probe")


class TestTraced:
    def test_disabled_leaves_meta_empty(self) -> None:
        disable_telemetry()
        assert _operation().meta is None

    def test_enabled_injects_span_tree(self) -> None:
        enable_telemetry()
        try:
            result = _operation()
        finally:
            disable_telemetry()
        assert result.meta is not None
        telemetry = result.meta["telemetry"]
        assert telemetry["name"].endswith("_operation")
        assert telemetry["children"][0]["name"] == "inner"
        assert telemetry["children"][0]["annotations"] == {"files": 3}

    def test_trace_span_without_parent_yields_none(self) -> None:
        enable_telemetry()
        try:
            with trace_span("orphan") as span:
                assert span is None
        finally:
            disable_telemetry()


class TestSpan:
    def test_duration_zero_until_ended(self) -> None:
        span = Span(name="x")
        assert span.duration_ms == 0.0
        span.end()
        assert span.duration_ms >= 0.0
        assert span.to_dict()["name"] == "x"
