"""Shared telemetry: logging setup, OpenTelemetry config, and tracing helpers."""

from msgcache.shared.telemetry.logging import get_logger, setup_logging
from msgcache.shared.telemetry.telemetry import (
    TelemetryConfig,
    build_span_exporter,
    get_telemetry,
    set_telemetry,
)
from msgcache.shared.telemetry.tracing import (
    add_span_attributes,
    add_span_event,
    get_trace_id,
    traced,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "TelemetryConfig",
    "get_telemetry",
    "set_telemetry",
    "build_span_exporter",
    "traced",
    "add_span_attributes",
    "add_span_event",
    "get_trace_id",
]
