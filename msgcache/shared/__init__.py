"""Shared utilities: telemetry (logging setup, OpenTelemetry, tracing helpers)."""
