"""Tracing helpers: the traced decorator plus span attribute/event shortcuts.

All helpers are no-ops when no tracer provider is installed.
"""

import asyncio
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from functools import wraps
from typing import Any

from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

# Keyword arguments recorded as span attributes (case-insensitive).
# Message text is never recorded.
_SAFE_SPAN_ATTR_KEYS = frozenset({
    "key", "keys", "locale", "tenant_id", "decision", "count", "limit",
})


@contextmanager
def _span(
    name: str, attributes: dict | None, kwargs: dict[str, Any]
) -> Iterator[trace.Span]:
    """Start a span, tag it, and set its status from the outcome of the block."""
    tracer = trace.get_tracer(__name__)
    with tracer.start_as_current_span(name) as span:
        for attr, value in (attributes or {}).items():
            span.set_attribute(attr, value)
        for arg, value in kwargs.items():
            if not arg.startswith("_") and arg.lower() in _SAFE_SPAN_ATTR_KEYS:
                span.set_attribute(f"arg.{arg}", str(value))
        try:
            yield span
        except Exception as e:
            span.set_status(Status(StatusCode.ERROR, str(e)))
            span.record_exception(e)
            raise
        span.set_status(Status(StatusCode.OK))


def traced(
    operation_name: str | None = None,
    attributes: dict | None = None,
) -> Callable:
    """Decorator wrapping a sync or async function in a span.

    Args:
        operation_name: Span name (defaults to module.funcname).
        attributes: Static attributes set on every span.
    """

    def decorator(func: Callable) -> Callable:
        span_name = operation_name or f"{func.__module__}.{func.__name__}"

        if asyncio.iscoroutinefunction(func):

            @wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                with _span(span_name, attributes, kwargs):
                    return await func(*args, **kwargs)

            return async_wrapper

        @wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            with _span(span_name, attributes, kwargs):
                return func(*args, **kwargs)

        return sync_wrapper

    return decorator


def add_span_attributes(**attributes: str | int | float | bool) -> None:
    """Add attributes to the current span."""
    span = trace.get_current_span()
    if span.is_recording():
        for attr, value in attributes.items():
            span.set_attribute(attr, value)


def add_span_event(name: str, attributes: dict | None = None) -> None:
    """Add an event to the current span (e.g. message.short_circuited)."""
    span = trace.get_current_span()
    if span.is_recording():
        span.add_event(name, attributes=attributes or {})


def get_trace_id() -> str | None:
    """Return the current trace ID as 32-char hex, or None outside a valid span."""
    ctx = trace.get_current_span().get_span_context()
    if ctx.is_valid:
        return format(ctx.trace_id, "032x")
    return None
