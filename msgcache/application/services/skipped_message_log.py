"""Diagnostic log of message keys that were short-circuited.

Purely observability: nothing in the decision path reads it. A request log
is bound to the current context (one per HTTP request, the unit of work)
via a ContextVar; a process log can accumulate counts across requests.
"""

from __future__ import annotations

import threading
from contextvars import ContextVar, Token

from msgcache.core.constants import DEBUG_COMMENT_LABEL, DEBUG_KEY_SEPARATOR


class SkippedMessageLog:
    """Ordered map of skipped message key -> hit count. Safe for concurrent record()."""

    def __init__(self) -> None:
        self._counts: dict[str, int] = {}
        self._lock = threading.Lock()

    def record(self, key: str) -> None:
        """Count one short-circuited lookup for key."""
        with self._lock:
            self._counts[key] = self._counts.get(key, 0) + 1

    def keys(self) -> list[str]:
        """Return skipped keys in first-seen order."""
        with self._lock:
            return list(self._counts)

    def counts(self) -> dict[str, int]:
        """Return a snapshot of key -> hit count."""
        with self._lock:
            return dict(self._counts)

    def __len__(self) -> int:
        with self._lock:
            return len(self._counts)

    def render_debug_comment(self) -> str:
        """Return the HTML comment listing skipped keys, or "" when nothing was skipped."""
        keys = self.keys()
        if not keys:
            return ""
        return f"\n<!-- {DEBUG_COMMENT_LABEL}: {DEBUG_KEY_SEPARATOR.join(keys)} -->\n"


_request_log: ContextVar[SkippedMessageLog | None] = ContextVar(
    "skipped_message_log", default=None
)


def begin_request_log() -> Token:
    """Bind a fresh SkippedMessageLog to the current context. Returns reset token."""
    return _request_log.set(SkippedMessageLog())


def end_request_log(token: Token) -> None:
    """Restore the context to what it was before begin_request_log()."""
    _request_log.reset(token)


def get_request_log() -> SkippedMessageLog | None:
    """Return the log bound to the current context, or None outside a request."""
    return _request_log.get()


class RequestSkippedMessageRecorder:
    """Observer recording skipped keys into the current request's log (if any)."""

    def on_message_skipped(self, key: str) -> None:
        log = _request_log.get()
        if log is not None:
            log.record(key)


class ProcessSkippedMessageRecorder:
    """Observer accumulating skipped keys across requests for the process lifetime."""

    def __init__(self, log: SkippedMessageLog | None = None) -> None:
        self.log = log if log is not None else SkippedMessageLog()

    def on_message_skipped(self, key: str) -> None:
        self.log.record(key)
