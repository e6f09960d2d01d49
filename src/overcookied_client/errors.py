"""
overcookied_client.errors — Custom exception classes
====================================================

Defines the exception hierarchy for the game client.
Each exception stores full context for structured logging.
"""

from __future__ import annotations
from typing import Any, List, Optional
import json


class OvercookiedClientError(Exception):
    """Base exception for all Overcookied client errors."""
    pass


class ConfigurationError(OvercookiedClientError):
    """Raised when required configuration is missing or malformed."""

    def __init__(self, message: str, missing_keys: Optional[List[str]] = None):
        self.missing_keys = missing_keys or []
        super().__init__(message)


class FrameDecodeError(OvercookiedClientError):
    """Raised when an inbound frame cannot be decoded.

    Never escapes the message router: it is logged and the frame dropped.
    """

    def __init__(self, reason: str, raw_frame: Any, message_type: Optional[str] = None):
        self.reason = reason
        self.raw_frame = raw_frame
        self.message_type = message_type
        super().__init__(f"Malformed frame: {reason}")

    def format_error_log(self) -> str:
        return _format_error_block(
            error_type="MALFORMED_FRAME",
            message_type=self.message_type,
            reason=self.reason,
            raw_frame=self.raw_frame,
        )


class InvalidTransitionError(OvercookiedClientError, ValueError):
    """Raised when a session event is not valid in the current phase."""

    def __init__(self, event: str, phase: str):
        self.event = event
        self.phase = phase
        super().__init__(f"Invalid transition: {event} from {phase}")


def _format_error_block(
    error_type: str,
    message_type: Optional[str],
    reason: str,
    raw_frame: Any,
) -> str:
    """Format a structured error block for the log."""
    from datetime import datetime, timezone

    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"

    lines = [
        "",
        "=" * 64,
        " FRAME ERROR — FRAME DISCARDED",
        "=" * 64,
        f" Timestamp:    {timestamp}",
        f" Error Type:   {error_type}",
        f" Frame Type:   {message_type or 'unknown'}",
        f" Reason:       {reason}",
        "",
        " ── RAW FRAME " + "─" * 50,
        _indent_raw(raw_frame),
        "",
        "=" * 64,
        "",
    ]
    return "\n".join(lines)


def _indent_raw(raw_frame: Any, limit: int = 512) -> str:
    """Render a raw frame for error logs, truncated to ``limit`` chars."""
    if isinstance(raw_frame, (bytes, bytearray)):
        text = raw_frame.decode("utf-8", errors="replace")
    elif isinstance(raw_frame, str):
        text = raw_frame
    else:
        try:
            text = json.dumps(raw_frame, indent=2, default=str)
        except (TypeError, ValueError):
            text = repr(raw_frame)
    if len(text) > limit:
        text = text[:limit] + " …"
    return "\n".join(" " + line for line in text.split("\n"))
