# Area: Shared
"""
overcookied_client._shared.logging_config — Structured logging setup
====================================================================

Two handlers on the ``overcookied_client`` logger: a coloured terminal
line and a JSON-lines file. Records about a single frame carry a
``frame_type`` extra that both handlers show.

In protocol mode the terminal handler goes quiet and the
ProtocolLogger prints frame traffic instead; the file keeps everything.
"""

from __future__ import annotations
import logging
import json
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..errors import FrameDecodeError

# Package logger
logger = logging.getLogger("overcookied_client")

# Flag to control protocol-only terminal output
_protocol_mode_enabled = False


class ProtocolFilter(logging.Filter):
    """Filter that suppresses all logs when protocol mode is enabled.

    In protocol mode, frame traffic is printed by the ProtocolLogger
    instead of the standard logging handlers.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        return not _protocol_mode_enabled


class TerminalFormatter(logging.Formatter):
    """One terminal line per record: time, coloured level, component, message.

    Records about a frame carry its type in brackets before the message.
    The record itself is left untouched for the other handlers.
    """

    LEVEL_COLORS = {
        logging.DEBUG: "\033[36m",
        logging.INFO: "\033[32m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
        logging.CRITICAL: "\033[35m",
    }
    RESET = "\033[0m"

    def __init__(self) -> None:
        super().__init__(datefmt="%H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        color = self.LEVEL_COLORS.get(record.levelno, self.RESET)
        component = record.name.removeprefix("overcookied_client.")
        frame_type = getattr(record, "frame_type", None)
        context = f"[{frame_type}] " if frame_type else ""
        line = (
            f"{self.formatTime(record, self.datefmt)} │ "
            f"{color}{record.levelname:<7}{self.RESET} │ {component:<10} │ "
            f"{context}{record.getMessage()}"
        )
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


class JSONFormatter(logging.Formatter):
    """One JSON object per line, stamped with the record's own time."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        frame_type = getattr(record, "frame_type", None)
        if frame_type is not None:
            log_data["frame_type"] = frame_type
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


def setup_logging(log_file_path: str = "overcookied_client.log",
                  level: int = logging.INFO) -> None:
    """
    Install the terminal and file handlers, replacing any from a previous call.

    An unwritable log file is reported on the terminal and skipped; the
    client still runs with terminal logging only.
    """
    logger.setLevel(level)
    logger.handlers.clear()

    terminal_handler = logging.StreamHandler(sys.stdout)
    terminal_handler.setLevel(level)
    terminal_handler.setFormatter(TerminalFormatter())
    terminal_handler.addFilter(ProtocolFilter())
    logger.addHandler(terminal_handler)

    try:
        log_path = Path(log_file_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
    except OSError as e:
        logger.warning(f"Could not create log file {log_file_path}: {e}")
    else:
        file_handler.setLevel(level)
        file_handler.setFormatter(JSONFormatter())
        logger.addHandler(file_handler)

    logger.propagate = False


def log_frame_error(error: "FrameDecodeError") -> None:
    """Log a dropped inbound frame as a FRAME DISCARDED block."""
    logger.warning(
        error.format_error_log(),
        extra={"frame_type": error.message_type},
    )


def enable_protocol_mode() -> None:
    """Silence the terminal handler; frame traffic comes from the ProtocolLogger."""
    global _protocol_mode_enabled
    _protocol_mode_enabled = True


def disable_protocol_mode() -> None:
    global _protocol_mode_enabled
    _protocol_mode_enabled = False


def is_protocol_mode_enabled() -> bool:
    return _protocol_mode_enabled
