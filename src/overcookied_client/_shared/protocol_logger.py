# Area: Shared
"""
overcookied_client._shared.protocol_logger — Frame traffic logging
==================================================================

One colored line per frame received or sent, with the session phase
and the side of the board the local client occupies.
"""

from __future__ import annotations
import sys
from datetime import datetime
from typing import Optional

# ══════════════════════════════════════════════════════════════
# ANSI COLOR CODES
# ══════════════════════════════════════════════════════════════

GREEN = "\033[32m"         # Frames
ORANGE = "\033[38;5;208m"  # Local optimistic effects
RED = "\033[31m"           # Errors
RESET = "\033[0m"

# ══════════════════════════════════════════════════════════════
# MESSAGE TYPE → DISPLAY NAME MAPPINGS
# ══════════════════════════════════════════════════════════════

RECEIVE_DISPLAY_NAMES = {
    "GAME_START": "MATCH-FOUND",
    "UPDATE": "SCOREBOARD",
    "COOKIE_SPAWN": "GOLDEN-COOKIE",
    "OPPONENT_CLICK": "OPPONENT-CLICK",
    "GAME_OVER": "MATCH-OVER",
}

SEND_DISPLAY_NAMES = {
    "JOIN_QUEUE": "JOIN-QUEUE",
    "CLICK": "CLICK",
    "COOKIE_CLICK": "CLAIM-COOKIE",
    "QUIT_GAME": "QUIT",
}


class ProtocolLogger:
    """Logger for frame traffic."""

    def __init__(self, role: Optional[str] = None):
        self.role = role
        self._phase: str = "IDLE"

    def set_phase(self, phase: str) -> None:
        self._phase = phase or "IDLE"

    def set_role(self, role: Optional[str]) -> None:
        self.role = role

    def _get_role(self) -> str:
        return (self.role or "--").upper()

    def _now(self) -> str:
        return datetime.now().strftime("%H:%M:%S")

    def _now_ms(self) -> str:
        return datetime.now().strftime("%H:%M:%S:%f")[:-3]

    def log_received(self, message_type: str, detail: str = "") -> None:
        """Log a received frame."""
        display = RECEIVE_DISPLAY_NAMES.get(message_type, message_type)
        line = (
            f"{GREEN}{self._now_ms()} | PHASE: {self._phase:11} | RECEIVED | "
            f"{display:15} | ROLE: {self._get_role():2} | {detail}{RESET}"
        )
        print(line, file=sys.stdout)

    def log_sent(self, message_type: str, detail: str = "") -> None:
        """Log a sent frame."""
        display = SEND_DISPLAY_NAMES.get(message_type, message_type)
        line = (
            f"{GREEN}{self._now_ms()} | PHASE: {self._phase:11} | SENT     | "
            f"{display:15} | ROLE: {self._get_role():2} | {detail}{RESET}"
        )
        print(line, file=sys.stdout)

    def log_local(self, description: str) -> None:
        """Log an optimistic local state change."""
        line = f"{ORANGE}{self._now_ms()} | PHASE: {self._phase:11} | LOCAL    | {description}{RESET}"
        print(line, file=sys.stdout)

    def log_error(self, description: str) -> None:
        """Log an error."""
        line = f"{RED}[ERROR] {self._now()} | {description}{RESET}"
        print(line, file=sys.stderr)


# Global singleton instance
_protocol_logger: Optional[ProtocolLogger] = None


def get_protocol_logger() -> ProtocolLogger:
    """Get or create the global protocol logger instance."""
    global _protocol_logger
    if _protocol_logger is None:
        _protocol_logger = ProtocolLogger()
    return _protocol_logger
