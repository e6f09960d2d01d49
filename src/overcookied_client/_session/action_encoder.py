# Area: Session
"""
overcookied_client._session.action_encoder — Outbound actions
=============================================================

Turns user intent into outbound frames. Every send is guarded by the
connection state: while not CONNECTED the frame is dropped, never
queued or retried.

Two actions also apply an optimistic local effect that does not wait
for the server:

- claiming a golden cookie clears the local spawn as soon as the claim
  is sent, without waiting for the server's attribution
- quitting moves the session to FINISHED at once, whether or not the
  QUIT_GAME frame could be sent
"""

from __future__ import annotations
import logging
from typing import Optional

from .._game.powerup_timer import PowerUpTimer
from .._shared.protocol import CLICK, COOKIE_CLICK, QUIT_GAME, build_frame
from .._shared.protocol_logger import get_protocol_logger
from .connection import ConnectionManager
from .enums import SessionEvent
from .state_machine import SessionStateMachine

logger = logging.getLogger("overcookied_client.actions")


class OutboundActionEncoder:
    """
    Encodes and sends the client's outbound actions.

    Args:
        connection: Socket the frames go out on.
        session: Receives the optimistic QUIT transition.
        powerup: Receives the optimistic golden-cookie clear.
    """

    def __init__(self, connection: ConnectionManager,
                 session: Optional[SessionStateMachine] = None,
                 powerup: Optional[PowerUpTimer] = None):
        self._connection = connection
        self._session = session
        self._powerup = powerup

    def send_click(self, double: bool = False) -> bool:
        """Send one click worth 1 point, or 2 while a power-up is active."""
        return self._send(CLICK, {"count": 2 if double else 1})

    def claim_golden_cookie(self) -> bool:
        """Claim the golden cookie on the field.

        The local spawn is cleared only once the claim is sent; while
        disconnected the cookie stays visible. The server's later
        attribution only decides who gets the power-up.
        """
        sent = self._send(COOKIE_CLICK)
        if sent and self._powerup is not None and self._powerup.claim_locally():
            get_protocol_logger().log_local("golden cookie cleared (claim pending)")
        return sent

    def quit_game(self) -> bool:
        """Leave the session.

        Returns:
            True if QUIT_GAME was handed to the socket. The phase moves to
            FINISHED either way.
        """
        sent = self._send(QUIT_GAME)
        if self._session is not None and self._session.try_transition(SessionEvent.QUIT):
            get_protocol_logger().set_phase(self._session.current_phase.value)
            get_protocol_logger().log_local("session finished (quit, no ack awaited)")
        return sent

    def _send(self, message_type: str, payload: Optional[dict] = None) -> bool:
        frame = build_frame(message_type, payload)
        if not self._connection.send(frame):
            logger.debug(f"{message_type} dropped while {self._connection.state.value}")
            return False
        get_protocol_logger().log_sent(message_type, _describe(frame))
        return True


def _describe(frame: dict) -> str:
    payload = frame.get("payload") or {}
    return ", ".join(f"{k}={v}" for k, v in payload.items())
