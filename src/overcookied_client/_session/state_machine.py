# Area: Session
"""
overcookied_client._session.state_machine — Session State Machine
=================================================================

Tracks the client's lifecycle IDLE → MATCHMAKING → PLAYING → FINISHED.
Phases only move forward; FINISHED is terminal for the connection.
The only way back is ``reset()``, used when a new credential starts
a fresh session.
"""

import logging

from .._shared.observable import Observable
from ..errors import InvalidTransitionError
from .enums import SessionEvent, SessionPhase

logger = logging.getLogger("overcookied_client.session")


# Valid phase transitions: {current_phase: {event: next_phase}}
TRANSITIONS = {
    SessionPhase.IDLE: {
        SessionEvent.SOCKET_OPENED: SessionPhase.MATCHMAKING,
    },
    SessionPhase.MATCHMAKING: {
        SessionEvent.GAME_STARTED: SessionPhase.PLAYING,
        SessionEvent.QUIT: SessionPhase.FINISHED,
    },
    SessionPhase.PLAYING: {
        SessionEvent.GAME_OVER: SessionPhase.FINISHED,
        SessionEvent.QUIT: SessionPhase.FINISHED,
    },
    SessionPhase.FINISHED: {},
}


class SessionStateMachine(Observable):
    """
    State machine for the session lifecycle.

    Attributes:
        current_phase: The current phase of the session
    """

    def __init__(self):
        """Initialize state machine in IDLE."""
        super().__init__()
        self.current_phase = SessionPhase.IDLE

    @property
    def is_finished(self) -> bool:
        return self.current_phase == SessionPhase.FINISHED

    def can_transition(self, event: SessionEvent) -> bool:
        """
        Check if a transition is valid from current phase.

        Args:
            event: The event to check

        Returns:
            True if the transition is valid, False otherwise
        """
        return event in TRANSITIONS.get(self.current_phase, {})

    def transition(self, event: SessionEvent) -> SessionPhase:
        """
        Execute a phase transition.

        Args:
            event: The event triggering the transition

        Returns:
            The new phase after transition

        Raises:
            InvalidTransitionError: If the transition is not valid
        """
        if not self.can_transition(event):
            raise InvalidTransitionError(event.value, self.current_phase.value)

        previous = self.current_phase
        self.current_phase = TRANSITIONS[previous][event]
        logger.info(f"Phase: {previous.value} → {self.current_phase.value} ({event.value})")
        self._notify()
        return self.current_phase

    def try_transition(self, event: SessionEvent) -> bool:
        """Transition if valid; otherwise log and leave the phase alone."""
        if not self.can_transition(event):
            logger.debug(f"Ignoring {event.value} in phase {self.current_phase.value}")
            return False
        self.transition(event)
        return True

    def reset(self) -> None:
        """Reset state machine to IDLE (new credential)."""
        if self.current_phase == SessionPhase.IDLE:
            return
        logger.info(f"Phase: {self.current_phase.value} → IDLE (reset)")
        self.current_phase = SessionPhase.IDLE
        self._notify()
