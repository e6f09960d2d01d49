# Area: Session
"""
Session layer — the socket and the lifecycle around it.

This package handles:
- Opening, authenticating and closing the game socket
- The IDLE → MATCHMAKING → PLAYING → FINISHED lifecycle
- Encoding and sending outbound actions
"""

from .enums import ConnectionState, SessionPhase, SessionEvent
from .credential import Credential
from .state_machine import SessionStateMachine
from .connection import ConnectionManager
from .action_encoder import OutboundActionEncoder

__all__ = [
    "ConnectionState",
    "SessionPhase",
    "SessionEvent",
    "Credential",
    "SessionStateMachine",
    "ConnectionManager",
    "OutboundActionEncoder",
]
