# Area: Session
"""
overcookied_client._session.enums — Session State Machine Enums
===============================================================

Defines the connection states, session phases and the events that
move the session between phases.
"""

from enum import Enum


class ConnectionState(Enum):
    """
    State of the game socket. Set by ConnectionManager only.

    DISCONNECTED -> CONNECTING (connect() called)
    CONNECTING -> CONNECTED (socket open)
    CONNECTING -> DISCONNECTED (open failed)
    CONNECTED -> DISCONNECTED (close, error, or disconnect())
    """
    DISCONNECTED = "DISCONNECTED"
    CONNECTING = "CONNECTING"
    CONNECTED = "CONNECTED"


class SessionPhase(Enum):
    """
    Phases of one session.

    Phase transitions:
    IDLE -> MATCHMAKING (on SOCKET_OPENED)
    MATCHMAKING -> PLAYING (on GAME_STARTED)
    MATCHMAKING -> FINISHED (on QUIT)
    PLAYING -> FINISHED (on GAME_OVER or QUIT)
    Any phase -> IDLE (on reset, i.e. a new credential)
    """
    IDLE = "IDLE"
    MATCHMAKING = "MATCHMAKING"
    PLAYING = "PLAYING"
    FINISHED = "FINISHED"


class SessionEvent(Enum):
    """
    Events that trigger phase transitions.

    Events are triggered by:
    - SOCKET_OPENED: the connection opened and JOIN_QUEUE was sent
    - GAME_STARTED: GAME_START received
    - GAME_OVER: GAME_OVER received
    - QUIT: local quit action issued (optimistic, no server ack awaited)
    """
    SOCKET_OPENED = "SOCKET_OPENED"
    GAME_STARTED = "GAME_STARTED"
    GAME_OVER = "GAME_OVER"
    QUIT = "QUIT"
