"""
overcookied_client — Overcookied Game Client
============================================

Python client for the two-player Overcookied clicker game: opens the
authenticated game socket, follows the session lifecycle, keeps the
scoreboard in sync with the server and manages golden-cookie power-ups.

Quick Start:
    from overcookied_client import Credential, GameClient

    async with GameClient(api_url="https://api.example.com") as client:
        await client.connect(Credential(user_id="u1", token=jwt))
        await client.run()

Demo bot:
    overcookied-client --api-url http://localhost:8080 --token $JWT --demo

Observing state
---------------
The state containers notify subscribers after every change:

    client.scoreboard.subscribe(lambda board: print(board.snapshot))
    client.powerup.subscribe(lambda timer: print(timer.is_power_up_active))
"""

from .client import GameClient
from .demo_player import DemoPlayer
from ._session import (
    ConnectionManager,
    ConnectionState,
    Credential,
    OutboundActionEncoder,
    SessionEvent,
    SessionPhase,
    SessionStateMachine,
)
from ._game import (
    GameSnapshot,
    GoldenCookieSpawn,
    MessageRouter,
    OpponentPulse,
    PowerUpWindow,
    POWER_UP_SECONDS,
)
from ._shared import AuthClient, Origin, derive_ws_url
from .errors import (
    OvercookiedClientError,
    ConfigurationError,
    FrameDecodeError,
    InvalidTransitionError,
)
from .types import (
    UserSession,
    Frame,
    GameStartPayload,
    UpdatePayload,
    CookieSpawnPayload,
    OpponentClickPayload,
    GameOverPayload,
    ClickPayload,
)

__all__ = [
    # Main classes
    "GameClient",
    "DemoPlayer",
    "Credential",
    "AuthClient",
    # Components
    "ConnectionManager",
    "MessageRouter",
    "OutboundActionEncoder",
    "SessionStateMachine",
    # State
    "ConnectionState",
    "SessionPhase",
    "SessionEvent",
    "GameSnapshot",
    "GoldenCookieSpawn",
    "PowerUpWindow",
    "OpponentPulse",
    "POWER_UP_SECONDS",
    # URL derivation
    "Origin",
    "derive_ws_url",
    # Errors
    "OvercookiedClientError",
    "ConfigurationError",
    "FrameDecodeError",
    "InvalidTransitionError",
    # Wire types
    "UserSession",
    "Frame",
    "GameStartPayload",
    "UpdatePayload",
    "CookieSpawnPayload",
    "OpponentClickPayload",
    "GameOverPayload",
    "ClickPayload",
]
__version__ = "1.0.0"
