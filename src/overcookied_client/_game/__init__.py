# Area: Game
"""
Game layer — everything a single match's frames mutate.

This package handles:
- Decoding raw frames into typed events
- The authoritative scoreboard snapshot
- Golden cookie spawns and the power-up window
- The opponent click pulse
"""

from .events import (
    GameStartEvent,
    UpdateEvent,
    CookieSpawnEvent,
    OpponentClickEvent,
    GameOverEvent,
    InboundEvent,
)
from .message_router import MessageRouter
from .scoreboard import GameSnapshot, ScoreboardReducer
from .powerup_timer import GoldenCookieSpawn, PowerUpWindow, PowerUpTimer, POWER_UP_SECONDS
from .opponent_pulse import OpponentPulse, OpponentPulseTracker

__all__ = [
    "GameStartEvent",
    "UpdateEvent",
    "CookieSpawnEvent",
    "OpponentClickEvent",
    "GameOverEvent",
    "InboundEvent",
    "MessageRouter",
    "GameSnapshot",
    "ScoreboardReducer",
    "GoldenCookieSpawn",
    "PowerUpWindow",
    "PowerUpTimer",
    "POWER_UP_SECONDS",
    "OpponentPulse",
    "OpponentPulseTracker",
]
