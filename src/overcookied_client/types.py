"""
overcookied_client.types — TypedDict schemas for wire payloads
==============================================================

Documents the exact structure of every frame payload exchanged with
the game server, and of the user session returned by the auth API.

All types are exported from the main package:

    from overcookied_client import GameStartPayload, UpdatePayload, ...

Use __annotations__ to inspect fields:

    >>> ClickPayload.__annotations__
    {'count': <class 'int'>}
"""

from typing import Any, Dict, Literal, TypedDict


# ============================================
# Auth API
# ============================================

class UserSession(TypedDict):
    """Body returned by ``GET /auth/verify``.

    Fields
    ------
    id : str
        Stable user identifier. Golden-cookie claims are attributed to it.
    email : str
    name : str
    picture : str
        Avatar URL.
    token : str
        Bearer JWT used to open the game socket.
    """
    id: str
    email: str
    name: str
    picture: str
    token: str


# ============================================
# Frame envelope
# ============================================

class Frame(TypedDict):
    """Every frame, in both directions."""
    type: str
    payload: Dict[str, Any]


# ============================================
# Inbound payloads (server → client)
# ============================================

class GameStartPayload(TypedDict, total=False):
    """GAME_START payload. Every field may be absent."""
    timeRemaining: int      # seconds
    p1Score: int
    p2Score: int
    p1Name: str
    p2Name: str
    p1Picture: str
    p2Picture: str
    role: Literal["p1", "p2"]


class UpdatePayload(TypedDict, total=False):
    """UPDATE payload: any subset of the snapshot fields."""
    timeRemaining: int
    p1Score: int
    p2Score: int
    p1Name: str
    p2Name: str
    p1Picture: str
    p2Picture: str
    role: str
    goldenCookieClaimedBy: str   # user id of the claimant


class CookieSpawnPayload(TypedDict):
    """COOKIE_SPAWN payload, coordinates in percent of the play field."""
    x: float
    y: float


class OpponentClickPayload(TypedDict):
    """OPPONENT_CLICK payload."""
    count: int


class GameOverPayload(TypedDict, total=False):
    """GAME_OVER payload.

    ``winner`` is a user id or ``"draw"``; ``reason`` is e.g. ``"quit"``
    or ``"opponent_disconnected"``.
    """
    winner: str
    reason: str


# ============================================
# Outbound payloads (client → server)
# ============================================

class ClickPayload(TypedDict):
    """CLICK payload."""
    count: Literal[1, 2]
