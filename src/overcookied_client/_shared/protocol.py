# Area: Shared
"""
overcookied_client._shared.protocol — Wire helpers
==================================================

Frame construction and endpoint URL derivation for the game socket.
Frames in both directions are JSON objects ``{"type": str, "payload": dict}``.
"""

import json
from typing import Any, Dict, NamedTuple, Optional
from urllib.parse import quote, urlsplit

from ..errors import ConfigurationError

WS_PATH = "/ws"
TOKEN_PARAM = "token"

# Inbound (server → client)
GAME_START = "GAME_START"
UPDATE = "UPDATE"
COOKIE_SPAWN = "COOKIE_SPAWN"
OPPONENT_CLICK = "OPPONENT_CLICK"
GAME_OVER = "GAME_OVER"

# Outbound (client → server)
JOIN_QUEUE = "JOIN_QUEUE"
CLICK = "CLICK"
COOKIE_CLICK = "COOKIE_CLICK"
QUIT_GAME = "QUIT_GAME"

INBOUND_TYPES = frozenset({GAME_START, UPDATE, COOKIE_SPAWN, OPPONENT_CLICK, GAME_OVER})
OUTBOUND_TYPES = frozenset({JOIN_QUEUE, CLICK, COOKIE_CLICK, QUIT_GAME})


class Origin(NamedTuple):
    """Page origin the client is served from, e.g. ``Origin("https:", "x.com")``."""
    protocol: str
    host: str

    @classmethod
    def from_url(cls, url: str) -> "Origin":
        """Build an origin from a URL such as ``https://x.com:8443``."""
        parts = urlsplit(url)
        if not parts.scheme or not parts.netloc:
            raise ConfigurationError(f"Origin must be an absolute URL, got {url!r}")
        return cls(protocol=f"{parts.scheme}:", host=parts.netloc)


def derive_ws_url(api_url: Optional[str] = None, origin: Optional[Origin] = None) -> str:
    """Derive the socket endpoint URL.

    An explicit ``api_url`` wins; an empty string counts as absent. Otherwise
    the URL is derived from ``origin``. ``https`` maps to ``wss``, anything
    else to ``ws``.

    Raises:
        ConfigurationError: If neither an override nor an origin is given.
    """
    if api_url:
        ws_protocol = "wss:" if api_url.startswith("https") else "ws:"
        host = api_url
        for prefix in ("https://", "http://"):
            if host.startswith(prefix):
                host = host[len(prefix):]
                break
        return f"{ws_protocol}//{host.rstrip('/')}{WS_PATH}"

    if origin is None:
        raise ConfigurationError(
            "Cannot derive socket URL: no api_url override and no origin",
            missing_keys=["api_url", "origin"],
        )
    ws_protocol = "wss:" if origin.protocol == "https:" else "ws:"
    return f"{ws_protocol}//{origin.host}{WS_PATH}"


def with_token(ws_url: str, token: str) -> str:
    """Append the bearer token as a query parameter."""
    return f"{ws_url}?{TOKEN_PARAM}={quote(token, safe='')}"


def build_frame(message_type: str, payload: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Build an outbound frame. ``payload`` defaults to an empty object."""
    return {"type": message_type, "payload": dict(payload) if payload else {}}


def encode_frame(frame: Dict[str, Any]) -> str:
    """Serialize a frame for the wire."""
    return json.dumps(frame, separators=(",", ":"))
