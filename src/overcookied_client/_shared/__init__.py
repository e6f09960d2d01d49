# Area: Shared
"""
Shared utilities used by both the session and game layers.

This package contains:
- Auth REST client for session verification and logout
- Logging configuration and frame traffic logging
- Wire helpers for frame formatting and socket URL derivation
- Change-notification mixin for state containers
"""

from .auth_client import AuthClient, is_token_fresh
from .logging_config import (
    setup_logging,
    log_frame_error,
    enable_protocol_mode,
    disable_protocol_mode,
    is_protocol_mode_enabled,
)
from .observable import Observable
from .protocol import (
    Origin,
    derive_ws_url,
    with_token,
    build_frame,
    encode_frame,
)
from .protocol_logger import get_protocol_logger, ProtocolLogger

__all__ = [
    "AuthClient",
    "is_token_fresh",
    "setup_logging",
    "log_frame_error",
    "enable_protocol_mode",
    "disable_protocol_mode",
    "is_protocol_mode_enabled",
    "Observable",
    "Origin",
    "derive_ws_url",
    "with_token",
    "build_frame",
    "encode_frame",
    "get_protocol_logger",
    "ProtocolLogger",
]
