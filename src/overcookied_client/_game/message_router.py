# Area: Game
"""
overcookied_client._game.message_router — Raw frame → typed event
=================================================================

Decodes each inbound frame into one of the typed events in
``events.py``. A frame that cannot be decoded is logged and dropped;
an unknown ``type`` is ignored so newer servers can add message kinds.
Nothing here raises to the caller or touches the connection.
"""

from __future__ import annotations
import json
import logging
from typing import Any, Dict, Optional, Tuple, Union

from pydantic import ValidationError

from .._shared.logging_config import log_frame_error
from .._shared.protocol import INBOUND_TYPES
from ..errors import FrameDecodeError
from .events import INBOUND_EVENT_ADAPTER, InboundEvent

logger = logging.getLogger("overcookied_client.router")

RawFrame = Union[str, bytes, bytearray]


class MessageRouter:
    """
    Stateless frame decoder.

    Frames are handed back one at a time in the order given; the router
    never buffers, batches or reorders them.
    """

    def __init__(self) -> None:
        self.decoded_count = 0
        self.dropped_count = 0
        self.ignored_count = 0

    def decode(self, raw_frame: RawFrame) -> Optional[InboundEvent]:
        """
        Decode one frame.

        Args:
            raw_frame: Text (or UTF-8 bytes) as delivered by the socket.

        Returns:
            The typed event, or None for a malformed or unrecognized frame.
        """
        try:
            message_type, payload = self._parse(raw_frame)
        except FrameDecodeError as e:
            self.dropped_count += 1
            log_frame_error(e)
            return None

        if message_type not in INBOUND_TYPES:
            self.ignored_count += 1
            logger.debug(f"No handler for frame type={message_type}")
            return None

        try:
            event = INBOUND_EVENT_ADAPTER.validate_python({**payload, "type": message_type})
        except ValidationError as e:
            self.dropped_count += 1
            log_frame_error(FrameDecodeError(
                reason=f"payload rejected: {e.error_count()} error(s): {_summarize(e)}",
                raw_frame=raw_frame,
                message_type=message_type,
            ))
            return None

        self.decoded_count += 1
        return event

    def _parse(self, raw_frame: RawFrame) -> Tuple[str, Dict[str, Any]]:
        """Split a frame into (type, payload) or raise FrameDecodeError."""
        try:
            body = json.loads(raw_frame)
        except (TypeError, ValueError) as e:
            raise FrameDecodeError(f"invalid JSON ({e})", raw_frame) from e

        if not isinstance(body, dict):
            raise FrameDecodeError(f"expected an object, got {type(body).__name__}", raw_frame)

        message_type = body.get("type")
        if not isinstance(message_type, str) or not message_type:
            raise FrameDecodeError("missing field: type", raw_frame)

        payload = body.get("payload")
        if payload is None:
            payload = {}
        elif not isinstance(payload, dict):
            raise FrameDecodeError(
                f"'payload' must be an object, got {type(payload).__name__}",
                raw_frame,
                message_type=message_type,
            )
        return message_type, payload


def _summarize(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in item['loc'])}: {item['msg']}"
        for item in error.errors()
    )
