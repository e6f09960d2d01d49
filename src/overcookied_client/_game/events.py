# Area: Game
"""
overcookied_client._game.events — Typed inbound events
======================================================

One pydantic model per inbound frame type, joined into a union
discriminated on ``type``. Field names are snake_case; the wire uses
the camelCase aliases.

Payload fields are presence-checked only: anything absent takes its
default, unknown keys are ignored. A field whose value has the wrong
type also falls back to its default, so one odd value never costs the
rest of the frame. Numeric names are accepted as strings.
"""

from __future__ import annotations
import logging
from typing import Annotated, Any, Dict, Literal, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    ValidationInfo,
    ValidatorFunctionWrapHandler,
    field_validator,
)

logger = logging.getLogger("overcookied_client.router")

# Snapshot fields an UPDATE may carry, wire name → attribute name
SNAPSHOT_FIELD_ALIASES: Dict[str, str] = {
    "timeRemaining": "time_remaining",
    "p1Score": "p1_score",
    "p2Score": "p2_score",
    "p1Name": "p1_name",
    "p2Name": "p2_name",
    "p1Picture": "p1_picture",
    "p2Picture": "p2_picture",
    "role": "role",
    "winner": "winner",
    "reason": "reason",
}

# Every payload attribute across the event models
PAYLOAD_FIELDS = (
    *SNAPSHOT_FIELD_ALIASES.values(), "golden_cookie_claimed_by", "x", "y", "count",
)


class _InboundEvent(BaseModel):
    model_config = ConfigDict(
        frozen=True, extra="ignore", populate_by_name=True, coerce_numbers_to_str=True,
    )

    @field_validator(*PAYLOAD_FIELDS, mode="wrap", check_fields=False)
    @classmethod
    def default_on_bad_value(cls, value: Any, handler: ValidatorFunctionWrapHandler,
                             info: ValidationInfo) -> Any:
        try:
            return handler(value)
        except ValidationError:
            logger.debug(f"Ignoring {info.field_name}={value!r} in {cls.__name__}")
            return cls.model_fields[info.field_name].default


class GameStartEvent(_InboundEvent):
    """Match found; carries the initial scoreboard."""
    type: Literal["GAME_START"] = "GAME_START"
    time_remaining: Optional[int] = Field(None, alias="timeRemaining")
    p1_score: Optional[int] = Field(None, alias="p1Score")
    p2_score: Optional[int] = Field(None, alias="p2Score")
    p1_name: Optional[str] = Field(None, alias="p1Name")
    p2_name: Optional[str] = Field(None, alias="p2Name")
    p1_picture: Optional[str] = Field(None, alias="p1Picture")
    p2_picture: Optional[str] = Field(None, alias="p2Picture")
    role: Optional[str] = None


class UpdateEvent(_InboundEvent):
    """Partial scoreboard update, optionally attributing a golden-cookie claim."""
    type: Literal["UPDATE"] = "UPDATE"
    time_remaining: Optional[int] = Field(None, alias="timeRemaining")
    p1_score: Optional[int] = Field(None, alias="p1Score")
    p2_score: Optional[int] = Field(None, alias="p2Score")
    p1_name: Optional[str] = Field(None, alias="p1Name")
    p2_name: Optional[str] = Field(None, alias="p2Name")
    p1_picture: Optional[str] = Field(None, alias="p1Picture")
    p2_picture: Optional[str] = Field(None, alias="p2Picture")
    role: Optional[str] = None
    winner: Optional[str] = None
    reason: Optional[str] = None
    golden_cookie_claimed_by: Optional[str] = Field(None, alias="goldenCookieClaimedBy")

    def changes(self) -> Dict[str, Any]:
        """Snapshot fields present in this update (null counts as absent)."""
        return {
            name: getattr(self, name)
            for name in SNAPSHOT_FIELD_ALIASES.values()
            if name in self.model_fields_set and getattr(self, name) is not None
        }


class CookieSpawnEvent(_InboundEvent):
    """A golden cookie appeared at (x, y), in percent of the play field."""
    type: Literal["COOKIE_SPAWN"] = "COOKIE_SPAWN"
    x: float = 0.0
    y: float = 0.0


class OpponentClickEvent(_InboundEvent):
    """The opponent clicked; purely visual."""
    type: Literal["OPPONENT_CLICK"] = "OPPONENT_CLICK"
    count: int = Field(1, ge=1)


class GameOverEvent(_InboundEvent):
    """Match ended."""
    type: Literal["GAME_OVER"] = "GAME_OVER"
    winner: Optional[str] = None
    reason: Optional[str] = None


InboundEvent = Annotated[
    Union[GameStartEvent, UpdateEvent, CookieSpawnEvent, OpponentClickEvent, GameOverEvent],
    Field(discriminator="type"),
]

INBOUND_EVENT_ADAPTER: TypeAdapter = TypeAdapter(InboundEvent)
