# Area: Game
"""
overcookied_client._game.scoreboard — Authoritative game snapshot
=================================================================

Holds the scoreboard as last reported by the server and merges the
server's frames into it:

- GAME_START replaces the snapshot wholesale
- UPDATE overlays only the fields it carries
- GAME_OVER records the result once; later results are ignored

Once a winner is recorded the snapshot is frozen. Nothing local ever
writes scores, the clock or the winner.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
import logging
from typing import Optional

from .._shared.observable import Observable
from .events import GameOverEvent, GameStartEvent, UpdateEvent

logger = logging.getLogger("overcookied_client.scoreboard")

DRAW = "draw"


@dataclass(frozen=True)
class GameSnapshot:
    """Scoreboard of one match as seen by this client."""
    time_remaining: int = 0
    p1_score: int = 0
    p2_score: int = 0
    p1_name: str = ""
    p2_name: str = ""
    p1_picture: str = ""
    p2_picture: str = ""
    role: Optional[str] = None          # "p1" or "p2"
    winner: Optional[str] = None        # user id or "draw"
    reason: Optional[str] = None

    @property
    def is_final(self) -> bool:
        return bool(self.winner)

    @property
    def is_draw(self) -> bool:
        return self.winner == DRAW

    @property
    def my_score(self) -> int:
        return self.p2_score if self.role == "p2" else self.p1_score

    @property
    def opponent_score(self) -> int:
        return self.p1_score if self.role == "p2" else self.p2_score


class ScoreboardReducer(Observable):
    """
    Reconciles server frames into a single GameSnapshot.

    ``snapshot`` is None until the first GAME_START (or a stray UPDATE)
    arrives. Snapshots are immutable; every accepted frame swaps in a
    new one and notifies listeners.
    """

    def __init__(self) -> None:
        super().__init__()
        self.snapshot: Optional[GameSnapshot] = None

    def on_start(self, event: GameStartEvent) -> GameSnapshot:
        """Replace the snapshot with the match's initial state."""
        self.snapshot = GameSnapshot(
            time_remaining=event.time_remaining or 0,
            p1_score=event.p1_score or 0,
            p2_score=event.p2_score or 0,
            p1_name=event.p1_name or "",
            p2_name=event.p2_name or "",
            p1_picture=event.p1_picture or "",
            p2_picture=event.p2_picture or "",
            role=event.role or "p1",
        )
        logger.info(
            f"Match started: {self.snapshot.p1_name or 'p1'} vs {self.snapshot.p2_name or 'p2'} "
            f"(playing as {self.snapshot.role}, {self.snapshot.time_remaining}s)"
        )
        self._notify()
        return self.snapshot

    def on_update(self, event: UpdateEvent) -> Optional[GameSnapshot]:
        """Overlay the fields present in ``event``; absent fields keep their value."""
        if self.snapshot is not None and self.snapshot.is_final:
            logger.debug("Snapshot is final, UPDATE ignored")
            return self.snapshot

        changes = event.changes()
        if not changes:
            return self.snapshot

        base = self.snapshot if self.snapshot is not None else GameSnapshot()
        self.snapshot = replace(base, **changes)
        self._notify()
        return self.snapshot

    def on_game_over(self, event: GameOverEvent) -> Optional[GameSnapshot]:
        """Record the result unless one is already recorded."""
        if self.snapshot is not None and self.snapshot.is_final:
            logger.info(
                f"Duplicate GAME_OVER ignored (winner already {self.snapshot.winner}, "
                f"got {event.winner})"
            )
            return self.snapshot

        base = self.snapshot if self.snapshot is not None else GameSnapshot()
        self.snapshot = replace(base, winner=event.winner, reason=event.reason)
        logger.info(f"Match over: winner={event.winner} reason={event.reason or 'normal'}")
        self._notify()
        return self.snapshot

    def reset(self) -> None:
        """Drop the snapshot (fresh session)."""
        if self.snapshot is None:
            return
        self.snapshot = None
        self._notify()
