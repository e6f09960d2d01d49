# Area: Game
"""
overcookied_client._game.opponent_pulse — Opponent click pulse
==============================================================

Single-slot, last-write-wins record of the opponent's latest click.
It drives a visual cue only and never touches the scoreboard.
"""

from __future__ import annotations
import time
from dataclasses import dataclass
from typing import Callable, Optional

from .._shared.observable import Observable
from .events import OpponentClickEvent


@dataclass(frozen=True)
class OpponentPulse:
    count: int
    timestamp: float


class OpponentPulseTracker(Observable):
    def __init__(self, clock: Callable[[], float] = time.time):
        super().__init__()
        self._clock = clock
        self.pulse: Optional[OpponentPulse] = None

    def on_click(self, event: OpponentClickEvent) -> OpponentPulse:
        self.pulse = OpponentPulse(count=event.count, timestamp=self._clock())
        self._notify()
        return self.pulse

    def reset(self) -> None:
        if self.pulse is None:
            return
        self.pulse = None
        self._notify()
