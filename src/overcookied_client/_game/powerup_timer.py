# Area: Game
"""
overcookied_client._game.powerup_timer — Golden cookie and power-up window
==========================================================================

Tracks the golden cookie currently on the field and the local
double-points window earned by claiming one.

- COOKIE_SPAWN puts a cookie on the field, replacing any previous one
- A claim attributed by the server (UPDATE.goldenCookieClaimedBy) takes
  the cookie off the field for everyone; if the claimant is us, a
  window opens for POWER_UP_SECONDS
- A local claim takes the cookie off the field immediately, before the
  server answers; the server's later clear is then a no-op
- The window closes itself on a timer, not on any frame

All times are epoch seconds from the injected clock.
"""

from __future__ import annotations
import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Optional, Protocol

from .._shared.observable import Observable
from .events import CookieSpawnEvent, UpdateEvent

logger = logging.getLogger("overcookied_client.powerup")

POWER_UP_SECONDS = 5.0


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """Anything with asyncio's ``call_later`` signature."""

    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> TimerHandle: ...


@dataclass(frozen=True)
class GoldenCookieSpawn:
    x: float
    y: float
    timestamp: float


@dataclass(frozen=True)
class PowerUpWindow:
    granted_at: float
    expires_at: float

    def remaining(self, now: float) -> float:
        return max(0.0, self.expires_at - now)


class PowerUpTimer(Observable):
    """
    Owns the golden-cookie spawn and the power-up window.

    Args:
        scheduler: Used to close the window. Defaults to the running
            asyncio loop, looked up when a window is granted.
        clock: Returns the current time in epoch seconds.
    """

    def __init__(self, scheduler: Optional[Scheduler] = None,
                 clock: Callable[[], float] = time.time):
        super().__init__()
        self._scheduler = scheduler
        self._clock = clock
        self._expiry_handle: Optional[TimerHandle] = None
        self.spawn: Optional[GoldenCookieSpawn] = None
        self.window: Optional[PowerUpWindow] = None

    @property
    def is_power_up_active(self) -> bool:
        return self.window is not None

    # ── Inbound ──────────────────────────────────────────────

    def on_spawn(self, event: CookieSpawnEvent) -> GoldenCookieSpawn:
        """Put a cookie on the field, replacing any previous one."""
        if self.spawn is not None:
            logger.debug("Golden cookie replaced by a new spawn")
        self.spawn = GoldenCookieSpawn(x=event.x, y=event.y, timestamp=self._clock())
        logger.info(f"Golden cookie spawned at ({event.x:.1f}%, {event.y:.1f}%)")
        self._notify()
        return self.spawn

    def on_update(self, event: UpdateEvent, local_user_id: Optional[str]) -> bool:
        """
        Apply a claim attribution carried by an UPDATE.

        Returns:
            True if the claim granted us a power-up window.
        """
        claimant = event.golden_cookie_claimed_by
        if not claimant:
            return False

        self._clear_spawn()
        if local_user_id and claimant == local_user_id:
            self._grant()
            return True

        logger.info(f"Golden cookie claimed by {claimant}")
        self._notify()
        return False

    # ── Local ────────────────────────────────────────────────

    def claim_locally(self) -> bool:
        """Take the cookie off the field before the server confirms.

        Returns:
            True if a cookie was on the field.
        """
        if self.spawn is None:
            return False
        self._clear_spawn()
        logger.debug("Golden cookie cleared locally, awaiting attribution")
        self._notify()
        return True

    def reset(self) -> None:
        """Cancel the pending expiry and forget the spawn and window."""
        self._cancel_expiry()
        changed = self.spawn is not None or self.window is not None
        self.spawn = None
        self.window = None
        if changed:
            self._notify()

    # ── Internals ────────────────────────────────────────────

    def _clear_spawn(self) -> None:
        self.spawn = None

    def _grant(self) -> None:
        self._cancel_expiry()
        now = self._clock()
        window = PowerUpWindow(granted_at=now, expires_at=now + POWER_UP_SECONDS)
        self.window = window
        scheduler = self._scheduler or asyncio.get_running_loop()
        self._expiry_handle = scheduler.call_later(POWER_UP_SECONDS, self._expire, window)
        logger.info(f"Power-up granted for {POWER_UP_SECONDS:.0f}s")
        self._notify()

    def _expire(self, window: PowerUpWindow) -> None:
        # Stale expiry for a replaced window
        if self.window is not window:
            return
        self._expiry_handle = None
        self.window = None
        logger.info("Power-up expired")
        self._notify()

    def _cancel_expiry(self) -> None:
        if self._expiry_handle is not None:
            self._expiry_handle.cancel()
            self._expiry_handle = None
