"""
overcookied_client.client — Game client
=======================================

Composes the session and game layers into one client for one player:

    ConnectionManager ─ frames ─▶ MessageRouter ─ events ─▶ dispatch
                                                            ├─ SessionStateMachine
                                                            ├─ ScoreboardReducer
                                                            ├─ PowerUpTimer
                                                            └─ OpponentPulseTracker
    caller intent ─▶ OutboundActionEncoder ─▶ ConnectionManager

Everything runs on one asyncio loop. Frames are handled strictly in
arrival order; timers only touch the power-up window.

Usage:
    async with GameClient(api_url="https://api.example.com") as client:
        await client.connect(Credential(user_id="u1", token=token))
        await client.run()
"""

from __future__ import annotations
import logging
import time
from typing import Any, Callable, Optional, assert_never

from ._game import (
    CookieSpawnEvent,
    GameOverEvent,
    GameSnapshot,
    GameStartEvent,
    InboundEvent,
    MessageRouter,
    OpponentClickEvent,
    OpponentPulseTracker,
    PowerUpTimer,
    ScoreboardReducer,
    UpdateEvent,
)
from ._game.powerup_timer import Scheduler
from ._session import (
    ConnectionManager,
    ConnectionState,
    Credential,
    OutboundActionEncoder,
    SessionEvent,
    SessionPhase,
    SessionStateMachine,
)
from ._session.connection import Connector
from ._shared.protocol import Origin
from ._shared.protocol_logger import get_protocol_logger

logger = logging.getLogger("overcookied_client.client")


class GameClient:
    """
    One player's connection to the game server.

    Args:
        api_url: Explicit backend URL override. Empty means absent.
        origin: Page origin used when there is no override.
        connector: Socket factory, defaults to ``websockets.connect``.
        scheduler: Timer source for the power-up window, defaults to the
            running loop.
        clock: Epoch-seconds clock for spawn, pulse and window times.
    """

    def __init__(
        self,
        api_url: Optional[str] = None,
        origin: Optional[Origin] = None,
        connector: Optional[Connector] = None,
        scheduler: Optional[Scheduler] = None,
        clock: Callable[[], float] = time.time,
    ):
        self.connection = ConnectionManager(api_url=api_url, origin=origin, connector=connector)
        self.session = SessionStateMachine()
        self.scoreboard = ScoreboardReducer()
        self.powerup = PowerUpTimer(scheduler=scheduler, clock=clock)
        self.opponent = OpponentPulseTracker(clock=clock)
        self.router = MessageRouter()
        self.actions = OutboundActionEncoder(self.connection, self.session, self.powerup)
        self.credential: Optional[Credential] = None
        self._protocol_logger = get_protocol_logger()

    # ── State ────────────────────────────────────────────────

    @property
    def local_user_id(self) -> Optional[str]:
        return self.credential.user_id if self.credential else None

    @property
    def phase(self) -> SessionPhase:
        return self.session.current_phase

    @property
    def connection_state(self) -> ConnectionState:
        return self.connection.state

    @property
    def snapshot(self) -> Optional[GameSnapshot]:
        return self.scoreboard.snapshot

    @property
    def is_power_up_active(self) -> bool:
        return self.powerup.is_power_up_active

    # ── Lifecycle ────────────────────────────────────────────

    async def connect(self, credential: Credential) -> Optional[Any]:
        """
        Start a fresh session for ``credential``.

        Any previous connection and its timers are torn down first, and
        the phase, snapshot and effects are reset.

        Returns:
            The open socket, or None if it could not be opened. On failure
            the phase stays IDLE.
        """
        self._reset_session()
        await self.connection.disconnect()
        self.credential = credential

        socket = await self.connection.connect(credential)
        if socket is None:
            self._protocol_logger.log_error("could not open game socket")
            return None

        self.session.transition(SessionEvent.SOCKET_OPENED)
        self._protocol_logger.set_phase(self.phase.value)
        return socket

    async def run(self) -> None:
        """Handle inbound frames until the socket closes."""
        async for raw in self.connection.frames():
            self.handle_frame(raw)
        logger.info(f"Frame loop ended in phase {self.phase.value}")

    async def close(self) -> None:
        """Cancel timers and close the socket. Safe to call repeatedly."""
        self.powerup.reset()
        await self.connection.disconnect()

    async def __aenter__(self) -> "GameClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    # ── Inbound ──────────────────────────────────────────────

    def handle_frame(self, raw: Any) -> Optional[InboundEvent]:
        """Decode one raw frame and apply it. Returns the event, if any."""
        event = self.router.decode(raw)
        if event is None:
            return None
        self._dispatch(event)
        return event

    def _dispatch(self, event: InboundEvent) -> None:
        if isinstance(event, GameStartEvent):
            self._on_game_start(event)
        elif isinstance(event, UpdateEvent):
            self._on_update(event)
        elif isinstance(event, CookieSpawnEvent):
            self._on_cookie_spawn(event)
        elif isinstance(event, OpponentClickEvent):
            self._on_opponent_click(event)
        elif isinstance(event, GameOverEvent):
            self._on_game_over(event)
        else:
            assert_never(event)

    def _on_game_start(self, event: GameStartEvent) -> None:
        if not self.session.can_transition(SessionEvent.GAME_STARTED):
            self._ignore(event)
            return
        snapshot = self.scoreboard.on_start(event)
        self.session.transition(SessionEvent.GAME_STARTED)
        self._protocol_logger.set_phase(self.phase.value)
        self._protocol_logger.set_role(snapshot.role)
        self._protocol_logger.log_received(
            event.type, f"{snapshot.p1_name} vs {snapshot.p2_name}, {snapshot.time_remaining}s"
        )

    def _on_update(self, event: UpdateEvent) -> None:
        if self.phase not in (SessionPhase.PLAYING, SessionPhase.FINISHED):
            self._ignore(event)
            return
        snapshot = self.scoreboard.on_update(event)
        if snapshot is not None:
            self._protocol_logger.log_received(
                event.type, f"{snapshot.p1_score}-{snapshot.p2_score}, {snapshot.time_remaining}s left"
            )
        if self.powerup.on_update(event, self.local_user_id):
            self._protocol_logger.log_local("power-up active, clicks count double")

    def _on_cookie_spawn(self, event: CookieSpawnEvent) -> None:
        if self.phase != SessionPhase.PLAYING:
            self._ignore(event)
            return
        self.powerup.on_spawn(event)
        self._protocol_logger.log_received(event.type, f"x={event.x:.1f} y={event.y:.1f}")

    def _on_opponent_click(self, event: OpponentClickEvent) -> None:
        if self.phase != SessionPhase.PLAYING:
            self._ignore(event)
            return
        self.opponent.on_click(event)
        self._protocol_logger.log_received(event.type, f"count={event.count}")

    def _on_game_over(self, event: GameOverEvent) -> None:
        snapshot = self.scoreboard.on_game_over(event)
        self.session.try_transition(SessionEvent.GAME_OVER)
        self._protocol_logger.set_phase(self.phase.value)
        winner = snapshot.winner if snapshot is not None else event.winner
        self._protocol_logger.log_received(event.type, f"winner={winner} reason={event.reason or '-'}")

    def _ignore(self, event: InboundEvent) -> None:
        logger.debug(f"{event.type} ignored in phase {self.phase.value}")

    # ── Outbound ─────────────────────────────────────────────

    def send_click(self, double: bool = False) -> bool:
        return self.actions.send_click(double=double)

    def claim_golden_cookie(self) -> bool:
        return self.actions.claim_golden_cookie()

    def quit_game(self) -> bool:
        return self.actions.quit_game()

    # ── Internals ────────────────────────────────────────────

    def _reset_session(self) -> None:
        # Timers first so nothing fires against the old session
        self.powerup.reset()
        self.opponent.reset()
        self.scoreboard.reset()
        self.session.reset()
        self._protocol_logger.set_phase(SessionPhase.IDLE.value)
        self._protocol_logger.set_role(None)
