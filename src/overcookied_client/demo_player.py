"""
overcookied_client.demo_player — Demo auto-clicker
==================================================

A ready-to-use bot that plays a match on its own: it clicks at a fixed
rate while the match is running, doubles its clicks while a power-up
is active, and claims every golden cookie it sees.

Usage:
    async with GameClient(api_url=url) as client:
        await client.connect(credential)
        reader = asyncio.create_task(client.run())
        await DemoPlayer(client, clicks_per_second=8).play()
"""

import asyncio
import logging

from ._session import ConnectionState, SessionPhase
from .client import GameClient

logger = logging.getLogger("overcookied_client.demo")


class DemoPlayer:
    """
    Drives a connected GameClient until the match ends.

    Args:
        client: A client that has already called ``connect()``.
        clicks_per_second: Click rate while PLAYING.
    """

    def __init__(self, client: GameClient, clicks_per_second: int = 5):
        if clicks_per_second <= 0:
            raise ValueError("clicks_per_second must be positive")
        self.client = client
        self.interval = 1.0 / clicks_per_second
        self.clicks_sent = 0
        self.cookies_claimed = 0

    @property
    def is_done(self) -> bool:
        return (
            self.client.phase == SessionPhase.FINISHED
            or self.client.connection_state == ConnectionState.DISCONNECTED
        )

    def tick(self) -> None:
        """One bot step: claim a visible cookie, then click."""
        if self.client.phase != SessionPhase.PLAYING:
            return
        if self.client.powerup.spawn is not None and self.client.claim_golden_cookie():
            self.cookies_claimed += 1
        if self.client.send_click(double=self.client.is_power_up_active):
            self.clicks_sent += 1

    async def play(self) -> None:
        """Tick until the session is finished or the socket is gone."""
        logger.info(f"Demo player started ({1.0 / self.interval:.0f} clicks/s)")
        while not self.is_done:
            self.tick()
            await asyncio.sleep(self.interval)
        logger.info(
            f"Demo player stopped: {self.clicks_sent} clicks, "
            f"{self.cookies_claimed} golden cookies claimed"
        )
