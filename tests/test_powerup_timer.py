# Area: Game Tests
"""Tests for PowerUpTimer — golden cookie spawns and the power-up window."""

import asyncio

import pytest

from overcookied_client._game.events import CookieSpawnEvent, UpdateEvent
from overcookied_client._game.powerup_timer import POWER_UP_SECONDS, PowerUpTimer


def spawn(x=10.0, y=20.0):
    return CookieSpawnEvent(x=x, y=y)


def claimed_by(user_id):
    return UpdateEvent.model_validate({"goldenCookieClaimedBy": user_id})


@pytest.fixture
def timer(scheduler, clock):
    return PowerUpTimer(scheduler=scheduler, clock=clock)


class TestSpawn:
    def test_spawn_recorded_with_timestamp(self, timer, clock):
        result = timer.on_spawn(spawn(12.5, 40))
        assert timer.spawn == result
        assert (result.x, result.y) == (12.5, 40.0)
        assert result.timestamp == clock.now

    def test_new_spawn_replaces_old(self, timer):
        timer.on_spawn(spawn(1, 1))
        timer.on_spawn(spawn(2, 2))
        assert (timer.spawn.x, timer.spawn.y) == (2.0, 2.0)


class TestServerClaim:
    """UPDATE.goldenCookieClaimedBy clears the spawn for everyone."""

    def test_local_claimant_gets_window(self, timer, clock):
        timer.on_spawn(spawn())
        assert timer.on_update(claimed_by("me"), "me") is True
        assert timer.spawn is None
        assert timer.is_power_up_active
        assert timer.window.expires_at == clock.now + POWER_UP_SECONDS

    def test_remote_claimant_only_clears(self, timer, scheduler):
        timer.on_spawn(spawn())
        assert timer.on_update(claimed_by("them"), "me") is False
        assert timer.spawn is None
        assert not timer.is_power_up_active
        assert scheduler.pending == []

    def test_no_local_identity_never_grants(self, timer):
        timer.on_spawn(spawn())
        assert timer.on_update(claimed_by("me"), None) is False
        assert not timer.is_power_up_active

    def test_update_without_claim_is_ignored(self, timer):
        timer.on_spawn(spawn())
        assert timer.on_update(UpdateEvent.model_validate({"p1Score": 3}), "me") is False
        assert timer.spawn is not None


class TestLocalClaim:
    """A local claim clears the spawn before the server answers."""

    def test_clears_spawn_synchronously(self, timer):
        timer.on_spawn(spawn())
        assert timer.claim_locally() is True
        assert timer.spawn is None
        assert not timer.is_power_up_active

    def test_without_spawn_is_noop(self, timer):
        assert timer.claim_locally() is False

    def test_later_server_clear_is_safe(self, timer):
        timer.on_spawn(spawn())
        timer.claim_locally()
        assert timer.on_update(claimed_by("them"), "me") is False
        assert timer.spawn is None

    def test_later_attribution_still_grants(self, timer):
        timer.on_spawn(spawn())
        timer.claim_locally()
        assert timer.on_update(claimed_by("me"), "me") is True
        assert timer.is_power_up_active


class TestWindowExpiry:
    """The window closes on its own timer at exactly expires_at."""

    def test_expires_after_five_seconds(self, timer, scheduler):
        timer.on_update(claimed_by("me"), "me")
        scheduler.advance(POWER_UP_SECONDS - 0.5)
        assert timer.is_power_up_active
        scheduler.advance(0.5)
        assert not timer.is_power_up_active

    def test_updates_do_not_move_expiry(self, timer, scheduler):
        timer.on_update(claimed_by("me"), "me")
        scheduler.advance(2)
        timer.on_update(UpdateEvent.model_validate({"p1Score": 5}), "me")
        timer.on_update(claimed_by("them"), "me")
        scheduler.advance(3)
        assert not timer.is_power_up_active

    def test_regrant_cancels_previous_timer(self, timer, scheduler, clock):
        timer.on_update(claimed_by("me"), "me")
        first_handle = scheduler.handles[0]
        scheduler.advance(4)
        timer.on_update(claimed_by("me"), "me")
        assert first_handle.cancelled
        assert len(scheduler.pending) == 1

        scheduler.advance(1.5)
        assert timer.is_power_up_active
        scheduler.advance(3.5)
        assert not timer.is_power_up_active

    def test_at_most_one_window(self, timer, scheduler):
        for _ in range(3):
            timer.on_update(claimed_by("me"), "me")
        assert len(scheduler.pending) == 1

    def test_reset_cancels_pending_expiry(self, timer, scheduler):
        timer.on_spawn(spawn())
        timer.on_update(claimed_by("me"), "me")
        timer.reset()
        assert scheduler.pending == []
        assert timer.window is None
        assert timer.spawn is None

    def test_remaining(self, timer, clock):
        timer.on_update(claimed_by("me"), "me")
        assert timer.window.remaining(clock.now + 1) == pytest.approx(POWER_UP_SECONDS - 1)
        assert timer.window.remaining(clock.now + 60) == 0.0


class TestDefaultScheduler:
    @pytest.mark.asyncio
    async def test_uses_running_loop(self):
        timer = PowerUpTimer()
        timer.on_update(claimed_by("me"), "me")
        assert timer.is_power_up_active
        timer.reset()
        await asyncio.sleep(0)
        assert not timer.is_power_up_active
