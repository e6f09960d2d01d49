# Area: Game Tests
"""Tests for OpponentPulseTracker."""

from overcookied_client._game.events import OpponentClickEvent
from overcookied_client._game.opponent_pulse import OpponentPulse, OpponentPulseTracker


class TestOpponentPulse:
    def test_records_latest_click(self, clock):
        tracker = OpponentPulseTracker(clock=clock)
        tracker.on_click(OpponentClickEvent(count=1))
        clock.now += 0.2
        tracker.on_click(OpponentClickEvent(count=2))
        assert tracker.pulse == OpponentPulse(count=2, timestamp=clock.now)

    def test_each_click_notifies(self, clock):
        tracker = OpponentPulseTracker(clock=clock)
        seen = []
        tracker.subscribe(lambda t: seen.append(t.pulse.count))
        tracker.on_click(OpponentClickEvent(count=1))
        tracker.on_click(OpponentClickEvent(count=1))
        assert seen == [1, 1]

    def test_reset(self, clock):
        tracker = OpponentPulseTracker(clock=clock)
        tracker.on_click(OpponentClickEvent(count=1))
        tracker.reset()
        assert tracker.pulse is None
