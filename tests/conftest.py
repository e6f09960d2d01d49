# Area: Test Helpers
"""Shared fakes: a manual clock, a manual scheduler and an in-memory socket."""

import json
from typing import Any, Callable, List, Optional
from unittest.mock import AsyncMock

import pytest

from overcookied_client import Credential, GameClient


class FakeClock:
    """Epoch-seconds clock advanced by hand."""

    def __init__(self, now: float = 1_700_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


class FakeTimerHandle:
    def __init__(self, when: float, callback: Callable[..., Any], args: tuple):
        self.when = when
        self.callback = callback
        self.args = args
        self.cancelled = False
        self.fired = False

    def cancel(self) -> None:
        self.cancelled = True


class FakeScheduler:
    """``call_later`` driven by a FakeClock; timers fire on ``advance()``."""

    def __init__(self, clock: FakeClock):
        self.clock = clock
        self.handles: List[FakeTimerHandle] = []

    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> FakeTimerHandle:
        handle = FakeTimerHandle(self.clock.now + delay, callback, args)
        self.handles.append(handle)
        return handle

    @property
    def pending(self) -> List[FakeTimerHandle]:
        return [h for h in self.handles if not h.cancelled and not h.fired]

    def advance(self, seconds: float) -> None:
        self.clock.now += seconds
        for handle in sorted(self.pending, key=lambda h: h.when):
            if handle.when <= self.clock.now and not handle.cancelled:
                handle.fired = True
                handle.callback(*handle.args)


class FakeWebSocket:
    """Yields the given frames, then ends (or raises ``close_exc``)."""

    def __init__(self, frames=(), close_exc: Optional[BaseException] = None):
        self.incoming = list(frames)
        self.close_exc = close_exc
        self.sent: List[str] = []
        self.closed = False

    async def send(self, text: str) -> None:
        self.sent.append(text)

    async def close(self) -> None:
        self.closed = True

    def __aiter__(self):
        return self._iterate()

    async def _iterate(self):
        for frame in self.incoming:
            yield frame
        if self.close_exc is not None:
            raise self.close_exc

    def sent_frames(self) -> List[dict]:
        return [json.loads(text) for text in self.sent]

    def sent_types(self) -> List[str]:
        return [frame["type"] for frame in self.sent_frames()]


def frame(message_type: str, **payload: Any) -> str:
    """Serialize an inbound frame as the server would."""
    return json.dumps({"type": message_type, "payload": payload})


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def scheduler(clock):
    return FakeScheduler(clock)


@pytest.fixture
def credential():
    return Credential(user_id="me", token="tok-123", name="Me")


@pytest.fixture
def make_client(clock, scheduler):
    """Factory: ``make_client(frames=...) -> (client, socket, connector)``."""

    def factory(frames=(), close_exc=None, api_url="http://localhost:8080"):
        socket = FakeWebSocket(frames, close_exc)
        connector = AsyncMock(return_value=socket)
        client = GameClient(
            api_url=api_url,
            connector=connector,
            scheduler=scheduler,
            clock=clock,
        )
        return client, socket, connector

    return factory
