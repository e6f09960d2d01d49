# Area: Session
"""
overcookied_client._session.connection — Game socket lifecycle
==============================================================

Opens exactly one WebSocket per ``connect()``, authenticates it with the
bearer token in the query string, and sends JOIN_QUEUE as soon as it is
open. Inbound frames are yielded in arrival order; outbound frames go
through a queue drained by a writer task so callers never block on the
socket.

There is no automatic reconnect. A dropped socket only moves the state
to DISCONNECTED; the caller decides what to do next.
"""

from __future__ import annotations
import asyncio
import functools
import logging
from typing import Any, AsyncIterator, Awaitable, Callable, Dict, Optional

import websockets
from websockets.exceptions import ConnectionClosed, WebSocketException

from .._shared.observable import Observable
from .._shared.protocol import JOIN_QUEUE, Origin, build_frame, derive_ws_url, encode_frame, with_token
from .._shared.protocol_logger import get_protocol_logger
from .credential import Credential
from .enums import ConnectionState

logger = logging.getLogger("overcookied_client.connection")

DEFAULT_OPEN_TIMEOUT_SECONDS = 10.0

Connector = Callable[[str], Awaitable[Any]]


def default_connector(open_timeout: float = DEFAULT_OPEN_TIMEOUT_SECONDS) -> Connector:
    """``websockets.connect`` with our defaults, as a one-argument callable."""
    return functools.partial(websockets.connect, open_timeout=open_timeout)


class ConnectionManager(Observable):
    """
    Owns the game socket.

    Args:
        api_url: Explicit backend URL override. Empty means absent.
        origin: Page origin used when there is no override.
        connector: Coroutine function ``url -> socket``. Defaults to
            ``websockets.connect``.
    """

    def __init__(self, api_url: Optional[str] = None, origin: Optional[Origin] = None,
                 connector: Optional[Connector] = None):
        super().__init__()
        self.api_url = api_url
        self.origin = origin
        self._connector = connector or default_connector()
        self.state = ConnectionState.DISCONNECTED
        self._socket: Any = None
        self._outbox: Optional[asyncio.Queue] = None
        self._writer: Optional[asyncio.Task] = None

    @property
    def is_connected(self) -> bool:
        return self.state == ConnectionState.CONNECTED

    def endpoint_url(self) -> str:
        """Socket URL without credentials."""
        return derive_ws_url(self.api_url, self.origin)

    # ── Open / close ─────────────────────────────────────────

    async def connect(self, credential: Credential) -> Optional[Any]:
        """
        Open the socket for ``credential`` and queue JOIN_QUEUE.

        Any socket already open is closed first.

        Returns:
            The open socket, or None if it could not be opened.
        """
        if self.state == ConnectionState.CONNECTING:
            logger.warning("connect() ignored: a connection attempt is in progress")
            return None
        if self._socket is not None:
            await self.disconnect()

        endpoint = self.endpoint_url()
        self._set_state(ConnectionState.CONNECTING)
        logger.info(f"Connecting to {endpoint} as {credential.user_id or 'anonymous'}")
        try:
            socket = await self._connector(with_token(endpoint, credential.token))
        except (OSError, asyncio.TimeoutError, WebSocketException) as e:
            logger.error(f"Could not connect to {endpoint}: {e}")
            self._set_state(ConnectionState.DISCONNECTED)
            return None
        except asyncio.CancelledError:
            self._set_state(ConnectionState.DISCONNECTED)
            raise

        self._socket = socket
        self._outbox = asyncio.Queue()
        self._writer = asyncio.create_task(self._drain(socket, self._outbox))
        self._set_state(ConnectionState.CONNECTED)
        logger.info("Connected to game server")

        if self.send(build_frame(JOIN_QUEUE)):
            get_protocol_logger().log_sent(JOIN_QUEUE)
        return socket

    async def disconnect(self) -> None:
        """Close the socket. Safe to call when already closed."""
        socket = self._detach()
        if socket is None:
            return
        try:
            await socket.close()
        except (OSError, WebSocketException) as e:
            logger.debug(f"Error while closing socket: {e}")
        logger.info("Disconnected from game server")

    # ── Traffic ──────────────────────────────────────────────

    def send(self, frame: Dict[str, Any]) -> bool:
        """
        Queue ``frame`` for sending. Never blocks.

        Returns:
            False if the socket is not connected; the frame is dropped.
        """
        if not self.is_connected or self._outbox is None:
            logger.debug(f"Dropped {frame.get('type')}: not connected")
            return False
        self._outbox.put_nowait(encode_frame(frame))
        return True

    async def flush(self) -> None:
        """Wait until every queued frame has been handed to the socket."""
        outbox, writer = self._outbox, self._writer
        if outbox is None or writer is None or writer.done():
            return
        await outbox.join()

    async def frames(self) -> AsyncIterator[str]:
        """Yield inbound frames in arrival order until the socket closes.

        Stops as soon as this socket is no longer the current one, so a
        stale reader never delivers frames into a newer session.
        """
        socket = self._socket
        if socket is None:
            return
        try:
            async for message in socket:
                if self._socket is not socket:
                    break
                yield message
        except ConnectionClosed as e:
            logger.warning(f"Connection lost: {e}")
        finally:
            if self._socket is socket:
                self._detach()
                logger.info("Disconnected from game server")

    # ── Internals ────────────────────────────────────────────

    async def _drain(self, socket: Any, outbox: asyncio.Queue) -> None:
        while True:
            text = await outbox.get()
            try:
                await socket.send(text)
            except ConnectionClosed as e:
                logger.warning(f"Send failed, connection closed: {e}")
                outbox.task_done()
                # Unblock flush(): nothing more will be sent on this socket
                while not outbox.empty():
                    outbox.get_nowait()
                    outbox.task_done()
                return
            outbox.task_done()

    def _detach(self) -> Any:
        """Forget the socket and stop the writer; returns the old socket."""
        socket, self._socket = self._socket, None
        if self._writer is not None:
            self._writer.cancel()
        self._writer = None
        self._outbox = None
        self._set_state(ConnectionState.DISCONNECTED)
        return socket

    def _set_state(self, state: ConnectionState) -> None:
        if self.state == state:
            return
        self.state = state
        self._notify()
