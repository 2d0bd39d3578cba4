"""
Server-sent event stream for the ``/sse`` endpoint.

A connection announces itself with a ``connection.established``
notification, then emits a ``: keepalive`` comment every
``keepalive_interval`` seconds until it is aborted.
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, AsyncIterator, Optional

logger = logging.getLogger(__name__)

KEEPALIVE_INTERVAL = 30.0
KEEPALIVE_FRAME = ": keepalive\n\n"


def sse_message(data: Any) -> str:
    """Encode ``data`` as a single SSE ``data:`` frame."""
    return f"data: {json.dumps(data)}\n\n"


class SSEConnection:
    """One client's event stream; owns its keep-alive task."""

    def __init__(self, keepalive_interval: float = KEEPALIVE_INTERVAL):
        self.keepalive_interval = keepalive_interval
        self.closed = False
        self._queue: asyncio.Queue[Optional[str]] = asyncio.Queue()
        self._keepalive: Optional[asyncio.Task] = None

    @property
    def pending(self) -> int:
        """Frames queued but not yet consumed (close marker excluded)."""
        return self._queue.qsize() - (1 if self.closed else 0)

    @property
    def keepalive_running(self) -> bool:
        return self._keepalive is not None and not self._keepalive.done()

    def open(self) -> None:
        self.send(sse_message({
            "jsonrpc": "2.0",
            "method": "connection.established",
        }))
        self._keepalive = asyncio.create_task(self._ping())
        logger.info("SSE connection established")

    def send(self, frame: str) -> bool:
        """Queue a frame. Returns False (and drops it) once the stream is closed."""
        if self.closed:
            return False
        self._queue.put_nowait(frame)
        return True

    def abort(self) -> None:
        """Stop the keep-alive timer and close the stream. Safe to call twice."""
        if self._keepalive is not None:
            self._keepalive.cancel()
        if not self.closed:
            self.closed = True
            self._queue.put_nowait(None)
            logger.info("SSE connection closed")

    async def _ping(self) -> None:
        while True:
            await asyncio.sleep(self.keepalive_interval)
            if not self.send(KEEPALIVE_FRAME):
                return

    async def frames(self) -> AsyncIterator[str]:
        """Open the connection and yield frames until it is aborted."""
        self.open()
        try:
            while True:
                frame = await self._queue.get()
                if frame is None:
                    return
                yield frame
        finally:
            self.abort()
