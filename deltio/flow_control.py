"""Best-effort flow control for streaming pull subscribers."""

from __future__ import annotations

import asyncio


class FlowControl:
    """Applies backpressure once either outstanding limit has been reached.

    The limits are soft: concurrent increments may push the counts past them.
    """

    def __init__(self, max_outstanding_bytes: int, max_outstanding_messages: int) -> None:
        self.max_outstanding_bytes = max_outstanding_bytes
        self.max_outstanding_messages = max_outstanding_messages
        self.outstanding_bytes = 0
        self.outstanding_messages = 0
        self._changed = asyncio.Event()

    def _notify_waiters(self) -> None:
        # Wakes every task currently waiting, without leaving the event set.
        self._changed.set()
        self._changed.clear()

    async def wait_for_available_space(self) -> None:
        """Return once there is room for more outstanding messages."""
        while not self.has_available_space():
            await self._changed.wait()

    def inc(self, outstanding_bytes_delta: int, outstanding_messages_delta: int) -> None:
        """Increase the outstanding counts."""
        self.outstanding_bytes += outstanding_bytes_delta
        self.outstanding_messages += outstanding_messages_delta
        self._notify_waiters()

    def dec(self, outstanding_bytes_delta: int, outstanding_messages_delta: int) -> None:
        """Decrease the outstanding counts."""
        self.outstanding_bytes -= outstanding_bytes_delta
        self.outstanding_messages -= outstanding_messages_delta
        self._notify_waiters()

    def has_available_space(self) -> bool:
        """Return whether both counts are below their limits."""
        if self.outstanding_messages >= self.max_outstanding_messages:
            return False
        return self.outstanding_bytes < self.max_outstanding_bytes