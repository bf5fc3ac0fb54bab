"""A queue of messages waiting for their retry backoff to elapse."""

from __future__ import annotations

import asyncio
from bisect import insort
from itertools import count
from time import monotonic

from deltio.message import TopicMessage
from deltio.pulled import AckDeadline


class RetryQueue:
    """Holds messages until their scheduled delivery time, in time order."""

    def __init__(self) -> None:
        self._schedule: list[tuple[AckDeadline, int]] = []
        self._messages: dict[int, TopicMessage] = {}
        self._sequence = count()
        self._changed = asyncio.Event()

    def _notify_waiters(self) -> None:
        self._changed.set()
        self._changed.clear()

    def add(self, message: TopicMessage, deliver_at: AckDeadline) -> None:
        """Schedule ``message`` for delivery at ``deliver_at``."""
        key = (deliver_at, next(self._sequence))
        should_notify = not self._schedule or key < self._schedule[0]

        insort(self._schedule, key)
        self._messages[key[1]] = message

        if should_notify:
            self._notify_waiters()

    def take_ready(self, now: float) -> list[TopicMessage]:
        """Remove and return every message due at or before ``now``."""
        result = []
        while self._schedule and not now < self._schedule[0][0].time:
            _, seq = self._schedule.pop(0)
            message = self._messages.pop(seq, None)
            if message is not None:
                result.append(message)
        return result

    async def poll_next_ready(self) -> list[TopicMessage]:
        """Wait for and return the next non-empty batch of due messages."""
        while True:
            ready = self.take_ready(monotonic())
            if ready:
                return ready

            if not self._schedule:
                await self._changed.wait()
                continue

            delay = max(0.0, self._schedule[0][0].time - monotonic())
            try:
                await asyncio.wait_for(self._changed.wait(), delay)
            except asyncio.TimeoutError:
                pass

    def __len__(self) -> int:
        return len(self._messages)

    def clear(self) -> None:
        """Drop every scheduled message."""
        self._schedule.clear()
        self._messages.clear()
        self._notify_waiters()