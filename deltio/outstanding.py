"""Tracking of pulled messages and their acknowledgement deadlines."""

from __future__ import annotations

import asyncio
from bisect import bisect_left, insort
from collections.abc import Iterable
from time import monotonic
from typing import Optional

from deltio.ack import AckId, DeadlineModification
from deltio.pulled import AckDeadline, PulledMessage

_Key = tuple[AckDeadline, AckId]


class OutstandingMessageTracker:
    """Keeps pulled messages by ack ID, ordered by when they expire."""

    def __init__(self) -> None:
        self._messages: dict[AckId, PulledMessage] = {}
        self._expirations: list[_Key] = []
        self._changed = asyncio.Event()

    def _notify_waiters(self) -> None:
        self._changed.set()
        self._changed.clear()

    def _first(self) -> Optional[_Key]:
        return self._expirations[0] if self._expirations else None

    def _discard_key(self, key: _Key) -> None:
        index = bisect_left(self._expirations, key)
        if index < len(self._expirations) and self._expirations[index] == key:
            del self._expirations[index]

    def add(self, message: PulledMessage) -> None:
        """Track a pulled message."""
        key = message.expiration_key()
        self._messages[message.ack_id] = message

        first = self._first()
        should_notify = first is not None and key < first
        insort(self._expirations, key)

        if should_notify:
            self._notify_waiters()

    def next_expiration(self) -> Optional[AckDeadline]:
        """Return the earliest deadline, or ``None`` if nothing is tracked."""
        first = self._first()
        return first[0] if first is not None else None

    def take_expired(self, time: float) -> list[PulledMessage]:
        """Remove and return every message whose deadline is at or before ``time``."""
        result = []
        while self._expirations and not time < self._expirations[0][0].time:
            _, ack_id = self._expirations.pop(0)
            result.append(self._messages.pop(ack_id))
        return result

    def remove(self, ack_ids: Iterable[AckId]) -> list[PulledMessage]:
        """Remove the messages with the given ack IDs and return them."""
        first = self._first()
        should_notify = False
        result = []
        for ack_id in ack_ids:
            message = self._messages.pop(ack_id, None)
            if message is None:
                continue
            key = message.expiration_key()
            if key == first:
                should_notify = True
            self._discard_key(key)
            result.append(message)

        if should_notify:
            self._notify_waiters()
        return result

    def modify(self, modifications: Iterable[DeadlineModification]) -> list[PulledMessage]:
        """Apply deadline changes; return the messages that were nacked."""
        first = self._first()
        should_notify = False
        result = []
        for modification in modifications:
            message = self._messages.get(modification.ack_id)
            if message is None:
                continue

            current_key = message.expiration_key()
            if current_key == first:
                should_notify = True
            self._discard_key(current_key)

            if modification.new_deadline is not None:
                message.modify_deadline(modification.new_deadline)
                new_key = message.expiration_key()
                if first is not None and first > new_key:
                    should_notify = True
                insort(self._expirations, new_key)
            else:
                result.append(self._messages.pop(modification.ack_id))

        if should_notify:
            self._notify_waiters()
        return result

    def clear(self) -> None:
        """Forget every tracked message."""
        self._expirations.clear()
        self._messages.clear()
        self._notify_waiters()

    def __len__(self) -> int:
        return len(self._messages)

    async def poll_next_expired(self) -> list[PulledMessage]:
        """Wait for and return the next non-empty batch of expired messages."""
        while True:
            taken = self.take_expired(monotonic())
            if taken:
                return taken

            next_expiration = self.next_expiration()
            if next_expiration is None:
                await self._changed.wait()
                continue

            delay = max(0.0, next_expiration.time - monotonic())
            try:
                await asyncio.wait_for(self._changed.wait(), delay)
            except asyncio.TimeoutError:
                pass