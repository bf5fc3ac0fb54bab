"""Pulled messages and their acknowledgement deadlines."""

from __future__ import annotations

from dataclasses import dataclass
from time import monotonic

from deltio.ack import AckId
from deltio.message import TopicMessage

EPOCH: float = monotonic()
"""Monotonic baseline that deadlines are measured from."""

_PRECISION_MICROS = 100_000


@dataclass(frozen=True, order=True)
class AckDeadline:
    """The monotonic time by which a message must be acked.

    Deadlines are snapped to the nearest 100ms step so that many expirations
    share the same instant.
    """

    time: float

    def __post_init__(self) -> None:
        micros = max(0, round((self.time - EPOCH) * 1_000_000))
        rounded = micros + micros % _PRECISION_MICROS
        object.__setattr__(self, "time", EPOCH + rounded / 1_000_000)

    def __float__(self) -> float:
        return self.time


@dataclass
class PulledMessage:
    """A message that has been pulled and awaits acknowledgement."""

    message: TopicMessage
    ack_id: AckId
    deadline: AckDeadline
    delivery_attempt: int

    def expiration_key(self) -> tuple[AckDeadline, AckId]:
        """Return the key used to order this message by expiration."""
        return (self.deadline, self.ack_id)

    def modify_deadline(self, new_deadline: AckDeadline) -> None:
        """Replace the deadline of this message."""
        self.deadline = new_deadline