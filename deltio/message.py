"""Messages published to topics and their identifiers."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

_U32_MAX = 2**32 - 1
UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@dataclass(frozen=True)
class MessageId:
    """A message ID, unique across topics."""

    value: int = 0

    @classmethod
    def create(cls, topic_internal_id: int, topic_local_message_id: int) -> MessageId:
        """Combine a topic's internal ID and a topic-local message ID."""
        for part in (topic_internal_id, topic_local_message_id):
            if not 0 <= part <= _U32_MAX:
                raise ValueError(f"ID component out of 32-bit range: {part}")
        return cls((topic_internal_id << 32) | topic_local_message_id)

    def __str__(self) -> str:
        return str(self.value)


@dataclass(eq=False)
class TopicMessage:
    """A message published to a topic."""

    data: bytes
    attributes: Optional[dict[str, str]] = None
    id: MessageId = field(default_factory=MessageId)
    published_at: datetime = UNIX_EPOCH

    def publish(self, message_id: MessageId, published_at: datetime) -> None:
        """Record the ID and time assigned when the message was published."""
        self.id = message_id
        self.published_at = published_at