"""Health statistics of a subscription."""

from __future__ import annotations

from dataclasses import dataclass

from deltio.names import SubscriptionName, TopicName


@dataclass(frozen=True)
class SubscriptionStats:
    """Counts that give insight into a subscription's health."""

    subscription_name: SubscriptionName
    topic_name: TopicName
    outstanding_messages_count: int
    backlog_messages_count: int

    def total_messages_count(self) -> int:
        """Return the number of outstanding and backlogged messages together."""
        return self.outstanding_messages_count + self.backlog_messages_count