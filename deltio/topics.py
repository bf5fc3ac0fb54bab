"""Topics, the messages published to them and the manager that owns them."""

from __future__ import annotations

import asyncio
import threading
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from datetime import datetime, timezone
from functools import total_ordering
from typing import Any, Protocol

from deltio.errors import AlreadyExistsError, ClosedError, DoesNotExistError
from deltio.message import MessageId, TopicMessage
from deltio.names import SubscriptionName, TopicName


class _Subscriber(Protocol):
    """What a topic needs from an attached subscription."""

    name: SubscriptionName

    async def post_messages(self, messages: list[TopicMessage]) -> Any: ...


@dataclass(frozen=True)
class TopicInfo:
    """Information about a topic."""

    name: TopicName


@dataclass(frozen=True)
class PublishMessagesResponse:
    """The IDs assigned to published messages, in publish order."""

    message_ids: list[MessageId] = field(default_factory=list)


@total_ordering
class Topic:
    """A topic that fans published messages out to its subscriptions.

    Topics compare equal and order by their internal ID.
    """

    def __init__(
        self,
        info: TopicInfo,
        internal_id: int,
        on_delete: Callable[[TopicName], None] | None = None,
    ) -> None:
        self.info = info
        self.name = info.name
        self.internal_id = internal_id
        self._on_delete = on_delete
        self._messages: list[TopicMessage] = []
        self._subscriptions: dict[SubscriptionName, _Subscriber] = {}
        self._next_message_id = 0
        self._deleted = False
        self._lock = asyncio.Lock()

    def __repr__(self) -> str:
        return f"Topic(name={str(self.name)!r}, internal_id={self.internal_id})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Topic):
            return NotImplemented
        return self.internal_id == other.internal_id

    def __lt__(self, other: Topic) -> bool:
        if not isinstance(other, Topic):
            return NotImplemented
        return self.internal_id < other.internal_id

    def __hash__(self) -> int:
        return hash(self.internal_id)

    @property
    def messages(self) -> tuple[TopicMessage, ...]:
        """The messages published to the topic so far."""
        return tuple(self._messages)

    async def publish_messages(
        self, messages: Iterable[TopicMessage]
    ) -> PublishMessagesResponse:
        """Publish messages and post them to every attached subscription.

        Raises ``ClosedError`` if any subscription fails to accept them.
        """
        async with self._lock:
            publish_time = datetime.now(timezone.utc)
            published: list[TopicMessage] = []
            message_ids: list[MessageId] = []
            for message in messages:
                self._next_message_id += 1
                message_id = MessageId.create(self.internal_id, self._next_message_id)
                message.publish(message_id, publish_time)
                message_ids.append(message_id)
                published.append(message)

            self._messages.extend(published)

            results = await asyncio.gather(
                *(
                    subscription.post_messages(list(published))
                    for subscription in list(self._subscriptions.values())
                ),
                return_exceptions=True,
            )
            for result in results:
                if isinstance(result, BaseException):
                    raise ClosedError("The topic is closed") from result

            return PublishMessagesResponse(message_ids)

    async def attach_subscription(self, subscription: _Subscriber) -> None:
        """Attach a subscription; an already attached name is left as it is."""
        async with self._lock:
            self._subscriptions.setdefault(subscription.name, subscription)

    async def remove_subscription(self, name: SubscriptionName) -> None:
        """Detach the subscription with the given name, if attached."""
        async with self._lock:
            self._subscriptions.pop(name, None)

    async def delete(self) -> None:
        """Delete the topic, dropping its subscriptions and messages."""
        async with self._lock:
            if self._deleted:
                return
            self._deleted = True
            self._subscriptions.clear()
            self._messages.clear()
            if self._on_delete is not None:
                self._on_delete(self.name)


class TopicManager:
    """Creates topics and looks them up by name."""

    def __init__(self) -> None:
        self._topics: dict[TopicName, Topic] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def create_topic(self, name: TopicName) -> Topic:
        """Create a topic; raises ``AlreadyExistsError`` if the name is taken."""
        with self._lock:
            if name in self._topics:
                raise AlreadyExistsError("The topic already exists")
            self._next_id += 1
            topic = Topic(TopicInfo(name), self._next_id, self._remove)
            self._topics[name] = topic
            return topic

    def get_topic(self, name: TopicName) -> Topic:
        """Return the topic; raises ``DoesNotExistError`` if there is none."""
        with self._lock:
            try:
                return self._topics[name]
            except KeyError:
                raise DoesNotExistError("The topic does not exists") from None

    def _remove(self, name: TopicName) -> None:
        with self._lock:
            self._topics.pop(name, None)