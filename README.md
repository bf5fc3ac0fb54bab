# deltio

Building blocks for an in-process, Pub/Sub style message broker, meant for
local testing and CI. Everything runs on `asyncio` and uses only the standard
library.

## Installation

```
pip install deltio
```

To run the test suite:

```
pip install "deltio[test]"
pytest
```

## What is inside

- `deltio.names`: `TopicName` and `SubscriptionName` parse and render resource
  names such as `projects/my-project/topics/orders`. `try_parse` returns `None`
  for names it cannot parse, and `is_in_project` checks the project.
  `TopicName.deleted()` is the name reported for a topic that no longer exists.
- `deltio.message`: `TopicMessage` (data, optional attributes) and `MessageId`.
  A message is given its id and publish time when it is published to a topic;
  `MessageId.create(topic_id, local_id)` packs both 32-bit parts into one value.
- `deltio.ack`: `AckId` (`parse`, `next`) and `DeadlineModification`, which
  either sets a new deadline or, through `DeadlineModification.nack`, nacks a
  message at once. A malformed ack ID raises `AckIdParseError`.
- `deltio.pulled`: `PulledMessage` and `AckDeadline`. Deadlines are monotonic
  times, adjusted onto steps of a tenth of a second so that expirations group
  together.
- `deltio.outstanding`: `OutstandingMessageTracker` holds pulled messages until
  they are removed (acknowledged), has their deadlines modified or nacked, and
  hands back expired ones through `take_expired` or the awaitable
  `poll_next_expired`.
- `deltio.retry_queue`: `RetryQueue` holds messages until their delivery time
  has passed; `take_ready` and the awaitable `poll_next_ready` return them in
  time order.
- `deltio.flow_control`: `FlowControl(max_outstanding_bytes,
  max_outstanding_messages)` tracks outstanding counts with `inc` and `dec`;
  `wait_for_available_space` waits until both are below their limits.
- `deltio.topics`: `TopicManager` creates and looks up `Topic` objects. A topic
  publishes messages, assigns their ids, and posts them to the subscriptions
  attached to it; it can also detach subscriptions and be deleted, which
  removes it from its manager.
- `deltio.stats`: `SubscriptionStats` holds outstanding and backlog counts for
  a subscription.
- `deltio.errors`: exceptions that all derive from `PubSubError`:
  `ClosedError`, `AlreadyExistsError`, `DoesNotExistError`,
  `MustBeInSameProjectAsTopicError` and `DeadLetterTopicDoesNotExistError`.
- `deltio.tracing`: `ActivitySpan` times an operation when debug logging is
  enabled for the `deltio` logger; its string form is the elapsed time in
  parentheses, or empty when not timed.

## Example

```python
import asyncio

from deltio.message import TopicMessage
from deltio.names import TopicName
from deltio.topics import TopicManager


async def main():
    manager = TopicManager()
    topic = manager.create_topic(TopicName.try_parse("projects/demo/topics/orders"))
    response = await topic.publish_messages([TopicMessage(b"hello")])
    print([str(message_id) for message_id in response.message_ids])


asyncio.run(main())
```

Names that cannot be parsed give `None`:

```python
from deltio.names import SubscriptionName

assert SubscriptionName.try_parse("nope") is None
name = SubscriptionName.try_parse("projects/demo/subscriptions/workers")
assert str(name) == "projects/demo/subscriptions/workers"
```

Looking up a missing topic raises `deltio.errors.DoesNotExistError`. Creating
one that already exists raises `deltio.errors.AlreadyExistsError`.

## What it does not do

There is no network server, no command-line program and no storage: everything
lives in memory in the running process. There is no subscription object or
subscription manager. A topic posts to any attached object that has a `name`
and an async `post_messages(messages)` method; pulling, acknowledging,
redelivery, dead-lettering and push delivery have to be built from the pieces
above by the caller.