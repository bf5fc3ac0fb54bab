import pytest

from deltio.errors import AlreadyExistsError, ClosedError, DoesNotExistError
from deltio.message import MessageId, TopicMessage
from deltio.names import SubscriptionName, TopicName
from deltio.topics import Topic, TopicInfo, TopicManager


class FakeSubscription:
    def __init__(self, name, fail=False):
        self.name = name
        self.fail = fail
        self.received = []

    async def post_messages(self, messages):
        if self.fail:
            raise ClosedError()
        self.received.extend(messages)


def _name(topic_id="deltio"):
    return TopicName("lets-go", topic_id)


def test_create_and_get_topic():
    manager = TopicManager()
    topic = manager.create_topic(_name())
    assert manager.get_topic(_name()) is topic
    assert topic.name == _name()


def test_first_topic_internal_id_and_increasing_ids():
    manager = TopicManager()
    first = manager.create_topic(_name("a"))
    second = manager.create_topic(_name("b"))
    assert first.internal_id == 2
    assert second.internal_id > first.internal_id
    assert first < second
    assert sorted([second, first]) == [first, second]


def test_create_duplicate_raises():
    manager = TopicManager()
    manager.create_topic(_name())
    with pytest.raises(AlreadyExistsError):
        manager.create_topic(_name())


def test_get_missing_topic_raises():
    manager = TopicManager()
    with pytest.raises(DoesNotExistError):
        manager.get_topic(_name("missing"))


def test_topics_equal_by_internal_id():
    a = Topic(TopicInfo(_name("a")), 7)
    b = Topic(TopicInfo(_name("b")), 7)
    assert a == b
    assert hash(a) == hash(b)


@pytest.mark.asyncio
async def test_publish_assigns_ids():
    manager = TopicManager()
    topic = manager.create_topic(_name())
    messages = [TopicMessage(b"one"), TopicMessage(b"two")]
    response = await topic.publish_messages(messages)
    assert response.message_ids == [
        MessageId.create(topic.internal_id, 1),
        MessageId.create(topic.internal_id, 2),
    ]
    assert [m.id for m in messages] == response.message_ids
    assert topic.messages == tuple(messages)

    again = await topic.publish_messages([TopicMessage(b"three")])
    assert again.message_ids == [MessageId.create(topic.internal_id, 3)]


@pytest.mark.asyncio
async def test_publish_sets_publish_time():
    topic = TopicManager().create_topic(_name())
    message = TopicMessage(b"x")
    await topic.publish_messages([message])
    assert message.published_at.year >= 2024


@pytest.mark.asyncio
async def test_publish_posts_to_attached_subscriptions():
    topic = TopicManager().create_topic(_name())
    first = FakeSubscription(SubscriptionName("lets-go", "one"))
    second = FakeSubscription(SubscriptionName("lets-go", "two"))
    await topic.attach_subscription(first)
    await topic.attach_subscription(second)

    message = TopicMessage(b"hello")
    await topic.publish_messages([message])
    assert first.received == [message]
    assert second.received == [message]


@pytest.mark.asyncio
async def test_attach_same_name_keeps_first():
    topic = TopicManager().create_topic(_name())
    name = SubscriptionName("lets-go", "one")
    original = FakeSubscription(name)
    duplicate = FakeSubscription(name)
    await topic.attach_subscription(original)
    await topic.attach_subscription(duplicate)

    await topic.publish_messages([TopicMessage(b"hi")])
    assert len(original.received) == 1
    assert duplicate.received == []


@pytest.mark.asyncio
async def test_removed_subscription_gets_nothing():
    topic = TopicManager().create_topic(_name())
    subscription = FakeSubscription(SubscriptionName("lets-go", "one"))
    await topic.attach_subscription(subscription)
    await topic.remove_subscription(subscription.name)

    await topic.publish_messages([TopicMessage(b"hi")])
    assert subscription.received == []


@pytest.mark.asyncio
async def test_failing_subscription_raises_closed():
    topic = TopicManager().create_topic(_name())
    await topic.attach_subscription(
        FakeSubscription(SubscriptionName("lets-go", "bad"), fail=True)
    )
    with pytest.raises(ClosedError):
        await topic.publish_messages([TopicMessage(b"hi")])


@pytest.mark.asyncio
async def test_delete_removes_from_manager():
    manager = TopicManager()
    topic = manager.create_topic(_name())
    subscription = FakeSubscription(SubscriptionName("lets-go", "one"))
    await topic.attach_subscription(subscription)
    await topic.publish_messages([TopicMessage(b"hi")])

    await topic.delete()
    with pytest.raises(DoesNotExistError):
        manager.get_topic(_name())
    assert topic.messages == ()

    await topic.publish_messages([TopicMessage(b"later")])
    assert len(subscription.received) == 1

    recreated = manager.create_topic(_name())
    assert recreated.internal_id > topic.internal_id
    assert recreated != topic


@pytest.mark.asyncio
async def test_delete_twice_is_noop():
    manager = TopicManager()
    topic = manager.create_topic(_name())
    await topic.delete()
    replacement = manager.create_topic(_name())
    await topic.delete()
    assert manager.get_topic(_name()) is replacement