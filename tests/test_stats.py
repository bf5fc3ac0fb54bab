from deltio.names import SubscriptionName, TopicName
from deltio.stats import SubscriptionStats


def _stats(outstanding, backlog):
    return SubscriptionStats(
        SubscriptionName("lets-go", "deltio"),
        TopicName("lets-go", "deltio"),
        outstanding,
        backlog,
    )


def test_fields_are_kept():
    stats = _stats(3, 8)
    assert stats.subscription_name == SubscriptionName("lets-go", "deltio")
    assert stats.topic_name == TopicName("lets-go", "deltio")
    assert stats.outstanding_messages_count == 3
    assert stats.backlog_messages_count == 8


def test_total_is_at_least_each_part():
    stats = _stats(3, 8)
    total = stats.total_messages_count()
    assert total >= stats.outstanding_messages_count
    assert total >= stats.backlog_messages_count
    assert total - stats.backlog_messages_count == stats.outstanding_messages_count


def test_empty_total_is_zero():
    assert _stats(0, 0).total_messages_count() == 0


def test_deleted_topic_name():
    stats = SubscriptionStats(SubscriptionName("p", "s"), TopicName.deleted(), 0, 1)
    assert stats.topic_name == TopicName.deleted()
    assert stats.total_messages_count() == stats.backlog_messages_count