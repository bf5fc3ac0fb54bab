"""Fully qualified topic and subscription names."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

_PROJECT_PREFIX = "projects/"
_SUBSCRIPTION_PREFIX = "/subscriptions/"
_TOPIC_PREFIX = "/topics/"


def _parse(unparsed: str, resource_prefix: str) -> Optional[tuple[str, str]]:
    if len(unparsed) <= len(_PROJECT_PREFIX) + len(resource_prefix) + 2:
        return None
    if not unparsed.startswith(_PROJECT_PREFIX):
        return None

    rest = unparsed[len(_PROJECT_PREFIX):]
    slash = rest.find("/")
    if slash < 0:
        return None
    project_id = rest[:slash]

    start = len(_PROJECT_PREFIX) + len(project_id) + len(resource_prefix)
    if start > len(unparsed):
        return None
    resource_id = unparsed[start:].strip("/")
    return project_id, resource_id


@dataclass(frozen=True)
class SubscriptionName:
    """A subscription name made of the project and the subscription ID."""

    project_id: str
    subscription_id: str

    @classmethod
    def try_parse(cls, unparsed: str) -> Optional[SubscriptionName]:
        """Parse ``projects/<project>/subscriptions/<id>``, or return ``None``."""
        parsed = _parse(unparsed, _SUBSCRIPTION_PREFIX)
        return cls(*parsed) if parsed is not None else None

    def is_in_project(self, project_id: str) -> bool:
        """Return whether the subscription belongs to the given project."""
        return self.project_id == project_id

    def __str__(self) -> str:
        return f"{_PROJECT_PREFIX}{self.project_id}{_SUBSCRIPTION_PREFIX}{self.subscription_id}"


@dataclass(frozen=True)
class TopicName:
    """A topic name made of the project and the topic ID."""

    project_id: str
    topic_id: str

    @classmethod
    def deleted(cls) -> TopicName:
        """Return the name used for a topic that has been deleted."""
        return cls("", "_deleted_topic_")

    @classmethod
    def try_parse(cls, unparsed: str) -> Optional[TopicName]:
        """Parse ``projects/<project>/topics/<id>``, or return ``None``."""
        parsed = _parse(unparsed, _TOPIC_PREFIX)
        return cls(*parsed) if parsed is not None else None

    def is_in_project(self, project_id: str) -> bool:
        """Return whether the topic belongs to the given project."""
        return self.project_id == project_id

    def __str__(self) -> str:
        return f"{_PROJECT_PREFIX}{self.project_id}{_TOPIC_PREFIX}{self.topic_id}"