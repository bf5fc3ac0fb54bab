"""Exceptions raised by topics, subscriptions and their managers."""

from __future__ import annotations

from typing import Optional


class PubSubError(Exception):
    """Base class for all emulator errors."""

    default_message = "The operation failed"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message if message is not None else self.default_message)

    @property
    def message(self) -> str:
        """The human-readable error message."""
        return str(self.args[0])


class ClosedError(PubSubError):
    """The topic, subscription or manager is closed."""

    default_message = "The resource is closed"


class AlreadyExistsError(PubSubError):
    """The topic or subscription already exists."""

    default_message = "The resource already exists"


class DoesNotExistError(PubSubError):
    """The topic or subscription does not exist."""

    default_message = "The resource does not exist"


class MustBeInSameProjectAsTopicError(PubSubError):
    """A subscription was created in another project than its topic."""

    default_message = "The topic and the subscription must be in the same project"


class DeadLetterTopicDoesNotExistError(PubSubError):
    """The dead letter topic of a subscription does not exist."""

    default_message = "The dead letter topic does not exist"