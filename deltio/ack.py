"""Acknowledgement IDs and deadline modifications for pulled messages."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from deltio.pulled import AckDeadline

_U64_MAX = 2**64 - 1
_UNSIGNED = re.compile(r"\+?[0-9]+")


class AckIdParseError(ValueError):
    """Raised when an ACK ID cannot be parsed."""

    def __init__(self, message: str = "The ACK ID was malformed") -> None:
        super().__init__(message)


@dataclass(frozen=True, order=True)
class AckId:
    """Acknowledgement ID used for acknowledging and negative-acknowledging messages."""

    value: int

    def next(self) -> AckId:
        """Return the ack ID that follows this one."""
        return AckId(self.value + 1)

    @classmethod
    def parse(cls, raw_value: str) -> AckId:
        """Parse an unsigned 64-bit integer string into an ``AckId``."""
        if not _UNSIGNED.fullmatch(raw_value):
            raise AckIdParseError()
        value = int(raw_value)
        if value > _U64_MAX:
            raise AckIdParseError()
        return cls(value)

    def __str__(self) -> str:
        return str(self.value)


@dataclass
class DeadlineModification:
    """A requested change to the deadline of an outstanding message.

    A ``new_deadline`` of ``None`` means the message is nacked right away.
    """

    ack_id: AckId
    new_deadline: Optional["AckDeadline"]

    @classmethod
    def nack(cls, ack_id: AckId) -> DeadlineModification:
        """Create a modification that nacks the message immediately."""
        return cls(ack_id, None)