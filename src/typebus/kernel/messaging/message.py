"""Kernel messaging – immutable Command / Query / Event envelopes.

Every envelope carries an opaque ``id``, the routing ``type`` tag, a UTC
creation ``timestamp`` and optional ``metadata``.  The payload is opaque to
the bus; callers parametrise the envelope with their own payload type::

    cmd: Command[CreateUser] = factory.create_command(
        "User.CreateUser", CreateUser(name="ada"), aggregate_id="user-1"
    )
"""
from __future__ import annotations

import dataclasses
import enum
from collections.abc import Mapping
from datetime import datetime
from types import MappingProxyType
from typing import Any, ClassVar, Generic, TypeVar

D = TypeVar("D")
P = TypeVar("P")

type MessageId = str
type MessageType = str
type AggregateId = str
type Metadata = Mapping[str, Any]


class MessageKind(enum.StrEnum):
    COMMAND = "command"
    QUERY = "query"
    EVENT = "event"


@dataclasses.dataclass(frozen=True, kw_only=True)
class Message:
    """Base envelope shared by all message kinds."""

    kind: ClassVar[MessageKind]

    id: MessageId
    type: MessageType
    timestamp: datetime
    metadata: Metadata | None = None

    def __post_init__(self) -> None:
        if self.metadata is not None and not isinstance(self.metadata, MappingProxyType):
            object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))


@dataclasses.dataclass(frozen=True, kw_only=True)
class Command(Message, Generic[D]):
    """Write intent directed at exactly one handler."""

    kind: ClassVar[MessageKind] = MessageKind.COMMAND

    data: D
    aggregate_id: AggregateId


@dataclasses.dataclass(frozen=True, kw_only=True)
class Query(Message, Generic[P]):
    """Read intent directed at exactly one handler."""

    kind: ClassVar[MessageKind] = MessageKind.QUERY

    params: P


@dataclasses.dataclass(frozen=True, kw_only=True)
class Event(Message, Generic[D]):
    """A fact broadcast to zero or more subscribers.

    ``version`` is caller-supplied; ordering and gap-freedom are not checked.
    """

    kind: ClassVar[MessageKind] = MessageKind.EVENT

    data: D
    aggregate_id: AggregateId
    version: int


__all__ = [
    "AggregateId",
    "Command",
    "Event",
    "Message",
    "MessageId",
    "MessageKind",
    "MessageType",
    "Metadata",
    "Query",
]
