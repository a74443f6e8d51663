"""Kernel messaging – envelopes, identifiers and the message factory."""
from typebus.kernel.messaging.factory import MessageFactory
from typebus.kernel.messaging.ids import MESSAGE_ID_PREFIX, new_message_id
from typebus.kernel.messaging.message import (
    AggregateId,
    Command,
    Event,
    Message,
    MessageId,
    MessageKind,
    MessageType,
    Metadata,
    Query,
)

__all__ = [
    "MESSAGE_ID_PREFIX",
    "AggregateId",
    "Command",
    "Event",
    "Message",
    "MessageFactory",
    "MessageId",
    "MessageKind",
    "MessageType",
    "Metadata",
    "Query",
    "new_message_id",
]
