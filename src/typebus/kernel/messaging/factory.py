"""Kernel messaging – MessageFactory."""
from __future__ import annotations

from typing import Any, Callable, TypeVar

from typebus.kernel.messaging.ids import new_message_id
from typebus.kernel.messaging.message import Command, Event, Metadata, Query
from typebus.kernel.time import Clock, SystemClock

D = TypeVar("D")
P = TypeVar("P")


class MessageFactory:
    """Stamp new envelopes with a fresh id and the current time."""

    def __init__(
        self,
        clock: Clock | None = None,
        id_factory: Callable[[], str] = new_message_id,
    ) -> None:
        self._clock = clock or SystemClock()
        self._id_factory = id_factory

    def create_command(
        self,
        type: str,  # noqa: A002
        data: D,
        aggregate_id: str,
        metadata: Metadata | None = None,
    ) -> Command[D]:
        return Command(
            id=self._id_factory(),
            type=type,
            timestamp=self._clock.now(),
            metadata=metadata,
            data=data,
            aggregate_id=aggregate_id,
        )

    def create_query(
        self,
        type: str,  # noqa: A002
        params: P,
        metadata: Metadata | None = None,
    ) -> Query[P]:
        return Query(
            id=self._id_factory(),
            type=type,
            timestamp=self._clock.now(),
            metadata=metadata,
            params=params,
        )

    def create_event(
        self,
        type: str,  # noqa: A002
        data: D,
        aggregate_id: str,
        version: int,
        metadata: Metadata | None = None,
    ) -> Event[D]:
        return Event(
            id=self._id_factory(),
            type=type,
            timestamp=self._clock.now(),
            metadata=metadata,
            data=data,
            aggregate_id=aggregate_id,
            version=version,
        )


__all__ = ["MessageFactory"]
